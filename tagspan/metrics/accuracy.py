# License: BSD3

"""
Token and sentence accuracy over tag sequences
"""


class Accuracy(object):
    """
    Running accuracy counts.

    Word accuracy is the proportion of tokens whose predicted tag is the
    reference tag; sentence accuracy the proportion of sequences where
    every tag is right.
    """
    def __init__(self):
        self.word_correct = 0
        self.word_count = 0
        self.sentence_correct = 0
        self.sentence_count = 0

    def update(self, references, predictions):
        """
        Account for one sequence of reference tags and the predicted
        tags for it (which must be as long)
        """
        references = list(references)
        predictions = list(predictions)
        if len(references) != len(predictions):
            raise ValueError("Cannot compare %d reference tags with %d"
                             " predicted tags" % (len(references),
                                                  len(predictions)))
        fails = 0
        for ref, pred in zip(references, predictions):
            if ref == pred:
                self.word_correct += 1
            else:
                fails += 1
        self.word_count += len(references)
        self.sentence_count += 1
        if not fails:
            self.sentence_correct += 1

    def add(self, correct):
        """
        Account for a single outcome (eg. one classified document);
        counts both as a word and as a sentence
        """
        self.word_count += 1
        self.sentence_count += 1
        if correct:
            self.word_correct += 1
            self.sentence_correct += 1

    def merge(self, other):
        "add the counts from another Accuracy"
        self.word_correct += other.word_correct
        self.word_count += other.word_count
        self.sentence_correct += other.sentence_correct
        self.sentence_count += other.sentence_count
        return self

    def mean(self):
        "word accuracy (0 if nothing was counted)"
        if not self.word_count:
            return 0.
        return self.word_correct / self.word_count

    def sentence_mean(self):
        "sentence accuracy (0 if nothing was counted)"
        if not self.sentence_count:
            return 0.
        return self.sentence_correct / self.sentence_count

    def __str__(self):
        return str(self.mean())
