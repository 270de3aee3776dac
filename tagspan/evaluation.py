# License: BSD3

"""
Running labellers over reference samples and scoring what they find.

The evaluators here do not know how a labeller works; they only need
the small interfaces below (`Labeler`, `Classifier`), so that anything
from a dictionary lookup to a statistical model can be compared
against a gold standard corpus.
"""

import sys
import threading

from .annotation import DEFAULT_TYPE
from .codec import BioCodec
from .metrics import Accuracy, FALSE_POSITIVE, ScoreAccumulator, find_errors
from .overlap import drop_overlapping_spans


# ---------------------------------------------------------------------
# collaborators
# ---------------------------------------------------------------------


class Labeler(object):
    """
    Something that finds typed spans in a token sequence.

    Derived classes should implement `label`
    """
    def label(self, tokens):
        """
        Return the spans found in the tokens (these may overlap)

        :rtype: [Span]
        """
        raise NotImplementedError

    def clear_adaptive_data(self):
        """
        Forget any state accumulated over the current document
        """
        pass


class Trainer(object):
    """
    Something that builds a `Labeler` from annotated samples
    """
    def train(self, samples):
        """
        :type samples: [Sample]
        :rtype: Labeler
        """
        raise NotImplementedError


class Classifier(object):
    """
    Something that assigns a category to a whole document
    """
    def classify(self, tokens):
        """
        :rtype: string
        """
        raise NotImplementedError

    def clear_adaptive_data(self):
        """
        Forget any state accumulated over the current document
        """
        pass


class ModelCache(object):
    """
    Loaded models, shared between the threads that need them and keyed
    by language and path; each model is loaded at most once.
    """
    def __init__(self):
        self._lock = threading.Lock()
        self._models = {}

    def get(self, language, path, loader):
        """
        Return the model for this language and path, calling
        `loader(path)` if we do not have it yet
        """
        key = (language, path)
        with self._lock:
            if key not in self._models:
                self._models[key] = loader(path)
            return self._models[key]

    def __contains__(self, key):
        with self._lock:
            return key in self._models

    def __len__(self):
        with self._lock:
            return len(self._models)


# ---------------------------------------------------------------------
# listeners
# ---------------------------------------------------------------------


class EvaluationMonitor(object):
    """
    Gets told about every evaluated sample, and whether the prediction
    matched the reference exactly
    """
    def correctly_classified(self, reference, prediction):
        "the prediction is exactly the reference"
        pass

    def misclassified(self, reference, prediction):
        "the prediction differs from the reference"
        pass


class DetailedFMeasureListener(EvaluationMonitor):
    """
    Per-type scores over everything it is told about; attach the same
    listener to several evaluators (eg. every cross-validation fold) to
    get one aggregated report
    """
    def __init__(self):
        self.scores = ScoreAccumulator()
        self._lock = threading.Lock()

    def _update(self, reference, prediction):
        with self._lock:
            self.scores.update(reference.spans, prediction.spans)

    def correctly_classified(self, reference, prediction):
        self._update(reference, prediction)

    def misclassified(self, reference, prediction):
        self._update(reference, prediction)

    def report(self):
        "see `ScoreAccumulator.report`"
        return self.scores.report()


class ErrorReporter(EvaluationMonitor):
    """
    Print the misclassified samples, with the spans that were found
    wrongly and the spans that were missed.  Each sample is printed in
    one go, so folds evaluated in parallel can share a reporter.
    """
    def __init__(self, stream=None):
        self.stream = stream or sys.stdout
        self._lock = threading.Lock()

    def misclassified(self, reference, prediction):
        errors = find_errors(reference.spans, prediction.spans)
        lines = [str(reference).strip()]
        for error in errors:
            label = 'false positive' if error.kind == FALSE_POSITIVE\
                else 'false negative'
            lines.append("\t%s: %s [%s]" %
                         (label, error.span,
                          error.span.covered_text(reference.tokens)))
        with self._lock:
            print('\n'.join(lines) + '\n', file=self.stream)


# ---------------------------------------------------------------------
# evaluators
# ---------------------------------------------------------------------


def _typed(sample):
    "the sample with untyped spans given the default type"
    if all(s.type is not None for s in sample.spans):
        return sample
    return sample.with_spans(s if s.type is not None else
                             s.retype(DEFAULT_TYPE) for s in sample.spans)


class SequenceLabelerEvaluator(object):
    """
    Compare a labeller's output against reference samples.

    Overlapping predictions are resolved (see
    `tagspan.overlap.drop_overlapping_spans`) before scoring.  Besides
    the span scores, we measure token accuracy by comparing the BIO
    encodings of the reference and of the prediction.

    :param labeler: the labeller being evaluated
    :type labeler: Labeler

    :param listeners: told about every sample and whether it was
        correctly labelled
    :type listeners: [EvaluationMonitor]
    """
    def __init__(self, labeler, listeners=()):
        self.labeler = labeler
        self.listeners = list(listeners)
        self.scores = ScoreAccumulator()
        self.accuracy = Accuracy()
        self._codec = BioCodec()

    def process_sample(self, reference):
        """
        Label one reference sample and account for it in the scores;
        return the predicted sample
        """
        if reference.clear_adaptive_data:
            self.labeler.clear_adaptive_data()
        predicted = drop_overlapping_spans(self.labeler.label(reference.tokens))
        prediction = reference.with_spans(predicted)
        self.scores.update(reference.spans, prediction.spans)
        length = len(reference.tokens)
        self.accuracy.update(self._codec.encode(reference.spans, length),
                             self._codec.encode(prediction.spans, length))
        return prediction

    def evaluate_sample(self, reference):
        """
        `process_sample` and notify the listeners
        """
        reference = _typed(reference)
        prediction = self.process_sample(reference)
        correct = frozenset(reference.spans) == frozenset(prediction.spans)
        for listener in self.listeners:
            if correct:
                listener.correctly_classified(reference, prediction)
            else:
                listener.misclassified(reference, prediction)
        return prediction

    def evaluate(self, samples):
        """
        Evaluate every sample; return the span scores

        :rtype: ScoreAccumulator
        """
        for sample in samples:
            self.evaluate_sample(sample)
        return self.scores

    def word_accuracy(self):
        "proportion of tokens with the right BIO tag"
        return self.accuracy.mean()


class DocumentClassifierEvaluator(object):
    """
    Accuracy of a document classifier over `DocSample`s

    :type classifier: Classifier
    """
    def __init__(self, classifier, listeners=()):
        self.classifier = classifier
        self.listeners = list(listeners)
        self.accuracy = Accuracy()

    def evaluate_sample(self, reference):
        """
        Classify one document; return the predicted label
        """
        if reference.clear_adaptive_data:
            self.classifier.clear_adaptive_data()
        label = self.classifier.classify(reference.tokens)
        correct = label == reference.label
        self.accuracy.add(correct)
        for listener in self.listeners:
            if correct:
                listener.correctly_classified(reference, label)
            else:
                listener.misclassified(reference, label)
        return label

    def evaluate(self, samples):
        """
        Classify every document; return the accuracy

        :rtype: Accuracy
        """
        for sample in samples:
            self.evaluate_sample(sample)
        return self.accuracy
