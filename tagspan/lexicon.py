#!/usr/bin/env python
# -*- coding: utf-8 -*-

# License: BSD3

"""
Dictionaries of (possibly multiword) expressions, and greedy detection
of their occurrences in token sequences.

Two file formats are supported, both tab separated, one entry per line.
A multiword lexicon associates

 * a surface form, its words joined by `#`
 * a lemma
 * a type (part of speech, entity class...)
 * an ambiguity flag

for example ::

    in#front#of	in_front_of	IN	false
    New#York	New_York	LOC	false

A gazetteer simply associates an expression with a type ::

    new york	LOC
    john smith	PER

Matching is case insensitive: keys are case-folded when loaded.
"""

from collections import Counter, defaultdict, namedtuple
import codecs
import sys
import warnings

from frozendict import frozendict

from .annotation import Span
from .codec import BioCodec
from .errors import ConfigurationError
from .evaluation import Labeler, Trainer

MULTIWORD_SEPARATOR = '#'


def normalise_key(text):
    """
    Dictionary key for a piece of text: case-folded words separated
    by single spaces
    """
    return ' '.join(text.casefold().split())


class MultiWordEntry(namedtuple("MultiWordEntry",
                                "words lemma type ambiguous")):
    "a single entry in a multiword lexicon"

    @classmethod
    def read_entry(cls, line):
        """
        Return a MultiWordEntry given the string corresponding to an
        entry, or None if we can't parse it
        """
        fields = line.split('\t')
        if len(fields) != 4:
            return None
        surface, lemma, mw_type, flag = fields
        words = tuple(surface.split(MULTIWORD_SEPARATOR))
        return cls(words, lemma, mw_type, flag.strip().lower() == 'true')

    def key(self):
        "dictionary key for this entry"
        return normalise_key(' '.join(self.words))


def _read_lines(filename):
    """
    Non-blank lines of a UTF-8 file, without their line endings
    """
    with codecs.open(filename, 'r', 'utf-8') as stream:
        return [line.rstrip('\r\n') for line in stream
                if line.strip()]


class DictionaryMatcher(object):
    """
    Greedy longest-match detection of dictionary entries.

    :param entries: mapping from expression (words separated by spaces)
        to type; keys are normalised with `normalise_key`
    :type entries: Dict String String
    """
    def __init__(self, entries):
        self.entries = frozendict((normalise_key(k), v)
                                  for k, v in entries.items())
        self.max_length = max([len(k.split()) for k in self.entries] or
                              [0])

    def __len__(self):
        return len(self.entries)

    def lookup(self, words):
        """
        Type associated with a sequence of words, or None
        """
        return self.entries.get(normalise_key(' '.join(words)))

    def match(self, tokens):
        """
        Return spans for the dictionary entries found in the tokens.

        We scan from left to right; at each position, we look for the
        longest entry starting there (trying every window up to the
        length of the longest entry).  If there is one, we skip past it;
        otherwise we move on to the next token.  The resulting spans
        never overlap.
        """
        tokens = list(tokens)
        spans = []
        start = 0
        while start < len(tokens):
            found = None
            stop = min(len(tokens), start + self.max_length)
            for end in range(start + 1, stop + 1):
                entry = self.lookup(tokens[start:end])
                if entry is not None:
                    found = Span(start, end, entry)
            if found is None:
                start += 1
            else:
                spans.append(found)
                start = found.end
        return spans

    def tokens_with_multiwords(self, tokens):
        """
        Return a copy of the tokens where each dictionary match is
        replaced by a single token, its words joined by `#` ::

            ['He', 'is', 'in', 'front', 'of', 'it']
            => ['He', 'is', 'in#front#of', 'it']
        """
        tokens = list(tokens)
        res = []
        last = 0
        for span in self.match(tokens):
            res.extend(tokens[last:span.start])
            res.append(MULTIWORD_SEPARATOR.join(tokens[span.start:span.end]))
            last = span.end
        res.extend(tokens[last:])
        return res

    def tags(self, tokens, codec=None):
        """
        Per-token tags for the dictionary matches (BIO by default),
        eg. to be used as features
        """
        codec = codec or BioCodec()
        tokens = list(tokens)
        return codec.encode(self.match(tokens), len(tokens))


def load_multiwords(filename):
    """
    Read a multiword lexicon and return a DictionaryMatcher
    from the case-folded surface forms to their types.
    Malformed lines are skipped (with a warning)

    :: FilePath -> IO DictionaryMatcher
    """
    entries = {}
    for line in _read_lines(filename):
        entry = MultiWordEntry.read_entry(line)
        if entry is None:
            warnings.warn("line starting with %s is not well-formed;"
                          " skipping" % line.split('\t')[0])
            continue
        entries[entry.key()] = entry.type
    if not entries:
        raise ConfigurationError("No multiword entries in %s" % filename)
    return DictionaryMatcher(entries)


def load_gazetteer(filename):
    """
    Read a gazetteer (expression TAB type) and return a
    DictionaryMatcher.  Malformed lines are skipped (with a warning)

    :: FilePath -> IO DictionaryMatcher
    """
    entries = {}
    for line in _read_lines(filename):
        fields = line.split('\t')
        if len(fields) != 2 or not fields[0].strip():
            warnings.warn("gazetteer line %r is not well-formed;"
                          " skipping" % line)
            continue
        entries[fields[0]] = fields[1].strip()
    if not entries:
        raise ConfigurationError("No gazetteer entries in %s" % filename)
    return DictionaryMatcher(entries)


# ---------------------------------------------------------------------
# dictionaries as labellers
# ---------------------------------------------------------------------


class DictionaryLabeler(Labeler):
    """
    A labeller that reports every occurrence of every dictionary entry,
    including entries that overlap each other (so you probably want to
    pass its output through `tagspan.overlap.drop_overlapping_spans`,
    which the evaluators do for you)
    """
    def __init__(self, matcher):
        self.matcher = matcher

    def label(self, tokens):
        tokens = list(tokens)
        spans = []
        for start in range(len(tokens)):
            stop = min(len(tokens), start + self.matcher.max_length)
            for end in range(start + 1, stop + 1):
                entry = self.matcher.lookup(tokens[start:end])
                if entry is not None:
                    spans.append(Span(start, end, entry))
        return spans


class GazetteerTrainer(Trainer):
    """
    Learn a dictionary labeller by memorising the spans of the training
    samples.  When the same words are annotated with different types,
    the most frequent one wins (ties go to the type that sorts first).

    :param verbose: if True, report the size of each dictionary on stderr
    """
    def __init__(self, verbose=False):
        self.verbose = verbose

    def train(self, samples):
        counts = defaultdict(Counter)
        for sample in samples:
            for span in sample.spans:
                key = normalise_key(span.covered_text(sample.tokens))
                counts[key][span.type] += 1
        entries = {}
        for key, types in counts.items():
            entries[key] = sorted(types.items(),
                                  key=lambda x: (-x[1], x[0] or ''))[0][0]
        if self.verbose:
            print("Memorised %d entries" % len(entries), file=sys.stderr)
        return DictionaryLabeler(DictionaryMatcher(entries))
