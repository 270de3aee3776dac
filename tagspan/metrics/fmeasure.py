# License: BSD3

"""
Span-level precision, recall and F-measure, overall and per span type.

A predicted span is a true positive if the reference has a span with the
same boundaries *and* the same type; everything else the labeller found
is a false positive, and everything else in the reference is missed.
"""

from collections import namedtuple

import pandas as pd
from tabulate import tabulate

TOTAL = 'TOTAL'

_PERCENT = '% 7.2f%%'
_FORMAT = ('%12s: precision: ' + _PERCENT + ';  recall: ' + _PERCENT +
           '; F1: ' + _PERCENT + '.')
_FORMAT_EXTRA = _FORMAT + ' [target: %3d; tp: %3d; fp: %3d]'

_COLUMNS = ['type', 'precision', 'recall', 'f1', 'target', 'tp', 'fp']


def _zero_or_positive(value):
    "negative scores (undefined F1) are shown as 0"
    return value if value > 0 else 0.


class Stats(object):
    """
    Counts for a single span type (or for all types together)

    :param true_positive: spans found that are in the reference
    :param false_positive: spans found that are not in the reference
    :param target: spans in the reference
    """
    def __init__(self, true_positive=0, false_positive=0, target=0):
        self.true_positive = true_positive
        self.false_positive = false_positive
        self.target = target

    def __repr__(self):
        return 'Stats(tp=%d, fp=%d, target=%d)' % (self.true_positive,
                                                   self.false_positive,
                                                   self.target)

    def __eq__(self, other):
        return isinstance(other, Stats) and\
            self._counts() == other._counts()

    def __ne__(self, other):
        return not self == other

    def _counts(self):
        "for comparison"
        return (self.true_positive, self.false_positive, self.target)

    def found(self):
        "number of spans predicted"
        return self.true_positive + self.false_positive

    def precision(self):
        "tp / (tp + fp), 0 if nothing was found"
        found = self.found()
        return self.true_positive / found if found > 0 else 0.

    def recall(self):
        "tp / target, 0 if there was nothing to find"
        return self.true_positive / self.target if self.target > 0 else 0.

    def fmeasure(self):
        """
        Harmonic mean of precision and recall, or -1 if both are 0
        (undefined)
        """
        precision = self.precision()
        recall = self.recall()
        if precision + recall > 0:
            return 2 * precision * recall / (precision + recall)
        return -1.

    def merge(self, other):
        "add the counts from another Stats"
        self.true_positive += other.true_positive
        self.false_positive += other.false_positive
        self.target += other.target


SpanError = namedtuple("SpanError", "kind span")
"""
A span that was wrongly predicted (kind 'fp') or missed (kind 'fn')
"""

FALSE_POSITIVE = 'fp'
FALSE_NEGATIVE = 'fn'


def find_errors(references, predictions):
    """
    Return the spans that keep a prediction from being perfect:
    false positives followed by false negatives, each in span order

    :rtype: [SpanError]
    """
    ref_set = frozenset(references)
    pred_set = frozenset(predictions)
    return [SpanError(FALSE_POSITIVE, s) for s in sorted(pred_set - ref_set)] +\
        [SpanError(FALSE_NEGATIVE, s) for s in sorted(ref_set - pred_set)]


class ScoreAccumulator(object):
    """
    Running precision/recall/F-measure counts over a series of samples.

    Call `update` once per sample with the reference spans and the
    predicted spans; counters only ever go up.  Accumulators for
    different parts of a corpus (eg. cross-validation folds) can be
    combined with `merge`.
    """
    def __init__(self):
        self.samples = 0
        self.general = Stats()
        self.by_type = {}

    def _stats_for(self, span_type):
        "the per-type record, created on demand"
        if span_type not in self.by_type:
            self.by_type[span_type] = Stats()
        return self.by_type[span_type]

    def _add_true_positive(self, span_type):
        for stats in (self._stats_for(span_type), self.general):
            stats.true_positive += 1
            stats.target += 1

    def _add_false_positive(self, span_type):
        for stats in (self._stats_for(span_type), self.general):
            stats.false_positive += 1

    def _add_false_negative(self, span_type):
        for stats in (self._stats_for(span_type), self.general):
            stats.target += 1

    def update(self, references, predictions):
        """
        Account for one sample: its reference spans and the spans
        predicted for it
        """
        ref_set = frozenset(references)
        pred_set = frozenset(predictions)
        self.samples += 1
        for ref in ref_set:
            if ref in pred_set:
                self._add_true_positive(ref.type)
            else:
                self._add_false_negative(ref.type)
        for pred in pred_set:
            if pred not in ref_set:
                self._add_false_positive(pred.type)

    def merge(self, other):
        """
        Add the counts of another accumulator to this one
        """
        self.samples += other.samples
        self.general.merge(other.general)
        for span_type, stats in other.by_type.items():
            self._stats_for(span_type).merge(stats)
        return self

    def precision(self):
        "overall precision"
        return self.general.precision()

    def recall(self):
        "overall recall"
        return self.general.recall()

    def fmeasure(self):
        "overall F1 (-1 if undefined)"
        return self.general.fmeasure()

    def ranked_types(self):
        """
        Span types from best F1 to worst; undefined scores count as 0,
        and types with the same score are sorted by name
        """
        def rank(span_type):
            "sort key"
            score = _zero_or_positive(self.by_type[span_type].fmeasure())
            return (-score, span_type or '')
        return sorted(self.by_type, key=rank)

    def report(self):
        """
        Detailed report: overall counts and scores, then one line
        per type ::

            Evaluated 2 samples with 3 entities; found: 3 entities; correct: 2.
                   TOTAL: precision:   66.67%;  recall:   66.67%; F1:   66.67%.
                     PER: precision:  100.00%;  recall:  100.00%; F1:  100.00%. [target:   2; tp:   2; fp:   0]
        """
        general = self.general
        lines = ["Evaluated %d samples with %d entities; found: %d entities;"
                 " correct: %d." % (self.samples, general.target,
                                    general.found(), general.true_positive)]
        lines.append(_FORMAT % (TOTAL,
                                _zero_or_positive(general.precision() * 100),
                                _zero_or_positive(general.recall() * 100),
                                _zero_or_positive(general.fmeasure() * 100)))
        for span_type in self.ranked_types():
            stats = self.by_type[span_type]
            lines.append(_FORMAT_EXTRA % (
                span_type,
                _zero_or_positive(stats.precision() * 100),
                _zero_or_positive(stats.recall() * 100),
                _zero_or_positive(stats.fmeasure() * 100),
                stats.target,
                stats.true_positive,
                stats.false_positive))
        return '\n'.join(lines) + '\n'

    def summary(self):
        """
        Overall scores only
        """
        return ("Precision: %s\nRecall: %s\nF-Measure: %s" %
                (self.precision(), self.recall(), self.fmeasure()))

    def _rows(self):
        "one row per type, overall scores first"
        rows = []
        keys = [(TOTAL, self.general)] +\
            [(t, self.by_type[t]) for t in self.ranked_types()]
        for span_type, stats in keys:
            rows.append([span_type,
                         _zero_or_positive(stats.precision() * 100),
                         _zero_or_positive(stats.recall() * 100),
                         _zero_or_positive(stats.fmeasure() * 100),
                         stats.target,
                         stats.true_positive,
                         stats.false_positive])
        return rows

    def table(self, tablefmt='simple'):
        """
        The detailed report as a table (scores in percent)
        """
        return tabulate(self._rows(), headers=_COLUMNS, floatfmt='.2f',
                        tablefmt=tablefmt)

    def to_frame(self):
        """
        The detailed report as a pandas DataFrame indexed by type
        (scores between 0 and 1, undefined F1 left as -1)
        """
        rows = []
        keys = [(TOTAL, self.general)] +\
            [(t, self.by_type[t]) for t in self.ranked_types()]
        for span_type, stats in keys:
            rows.append([span_type,
                         stats.precision(),
                         stats.recall(),
                         stats.fmeasure(),
                         stats.target,
                         stats.true_positive,
                         stats.false_positive])
        return pd.DataFrame(rows, columns=_COLUMNS).set_index('type')

    def __str__(self):
        return self.report()
