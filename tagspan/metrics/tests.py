# License: BSD3
# pylint: disable=too-many-public-methods, invalid-name

"""
Tests for tagspan.metrics
"""

import io
import unittest

from tagspan.annotation import Sample, Span
from tagspan.evaluation import ErrorReporter
from tagspan.metrics import (Accuracy, ScoreAccumulator, SpanError, Stats,
                             find_errors)

PER = Span(0, 1, 'PER')
LOC = Span(2, 3, 'LOC')
ORG = Span(2, 3, 'ORG')


def mixed_scores():
    "one hit, one miss, one false alarm"
    scores = ScoreAccumulator()
    scores.update([PER, LOC], [PER, ORG])
    return scores


class StatsTest(unittest.TestCase):
    "tests for Stats"

    def test_empty(self):
        stats = Stats()
        self.assertEqual(0., stats.precision())
        self.assertEqual(0., stats.recall())
        self.assertEqual(-1., stats.fmeasure())

    def test_scores(self):
        stats = Stats(true_positive=2, false_positive=2, target=4)
        self.assertEqual(0.5, stats.precision())
        self.assertEqual(0.5, stats.recall())
        self.assertEqual(0.5, stats.fmeasure())
        stats.merge(Stats(true_positive=2, false_positive=0, target=2))
        self.assertEqual(Stats(4, 2, 6), stats)


class ScoreAccumulatorTest(unittest.TestCase):
    "tests for ScoreAccumulator"

    def test_empty(self):
        scores = ScoreAccumulator()
        self.assertEqual(0., scores.precision())
        self.assertEqual(0., scores.recall())
        self.assertEqual(-1., scores.fmeasure())
        self.assertEqual([], scores.ranked_types())

    def test_perfect(self):
        scores = ScoreAccumulator()
        scores.update([PER, LOC], [LOC, PER])
        self.assertEqual(1., scores.precision())
        self.assertEqual(1., scores.recall())
        self.assertEqual(1., scores.fmeasure())

    def test_counts(self):
        scores = mixed_scores()
        self.assertEqual(1, scores.samples)
        self.assertEqual(Stats(1, 1, 2), scores.general)
        self.assertEqual(Stats(1, 0, 1), scores.by_type['PER'])
        self.assertEqual(Stats(0, 0, 1), scores.by_type['LOC'])
        self.assertEqual(Stats(0, 1, 0), scores.by_type['ORG'])
        self.assertEqual(0.5, scores.fmeasure())

    def test_type_matters(self):
        scores = ScoreAccumulator()
        scores.update([Span(0, 2, 'PER')], [Span(0, 2, 'ORG')])
        self.assertEqual(0, scores.general.true_positive)

    def test_ranked_types(self):
        self.assertEqual(['PER', 'LOC', 'ORG'], mixed_scores().ranked_types())

    def test_report(self):
        lines = mixed_scores().report().splitlines()
        self.assertEqual('Evaluated 1 samples with 2 entities; found: 2'
                         ' entities; correct: 1.', lines[0])
        self.assertEqual('       TOTAL: precision:   50.00%;  recall:'
                         '   50.00%; F1:   50.00%.', lines[1])
        self.assertEqual('         PER: precision:  100.00%;  recall:'
                         '  100.00%; F1:  100.00%.'
                         ' [target:   1; tp:   1; fp:   0]', lines[2])
        self.assertTrue(lines[3].startswith('         LOC:'))
        self.assertTrue('F1:    0.00%.' in lines[3])
        self.assertTrue(lines[4].endswith('[target:   0; tp:   0; fp:   1]'))
        self.assertEqual(5, len(lines))

    def test_merge(self):
        scores = mixed_scores()
        other = ScoreAccumulator()
        other.update([LOC], [LOC])
        scores.merge(other)
        self.assertEqual(2, scores.samples)
        self.assertEqual(Stats(1, 0, 2), scores.by_type['LOC'])
        self.assertEqual(Stats(2, 1, 3), scores.general)

    def test_summary(self):
        summary = mixed_scores().summary()
        self.assertEqual('Precision: 0.5\nRecall: 0.5\nF-Measure: 0.5',
                         summary)

    def test_table(self):
        table = mixed_scores().table()
        self.assertTrue('TOTAL' in table)
        self.assertTrue('100.00' in table)

    def test_frame(self):
        frame = mixed_scores().to_frame()
        self.assertEqual(['TOTAL', 'PER', 'LOC', 'ORG'], list(frame.index))
        self.assertEqual(1, frame.loc['PER', 'tp'])
        self.assertEqual(-1., frame.loc['ORG', 'f1'])


class ErrorsTest(unittest.TestCase):
    "tests for find_errors and ErrorReporter"

    def test_find_errors(self):
        self.assertEqual([SpanError('fp', ORG), SpanError('fn', LOC)],
                         find_errors([PER, LOC], [PER, ORG]))
        self.assertEqual([], find_errors([PER], [PER]))

    def test_reporter(self):
        stream = io.StringIO()
        reporter = ErrorReporter(stream)
        tokens = ['Bob', 'in', 'Paris']
        reporter.misclassified(Sample(tokens, [PER, LOC]),
                               Sample(tokens, [PER, ORG]))
        output = stream.getvalue()
        self.assertTrue('false positive: [2..3) ORG [Paris]' in output)
        self.assertTrue('false negative: [2..3) LOC [Paris]' in output)


class AccuracyTest(unittest.TestCase):
    "tests for Accuracy"

    def test_accuracy(self):
        accuracy = Accuracy()
        self.assertEqual(0., accuracy.mean())
        accuracy.update(['a', 'b'], ['a', 'c'])
        self.assertEqual(0.5, accuracy.mean())
        self.assertEqual(0., accuracy.sentence_mean())
        accuracy.update(['a'], ['a'])
        self.assertAlmostEqual(2. / 3, accuracy.mean())
        self.assertEqual(0.5, accuracy.sentence_mean())
        self.assertRaises(ValueError, accuracy.update, ['a'], [])

    def test_merge(self):
        left = Accuracy()
        left.update(['a'], ['a'])
        right = Accuracy()
        right.add(False)
        left.merge(right)
        self.assertEqual(0.5, left.mean())
        self.assertEqual(0.5, left.sentence_mean())
