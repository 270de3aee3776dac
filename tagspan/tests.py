# -*- coding: utf-8 -*-
#
# License: BSD3
# pylint: disable=too-many-public-methods, invalid-name

"""
Tests for tagspan
"""

import codecs
import io
import os
import shutil
import tempfile
import unittest

from tagspan.annotation import (DEFAULT_TYPE, DocSample, Sample, Span,
                                check_spans, spans_to_strings)
from tagspan.codec import (BilouCodec, BioCodec, codec_for_name, split_tag,
                           join_tag, to_bio)
from tagspan.crossval import (CrossValidator, group_documents, partition)
from tagspan.editscript import (apply_edit_script, decode_lemmas,
                                shortest_edit_script)
from tagspan.errors import ConfigurationError, FormatError
from tagspan.evaluation import (Classifier, DetailedFMeasureListener,
                                DocumentClassifierEvaluator, ErrorReporter,
                                Labeler, ModelCache,
                                SequenceLabelerEvaluator, Trainer)
from tagspan.lexicon import (DictionaryLabeler, DictionaryMatcher,
                             GazetteerTrainer, MultiWordEntry,
                             load_gazetteer, load_multiwords)
from tagspan.overlap import drop_overlapping_spans

# ---------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------


class FixedLabeler(Labeler):
    """
    Returns canned spans for each token sequence, and counts how often
    it was told to clear its adaptive data
    """
    def __init__(self, answers):
        self.answers = answers
        self.cleared = 0

    def label(self, tokens):
        return list(self.answers.get(tuple(tokens), []))

    def clear_adaptive_data(self):
        self.cleared += 1


class ConstantClassifier(Classifier):
    "always the same answer"
    def __init__(self, label):
        self.label = label

    def classify(self, tokens):
        return self.label


def john_smith(clear=False):
    "the usual example"
    return Sample(['John', 'Smith', 'lives'], [Span(0, 2, 'PER')],
                  clear_adaptive_data=clear)


class TempDirTest(unittest.TestCase):
    "tests that need to write files"

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def write_file(self, name, lines):
        "write lines to a file in the temporary directory"
        path = os.path.join(self.tmpdir, name)
        with codecs.open(path, 'w', 'utf-8') as stream:
            for line in lines:
                stream.write(line + '\n')
        return path


# ---------------------------------------------------------------------
# spans and samples
# ---------------------------------------------------------------------


class SpanTest(unittest.TestCase):
    "tests for tagspan.annotation.Span"

    def test_invalid(self):
        self.assertRaises(ValueError, Span, -1, 2)
        self.assertRaises(ValueError, Span, 2, 2)
        self.assertRaises(ValueError, Span, 3, 2)

    def test_equality(self):
        self.assertEqual(Span(0, 2, 'PER'), Span(0, 2, 'PER'))
        self.assertNotEqual(Span(0, 2, 'PER'), Span(0, 2, 'LOC'))
        self.assertNotEqual(Span(0, 2), Span(0, 3))
        self.assertEqual(1, len(set([Span(0, 2, 'PER'), Span(0, 2, 'PER')])))

    def test_order(self):
        spans = [Span(2, 3, 'A'), Span(0, 1, 'B'), Span(0, 3, 'C')]
        self.assertEqual([Span(0, 3, 'C'), Span(0, 1, 'B'), Span(2, 3, 'A')],
                         sorted(spans))
        self.assertTrue(Span(0, 2, 'A') < Span(0, 2, 'B'))

    def test_relations(self):
        self.assertTrue(Span(0, 5).encloses(Span(1, 3)))
        self.assertTrue(Span(0, 5).encloses(Span(0, 5)))
        self.assertFalse(Span(1, 3).encloses(Span(0, 5)))
        self.assertFalse(Span(0, 5).encloses(None))
        self.assertTrue(Span(0, 3).intersects(Span(2, 4)))
        self.assertFalse(Span(0, 2).intersects(Span(2, 4)))
        self.assertTrue(Span(0, 3).crosses(Span(2, 4)))
        self.assertFalse(Span(0, 5).crosses(Span(2, 4)))
        self.assertTrue(Span(2, 4).contains(3))
        self.assertFalse(Span(2, 4).contains(4))

    def test_overlap(self):
        self.assertEqual(Span(8, 10), Span(5, 10).overlaps(Span(8, 12)))
        self.assertEqual(None, Span(5, 10).overlaps(Span(10, 12)))

    def test_covered_text(self):
        tokens = ['John', 'Smith', 'lives']
        self.assertEqual('John Smith', Span(0, 2).covered_text(tokens))
        self.assertEqual(['John Smith', 'lives'],
                         spans_to_strings([Span(0, 2), Span(2, 3)], tokens))
        self.assertRaises(ValueError, Span(2, 4).covered_text, tokens)

    def test_copies(self):
        self.assertEqual(Span(3, 5, 'X'), Span(1, 3, 'X').shift(2))
        self.assertEqual(Span(1, 3, 'Y'), Span(1, 3, 'X').retype('Y'))
        self.assertEqual(2, Span(1, 3).length())

    def test_no_instance_dict(self):
        span = Span(0, 2, 'PER')
        self.assertFalse(hasattr(span, '__dict__'))
        self.assertRaises(AttributeError, setattr, span, 'score', 1.)


class SampleTest(unittest.TestCase):
    "tests for tagspan.annotation.Sample"

    def test_spans_checked(self):
        self.assertRaises(ValueError, Sample, ['a', 'b'],
                          [Span(0, 2), Span(1, 2)])
        self.assertRaises(ValueError, Sample, ['a'], [Span(0, 2)])
        check_spans([Span(0, 1), Span(1, 2)], 2)

    def test_spans_sorted(self):
        sample = Sample(['a', 'b', 'c'], [Span(2, 3, 'X'), Span(0, 1, 'Y')])
        self.assertEqual((Span(0, 1, 'Y'), Span(2, 3, 'X')), sample.spans)

    def test_str(self):
        sample = Sample(['John', 'Smith', 'lives', 'in', 'Paris'],
                        [Span(0, 2, 'PER'), Span(4, 5, 'LOC')])
        self.assertEqual('<START:PER> John Smith <END> lives in'
                         ' <START:LOC> Paris <END>', str(sample))
        self.assertTrue(str(john_smith(clear=True)).startswith('\n'))

    def test_filter_types(self):
        sample = Sample(['a', 'b'], [Span(0, 1, 'X'), Span(1, 2, 'Y')])
        self.assertEqual((Span(1, 2, 'Y'),), sample.filter_types(['Y']).spans)

    def test_doc_sample(self):
        doc = DocSample('sport', ['Real', 'Madrid', 'won'])
        self.assertEqual('sport\tReal Madrid won', str(doc))
        self.assertEqual(doc, DocSample('sport', ('Real', 'Madrid', 'won')))


# ---------------------------------------------------------------------
# codecs
# ---------------------------------------------------------------------

SPAN_SETS = [
    [],
    [Span(0, 1, 'A')],
    [Span(0, 1, 'A'), Span(1, 3, 'A')],
    [Span(0, 2, 'PER'), Span(3, 4, 'LOC'), Span(4, 6, 'ORG')],
    [Span(5, 6, 'X')],
]


class CodecTest(unittest.TestCase):
    "tests for tagspan.codec"

    def test_split_tag(self):
        self.assertEqual(('B', 'PER'), split_tag('B-PER'))
        self.assertEqual(('I', 'B-X'), split_tag('I-B-X'))
        self.assertEqual(('O', None), split_tag('O'))
        self.assertEqual('B-' + DEFAULT_TYPE, join_tag('B', None))
        for bad in ['X-PER', 'B', 'B-', 'PER']:
            self.assertRaises(FormatError, split_tag, bad)

    def test_bio_decode(self):
        codec = BioCodec()
        self.assertEqual([Span(0, 2, 'PER')],
                         codec.decode(['B-PER', 'I-PER', 'O']))
        self.assertEqual([Span(0, 1, 'PER'), Span(1, 2, 'PER')],
                         codec.decode(['B-PER', 'B-PER']))
        self.assertEqual([], codec.decode(['O', 'O']))
        self.assertRaises(FormatError, codec.decode, ['U-PER'])

    def test_bio_orphans(self):
        codec = BioCodec()
        self.assertEqual([Span(1, 3, 'LOC')],
                         codec.decode(['O', 'I-LOC', 'I-LOC']))
        self.assertEqual([Span(0, 1, 'PER'), Span(1, 2, 'LOC')],
                         codec.decode(['B-PER', 'I-LOC']))

    def test_bilou(self):
        codec = BilouCodec()
        spans = [Span(0, 2, 'PER'), Span(3, 4, 'LOC')]
        tags = ['B-PER', 'L-PER', 'O', 'U-LOC']
        self.assertEqual(tags, codec.encode(spans, 4))
        self.assertEqual(spans, codec.decode(tags))
        self.assertEqual(['B-X', 'I-X', 'L-X'],
                         codec.encode([Span(0, 3, 'X')], 3))

    def test_bilou_lenient(self):
        codec = BilouCodec()
        self.assertEqual([Span(0, 1, 'PER')], codec.decode(['B-PER', 'O']))
        self.assertEqual([Span(0, 2, 'PER')],
                         codec.decode(['B-PER', 'I-PER']))
        self.assertEqual([Span(1, 2, 'PER')], codec.decode(['O', 'L-PER']))

    def test_round_trip(self):
        for codec in [BioCodec(), BilouCodec()]:
            for spans in SPAN_SETS:
                tags = codec.encode(spans, 7)
                self.assertEqual(7, len(tags))
                self.assertEqual(spans, codec.decode(tags))
                self.assertTrue(codec.is_valid_sequence(tags))

    def test_encode_untyped(self):
        self.assertEqual(['B-default', 'I-default'],
                         BioCodec().encode([Span(0, 2)], 2))

    def test_encode_invalid(self):
        self.assertRaises(ValueError, BioCodec().encode,
                          [Span(0, 2, 'A'), Span(1, 3, 'B')], 3)
        self.assertRaises(ValueError, BioCodec().encode,
                          [Span(0, 4, 'A')], 3)

    def test_validity(self):
        bio = BioCodec()
        self.assertTrue(bio.is_valid_sequence(['B-PER', 'I-PER', 'O']))
        self.assertFalse(bio.is_valid_sequence(['O', 'I-PER']))
        self.assertFalse(bio.is_valid_sequence(['B-LOC', 'I-PER']))
        bilou = BilouCodec()
        self.assertTrue(bilou.is_valid_sequence(['B-PER', 'L-PER', 'U-X']))
        self.assertFalse(bilou.is_valid_sequence(['B-PER', 'O']))
        self.assertFalse(bilou.is_valid_sequence(['B-PER']))
        self.assertFalse(bilou.is_valid_sequence(['L-PER']))
        self.assertFalse(bilou.is_valid_sequence(['B-PER', 'L-LOC']))

    def test_compatible(self):
        bio = BioCodec()
        self.assertTrue(bio.are_tags_compatible(['B-PER', 'I-PER', 'O']))
        self.assertFalse(bio.are_tags_compatible(['I-PER', 'O']))
        self.assertFalse(bio.are_tags_compatible(['O']))
        self.assertFalse(bio.are_tags_compatible(['B-PER', 'U-PER']))
        self.assertTrue(BilouCodec().are_tags_compatible(['U-PER', 'O']))

    def test_to_bio(self):
        self.assertEqual(['B-PER', 'I-PER', 'B-LOC', 'O'],
                         to_bio(['B-PER', 'L-PER', 'U-LOC', 'O']))

    def test_codec_for_name(self):
        self.assertTrue(isinstance(codec_for_name('bilou'), BilouCodec))
        self.assertTrue(isinstance(codec_for_name('BIO'), BioCodec))
        self.assertRaises(ConfigurationError, codec_for_name, 'IOB2')


# ---------------------------------------------------------------------
# overlap
# ---------------------------------------------------------------------


class OverlapTest(unittest.TestCase):
    "tests for tagspan.overlap"

    def test_longest_first(self):
        self.assertEqual([Span(0, 2, 'ORG')],
                         drop_overlapping_spans([Span(1, 2, 'LOC'),
                                                 Span(0, 2, 'ORG')]))

    def test_properties(self):
        spans = [Span(3, 5, 'D'), Span(0, 1, 'B'), Span(2, 4, 'C'),
                 Span(0, 3, 'A')]
        kept = drop_overlapping_spans(spans)
        self.assertEqual([Span(0, 3, 'A'), Span(3, 5, 'D')], kept)
        self.assertEqual(kept, sorted(kept))
        self.assertTrue(set(kept) <= set(spans))
        check_spans(kept, 5)
        self.assertEqual(kept, drop_overlapping_spans(kept))

    def test_empty(self):
        self.assertEqual([], drop_overlapping_spans([]))


# ---------------------------------------------------------------------
# dictionaries
# ---------------------------------------------------------------------


class DictionaryTest(TempDirTest):
    "tests for tagspan.lexicon"

    def setUp(self):
        super(DictionaryTest, self).setUp()
        self.matcher = DictionaryMatcher({'New York': 'LOC',
                                          'york is': 'X'})

    def test_match(self):
        tokens = ['New', 'York', 'is', 'big']
        self.assertEqual([Span(0, 2, 'LOC')], self.matcher.match(tokens))
        self.assertEqual(['New#York', 'is', 'big'],
                         self.matcher.tokens_with_multiwords(tokens))
        self.assertEqual(['B-LOC', 'I-LOC', 'O', 'O'],
                         self.matcher.tags(tokens))
        self.assertEqual('LOC', self.matcher.lookup(['NEW', 'york']))
        self.assertEqual(2, self.matcher.max_length)

    def test_longest_match(self):
        matcher = DictionaryMatcher({'new': 'A', 'new york': 'B',
                                     'new york city': 'C'})
        self.assertEqual([Span(0, 3, 'C')],
                         matcher.match(['new', 'york', 'city']))
        self.assertEqual([Span(0, 2, 'B')], matcher.match(['new', 'york']))

    def test_casefold(self):
        matcher = DictionaryMatcher({'Straße': 'LOC'})
        self.assertEqual('LOC', matcher.lookup(['STRASSE']))
        self.assertEqual([Span(1, 2, 'LOC')],
                         matcher.match(['die', 'strasse']))

    def test_labeler(self):
        labeler = DictionaryLabeler(self.matcher)
        found = labeler.label(['New', 'York', 'is', 'big'])
        self.assertEqual([Span(0, 2, 'LOC'), Span(1, 3, 'X')], found)
        self.assertEqual([Span(0, 2, 'LOC')], drop_overlapping_spans(found))

    def test_multiword_entry(self):
        entry = MultiWordEntry.read_entry('in#front#of\tin_front_of\tIN\tfalse')
        self.assertEqual(('in', 'front', 'of'), entry.words)
        self.assertEqual('IN', entry.type)
        self.assertFalse(entry.ambiguous)
        self.assertEqual('in front of', entry.key())
        self.assertEqual(None, MultiWordEntry.read_entry('in#front#of\tIN'))

    def test_load_multiwords(self):
        path = self.write_file('mw.txt', ['in#front#of\tin_front_of\tIN\tfalse',
                                          'New#York\tNew_York\tLOC\tfalse',
                                          'broken'])
        with self.assertWarns(UserWarning):
            matcher = load_multiwords(path)
        self.assertEqual(2, len(matcher))
        self.assertEqual(['He', 'is', 'in#front#of', 'it'],
                         matcher.tokens_with_multiwords(
                             ['He', 'is', 'in', 'front', 'of', 'it']))

    def test_load_gazetteer(self):
        path = self.write_file('gaz.txt', ['new york\tLOC', '', 'john smith\tPER'])
        matcher = load_gazetteer(path)
        self.assertEqual(2, len(matcher))
        self.assertEqual([Span(0, 2, 'PER')],
                         matcher.match(['John', 'Smith', 'lives']))

    def test_empty_gazetteer(self):
        path = self.write_file('empty.txt', [])
        self.assertRaises(ConfigurationError, load_gazetteer, path)

    def test_missing_gazetteer(self):
        missing = os.path.join(self.tmpdir, 'nope.txt')
        self.assertRaises(IOError, load_gazetteer, missing)

    def test_trainer(self):
        samples = [john_smith(), john_smith(),
                   Sample(['John', 'Smith', 'Inc'], [Span(0, 2, 'ORG')])]
        labeler = GazetteerTrainer().train(samples)
        self.assertEqual([Span(1, 3, 'PER')],
                         labeler.label(['Dear', 'john', 'smith']))


# ---------------------------------------------------------------------
# edit scripts
# ---------------------------------------------------------------------


class EditScriptTest(unittest.TestCase):
    "tests for tagspan.editscript"

    def test_scripts(self):
        self.assertEqual('D1:eD0:d', shortest_edit_script('walked', 'walk'))
        self.assertEqual('D0:s', shortest_edit_script('dogs', 'dog'))
        self.assertEqual('R1:au', shortest_edit_script('ran', 'run'))
        self.assertEqual('I1:e', shortest_edit_script('be', 'bee'))
        self.assertEqual('O', shortest_edit_script('Dog', 'dog'))

    def test_apply(self):
        self.assertEqual('talk', apply_edit_script('talked', 'D1:eD0:d'))
        self.assertEqual('run', apply_edit_script('ran', 'R1:au'))
        self.assertEqual('dog', apply_edit_script('Dog', 'O'))
        # out of range
        self.assertEqual('a', apply_edit_script('a', 'D5:x'))
        self.assertRaises(FormatError, apply_edit_script, 'a', 'X0:a')
        self.assertRaises(FormatError, apply_edit_script, 'a', 'D0')

    def test_round_trip(self):
        pairs = [('walked', 'walk'), ('went', 'go'), ('gespielt', 'spielen'),
                 ('Unbelievably', 'believe'), ('a1', 'a2'),
                 ('internationalisations', 'internationalisation'),
                 ('x', '')]
        for word, lemma in pairs:
            script = shortest_edit_script(word, lemma)
            self.assertEqual(lemma.lower(), apply_edit_script(word, script))

    def test_decode_lemmas(self):
        tokens = ['walked', 'dogs', 'x']
        spans = [Span(0, 1, 'D1:eD0:d'), Span(1, 2, 'D0:s'),
                 Span(2, 3, 'D0:x')]
        self.assertEqual(['walk', 'dog', '_'], decode_lemmas(tokens, spans))


# ---------------------------------------------------------------------
# evaluation
# ---------------------------------------------------------------------


class EvaluationTest(unittest.TestCase):
    "tests for tagspan.evaluation"

    def test_perfect(self):
        labeler = FixedLabeler({('John', 'Smith', 'lives'):
                                [Span(0, 2, 'PER')]})
        listener = DetailedFMeasureListener()
        evaluator = SequenceLabelerEvaluator(labeler, [listener])
        scores = evaluator.evaluate([john_smith()])
        self.assertEqual(1, scores.general.true_positive)
        self.assertEqual(1., scores.precision())
        self.assertEqual(1., scores.recall())
        self.assertEqual(1., scores.fmeasure())
        self.assertEqual(1., evaluator.word_accuracy())
        self.assertEqual(1, listener.scores.samples)
        self.assertTrue(listener.report().startswith(
            'Evaluated 1 samples with 1 entities; found: 1 entities;'
            ' correct: 1.'))

    def test_overlaps_resolved(self):
        labeler = FixedLabeler({('John', 'Smith', 'lives'):
                                [Span(1, 3, 'X'), Span(0, 2, 'PER')]})
        evaluator = SequenceLabelerEvaluator(labeler)
        prediction = evaluator.process_sample(john_smith())
        self.assertEqual((Span(0, 2, 'PER'),), prediction.spans)
        self.assertEqual(0, evaluator.scores.general.false_positive)

    def test_partial(self):
        labeler = FixedLabeler({('John', 'Smith', 'lives'):
                                [Span(0, 1, 'PER')]})
        evaluator = SequenceLabelerEvaluator(labeler)
        scores = evaluator.evaluate([john_smith()])
        self.assertEqual(0., scores.precision())
        self.assertEqual(-1., scores.fmeasure())
        self.assertAlmostEqual(2. / 3, evaluator.word_accuracy())

    def test_clear_adaptive_data(self):
        labeler = FixedLabeler({})
        evaluator = SequenceLabelerEvaluator(labeler)
        evaluator.evaluate([john_smith(clear=True), john_smith(),
                            john_smith(clear=True)])
        self.assertEqual(2, labeler.cleared)

    def test_listeners(self):
        calls = []

        class Recorder(DetailedFMeasureListener):
            "remember which callback we got"
            def correctly_classified(self, reference, prediction):
                calls.append(True)

            def misclassified(self, reference, prediction):
                calls.append(False)

        labeler = FixedLabeler({('John', 'Smith', 'lives'):
                                [Span(0, 2, 'PER')]})
        evaluator = SequenceLabelerEvaluator(labeler, [Recorder()])
        evaluator.evaluate([john_smith(), Sample(['Bob'], [Span(0, 1, 'PER')])])
        self.assertEqual([True, False], calls)

    def test_untyped_reference(self):
        labeler = FixedLabeler({('a', 'b'): [Span(0, 1, DEFAULT_TYPE)]})
        evaluator = SequenceLabelerEvaluator(labeler)
        scores = evaluator.evaluate([Sample(['a', 'b'], [Span(0, 1)])])
        self.assertEqual(1., scores.fmeasure())

    def test_document_classifier(self):
        samples = [DocSample('sport', ['goal']),
                   DocSample('politics', ['vote'])]
        evaluator = DocumentClassifierEvaluator(ConstantClassifier('sport'))
        accuracy = evaluator.evaluate(samples)
        self.assertEqual(0.5, accuracy.mean())

    def test_model_cache(self):
        loaded = []

        def loader(path):
            "pretend to load a model"
            loaded.append(path)
            return 'model:' + path

        cache = ModelCache()
        self.assertEqual('model:en.bin', cache.get('en', 'en.bin', loader))
        self.assertEqual('model:en.bin', cache.get('en', 'en.bin', loader))
        self.assertEqual('model:en.bin', cache.get('eu', 'en.bin', loader))
        self.assertEqual(['en.bin', 'en.bin'], loaded)
        self.assertEqual(2, len(cache))
        self.assertTrue(('en', 'en.bin') in cache)


# ---------------------------------------------------------------------
# cross-validation
# ---------------------------------------------------------------------


class CrossValidationTest(unittest.TestCase):
    "tests for tagspan.crossval"

    def test_partition(self):
        self.assertEqual([[0, 1, 2], [3, 4]], partition(range(5), 2))
        folds = partition(range(10), 3)
        self.assertEqual([4, 3, 3], [len(f) for f in folds])
        self.assertEqual(list(range(10)), [x for f in folds for x in f])
        self.assertEqual([[0], [1], []], partition(range(2), 3))
        self.assertRaises(ConfigurationError, partition, range(5), 1)

    def test_partition_sizes(self):
        for n_items in range(0, 23):
            for n_folds in range(2, 7):
                folds = partition(range(n_items), n_folds)
                sizes = [len(f) for f in folds]
                self.assertEqual(n_folds, len(folds))
                self.assertEqual(n_items, sum(sizes))
                self.assertTrue(max(sizes) - min(sizes) <= 1)
                self.assertEqual(sorted(sizes, reverse=True), sizes)

    def test_group_documents(self):
        samples = [john_smith(clear=c)
                   for c in [False, False, True, False, True]]
        docs = group_documents(samples)
        self.assertEqual([2, 2, 1], [len(d) for d in docs])
        self.assertEqual([], group_documents([]))

    def test_cross_validate(self):
        samples = [john_smith() for _ in range(4)]
        validator = CrossValidator(GazetteerTrainer(), n_folds=2)
        scores = validator.evaluate(samples)
        self.assertEqual(4, scores.samples)
        self.assertEqual(4, scores.general.true_positive)
        self.assertEqual(1., scores.fmeasure())
        self.assertEqual(2, len(validator.fold_scores))
        self.assertTrue('fold' in validator.fold_table())

    def test_parallel_folds(self):
        samples = [john_smith(clear=(i % 2 == 0)) for i in range(6)] +\
            [Sample(['Paris'], [Span(0, 1, 'LOC')])]
        listener = DetailedFMeasureListener()
        sequential = CrossValidator(GazetteerTrainer(), n_folds=3,
                                    by_document=True).evaluate(samples)
        validator = CrossValidator(GazetteerTrainer(), n_folds=3,
                                   listeners=[listener],
                                   by_document=True, workers=3)
        parallel = validator.evaluate(samples)
        self.assertEqual(sequential.report(), parallel.report())
        self.assertEqual(parallel.report(), listener.report())
        self.assertEqual(7, parallel.samples)

    def test_settings(self):
        self.assertRaises(ConfigurationError, CrossValidator,
                          GazetteerTrainer(), n_folds=1)
        self.assertRaises(ConfigurationError, CrossValidator,
                          GazetteerTrainer(), workers=0)

    def test_failed_fold(self):
        class PickyTrainer(Trainer):
            "cannot train without the Paris sample"
            def train(self, samples):
                if not any('Paris' in s.tokens for s in samples):
                    raise ValueError("no Paris")
                return GazetteerTrainer().train(samples)

        samples = [john_smith() for _ in range(5)] +\
            [Sample(['Paris'], [Span(0, 1, 'LOC')])]
        for workers in [1, 3]:
            validator = CrossValidator(PickyTrainer(), n_folds=3,
                                       workers=workers)
            self.assertRaises(ValueError, validator.evaluate, samples)

    def test_shared_error_reporter(self):
        class BlindTrainer(Trainer):
            "finds nothing"
            def train(self, samples):
                return FixedLabeler({})

        samples = [Sample(['w%d' % i, 'x'], [Span(0, 1, 'T')])
                   for i in range(12)]
        stream = io.StringIO()
        validator = CrossValidator(BlindTrainer(), n_folds=4,
                                   listeners=[ErrorReporter(stream)],
                                   workers=4)
        validator.evaluate(samples)
        blocks = stream.getvalue().strip().split('\n\n')
        self.assertEqual(12, len(blocks))
        for block in blocks:
            first, error = block.split('\n')
            self.assertTrue(first.startswith('<START:T> w'))
            self.assertTrue(error.startswith('\tfalse negative: [0..1) T [w'))

    def test_io_error(self):
        class Broken(object):
            "a corpus that fails while being read"
            def __iter__(self):
                yield john_smith()
                raise IOError("disk on fire")

        validator = CrossValidator(GazetteerTrainer(), n_folds=2)
        self.assertRaises(IOError, validator.evaluate, Broken())


# ---------------------------------------------------------------------
# source files
# ---------------------------------------------------------------------


class LicenseHeaderTest(unittest.TestCase):
    "every module opens with the license line"

    def test_headers(self):
        root = os.path.dirname(os.path.abspath(__file__))
        for dirpath, _, filenames in os.walk(root):
            for name in filenames:
                if not name.endswith('.py'):
                    continue
                path = os.path.join(dirpath, name)
                with codecs.open(path, 'r', 'utf-8') as stream:
                    head = [stream.readline().strip() for _ in range(4)]
                head = [x for x in head if x and x != '#' and
                        not x.startswith('#!') and 'coding' not in x]
                self.assertEqual('# License: BSD3', head[0], path)
