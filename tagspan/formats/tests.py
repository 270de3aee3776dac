# License: BSD3
# pylint: disable=too-many-public-methods, invalid-name

"""
Tests for tagspan.formats
"""

import codecs
import io
import os
import shutil
import tempfile
import unittest

from tagspan.annotation import DocSample, Sample, Span
from tagspan.editscript import decode_lemmas
from tagspan.errors import ConfigurationError, FormatError
from tagspan.formats import (ClearFeatures, CoNLL02Reader, CoNLL03Reader,
                             DocReader, InlineReader, LemmatizerReader,
                             LineSource, TabulatedReader, filter_types,
                             parse_inline, read_corpus, reader_for_format,
                             write_conll, write_corpus, write_tabulated)

CONLL = ['John\tB-PER',
         'Smith\tI-PER',
         'lives\tO',
         '',
         '',
         'Paris\tB-LOC',
         '']

DOCSTART_CONLL = ['-DOCSTART-\tO',
                  '',
                  'John\tB-PER',
                  '',
                  'Paris\tB-LOC',
                  '',
                  '-DOCSTART-\tO',
                  '',
                  'Bob\tB-PER']


class ConllTest(unittest.TestCase):
    "tests for the CoNLL readers"

    def test_read(self):
        samples = list(CoNLL02Reader(CONLL))
        self.assertEqual(2, len(samples))
        self.assertEqual(Sample(['John', 'Smith', 'lives'],
                                [Span(0, 2, 'PER')]), samples[0])
        self.assertEqual((Span(0, 1, 'LOC'),), samples[1].spans)
        self.assertFalse(samples[0].clear_adaptive_data)

    def test_reset(self):
        reader = CoNLL02Reader(CONLL)
        self.assertEqual(list(reader), list(reader))

    def test_bilou(self):
        lines = ['New\tB-LOC', 'York\tL-LOC', 'is\tO', 'big\tU-ADJ']
        sample = list(CoNLL02Reader(lines, codec='BILOU'))[0]
        self.assertEqual((Span(0, 2, 'LOC'), Span(3, 4, 'ADJ')), sample.spans)
        self.assertRaises(FormatError, list, CoNLL02Reader(lines))

    def test_bad_tag(self):
        try:
            list(CoNLL02Reader(['John\tB-PER', 'Smith\tX-PER']))
            self.fail('expected a FormatError')
        except FormatError as oops:
            self.assertEqual(2, oops.line)

    def test_bad_line(self):
        lines = ['John\tB-PER', '', 'Smith', 'lives\tO', '', 'Paris\tB-LOC']
        try:
            list(CoNLL02Reader(lines))
            self.fail('expected a FormatError')
        except FormatError as oops:
            self.assertEqual(3, oops.line)
            self.assertTrue(str(oops).startswith('line 3:'))
        with self.assertWarns(UserWarning):
            samples = list(CoNLL02Reader(lines, skip_errors=True))
        self.assertEqual(['John', 'Paris'], [s.tokens[0] for s in samples])

    def test_conll03(self):
        lines = ['U.N.  NNP  I-NP  B-ORG', 'official NN I-NP O',
                 '', 'Ekeus NNP I-NP I-PER']
        samples = list(CoNLL03Reader(lines))
        self.assertEqual(('U.N.', 'official'), samples[0].tokens)
        self.assertEqual((Span(0, 1, 'ORG'),), samples[0].spans)
        self.assertEqual((Span(0, 1, 'PER'),), samples[1].spans)
        self.assertRaises(FormatError, list, CoNLL03Reader(['alone']))

    def test_write(self):
        sample = Sample(['John', 'Smith', 'lives'], [Span(0, 2, 'PER')])
        self.assertEqual(['John\tB-PER', 'Smith\tI-PER', 'lives\tO'],
                         write_conll(sample))
        self.assertEqual(['John\tB-PER', 'Smith\tL-PER', 'lives\tO'],
                         write_conll(sample, 'BILOU'))


class ClearFeaturesTest(unittest.TestCase):
    "document boundaries"

    def test_from_string(self):
        self.assertEqual(ClearFeatures.docstart,
                         ClearFeatures.from_string('DocStart'))
        self.assertEqual(ClearFeatures.yes,
                         ClearFeatures.from_string(ClearFeatures.yes))
        self.assertRaises(ConfigurationError,
                          ClearFeatures.from_string, 'maybe')

    def flags(self, setting, lines=None):
        "clear flags of the samples read with a setting"
        reader = CoNLL02Reader(lines or DOCSTART_CONLL,
                               clear_features=setting)
        return [s.clear_adaptive_data for s in reader]

    def test_docstart(self):
        self.assertEqual([True, False, True], self.flags('docstart'))

    def test_yes_no(self):
        self.assertEqual([True, True, True], self.flags('yes'))
        self.assertEqual([False, False, False], self.flags('no'))

    def test_marker_needs_blank(self):
        lines = ['-DOCSTART-\tO', 'John\tB-PER']
        self.assertRaises(FormatError, self.flags, 'docstart', lines)

    def test_marker_needs_blank_skipped(self):
        lines = ['-DOCSTART-\tO', 'John\tB-PER', '', 'Paris\tB-LOC', '']
        reader = CoNLL02Reader(lines, clear_features='docstart',
                               skip_errors=True)
        with self.assertWarns(UserWarning):
            samples = list(reader)
        self.assertEqual([('Paris',)], [s.tokens for s in samples])
        self.assertTrue(samples[0].clear_adaptive_data)

    def test_marker_contributes_no_tokens(self):
        samples = list(CoNLL02Reader(DOCSTART_CONLL))
        self.assertEqual([('John',), ('Paris',), ('Bob',)],
                         [s.tokens for s in samples])


class TabulatedTest(unittest.TestCase):
    "tests for the tabulated and lemmatizer readers"

    def test_tabulated(self):
        sample = list(TabulatedReader(['John\tNNP', 'runs\tVBZ']))[0]
        self.assertEqual((Span(0, 1, 'NNP'), Span(1, 2, 'VBZ')), sample.spans)
        self.assertEqual(['John\tNNP', 'runs\tVBZ'], write_tabulated(sample))

    def test_lemmatizer(self):
        sample = list(LemmatizerReader(['walked\twalk', 'dogs\tdog',
                                        'The\tthe']))[0]
        self.assertEqual(['D1:eD0:d', 'D0:s', 'O'],
                         [s.type for s in sample.spans])
        self.assertEqual(['walk', 'dog', 'the'],
                         decode_lemmas(sample.tokens, sample.spans))

    def test_missing_column(self):
        self.assertRaises(FormatError, list, TabulatedReader(['John\t']))


class InlineTest(unittest.TestCase):
    "tests for inline markup"

    def test_parse(self):
        sample = parse_inline('<START:PER> John Smith <END> lives in'
                              ' <START:LOC> Paris <END>')
        self.assertEqual(('John', 'Smith', 'lives', 'in', 'Paris'),
                         sample.tokens)
        self.assertEqual((Span(0, 2, 'PER'), Span(4, 5, 'LOC')),
                         sample.spans)
        self.assertEqual(sample, parse_inline(str(sample)))

    def test_default_type(self):
        sample = parse_inline('<START> x <END> y')
        self.assertEqual((Span(0, 1, 'default'),), sample.spans)

    def test_plain(self):
        self.assertEqual(Sample(['a', 'b']), parse_inline('a  b'))

    def test_errors(self):
        for bad in ['<START:> x <END>',
                    '<START:A> x <START:B> y <END> <END>',
                    'x <END>',
                    '<START:A> x',
                    '<START:A> <END>']:
            self.assertRaises(FormatError, parse_inline, bad)

    def test_reader(self):
        lines = ['<START:PER> John <END> sleeps', '', 'Paris']
        samples = list(InlineReader(lines, clear_features='docstart'))
        self.assertEqual([False, True],
                         [s.clear_adaptive_data for s in samples])
        try:
            list(InlineReader(['fine', 'x <END>']))
            self.fail('expected a FormatError')
        except FormatError as oops:
            self.assertEqual(2, oops.line)


class DocTest(unittest.TestCase):
    "tests for document classification corpora"

    def test_read(self):
        lines = ['sport\tReal Madrid won', 'broken', 'politics\tvote']
        with self.assertWarns(UserWarning):
            docs = list(DocReader(lines, skip_errors=True))
        self.assertEqual([DocSample('sport', ['Real', 'Madrid', 'won']),
                          DocSample('politics', ['vote'])], docs)
        self.assertRaises(FormatError, list, DocReader(lines))


class RegistryTest(unittest.TestCase):
    "reader_for_format and friends"

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_unknown(self):
        self.assertRaises(ConfigurationError, reader_for_format, 'nope', [])

    def test_codec_only_for_conll(self):
        reader = reader_for_format('conll02', CONLL, codec='BILOU')
        self.assertEqual('BILOU', reader.codec.name)
        reader = reader_for_format('tabulated', ['a\tb'], codec='BILOU')
        self.assertEqual(1, len(list(reader)))

    def test_line_source(self):
        path = os.path.join(self.tmpdir, 'corpus.txt')
        with codecs.open(path, 'w', 'utf-8') as stream:
            stream.write('Zürich\tB-LOC\r\n\r\nBob\tB-PER\n')
        reader = read_corpus(path, 'conll02')
        samples = list(reader)
        self.assertEqual([('Zürich',), ('Bob',)], [s.tokens for s in samples])
        self.assertEqual(samples, list(reader))
        self.assertRaises(IOError, list,
                          LineSource(os.path.join(self.tmpdir, 'nope')))

    def test_write_corpus(self):
        samples = list(CoNLL02Reader(DOCSTART_CONLL,
                                     clear_features='docstart'))
        for fmt in ['conll02', 'inline']:
            stream = io.StringIO()
            write_corpus(samples, fmt, stream)
            lines = stream.getvalue().splitlines()
            reread = list(reader_for_format(fmt, lines,
                                            clear_features='docstart'))
            self.assertEqual(samples, reread)
        self.assertRaises(ConfigurationError, write_corpus, samples, 'doc',
                          io.StringIO())

    def test_filter_types(self):
        samples = filter_types(CoNLL02Reader(CONLL), ['LOC'])
        self.assertEqual([(), (Span(0, 1, 'LOC'),)],
                         [s.spans for s in samples])
