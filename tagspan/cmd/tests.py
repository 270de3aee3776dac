# License: BSD3
# pylint: disable=too-many-public-methods, invalid-name

"""
Tests for the tagspan command line
"""

from contextlib import redirect_stdout
import codecs
import io
import os
import shutil
import tempfile
import unittest

from tagspan.cmd import main
from tagspan.formats import read_corpus

CORPUS = ['-DOCSTART-\tO',
          '',
          'John\tB-PER',
          'Smith\tI-PER',
          'lives\tin',
          '',
          'John\tB-PER',
          'Smith\tI-PER',
          'visits\tO',
          'Paris\tB-LOC',
          '',
          '-DOCSTART-\tO',
          '',
          'Bob\tB-PER',
          'likes\tO',
          'Paris\tB-LOC',
          '',
          'Mary\tB-PER',
          '']


class CommandTest(unittest.TestCase):
    "running subcommands end to end"

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.corpus = self.write_file('corpus.conll', CORPUS)
        self.gazetteer = self.write_file('gaz.txt', ['john smith\tPER',
                                                     'paris\tLOC'])

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def write_file(self, name, lines):
        "write lines to a file in the temporary directory"
        path = os.path.join(self.tmpdir, name)
        with codecs.open(path, 'w', 'utf-8') as stream:
            for line in lines:
                stream.write(line + '\n')
        return path

    def run_main(self, argv):
        "run the command line, return what it printed"
        stream = io.StringIO()
        with redirect_stdout(stream):
            main(argv)
        return stream.getvalue()

    def test_evaluate(self):
        # 'lives\tin' is not a BIO tag
        with self.assertRaises(SystemExit) as cm:
            self.run_main(['evaluate', self.corpus,
                           '--gazetteer', self.gazetteer])
        self.assertTrue('line 5' in str(cm.exception.code))

    def test_evaluate_report(self):
        lines = [x if x != 'lives\tin' else 'lives\tO' for x in CORPUS]
        corpus = self.write_file('fixed.conll', lines)
        output = self.run_main(['evaluate', corpus,
                                '--gazetteer', self.gazetteer])
        self.assertTrue(output.startswith(
            'Evaluated 4 samples with 6 entities; found: 4 entities;'
            ' correct: 4.'))
        self.assertTrue('Word accuracy' in output)
        summary = self.run_main(['evaluate', corpus, '--output', 'summary',
                                 '--gazetteer', self.gazetteer])
        self.assertTrue(summary.startswith('Precision: 1.0'))
        errors = self.run_main(['evaluate', corpus, '--output', 'errors',
                                '--gazetteer', self.gazetteer])
        self.assertTrue('false negative: [0..1) PER [Bob]' in errors)

    def test_skip_errors(self):
        output = self.run_main(['evaluate', self.corpus, '--skip-errors',
                                '--gazetteer', self.gazetteer])
        self.assertTrue(output.startswith('Evaluated 3 samples'))

    def test_missing_file(self):
        with self.assertRaises(SystemExit):
            self.run_main(['evaluate', os.path.join(self.tmpdir, 'nope'),
                           '--gazetteer', self.gazetteer])

    def test_cross_validate(self):
        output = self.run_main(['cross-validate', self.corpus,
                                '--skip-errors', '--folds', '3',
                                '--summary'])
        self.assertTrue(output.startswith('Precision:'))
        output = self.run_main(['cross-validate', self.corpus,
                                '--skip-errors', '--folds', '2',
                                '--by-document', '--workers', '2',
                                '--clear-features', 'docstart'])
        self.assertTrue('fold' in output)
        self.assertTrue('Evaluated 3 samples' in output)

    def test_bad_folds(self):
        with self.assertRaises(SystemExit):
            self.run_main(['cross-validate', self.corpus, '--folds', '1'])

    def test_convert(self):
        output = os.path.join(self.tmpdir, 'out.txt')
        self.run_main(['convert', self.corpus, '--skip-errors',
                       '--clear-features', 'docstart',
                       '--to', 'conll02', '--to-codec', 'BILOU',
                       '--output', output])
        before = list(read_corpus(self.corpus, 'conll02',
                                  clear_features='docstart',
                                  skip_errors=True))
        after = list(read_corpus(output, 'conll02', codec='BILOU',
                                 clear_features='docstart'))
        self.assertEqual(before, after)
        inline = self.run_main(['convert', self.corpus, '--skip-errors',
                                '--to', 'inline', '--types', 'LOC'])
        self.assertTrue('<START:LOC> Paris <END>' in inline)
        self.assertFalse('PER' in inline)
