# License: BSD3

"""
Score a dictionary labeller against a reference corpus

The labeller finds every occurrence of the entries of a gazetteer
(`expression TAB type`) or of a multiword lexicon; overlapping matches
are resolved before scoring.
"""

import sys

from ..errors import ConfigurationError
from ..evaluation import ErrorReporter, ModelCache, SequenceLabelerEvaluator
from ..formats import DocReader
from ..lexicon import DictionaryLabeler, load_gazetteer, load_multiwords
from ..util import add_corpus_args, read_corpus_from_args

NAME = 'evaluate'

OUTPUTS = ['report', 'summary', 'table', 'errors']


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_corpus_args(parser)
    lexicon = parser.add_mutually_exclusive_group(required=True)
    lexicon.add_argument('--gazetteer', metavar='FILE',
                         help='expression TAB type dictionary')
    lexicon.add_argument('--multiwords', metavar='FILE',
                         help='multiword lexicon')
    parser.add_argument('--language', default='en',
                        help='language of the dictionary'
                        ' (default: %(default)s)')
    parser.add_argument('--output',
                        choices=OUTPUTS,
                        default='report',
                        help='what to print (default: %(default)s)')
    parser.set_defaults(func=main)


def load_labeler(args, cache):
    """
    The dictionary labeller named on the command line, its dictionary
    loaded through the cache
    """
    if args.gazetteer:
        matcher = cache.get(args.language, args.gazetteer, load_gazetteer)
    else:
        matcher = cache.get(args.language, args.multiwords,
                            load_multiwords)
    return DictionaryLabeler(matcher)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    if args.format == DocReader.name:
        raise ConfigurationError("Cannot label spans in a %s corpus"
                                 % args.format)
    listeners = []
    if args.output == 'errors':
        listeners.append(ErrorReporter(sys.stdout))
    evaluator = SequenceLabelerEvaluator(load_labeler(args, ModelCache()),
                                         listeners)
    scores = evaluator.evaluate(read_corpus_from_args(args))
    if args.output == 'report':
        print(scores.report())
        print("Word accuracy: %.4f" % evaluator.word_accuracy())
    elif args.output == 'summary':
        print(scores.summary())
    elif args.output == 'table':
        print(scores.table())
