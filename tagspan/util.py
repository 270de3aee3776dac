# License: BSD3

"""
Miscellaneous utility functions, mostly for script-building
"""

from itertools import chain

from .codec import CODECS, DEFAULT_CODEC
from .formats import (CORPUS_FORMATS, DOCSTART, ClearFeatures,
                      filter_types, read_corpus)


def concat_l(items):
    ":: [[a]] -> [a]"
    return list(chain.from_iterable(items))


def add_subcommand(subparsers, module):
    '''
    Add a subcommand to an argparser following some conventions:

        - the module can have an optional NAME constant
          (giving the name of the command); otherwise we
          assume it's the unqualified module name
        - the first line of its docstring is its help text
        - subsequent lines (if any) form its epilog

    Returns the resulting subparser for the module
    '''
    if 'NAME' in module.__dict__:
        module_name = module.NAME
    else:
        module_name = module.__name__.split('.')[-1]

    module_help_parts = [x for x in module.__doc__.strip().split('\n', 1)
                         if x]
    if len(module_help_parts) > 1:
        module_help = module_help_parts[0]
        module_epilog = '\n'.join(module_help_parts[1:]).strip()
    else:
        module_help = module.__doc__.strip()
        module_epilog = None
    return subparsers.add_parser(module_name,
                                 help=module_help,
                                 epilog=module_epilog)


def add_corpus_args(parser):
    """
    For help with script-building:

    Augment an argparser with a corpus path and the options that say
    how to read it
    """
    parser.add_argument('corpus',
                        metavar='FILE',
                        help='corpus file (UTF-8)')
    parser.add_argument('--format',
                        choices=sorted(CORPUS_FORMATS),
                        default='conll02',
                        help='corpus format (default: %(default)s)')
    parser.add_argument('--codec',
                        choices=sorted(CODECS),
                        default=DEFAULT_CODEC,
                        help='tag codec for CoNLL formats'
                        ' (default: %(default)s)')
    parser.add_argument('--clear-features',
                        choices=[x.value for x in ClearFeatures],
                        default=ClearFeatures.no.value,
                        help='which samples reset document level state'
                        ' (default: %(default)s)')
    parser.add_argument('--doc-marker',
                        default=DOCSTART,
                        help='document boundary marker'
                        ' (default: %(default)s)')
    parser.add_argument('--skip-errors',
                        action='store_true',
                        help='skip malformed samples (with a warning)')
    parser.add_argument('--types',
                        metavar='TYPE',
                        nargs='+',
                        help='only consider spans of these types')


def read_corpus_from_args(args):
    """
    The samples from the corpus named on the command line (see
    `add_corpus_args`)
    """
    reader = read_corpus(args.corpus, args.format,
                         codec=args.codec,
                         clear_features=args.clear_features,
                         skip_errors=args.skip_errors,
                         doc_marker=args.doc_marker)
    if args.types:
        return filter_types(reader, args.types)
    return reader
