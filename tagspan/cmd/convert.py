# License: BSD3

"""
Rewrite a corpus in another format (or with another tag codec)
"""

import codecs
import sys

from ..codec import CODECS, DEFAULT_CODEC
from ..errors import ConfigurationError
from ..formats import SPAN_FORMATS, DocReader, write_corpus
from ..util import add_corpus_args, read_corpus_from_args

NAME = 'convert'


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_corpus_args(parser)
    parser.add_argument('--to', dest='output_format',
                        choices=SPAN_FORMATS,
                        required=True,
                        help='output format')
    parser.add_argument('--to-codec', dest='output_codec',
                        choices=sorted(CODECS),
                        default=DEFAULT_CODEC,
                        help='tag codec for CoNLL output'
                        ' (default: %(default)s)')
    parser.add_argument('--output', '-o', metavar='FILE',
                        help='output file (default: stdout)')
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    if args.format == DocReader.name:
        raise ConfigurationError("Cannot convert a %s corpus" % args.format)
    samples = read_corpus_from_args(args)
    if args.output:
        with codecs.open(args.output, 'w', 'utf-8') as stream:
            write_corpus(samples, args.output_format, stream,
                         codec=args.output_codec,
                         doc_marker=args.doc_marker)
    else:
        write_corpus(samples, args.output_format, sys.stdout,
                     codec=args.output_codec,
                     doc_marker=args.doc_marker)
