# License: BSD3

"""
K-fold cross-validation of a gazetteer labeller on a corpus

For each fold, the spans annotated in the other folds are memorised
into a dictionary, which is then used to label the held-out fold.
"""

from ..crossval import DEFAULT_FOLDS, CrossValidator
from ..errors import ConfigurationError
from ..formats import DocReader
from ..lexicon import GazetteerTrainer
from ..util import add_corpus_args, read_corpus_from_args

NAME = 'cross-validate'


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_corpus_args(parser)
    parser.add_argument('--folds', type=int,
                        default=DEFAULT_FOLDS,
                        help='number of folds (default: %(default)s)')
    parser.add_argument('--by-document', action='store_true',
                        help='keep documents together in folds')
    parser.add_argument('--workers', type=int, default=1,
                        help='folds to run in parallel'
                        ' (default: %(default)s)')
    parser.add_argument('--summary', action='store_true',
                        help='only print overall scores')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='report progress on stderr')
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    if args.format == DocReader.name:
        raise ConfigurationError("Cannot label spans in a %s corpus"
                                 % args.format)
    validator = CrossValidator(GazetteerTrainer(verbose=args.verbose),
                               n_folds=args.folds,
                               by_document=args.by_document,
                               workers=args.workers,
                               verbose=args.verbose)
    scores = validator.evaluate(read_corpus_from_args(args))
    if args.summary:
        print(scores.summary())
    else:
        print(validator.fold_table())
        print()
        print(scores.report())
