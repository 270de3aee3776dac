# License: BSD3

"""
tagspan subcommands
"""

import argparse
import sys

from ..errors import TagspanException
from ..util import add_subcommand
from . import (convert,
               cross_validate,
               evaluate)

SUBCOMMANDS = [evaluate,
               cross_validate,
               convert]


def make_argparser():
    """
    Argument parser with every subcommand
    """
    psr = argparse.ArgumentParser(description='span labelling toolkit')
    subparsers = psr.add_subparsers(title='subcommands')
    subparsers.required = True
    subparsers.dest = 'subcommand'
    for module in SUBCOMMANDS:
        subparser = add_subcommand(subparsers, module)
        module.config_argparser(subparser)
    return psr


def main(argv=None):
    """
    Run the subcommand named on the command line; our own errors
    and I/O errors are reported without a traceback
    """
    args = make_argparser().parse_args(argv)
    try:
        args.func(args)
    except (TagspanException, IOError) as oops:
        sys.exit(str(oops))
