#! /usr/bin/env python
# -*- coding: utf-8 -*-

# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

""" Main functionality of ScaffoldLift

"""
import sys
import argparse

from scaffoldlift import __version__
from .cli import transpose as cli_transpose
from .cli import concatenate as cli_concatenate
from .core.errors import ScaffoldLiftError


USAGE = ''' %(prog)s <command> [<args>]

The most commonly used commands are:
   transpose      Transpose annotation from an old genome version to a new one
   concatenate    Concatenate FASTA alignments by sequence identifier

'''


def build_parser():
    parser = argparse.ArgumentParser(
        description='Tools for moving annotation between genome assembly versions',
    )
    parser.add_argument('--version',
        action='version',
        version=__version__,
        default=__version__,
    )

    subparser = parser.add_subparsers(help='Sub-command help', dest='subcommand')

    ''' Parser for transpose '''
    transpose_parser = subparser.add_parser('transpose',
        description='''Transpose annotation from a previous genome version to a
                       new one using the same scaffolds''',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    cli_transpose.TransposeOptions.add_arguments(transpose_parser)
    transpose_parser.set_defaults(func=cli_transpose.run)

    ''' Parser for concatenate '''
    concatenate_parser = subparser.add_parser('concatenate',
        description='''Concatenate FASTA alignments by sequence identifier''',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    cli_concatenate.ConcatenateOptions.add_arguments(concatenate_parser)
    concatenate_parser.set_defaults(func=cli_concatenate.run)

    return parser


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) == 0:
        empty_parser = argparse.ArgumentParser(
            description='Tools for moving annotation between genome assembly versions',
            usage=USAGE,
        )
        empty_parser.print_help(sys.stderr)
        sys.exit(1)

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.subcommand is None:
        parser.print_help(sys.stderr)
        sys.exit(1)
    try:
        args.func(args)
    except ScaffoldLiftError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

if __name__ == '__main__':
    main()
