# -*- coding: utf-8 -*-

# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

""" ScaffoldLift concatenate

"""
import sys
import logging as lg

from . import SubcommandOptions, configure_logging, check_input_file, check_output_file
from ..core.errors import ConfigurationError
from ..formats.fasta import concatenate_alignments, delete_columns, write_fasta


class ConcatenateOptions(SubcommandOptions):

    OPTS = """
    - Input Options:
        - input:
            flags:
                - -i
            action: append
            required: True
            help: FASTA alignment to concatenate. Give this option once per
                  alignment, at least twice.
        - id_length:
            flags:
                - --id
            type: int
            default: 0
            help: Limit sequence names to this number of characters (at
                  least 4). Make sure truncated names still tell all
                  sequences apart. 0 uses the whole name.
    - Output Options:
        - output:
            flags:
                - -o
            required: True
            help: FASTA alignment with the concatenation of all inputs.
        - missing_char:
            flags:
                - -m
            default: "?"
            help: Character used where a sequence is missing from an
                  alignment.
        - delete:
            flags:
                - -d
            action: append
            help: Delete every column holding this character in any
                  sequence. May be given several times.
    - Reporting Options:
        - quiet:
            action: store_true
            help: Silence (most) output.
        - verbose:
            action: store_true
            help: Show detailed progress.
        - debug:
            action: store_true
            help: Print debug messages.
        - logfile:
            type: argparse.FileType('w')
            help: Log output to this file.
    """

    def __init__(self, args):
        super().__init__(args)
        if self.logfile is None:
            self.logfile = sys.stderr
        if self.delete is None:
            self.delete = []

    def validate(self):
        if not self.input or len(self.input) < 2:
            raise ConfigurationError('You provided no or only one input file')
        for path in self.input:
            check_input_file(path)
        check_output_file(self.output)
        if self.id_length and self.id_length < 4:
            raise ConfigurationError('id_length must be at least 4')
        if len(self.missing_char) != 1:
            raise ConfigurationError(f'missing_char must be a single character, got {self.missing_char!r}')
        for c in self.delete:
            if len(c) != 1:
                raise ConfigurationError(f'--delete takes single characters, got {c!r}')


def run(args):
    opts = ConcatenateOptions(args)
    console = configure_logging(opts)
    lg.info('\n{}\n'.format(opts))
    opts.validate()

    console.banner(opts.version, 'Alignment concatenation')
    console.section('Input')
    for path in opts.input:
        console.output_file(path)
    console.blank()

    sequences = concatenate_alignments(opts.input, opts.missing_char, opts.id_length)
    if opts.delete:
        sequences = delete_columns(sequences, set(opts.delete))
    write_fasta(sequences, opts.output)

    width = len(next(iter(sequences.values()), ''))
    console.status('Concatenated {:,} sequences, {:,} columns'.format(len(sequences), width))
    console.blank()
    console.section('Output')
    console.output_file(opts.output)
    console.blank()
    return sequences
