# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Concatenation of FASTA alignments by sequence identifier."""

import logging as lg
from collections import OrderedDict

import pysam

from ..core.errors import ConfigurationError


def read_alignment(fasta_file, id_length=0):
    """Read one FASTA alignment.

    Args:
        fasta_file (str): Path to the alignment.
        id_length (int): Truncate identifiers to this many characters.
            0 keeps the whole identifier.

    Returns:
        (OrderedDict of str: str, int): Sequences by identifier, and the
        alignment width (length of the first sequence).
    """
    sequences = OrderedDict()
    width = 0
    with pysam.FastxFile(fasta_file) as fh:
        for entry in fh:
            name = entry.name[:id_length] if id_length else entry.name
            seq = entry.sequence or ''
            if not sequences:
                width = len(seq)
            if name in sequences:
                raise ConfigurationError(f'{name} seems to be a redundant identifier in {fasta_file}')
            sequences[name] = seq
    lg.debug(f'{fasta_file}: {len(sequences)} sequences, width {width}')
    return sequences, width


def concatenate_alignments(fasta_files, missing_char='?', id_length=0):
    """Concatenate alignments sample by sample.

    A sequence absent from one alignment is filled with ``missing_char`` for
    the width of that alignment.

    Returns:
        OrderedDict of str: str, in order of first appearance.
    """
    sequences = OrderedDict()
    total = 0
    for fasta_file in fasta_files:
        block, width = read_alignment(fasta_file, id_length)
        for name in sequences:
            if name not in block:
                sequences[name] += missing_char * width
        for name, seq in block.items():
            if name not in sequences:
                sequences[name] = missing_char * total
            sequences[name] += seq
        total += width
    return sequences


def delete_columns(sequences, to_delete):
    """Drop every column where any sequence holds one of ``to_delete``."""
    positions = set()
    for seq in sequences.values():
        positions.update(i for i, c in enumerate(seq) if c in to_delete)
    lg.debug(f'Deleting {len(positions)} columns')
    return OrderedDict(
        (name, ''.join(c for i, c in enumerate(seq) if i not in positions))
        for name, seq in sequences.items()
    )


def write_fasta(sequences, filename):
    with open(filename, 'w') as outh:
        for name, seq in sequences.items():
            outh.write(f'>{name}\n{seq}\n')
