# -*- coding: utf-8 -*-

# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Tests for FASTA alignment concatenation."""

import os
from collections import OrderedDict

import pytest

from scaffoldlift.__main__ import main
from scaffoldlift.core.errors import ConfigurationError
from scaffoldlift.formats.fasta import concatenate_alignments, delete_columns, read_alignment
from scaffoldlift.tests import TEST_DATA_DIR

ALN1 = os.path.join(TEST_DATA_DIR, 'aln1.fa')
ALN2 = os.path.join(TEST_DATA_DIR, 'aln2.fa')


class TestReadAlignment:
    def test_read(self):
        sequences, width = read_alignment(ALN1)
        assert width == 6
        assert sequences == OrderedDict([('sample_one', 'ACGT-A'), ('sample_two', 'AC-TTA')])

    def test_id_length(self):
        sequences, _ = read_alignment(ALN1, id_length=8)
        assert list(sequences) == ['sample_o', 'sample_t']

    def test_redundant_identifier(self, tmp_path):
        fasta = tmp_path / 'dup.fa'
        fasta.write_text('>sample_one\nAC\n>sample_two\nGT\n')
        with pytest.raises(ConfigurationError, match='redundant'):
            read_alignment(str(fasta), id_length=6)


class TestConcatenate:
    def test_missing_samples_are_padded(self):
        sequences = concatenate_alignments([ALN1, ALN2])
        assert sequences == OrderedDict([
            ('sample_one', 'ACGT-A???'),
            ('sample_two', 'AC-TTAGGC'),
            ('sample_three', '??????GNC'),
        ])

    def test_missing_char(self):
        sequences = concatenate_alignments([ALN1, ALN2], missing_char='N')
        assert sequences['sample_one'] == 'ACGT-ANNN'

    def test_all_same_width(self):
        sequences = concatenate_alignments([ALN2, ALN1, ALN2])
        assert {len(s) for s in sequences.values()} == {12}

    def test_delete_columns(self):
        sequences = delete_columns(concatenate_alignments([ALN1, ALN2]), {'-'})
        assert sequences == OrderedDict([
            ('sample_one', 'ACTA???'),
            ('sample_two', 'ACTAGGC'),
            ('sample_three', '????GNC'),
        ])

    def test_delete_nothing_found(self):
        sequences = concatenate_alignments([ALN1, ALN2])
        assert delete_columns(sequences, {'X'}) == sequences


class TestConcatenateCLI:
    def test_run(self, tmp_path):
        output = tmp_path / 'out.fa'
        main(['concatenate', '-i', ALN1, '-i', ALN2, '-o', str(output), '-d', '-', '--quiet'])
        assert output.read_text() == (
            '>sample_one\nACTA???\n'
            '>sample_two\nACTAGGC\n'
            '>sample_three\n????GNC\n'
        )

    def test_single_input(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['concatenate', '-i', ALN1, '-o', str(tmp_path / 'out.fa')])
        assert excinfo.value.code == 1
        assert 'only one input file' in capsys.readouterr().err

    def test_id_length_too_short(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['concatenate', '-i', ALN1, '-i', ALN2, '-o', str(tmp_path / 'out.fa'), '--id_length', '3'])
        assert excinfo.value.code == 1
        assert 'id_length' in capsys.readouterr().err

    def test_missing_input(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['concatenate', '-i', ALN1, '-i', str(tmp_path / 'nope.fa'), '-o', str(tmp_path / 'out.fa')])
        assert excinfo.value.code == 1
        assert 'Cannot find' in capsys.readouterr().err
