# -*- coding: utf-8 -*-

# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""End-to-end tests for annotation transposition: Transposer and CLI."""

import os
import shutil

import pandas as pd
import pytest

from scaffoldlift.__main__ import main
from scaffoldlift.annotation import get_overlap_class
from scaffoldlift.core.errors import MalformedAnnotationError
from scaffoldlift.core.registry import ScaffoldRegistry
from scaffoldlift.core.transposer import Transposer
from scaffoldlift.formats import get_adapter
from scaffoldlift.tests import TEST_DATA_DIR

OLD_GFF = os.path.join(TEST_DATA_DIR, 'old.gff3')
NEW_GFF = os.path.join(TEST_DATA_DIR, 'new.gff3')
FEATURES_GFF = os.path.join(TEST_DATA_DIR, 'features.gff3')
VARIANTS_VCF = os.path.join(TEST_DATA_DIR, 'variants.vcf')
FEATURES_TABLE = os.path.join(TEST_DATA_DIR, 'features.old.wo')

EXPECTED_GFF = [
    'chrA\tmaker\tgene\t5100\t5150\t.\t+\t.\tID=gene1',
    'chrA\tmaker\tgene\t801\t900\t0.5\t-\t.\tID=gene2',
    'chrB\tmaker\tgene\t541\t590\t.\t+\t.\tID=gene4',
]

EXPECTED_VCF = [
    'chrA\t5120\trs1\tA\tT\t50\tPASS\tDP=10',
    'chrA\t851\trs2\tGT\tC\t40\tPASS\tDP=12',
]


def read_text(path):
    with open(path) as fh:
        return fh.read()


def read_lines(path):
    return read_text(path).splitlines()


def transpose(annotation, output, provider=None):
    registry = ScaffoldRegistry.from_gff(NEW_GFF)
    adapter = get_adapter(annotation)
    provider = provider or get_overlap_class('intervaltree')(OLD_GFF)
    return Transposer(registry, adapter, provider).run(output)


# =========================================================================
# Transposer
# =========================================================================

class TestTransposer:
    def test_gff(self, tmp_path):
        output = str(tmp_path / 'out.gff3')
        stats = transpose(FEATURES_GFF, output)
        assert read_lines(output) == EXPECTED_GFF
        assert stats.overlap_rows == 4
        assert stats.num_transposed == 3
        assert stats.missing == {'S4': 1}

    def test_gff_from_table(self, tmp_path):
        output = str(tmp_path / 'out.gff3')
        transpose(FEATURES_GFF, output, get_overlap_class('table')(FEATURES_TABLE))
        assert read_lines(output) == EXPECTED_GFF

    def test_vcf(self, tmp_path):
        output = str(tmp_path / 'out.vcf')
        stats = transpose(VARIANTS_VCF, output)
        lines = read_lines(output)
        assert lines[:4] == read_lines(VARIANTS_VCF)[:4]
        assert lines[4:] == EXPECTED_VCF
        assert stats.num_transposed == 2
        assert stats.num_missing == 1

    def test_missing_scaffold_is_logged(self, tmp_path, caplog):
        with caplog.at_level('WARNING'):
            transpose(FEATURES_GFF, str(tmp_path / 'out.gff3'))
        assert 'No S4 found in the new genome version' in caplog.text

    def test_fatal_error_leaves_no_output(self, tmp_path):
        old_gff = tmp_path / 'old.gff3'
        old_gff.write_text(
            'chr1\tassembly\tscaffold\t1000\t2000\t.\t+\t.\tName=no_id\n'
        )
        output = tmp_path / 'out.gff3'
        with pytest.raises(MalformedAnnotationError):
            transpose(FEATURES_GFF, str(output), get_overlap_class('intervaltree')(str(old_gff)))
        assert not output.exists()
        assert os.listdir(tmp_path) == ['old.gff3']

    def test_existing_output_kept_on_failure(self, tmp_path):
        table = tmp_path / 'bad.wo'
        table.write_text('chr1\t1\t2\n')
        output = tmp_path / 'out.gff3'
        output.write_text('previous\n')
        with pytest.raises(MalformedAnnotationError):
            transpose(FEATURES_GFF, str(output), get_overlap_class('table')(str(table)))
        assert output.read_text() == 'previous\n'

    def test_round_trip(self, tmp_path):
        forward = str(tmp_path / 'forward.gff3')
        transpose(FEATURES_GFF, forward)

        registry = ScaffoldRegistry.from_gff(OLD_GFF)
        back = str(tmp_path / 'back.gff3')
        Transposer(registry, get_adapter(forward), get_overlap_class('intervaltree')(NEW_GFF)).run(back)

        original = [l for l in read_lines(FEATURES_GFF) if 'gene1' in l or 'gene2' in l or 'gene4' in l]
        assert read_lines(back) == original


# =========================================================================
# Command line
# =========================================================================

class TestTransposeCLI:
    def test_gff(self, tmp_path, capsys):
        output = str(tmp_path / 'out.gff3')
        main(['transpose', OLD_GFF, NEW_GFF, FEATURES_GFF, output])
        assert read_lines(output) == EXPECTED_GFF
        assert 'Transposed 3 of 4 records' in capsys.readouterr().out

    def test_intersect_table(self, tmp_path):
        output = str(tmp_path / 'out.gff3')
        main(['transpose', OLD_GFF, NEW_GFF, FEATURES_GFF, output, '--intersect', FEATURES_TABLE, '--quiet'])
        assert read_lines(output) == EXPECTED_GFF

    def test_vcf_with_report(self, tmp_path):
        output = str(tmp_path / 'out.vcf')
        report = str(tmp_path / 'report.tsv')
        main(['transpose', OLD_GFF, NEW_GFF, VARIANTS_VCF, output, '--report', report, '--quiet'])
        assert read_lines(output)[4:] == EXPECTED_VCF

        with open(report) as fh:
            assert fh.readline().startswith('## RunInfo\toverlap_rows:3')
            df = pd.read_csv(fh, sep='\t')
        assert list(df['scaffold']) == ['S1', 'S2', 'S4']
        assert list(df['transposed']) == [1, 1, 0]
        assert list(df['skipped']) == [0, 0, 1]
        assert df.loc[0, 'new_sequence'] == 'chrA'

    def test_id_attribute(self, tmp_path):
        renamed = []
        for name in ('old.gff3', 'new.gff3'):
            path = tmp_path / name
            path.write_text(read_text(os.path.join(TEST_DATA_DIR, name)).replace('ID=S', 'ID=x;scaffold=S'))
            renamed.append(str(path))
        output = str(tmp_path / 'out.gff3')
        main(['transpose', *renamed, FEATURES_GFF, output, '--id_attribute', 'scaffold', '--quiet'])
        assert read_lines(output) == EXPECTED_GFF

    def test_missing_input(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['transpose', str(tmp_path / 'nope.gff3'), NEW_GFF, FEATURES_GFF, str(tmp_path / 'out.gff3')])
        assert excinfo.value.code == 1
        assert 'Cannot find' in capsys.readouterr().err
        assert not (tmp_path / 'out.gff3').exists()

    def test_empty_output_path(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['transpose', OLD_GFF, NEW_GFF, FEATURES_GFF, ''])
        assert excinfo.value.code == 1
        assert 'did not specify an output file' in capsys.readouterr().err

    def test_missing_output_directory(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['transpose', OLD_GFF, NEW_GFF, FEATURES_GFF, str(tmp_path / 'no' / 'out.gff3')])
        assert excinfo.value.code == 1

    def test_unknown_format(self, tmp_path, capsys):
        bed = tmp_path / 'features.bed'
        shutil.copy(FEATURES_GFF, bed)
        with pytest.raises(SystemExit) as excinfo:
            main(['transpose', OLD_GFF, NEW_GFF, str(bed), str(tmp_path / 'out.bed')])
        assert excinfo.value.code == 1
        assert 'Cannot tell the format' in capsys.readouterr().err

    def test_table_mode_requires_intersect(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['transpose', OLD_GFF, NEW_GFF, FEATURES_GFF, str(tmp_path / 'out.gff3'),
                  '--overlap_class', 'table'])
        assert excinfo.value.code == 1
        assert '--intersect' in capsys.readouterr().err

    def test_no_arguments(self):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 1
