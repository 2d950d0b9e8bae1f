# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Point variant adapter (VCF).

Header lines are copied to the output unchanged. The number of columns is
taken from the first line that does not start with ``##`` (normally the
``#CHROM`` line) and used to separate the variant columns from the scaffold
columns appended by the overlap provider.
"""

import logging as lg

from ..annotation.gff_utils import parse_coordinate
from ..core.errors import MalformedAnnotationError
from ..core.model import OverlapRecord, Strand
from ..core.remap import remap_position
from .abc import FormatAdapter

CHROM, POS, ID, REF, ALT = range(5)


class VariantAdapter(FormatAdapter):

    name = 'vcf'

    def __init__(self, path, id_attribute='ID'):
        super().__init__(path, id_attribute)
        self.header = []
        self.columns = None
        self._read_header()

    def _read_header(self):
        with open(self.path) as fh:
            for line in fh:
                if not line.endswith('\n'):
                    line += '\n'
                if line.startswith('##'):
                    self.header.append(line)
                    continue
                if line.startswith('#'):
                    self.header.append(line)
                self.columns = len(line.rstrip('\r\n').split('\t'))
                break
        lg.debug(f'{self.path}: {len(self.header)} header lines, {self.columns} columns')

    def read_features(self):
        with open(self.path) as fh:
            for rownum, line in enumerate(fh, 1):
                line = line.rstrip('\r\n')
                if not line.strip() or line.startswith('#'):
                    continue
                cols = line.split('\t')
                if len(cols) < 5:
                    raise MalformedAnnotationError(
                        f'Line {rownum}: expected at least 5 VCF columns, found {len(cols)}'
                    )
                yield tuple(cols)

    def locate(self, columns):
        # the reference allele must lie entirely in the scaffold
        pos = parse_coordinate(columns[POS], 'variant position')
        return columns[CHROM], pos, pos + max(len(columns[REF]), 1) - 1

    def parse(self, row):
        fields = tuple(row.feature[:self.columns]) if self.columns else tuple(row.feature)
        if len(fields) < 5:
            raise MalformedAnnotationError(
                f'Expected at least 5 VCF columns for the variant, found {len(fields)}'
            )
        pos = parse_coordinate(fields[POS], 'variant position')
        return OverlapRecord(
            fields=fields,
            start=pos,
            end=pos,
            strand=Strand.FORWARD,
            scaffold=self.scaffold(row),
        )

    def remap(self, record, registry):
        return remap_position(record, registry)

    def write_header(self, outh):
        outh.writelines(self.header)

    def format(self, feature):
        f = list(feature.fields)
        f[CHROM] = feature.sequence_id
        f[POS] = str(feature.start)
        f[REF] = feature.ref
        f[ALT] = feature.alt
        return '\t'.join(f)
