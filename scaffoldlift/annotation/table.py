# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

import logging as lg

from . import OverlapRow
from ..core.errors import MalformedAnnotationError
from .gff_utils import GFFRow

# 9 scaffold GFF columns followed by the overlap length
_TRAILING_COLUMNS = 10


class _OverlapTable:
    """Overlap rows read from a precomputed intersection table.

    The table is the output of
    ``intersectBed -a <features> -b <old scaffolds> -f 1.0 -wo``: the feature
    columns, then the scaffold's GFF columns, then the overlap in bp.
    """

    def __init__(self, table_file):
        lg.debug(f'Using precomputed overlap table {table_file}.')
        self.table_file = table_file

    def intersect(self, adapter=None):
        n_rows = 0
        with open(self.table_file) as fh:
            for rownum, line in enumerate(fh, 1):
                line = line.rstrip('\r\n')
                if not line.strip():
                    continue
                cols = line.split('\t')
                if len(cols) <= _TRAILING_COLUMNS:
                    raise MalformedAnnotationError(
                        f'{self.table_file} line {rownum}: expected feature columns '
                        f'followed by 9 scaffold columns and an overlap, found {len(cols)} columns'
                    )
                try:
                    overlap = int(cols[-1])
                except ValueError:
                    raise MalformedAnnotationError(
                        f'{self.table_file} line {rownum}: invalid overlap {cols[-1]!r}'
                    ) from None
                n_rows += 1
                yield OverlapRow(
                    tuple(cols[:-_TRAILING_COLUMNS]),
                    GFFRow(*cols[-_TRAILING_COLUMNS:-1]),
                    overlap,
                )
        lg.info(f'{n_rows} overlap rows read from {self.table_file}')
