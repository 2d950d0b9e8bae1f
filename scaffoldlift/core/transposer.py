# -*- coding: utf-8 -*-

# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Transposition of an annotation file from an old assembly to a new one."""

import logging as lg
import os
import tempfile
from collections import Counter
from dataclasses import dataclass, field

from .errors import ScaffoldNotFound


@dataclass
class TransposeStats:
    """Per-run counts."""
    overlap_rows: int = 0
    transposed: Counter = field(default_factory=Counter)   # {scaffold_id: n}
    missing: Counter = field(default_factory=Counter)      # {scaffold_id: n}

    @property
    def num_transposed(self):
        return sum(self.transposed.values())

    @property
    def num_missing(self):
        return sum(self.missing.values())

    def run_info(self):
        return {
            'overlap_rows': self.overlap_rows,
            'transposed': self.num_transposed,
            'skipped_missing_scaffold': self.num_missing,
            'missing_scaffolds': len(self.missing),
        }


class Transposer:
    """Drives overlap rows through an adapter and the remapper.

    Args:
        registry (ScaffoldRegistry): New-assembly scaffold placements.
        adapter (FormatAdapter): Adapter for the file to transpose.
        provider: Overlap provider with an ``intersect(adapter)`` method.
    """

    def __init__(self, registry, adapter, provider):
        self.registry = registry
        self.adapter = adapter
        self.provider = provider
        self.stats = TransposeStats()

    def transpose_rows(self, rows):
        """Yield a :class:`TransposedFeature` per row whose scaffold is placed.

        Rows on scaffolds missing from the new assembly are counted in
        :attr:`stats` and skipped.
        """
        for row in rows:
            self.stats.overlap_rows += 1
            record = self.adapter.parse(row)
            try:
                feature = self.adapter.remap(record, self.registry)
            except ScaffoldNotFound as exc:
                lg.warning(str(exc))
                self.stats.missing[exc.scaffold_id] += 1
                continue
            self.stats.transposed[record.scaffold.scaffold_id] += 1
            yield feature

    def run(self, output_path):
        """Transpose every overlap row and write the output file.

        The output is written to a temporary file next to ``output_path``
        and renamed into place once complete, so a failed run leaves no
        partial output behind.

        Returns:
            TransposeStats
        """
        outdir = os.path.dirname(os.path.abspath(output_path))
        fd, tmp_path = tempfile.mkstemp(prefix='.scaffoldlift-', suffix='.tmp', dir=outdir)
        try:
            with os.fdopen(fd, 'w') as outh:
                self.adapter.write_header(outh)
                rows = self.provider.intersect(self.adapter)
                for feature in self.transpose_rows(rows):
                    outh.write(self.adapter.format(feature) + '\n')
        except BaseException:
            os.unlink(tmp_path)
            raise
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, output_path)
        lg.info(
            f'Transposed {self.stats.num_transposed} of {self.stats.overlap_rows} records '
            f'({self.stats.num_missing} skipped)'
        )
        return self.stats
