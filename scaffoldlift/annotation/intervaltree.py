# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

import logging as lg
from collections import defaultdict

from intervaltree import Interval, IntervalTree

from . import OverlapRow
from .gff_utils import parse_coordinate, read_gff


def contains(iv, start, end):
    """True if ``iv`` (half-open) covers the closed interval [start, end]."""
    return iv.begin <= start and end < iv.end


class _AnnotationIntervalTree:
    """Old-assembly scaffold placements indexed by sequence."""

    def __init__(self, gff_file):
        lg.debug('Using intervaltree for scaffold overlaps.')
        self.itree = defaultdict(IntervalTree)
        self.num_scaffolds = 0
        for f in read_gff(gff_file):
            start = parse_coordinate(f.start, 'scaffold start')
            end = parse_coordinate(f.end, 'scaffold end')
            if end < start:
                lg.warning(f'Skipping scaffold {f.seqid}:{f.start}-{f.end}: end before start')
                continue
            # GFF is closed, intervaltree is half-open
            self.itree[f.seqid].add(Interval(start, end + 1, f))
            self.num_scaffolds += 1

    def containing(self, ref, start, end):
        """Scaffolds that fully contain [start, end], sorted by start."""
        if ref not in self.itree:
            return []
        return sorted(
            (iv for iv in self.itree[ref].at(start) if contains(iv, start, end)),
            key=lambda iv: (iv.begin, iv.end),
        )


class _OverlapIntervalTree(_AnnotationIntervalTree):
    """In-process full-containment overlap of features with old scaffolds.

    Yields the same rows as ``intersectBed -a <features> -b <old> -f 1.0 -wo``:
    one row per (feature, containing scaffold) pair, in feature order.
    """

    def intersect(self, adapter):
        n_features = n_rows = 0
        for columns in adapter.read_features():
            n_features += 1
            ref, start, end = adapter.locate(columns)
            for iv in self.containing(ref, start, end):
                n_rows += 1
                yield OverlapRow(columns, iv.data, end - start + 1)
        lg.info(f'{n_rows} overlap rows for {n_features} features')
