# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Interval feature adapter (GFF/GTF, 9 columns)."""

from ..annotation.gff_utils import GFFRow, parse_coordinate, read_gff
from ..core.errors import MalformedAnnotationError
from ..core.model import OverlapRecord, Strand
from ..core.remap import remap_interval
from .abc import FormatAdapter


class IntervalAdapter(FormatAdapter):

    name = 'gff'

    def read_features(self):
        for row in read_gff(self.path):
            yield tuple(row)

    def locate(self, columns):
        f = GFFRow(*columns)
        return f.seqid, parse_coordinate(f.start, 'feature start'), parse_coordinate(f.end, 'feature end')

    def parse(self, row):
        if len(row.feature) != 9:
            raise MalformedAnnotationError(
                f'Expected 9 GFF columns for the feature, found {len(row.feature)}'
            )
        f = GFFRow(*row.feature)
        return OverlapRecord(
            fields=tuple(row.feature),
            start=parse_coordinate(f.start, 'feature start'),
            end=parse_coordinate(f.end, 'feature end'),
            strand=Strand.from_symbol(f.strand),
            scaffold=self.scaffold(row),
        )

    def remap(self, record, registry):
        return remap_interval(record, registry)

    def format(self, feature):
        f = GFFRow(*feature.fields)._replace(
            seqid=feature.sequence_id,
            start=str(feature.start),
            end=str(feature.end),
            strand=str(feature.strand),
        )
        return '\t'.join(f)
