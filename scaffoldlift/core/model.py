# -*- coding: utf-8 -*-

# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Records flowing through the transposition pipeline.

All coordinates are 1-based and inclusive on both ends.
"""

from dataclasses import dataclass
from enum import IntEnum

from ..annotation.gff_utils import attribute_value, parse_coordinate
from .errors import MalformedAnnotationError, OverlapContainmentError


class Strand(IntEnum):
    """Orientation relative to the reference sequence."""
    FORWARD = 1
    REVERSE = -1

    def __str__(self):
        return '+' if self is Strand.FORWARD else '-'

    def flip(self):
        return Strand(-self.value)

    @classmethod
    def from_symbol(cls, s):
        """``'-'`` or ``-1`` is reverse, anything else is forward."""
        if isinstance(s, str):
            return cls.REVERSE if s.strip() == '-' else cls.FORWARD
        return cls.REVERSE if s == -1 else cls.FORWARD


@dataclass(frozen=True)
class ScaffoldEntry:
    """Placement of one scaffold on an assembly."""
    scaffold_id: str
    sequence_id: str              # chromosome / contig on the assembly
    start: int
    end: int
    strand: Strand

    def __post_init__(self):
        if self.end < self.start:
            raise MalformedAnnotationError(
                f'Scaffold {self.scaffold_id}: end {self.end} is before start {self.start}'
            )

    @property
    def length(self):
        return self.end - self.start + 1

    @classmethod
    def from_gff_row(cls, row, id_attribute='ID'):
        """Build an entry from a GFFRow, keyed on ``id_attribute``."""
        scaffold_id = attribute_value(row.attributes, id_attribute)
        if scaffold_id is None:
            raise MalformedAnnotationError(
                f'Feature {row.seqid}:{row.start}-{row.end} has no "{id_attribute}" attribute'
            )
        return cls(
            scaffold_id=scaffold_id,
            sequence_id=row.seqid,
            start=parse_coordinate(row.start, 'scaffold start'),
            end=parse_coordinate(row.end, 'scaffold end'),
            strand=Strand.from_symbol(row.strand),
        )


@dataclass(frozen=True)
class OverlapRecord:
    """A feature fully contained in a scaffold of the old assembly.

    Point variants have ``start == end == position`` and a forward strand.
    """
    fields: tuple                 # raw columns of the feature to transpose
    start: int
    end: int
    strand: Strand
    scaffold: ScaffoldEntry       # placement on the OLD assembly

    def __post_init__(self):
        if not (self.scaffold.start <= self.start <= self.end <= self.scaffold.end):
            raise OverlapContainmentError(
                f'Feature {self.start}-{self.end} is not contained in scaffold '
                f'{self.scaffold.scaffold_id} ({self.scaffold.start}-{self.scaffold.end})'
            )

    @property
    def position(self):
        return self.start


@dataclass(frozen=True)
class TransposedFeature:
    """A feature placed on the new assembly.

    ``ref`` and ``alt`` are only set for variants.
    """
    fields: tuple
    sequence_id: str
    start: int
    end: int
    strand: Strand
    ref: str = None
    alt: str = None
