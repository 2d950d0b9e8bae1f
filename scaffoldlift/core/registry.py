# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Scaffold placements on the new assembly."""

import logging as lg
from collections.abc import Mapping
from types import MappingProxyType

from ..annotation.gff_utils import read_gff
from .model import ScaffoldEntry


class ScaffoldRegistry(Mapping):
    """Read-only mapping of scaffold id to :class:`ScaffoldEntry`.

    Built once, then shared by every remap call. Unknown ids are a plain
    miss: ``registry.get(sid)`` returns None.

    Attributes:
        duplicates (int): Number of entries that replaced an earlier entry
            with the same id. The last entry wins.
    """

    def __init__(self, entries=None, duplicates=0):
        self._entries = MappingProxyType(dict(entries or {}))
        self.duplicates = duplicates

    @classmethod
    def build(cls, rows, id_attribute='ID'):
        """Build a registry from GFF rows.

        Args:
            rows: Iterable of GFFRow.
            id_attribute (str): Attribute holding the scaffold identifier.

        Raises:
            MalformedAnnotationError: A row has no identifier or invalid
                coordinates.
        """
        entries = {}
        duplicates = 0
        for row in rows:
            entry = ScaffoldEntry.from_gff_row(row, id_attribute)
            if entry.scaffold_id in entries:
                duplicates += 1
                lg.warning(f'Duplicate scaffold "{entry.scaffold_id}", keeping the last placement')
            entries[entry.scaffold_id] = entry
        return cls(entries, duplicates)

    @classmethod
    def from_gff(cls, gff_file, id_attribute='ID'):
        lg.debug(f'Loading scaffold placements from {gff_file}')
        return cls.build(read_gff(gff_file), id_attribute)

    def __getitem__(self, scaffold_id):
        return self._entries[scaffold_id]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f'{type(self).__name__}({len(self)} scaffolds, {self.duplicates} duplicates)'
