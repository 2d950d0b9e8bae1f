# -*- coding: utf-8 -*-

# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Abstract base class for annotation format adapters."""

from abc import ABC, abstractmethod

from ..core.model import ScaffoldEntry


class FormatAdapter(ABC):
    """Reads features from the file to transpose and writes them back.

    The adapter owns everything format-specific: which lines are headers,
    where the coordinates live in a row, and how a transposed feature is
    serialised. Overlap rows produced by an overlap provider are turned
    into :class:`OverlapRecord` objects by :meth:`parse`.
    """

    def __init__(self, path, id_attribute='ID'):
        self.path = path
        self.id_attribute = id_attribute

    @property
    @abstractmethod
    def name(self) -> str:
        """Short format name."""

    # -- Input ---------------------------------------------------------------

    @abstractmethod
    def read_features(self):
        """Yield the raw column tuple of every feature row in :attr:`path`."""

    @abstractmethod
    def locate(self, columns) -> tuple:
        """``(seqid, start, end)`` span a feature occupies on the old genome."""

    @abstractmethod
    def parse(self, row):
        """Turn an :class:`OverlapRow` into an :class:`OverlapRecord`."""

    def scaffold(self, row) -> ScaffoldEntry:
        """Old-assembly placement of the scaffold matched by ``row``."""
        return ScaffoldEntry.from_gff_row(row.scaffold, self.id_attribute)

    # -- Transform -----------------------------------------------------------

    @abstractmethod
    def remap(self, record, registry):
        """Return the :class:`TransposedFeature` for ``record``."""

    # -- Output --------------------------------------------------------------

    def write_header(self, outh) -> None:
        """Write header lines, if the format has any."""

    @abstractmethod
    def format(self, feature) -> str:
        """Serialise a transposed feature, without the line terminator."""
