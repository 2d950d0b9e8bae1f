# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Two-stage coordinate transform: old genome -> scaffold -> new genome.

A feature is first placed on its scaffold in scaffold-local coordinates
(position 1 is the first base of the scaffold in its own orientation),
then placed on the new genome using the scaffold's new placement.
"""

from dataclasses import replace

from .errors import ScaffoldNotFound
from .model import Strand, TransposedFeature

_COMPLEMENT = str.maketrans('ACGT', 'TGCA')


def relative_strand(a, b):
    return Strand.FORWARD if a == b else Strand.REVERSE


def reverse_complement(allele):
    """Reverse an allele string and complement upper-case A, C, G, T.

    Any other character is kept as is. For multi-base indel alleles this is
    not a coordinate-correct transposition: the anchor base stays on the
    wrong side of the event.
    """
    return allele[::-1].translate(_COMPLEMENT)


def to_scaffold(start, end, scaffold):
    """Genome interval -> scaffold-local interval."""
    if scaffold.strand == Strand.FORWARD:
        return start - scaffold.start + 1, end - scaffold.start + 1
    span = scaffold.end - scaffold.start
    return span - (end - scaffold.start) + 1, span - (start - scaffold.start) + 1


def from_scaffold(local_start, local_end, scaffold):
    """Scaffold-local interval -> genome interval."""
    if scaffold.strand == Strand.FORWARD:
        return local_start + scaffold.start - 1, local_end + scaffold.start - 1
    return scaffold.end - local_end + 1, scaffold.end - local_start + 1


def remap_interval(record, registry):
    """Transpose an interval feature onto the new assembly.

    Args:
        record (OverlapRecord): Feature and its old scaffold placement.
        registry (ScaffoldRegistry): New scaffold placements.

    Returns:
        TransposedFeature

    Raises:
        ScaffoldNotFound: The scaffold is not placed on the new assembly.
    """
    old = record.scaffold
    local_start, local_end = to_scaffold(record.start, record.end, old)
    local_strand = relative_strand(record.strand, old.strand)

    new = registry.get(old.scaffold_id)
    if new is None:
        raise ScaffoldNotFound(old.scaffold_id)

    start, end = from_scaffold(local_start, local_end, new)
    return TransposedFeature(
        fields=record.fields,
        sequence_id=new.sequence_id,
        start=start,
        end=end,
        strand=relative_strand(local_strand, new.strand),
    )


def remap_position(record, registry):
    """Transpose a point variant onto the new assembly.

    REF (field 4) and ALT (field 5) are reverse-complemented when the
    scaffold changes orientation between the two assemblies.
    """
    feature = remap_interval(record, registry)
    ref, alt = record.fields[3], record.fields[4]
    if feature.strand == Strand.REVERSE:
        ref, alt = reverse_complement(ref), reverse_complement(alt)
    return replace(feature, ref=ref, alt=alt)
