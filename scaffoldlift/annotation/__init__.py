# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

from collections import namedtuple

# feature: raw columns of the feature to transpose
# scaffold: GFFRow of the old-assembly scaffold
# overlap: overlap length in bp
OverlapRow = namedtuple('OverlapRow', ['feature', 'scaffold', 'overlap'])


def get_overlap_class(overlap_class_name):
    """Get Overlap provider class matching provided name

    Args:
        overlap_class_name (str): Name of overlap provider.

    Returns:
        Overlap provider class yielding full-containment overlap rows
    """
    if overlap_class_name == 'intervaltree':
        from .intervaltree import _OverlapIntervalTree

        return _OverlapIntervalTree
    elif overlap_class_name == 'table':
        from .table import _OverlapTable

        return _OverlapTable
    else:
        raise NotImplementedError(
            f'Unknown overlap class "{overlap_class_name}". Use "intervaltree" or "table".'
        )
