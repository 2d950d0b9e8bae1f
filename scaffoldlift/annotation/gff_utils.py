# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Shared GFF utilities: row parsing and the attribute mini-format."""

from collections import namedtuple
from urllib.parse import unquote

from ..core.errors import MalformedAnnotationError

GFFRow = namedtuple('GFFRow', ['seqid', 'source', 'type', 'start', 'end', 'score', 'strand', 'frame', 'attributes'])


def parse_attributes(attr_str):
    """Parse the ninth GFF column into a mapping of tag to values.

    GFF3 attributes are ``tag=value`` pairs separated by ``;``. A value may
    hold several comma-separated entries and may be percent-encoded.
    GTF-style ``tag "value";`` pairs are accepted as well.

    Args:
        attr_str (str): Attribute column.

    Returns:
        (dict of str: list of str): Tag to list of values, in column order.
    """
    ret = {}
    if attr_str is None or attr_str.strip() in ('', '.'):
        return ret
    for pair in attr_str.strip().split(';'):
        pair = pair.strip()
        if not pair:
            continue
        tag, sep, value = pair.partition('=')
        if not sep:
            # GTF: tag "value"
            tag, _, value = pair.partition(' ')
            value = value.strip().strip('"')
        ret[unquote(tag.strip())] = [unquote(v) for v in value.split(',')]
    return ret


def attribute_value(attr_str, tag):
    """First value of ``tag`` in an attribute column, or None."""
    values = parse_attributes(attr_str).get(tag)
    if not values or values[0] == '':
        return None
    return values[0]


def parse_coordinate(value, what='coordinate'):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MalformedAnnotationError(f'Invalid {what}: {value!r}') from None


def read_gff(gff_file):
    """Iterate over the feature rows of a GFF file.

    Comment and blank lines are skipped. Parsing stops at a ``##FASTA``
    directive.

    Args:
        gff_file: Path or open text handle.

    Yields:
        GFFRow
    """
    _opened = isinstance(gff_file, str)
    fh = open(gff_file) if _opened else gff_file  # noqa: SIM115
    try:
        for rownum, line in enumerate(fh, 1):
            if line.startswith('##FASTA'):
                break
            line = line.rstrip('\r\n')
            if not line.strip() or line.startswith('#'):
                continue
            cols = line.split('\t')
            if len(cols) != 9:
                raise MalformedAnnotationError(
                    f'Line {rownum}: expected 9 tab-separated GFF columns, found {len(cols)}'
                )
            yield GFFRow(*cols)
    finally:
        if _opened:
            fh.close()
