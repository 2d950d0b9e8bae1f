# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

import os
import re

from ..core.errors import ConfigurationError


def get_adapter(path, id_attribute='ID'):
    """Get the format adapter matching the name of the file to transpose

    Args:
        path (str): File to transpose. ``.gff``/``.gtf`` selects interval
            features, ``.vcf`` selects point variants.
        id_attribute (str): Scaffold identifier attribute.

    Returns:
        FormatAdapter instance
    """
    name = os.path.basename(path).lower()
    if name.endswith(('.gz', '.bz2', '.bgz')):
        raise ConfigurationError(f'Compressed input is not supported: {path}')
    if re.search(r'\.g[ft]f', name):
        from .gff import IntervalAdapter

        return IntervalAdapter(path, id_attribute)
    elif '.vcf' in name:
        from .vcf import VariantAdapter

        return VariantAdapter(path, id_attribute)
    else:
        raise ConfigurationError(
            f'Cannot tell the format of "{path}". Expected a .gff, .gff3, .gtf or .vcf file.'
        )
