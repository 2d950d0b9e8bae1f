# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Exceptions raised by ScaffoldLift."""


class ScaffoldLiftError(Exception):
    """Base class for all ScaffoldLift errors."""


class ConfigurationError(ScaffoldLiftError):
    """Missing or unusable input/output paths and invalid option values.

    Raised before any transposition work starts.
    """


class MalformedAnnotationError(ScaffoldLiftError):
    """An annotation, variant or overlap row cannot be interpreted."""


class OverlapContainmentError(MalformedAnnotationError):
    """An overlap row whose feature is not fully contained in its scaffold."""


class ScaffoldNotFound(ScaffoldLiftError):
    """A scaffold has no placement on the new assembly.

    Recoverable: the affected record is skipped.
    """

    def __init__(self, scaffold_id):
        super().__init__(f'No {scaffold_id} found in the new genome version')
        self.scaffold_id = scaffold_id
