"""
Validation module for GEDCOM record graphs.

Provides the root GedcomValidator, which walks a whole graph, reports
findings by severity and, when auto-repair is on, fixes what it can.
"""

from .findings import (
    Severity,
    Finding,
    ValidatedItem,
)

from .options import ValidationOptions

from .base import (
    ValidatorBase,
    AbstractValidator,
)

from .gedcom_validator import (
    GedcomValidator,
    PLACEHOLDER_SUBMITTER_XREF,
    PLACEHOLDER_SUBMITTER_NAME,
)


__all__ = [
    # Findings
    'Severity',
    'Finding',
    'ValidatedItem',

    # Options
    'ValidationOptions',

    # Validators
    'ValidatorBase',
    'AbstractValidator',
    'GedcomValidator',
    'PLACEHOLDER_SUBMITTER_XREF',
    'PLACEHOLDER_SUBMITTER_NAME',
]
