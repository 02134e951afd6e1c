"""gedcheck - Validate and auto-repair GEDCOM 5.5 / 5.5.1 genealogy files."""

__version__ = "0.1.0"

from .core.gedcom import Gedcom
from .core.gedcom_parser import GedcomParser, load_gedcom
from .validation import (
    Finding,
    GedcomValidator,
    Severity,
    ValidationOptions,
)

__all__ = [
    'Gedcom',
    'GedcomParser',
    'load_gedcom',
    'Finding',
    'GedcomValidator',
    'Severity',
    'ValidationOptions',
]
