"""
Findings reported by a validation pass.

Each finding carries a description, a severity and, optionally, the element
the finding is about.
"""

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Severity(Enum):
    """Severity of a validation finding."""
    ERROR = "error"  # Not conformant to the GEDCOM specification
    WARNING = "warning"  # Advisory, does not block writing the file
    INFO = "info"  # An automatic repair was applied


class ValidatedItem:
    """Wrapper for things with a problem that are not model elements.

    Lists, strings and map entries cannot be weakly referenced, so findings
    about them hold one of these instead.
    """

    __slots__ = ('item',)

    def __init__(self, item: Any):
        self.item = item

    def __repr__(self) -> str:
        return f"ValidatedItem({self.item!r})"


def describe(subject: Any) -> str:
    """Short human-readable label for the subject of a finding."""
    if subject is None:
        return ''
    if isinstance(subject, ValidatedItem):
        return repr(subject.item)
    xref = getattr(subject, 'xref', None)
    if xref:
        return f"{type(subject).__name__} {xref}"
    return type(subject).__name__


@dataclass(slots=True)
class Finding:
    """A single validation finding.

    Model elements are referenced weakly so that a findings list never keeps
    a discarded graph alive.
    """

    description: str
    severity: Severity
    _subject: Any = field(default=None, repr=False)

    @classmethod
    def create(cls, description: str, severity: Severity,
               subject: Any = None) -> 'Finding':
        """Build a finding, taking a weak reference to the subject where possible.

        Args:
            description: What is wrong, or what was repaired
            severity: Severity of the finding
            subject: Element with the problem, if any

        Returns:
            Finding instance
        """
        ref = subject
        if subject is not None and not isinstance(subject, ValidatedItem):
            try:
                ref = weakref.ref(subject)
            except TypeError:
                ref = ValidatedItem(subject)
        return cls(description, severity, ref)

    @property
    def subject(self) -> Any:
        """The element the finding is about, or None if unknown or collected."""
        if isinstance(self._subject, weakref.ref):
            return self._subject()
        return self._subject

    def __str__(self) -> str:
        text = f"{self.severity.name}: {self.description}"
        label = describe(self.subject)
        if label:
            text += f" ({label})"
        return text
