"""Notes, change dates and user references."""

from dataclasses import dataclass
from typing import List, Optional

from .element import ModelElement, Record


@dataclass(slots=True, eq=False)
class UserReference(ModelElement):
    """A user-defined reference number (REFN) with an optional type."""

    reference_num: Optional[str] = None
    type: Optional[str] = None


@dataclass(slots=True, eq=False)
class ChangeDate(ModelElement):
    """Date (and optional time) a record was last changed (CHAN)."""

    date: Optional[str] = None
    time: Optional[str] = None
    notes: Optional[List['Note']] = None


@dataclass(slots=True, eq=False)
class Note(Record):
    """A note, either a top-level NOTE record (with xref) or an inline note.

    Attributes:
        lines: Lines of note text
        citations: Source citations supporting the note
        user_references: User reference numbers
        rec_id_number: Automated record id (RIN)
        change_date: Last change date
    """

    lines: Optional[List[str]] = None
    citations: Optional[list] = None
    user_references: Optional[List[UserReference]] = None
    rec_id_number: Optional[str] = None
    change_date: Optional[ChangeDate] = None
