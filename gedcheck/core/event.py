"""Event and attribute structures for individuals and families."""

from dataclasses import dataclass
from typing import List, Optional

from .address import Address
from .citation import AbstractCitation
from .element import ModelElement
from .multimedia import Multimedia
from .note import Note
from .place import Place


@dataclass(slots=True, eq=False)
class Event(ModelElement):
    """Represents a genealogical event (birth, death, marriage, etc.).

    Attributes:
        type: The GEDCOM tag of the event (e.g., 'BIRT', 'DEAT', 'MARR')
        description: Value on the event line. Only 'Y' is standard, so any
            other text is reported by the validator
        date: The date of the event in GEDCOM format
        place: Where the event occurred
        address: Address associated with the event
        age: Age at the time of the event
        cause: Cause of the event (CAUS)
        sub_type: Further classification (TYPE)
        religious_affiliation: Religious affiliation (RELI)
        resp_agency: Responsible agency (AGNC)
        restriction_notice: Restriction notice (RESN)
        citations: Source citations for the event
        emails: Email addresses
        fax_numbers: Fax numbers
        phone_numbers: Phone numbers
        www_urls: Web addresses
        multimedia: Attached multimedia
        notes: Notes about the event
    """

    type: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    place: Optional[Place] = None
    address: Optional[Address] = None
    age: Optional[str] = None
    cause: Optional[str] = None
    sub_type: Optional[str] = None
    religious_affiliation: Optional[str] = None
    resp_agency: Optional[str] = None
    restriction_notice: Optional[str] = None
    citations: Optional[List[AbstractCitation]] = None
    emails: Optional[List[str]] = None
    fax_numbers: Optional[List[str]] = None
    phone_numbers: Optional[List[str]] = None
    www_urls: Optional[List[str]] = None
    multimedia: Optional[List[Multimedia]] = None
    notes: Optional[List[Note]] = None


@dataclass(slots=True, eq=False)
class IndividualEvent(Event):
    """An event in the life of an individual (BIRT, DEAT, ...).

    Attributes:
        family: Xref of the family for birth/adoption events (FAMC)
    """

    family: Optional[str] = None


@dataclass(slots=True, eq=False)
class FamilyEvent(Event):
    """An event of a family (MARR, DIV, ...), with the spouses' ages."""

    husband_age: Optional[str] = None
    wife_age: Optional[str] = None


@dataclass(slots=True, eq=False)
class IndividualAttribute(Event):
    """A fact about an individual (OCCU, RESI, ...). The description holds its value."""
