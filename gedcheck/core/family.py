"""Family records (FAM) and LDS spouse sealings."""

from dataclasses import dataclass
from typing import List, Optional

from .citation import AbstractCitation
from .element import ModelElement, Record
from .event import FamilyEvent
from .multimedia import Multimedia
from .note import ChangeDate, Note, UserReference


@dataclass(slots=True, eq=False)
class LdsSpouseSealing(ModelElement):
    """An LDS spouse sealing ordinance (SLGS)."""

    date: Optional[str] = None
    place: Optional[str] = None
    status: Optional[str] = None
    temple: Optional[str] = None
    citations: Optional[List[AbstractCitation]] = None
    notes: Optional[List[Note]] = None


@dataclass(slots=True, eq=False)
class Family(Record):
    """Represents a family unit (marriage/partnership) in genealogy.

    Attributes:
        xref: Unique identifier (e.g., '@F1@')
        husband: Xref of the husband/partner
        wife: Xref of the wife/partner
        children: Xrefs of the children
        events: Family events (marriage, divorce, etc.)
        citations: Source citations
        multimedia: Attached multimedia
        notes: Notes about the family
        submitters: Submitter xrefs of this record
        lds_spouse_sealings: LDS spouse sealings
        user_references: User reference numbers
        automated_record_id: Automated record id (RIN)
        num_children: Declared number of children (NCHI)
        rec_file_number: Record file number (RFN)
        restriction_notice: Restriction notice (RESN)
        change_date: Last change date
    """

    husband: Optional[str] = None
    wife: Optional[str] = None
    children: Optional[List[str]] = None
    events: Optional[List[FamilyEvent]] = None
    citations: Optional[List[AbstractCitation]] = None
    multimedia: Optional[List[Multimedia]] = None
    notes: Optional[List[Note]] = None
    submitters: Optional[List[str]] = None
    lds_spouse_sealings: Optional[List[LdsSpouseSealing]] = None
    user_references: Optional[List[UserReference]] = None
    automated_record_id: Optional[str] = None
    num_children: Optional[str] = None
    rec_file_number: Optional[str] = None
    restriction_notice: Optional[str] = None
    change_date: Optional[ChangeDate] = None

    def get_parents(self) -> List[str]:
        """Get list of parent xrefs.

        Returns:
            List containing husband and/or wife (excluding None values)
        """
        return [xref for xref in (self.husband, self.wife) if xref]
