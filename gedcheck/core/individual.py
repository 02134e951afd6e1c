"""Individual records (INDI) and their links to families."""

from dataclasses import dataclass
from typing import List, Optional

from .citation import AbstractCitation
from .element import ModelElement, Record
from .event import IndividualAttribute, IndividualEvent
from .multimedia import Multimedia
from .name import PersonalName
from .note import ChangeDate, Note, UserReference


@dataclass(slots=True, eq=False)
class FamilyChild(ModelElement):
    """Membership of an individual as a child in a family (FAMC).

    Attributes:
        family: Xref of the family
        pedigree: Pedigree linkage, e.g. 'birth' or 'adopted' (PEDI)
        status: Child linkage status (STAT)
        adopted_by: Which parent adopted the child (ADOP)
        notes: Notes about the link
    """

    family: Optional[str] = None
    pedigree: Optional[str] = None
    status: Optional[str] = None
    adopted_by: Optional[str] = None
    notes: Optional[List[Note]] = None


@dataclass(slots=True, eq=False)
class FamilySpouse(ModelElement):
    """Membership of an individual as a spouse in a family (FAMS)."""

    family: Optional[str] = None
    notes: Optional[List[Note]] = None


@dataclass(slots=True, eq=False)
class Association(ModelElement):
    """An association (ASSO) between an individual and another record."""

    associated_entity: Optional[str] = None
    associated_entity_type: Optional[str] = None
    relationship: Optional[str] = None
    citations: Optional[List[AbstractCitation]] = None
    notes: Optional[List[Note]] = None


@dataclass(slots=True, eq=False)
class Individual(Record):
    """Represents an individual person in a genealogy file.

    Family membership is held as xref tokens in ``families_where_child`` and
    ``families_where_spouse``; the families themselves live in the root
    ``Gedcom.families`` table.

    Attributes:
        xref: Unique identifier (e.g., '@I1@')
        names: Personal names (birth name, married name, etc.)
        sex: 'M', 'F' or 'U'
        aliases: Xrefs of other individual records for the same person (ALIA)
        associations: Associations with other records
        citations: Source citations
        attributes: Facts such as occupation or residence
        events: Life events (birth, death, burial, etc.)
        families_where_child: Families in which this person is a child
        families_where_spouse: Families in which this person is a spouse
        ancestor_interest: Submitter xrefs interested in ancestors (ANCI)
        descendant_interest: Submitter xrefs interested in descendants (DESI)
        submitters: Submitter xrefs of this record (SUBM)
        multimedia: Attached multimedia
        notes: Notes about the person
        user_references: User reference numbers
        restriction_notice: Restriction notice (RESN)
        permanent_rec_file_number: Permanent record file number (RFN)
        ancestral_file_number: Ancestral file number (AFN)
        rec_id_number: Automated record id (RIN)
        change_date: Last change date
    """

    names: Optional[List[PersonalName]] = None
    sex: Optional[str] = None
    aliases: Optional[List[str]] = None
    associations: Optional[List[Association]] = None
    citations: Optional[List[AbstractCitation]] = None
    attributes: Optional[List[IndividualAttribute]] = None
    events: Optional[List[IndividualEvent]] = None
    families_where_child: Optional[List[FamilyChild]] = None
    families_where_spouse: Optional[List[FamilySpouse]] = None
    ancestor_interest: Optional[List[str]] = None
    descendant_interest: Optional[List[str]] = None
    submitters: Optional[List[str]] = None
    multimedia: Optional[List[Multimedia]] = None
    notes: Optional[List[Note]] = None
    user_references: Optional[List[UserReference]] = None
    restriction_notice: Optional[str] = None
    permanent_rec_file_number: Optional[str] = None
    ancestral_file_number: Optional[str] = None
    rec_id_number: Optional[str] = None
    change_date: Optional[ChangeDate] = None

    def get_primary_name(self) -> Optional[str]:
        """Get the basic form of the first name in the list.

        Returns:
            Primary name or None if no names exist
        """
        return self.names[0].basic if self.names else None
