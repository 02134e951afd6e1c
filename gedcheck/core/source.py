"""Source records (SOUR) and repository citations."""

from dataclasses import dataclass
from typing import List, Optional

from .element import ModelElement, Record
from .multimedia import Multimedia
from .note import ChangeDate, Note, UserReference


@dataclass(slots=True, eq=False)
class EventRecorded(ModelElement):
    """A kind of event recorded in a source (DATA/EVEN)."""

    event_type: Optional[str] = None
    date_period: Optional[str] = None
    jurisdiction: Optional[str] = None


@dataclass(slots=True, eq=False)
class SourceData(ModelElement):
    """The DATA structure of a source record."""

    events_recorded: Optional[List[EventRecorded]] = None
    resp_agency: Optional[str] = None
    notes: Optional[List[Note]] = None


@dataclass(slots=True, eq=False)
class SourceCallNumber(ModelElement):
    """A call number in a repository, with optional media type."""

    call_number: Optional[str] = None
    media_type: Optional[str] = None


@dataclass(slots=True, eq=False)
class RepositoryCitation(ModelElement):
    """Citation of the repository holding a source (REPO)."""

    repository: Optional[str] = None
    call_numbers: Optional[List[SourceCallNumber]] = None
    notes: Optional[List[Note]] = None


@dataclass(slots=True, eq=False)
class Source(Record):
    """A source record.

    Attributes:
        data: Events recorded and responsible agency
        title: Title lines (TITL)
        originators_authors: Author lines (AUTH)
        publication_facts: Publication lines (PUBL)
        source_text: Verbatim text lines (TEXT)
        source_filed_by: Short filing title (ABBR)
        repository_citation: Where the source is held
        multimedia: Attached multimedia
        notes: Notes about the source
        user_references: User reference numbers
        rec_id_number: Automated record id (RIN)
        change_date: Last change date
    """

    data: Optional[SourceData] = None
    title: Optional[List[str]] = None
    originators_authors: Optional[List[str]] = None
    publication_facts: Optional[List[str]] = None
    source_text: Optional[List[str]] = None
    source_filed_by: Optional[str] = None
    repository_citation: Optional[RepositoryCitation] = None
    multimedia: Optional[List[Multimedia]] = None
    notes: Optional[List[Note]] = None
    user_references: Optional[List[UserReference]] = None
    rec_id_number: Optional[str] = None
    change_date: Optional[ChangeDate] = None
