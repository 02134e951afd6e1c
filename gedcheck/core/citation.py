"""Source citations, with and without a source record."""

from dataclasses import dataclass
from typing import List, Optional

from .element import ModelElement
from .note import Note


@dataclass(slots=True, eq=False)
class AbstractCitation(ModelElement):
    """Base for both kinds of source citation."""

    notes: Optional[List[Note]] = None


@dataclass(slots=True, eq=False)
class CitationWithSource(AbstractCitation):
    """A citation pointing at a SOUR record.

    Attributes:
        source: Xref of the cited source record
        where_in_source: Page or location within the source (PAGE)
        event_cited: Event type the source was cited for (EVEN)
        role_in_event: Role of the person in that event (ROLE)
        certainty: Quality assessment (QUAY)
        multimedia: Multimedia attached to the citation
    """

    source: Optional[str] = None
    where_in_source: Optional[str] = None
    event_cited: Optional[str] = None
    role_in_event: Optional[str] = None
    certainty: Optional[str] = None
    multimedia: Optional[list] = None


@dataclass(slots=True, eq=False)
class CitationWithoutSource(AbstractCitation):
    """An inline citation with a textual description and no source record."""

    description: Optional[List[str]] = None
    text_from_source: Optional[List[List[str]]] = None
