"""Place structure with phonetic and romanized name variations."""

from dataclasses import dataclass
from typing import List, Optional

from .citation import AbstractCitation
from .element import ModelElement
from .note import Note


@dataclass(slots=True, eq=False)
class NameVariation(ModelElement):
    """A phonetic (FONE) or romanized (ROMN) variation of a name.

    Attributes:
        variation: The varied name text
        variation_type: Method used to produce the variation (TYPE)
    """

    variation: Optional[str] = None
    variation_type: Optional[str] = None


@dataclass(slots=True, eq=False)
class Place(ModelElement):
    """Represents a place (PLAC) attached to an event.

    GEDCOM 5.5.1 allows places to carry coordinates (MAP/LATI/LONG) and
    phonetic or romanized variations of the place name.

    Attributes:
        place_name: Jurisdictional place name, e.g. 'Boston, MA, USA'
        place_format: Hierarchy of the jurisdictions (FORM)
        latitude: Latitude in GEDCOM form, e.g. 'N42.3601'
        longitude: Longitude in GEDCOM form, e.g. 'W71.0589'
        citations: Source citations for the place
        notes: Notes about the place
        phonetic: Phonetic variations of the place name
        romanized: Romanized variations of the place name
    """

    place_name: Optional[str] = None
    place_format: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    citations: Optional[List[AbstractCitation]] = None
    notes: Optional[List[Note]] = None
    phonetic: Optional[List[NameVariation]] = None
    romanized: Optional[List[NameVariation]] = None
