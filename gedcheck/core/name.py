"""Personal names and their variations."""

from dataclasses import dataclass
from typing import List, Optional

from .citation import AbstractCitation
from .element import ModelElement
from .note import Note
from .place import NameVariation


@dataclass(slots=True, eq=False)
class PersonalNameVariation(NameVariation):
    """A phonetic or romanized variation of a personal name, with its own pieces."""

    given_name: Optional[str] = None
    nickname: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    surname: Optional[str] = None
    surname_prefix: Optional[str] = None
    citations: Optional[List[AbstractCitation]] = None
    notes: Optional[List[Note]] = None


@dataclass(slots=True, eq=False)
class PersonalName(ModelElement):
    """A personal name (NAME) of an individual.

    Attributes:
        basic: Full name in GEDCOM format, e.g. 'John /Doe/'
        given_name: Given name pieces (GIVN)
        nickname: Nickname (NICK)
        prefix: Name prefix such as 'Dr.' (NPFX)
        suffix: Name suffix such as 'Jr.' (NSFX)
        surname: Surname (SURN)
        surname_prefix: Surname prefix such as 'van' (SPFX)
        citations: Source citations for the name
        notes: Notes about the name
        phonetic: Phonetic variations
        romanized: Romanized variations
    """

    basic: Optional[str] = None
    given_name: Optional[str] = None
    nickname: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    surname: Optional[str] = None
    surname_prefix: Optional[str] = None
    citations: Optional[List[AbstractCitation]] = None
    notes: Optional[List[Note]] = None
    phonetic: Optional[List[PersonalNameVariation]] = None
    romanized: Optional[List[PersonalNameVariation]] = None
