"""Header (HEAD) and trailer (TRLR) structures."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .address import Address
from .element import ModelElement
from .note import Note


# Character set names allowed in HEAD/CHAR
SUPPORTED_CHARACTER_SETS = ('ANSEL', 'ASCII', 'UNICODE', 'UTF-8')


class SupportedVersion(Enum):
    """GEDCOM versions understood by the validator."""
    V5_5 = "5.5"
    V5_5_1 = "5.5.1"

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional['SupportedVersion']:
        """Look up a version by its text form.

        Args:
            value: Version text from the file, e.g. '5.5.1'

        Returns:
            Matching SupportedVersion or None if unknown
        """
        if value is None:
            return None
        value = value.strip()
        for version in cls:
            if version.value == value:
                return version
        return None


@dataclass(slots=True, eq=False)
class GedcomVersion(ModelElement):
    """The GEDC structure: version number and form.

    Attributes:
        version_number: Supported version, or None if missing or unknown
        version_text: VERS value as found in the file when it names no
            supported version
        gedcom_form: GEDCOM form, normally LINEAGE-LINKED
    """

    version_number: Optional[SupportedVersion] = None
    version_text: Optional[str] = None
    gedcom_form: Optional[str] = None


@dataclass(slots=True, eq=False)
class CharacterSet(ModelElement):
    """The CHAR structure: character set name and optional version."""

    character_set_name: Optional[str] = None
    version_num: Optional[str] = None


@dataclass(slots=True, eq=False)
class Corporation(ModelElement):
    """The business that produced the source system."""

    business_name: Optional[str] = None
    address: Optional[Address] = None


@dataclass(slots=True, eq=False)
class HeaderSourceData(ModelElement):
    """Name, publication date and copyright of the electronic data source."""

    name: Optional[str] = None
    publish_date: Optional[str] = None
    copyright: Optional[str] = None


@dataclass(slots=True, eq=False)
class SourceSystem(ModelElement):
    """The system that produced the file (HEAD/SOUR).

    Attributes:
        system_id: Approved system id (required)
        version_num: Version of the product
        product_name: Name of the product
        corporation: Business that produced the product
        source_data: Electronic data source the file was taken from
    """

    system_id: Optional[str] = None
    version_num: Optional[str] = None
    product_name: Optional[str] = None
    corporation: Optional[Corporation] = None
    source_data: Optional[HeaderSourceData] = None


@dataclass(slots=True, eq=False)
class Header(ModelElement):
    """The header of a GEDCOM file.

    Attributes:
        source_system: System that produced the file
        destination_system: Intended receiving system (DEST)
        date: Transmission date
        time: Transmission time
        submitter: Xref of the submitter of the file
        submission: Xref of the submission record
        file_name: Name of the file (FILE)
        copyright_data: Copyright lines (COPR)
        gedcom_version: GEDCOM version and form
        character_set: Character set used in the file
        language: Language of the data (LANG)
        place_hierarchy: Default place format (PLAC/FORM)
        notes: Notes about the file
    """

    source_system: Optional[SourceSystem] = None
    destination_system: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    submitter: Optional[str] = None
    submission: Optional[str] = None
    file_name: Optional[str] = None
    copyright_data: Optional[List[str]] = None
    gedcom_version: Optional[GedcomVersion] = None
    character_set: Optional[CharacterSet] = None
    language: Optional[str] = None
    place_hierarchy: Optional[str] = None
    notes: Optional[List[Note]] = None


@dataclass(slots=True, eq=False)
class Trailer(ModelElement):
    """The TRLR line ending the file."""
