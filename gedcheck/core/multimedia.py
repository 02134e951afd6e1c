"""Multimedia objects (OBJE) and their file references."""

from dataclasses import dataclass
from typing import List, Optional

from .citation import AbstractCitation
from .element import ModelElement, Record
from .note import ChangeDate, Note, UserReference


@dataclass(slots=True, eq=False)
class FileReference(ModelElement):
    """A reference to an external multimedia file (GEDCOM 5.5.1 FILE).

    Attributes:
        reference_to_file: Path or URL of the file
        format: File format, e.g. 'jpeg' (FORM)
        media_type: Source media type, e.g. 'photo' (MEDI)
        title: Descriptive title (TITL)
    """

    reference_to_file: Optional[str] = None
    format: Optional[str] = None
    media_type: Optional[str] = None
    title: Optional[str] = None


@dataclass(slots=True, eq=False)
class Multimedia(Record):
    """A multimedia object.

    In GEDCOM 5.5 the media is embedded as encoded BLOB lines with a format
    string; in 5.5.1 embedded media was dropped in favor of file references.

    Attributes:
        blob: Encoded lines of embedded media (5.5 only)
        embedded_media_format: Format of the embedded media (5.5 only)
        embedded_title: Title of the embedded media
        file_references: External file references (5.5.1)
        continued_object: Next object in a chain of embedded media
        citations: Source citations (5.5.1 only)
        notes: Notes about the object
        user_references: User reference numbers
        rec_id_number: Automated record id (RIN)
        change_date: Last change date
    """

    blob: Optional[List[str]] = None
    embedded_media_format: Optional[str] = None
    embedded_title: Optional[str] = None
    file_references: Optional[List[FileReference]] = None
    continued_object: Optional['Multimedia'] = None
    citations: Optional[List[AbstractCitation]] = None
    notes: Optional[List[Note]] = None
    user_references: Optional[List[UserReference]] = None
    rec_id_number: Optional[str] = None
    change_date: Optional[ChangeDate] = None
