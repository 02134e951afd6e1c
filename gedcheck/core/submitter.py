"""Submitter (SUBM) and submission (SUBN) records."""

from dataclasses import dataclass
from typing import List, Optional

from .address import Address
from .element import Record
from .multimedia import Multimedia
from .note import ChangeDate, Note


@dataclass(slots=True, eq=False)
class Submitter(Record):
    """The person or organization that contributed the data.

    Attributes:
        name: Name of the submitter (required)
        address: Postal address
        language_pref: Preferred languages, most preferred first (LANG)
        emails: Email addresses
        phone_numbers: Phone numbers
        multimedia: Attached multimedia
        notes: Notes about the submitter
        reg_file_number: Registered RFN
        rec_id_number: Automated record id (RIN)
        change_date: Last change date
    """

    name: Optional[str] = None
    address: Optional[Address] = None
    language_pref: Optional[List[str]] = None
    emails: Optional[List[str]] = None
    phone_numbers: Optional[List[str]] = None
    multimedia: Optional[List[Multimedia]] = None
    notes: Optional[List[Note]] = None
    reg_file_number: Optional[str] = None
    rec_id_number: Optional[str] = None
    change_date: Optional[ChangeDate] = None


@dataclass(slots=True, eq=False)
class Submission(Record):
    """Information about a submission to an ancestral file processor."""

    submitter: Optional[str] = None
    name_of_family_file: Optional[str] = None
    temple_code: Optional[str] = None
    ancestors_count: Optional[str] = None
    descendants_count: Optional[str] = None
    ordinance_process_flag: Optional[str] = None
    rec_id_number: Optional[str] = None
    notes: Optional[List[Note]] = None
