"""Repository records (REPO)."""

from dataclasses import dataclass
from typing import List, Optional

from .address import Address
from .element import Record
from .note import ChangeDate, Note, UserReference


@dataclass(slots=True, eq=False)
class Repository(Record):
    """An archive, library or other holder of sources."""

    name: Optional[str] = None
    address: Optional[Address] = None
    emails: Optional[List[str]] = None
    fax_numbers: Optional[List[str]] = None
    phone_numbers: Optional[List[str]] = None
    www_urls: Optional[List[str]] = None
    notes: Optional[List[Note]] = None
    user_references: Optional[List[UserReference]] = None
    rec_id_number: Optional[str] = None
    change_date: Optional[ChangeDate] = None
