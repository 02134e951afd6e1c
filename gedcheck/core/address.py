"""Postal address structure."""

from dataclasses import dataclass
from typing import List, Optional

from .element import ModelElement


@dataclass(slots=True, eq=False)
class Address(ModelElement):
    """A postal address (ADDR) with its free-form lines and parsed parts."""

    lines: Optional[List[str]] = None
    addr1: Optional[str] = None
    addr2: Optional[str] = None
    city: Optional[str] = None
    state_province: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
