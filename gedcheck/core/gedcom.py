"""Root of the record graph built from one GEDCOM file."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .element import ModelElement
from .family import Family
from .header import Header, Trailer
from .individual import Individual
from .multimedia import Multimedia
from .note import Note
from .repository import Repository
from .source import Source
from .submitter import Submission, Submitter


@dataclass(slots=True, eq=False)
class Gedcom(ModelElement):
    """An entire GEDCOM file as flat, xref-keyed tables of records.

    Records refer to each other by xref token, never by object reference, so
    individuals and families can point at each other without forming cycles
    in the object graph.

    Attributes:
        header: File header
        submission: The single submission record, if any
        trailer: File trailer
        individuals: Individuals keyed by xref
        families: Families keyed by xref
        sources: Sources keyed by xref
        repositories: Repositories keyed by xref
        multimedia: Multimedia objects keyed by xref
        notes: Top-level notes keyed by xref
        submitters: Submitters keyed by xref
    """

    header: Optional[Header] = None
    submission: Optional[Submission] = None
    trailer: Optional[Trailer] = None
    individuals: Dict[str, Individual] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)
    sources: Dict[str, Source] = field(default_factory=dict)
    repositories: Dict[str, Repository] = field(default_factory=dict)
    multimedia: Dict[str, Multimedia] = field(default_factory=dict)
    notes: Dict[str, Note] = field(default_factory=dict)
    submitters: Dict[str, Submitter] = field(default_factory=dict)

    def __repr__(self) -> str:
        return (f"Gedcom(individuals={len(self.individuals)}, "
                f"families={len(self.families)}, sources={len(self.sources)})")

    def get_individual(self, xref: Optional[str]) -> Optional[Individual]:
        """Look up an individual by xref, or None if not present."""
        return self.individuals.get(xref) if xref else None

    def get_family(self, xref: Optional[str]) -> Optional[Family]:
        """Look up a family by xref, or None if not present."""
        return self.families.get(xref) if xref else None

    def get_submitter(self, xref: Optional[str]) -> Optional[Submitter]:
        """Look up a submitter by xref, or None if not present."""
        return self.submitters.get(xref) if xref else None

    def get_statistics(self) -> Dict[str, int]:
        """Count the records in each table.

        Returns:
            Dictionary of record counts
        """
        return {
            'num_individuals': len(self.individuals),
            'num_families': len(self.families),
            'num_sources': len(self.sources),
            'num_repositories': len(self.repositories),
            'num_multimedia': len(self.multimedia),
            'num_notes': len(self.notes),
            'num_submitters': len(self.submitters),
        }
