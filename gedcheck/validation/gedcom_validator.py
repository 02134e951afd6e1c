"""
Root validator for a whole GEDCOM graph.

Owns the findings and the repair policy, walks the top-level record tables
in a fixed order and hands each record to the matching validator.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from ..core.element import Record
from ..core.gedcom import Gedcom
from ..core.header import Header, Trailer
from ..core.submitter import Submitter
from .base import ValidatorBase
from .family import FamilyValidator
from .findings import Finding, Severity, ValidatedItem
from .header import HeaderValidator
from .individual import IndividualValidator
from .multimedia import MultimediaValidator
from .notes import NoteValidator
from .options import ValidationOptions
from .repository import RepositoryValidator
from .source import SourceValidator
from .submitter import SubmissionValidator, SubmitterValidator

logger = logging.getLogger(__name__)

# Xref and name given to the submitter created when a file has none
PLACEHOLDER_SUBMITTER_XREF = '@SUBM0000@'
PLACEHOLDER_SUBMITTER_NAME = 'UNSPECIFIED'


class GedcomValidator(ValidatorBase):
    """Validates (and optionally repairs) a Gedcom graph.

    The validator can be reused: every call to ``validate()`` clears the
    previous findings and walks the graph again. With auto-repair on, the
    graph is corrected in place.

    Example:
        validator = GedcomValidator(gedcom, ValidationOptions(auto_repair=False))
        validator.validate()
        if validator.has_errors():
            ...
    """

    def __init__(self, gedcom: Optional[Gedcom], options: Optional[ValidationOptions] = None):
        """Initialize the validator.

        Args:
            gedcom: The graph to validate. It is borrowed, never copied
            options: Session options (defaults to auto-repair on)
        """
        self._gedcom = gedcom
        self._options = options or ValidationOptions()
        self.findings: List[Finding] = []

    @property
    def root(self) -> 'GedcomValidator':
        return self

    @property
    def options(self) -> ValidationOptions:
        return self._options

    @property
    def gedcom(self) -> Optional[Gedcom]:
        return self._gedcom

    def record(self, description: str, severity: Severity, subject: Any = None) -> None:
        """Append a finding to the current pass."""
        finding = Finding.create(description, severity, subject)
        logger.debug(str(finding))
        self.findings.append(finding)

    def has_errors(self) -> bool:
        return any(f.severity == Severity.ERROR for f in self.findings)

    def has_warnings(self) -> bool:
        return any(f.severity == Severity.WARNING for f in self.findings)

    def has_info(self) -> bool:
        return any(f.severity == Severity.INFO for f in self.findings)

    def get_findings(self, severity: Optional[Severity] = None) -> List[Finding]:
        """Get the findings of the last pass, optionally of one severity only."""
        if severity is None:
            return list(self.findings)
        return [f for f in self.findings if f.severity == severity]

    def get_summary(self) -> Dict[str, int]:
        """Count the findings of the last pass by severity."""
        return {severity.value: len(self.get_findings(severity)) for severity in Severity}

    def validate(self) -> None:
        """Run a full validation pass over the graph."""
        self.findings.clear()
        if self.gedcom is None:
            self.add_error("gedcom structure is null")
            return

        logger.info(f"Validating GEDCOM graph (auto-repair "
                    f"{'on' if self.auto_repair else 'off'}): {self.gedcom!r}")
        self._validate_submitters()
        self._validate_header()
        self._validate_individuals()
        self._validate_families()
        self._validate_repositories()
        self._validate_multimedia()
        self._validate_notes()
        self._validate_sources()
        self.validate_submission(self.gedcom.submission)
        self._validate_trailer()

        summary = self.get_summary()
        logger.info(f"Validation finished: {summary['error']} errors, "
                    f"{summary['warning']} warnings, {summary['info']} info")

    def validate_submission(self, submission) -> None:
        if submission is None:
            self.add_error("Submission record on root gedcom is null", self.gedcom)
            return
        SubmissionValidator(self, submission).validate()

    def _keyed_records(self, table: Dict[str, Record], kind: str) -> Iterator[Record]:
        """Yield the records of an xref-keyed table that are stored under their own xref.

        Entries that are null or keyed by anything other than the record's
        xref are reported and skipped. They are never re-keyed, since the
        correct key may already be taken by another record.
        """
        for key, record in list(table.items()):
            if record is None:
                self.add_error(f"Entry in {kind} collection has null value",
                               ValidatedItem((key, None)))
                continue
            if key is None or key != record.xref:
                self.add_error(f"Entry in {kind} collection is not keyed by the record's xref",
                               ValidatedItem((key, record.xref)))
                continue
            yield record

    def _validate_submitters(self) -> None:
        submitters = self.gedcom.submitters
        if not submitters:
            if self.add_repairable("Submitters collection is empty", self.gedcom):
                placeholder = Submitter(xref=PLACEHOLDER_SUBMITTER_XREF,
                                        name=PLACEHOLDER_SUBMITTER_NAME)
                submitters[placeholder.xref] = placeholder
        for submitter in self._keyed_records(submitters, 'submitters'):
            SubmitterValidator(self, submitter).validate()

    def _validate_header(self) -> None:
        if self.gedcom.header is None:
            if not self.add_repairable("GEDCOM header is missing", self.gedcom):
                return
            self.gedcom.header = Header()
        HeaderValidator(self, self.gedcom.header).validate()

    def _validate_individuals(self) -> None:
        for individual in self._keyed_records(self.gedcom.individuals, 'individuals'):
            IndividualValidator(self, individual).validate()

    def _validate_families(self) -> None:
        for family in self._keyed_records(self.gedcom.families, 'families'):
            FamilyValidator(self, family).validate()

    def _validate_repositories(self) -> None:
        for repository in self._keyed_records(self.gedcom.repositories, 'repositories'):
            RepositoryValidator(self, repository).validate()

    def _validate_multimedia(self) -> None:
        for multimedia in self._keyed_records(self.gedcom.multimedia, 'multimedia'):
            MultimediaValidator(self, multimedia, top_level=True).validate()

    def _validate_notes(self) -> None:
        for i, note in enumerate(self._keyed_records(self.gedcom.notes, 'notes'), 1):
            NoteValidator(self, i, note).validate()

    def _validate_sources(self) -> None:
        for source in self._keyed_records(self.gedcom.sources, 'sources'):
            SourceValidator(self, source).validate()

    def _validate_trailer(self) -> None:
        if self.gedcom.trailer is None:
            if self.add_repairable("GEDCOM trailer is missing", self.gedcom):
                self.gedcom.trailer = Trailer()
