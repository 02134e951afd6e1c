"""
Validator for family (FAM) records.

Spouses are resolved through the root graph and validated as individuals.
Children are only checked to exist.
"""

from .base import AbstractValidator
from .event import EventValidator
from .individual import IndividualValidator
from .lds import LdsSpouseSealingValidator


class FamilyValidator(AbstractValidator):
    """Validates one Family record."""

    def __init__(self, root, family):
        super().__init__(root)
        self.family = family

    def validate(self) -> None:
        f = self.family
        if f is None:
            self.add_error("Family being validated is null")
            return

        self.check_xref(f)
        self.check_optional_string(f.automated_record_id, "automated record id", f)
        self.check_change_date(f.change_date, f)
        self.check_children()
        self.check_citations(f)
        self.check_custom_tags(f)
        self.check_events()
        self.check_spouse(f.husband, "husband")
        self.check_spouse(f.wife, "wife")
        self.check_sealings()
        self.check_multimedia(f)
        self.check_notes(f)
        self.check_optional_string(f.num_children, "number of children", f)
        self.check_optional_string(f.rec_file_number, "record file number", f)
        self.check_optional_string(f.restriction_notice, "restriction notice", f)
        submitters = self.check_xref_list(f, 'submitters', "submitters")
        for xref in submitters or []:
            self.check_xref_resolves(xref, self.gedcom.submitters, "Submitter", f)
        self.check_user_references(f)

    def check_children(self) -> None:
        f = self.family
        children = self.check_xref_list(f, 'children', "children")
        for xref in children or []:
            self.check_xref_resolves(xref, self.gedcom.individuals, "Child", f)

    def check_events(self) -> None:
        events = self.check_list_structure("events", True, self.family,
                                           self.family.list_ref('events'))
        for event in events or []:
            if event is None:
                self.add_error("Event on Family is null", self.family)
                continue
            self.check_required_string(event.type, "event type", event)
            EventValidator(self.root, event).validate()

    def check_spouse(self, xref, role: str) -> None:
        if xref is None:
            return
        self.check_xref(self.family, role)
        individual = self.resolve_xref(xref, self.gedcom.individuals)
        if individual is None:
            self.add_error(f"The {role} {xref} on Family does not reference a known "
                           f"individual", self.family)
            return
        IndividualValidator(self.root, individual).validate()

    def check_sealings(self) -> None:
        sealings = self.check_list_structure("LDS spouse sealings", True, self.family,
                                             self.family.list_ref('lds_spouse_sealings'))
        for sealing in sealings or []:
            LdsSpouseSealingValidator(self.root, sealing).validate()
