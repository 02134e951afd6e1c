"""
Validator for individual (INDI) records.

Checks names, events, attributes, associations and the links to families,
submitters and other individuals. Linked records are only resolved here;
each of them is validated once from its own table.
"""

from .base import AbstractValidator
from .event import EventValidator
from .names import PersonalNameValidator

VALID_SEX_VALUES = ('M', 'F', 'U')


class IndividualValidator(AbstractValidator):
    """Validates one Individual record."""

    def __init__(self, root, individual):
        super().__init__(root)
        self.individual = individual

    def validate(self) -> None:
        i = self.individual
        if i is None:
            self.add_error("Individual being validated is null")
            return

        self.check_xref(i)
        self.check_names()
        self.check_sex()
        self.check_token_lists()
        self.check_associations()
        self.check_citations(i)
        self.check_attributes()
        self.check_events()
        self.check_family_links()
        self.check_custom_tags(i)
        self.check_multimedia(i)
        self.check_notes(i)
        self.check_user_references(i)
        self.check_change_date(i.change_date, i)
        self.check_optional_string(i.restriction_notice, "restriction notice", i)
        self.check_optional_string(i.permanent_rec_file_number, "permanent record file number", i)
        self.check_optional_string(i.ancestral_file_number, "ancestral file number", i)
        self.check_optional_string(i.rec_id_number, "automated record id", i)

    def check_names(self) -> None:
        names = self.check_list_structure("names", True, self.individual,
                                          self.individual.list_ref('names'))
        if names is not None:
            for name in names:
                PersonalNameValidator(self.root, name).validate()

    def check_sex(self) -> None:
        i = self.individual
        self.check_optional_string(i.sex, "sex", i)
        if self.is_specified(i.sex) and i.sex.strip() not in VALID_SEX_VALUES:
            self.add_error(f"Sex on Individual must be one of {', '.join(VALID_SEX_VALUES)}, "
                           f"not {i.sex!r}", i)

    def check_token_lists(self) -> None:
        """Check aliases, submitter interests and submitters: format and resolution."""
        i = self.individual
        aliases = self.check_xref_list(i, 'aliases', "aliases")
        for xref in aliases or []:
            self.check_xref_resolves(xref, self.gedcom.individuals, "Alias", i)

        for attribute, description in (('ancestor_interest', "ancestor interest"),
                                       ('descendant_interest', "descendant interest"),
                                       ('submitters', "submitters")):
            tokens = self.check_xref_list(i, attribute, description)
            for xref in tokens or []:
                self.check_xref_resolves(xref, self.gedcom.submitters,
                                         f"Submitter in {description}", i)

    def check_associations(self) -> None:
        associations = self.check_list_structure("associations", True, self.individual,
                                                 self.individual.list_ref('associations'))
        if associations is None:
            return
        for a in associations:
            if a is None:
                self.add_error("Association on Individual is null", self.individual)
                continue
            self.check_required_string(a.associated_entity_type, "associated entity type", a)
            self.check_xref(a, 'associated_entity')
            self.check_required_string(a.relationship, "relationship", a)
            self.check_citations(a)
            self.check_custom_tags(a)
            self.check_notes(a)

    def check_attributes(self) -> None:
        attributes = self.check_list_structure("attributes", True, self.individual,
                                               self.individual.list_ref('attributes'))
        if attributes is None:
            return
        for attribute in attributes:
            if attribute is None:
                self.add_error("Attribute on Individual is null", self.individual)
                continue
            self.check_required_string(attribute.type, "attribute type", attribute)
            EventValidator(self.root, attribute, allow_description=True).validate()

    def check_events(self) -> None:
        events = self.check_list_structure("events", True, self.individual,
                                           self.individual.list_ref('events'))
        if events is None:
            return
        for event in events:
            if event is None:
                self.add_error("Event on Individual is null", self.individual)
                continue
            self.check_required_string(event.type, "event type", event)
            EventValidator(self.root, event).validate()

    def check_family_links(self) -> None:
        """Check FAMC and FAMS links. The families themselves are validated elsewhere."""
        i = self.individual
        children = self.check_list_structure("families where the individual was a child", True,
                                             i, i.list_ref('families_where_child'))
        for fc in children or []:
            if fc is None:
                self.add_error("Family to which an individual was a child was null", i)
                continue
            self.check_xref(fc, 'family')
            self.check_optional_string(fc.pedigree, "pedigree", fc)
            self.check_optional_string(fc.status, "status", fc)
            self.check_optional_string(fc.adopted_by, "adopted by", fc)
            self.check_custom_tags(fc)
            self.check_notes(fc)

        spouses = self.check_list_structure("families where the individual was a spouse", True,
                                            i, i.list_ref('families_where_spouse'))
        for fs in spouses or []:
            if fs is None:
                self.add_error("Family in which an individual was a spouse was null", i)
                continue
            self.check_xref(fs, 'family')
            self.check_custom_tags(fs)
            self.check_notes(fs)
