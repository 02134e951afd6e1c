"""Validator for events and attributes of individuals and families."""

from .base import AbstractValidator
from .place import PlaceValidator

# Description value allowed on events that only assert that they happened
EVENT_HAPPENED = 'Y'


class EventValidator(AbstractValidator):
    """Validates an Event, IndividualEvent, FamilyEvent or IndividualAttribute.

    Events are not supposed to carry a description; the only standard value
    is 'Y', meaning the event is known to have happened. Attributes store
    their value in the description, so the check is skipped for them.

    Args:
        root: Root GedcomValidator
        event: Event to validate
        allow_description: True for attributes, whose value is the description
    """

    def __init__(self, root, event, allow_description: bool = False):
        super().__init__(root)
        self.event = event
        self.allow_description = allow_description

    def validate(self) -> None:
        e = self.event
        if e is None:
            self.add_error("Event is null and cannot be validated")
            return

        self.check_address(e.address)
        self.check_optional_string(e.age, "age", e)
        self.check_optional_string(e.cause, "cause", e)
        self.check_optional_string(e.date, "date", e)
        self.check_optional_string(e.religious_affiliation, "religious affiliation", e)
        self.check_optional_string(e.resp_agency, "responsible agency", e)
        self.check_optional_string(e.restriction_notice, "restriction notice", e)
        self.check_optional_string(e.sub_type, "subtype", e)
        if (not self.allow_description and self.is_specified(e.description)
                and e.description.strip() != EVENT_HAPPENED):
            self.add_error(f"Event has description, which is non-standard. "
                           f"Remove this value, or move it (perhaps to a Note). "
                           f"Description: {e.description!r}", e)

        self.check_citations(e)
        self.check_custom_tags(e)
        self.check_string_list(e, 'emails', "e-mails", blanks_allowed=False)
        self.check_string_list(e, 'fax_numbers', "fax numbers", blanks_allowed=False)
        self.check_string_list(e, 'phone_numbers', "phone numbers", blanks_allowed=False)
        self.check_string_list(e, 'www_urls', "Web URLs", blanks_allowed=False)
        self.check_multimedia(e)
        self.check_notes(e)
        if e.place is not None:
            PlaceValidator(self.root, e.place).validate()

        family = getattr(e, 'family', None)
        if family is not None:
            self.check_xref(e, 'family')
        for age_field, description in (('husband_age', "husband's age"),
                                       ('wife_age', "wife's age")):
            self.check_optional_string(getattr(e, age_field, None), description, e)
