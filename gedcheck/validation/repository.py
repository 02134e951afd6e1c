"""Validator for repository (REPO) records."""

from .base import AbstractValidator


class RepositoryValidator(AbstractValidator):

    def __init__(self, root, repository):
        super().__init__(root)
        self.repository = repository

    def validate(self) -> None:
        r = self.repository
        if r is None:
            self.add_error("Repository being validated is null")
            return
        self.check_xref(r)
        self.check_optional_string(r.name, "name", r)
        self.check_address(r.address)
        self.check_string_list(r, 'emails', "e-mails", blanks_allowed=False)
        self.check_string_list(r, 'fax_numbers', "fax numbers", blanks_allowed=False)
        self.check_string_list(r, 'phone_numbers', "phone numbers", blanks_allowed=False)
        self.check_string_list(r, 'www_urls', "Web URLs", blanks_allowed=False)
        self.check_notes(r)
        self.check_user_references(r)
        self.check_optional_string(r.rec_id_number, "automated record id", r)
        self.check_change_date(r.change_date, r)
        self.check_custom_tags(r)
