"""Validators for submitter (SUBM) and submission (SUBN) records."""

from .base import AbstractValidator


class SubmitterValidator(AbstractValidator):
    """Validates a Submitter.

    A submitter may list at most ``options.max_language_prefs`` preferred
    languages (three in the GEDCOM standard).
    """

    def __init__(self, root, submitter):
        super().__init__(root)
        self.submitter = submitter

    def validate(self) -> None:
        s = self.submitter
        if s is None:
            self.add_error("Submitter being validated is null")
            return

        self.check_xref(s)
        self.check_required_string(s.name, "name", s)
        self.check_language_prefs()
        self.check_optional_string(s.rec_id_number, "automated record id", s)
        self.check_optional_string(s.reg_file_number, "registration file number", s)
        self.check_address(s.address)
        self.check_string_list(s, 'emails', "e-mails", blanks_allowed=False)
        self.check_string_list(s, 'phone_numbers', "phone numbers", blanks_allowed=False)
        self.check_change_date(s.change_date, s)
        self.check_custom_tags(s)
        self.check_notes(s)
        self.check_multimedia(s)

    def check_language_prefs(self) -> None:
        s = self.submitter
        prefs = self.check_list_structure("language preferences", True, s,
                                          s.list_ref('language_pref'))
        if prefs is None:
            return
        limit = self.options.max_language_prefs
        if len(prefs) > limit:
            self.add_error(f"Submitter exceeds limit on language preferences ({limit})", s)
        for pref in prefs:
            self.check_required_string(pref, "language pref", s)


class SubmissionValidator(AbstractValidator):

    def __init__(self, root, submission):
        super().__init__(root)
        self.submission = submission

    def validate(self) -> None:
        s = self.submission
        if s is None:
            self.add_error("Submission being validated is null")
            return
        self.check_xref(s)
        if s.submitter is not None:
            self.check_xref(s, 'submitter')
        self.check_optional_string(s.ancestors_count, "ancestors count", s)
        self.check_optional_string(s.descendants_count, "descendants count", s)
        self.check_optional_string(s.name_of_family_file, "name of family file", s)
        self.check_optional_string(s.ordinance_process_flag, "ordinance process flag", s)
        self.check_optional_string(s.rec_id_number, "automated record id", s)
        self.check_optional_string(s.temple_code, "temple code", s)
        self.check_custom_tags(s)
        self.check_notes(s)
