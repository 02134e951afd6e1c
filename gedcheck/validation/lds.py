"""Validator for LDS spouse sealings on families."""

from .base import AbstractValidator


class LdsSpouseSealingValidator(AbstractValidator):

    def __init__(self, root, sealing):
        super().__init__(root)
        self.sealing = sealing

    def validate(self) -> None:
        s = self.sealing
        if s is None:
            self.add_error("LDS spouse sealing is null and cannot be validated")
            return
        self.check_citations(s)
        self.check_custom_tags(s)
        self.check_notes(s)
        self.check_optional_string(s.date, "date", s)
        self.check_optional_string(s.place, "place", s)
        self.check_optional_string(s.status, "status", s)
        self.check_optional_string(s.temple, "temple code", s)
