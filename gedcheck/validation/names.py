"""Validators for personal names and their phonetic/romanized variations."""

from ..core.name import PersonalNameVariation
from .base import AbstractValidator
from .place import NameVariationValidator


class PersonalNameVariationValidator(NameVariationValidator):
    """Validates a variation of a personal name, including its name pieces."""

    def validate(self) -> None:
        super().validate()
        pnv = self.name_variation
        if pnv is None:
            return
        if not isinstance(pnv, PersonalNameVariation):
            self.add_error("Name variation on person is not a PersonalNameVariation", pnv)
            return
        self.check_optional_string(pnv.given_name, "given name", pnv)
        self.check_optional_string(pnv.nickname, "nickname", pnv)
        self.check_optional_string(pnv.prefix, "prefix", pnv)
        self.check_optional_string(pnv.suffix, "suffix", pnv)
        self.check_optional_string(pnv.surname, "surname", pnv)
        self.check_optional_string(pnv.surname_prefix, "surname prefix", pnv)
        self.check_citations(pnv)
        self.check_notes(pnv)


class PersonalNameValidator(AbstractValidator):
    """Validates one NAME structure of an individual.

    The basic name (the ``Given /Surname/`` text) is required. The split
    pieces are optional, but must not be blank when given.
    """

    def __init__(self, root, personal_name):
        super().__init__(root)
        self.personal_name = personal_name

    def validate(self) -> None:
        name = self.personal_name
        if name is None:
            self.add_error("Personal name was null - cannot validate")
            return

        self.check_required_string(name.basic, "basic name", name)
        self.check_optional_string(name.given_name, "given name", name)
        self.check_optional_string(name.nickname, "nickname", name)
        self.check_optional_string(name.prefix, "prefix", name)
        self.check_optional_string(name.suffix, "suffix", name)
        self.check_optional_string(name.surname, "surname", name)
        self.check_optional_string(name.surname_prefix, "surname prefix", name)
        self.check_citations(name)
        self.check_custom_tags(name)
        self.check_notes(name)

        for attribute, description in (('phonetic', "phonetic name variations"),
                                       ('romanized', "romanized name variations")):
            variations = self.check_list_structure(description, True, name,
                                                   name.list_ref(attribute))
            if variations is not None:
                for pnv in variations:
                    PersonalNameVariationValidator(self.root, pnv).validate()
