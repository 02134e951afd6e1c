"""Validator for notes, both top-level NOTE records and inline notes."""

from .base import AbstractValidator


class NoteValidator(AbstractValidator):
    """Validates a single note.

    Args:
        root: Root GedcomValidator
        index: 1-based position of the note in its list, used in findings
        note: Note to validate
    """

    def __init__(self, root, index: int, note):
        super().__init__(root)
        self.index = index
        self.note = note

    def validate(self) -> None:
        note = self.note
        if note is None:
            self.add_error(f"Note {self.index} is null and cannot be validated")
            return

        lines = self.check_string_list(note, 'lines', "lines of text", blanks_allowed=True)
        if note.xref is None and not lines:
            self.add_error(f"Note {self.index} without xref has no lines", note)
        if note.xref is not None:
            self.check_xref(note)

        self.check_optional_string(note.rec_id_number, "automated record id", note)
        self.check_citations(note)
        self.check_user_references(note)
        self.check_change_date(note.change_date, note)
        self.check_custom_tags(note)
