"""
Shared checks used by every validator.

The two primitives are the string checks (required / optional) and list
reconciliation (``check_list_structure``), which makes sure a list-valued
field exists and, when asked, removes duplicate entries from it.
"""

from typing import Any, List, Optional

from ..core.element import ListRef, ModelElement, freeze
from .findings import Severity


class ValidatorBase:
    """Checks shared by the root validator and all child validators.

    Subclasses provide ``root``, the GedcomValidator that owns the findings
    and the options of the current session.
    """

    @property
    def root(self):
        raise NotImplementedError

    @property
    def options(self):
        return self.root.options

    @property
    def gedcom(self):
        return self.root.gedcom

    @property
    def auto_repair(self) -> bool:
        return self.options.auto_repair

    def validate(self) -> None:
        raise NotImplementedError

    # Reporting

    def add_error(self, description: str, subject: Any = None) -> None:
        self.root.record(description, Severity.ERROR, subject)

    def add_warning(self, description: str, subject: Any = None) -> None:
        self.root.record(description, Severity.WARNING, subject)

    def add_info(self, description: str, subject: Any = None) -> None:
        self.root.record(description, Severity.INFO, subject)

    def add_repairable(self, message: str, subject: Any = None) -> bool:
        """Report a defect that auto-repair can fix.

        Args:
            message: Description of the defect, without any repair suffix
            subject: Element with the defect

        Returns:
            True if the caller should repair the defect now
        """
        if self.auto_repair:
            self.add_info(f"{message} - repaired", subject)
            return True
        self.add_error(message, subject)
        return False

    def add_unrepairable(self, message: str, subject: Any = None) -> None:
        """Report a defect that is never repaired, whatever the policy."""
        if self.auto_repair:
            message += " - cannot repair"
        self.add_error(message, subject)

    # Strings

    @staticmethod
    def is_specified(value: Optional[str]) -> bool:
        """True if the string is present and has at least one non-whitespace character."""
        return value is not None and bool(value.strip())

    def check_required_string(self, value: Optional[str], field_description: str,
                              owner: Any) -> None:
        """Report an error if a required string is missing, empty or blank."""
        if not self.is_specified(value):
            self.add_error(f"{field_description} on {type(owner).__name__} is required, "
                           f"but is either null or blank", owner)

    def check_optional_string(self, value: Optional[str], field_description: str,
                              owner: Any) -> None:
        """Report an error if an optional string is present but blank."""
        if value is not None and not self.is_specified(value):
            self.add_error(f"{field_description} on {type(owner).__name__} is specified, "
                           f"but has a blank value", owner)

    def check_xref(self, owner: ModelElement, field_name: str = 'xref') -> None:
        """Check that an xref-valued field of an element is well formed."""
        self.check_xref_value(getattr(owner, field_name), field_name, owner)

    def check_xref_value(self, xref: Optional[str], field_name: str,
                         owner: Any) -> None:
        """Check an xref token such as '@I1@'.

        Each broken rule is reported separately: at least three characters,
        starts with an at-sign, ends with an at-sign.
        """
        self.check_required_string(xref, field_name, owner)
        if not self.is_specified(xref):
            return
        context = type(owner).__name__
        if len(xref) < 3:
            self.add_error(f"{field_name} on {context} is too short to be a valid xref", owner)
        if not xref.startswith('@'):
            self.add_error(f"{field_name} on {context} doesn't start with an at-sign (@)", owner)
        if not xref.endswith('@'):
            self.add_error(f"{field_name} on {context} doesn't end with an at-sign (@)", owner)

    # Lists

    @staticmethod
    def eliminate_duplicates(items: Optional[list]) -> int:
        """Remove value-equal repeats from a list in place.

        The first occurrence of each value is kept and the order of the
        survivors is preserved.

        Args:
            items: List to prune, may be None

        Returns:
            Number of entries removed
        """
        if not items:
            return 0
        seen = set()
        kept = []
        for item in items:
            key = freeze(item)
            if key in seen:
                continue
            seen.add(key)
            kept.append(item)
        removed = len(items) - len(kept)
        if removed:
            items[:] = kept
        return removed

    def check_list_structure(self, name: str, handle_duplicates: bool,
                             owner: ModelElement, ref: ListRef) -> Optional[list]:
        """Reconcile one list-valued field of an element.

        An absent list is created (repair) or reported (strict). When repair
        is on and ``handle_duplicates`` is set, duplicate entries are removed.

        Args:
            name: Name of the field, used in findings
            handle_duplicates: Whether duplicates should be removed
            owner: Element holding the list
            ref: Peek/get-or-create access to the list

        Returns:
            The list to validate element by element, or None if it is absent
        """
        items = ref.peek()
        qualified_name = f"List of {name} on {type(owner).__name__}"
        if items is None:
            if not self.options.collections_required:
                return None
            if self.auto_repair:
                items = ref.get_or_create()
                self.add_info(f"{qualified_name} was null - repaired", owner)
            else:
                self.add_error(f"{qualified_name} is null", owner)
            return items
        if self.auto_repair and handle_duplicates:
            removed = self.eliminate_duplicates(items)
            if removed:
                self.add_info(f"{removed} duplicates in {qualified_name} found and removed", owner)
        return items

    def check_string_list(self, owner: ModelElement, attribute: str, description: str,
                          blanks_allowed: bool, handle_duplicates: bool = False) -> Optional[List[str]]:
        """Reconcile a list of strings and check its entries.

        Null entries, and blank entries where blanks are not allowed, are
        removed under repair and reported as errors otherwise.

        Returns:
            The list, or None if it is absent
        """
        items = self.check_list_structure(description, handle_duplicates, owner,
                                          owner.list_ref(attribute))
        if items is None:
            return None
        i = 0
        while i < len(items):
            value = items[i]
            if value is None:
                problem = f"String list ({description}) contains null entry"
            elif not blanks_allowed and not self.is_specified(value):
                problem = f"String list ({description}) contains blank entry where none are allowed"
            else:
                i += 1
                continue
            if self.add_repairable(problem, owner):
                del items[i]
                continue
            i += 1
        return items

    def check_xref_list(self, owner: ModelElement, attribute: str,
                        description: str) -> Optional[List[str]]:
        """Reconcile a list of xref tokens and check the format of each one."""
        items = self.check_string_list(owner, attribute, description,
                                       blanks_allowed=False, handle_duplicates=True)
        if items is not None:
            for xref in items:
                if self.is_specified(xref):
                    self.check_xref_value(xref, description, owner)
        return items

    @staticmethod
    def resolve_xref(xref: Optional[str], table: dict) -> Optional[Any]:
        """Look up a record by xref.

        Only a record stored under its own xref counts. Wrongly keyed
        entries are reported by the root validator and must not be reached
        through links either.
        """
        if not xref:
            return None
        record = table.get(xref)
        if record is None or getattr(record, 'xref', None) != xref:
            return None
        return record

    def check_xref_resolves(self, xref: Optional[str], table: dict, description: str,
                            owner: Any) -> bool:
        """Report an error if a well-formed token has no record in the given table.

        Returns:
            True if the token resolves
        """
        if not self.is_specified(xref):
            return False
        if self.resolve_xref(xref, table) is None:
            self.add_error(f"{description} {xref} on {type(owner).__name__} "
                           f"does not reference a known record", owner)
            return False
        return True

    def check_custom_tags(self, owner: ModelElement) -> None:
        """The custom tag list must exist, even if empty."""
        self.check_list_structure("custom tags", False, owner, owner.list_ref('custom_tags'))

    # Common substructures

    def check_change_date(self, change_date, owner: ModelElement) -> None:
        if change_date is None:
            # Change dates are always optional
            return
        self.check_required_string(change_date.date, "change date", owner)
        self.check_optional_string(change_date.time, "change time", owner)
        self.check_notes(change_date)

    def check_user_references(self, owner: ModelElement) -> None:
        references = self.check_list_structure("user references", True, owner,
                                               owner.list_ref('user_references'))
        if references is None:
            return
        for reference in references:
            if reference is None:
                self.add_error(f"User reference in list on {type(owner).__name__} is null", owner)
                continue
            self.check_custom_tags(reference)
            self.check_required_string(reference.reference_num, "reference number", reference)
            self.check_optional_string(reference.type, "reference type", reference)

    def check_notes(self, owner: ModelElement, handle_duplicates: bool = True) -> None:
        from .notes import NoteValidator

        notes = self.check_list_structure("notes", handle_duplicates, owner,
                                          owner.list_ref('notes'))
        if notes is not None:
            for i, note in enumerate(notes, 1):
                NoteValidator(self.root, i, note).validate()

    def check_citations(self, owner: ModelElement, handle_duplicates: bool = True) -> None:
        from .citation import CitationValidator

        citations = self.check_list_structure("citations", handle_duplicates, owner,
                                              owner.list_ref('citations'))
        if citations is not None:
            for citation in citations:
                CitationValidator(self.root, citation).validate()

    def check_multimedia(self, owner: ModelElement) -> None:
        from .multimedia import MultimediaValidator

        multimedia = self.check_list_structure("multimedia", True, owner,
                                               owner.list_ref('multimedia'))
        if multimedia is not None:
            for mm in multimedia:
                MultimediaValidator(self.root, mm).validate()

    def check_address(self, address) -> None:
        from .address import AddressValidator

        if address is not None:
            AddressValidator(self.root, address).validate()


class AbstractValidator(ValidatorBase):
    """Base for validators of one record or substructure.

    Child validators always work on behalf of a root GedcomValidator, which
    owns the findings and the options.
    """

    def __init__(self, root):
        if root is None:
            raise ValueError(f"{type(self).__name__} requires a root GedcomValidator")
        self._root = root

    @property
    def root(self):
        return self._root
