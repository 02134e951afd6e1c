"""Base classes shared by every element of the GEDCOM record graph."""

from dataclasses import dataclass, fields
from typing import Any, Callable, List, NamedTuple, Optional


class ListRef(NamedTuple):
    """Access to one list-valued field of a model element.

    Attributes:
        peek: Returns the current list, or None if it was never created
        get_or_create: Returns the list, creating an empty one if needed
    """

    peek: Callable[[], Optional[list]]
    get_or_create: Callable[[], list]


def freeze(value: Any, active: Optional[set] = None) -> Any:
    """Convert a value into a hashable structure that compares by value.

    Args:
        value: Model element, container or scalar
        active: Ids of the elements being frozen further up the current path

    Returns:
        Tuple/frozenset based equivalent of the value
    """
    if isinstance(value, ModelElement):
        return value.value_key(active)
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item, active) for item in value)
    if isinstance(value, dict):
        return tuple((key, freeze(item, active)) for key, item in value.items())
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item, active) for item in value)
    return value


@dataclass(slots=True, eq=False, weakref_slot=True)
class ModelElement:
    """Base for all records and substructures in a GEDCOM graph.

    Elements compare and hash by value, so two separately built citations
    with the same content are equal. List-valued fields start out as None
    and are only materialized on request.

    Attributes:
        custom_tags: Opaque extension data (user-defined ``_TAG`` lines)
    """

    custom_tags: Optional[List[Any]] = None

    def value_key(self, active: Optional[set] = None) -> tuple:
        """Return a hashable snapshot of this element's content.

        An element met again on its own path (a looping chain of continued
        multimedia objects, for one) is represented by a marker.
        """
        if active is None:
            active = set()
        if id(self) in active:
            return (type(self).__name__, '<cycle>')
        active.add(id(self))
        try:
            return (type(self).__name__,) + tuple(
                freeze(getattr(self, f.name), active) for f in fields(self)
            )
        finally:
            active.discard(id(self))

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.value_key() == other.value_key()

    def __hash__(self) -> int:
        return hash(self.value_key())

    def peek_list(self, name: str) -> Optional[list]:
        """Get a list-valued field without creating it.

        Args:
            name: Attribute name of the list field

        Returns:
            The list, or None if it has not been created
        """
        return getattr(self, name)

    def get_or_create_list(self, name: str) -> list:
        """Get a list-valued field, creating an empty list if it is absent.

        Args:
            name: Attribute name of the list field

        Returns:
            The existing or newly created list
        """
        value = getattr(self, name)
        if value is None:
            value = []
            setattr(self, name, value)
        return value

    def list_ref(self, name: str) -> ListRef:
        """Bundle the peek and get-or-create operations for one field."""
        return ListRef(
            peek=lambda: self.peek_list(name),
            get_or_create=lambda: self.get_or_create_list(name),
        )


@dataclass(slots=True, eq=False)
class Record(ModelElement):
    """An independently addressable record carrying an xref token (e.g. '@I1@')."""

    xref: Optional[str] = None
