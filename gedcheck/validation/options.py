"""Configuration for a validation session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationOptions:
    """Options fixed for the lifetime of a GedcomValidator.

    Attributes:
        auto_repair: Correct repairable defects in place and report them as
            info, instead of reporting them as errors
        collections_required: Absent list-valued fields are defects; when
            False, a missing list is treated as an empty one
        max_language_prefs: Maximum number of language preferences on a
            submitter
    """

    auto_repair: bool = True
    collections_required: bool = True
    max_language_prefs: int = 3

    @classmethod
    def strict(cls) -> 'ValidationOptions':
        """Options that report every defect and never modify the graph."""
        return cls(auto_repair=False)
