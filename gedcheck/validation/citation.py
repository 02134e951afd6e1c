"""Validator for source citations."""

from ..core.citation import CitationWithoutSource, CitationWithSource
from .base import AbstractValidator


class CitationValidator(AbstractValidator):
    """Validates a citation, with or without a source record."""

    def __init__(self, root, citation):
        super().__init__(root)
        self.citation = citation

    def validate(self) -> None:
        citation = self.citation
        if citation is None:
            self.add_error("Citation is null and cannot be validated")
            return

        if isinstance(citation, CitationWithSource):
            self._check_with_source(citation)
        elif isinstance(citation, CitationWithoutSource):
            self._check_without_source(citation)
        else:
            raise TypeError("Citations must be either CitationWithSource or "
                            f"CitationWithoutSource instances, not {type(citation).__name__}")

        self.check_custom_tags(citation)
        # Notes on citations are not deduplicated
        self.check_notes(citation, handle_duplicates=False)

    def _check_with_source(self, citation: CitationWithSource) -> None:
        if citation.source is None:
            self.add_error("CitationWithSource requires a non-null source reference", citation)
        else:
            self.check_xref(citation, 'source')
        self.check_optional_string(citation.where_in_source, "where within source", citation)
        self.check_optional_string(citation.event_cited, "event type cited from", citation)
        if citation.event_cited is None:
            if citation.role_in_event is not None:
                self.add_error("CitationWithSource has role in event but a null event", citation)
        else:
            self.check_optional_string(citation.role_in_event, "role in event", citation)
        self.check_optional_string(citation.certainty, "certainty/quality", citation)
        self.check_multimedia(citation)

    def _check_without_source(self, citation: CitationWithoutSource) -> None:
        self.check_string_list(citation, 'description',
                               "description on a citation without a source", blanks_allowed=True)
        texts = self.check_list_structure("texts from source", True, citation,
                                          citation.list_ref('text_from_source'))
        if texts is None:
            return
        for text in texts:
            if text is None:
                self.add_error("Text from source collection on CitationWithoutSource "
                               "contains a null", citation)
                continue
            for line in text:
                if line is None:
                    self.add_error("Text from source on CitationWithoutSource contains "
                                   "a null line", citation)
