"""Validator for source (SOUR) records."""

from .base import AbstractValidator


class SourceValidator(AbstractValidator):
    """Validates one Source record, its data block and repository citation."""

    def __init__(self, root, source):
        super().__init__(root)
        self.source = source

    def validate(self) -> None:
        s = self.source
        if s is None:
            self.add_error("Source being validated is null")
            return

        self.check_xref(s)
        self.check_change_date(s.change_date, s)
        if s.data is not None:
            self.check_source_data(s.data)
        self.check_custom_tags(s)
        self.check_multimedia(s)
        self.check_notes(s)
        self.check_string_list(s, 'originators_authors', "originators/authors", blanks_allowed=False)
        self.check_string_list(s, 'publication_facts', "publication facts", blanks_allowed=False)
        self.check_string_list(s, 'source_text', "source text", blanks_allowed=True)
        self.check_string_list(s, 'title', "title", blanks_allowed=True)
        self.check_optional_string(s.rec_id_number, "automated record id", s)
        self.check_optional_string(s.source_filed_by, "source filed by", s)
        self.check_user_references(s)
        if s.repository_citation is not None:
            self.check_repository_citation(s.repository_citation)

    def check_source_data(self, data) -> None:
        events = self.check_list_structure("events recorded", True, data,
                                           data.list_ref('events_recorded'))
        for er in events or []:
            if er is None:
                self.add_error("Event recorded in source data is null", data)
                continue
            self.check_optional_string(er.event_type, "event type", er)
            self.check_optional_string(er.date_period, "date period", er)
            self.check_optional_string(er.jurisdiction, "jurisdiction", er)
            self.check_custom_tags(er)
        self.check_optional_string(data.resp_agency, "responsible agency", data)
        self.check_custom_tags(data)
        self.check_notes(data)

    def check_repository_citation(self, citation) -> None:
        if citation.repository is None:
            self.add_error("Repository citation on Source has no repository reference", citation)
        else:
            self.check_xref(citation, 'repository')
        self.check_custom_tags(citation)
        self.check_notes(citation)
        call_numbers = self.check_list_structure("call numbers", True, citation,
                                                 citation.list_ref('call_numbers'))
        for cn in call_numbers or []:
            if cn is None:
                self.add_error("Call number on repository citation is null", citation)
                continue
            self.check_optional_string(cn.call_number, "call number", cn)
            if cn.call_number is None:
                if cn.media_type is not None:
                    self.add_error("You cannot specify media type without a call number "
                                   "in a SourceCallNumber structure", cn)
            else:
                self.check_optional_string(cn.media_type, "media type", cn)
            self.check_custom_tags(cn)
