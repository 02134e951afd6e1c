"""
Validator for multimedia objects (OBJE).

The rules differ between GEDCOM 5.5 and 5.5.1. In 5.5 the object carries
its data inline as a blob with an embedded format; in 5.5.1 it points at
files instead, and the blob and embedded format are gone.
"""

import logging
from typing import Optional, Set

from ..core.header import SupportedVersion
from .base import AbstractValidator

logger = logging.getLogger(__name__)


class MultimediaValidator(AbstractValidator):
    """Validates one Multimedia object.

    The GEDCOM version is looked up from the header when the validator is
    created. If it cannot be determined, auto-repair assumes 5.5.1 and
    strict validation reports an error and skips the version-specific rules.

    Args:
        root: Root GedcomValidator
        multimedia: Multimedia object to validate
        top_level: True for OBJE records, which must have an xref
        chain: Ids of the objects that continue into this one
    """

    def __init__(self, root, multimedia, top_level: bool = False,
                 chain: Optional[Set[int]] = None):
        super().__init__(root)
        self.multimedia = multimedia
        self.top_level = top_level
        self.chain = chain if chain is not None else set()
        self.version = self._resolve_version() if multimedia is not None else None

    def _resolve_version(self) -> Optional[SupportedVersion]:
        header = self.gedcom.header if self.gedcom is not None else None
        gedcom_version = header.gedcom_version if header is not None else None
        version = gedcom_version.version_number if gedcom_version is not None else None
        if version is not None:
            return version
        message = "GEDCOM version in header could not be determined for multimedia object"
        if self.auto_repair:
            self.add_info(f"{message} - assuming 5.5.1", self.multimedia)
            return SupportedVersion.V5_5_1
        self.add_error(message, self.multimedia)
        return None

    def validate(self) -> None:
        mm = self.multimedia
        if mm is None:
            self.add_error("Multimedia object is null and cannot be validated")
            return

        if self.top_level or mm.xref is not None:
            self.check_xref(mm)
        self.check_optional_string(mm.rec_id_number, "automated record id", mm)
        self.check_change_date(mm.change_date, mm)
        self.check_user_references(mm)
        self.check_list_structure("citations", True, mm, mm.list_ref('citations'))
        self.check_continued_object()
        self.check_list_structure("blob", False, mm, mm.list_ref('blob'))
        self.check_custom_tags(mm)
        self.check_notes(mm)

        if self.version == SupportedVersion.V5_5:
            self._check_for_5_5()
        elif self.version == SupportedVersion.V5_5_1:
            self._check_for_5_5_1()
        else:
            logger.debug(f"Skipping version specific checks for {mm.xref}")

    def check_continued_object(self) -> None:
        mm = self.multimedia
        if mm.continued_object is None:
            return
        chain = self.chain | {id(mm)}
        if id(mm.continued_object) in chain:
            if self.add_repairable("Chain of continued multimedia objects loops back "
                                   "on itself", mm):
                mm.continued_object = None
            return
        MultimediaValidator(self.root, mm.continued_object, chain=chain).validate()

    def _check_for_5_5(self) -> None:
        mm = self.multimedia
        if not mm.blob:
            self.add_unrepairable("Embedded media object must have a non-empty blob "
                                  "in GEDCOM 5.5", mm)
        self.check_required_string(mm.embedded_media_format, "format", mm)
        if mm.citations:
            if self.add_repairable("Citations are not allowed on multimedia objects "
                                   "in GEDCOM 5.5", mm):
                mm.citations.clear()

    def _check_for_5_5_1(self) -> None:
        mm = self.multimedia
        file_references = self.check_list_structure("file references", True, mm,
                                                    mm.list_ref('file_references'))
        if file_references is not None:
            if not file_references:
                self.add_error("Multimedia object must have at least one file reference "
                               "in GEDCOM 5.5.1", mm)
            for fr in file_references:
                if fr is None:
                    self.add_error("File reference on Multimedia is null", mm)
                    continue
                self.check_required_string(fr.format, "format", fr)
                self.check_required_string(fr.reference_to_file, "file reference", fr)
                self.check_optional_string(fr.media_type, "media type", fr)
                self.check_optional_string(fr.title, "title", fr)
                self.check_custom_tags(fr)

        if mm.blob:
            if self.add_repairable("Blob data is not allowed on multimedia objects "
                                   "in GEDCOM 5.5.1", mm):
                mm.blob.clear()
        if mm.embedded_media_format is not None:
            if self.add_repairable("Embedded media format is not allowed on multimedia "
                                   "objects in GEDCOM 5.5.1", mm):
                mm.embedded_media_format = None
        self.check_citations(mm)
