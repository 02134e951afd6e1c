"""
Validator for the GEDCOM header (HEAD).

Most header defects can be repaired with defaults: the character set
defaults to ANSEL, the GEDCOM version to 5.5.1, and names that identify
the producing system to UNSPECIFIED.
"""

from ..core.header import (
    SUPPORTED_CHARACTER_SETS,
    CharacterSet,
    GedcomVersion,
    SourceSystem,
    SupportedVersion,
)
from .base import AbstractValidator

DEFAULT_CHARACTER_SET = 'ANSEL'
DEFAULT_VERSION = SupportedVersion.V5_5_1
UNSPECIFIED = 'UNSPECIFIED'


class HeaderValidator(AbstractValidator):
    """Validates (and repairs) the Header of a Gedcom."""

    def __init__(self, root, header):
        super().__init__(root)
        self.header = header

    def validate(self) -> None:
        h = self.header
        if h is None:
            self.add_error("Header being validated is null")
            return

        self.check_character_set()
        self.check_string_list(h, 'copyright_data', "copyright data", blanks_allowed=True)
        self.check_custom_tags(h)
        self.check_optional_string(h.date, "date", h)
        self.check_optional_string(h.time, "time", h)
        self.check_optional_string(h.destination_system, "destination system", h)
        self.check_optional_string(h.file_name, "file name", h)
        if not self.check_gedcom_version():
            # Records referenced from the header are left alone without a version
            return
        self.check_optional_string(h.language, "language", h)
        self.check_optional_string(h.place_hierarchy, "place hierarchy", h)
        self.check_notes(h)
        self.check_source_system()
        self.check_submitter()
        self.check_submission()

    def check_gedcom_version(self) -> bool:
        """Make sure the header states a supported version.

        Returns:
            False if the version is missing and was not repaired, or names
            a version that is not supported
        """
        h = self.header
        if h.gedcom_version is None:
            if not self.add_repairable(f"GEDCOM version in header was missing - "
                                       f"defaulting to {DEFAULT_VERSION.value}", h):
                return False
            h.gedcom_version = GedcomVersion(version_number=DEFAULT_VERSION)
        version = h.gedcom_version
        if version.version_number is None and self.is_specified(version.version_text):
            supported = ', '.join(v.value for v in SupportedVersion)
            self.add_unrepairable(f"GEDCOM version {version.version_text.strip()} in header "
                                  f"is not supported (expected one of {supported})", version)
            return False
        if version.version_number is None:
            if not self.add_repairable(f"GEDCOM version number in header was missing - "
                                       f"defaulting to {DEFAULT_VERSION.value}", version):
                return False
            version.version_number = DEFAULT_VERSION
        self.check_optional_string(version.gedcom_form, "GEDCOM form", version)
        self.check_custom_tags(version)
        return True

    def check_character_set(self) -> None:
        h = self.header
        if h.character_set is None:
            if not self.add_repairable(f"Character set in header was missing - "
                                       f"defaulting to {DEFAULT_CHARACTER_SET}", h):
                return
            h.character_set = CharacterSet(character_set_name=DEFAULT_CHARACTER_SET)
        cs = h.character_set
        if cs.character_set_name is None:
            if self.add_repairable(f"Character set name in header was missing - "
                                   f"defaulting to {DEFAULT_CHARACTER_SET}", cs):
                cs.character_set_name = DEFAULT_CHARACTER_SET
        else:
            self.check_required_string(cs.character_set_name, "character set name", cs)
        if (self.is_specified(cs.character_set_name)
                and cs.character_set_name.strip().upper() not in SUPPORTED_CHARACTER_SETS):
            self.add_error(f"Character set {cs.character_set_name!r} is not one of "
                           f"{', '.join(SUPPORTED_CHARACTER_SETS)}", cs)
        self.check_optional_string(cs.version_num, "character set version number", cs)
        self.check_custom_tags(cs)

    def check_source_system(self) -> None:
        h = self.header
        if h.source_system is None:
            if not self.add_repairable("No source system specified in header", h):
                return
            h.source_system = SourceSystem(system_id=UNSPECIFIED)
        ss = h.source_system
        if not self.is_specified(ss.system_id):
            if self.add_repairable("Source system id in header was not specified", ss):
                ss.system_id = UNSPECIFIED
        self.check_optional_string(ss.product_name, "product name", ss)
        self.check_optional_string(ss.version_num, "source system version", ss)
        self.check_custom_tags(ss)

        corporation = ss.corporation
        if corporation is not None:
            if not self.is_specified(corporation.business_name):
                if self.add_repairable("Corporation for source system has no name", corporation):
                    corporation.business_name = UNSPECIFIED
            self.check_address(corporation.address)
            self.check_custom_tags(corporation)

        source_data = ss.source_data
        if source_data is not None:
            if not self.is_specified(source_data.name):
                if self.add_repairable("Source data for source system has no name", source_data):
                    source_data.name = UNSPECIFIED
            self.check_optional_string(source_data.publish_date, "publish date", source_data)
            self.check_optional_string(source_data.copyright, "copyright", source_data)
            self.check_custom_tags(source_data)

    def check_submitter(self) -> None:
        h = self.header
        submitters = self.gedcom.submitters
        if h.submitter is None:
            if not submitters:
                self.add_error("Submitter not specified in header, and no submitters "
                               "exist to choose from", h)
                return
            if not self.add_repairable("Submitter not specified in header - using first "
                                       "submitter", h):
                return
            h.submitter = next(iter(submitters))
        self.check_xref(h, 'submitter')
        self.check_xref_resolves(h.submitter, submitters, "Submitter", h)

    def check_submission(self) -> None:
        h = self.header
        if h.submission is None:
            return
        self.check_xref(h, 'submission')
        submission = self.gedcom.submission
        if submission is None or submission.xref != h.submission:
            self.add_error(f"Submission {h.submission} in header does not match the "
                           f"submission record of the file", h)
