"""GEDCOM parser that loads a file into a Gedcom record graph."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from gedcom.element.family import FamilyElement
from gedcom.element.individual import IndividualElement
from gedcom.parser import Parser

from .address import Address
from .citation import AbstractCitation, CitationWithoutSource, CitationWithSource
from .element import ModelElement
from .event import Event, FamilyEvent, IndividualAttribute, IndividualEvent
from .family import Family, LdsSpouseSealing
from .gedcom import Gedcom
from .header import (
    CharacterSet,
    Corporation,
    GedcomVersion,
    Header,
    HeaderSourceData,
    SourceSystem,
    SupportedVersion,
    Trailer,
)
from .individual import Association, FamilyChild, FamilySpouse, Individual
from .multimedia import FileReference, Multimedia
from .name import PersonalName, PersonalNameVariation
from .note import ChangeDate, Note, UserReference
from .place import NameVariation, Place
from .repository import Repository
from .source import (
    EventRecorded,
    RepositoryCitation,
    Source,
    SourceCallNumber,
    SourceData,
)
from .submitter import Submission, Submitter

logger = logging.getLogger(__name__)

INDIVIDUAL_EVENT_TAGS = {
    'BIRT', 'CHR', 'DEAT', 'BURI', 'CREM', 'ADOP', 'BAPM', 'BARM', 'BASM',
    'BLES', 'CHRA', 'CONF', 'FCOM', 'ORDN', 'NATU', 'EMIG', 'IMMI', 'CENS',
    'PROB', 'WILL', 'GRAD', 'RETI', 'EVEN',
}
INDIVIDUAL_ATTRIBUTE_TAGS = {
    'CAST', 'DSCR', 'EDUC', 'IDNO', 'NATI', 'NCHI', 'NMR', 'OCCU', 'PROP',
    'RELI', 'RESI', 'SSN', 'TITL', 'FACT',
}
FAMILY_EVENT_TAGS = {
    'ANUL', 'CENS', 'DIV', 'DIVF', 'ENGA', 'MARB', 'MARC', 'MARR', 'MARL',
    'MARS', 'RESI', 'EVEN',
}

# Contact details that may follow an address on the same level
CONTACT_TAGS = {
    'PHON': 'phone_numbers',
    'EMAIL': 'emails',
    'FAX': 'fax_numbers',
    'WWW': 'www_urls',
}


def is_pointer(value: Optional[str]) -> bool:
    """True if a line value is a cross-reference such as '@I1@'."""
    return bool(value) and len(value) > 2 and value.startswith('@') and value.endswith('@')


def append_to(owner: ModelElement, name: str, item: Any) -> None:
    """Append to a list-valued field, creating the list on first use."""
    owner.get_or_create_list(name).append(item)


class GedcomParser:
    """Parser for GEDCOM files supporting versions 5.5 and 5.5.1.

    python-gedcom does the line tokenizing; this class maps its element
    tree onto the record classes in ``gedcheck.core``. No validation is
    done while loading: malformed or missing values are carried over as
    they are so the validator can report them.
    """

    def __init__(self):
        """Initialize the parser."""
        self.parser: Optional[Parser] = None
        self.gedcom = Gedcom()

    def load_gedcom(self, filepath: str) -> Gedcom:
        """Load and parse a GEDCOM file.

        Args:
            filepath: Path to the GEDCOM file

        Returns:
            The loaded Gedcom graph

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not a valid GEDCOM file
        """
        file_path = Path(filepath)
        if not file_path.exists():
            raise FileNotFoundError(f"GEDCOM file not found: {filepath}")

        logger.info(f"Parsing GEDCOM file {filepath}")
        content = self._read_text(file_path)

        # python-gedcom only reads UTF-8, so hand it a re-encoded copy
        self.parser = Parser()
        with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8',
                                         suffix='.ged', delete=False) as tmp:
            tmp.write(content)
            tmp_path = tmp.name
        try:
            self.parser.parse_file(tmp_path, strict=False)
        except Exception as e:
            raise ValueError(f"Could not parse GEDCOM file {filepath}: {e}") from e
        finally:
            os.unlink(tmp_path)

        self.gedcom = Gedcom()
        self._extract_records()

        logger.info(f"Loaded {filepath}: {self.gedcom.get_statistics()}")
        return self.gedcom

    def _read_text(self, file_path: Path) -> str:
        """Decode the file, trying the encodings GEDCOM files are found in."""
        raw = file_path.read_bytes()
        encodings = ['utf-8-sig', 'utf-8', 'cp1252', 'latin-1']
        for encoding in encodings:
            try:
                return raw.decode(encoding)
            except UnicodeDecodeError:
                logger.debug(f"{file_path} is not {encoding}")
        raise ValueError(f"Could not decode GEDCOM file {file_path} with any encoding")

    def _extract_records(self) -> None:
        roots = self.parser.get_root_child_elements()

        # Shared records first, so links to them from other records resolve
        for element in roots:
            tag = element.get_tag()
            if tag == 'OBJE':
                self._store(self.gedcom.multimedia, self._parse_multimedia(element))
            elif tag == 'NOTE':
                self._store(self.gedcom.notes, self._parse_note(element))

        for element in roots:
            tag = element.get_tag()
            if isinstance(element, IndividualElement):
                self._store(self.gedcom.individuals, self._parse_individual(element))
            elif isinstance(element, FamilyElement):
                self._store(self.gedcom.families, self._parse_family(element))
            elif tag == 'HEAD':
                self.gedcom.header = self._parse_header(element)
            elif tag == 'SOUR':
                self._store(self.gedcom.sources, self._parse_source(element))
            elif tag == 'REPO':
                self._store(self.gedcom.repositories, self._parse_repository(element))
            elif tag == 'SUBM':
                self._store(self.gedcom.submitters, self._parse_submitter(element))
            elif tag == 'SUBN':
                self.gedcom.submission = self._parse_submission(element)
            elif tag == 'TRLR':
                self.gedcom.trailer = Trailer()
            elif tag not in ('OBJE', 'NOTE'):
                logger.debug(f"Ignoring unsupported record type {tag}")

    def _store(self, table: Dict[str, Any], record) -> None:
        if record.xref in table:
            logger.warning(f"Duplicate record {record.xref} - keeping the last one")
        table[record.xref] = record

    # Shared substructures

    @staticmethod
    def _lines(element) -> List[str]:
        """Get the value of an element with its CONT/CONC lines as a list of lines."""
        return element.get_multi_line_value().split('\n')

    def _parse_common(self, element, owner: ModelElement) -> bool:
        """Handle a child tag that can appear under most structures.

        Returns:
            True if the child was consumed
        """
        tag = element.get_tag()
        value = element.get_value()
        if tag == 'NOTE' and hasattr(owner, 'notes'):
            append_to(owner, 'notes', self._parse_note(element))
        elif tag == 'SOUR' and hasattr(owner, 'citations'):
            append_to(owner, 'citations', self._parse_citation(element))
        elif tag == 'OBJE' and hasattr(owner, 'multimedia'):
            append_to(owner, 'multimedia', self._parse_multimedia(element))
        elif tag == 'REFN' and hasattr(owner, 'user_references'):
            append_to(owner, 'user_references',
                      UserReference(reference_num=value, type=self._child_value(element, 'TYPE')))
        elif tag == 'RIN' and hasattr(owner, 'rec_id_number'):
            owner.rec_id_number = value
        elif tag == 'CHAN' and hasattr(owner, 'change_date'):
            owner.change_date = self._parse_change_date(element)
        elif tag in CONTACT_TAGS and hasattr(owner, CONTACT_TAGS[tag]):
            append_to(owner, CONTACT_TAGS[tag], value)
        elif tag.startswith('_'):
            append_to(owner, 'custom_tags', (tag, value))
        else:
            return False
        return True

    @staticmethod
    def _child_value(element, tag: str) -> Optional[str]:
        for child in element.get_child_elements():
            if child.get_tag() == tag:
                return child.get_value()
        return None

    def _parse_change_date(self, element) -> ChangeDate:
        change_date = ChangeDate()
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag == 'DATE':
                change_date.date = child.get_value()
                change_date.time = self._child_value(child, 'TIME')
            else:
                self._parse_common(child, change_date)
        return change_date

    def _parse_note(self, element) -> Note:
        pointer = element.get_pointer()
        value = element.get_value()
        if not pointer and is_pointer(value):
            # Link to a NOTE record
            return self.gedcom.notes.get(value) or Note(xref=value)

        note = Note(xref=pointer or None, lines=self._lines(element))
        for child in element.get_child_elements():
            if child.get_tag() not in ('CONT', 'CONC'):
                self._parse_common(child, note)
        return note

    def _parse_citation(self, element) -> AbstractCitation:
        value = element.get_value()
        if is_pointer(value):
            citation = CitationWithSource(source=value)
            for child in element.get_child_elements():
                tag = child.get_tag()
                if tag == 'PAGE':
                    citation.where_in_source = child.get_value()
                elif tag == 'EVEN':
                    citation.event_cited = child.get_value()
                    citation.role_in_event = self._child_value(child, 'ROLE')
                elif tag == 'QUAY':
                    citation.certainty = child.get_value()
                else:
                    self._parse_common(child, citation)
            return citation

        citation = CitationWithoutSource(description=self._lines(element))
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag == 'TEXT':
                append_to(citation, 'text_from_source', self._lines(child))
            elif tag not in ('CONT', 'CONC'):
                self._parse_common(child, citation)
        return citation

    def _parse_multimedia(self, element) -> Multimedia:
        pointer = element.get_pointer()
        value = element.get_value()
        if not pointer and is_pointer(value):
            # Link to an OBJE record
            return self.gedcom.multimedia.get(value) or Multimedia(xref=value)

        mm = Multimedia(xref=pointer or None)
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag == 'FILE':
                append_to(mm, 'file_references', self._parse_file_reference(child))
            elif tag == 'FORM':
                mm.embedded_media_format = child.get_value()
            elif tag == 'TITL':
                mm.embedded_title = child.get_value()
            elif tag == 'BLOB':
                mm.blob = self._lines(child)
            elif tag == 'OBJE':
                mm.continued_object = self._parse_multimedia(child)
            else:
                self._parse_common(child, mm)
        return mm

    def _parse_file_reference(self, element) -> FileReference:
        fr = FileReference(reference_to_file=element.get_value())
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag == 'FORM':
                fr.format = child.get_value()
                fr.media_type = self._child_value(child, 'TYPE') or self._child_value(child, 'MEDI')
            elif tag == 'TITL':
                fr.title = child.get_value()
            else:
                self._parse_common(child, fr)
        return fr

    def _parse_address(self, element) -> Address:
        address = Address(lines=self._lines(element))
        fields = {'ADR1': 'addr1', 'ADR2': 'addr2', 'CITY': 'city',
                  'STAE': 'state_province', 'POST': 'postal_code', 'CTRY': 'country'}
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag in fields:
                setattr(address, fields[tag], child.get_value())
            elif tag not in ('CONT', 'CONC'):
                self._parse_common(child, address)
        return address

    def _parse_place(self, element) -> Place:
        """Parse a place with its phonetic/romanized variations and coordinates."""
        place = Place(place_name=element.get_value())
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag == 'FORM':
                place.place_format = child.get_value()
            elif tag in ('FONE', 'ROMN'):
                variation = NameVariation(variation=child.get_value(),
                                          variation_type=self._child_value(child, 'TYPE'))
                append_to(place, 'phonetic' if tag == 'FONE' else 'romanized', variation)
            elif tag == 'MAP':
                place.latitude = self._child_value(child, 'LATI')
                place.longitude = self._child_value(child, 'LONG')
            else:
                self._parse_common(child, place)
        return place

    def _parse_event(self, element, event: Event) -> Event:
        """Fill an event (or attribute) from its element.

        Args:
            element: Event element, e.g. BIRT or MARR
            event: Empty event of the right class

        Returns:
            The filled event
        """
        event.type = element.get_tag()
        event.description = element.get_value() or None
        for child in element.get_child_elements():
            tag = child.get_tag()
            value = child.get_value()
            if tag == 'TYPE':
                event.sub_type = value
            elif tag == 'DATE':
                event.date = value
            elif tag == 'PLAC':
                event.place = self._parse_place(child)
            elif tag == 'ADDR':
                event.address = self._parse_address(child)
            elif tag == 'AGE':
                event.age = value
            elif tag == 'CAUS':
                event.cause = value
            elif tag == 'RELI':
                event.religious_affiliation = value
            elif tag == 'AGNC':
                event.resp_agency = value
            elif tag == 'RESN':
                event.restriction_notice = value
            elif tag == 'FAMC' and isinstance(event, IndividualEvent):
                event.family = value
            elif tag in ('HUSB', 'WIFE') and isinstance(event, FamilyEvent):
                age = self._child_value(child, 'AGE')
                if tag == 'HUSB':
                    event.husband_age = age
                else:
                    event.wife_age = age
            elif tag not in ('CONT', 'CONC'):
                self._parse_common(child, event)
        return event

    # Records

    def _parse_name(self, element) -> PersonalName:
        name = PersonalName(basic=element.get_value() or None)
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag in ('FONE', 'ROMN'):
                variation = PersonalNameVariation(variation=child.get_value(),
                                                  variation_type=self._child_value(child, 'TYPE'))
                for piece in child.get_child_elements():
                    if not self._parse_name_piece(piece, variation):
                        self._parse_common(piece, variation)
                append_to(name, 'phonetic' if tag == 'FONE' else 'romanized', variation)
            elif not self._parse_name_piece(child, name):
                self._parse_common(child, name)
        return name

    @staticmethod
    def _parse_name_piece(element, name) -> bool:
        pieces = {'NPFX': 'prefix', 'GIVN': 'given_name', 'NICK': 'nickname',
                  'SPFX': 'surname_prefix', 'SURN': 'surname', 'NSFX': 'suffix'}
        field_name = pieces.get(element.get_tag())
        if field_name is None:
            return False
        setattr(name, field_name, element.get_value())
        return True

    def _parse_individual(self, element: IndividualElement) -> Individual:
        """Parse an individual element into an Individual record.

        Args:
            element: IndividualElement from python-gedcom

        Returns:
            Individual record
        """
        individual = Individual(xref=element.get_pointer())
        token_lists = {'ALIA': 'aliases', 'ANCI': 'ancestor_interest',
                       'DESI': 'descendant_interest', 'SUBM': 'submitters'}

        for child in element.get_child_elements():
            tag = child.get_tag()
            value = child.get_value()

            if tag == 'NAME':
                append_to(individual, 'names', self._parse_name(child))
            elif tag == 'SEX':
                individual.sex = value
            elif tag in INDIVIDUAL_ATTRIBUTE_TAGS:
                append_to(individual, 'attributes', self._parse_event(child, IndividualAttribute()))
            elif tag in INDIVIDUAL_EVENT_TAGS:
                append_to(individual, 'events', self._parse_event(child, IndividualEvent()))
            elif tag == 'FAMC':
                link = FamilyChild(family=value,
                                   pedigree=self._child_value(child, 'PEDI'),
                                   status=self._child_value(child, 'STAT'),
                                   adopted_by=self._child_value(child, 'ADOP'))
                for sub in child.get_child_elements():
                    if sub.get_tag() == 'NOTE':
                        append_to(link, 'notes', self._parse_note(sub))
                append_to(individual, 'families_where_child', link)
            elif tag == 'FAMS':
                link = FamilySpouse(family=value)
                for sub in child.get_child_elements():
                    if sub.get_tag() == 'NOTE':
                        append_to(link, 'notes', self._parse_note(sub))
                append_to(individual, 'families_where_spouse', link)
            elif tag == 'ASSO':
                append_to(individual, 'associations', self._parse_association(child))
            elif tag in token_lists:
                append_to(individual, token_lists[tag], value)
            elif tag == 'RESN':
                individual.restriction_notice = value
            elif tag == 'RFN':
                individual.permanent_rec_file_number = value
            elif tag == 'AFN':
                individual.ancestral_file_number = value
            else:
                self._parse_common(child, individual)

        return individual

    def _parse_association(self, element) -> Association:
        # 5.5.1 dropped the TYPE line; associations there always point at individuals
        association = Association(associated_entity=element.get_value(),
                                  associated_entity_type=self._child_value(element, 'TYPE') or 'INDI')
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag == 'RELA':
                association.relationship = child.get_value()
            elif tag != 'TYPE':
                self._parse_common(child, association)
        return association

    def _parse_family(self, element: FamilyElement) -> Family:
        """Parse a family element into a Family record.

        Args:
            element: FamilyElement from python-gedcom

        Returns:
            Family record
        """
        family = Family(xref=element.get_pointer())

        for child in element.get_child_elements():
            tag = child.get_tag()
            value = child.get_value()

            if tag == 'HUSB':
                family.husband = value
            elif tag == 'WIFE':
                family.wife = value
            elif tag == 'CHIL':
                append_to(family, 'children', value)
            elif tag == 'NCHI':
                family.num_children = value
            elif tag in FAMILY_EVENT_TAGS:
                append_to(family, 'events', self._parse_event(child, FamilyEvent()))
            elif tag == 'SUBM':
                append_to(family, 'submitters', value)
            elif tag == 'SLGS':
                append_to(family, 'lds_spouse_sealings', self._parse_sealing(child))
            elif tag == 'RIN':
                family.automated_record_id = value
            elif tag == 'RFN':
                family.rec_file_number = value
            elif tag == 'RESN':
                family.restriction_notice = value
            else:
                self._parse_common(child, family)

        return family

    def _parse_sealing(self, element) -> LdsSpouseSealing:
        sealing = LdsSpouseSealing()
        fields = {'DATE': 'date', 'PLAC': 'place', 'STAT': 'status', 'TEMP': 'temple'}
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag in fields:
                setattr(sealing, fields[tag], child.get_value())
            else:
                self._parse_common(child, sealing)
        return sealing

    def _parse_source(self, element) -> Source:
        source = Source(xref=element.get_pointer())
        text_fields = {'AUTH': 'originators_authors', 'TITL': 'title',
                       'PUBL': 'publication_facts', 'TEXT': 'source_text'}
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag in text_fields:
                setattr(source, text_fields[tag], self._lines(child))
            elif tag == 'ABBR':
                source.source_filed_by = child.get_value()
            elif tag == 'DATA':
                source.data = self._parse_source_data(child)
            elif tag == 'REPO':
                source.repository_citation = self._parse_repository_citation(child)
            else:
                self._parse_common(child, source)
        return source

    def _parse_source_data(self, element) -> SourceData:
        data = SourceData()
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag == 'EVEN':
                append_to(data, 'events_recorded',
                          EventRecorded(event_type=child.get_value(),
                                        date_period=self._child_value(child, 'DATE'),
                                        jurisdiction=self._child_value(child, 'PLAC')))
            elif tag == 'AGNC':
                data.resp_agency = child.get_value()
            else:
                self._parse_common(child, data)
        return data

    def _parse_repository_citation(self, element) -> RepositoryCitation:
        citation = RepositoryCitation(repository=element.get_value() or None)
        for child in element.get_child_elements():
            if child.get_tag() == 'CALN':
                append_to(citation, 'call_numbers',
                          SourceCallNumber(call_number=child.get_value(),
                                           media_type=self._child_value(child, 'MEDI')))
            else:
                self._parse_common(child, citation)
        return citation

    def _parse_repository(self, element) -> Repository:
        repository = Repository(xref=element.get_pointer())
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag == 'NAME':
                repository.name = child.get_value()
            elif tag == 'ADDR':
                repository.address = self._parse_address(child)
            else:
                self._parse_common(child, repository)
        return repository

    def _parse_submitter(self, element) -> Submitter:
        submitter = Submitter(xref=element.get_pointer())
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag == 'NAME':
                submitter.name = child.get_value()
            elif tag == 'ADDR':
                submitter.address = self._parse_address(child)
            elif tag == 'LANG':
                append_to(submitter, 'language_pref', child.get_value())
            elif tag == 'RFN':
                submitter.reg_file_number = child.get_value()
            else:
                self._parse_common(child, submitter)
        return submitter

    def _parse_submission(self, element) -> Submission:
        submission = Submission(xref=element.get_pointer() or None)
        fields = {'SUBM': 'submitter', 'FAMF': 'name_of_family_file', 'TEMP': 'temple_code',
                  'ANCE': 'ancestors_count', 'DESC': 'descendants_count',
                  'ORDI': 'ordinance_process_flag'}
        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag in fields:
                setattr(submission, fields[tag], child.get_value())
            else:
                self._parse_common(child, submission)
        return submission

    def _parse_header(self, element) -> Header:
        header = Header()
        for child in element.get_child_elements():
            tag = child.get_tag()
            value = child.get_value()
            if tag == 'SOUR':
                header.source_system = self._parse_source_system(child)
            elif tag == 'DEST':
                header.destination_system = value
            elif tag == 'DATE':
                header.date = value
                header.time = self._child_value(child, 'TIME')
            elif tag == 'SUBM':
                header.submitter = value
            elif tag == 'SUBN':
                header.submission = value
            elif tag == 'FILE':
                header.file_name = value
            elif tag == 'COPR':
                header.copyright_data = self._lines(child)
            elif tag == 'GEDC':
                header.gedcom_version = self._parse_gedcom_version(child)
            elif tag == 'CHAR':
                header.character_set = CharacterSet(character_set_name=value,
                                                    version_num=self._child_value(child, 'VERS'))
            elif tag == 'LANG':
                header.language = value
            elif tag == 'PLAC':
                header.place_hierarchy = self._child_value(child, 'FORM')
            else:
                self._parse_common(child, header)
        return header

    def _parse_gedcom_version(self, element) -> GedcomVersion:
        version_text = self._child_value(element, 'VERS')
        version = SupportedVersion.from_string(version_text)
        if version is None and version_text:
            logger.warning(f"Unsupported GEDCOM version {version_text}")
        return GedcomVersion(version_number=version,
                             version_text=version_text if version is None else None,
                             gedcom_form=self._child_value(element, 'FORM'))

    def _parse_source_system(self, element) -> SourceSystem:
        source_system = SourceSystem(system_id=element.get_value())
        for child in element.get_child_elements():
            tag = child.get_tag()
            value = child.get_value()
            if tag == 'VERS':
                source_system.version_num = value
            elif tag == 'NAME':
                source_system.product_name = value
            elif tag == 'CORP':
                corporation = Corporation(business_name=value)
                for sub in child.get_child_elements():
                    if sub.get_tag() == 'ADDR':
                        corporation.address = self._parse_address(sub)
                source_system.corporation = corporation
            elif tag == 'DATA':
                source_system.source_data = HeaderSourceData(
                    name=value,
                    publish_date=self._child_value(child, 'DATE'),
                    copyright=self._child_value(child, 'COPR'),
                )
            else:
                self._parse_common(child, source_system)
        return source_system


# Convenience function
def load_gedcom(filepath: str) -> Gedcom:
    """Load a GEDCOM file into a Gedcom graph.

    Args:
        filepath: Path to the GEDCOM file

    Returns:
        The loaded Gedcom
    """
    parser = GedcomParser()
    return parser.load_gedcom(filepath)
