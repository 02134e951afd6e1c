"""Tests for the version-specific multimedia rules."""

from gedcheck.core.citation import CitationWithSource
from gedcheck.core.header import SupportedVersion
from gedcheck.core.multimedia import FileReference, Multimedia
from gedcheck.validation import GedcomValidator, Severity, ValidationOptions
from gedcheck.validation.multimedia import MultimediaValidator

from conftest import descriptions


def make_multimedia(**kwargs) -> Multimedia:
    """Build a multimedia record with all of its lists in place."""
    values = dict(xref='@M1@', blob=[], file_references=[], citations=[], notes=[],
                  user_references=[], custom_tags=[])
    values.update(kwargs)
    return Multimedia(**values)


def make_file_reference(**kwargs) -> FileReference:
    values = dict(reference_to_file='photo.jpg', format='jpeg', custom_tags=[])
    values.update(kwargs)
    return FileReference(**values)


def check(gedcom, multimedia, options=None, top_level=True):
    root = GedcomValidator(gedcom, options or ValidationOptions())
    MultimediaValidator(root, multimedia, top_level=top_level).validate()
    return root


class TestGedcom551:
    """Test the 5.5.1 rules: file references instead of blobs."""

    def test_valid_file_reference(self, clean_gedcom):
        """Test that a linked file passes."""
        mm = make_multimedia(file_references=[make_file_reference()])
        assert check(clean_gedcom, mm, ValidationOptions.strict()).get_findings() == []

    def test_file_references_required(self, clean_gedcom):
        """Test that an empty list of file references is an error."""
        root = check(clean_gedcom, make_multimedia())
        errors = descriptions(root, Severity.ERROR)
        assert len(errors) == 1
        assert 'file reference' in errors[0]

    def test_file_reference_format_required(self, clean_gedcom):
        """Test that each file reference needs a format."""
        mm = make_multimedia(file_references=[make_file_reference(format=None)])
        root = check(clean_gedcom, mm)
        assert descriptions(root, Severity.ERROR) == [
            "format on FileReference is required, but is either null or blank"]

    def test_blob_cleared(self, clean_gedcom):
        """Test that blob data is removed under repair."""
        mm = make_multimedia(file_references=[make_file_reference()], blob=['abc'])
        root = check(clean_gedcom, mm)
        assert mm.blob == []
        assert not root.has_errors()

    def test_blob_strict(self, clean_gedcom):
        """Test that blob data is an error without repair."""
        mm = make_multimedia(file_references=[make_file_reference()], blob=['abc'])
        root = check(clean_gedcom, mm, ValidationOptions.strict())
        assert mm.blob == ['abc']
        assert len(root.get_findings(Severity.ERROR)) == 1

    def test_embedded_format_cleared(self, clean_gedcom):
        """Test that an embedded format is removed under repair."""
        mm = make_multimedia(file_references=[make_file_reference()],
                             embedded_media_format='jpeg')
        root = check(clean_gedcom, mm)
        assert mm.embedded_media_format is None
        assert root.has_info()
        assert not root.has_errors()

    def test_citations_allowed(self, clean_gedcom):
        """Test that citations are validated rather than removed."""
        citation = CitationWithSource(source='@S1@', notes=[], multimedia=[], custom_tags=[])
        mm = make_multimedia(file_references=[make_file_reference()], citations=[citation])
        root = check(clean_gedcom, mm, ValidationOptions.strict())
        assert mm.citations == [citation]
        assert root.get_findings() == []


class TestGedcom55:
    """Test the 5.5 rules: embedded blobs with a format."""

    def setup_method(self):
        """Describe a valid embedded object."""
        self.blob = ['.HM.......k.1..F.jwA.Dzzzzw............A....1.........']

    def use_5_5(self, gedcom):
        gedcom.header.gedcom_version.version_number = SupportedVersion.V5_5

    def test_valid_blob(self, clean_gedcom):
        """Test that an embedded object passes."""
        self.use_5_5(clean_gedcom)
        mm = make_multimedia(blob=self.blob, embedded_media_format='bmp')
        assert check(clean_gedcom, mm, ValidationOptions.strict()).get_findings() == []

    def test_empty_blob_cannot_be_repaired(self, clean_gedcom):
        """Test that a missing blob is an error even with repair."""
        self.use_5_5(clean_gedcom)
        root = check(clean_gedcom, make_multimedia(embedded_media_format='bmp'))
        errors = descriptions(root, Severity.ERROR)
        assert len(errors) == 1
        assert errors[0].endswith(" - cannot repair")

    def test_embedded_format_required(self, clean_gedcom):
        """Test that the embedded format is required."""
        self.use_5_5(clean_gedcom)
        root = check(clean_gedcom, make_multimedia(blob=self.blob))
        assert descriptions(root, Severity.ERROR) == [
            "format on Multimedia is required, but is either null or blank"]

    def test_citations_cleared(self, clean_gedcom):
        """Test that citations are removed under repair."""
        self.use_5_5(clean_gedcom)
        mm = make_multimedia(blob=self.blob, embedded_media_format='bmp',
                             citations=[CitationWithSource(source='@S1@')])
        root = check(clean_gedcom, mm)
        assert mm.citations == []
        assert not root.has_errors()

    def test_citations_strict(self, clean_gedcom):
        """Test that citations are an error without repair."""
        self.use_5_5(clean_gedcom)
        mm = make_multimedia(blob=self.blob, embedded_media_format='bmp',
                             citations=[CitationWithSource(source='@S1@')])
        root = check(clean_gedcom, mm, ValidationOptions.strict())
        assert len(mm.citations) == 1
        assert len(root.get_findings(Severity.ERROR)) == 1


class TestVersionAndXref:
    """Test version resolution and xref rules."""

    def test_unknown_version_strict(self, clean_gedcom):
        """Test that version specific rules are skipped when the version is unknown."""
        clean_gedcom.header.gedcom_version = None
        mm = make_multimedia(blob=['abc'])
        root = check(clean_gedcom, mm, ValidationOptions.strict())

        errors = descriptions(root, Severity.ERROR)
        assert len(errors) == 1
        assert 'could not be determined' in errors[0]

    def test_unknown_version_assumes_5_5_1(self, clean_gedcom):
        """Test that repair treats an unknown version as 5.5.1."""
        clean_gedcom.header.gedcom_version = None
        mm = make_multimedia(file_references=[make_file_reference()], blob=['abc'])
        root = check(clean_gedcom, mm)

        assert mm.blob == []
        assert not root.has_errors()

    def test_top_level_requires_xref(self, clean_gedcom):
        """Test that OBJE records need an xref."""
        mm = make_multimedia(xref=None, file_references=[make_file_reference()])
        root = check(clean_gedcom, mm)
        assert descriptions(root, Severity.ERROR) == [
            "xref on Multimedia is required, but is either null or blank"]

    def test_embedded_object_without_xref(self, clean_gedcom):
        """Test that inline objects do not need an xref."""
        mm = make_multimedia(xref=None, file_references=[make_file_reference()])
        root = check(clean_gedcom, mm, top_level=False)
        assert not root.has_errors()

    def test_top_level_records_validated(self, clean_gedcom):
        """Test that the root walks the multimedia table."""
        clean_gedcom.multimedia['@M1@'] = make_multimedia(file_references=[
            make_file_reference(reference_to_file=' ')])
        validator = GedcomValidator(clean_gedcom)
        validator.validate()

        assert descriptions(validator, Severity.ERROR) == [
            "file reference on FileReference is required, but is either null or blank"]


class TestContinuedObjects:
    """Test chains of continued multimedia objects."""

    def test_chain_validated(self, clean_gedcom):
        """Test that a continued object is validated too."""
        tail = make_multimedia(xref=None, file_references=[])
        head = make_multimedia(file_references=[make_file_reference()], continued_object=tail)
        root = check(clean_gedcom, head)

        assert len(root.get_findings(Severity.ERROR)) == 1

    def test_looping_chain_strict(self, clean_gedcom):
        """Test that a chain that loops back is reported once and not followed forever."""
        first = make_multimedia(file_references=[make_file_reference()])
        second = make_multimedia(xref=None, file_references=[make_file_reference()],
                                 continued_object=first)
        first.continued_object = second
        root = check(clean_gedcom, first, ValidationOptions.strict())

        assert descriptions(root, Severity.ERROR) == [
            "Chain of continued multimedia objects loops back on itself"]
        assert second.continued_object is first

    def test_looping_chain_repaired(self, clean_gedcom):
        """Test that repair cuts the link that closes the loop."""
        first = make_multimedia(file_references=[make_file_reference()])
        first.continued_object = first
        root = check(clean_gedcom, first)

        assert first.continued_object is None
        assert not root.has_errors()

    def test_looping_chain_compares_by_value(self):
        """Test that a looping chain can still be hashed and compared."""
        first = make_multimedia()
        first.continued_object = first
        other = make_multimedia()
        other.continued_object = other

        assert first == other
        assert hash(first) == hash(other)
