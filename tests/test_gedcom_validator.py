"""Tests for the root validator: orchestration, repair policy and idempotence."""

from gedcheck.core.family import Family
from gedcheck.core.header import SupportedVersion
from gedcheck.core.individual import Individual
from gedcheck.validation import (
    PLACEHOLDER_SUBMITTER_NAME,
    PLACEHOLDER_SUBMITTER_XREF,
    GedcomValidator,
    Severity,
    ValidatedItem,
    ValidationOptions,
)

from conftest import descriptions


def test_null_gedcom():
    """Test that validating nothing gives exactly one error."""
    validator = GedcomValidator(None)
    validator.validate()

    assert descriptions(validator) == ["gedcom structure is null"]


def test_root_is_its_own_root(minimal_gedcom):
    """Test the root validator's accessors."""
    options = ValidationOptions.strict()
    validator = GedcomValidator(minimal_gedcom, options)

    assert validator.root is validator
    assert validator.gedcom is minimal_gedcom
    assert validator.options is options
    assert validator.auto_repair is False


def test_minimal_gedcom_repairs_without_errors(minimal_gedcom):
    """Test that repair fills in the missing lists and reports them as info."""
    validator = GedcomValidator(minimal_gedcom)
    validator.validate()

    assert not validator.has_errors()
    assert validator.has_info()
    assert minimal_gedcom.submitters['@SUBM1@'].notes == []


def test_strict_mode_does_not_modify_graph(family_gedcom):
    """Test that validation without repair leaves the graph untouched."""
    before = family_gedcom.value_key()
    validator = GedcomValidator(family_gedcom, ValidationOptions.strict())
    validator.validate()

    assert validator.has_errors()
    assert not validator.has_info()
    assert family_gedcom.value_key() == before


def test_clean_gedcom_passes_strict_validation(clean_gedcom):
    """Test that a repaired graph has nothing left to report."""
    validator = GedcomValidator(clean_gedcom, ValidationOptions.strict())
    validator.validate()

    assert validator.get_findings() == []


def test_repair_is_idempotent(family_gedcom):
    """Test that a second repair pass finds nothing and changes nothing."""
    validator = GedcomValidator(family_gedcom)
    validator.validate()
    assert validator.has_info()
    after_first = family_gedcom.value_key()

    validator.validate()

    assert validator.get_findings() == []
    assert family_gedcom.value_key() == after_first


def test_validate_clears_previous_findings(family_gedcom):
    """Test that findings of an earlier pass are not carried over."""
    validator = GedcomValidator(family_gedcom, ValidationOptions.strict())
    validator.validate()
    first = len(validator.get_findings())

    validator.validate()

    assert len(validator.get_findings()) == first


def test_summary_counts(family_gedcom):
    """Test the per-severity summary."""
    validator = GedcomValidator(family_gedcom, ValidationOptions.strict())
    validator.validate()
    summary = validator.get_summary()

    assert set(summary) == {'error', 'warning', 'info'}
    assert summary['error'] == len(validator.get_findings(Severity.ERROR))
    assert summary['info'] == 0


class TestRecordTables:
    """Test handling of the xref-keyed record tables."""

    def test_wrongly_keyed_entry(self, clean_gedcom):
        """Test that an entry under the wrong key gives one error and is skipped."""
        stray = Individual(xref='@I9@')
        clean_gedcom.individuals['@WRONG@'] = stray
        validator = GedcomValidator(clean_gedcom)
        validator.validate()

        errors = validator.get_findings(Severity.ERROR)
        assert len(errors) == 1
        assert "not keyed by the record's xref" in errors[0].description
        assert isinstance(errors[0].subject, ValidatedItem)
        assert errors[0].subject.item == ('@WRONG@', '@I9@')
        # Never re-keyed, and the record itself was not visited
        assert '@WRONG@' in clean_gedcom.individuals
        assert stray.names is None

    def test_wrongly_keyed_spouse_not_validated(self, clean_gedcom):
        """Test that a family cannot reach a wrongly keyed individual."""
        stray = Individual(xref='@I9@')
        clean_gedcom.individuals['@WRONG@'] = stray
        clean_gedcom.families['@F2@'] = Family(xref='@F2@', husband='@WRONG@', children=[])
        GedcomValidator(clean_gedcom).validate()
        assert stray.names is None

        strict = GedcomValidator(clean_gedcom, ValidationOptions.strict())
        strict.validate()
        errors = descriptions(strict, Severity.ERROR)
        assert not any(error.startswith("List of names on Individual") for error in errors)
        assert "The husband @WRONG@ on Family does not reference a known individual" in errors

    def test_wrongly_keyed_child_does_not_resolve(self, clean_gedcom):
        """Test that a child token naming a wrongly keyed entry is unresolved."""
        clean_gedcom.individuals['@WRONG@'] = Individual(xref='@I9@')
        clean_gedcom.families['@F1@'].children.append('@WRONG@')
        validator = GedcomValidator(clean_gedcom)
        validator.validate()

        errors = descriptions(validator, Severity.ERROR)
        assert len(errors) == 2
        assert "Child @WRONG@ on Family does not reference a known record" in errors

    def test_null_entry(self, clean_gedcom):
        """Test that a null record in a table is reported once."""
        clean_gedcom.families['@F9@'] = None
        validator = GedcomValidator(clean_gedcom)
        validator.validate()

        assert descriptions(validator, Severity.ERROR) == [
            "Entry in families collection has null value"]

    def test_remaining_entries_still_validated(self, clean_gedcom):
        """Test that a bad entry does not stop the rest of the table."""
        clean_gedcom.individuals['@WRONG@'] = Individual(xref='@I9@')
        clean_gedcom.individuals['@I3@'].sex = 'X'
        validator = GedcomValidator(clean_gedcom)
        validator.validate()

        assert len(validator.get_findings(Severity.ERROR)) == 2


class TestTopLevelRepairs:
    """Test repairs of missing top-level structures."""

    def test_empty_submitters_repaired(self, clean_gedcom):
        """Test that a placeholder submitter is created and used by the header."""
        clean_gedcom.submitters.clear()
        clean_gedcom.header.submitter = None
        validator = GedcomValidator(clean_gedcom)
        validator.validate()

        assert not validator.has_errors()
        assert "Submitters collection is empty - repaired" in descriptions(validator)
        placeholder = clean_gedcom.submitters[PLACEHOLDER_SUBMITTER_XREF]
        assert placeholder.name == PLACEHOLDER_SUBMITTER_NAME
        assert clean_gedcom.header.submitter == PLACEHOLDER_SUBMITTER_XREF

    def test_empty_submitters_strict(self, clean_gedcom):
        """Test that an empty submitter table is an error without repair."""
        clean_gedcom.submitters.clear()
        validator = GedcomValidator(clean_gedcom, ValidationOptions.strict())
        validator.validate()

        assert "Submitters collection is empty" in descriptions(validator, Severity.ERROR)
        assert clean_gedcom.submitters == {}

    def test_missing_header_repaired(self, clean_gedcom):
        """Test that a missing header is rebuilt with defaults."""
        clean_gedcom.header = None
        validator = GedcomValidator(clean_gedcom)
        validator.validate()

        assert not validator.has_errors()
        header = clean_gedcom.header
        assert header is not None
        assert header.gedcom_version.version_number == SupportedVersion.V5_5_1
        assert header.character_set.character_set_name == 'ANSEL'
        assert header.source_system.system_id == 'UNSPECIFIED'
        assert header.submitter == '@SUBM1@'

    def test_missing_header_strict(self, clean_gedcom):
        """Test that a missing header is an error without repair."""
        clean_gedcom.header = None
        validator = GedcomValidator(clean_gedcom, ValidationOptions.strict())
        validator.validate()

        assert descriptions(validator, Severity.ERROR) == ["GEDCOM header is missing"]
        assert clean_gedcom.header is None

    def test_missing_trailer(self, clean_gedcom):
        """Test that a missing trailer is repaired, or reported in strict mode."""
        clean_gedcom.trailer = None
        strict = GedcomValidator(clean_gedcom, ValidationOptions.strict())
        strict.validate()
        assert descriptions(strict, Severity.ERROR) == ["GEDCOM trailer is missing"]

        validator = GedcomValidator(clean_gedcom)
        validator.validate()
        assert descriptions(validator) == ["GEDCOM trailer is missing - repaired"]
        assert clean_gedcom.trailer is not None

    def test_missing_submission_never_repaired(self, clean_gedcom):
        """Test that a missing submission is an error under both policies."""
        clean_gedcom.submission = None
        for options in (ValidationOptions(), ValidationOptions.strict()):
            validator = GedcomValidator(clean_gedcom, options)
            validator.validate()
            assert descriptions(validator, Severity.ERROR) == [
                "Submission record on root gedcom is null"]
        assert clean_gedcom.submission is None
