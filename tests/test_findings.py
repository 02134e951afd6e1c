"""Tests for findings, severities and validation options."""

import dataclasses

import pytest

from gedcheck.core.individual import Individual
from gedcheck.core.note import Note
from gedcheck.validation import Finding, Severity, ValidatedItem, ValidationOptions


def test_severity_values():
    """Test the severity levels."""
    assert Severity.ERROR.value == 'error'
    assert Severity.WARNING.value == 'warning'
    assert Severity.INFO.value == 'info'


def test_finding_holds_model_element_weakly():
    """Test that a finding does not keep its subject alive."""
    note = Note(lines=['text'])
    finding = Finding.create("Something is wrong", Severity.ERROR, note)

    assert finding.subject is note
    del note
    assert finding.subject is None


def test_finding_wraps_non_element_subject():
    """Test that strings and tuples are wrapped in a ValidatedItem."""
    finding = Finding.create("Bad entry", Severity.ERROR, ('@X@', None))

    assert isinstance(finding.subject, ValidatedItem)
    assert finding.subject.item == ('@X@', None)


def test_finding_without_subject():
    """Test a finding about nothing in particular."""
    finding = Finding.create("gedcom structure is null", Severity.ERROR)

    assert finding.subject is None
    assert str(finding) == "ERROR: gedcom structure is null"


def test_finding_str_names_record():
    """Test that the string form names the record type and xref."""
    individual = Individual(xref='@I1@')
    finding = Finding.create("sex on Individual is specified, but has a blank value",
                             Severity.ERROR, individual)

    assert str(finding) == ("ERROR: sex on Individual is specified, but has a blank value "
                            "(Individual @I1@)")


class TestValidationOptions:
    """Test validation options."""

    def test_defaults(self):
        """Test the default options repair and require collections."""
        options = ValidationOptions()
        assert options.auto_repair is True
        assert options.collections_required is True
        assert options.max_language_prefs == 3

    def test_strict(self):
        """Test the strict convenience constructor."""
        assert ValidationOptions.strict().auto_repair is False

    def test_frozen(self):
        """Test that options cannot change during a session."""
        options = ValidationOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.auto_repair = False
