"""Tests for the CLI interface."""

import pytest

from gedcheck.ui.cli import create_parser, main


def test_create_parser():
    """Test that the argument parser is created correctly."""
    parser = create_parser()
    assert parser.prog == 'gedcheck'


def test_parse_validate_options():
    """Test the options of the validate command."""
    args = create_parser().parse_args(['validate', 'family.ged', '--no-repair',
                                       '--max-language-prefs', '5'])

    assert args.command == 'validate'
    assert args.file == 'family.ged'
    assert args.no_repair is True
    assert args.max_language_prefs == 5


def test_validate_defaults():
    """Test that repair is on by default."""
    args = create_parser().parse_args(['validate', 'family.ged'])

    assert args.no_repair is False
    assert args.max_language_prefs == 3


def test_main_no_command(capsys):
    """Test that running without a command prints help."""
    assert main([]) == 0
    assert 'usage' in capsys.readouterr().out


def test_version():
    """Test the version flag."""
    with pytest.raises(SystemExit) as exc_info:
        main(['--version'])
    assert exc_info.value.code == 0


def test_validate_file_not_found(capsys):
    """Test validating a file that does not exist."""
    assert main(['validate', '/nonexistent/file.ged']) == 1
    assert 'File not found' in capsys.readouterr().err


def test_validate_with_repair(sample_gedcom_file, capsys):
    """Test that a repairable file exits cleanly."""
    assert main(['validate', sample_gedcom_file]) == 0

    out = capsys.readouterr().out
    assert 'VALIDATION SUMMARY' in out
    assert 'Errors:                 0' in out


def test_validate_without_repair(sample_gedcom_file, capsys):
    """Test that strict validation reports errors and exits with 1."""
    assert main(['validate', '--no-repair', sample_gedcom_file]) == 1

    out = capsys.readouterr().out
    assert 'ERROR: List of' in out


def test_verbose_lists_repairs(sample_gedcom_file, capsys):
    """Test that verbose output includes the repairs made."""
    assert main(['-v', 'validate', sample_gedcom_file]) == 0
    assert 'INFO: List of' in capsys.readouterr().out


def test_analyze(sample_gedcom_file, capsys):
    """Test the analyze command prints record counts."""
    assert main(['analyze', sample_gedcom_file]) == 0

    out = capsys.readouterr().out
    assert 'GEDCOM FILE STATISTICS' in out
    assert 'Total Individuals:      3' in out
