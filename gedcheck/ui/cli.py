"""Command-line interface for gedcheck."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .. import __version__
from ..core.gedcom import Gedcom
from ..core.gedcom_parser import GedcomParser
from ..validation import GedcomValidator, Severity, ValidationOptions


def print_statistics(gedcom: Gedcom) -> None:
    """Print record counts for a loaded GEDCOM file.

    Args:
        gedcom: Loaded Gedcom graph
    """
    stats = gedcom.get_statistics()

    print("\n" + "=" * 60)
    print("GEDCOM FILE STATISTICS")
    print("=" * 60)
    print(f"Total Individuals:      {stats['num_individuals']:,}")
    print(f"Total Families:         {stats['num_families']:,}")
    print(f"Sources:                {stats['num_sources']:,}")
    print(f"Repositories:           {stats['num_repositories']:,}")
    print(f"Multimedia Objects:     {stats['num_multimedia']:,}")
    print(f"Notes:                  {stats['num_notes']:,}")
    print(f"Submitters:             {stats['num_submitters']:,}")
    print("=" * 60 + "\n")


def print_findings(validator: GedcomValidator, show_info: bool) -> None:
    """Print the findings of a validation pass followed by a summary.

    Args:
        validator: Validator that has run
        show_info: Also list info findings (the repairs that were made)
    """
    for severity in Severity:
        if severity == Severity.INFO and not show_info:
            continue
        for finding in validator.get_findings(severity):
            print(finding)

    summary = validator.get_summary()
    print("\n" + "=" * 60)
    print("VALIDATION SUMMARY")
    print("=" * 60)
    print(f"Errors:                 {summary['error']:,}")
    print(f"Warnings:               {summary['warning']:,}")
    print(f"Info (repairs):         {summary['info']:,}")
    print("=" * 60 + "\n")


def load_file(filepath: str) -> Optional[Gedcom]:
    if not Path(filepath).exists():
        print(f"Error: File not found: {filepath}", file=sys.stderr)
        return None
    print(f"Loading GEDCOM file: {filepath}")
    return GedcomParser().load_gedcom(filepath)


def analyze_command(args: argparse.Namespace) -> int:
    """Execute the analyze command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        gedcom = load_file(args.file)
        if gedcom is None:
            return 1
        print_statistics(gedcom)
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def validate_command(args: argparse.Namespace) -> int:
    """Execute the validate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if no errors were found, 1 otherwise)
    """
    try:
        gedcom = load_file(args.file)
        if gedcom is None:
            return 1

        options = ValidationOptions(auto_repair=not args.no_repair,
                                    max_language_prefs=args.max_language_prefs)
        validator = GedcomValidator(gedcom, options)
        validator.validate()
        print_findings(validator, show_info=args.verbose)

        return 1 if validator.has_errors() else 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='gedcheck',
        description='Validate and repair GEDCOM 5.5 / 5.5.1 genealogy files.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output (log messages and repairs made)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )

    validate_parser = subparsers.add_parser(
        'validate',
        help='Validate a GEDCOM file and report the findings'
    )
    validate_parser.add_argument(
        'file',
        help='Path to the GEDCOM file'
    )
    validate_parser.add_argument(
        '--no-repair',
        action='store_true',
        help='Report repairable problems as errors instead of repairing them'
    )
    validate_parser.add_argument(
        '--max-language-prefs',
        type=int,
        default=ValidationOptions().max_language_prefs,
        help='Maximum language preferences per submitter (default: 3)'
    )

    analyze_parser = subparsers.add_parser(
        'analyze',
        help='Load a GEDCOM file and display record counts'
    )
    analyze_parser.add_argument(
        'file',
        help='Path to the GEDCOM file'
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # If no command specified, print help
    if not args.command:
        parser.print_help()
        return 0

    if args.command == 'validate':
        return validate_command(args)
    elif args.command == 'analyze':
        return analyze_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
