"""Main CLI entry point for yCard."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .. import __version__
from ..core.errors import DocumentValidationError, YCardError
from ..core.parsers import dump_document
from ..pipelines.conversion import parse_ycard, vcf_to_ycard, ycard_to_vcf
from ..pipelines.diagnostics import collect_diagnostics
from ..utils import (
    DEFAULT_BASE_DN,
    get_summary,
    localize_ycard,
    ycard_to_csv,
    ycard_to_ldif,
)

EXPORT_FORMATS = ["vcard", "csv", "ldif"]


def _write_output(text: str, output: Optional[Path]) -> None:
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps vCard CRLF terminators intact.
        with open(output, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        print(f"Written to: {output}")
    else:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")


def _report_validation_error(error: DocumentValidationError, input_path: Path) -> None:
    print(f"Error validating {input_path}:", file=sys.stderr)
    for issue in error.issues:
        print(f"  {issue}", file=sys.stderr)


def export_command(args):
    """Export a yCard document to vCard, CSV or LDIF."""
    try:
        document = parse_ycard(args.input.read_text(encoding="utf-8"))
        if args.lang:
            document = localize_ycard(document, args.lang)

        if args.format == "vcard":
            output = ycard_to_vcf(document)
        elif args.format == "csv":
            output = ycard_to_csv(document)
        else:
            output = ycard_to_ldif(document, base_dn=args.base_dn)

        _write_output(output, args.output)
    except DocumentValidationError as e:
        _report_validation_error(e, args.input)
        sys.exit(1)
    except (YCardError, OSError) as e:
        print(f"Error exporting {args.input}: {e}", file=sys.stderr)
        sys.exit(1)


def import_command(args):
    """Import a vCard file into a yCard document."""
    try:
        document = vcf_to_ycard(args.input.read_text(encoding="utf-8"), strict=args.strict)
        _write_output(dump_document(document), args.output)
    except (YCardError, OSError) as e:
        print(f"Error importing {args.input}: {e}", file=sys.stderr)
        sys.exit(1)


def validate_command(args):
    """Validate a yCard document and print every diagnostic."""
    try:
        text = args.input.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error reading {args.input}: {e}", file=sys.stderr)
        sys.exit(1)

    diagnostics = collect_diagnostics(text)
    for diagnostic in diagnostics:
        print(f"{args.input}: {diagnostic.severity}: [{diagnostic.kind.value}] {diagnostic.message}")
    if any(diagnostic.severity == "error" for diagnostic in diagnostics):
        sys.exit(1)
    if not diagnostics:
        print(f"{args.input}: OK")


def summary_command(args):
    """Print summary statistics for a yCard document."""
    try:
        document = parse_ycard(args.input.read_text(encoding="utf-8"))
        print(json.dumps(get_summary(document).model_dump(), indent=2, ensure_ascii=False))
    except DocumentValidationError as e:
        _report_validation_error(e, args.input)
        sys.exit(1)
    except (YCardError, OSError) as e:
        print(f"Error reading {args.input}: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="ycard",
        description="Convert yCard organizational documents to and from vCard 4.0",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ycard {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("YCARD_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: $YCARD_LOG_LEVEL or WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Export command
    export_parser = subparsers.add_parser("export", help="Export a yCard document")
    export_parser.add_argument("input", type=Path, help="Input yCard (YAML/JSON) file")
    export_parser.add_argument(
        "--format",
        choices=EXPORT_FORMATS,
        default="vcard",
        help="Output format"
    )
    export_parser.add_argument("--output", type=Path, help="Output file")
    export_parser.add_argument(
        "--base-dn",
        default=os.environ.get("YCARD_BASE_DN", DEFAULT_BASE_DN),
        help="Base DN for LDIF entries (default: $YCARD_BASE_DN or %(default)s)"
    )
    export_parser.add_argument("--lang", help="Apply i18n translations for this language code")

    # Import command
    import_parser = subparsers.add_parser("import", help="Import a vCard file")
    import_parser.add_argument("input", type=Path, help="Input vCard file")
    import_parser.add_argument("--output", type=Path, help="Output yCard (YAML) file")
    import_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first malformed vCard record instead of skipping it"
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a yCard document")
    validate_parser.add_argument("input", type=Path, help="Input yCard (YAML/JSON) file")

    # Summary command
    summary_parser = subparsers.add_parser("summary", help="Summarize a yCard document")
    summary_parser.add_argument("input", type=Path, help="Input yCard (YAML/JSON) file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "export":
        export_command(args)
    elif args.command == "import":
        import_command(args)
    elif args.command == "validate":
        validate_command(args)
    elif args.command == "summary":
        summary_command(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
