#!/usr/bin/env python3
"""
CLI for vehicle document and service status.

Commands:
  status        - Show document renewals and service status for a vehicle
  label         - Show a relative label ("Tomorrow", "3 days ago") for a date
  log-service   - Record a service date (and interval)
  add-document  - Add or renew a document
"""

import argparse
import logging
import math
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

import yaml

from vehicle_status import (
    Document,
    DocumentReport,
    Status,
    load_vehicle,
    relative_label,
    save_document,
    save_service,
)
from vehicle_status.dates import format_ddmmyyyy, to_iso_date

# =============================================================================
# Formatting helpers
# =============================================================================


def format_date(value: Optional[str]) -> str:
    """Format a stored date for display."""
    return format_ddmmyyyy(value) or "-"


def format_interval(months: Optional[float]) -> str:
    """Format a service interval for display."""
    if months is None:
        return "-"
    return f"{months:g} mo"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def parse_date_arg(value: str) -> date:
    """argparse type for YYYY-MM-DD or DD/MM/YYYY dates."""
    iso = to_iso_date(value)
    if not iso:
        raise argparse.ArgumentTypeError(f"invalid date: '{value}'")
    return date.fromisoformat(iso)


# =============================================================================
# Status command
# =============================================================================


def make_document_table(reports: List[DocumentReport]) -> List[List[str]]:
    """Convert document reports to table rows."""
    rows = []
    for report in reports:
        doc = report.document
        rows.append(
            [
                doc.display_name,
                format_date(doc.issue_date),
                report.issued.short_text,
                format_date(doc.expiry_date),
                report.renewal.text,
                truncate(doc.notes),
            ]
        )
    return rows


def cmd_status(args):
    """Show document renewals and service status."""
    vehicle = load_vehicle(args.vehicle_file)
    today = args.today or date.today()

    # Header
    print(f"Vehicle: {vehicle.car.name}")
    print(f"As of: {format_ddmmyyyy(today)}")
    print(f"Documents: {len(vehicle.documents)}")
    print()

    reports = vehicle.document_reports(today)
    due = [r for r in reports if r.is_due]
    ok = [r for r in reports if r.renewal.status == Status.VALID]
    unknown = [r for r in reports if not r.is_due and r.renewal.status != Status.VALID]

    headers = ["Document", "Issued", "Age", "Expires", "Renewal", "Notes"]

    if due:
        print("RENEWAL DUE:")
        print(tabulate(make_document_table(due), headers=headers, tablefmt="simple"))
        print()

    if ok:
        print("VALID:")
        print(tabulate(make_document_table(ok), headers=headers, tablefmt="simple"))
        print()

    if unknown:
        print("NO VALID EXPIRY DATE:")
        for report in unknown:
            print(f"  {report.document.display_name}: {report.renewal.text}")
        print()

    # Service
    last = vehicle.service_status(today)
    upcoming = vehicle.next_service(today)
    print("SERVICE:")
    print(f"  Last service: {format_date(vehicle.last_service_date)} ({last.text})")
    print(f"  Interval:     {format_interval(vehicle.service_interval_months)}")
    next_date = format_ddmmyyyy(upcoming.date) or "-"
    print(f"  Next service: {next_date} ({upcoming.text})")

    return 1 if args.strict and (due or upcoming.is_due) else 0


# =============================================================================
# Label command
# =============================================================================


def cmd_label(args):
    """Print a relative label for a date."""
    today = args.today or date.today()
    target = to_iso_date(args.date) or args.date
    print(relative_label(target, today))
    return 0


# =============================================================================
# Log service command
# =============================================================================


def cmd_log_service(args):
    """Record the last service date."""
    vehicle = load_vehicle(args.vehicle_file)

    if args.interval is not None and not (math.isfinite(args.interval) and args.interval > 0):
        print("Error: --interval must be a positive number")
        return 1

    service_date = (args.date or date.today()).isoformat()
    interval = args.interval if args.interval is not None else vehicle.service_interval_months

    # Show what will be saved
    print(f"Recording service for {vehicle.car.name}:")
    print(f"  Date:     {format_date(service_date)}")
    print(f"  Interval: {format_interval(interval)}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    save_service(args.vehicle_file, service_date, args.interval)
    print("Service saved.")

    return 0


# =============================================================================
# Add document command
# =============================================================================


def cmd_add_document(args):
    """Add or renew a document."""
    vehicle = load_vehicle(args.vehicle_file)

    document = Document(
        kind=args.kind.lower(),
        issue_date=args.issued.isoformat() if args.issued else None,
        expiry_date=args.expires.isoformat() if args.expires else None,
        number=args.number,
        notes=args.notes,
    )
    replacing = vehicle.get_document(document.kind) is not None

    verb = "Renewing" if replacing else "Adding"
    print(f"{verb} document for {vehicle.car.name}:")
    print(f"  Kind:    {document.display_name}")
    print(f"  Issued:  {format_date(document.issue_date)}")
    print(f"  Expires: {format_date(document.expiry_date)}")
    if document.number:
        print(f"  Number:  {document.number}")
    if document.notes:
        print(f"  Notes:   {document.notes}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    save_document(args.vehicle_file, document)
    print("Document saved.")

    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vehicle document and service status tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s status vehicles/activa.yaml
  %(prog)s --today 2025-10-19 status vehicles/activa.yaml
  %(prog)s label 2025-12-01
  %(prog)s log-service vehicles/activa.yaml --date 2025-10-19 --interval 4
  %(prog)s add-document vehicles/activa.yaml insurance \\
      --issued 2026-03-10 --expires 2027-03-09
""",
    )
    parser.add_argument(
        "--today",
        type=parse_date_arg,
        help="Evaluate as of this date instead of today (YYYY-MM-DD)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Status subcommand
    status_parser = subparsers.add_parser(
        "status", help="Show document renewals and service status"
    )
    status_parser.add_argument("vehicle_file", type=Path, help="Path to vehicle YAML file")
    status_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if a renewal or service is due",
    )

    # Label subcommand
    label_parser = subparsers.add_parser(
        "label", help="Show a relative label for a date"
    )
    label_parser.add_argument("date", type=str, help="Date (YYYY-MM-DD)")

    # Log service subcommand
    log_parser = subparsers.add_parser("log-service", help="Record a service date")
    log_parser.add_argument("vehicle_file", type=Path, help="Path to vehicle YAML file")
    log_parser.add_argument(
        "--date",
        type=parse_date_arg,
        help="Service date (default: today)",
    )
    log_parser.add_argument(
        "--interval",
        type=float,
        help="Months until the next service (default: keep current)",
    )
    log_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be saved without saving",
    )

    # Add document subcommand
    doc_parser = subparsers.add_parser("add-document", help="Add or renew a document")
    doc_parser.add_argument("vehicle_file", type=Path, help="Path to vehicle YAML file")
    doc_parser.add_argument(
        "kind",
        type=str,
        help="Document kind (e.g. 'insurance', 'emission', 'road_tax')",
    )
    doc_parser.add_argument("--issued", type=parse_date_arg, help="Issue date")
    doc_parser.add_argument("--expires", type=parse_date_arg, help="Expiry date")
    doc_parser.add_argument("--number", type=str, help="Policy or certificate number")
    doc_parser.add_argument("--notes", type=str, help="Notes about the document")
    doc_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be saved without saving",
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "label":
        try:
            return cmd_label(args)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    # Validate vehicle file exists
    if not args.vehicle_file.exists():
        print(f"Error: File not found: {args.vehicle_file}")
        return 1

    # Dispatch to command handler
    handlers = {
        "status": cmd_status,
        "log-service": cmd_log_service,
        "add-document": cmd_add_document,
    }
    try:
        return handlers[args.command](args)
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
