"""Command-line entrypoint for Gift Aid claim assembly and response reading."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gift_aid_claims.application.dto import ClaimInputContext
from gift_aid_claims.application.use_cases import AssembleClaimUseCase, ReadResponseUseCase
from gift_aid_claims.domain.errors import GiftAidError
from gift_aid_claims.infrastructure.archive.failed_messages import FileSystemFailedMessageRepository
from gift_aid_claims.infrastructure.parsing.tables import read_donations, read_other_income
from gift_aid_claims.infrastructure.xml.repayment import render_claim
from gift_aid_claims.presentation.response_table import render_csv


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Assemble Gift Aid claims and read gateway responses")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = parser.add_subparsers(dest="command", required=True)

    assemble = sub.add_parser("assemble", help="Build the repayment claim from a donations spreadsheet")
    assemble.add_argument("donations", type=str, help="Path to donations CSV or Excel file")
    assemble.add_argument("--other-income", type=str, help="Path to other income CSV or Excel file")
    assemble.add_argument("--xml", action="store_true", help="Print the Repayment XML instead of a summary")

    read = sub.add_parser("read-response", help="Read a gateway submit response envelope")
    read.add_argument("envelope", type=str, help="Path to the response XML")
    read.add_argument("--failed-dir", type=str, help="Directory for unreadable replies")
    read.add_argument("--csv", action="store_true", help="Print the response as CSV")
    return parser.parse_args(argv)


def _assemble(args: argparse.Namespace) -> int:
    donations = read_donations(Path(args.donations))
    if args.other_income:
        context = ClaimInputContext(donations=donations, other_income=read_other_income(Path(args.other_income)))
    else:
        context = ClaimInputContext(donations=donations)
    claim = AssembleClaimUseCase(context).execute()

    if args.xml:
        sys.stdout.write(render_claim(claim).decode("utf-8") + "\n")
        return 0

    print("Claim Summary")
    print("=============")
    print(f"Donation lines: {len(claim.lines)}")
    print(f"Aggregated lines: {sum(1 for line in claim.lines if line.is_aggregated)}")
    print(f"Total donations: {claim.total_donations}")
    print(f"Earliest donation: {claim.earliest_donation_date or 'none'}")
    print(f"Other income lines: {len(claim.other_income)}")
    return 0


def _read_response(args: argparse.Namespace) -> int:
    failed = FileSystemFailedMessageRepository(Path(args.failed_dir)) if args.failed_dir else None
    use_case = ReadResponseUseCase(failed) if failed else ReadResponseUseCase()
    reader = use_case.execute(Path(args.envelope))
    if reader is None:
        print("Envelope is not a response to a submit request.")
        return 2
    if args.csv:
        sys.stdout.write(render_csv(reader.metadata, reader.body).decode("utf-8"))
        return 0
    for line in reader.as_summary_lines():
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        if args.command == "assemble":
            return _assemble(args)
        return _read_response(args)
    except GiftAidError as exc:
        print(f"Error ({exc.error_code}): {exc.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
