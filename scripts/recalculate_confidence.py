"""
Recalculate confidence scores for exported provider-plan acceptance records.

Scores decay with time, so a stored score goes stale even when nothing about
the record changes. Run this periodically so search results show current
scores instead of whatever was stored at the last verification.

Input is a JSON list of acceptance records:
    [{"id": 1, "confidenceScore": 72, "dataSource": "CMS_DATA", ...}, ...]

Usage (local):
    python scripts/recalculate_confidence.py records.json              # Preview changes
    python scripts/recalculate_confidence.py records.json --limit 50   # Preview first 50
    python scripts/recalculate_confidence.py records.json --apply      # Write new scores back
"""

import os
import sys

# Ensure the project root is on the path when run directly
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse
import json
from typing import Optional

from provider_directory.logging_config import configure_logging
from provider_directory.services.confidence.recalculation import (
    AcceptanceRecord,
    RecalculationOutcome,
    recalculate_confidence_scores,
)
from provider_directory.settings import settings

ID_KEY = "id"
SCORE_KEY = "confidenceScore"
LOG_INTERVAL = 1000


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number < 1:
        raise argparse.ArgumentTypeError("--limit must be a positive integer")
    return number


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        print(f"ERROR: {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        description="Recalculate confidence scores for provider-plan acceptance records."
    )
    parser.add_argument("input", help="JSON file containing a list of acceptance records")
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Write changed scores back to the input file (default: dry run)",
    )
    parser.add_argument(
        "--limit", type=positive_int, default=None, help="Process at most N records"
    )
    return parser


def load_records(path: str) -> list[dict]:
    with open(path, encoding="utf-8") as fh:
        rows = json.load(fh)
    if not isinstance(rows, list):
        raise ValueError("input must be a JSON list of records")
    return rows


def to_acceptance_record(index: int, row) -> AcceptanceRecord:
    # Keyed by position: ids may be missing or repeated in an export
    if not isinstance(row, dict):
        # Fails validation downstream and is counted as an error
        return AcceptanceRecord(record_id=index, evidence=row)
    evidence = {k: v for k, v in row.items() if k not in (ID_KEY, SCORE_KEY)}
    return AcceptanceRecord(
        record_id=index,
        evidence=evidence,
        stored_score=row.get(SCORE_KEY),
    )


def apply_changes(path: str, rows: list[dict], outcome: RecalculationOutcome) -> None:
    for change in outcome.changes:
        rows[change.record_id][SCORE_KEY] = change.new_score
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(rows, fh, indent=2)
        fh.write("\n")


def print_summary(outcome: RecalculationOutcome) -> None:
    stats = outcome.stats
    print("\n── Summary ──────────────────────────────")
    print(f"  Processed:  {stats.processed:,}")
    print(f"  Updated:    {stats.updated:,}")
    print(f"  Unchanged:  {stats.unchanged:,}")
    print(f"  Errors:     {stats.errors:,}")
    print(f"  Duration:   {stats.duration_ms / 1000:.1f}s")
    if outcome.dry_run and stats.updated:
        print("\n  DRY RUN — no changes written. Re-run with --apply to write them.")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    dry_run = not args.apply

    print("\n=== Confidence Score Recalculation ===\n")
    print(f"  Environment: {settings.environment}")
    print(f"  Mode:       {'DRY RUN (no writes)' if dry_run else 'APPLY (writing changes)'}")
    print(f"  Batch size: {settings.recalculation_batch_size}")
    if args.limit:
        print(f"  Limit:      {args.limit}")

    try:
        rows = load_records(args.input)
    except (OSError, ValueError) as exc:
        print(f"ERROR: could not read {args.input}: {exc}")
        return 1

    print(f"  Records:    {len(rows):,}")
    if not rows:
        print("\n  No records to process. Exiting.")
        return 0

    last_logged = 0

    def on_progress(processed: int, updated: int) -> None:
        nonlocal last_logged
        if processed - last_logged >= LOG_INTERVAL:
            print(f"  ... {processed:,} processed, {updated:,} changed")
            last_logged = processed

    outcome = recalculate_confidence_scores(
        (to_acceptance_record(index, row) for index, row in enumerate(rows)),
        dry_run=dry_run,
        limit=args.limit,
        on_progress=on_progress,
    )

    if outcome.applied and outcome.changes:
        apply_changes(args.input, rows, outcome)

    print_summary(outcome)
    return 0


if __name__ == "__main__":
    sys.exit(main())
