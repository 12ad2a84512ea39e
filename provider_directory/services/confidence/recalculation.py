"""
Confidence recalculation job.

Scores decay with time even when nothing about a record changes, so stored
scores drift. This job re-scores a stream of acceptance records against a
single instant and reports which stored scores are out of date.

Steps:
  1. Take records in batches of `batch_size` (up to `limit` in total)
  2. For each record:
     a. Re-score its evidence
     b. Compare with the stored score → ScoreChange if different
     c. On failure: count the error, log it, keep going
  3. Call `on_progress(processed, updated)` after each batch
  4. Log and return a summary

This module never writes anywhere; the caller persists `outcome.changes`
when `dry_run` is False.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from itertools import islice
from typing import Any, Callable, Iterable, Optional

from provider_directory.services.confidence.scorer import (
    calculate_confidence_score,
    resolve_now,
)
from provider_directory.settings import settings

logger = logging.getLogger(__name__)


@dataclass
class AcceptanceRecord:
    """A stored provider-plan acceptance row and the evidence to re-score it from."""

    record_id: Any
    evidence: Any  # ProviderPlanEvidence, or a dict / object that validates into one
    stored_score: Optional[int] = None


@dataclass
class ScoreChange:
    record_id: Any
    old_score: Optional[int]
    new_score: int


@dataclass
class RecalculationStats:
    processed: int = 0
    updated: int = 0
    unchanged: int = 0
    errors: int = 0
    duration_ms: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass
class RecalculationOutcome:
    stats: RecalculationStats
    dry_run: bool
    changes: list[ScoreChange] = field(default_factory=list)

    @property
    def applied(self) -> bool:
        return not self.dry_run


def _batches(records: Iterable[AcceptanceRecord], size: int, limit: Optional[int]):
    iterator = iter(records)
    if limit is not None:
        iterator = islice(iterator, limit)
    while True:
        batch = list(islice(iterator, size))
        if not batch:
            return
        yield batch


def recalculate_confidence_scores(
    records: Iterable[AcceptanceRecord],
    *,
    dry_run: bool = False,
    limit: Optional[int] = None,
    batch_size: Optional[int] = None,
    on_progress: Optional[Callable[[int, int], None]] = None,
    now: Optional[datetime] = None,
) -> RecalculationOutcome:
    """
    Re-score every record and collect the ones whose stored score changed.

    Args:
        records:     AcceptanceRecords to re-score (any iterable; consumed once).
        dry_run:     Preview only — changes are still reported, `applied` is False.
        limit:       Maximum number of records to process.
        batch_size:  Records per progress tick (default: settings.recalculation_batch_size).
        on_progress: Called with (processed, updated) after each batch.
        now:         Scoring instant shared by every record.

    Returns:
        RecalculationOutcome with stats and the list of ScoreChanges.
    """
    if limit is not None and limit < 1:
        raise ValueError("limit must be a positive integer")

    size = batch_size or settings.recalculation_batch_size
    now = resolve_now(now)
    started = time.monotonic()

    stats = RecalculationStats()
    outcome = RecalculationOutcome(stats=stats, dry_run=dry_run)

    logger.info(
        "Starting confidence score recalculation [dry_run=%s limit=%s batch_size=%d]",
        dry_run,
        limit,
        size,
    )

    for batch in _batches(records, size, limit):
        for record in batch:
            try:
                new_score = calculate_confidence_score(record.evidence, now=now).score
            except Exception:
                stats.errors += 1
                logger.exception(
                    "Error recalculating confidence for record %s",
                    getattr(record, "record_id", None),
                )
            else:
                if new_score != record.stored_score:
                    outcome.changes.append(
                        ScoreChange(
                            record_id=record.record_id,
                            old_score=record.stored_score,
                            new_score=new_score,
                        )
                    )
                    stats.updated += 1
                else:
                    stats.unchanged += 1
            stats.processed += 1

        if on_progress is not None:
            on_progress(stats.processed, stats.updated)

    stats.duration_ms = int((time.monotonic() - started) * 1000)

    logger.info(
        "Confidence score recalculation complete: processed=%d updated=%d "
        "unchanged=%d errors=%d dry_run=%s (%.1fs)",
        stats.processed,
        stats.updated,
        stats.unchanged,
        stats.errors,
        dry_run,
        stats.duration_ms / 1000,
    )
    return outcome
