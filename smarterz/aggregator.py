"""Fan-out aggregation of one batch into a flat, tagged item list."""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .upstream import EduverseClient, UpstreamError

logger = logging.getLogger(__name__)

CONTENT_TYPES = ("lectures", "notes", "dpps")


class AggregationError(Exception):
    """The batch's subject list could not be fetched."""


@dataclass
class FetchOutcome:
    """Result of fetching one (subject, content type) pair."""
    subject_id: object
    subject_name: Optional[str]
    content_type: str
    items: List[dict] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class AggregationResult:
    batch_id: str
    outcomes: List[FetchOutcome] = field(default_factory=list)

    @property
    def items(self) -> List[dict]:
        return [item for outcome in self.outcomes for item in outcome.items]

    @property
    def failures(self) -> List[FetchOutcome]:
        return [o for o in self.outcomes if not o.ok]


async def _fetch_unit(client: EduverseClient, batch_id: str, subject: dict, content_type: str) -> FetchOutcome:
    outcome = FetchOutcome(subject.get("id"), subject.get("name"), content_type)
    try:
        raw = await client.list_content(batch_id, outcome.subject_id, content_type)
    except UpstreamError as e:
        # Missing content for one type is not fatal; the pair just contributes nothing
        outcome.error = str(e)
        return outcome

    if not all(isinstance(item, dict) for item in raw):
        outcome.error = f"{content_type} for subject {outcome.subject_id} contains non-object items"
        return outcome

    outcome.items = [
        {**item, "_subjectName": outcome.subject_name, "_type": content_type}
        for item in raw
    ]
    return outcome


async def aggregate_batch(client: EduverseClient, batch_id: str) -> AggregationResult:
    """
    Fetch every subject of a batch and, for each subject, its lectures,
    notes and dpps. All content fetches run concurrently; outcomes keep
    subject order, then CONTENT_TYPES order.
    """
    try:
        subjects = await client.list_subjects(batch_id)
    except UpstreamError as e:
        raise AggregationError(f"Could not load subjects for batch {batch_id}") from e
    if not all(isinstance(subject, dict) for subject in subjects):
        raise AggregationError(f"Subject list for batch {batch_id} contains non-object entries")

    # ── Fan out: one fetch per subject per content type ──
    tasks = [
        _fetch_unit(client, batch_id, subject, content_type)
        for subject in subjects
        for content_type in CONTENT_TYPES
    ]
    outcomes = await asyncio.gather(*tasks)

    result = AggregationResult(batch_id, list(outcomes))
    for failed in result.failures:
        logger.warning("Skipping %s for subject %s: %s", failed.content_type, failed.subject_name, failed.error)

    logger.info(
        "Batch %s: %d subjects, %d items, %d failed fetches",
        batch_id, len(subjects), len(result.items), len(result.failures),
    )
    return result
