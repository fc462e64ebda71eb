"""Removal request submission task."""

import asyncio
import random
from datetime import datetime
from typing import Optional

from app.config import settings
from app.core.logging import get_logger
from app.db.storage import Storage
from app.models.constants import RemovalStatus
from app.services.request_manager import simulate_removal_outcome

logger = get_logger(__name__)

NOTES_MISSING_RECORD = "Removal could not be processed: exposure or broker record is missing"


def submission_delay() -> float:
    """Simulated broker round trip, in seconds."""
    low = settings.removal_delay_min_seconds
    high = max(low, settings.removal_delay_max_seconds)
    return random.uniform(low, high)


async def process_removal_requests(
    scan_id: str,
    storage: Storage,
    request_ids: Optional[list[str]] = None,
) -> None:
    """Background entry point. Never raises; failures are logged.

    Only the requests named in ``request_ids`` are processed, so each run
    owns the requests it created. Without ids every pending request of the
    scan is picked up.
    """
    try:
        await _process_removal_requests(scan_id, storage, request_ids)
    except Exception:
        logger.exception("removal_failed", scan_id=scan_id)


async def _process_removal_requests(
    scan_id: str,
    storage: Storage,
    request_ids: Optional[list[str]],
) -> None:
    requests = await storage.get_removal_requests_by_scan_id(scan_id)
    if request_ids is not None:
        owned = set(request_ids)
        requests = [r for r in requests if r.id in owned]

    classified = 0
    for request in requests:
        await asyncio.sleep(submission_delay())

        # Classified requests are never revisited
        request = await storage.get_removal_request(request.id)
        if not request or request.status != RemovalStatus.PENDING:
            continue

        exposure = await storage.get_exposure(request.exposure_id)
        broker = await storage.get_data_broker(exposure.data_broker_id) if exposure else None

        if not exposure or not broker:
            logger.warning(
                "removal_request_skipped",
                request_id=request.id,
                exposure_found=exposure is not None,
            )
            if settings.mark_stalled_runs_failed:
                await storage.update_removal_request(
                    request.id,
                    status=RemovalStatus.FAILED,
                    notes=NOTES_MISSING_RECORD,
                    submitted_at=datetime.utcnow(),
                )
            continue

        outcome = simulate_removal_outcome(broker.difficulty_rating, broker.priority)

        now = datetime.utcnow()
        updates = {
            "status": outcome.status,
            "submitted_at": now,
            "action_required": outcome.action_required,
            "notes": outcome.notes,
        }
        if outcome.status == RemovalStatus.COMPLETED:
            updates["completed_at"] = now

        await storage.update_removal_request(request.id, **updates)
        classified += 1
        logger.info(
            "removal_request_classified",
            request_id=request.id,
            broker=broker.name,
            status=outcome.status,
        )

    logger.info("removal_finished", scan_id=scan_id, classified=classified)
