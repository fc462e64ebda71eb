"""Request manager service for simulated opt-out submissions."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.core.logging import get_logger
from app.db.storage import Storage
from app.models.broker import DataBroker
from app.models.constants import ActionRequired, BrokerPriority, RemovalStatus
from app.models.exposure import Exposure
from app.models.request import RemovalRequest

logger = get_logger(__name__)

NOTES_ID_VERIFICATION = "Broker requires government ID verification to complete removal"
NOTES_EMAIL_VERIFICATION = "Email verification required to complete removal process"
NOTES_SUBMITTED = "Removal request submitted successfully, awaiting broker response"
NOTES_REMOVED = "Data successfully removed from broker database"


@dataclass(frozen=True)
class RemovalOutcome:
    """Simulated broker response to an opt-out request."""
    status: str
    notes: str
    action_required: Optional[str] = None


def simulate_removal_outcome(difficulty_rating: int, priority: str) -> RemovalOutcome:
    """Classify a removal request. The first matching rule wins."""
    if difficulty_rating >= 4:
        return RemovalOutcome(
            status=RemovalStatus.ACTION_REQUIRED,
            action_required=ActionRequired.ID_VERIFICATION,
            notes=NOTES_ID_VERIFICATION,
        )

    if difficulty_rating == 3 and priority == BrokerPriority.MEDIUM:
        return RemovalOutcome(
            status=RemovalStatus.ACTION_REQUIRED,
            action_required=ActionRequired.EMAIL_VERIFICATION,
            notes=NOTES_EMAIL_VERIFICATION,
        )

    if priority == BrokerPriority.HIGH:
        return RemovalOutcome(status=RemovalStatus.IN_PROGRESS, notes=NOTES_SUBMITTED)

    if difficulty_rating <= 2:
        return RemovalOutcome(status=RemovalStatus.COMPLETED, notes=NOTES_REMOVED)

    return RemovalOutcome(status=RemovalStatus.IN_PROGRESS, notes=NOTES_SUBMITTED)


@dataclass
class RemovalStats:
    total: int = 0
    completed: int = 0
    in_progress: int = 0
    pending: int = 0
    action_required: int = 0
    failed: int = 0

    @classmethod
    def from_requests(cls, requests: list[RemovalRequest]) -> "RemovalStats":
        return cls(
            total=len(requests),
            completed=sum(1 for r in requests if r.status == RemovalStatus.COMPLETED),
            in_progress=sum(1 for r in requests if r.status == RemovalStatus.IN_PROGRESS),
            pending=sum(1 for r in requests if r.status == RemovalStatus.PENDING),
            action_required=sum(1 for r in requests if r.status == RemovalStatus.ACTION_REQUIRED),
            failed=sum(1 for r in requests if r.status == RemovalStatus.FAILED),
        )


@dataclass
class RequestWithDetails:
    request: RemovalRequest
    exposure: Optional[Exposure] = None
    broker: Optional[DataBroker] = None


@dataclass
class RemovalProgress:
    stats: RemovalStats
    requests: list[RequestWithDetails] = field(default_factory=list)


class RequestManager:
    """Manages removal requests for the exposures of a scan."""

    def __init__(self, storage: Storage):
        self.storage = storage

    async def start_removal_process(self, scan_id: str) -> list[RemovalRequest]:
        """Create one pending request per exposure and classify them in the background."""
        from app.workers.runner import spawn
        from app.workers.tasks.submit_requests import process_removal_requests

        exposures = await self.storage.get_exposures_by_scan_id(scan_id)

        created = []
        for exposure in exposures:
            request = await self.storage.create_removal_request(
                exposure_id=exposure.id,
                status=RemovalStatus.PENDING,
                retry_count=0,
            )
            created.append(request)

        logger.info("removal_started", scan_id=scan_id, requests=len(created))

        spawn(
            process_removal_requests(scan_id, self.storage, [r.id for r in created]),
            name=f"removal:{scan_id}",
        )
        return created

    async def get_removal_progress(self, scan_id: str) -> RemovalProgress:
        """Current state of every request for the scan, counted at call time."""
        requests = await self.storage.get_removal_requests_by_scan_id(scan_id)

        details = []
        for request in requests:
            exposure = await self.storage.get_exposure(request.exposure_id)
            broker = await self.storage.get_data_broker(exposure.data_broker_id) if exposure else None
            details.append(RequestWithDetails(request=request, exposure=exposure, broker=broker))

        return RemovalProgress(stats=RemovalStats.from_requests(requests), requests=details)

    async def update_removal_status(
        self,
        request_id: str,
        status: str,
        notes: str | None = None,
    ) -> RemovalRequest | None:
        """Manual override of a single request's status."""
        updates = {"status": status, "notes": notes}

        if status == RemovalStatus.COMPLETED:
            updates["completed_at"] = datetime.utcnow()

        request = await self.storage.update_removal_request(request_id, **updates)
        if request:
            logger.info("removal_status_updated", request_id=request_id, status=status)
        return request
