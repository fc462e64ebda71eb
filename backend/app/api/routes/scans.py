"""Scan and removal routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.api.deps import CurrentUserId, OwnedScan, StorageDep, ensure_owner
from app.api.schemas import (
    BrokerResponse,
    ExposureResponse,
    ExposureWithBrokerResponse,
    MessageResponse,
    RemovalRequestDetail,
    RemovalRequestResponse,
    ScanResponse,
)
from app.services.request_manager import RequestManager
from app.services.scanner import ScanningService

router = APIRouter()


# Schemas
class ScanCreate(BaseModel):
    user_id: str | None = None


class ScanResultsResponse(BaseModel):
    scan: ScanResponse
    exposures: list[ExposureWithBrokerResponse]


class RemovalStatsResponse(BaseModel):
    total: int
    completed: int
    in_progress: int
    pending: int
    action_required: int
    failed: int


class RemovalProgressResponse(BaseModel):
    stats: RemovalStatsResponse
    requests: list[RemovalRequestDetail]


@router.post("", response_model=ScanResponse)
async def start_scan(scan_data: ScanCreate, current_user_id: CurrentUserId, storage: StorageDep):
    """Start a privacy scan for the session user. Returns the running scan."""
    if not scan_data.user_id:
        raise HTTPException(status_code=400, detail="User ID is required")

    ensure_owner(scan_data.user_id, current_user_id, "Forbidden - You can only scan for yourself")

    user = await storage.get_user(scan_data.user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    scan = await ScanningService(storage).start_scan(user.id)
    return ScanResponse.model_validate(scan)


@router.get("/{scan_id}/results", response_model=ScanResultsResponse)
async def get_scan_results(scan: OwnedScan, storage: StorageDep):
    """Get a scan with its exposures and their brokers."""
    results = await ScanningService(storage).get_scan_results(scan.id)
    if not results:
        raise HTTPException(status_code=404, detail="Scan results not found")

    return ScanResultsResponse(
        scan=ScanResponse.model_validate(results.scan),
        exposures=[
            ExposureWithBrokerResponse(
                **ExposureResponse.model_validate(item.exposure).model_dump(),
                broker=BrokerResponse.model_validate(item.broker) if item.broker else None,
            )
            for item in results.exposures
        ],
    )


@router.post("/{scan_id}/remove", response_model=MessageResponse)
async def start_removal(scan: OwnedScan, storage: StorageDep):
    """Create removal requests for every exposure of the scan and submit them."""
    await RequestManager(storage).start_removal_process(scan.id)
    return MessageResponse(message="Removal process started")


@router.get("/{scan_id}/removal-progress", response_model=RemovalProgressResponse)
async def get_removal_progress(scan: OwnedScan, storage: StorageDep):
    """Get removal request counts and details for the scan."""
    progress = await RequestManager(storage).get_removal_progress(scan.id)

    return RemovalProgressResponse(
        stats=RemovalStatsResponse(**vars(progress.stats)),
        requests=[
            RemovalRequestDetail(
                **RemovalRequestResponse.model_validate(item.request).model_dump(),
                exposure=ExposureResponse.model_validate(item.exposure) if item.exposure else None,
                broker=BrokerResponse.model_validate(item.broker) if item.broker else None,
            )
            for item in progress.requests
        ],
    )
