"""Removal request routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.api.deps import StorageDep
from app.api.schemas import RemovalRequestResponse
from app.models.constants import RemovalStatus
from app.services.request_manager import RequestManager

router = APIRouter()


# Schemas
class RequestStatusUpdate(BaseModel):
    status: str
    notes: str | None = None


@router.patch("/{request_id}", response_model=RemovalRequestResponse)
async def update_request_status(request_id: str, update: RequestStatusUpdate, storage: StorageDep):
    """Manually override a removal request's status."""
    if update.status not in RemovalStatus.ALL:
        raise HTTPException(status_code=400, detail=f"Invalid status '{update.status}'")

    request = await RequestManager(storage).update_removal_status(request_id, update.status, update.notes)
    if not request:
        raise HTTPException(status_code=404, detail="Removal request not found")

    return RemovalRequestResponse.model_validate(request)
