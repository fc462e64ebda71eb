"""Exposure routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.api.deps import OwnedExposure, StorageDep
from app.services.opt_out import build_removal_form

router = APIRouter()


# Schemas
class FormBroker(BaseModel):
    name: str
    url: str
    opt_out_url: str | None
    opt_out_process: str
    estimated_processing_time: str
    difficulty_rating: int


class FormUserData(BaseModel):
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: str
    date_of_birth: str
    current_address: str
    city: str
    state: str
    zip_code: str
    previous_addresses: str | None


class RemovalFormResponse(BaseModel):
    broker: FormBroker
    user_data: FormUserData
    exposed_data: list[str]
    profile_url: str | None
    required_info: list[str]
    form_template: str


@router.get("/{exposure_id}/removal-form", response_model=RemovalFormResponse)
async def get_removal_form(exposure: OwnedExposure, storage: StorageDep):
    """Generate a personalized removal letter for one exposure."""
    broker = await storage.get_data_broker(exposure.data_broker_id)
    if not broker:
        raise HTTPException(status_code=404, detail="Data broker not found")

    scan = await storage.get_scan(exposure.scan_id)
    user = await storage.get_user(scan.user_id) if scan else None
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return RemovalFormResponse(**build_removal_form(broker, user, exposure))
