"""User routes."""

from datetime import datetime

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from sqlalchemy.exc import IntegrityError

from app.api.deps import CurrentUserId, StorageDep, ensure_owner
from app.api.schemas import ScanResponse
from app.api.session import set_session_cookie
from app.core.logging import get_logger
from app.services.scanner import ScanningService

logger = get_logger(__name__)

router = APIRouter()


# Schemas
class UserCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=1, max_length=50)
    date_of_birth: str = Field(min_length=1, max_length=20)
    current_address: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=50)
    zip_code: str = Field(min_length=1, max_length=20)
    previous_addresses: str | None = None


class UserResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    date_of_birth: str
    current_address: str
    city: str
    state: str
    zip_code: str
    previous_addresses: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


@router.post("", response_model=UserResponse)
async def create_user(user_data: UserCreate, response: Response, storage: StorageDep):
    """Register a user and start a session for them."""
    if await storage.get_user_by_email(user_data.email):
        raise HTTPException(status_code=400, detail="User already exists with this email")

    try:
        user = await storage.create_user(**user_data.model_dump())
    except IntegrityError:
        raise HTTPException(status_code=400, detail="User already exists with this email")

    set_session_cookie(response, user.id)
    logger.info("user_created", user_id=user.id)

    return UserResponse.model_validate(user)


@router.get("/by-email/{email}", response_model=UserResponse)
async def get_user_by_email(email: str, current_user_id: CurrentUserId, storage: StorageDep):
    """Look up the session user by email."""
    user = await storage.get_user_by_email(email)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    ensure_owner(user.id, current_user_id, "Forbidden - You can only access your own data")
    return UserResponse.model_validate(user)


@router.get("/{user_id}/latest-scan", response_model=ScanResponse)
async def get_latest_scan(user_id: str, current_user_id: CurrentUserId, storage: StorageDep):
    """Get the user's most recent scan."""
    ensure_owner(user_id, current_user_id, "Forbidden - You can only access your own scans")

    scan = await ScanningService(storage).get_user_latest_scan(user_id)
    if not scan:
        raise HTTPException(status_code=404, detail="No scans found for user")

    return ScanResponse.model_validate(scan)
