"""Shared route dependencies: storage, session identity and ownership checks."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from app.api.session import decode_session_token
from app.config import settings
from app.db.storage import Storage, get_default_storage
from app.models.exposure import Exposure
from app.models.scan import Scan


@lru_cache()
def get_storage() -> Storage:
    return get_default_storage()


StorageDep = Annotated[Storage, Depends(get_storage)]


async def get_current_user_id(request: Request) -> str:
    """User id from the session cookie (or a bearer token carrying the same JWT)."""
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        authorization = request.headers.get("Authorization", "")
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer":
            token = credentials

    user_id = decode_session_token(token) if token else None
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]


def ensure_owner(owner_id: str, current_user_id: str, detail: str) -> None:
    if owner_id != current_user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


async def get_owned_scan(scan_id: str, current_user_id: CurrentUserId, storage: StorageDep) -> Scan:
    """The scan, if it exists and belongs to the session user."""
    scan = await storage.get_scan(scan_id)
    if not scan:
        raise HTTPException(status_code=404, detail="Scan not found")

    ensure_owner(scan.user_id, current_user_id, "Forbidden - You can only access your own scans")
    return scan


async def get_owned_exposure(exposure_id: str, current_user_id: CurrentUserId, storage: StorageDep) -> Exposure:
    """The exposure, if it exists and its scan belongs to the session user."""
    exposure = await storage.get_exposure(exposure_id)
    if not exposure:
        raise HTTPException(status_code=404, detail="Exposure not found")

    scan = await storage.get_scan(exposure.scan_id)
    if not scan:
        raise HTTPException(status_code=404, detail="Scan not found")

    ensure_owner(scan.user_id, current_user_id, "Forbidden - You don't have access to this exposure")
    return exposure


OwnedScan = Annotated[Scan, Depends(get_owned_scan)]
OwnedExposure = Annotated[Exposure, Depends(get_owned_exposure)]
