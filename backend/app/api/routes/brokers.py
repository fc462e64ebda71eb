"""Data broker routes."""

from fastapi import APIRouter, HTTPException

from app.api.deps import StorageDep
from app.api.schemas import BrokerResponse

router = APIRouter()


@router.get("", response_model=list[BrokerResponse])
async def list_brokers(storage: StorageDep):
    """List the broker catalog in scan order."""
    brokers = await storage.get_data_brokers()
    return [BrokerResponse.model_validate(b) for b in brokers]


@router.get("/{broker_id}", response_model=BrokerResponse)
async def get_broker(broker_id: str, storage: StorageDep):
    broker = await storage.get_data_broker(broker_id)
    if not broker:
        raise HTTPException(status_code=404, detail="Data broker not found")
    return BrokerResponse.model_validate(broker)
