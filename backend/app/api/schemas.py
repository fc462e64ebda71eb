"""Response schemas shared by several route modules."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BrokerResponse(BaseModel):
    id: str
    name: str
    url: str
    category: str
    priority: str
    opt_out_url: str | None
    opt_out_process: str
    required_info: list[str]
    estimated_processing_time: str
    difficulty_rating: int

    model_config = ConfigDict(from_attributes=True)


class ScanResponse(BaseModel):
    id: str
    user_id: str
    status: str
    sites_scanned: int
    sites_found: int
    privacy_score: int
    created_at: datetime
    completed_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ExposureResponse(BaseModel):
    id: str
    scan_id: str
    data_broker_id: str
    exposed_data: list[str]
    profile_url: str | None
    discovered_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ExposureWithBrokerResponse(ExposureResponse):
    broker: BrokerResponse | None = None


class RemovalRequestResponse(BaseModel):
    id: str
    exposure_id: str
    status: str
    action_required: str | None
    notes: str | None
    retry_count: int
    submitted_at: datetime | None
    completed_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class RemovalRequestDetail(RemovalRequestResponse):
    exposure: ExposureResponse | None = None
    broker: BrokerResponse | None = None


class MessageResponse(BaseModel):
    message: str
