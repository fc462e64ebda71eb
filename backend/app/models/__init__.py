"""Database models."""

from app.models.user import User
from app.models.broker import DataBroker
from app.models.scan import Scan
from app.models.exposure import Exposure
from app.models.request import RemovalRequest

__all__ = [
    "User",
    "DataBroker",
    "Scan",
    "Exposure",
    "RemovalRequest",
]
