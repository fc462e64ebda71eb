"""Data broker catalog."""

from brokers.base import BrokerInfo
from brokers.catalog import BROKER_CATALOG


def list_brokers() -> list[BrokerInfo]:
    """Get all catalog entries in scan order."""
    return list(BROKER_CATALOG)


__all__ = [
    "BrokerInfo",
    "BROKER_CATALOG",
    "list_brokers",
]
