"""
Tests for the broker catalog and seeding.
"""

import pytest

from app.db.database import seed_brokers
from app.models.constants import BrokerCategory, BrokerPriority
from brokers import BROKER_CATALOG, list_brokers


def test_catalog_has_twenty_unique_brokers():
    names = [info.name for info in BROKER_CATALOG]
    assert len(names) == 20
    assert len(set(names)) == 20
    assert names[0] == "Whitepages"
    assert names[-1] == "FamilyTreeNow"


def test_catalog_values_are_valid():
    for info in list_brokers():
        assert info.priority in BrokerPriority.ALL
        assert info.category in BrokerCategory.ALL
        assert 1 <= info.difficulty_rating <= 5
        assert info.required_info


def test_to_record():
    spokeo = next(info for info in list_brokers() if info.name == "Spokeo")
    record = spokeo.to_record(1)
    assert record["position"] == 1
    assert record["url"] == "https://www.spokeo.com/"
    assert isinstance(record["required_info"], list)
    assert record["required_info"][0] == "Full Name"


@pytest.mark.asyncio
async def test_seed_preserves_catalog_order(session_factory, storage):
    inserted = await seed_brokers(session_factory)

    brokers = await storage.get_data_brokers()
    assert inserted == 20
    assert [b.name for b in brokers] == [info.name for info in BROKER_CATALOG]
    assert [b.position for b in brokers] == list(range(20))


@pytest.mark.asyncio
async def test_seed_is_skipped_when_brokers_exist(session_factory, storage):
    await seed_brokers(session_factory)

    assert await seed_brokers(session_factory) == 0
    assert len(await storage.get_data_brokers()) == 20
