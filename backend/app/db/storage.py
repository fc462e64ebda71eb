"""Record store used by the scan and removal services.

Every method opens its own short-lived session, so each call is committed
independently. Rows are returned detached (``expire_on_commit=False``).
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.models.broker import DataBroker
from app.models.exposure import Exposure
from app.models.request import RemovalRequest
from app.models.scan import Scan
from app.models.user import User


class Storage:
    """Create/get/list/update access to users, brokers, scans, exposures and requests."""

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def _get(self, model, id: str):
        async with self.session_factory() as db:
            return await db.get(model, id)

    async def _all(self, query) -> list:
        async with self.session_factory() as db:
            result = await db.execute(query)
            return list(result.scalars().all())

    async def _create(self, instance):
        async with self.session_factory() as db:
            db.add(instance)
            await db.commit()
            await db.refresh(instance)
            return instance

    async def _update(self, model, id: str, updates: dict[str, Any]):
        async with self.session_factory() as db:
            instance = await db.get(model, id)
            if instance is None:
                return None

            for field, value in updates.items():
                setattr(instance, field, value)

            await db.commit()
            await db.refresh(instance)
            return instance

    # Users
    async def get_user(self, id: str) -> User | None:
        return await self._get(User, id)

    async def get_user_by_email(self, email: str) -> User | None:
        async with self.session_factory() as db:
            result = await db.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()

    async def create_user(self, **values) -> User:
        return await self._create(User(**values))

    # Data brokers
    async def get_data_brokers(self) -> list[DataBroker]:
        return await self._all(select(DataBroker).order_by(DataBroker.position))

    async def get_data_broker(self, id: str) -> DataBroker | None:
        return await self._get(DataBroker, id)

    async def create_data_broker(self, **values) -> DataBroker:
        return await self._create(DataBroker(**values))

    # Scans
    async def get_scan(self, id: str) -> Scan | None:
        return await self._get(Scan, id)

    async def get_scans_by_user_id(self, user_id: str) -> list[Scan]:
        return await self._all(
            select(Scan)
            .where(Scan.user_id == user_id)
            .order_by(Scan.created_at.desc())
        )

    async def create_scan(self, **values) -> Scan:
        return await self._create(Scan(**values))

    async def update_scan(self, id: str, **updates) -> Scan | None:
        return await self._update(Scan, id, updates)

    # Exposures
    async def get_exposure(self, id: str) -> Exposure | None:
        return await self._get(Exposure, id)

    async def get_exposures_by_scan_id(self, scan_id: str) -> list[Exposure]:
        # Catalog order, which is also discovery order
        return await self._all(
            select(Exposure)
            .join(DataBroker, Exposure.data_broker_id == DataBroker.id, isouter=True)
            .where(Exposure.scan_id == scan_id)
            .order_by(DataBroker.position, Exposure.discovered_at)
        )

    async def create_exposure(self, **values) -> Exposure:
        return await self._create(Exposure(**values))

    # Removal requests
    async def get_removal_request(self, id: str) -> RemovalRequest | None:
        return await self._get(RemovalRequest, id)

    async def get_removal_requests_by_scan_id(self, scan_id: str) -> list[RemovalRequest]:
        return await self._all(
            select(RemovalRequest)
            .join(Exposure, RemovalRequest.exposure_id == Exposure.id)
            .join(DataBroker, Exposure.data_broker_id == DataBroker.id, isouter=True)
            .where(Exposure.scan_id == scan_id)
            .order_by(DataBroker.position, RemovalRequest.created_at)
        )

    async def create_removal_request(self, **values) -> RemovalRequest:
        return await self._create(RemovalRequest(**values))

    async def update_removal_request(self, id: str, **updates) -> RemovalRequest | None:
        return await self._update(RemovalRequest, id, updates)


def get_default_storage() -> Storage:
    """Storage bound to the application's session factory."""
    from app.db.database import async_session

    return Storage(async_session)
