"""Database configuration and session management."""

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    future=True,
)

# Session factory
async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


async def create_tables(db_engine: AsyncEngine) -> None:
    """Create tables if they don't exist (preserves data)."""
    # Import all models to register them with Base.metadata
    from app.models import user, broker, scan, exposure, request

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_db():
    """Initialize database tables and the broker catalog."""
    await create_tables(engine)

    if settings.seed_brokers_on_startup:
        await seed_brokers(async_session)


async def seed_brokers(session_factory: async_sessionmaker) -> int:
    """Seed the broker catalog if no brokers exist. Returns the number inserted."""
    from app.models.broker import DataBroker
    from brokers import list_brokers

    async with session_factory() as session:
        result = await session.execute(select(func.count(DataBroker.id)))
        count = result.scalar()

        if count > 0:
            logger.info("broker_seed_skipped", existing=count)
            return 0

        catalog = list_brokers()
        for position, info in enumerate(catalog):
            session.add(DataBroker(**info.to_record(position)))

        await session.commit()

    logger.info("broker_seed_completed", inserted=len(catalog))
    return len(catalog)
