"""Data broker model."""

import uuid
from sqlalchemy import String, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.database import Base


class DataBroker(Base):
    """Data broker reference data and opt-out procedure."""

    __tablename__ = "data_brokers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Catalog order, used as the scan index
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    url: Mapped[str] = mapped_column(String(500), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)  # people-search, marketing, credit, public-records
    priority: Mapped[str] = mapped_column(String(20), nullable=False)  # high, medium, low

    # Opt-out information
    opt_out_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    opt_out_process: Mapped[str] = mapped_column(String(2000), nullable=False)
    required_info: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    estimated_processing_time: Mapped[str] = mapped_column(String(100), nullable=False)

    # Difficulty rating (1-5)
    difficulty_rating: Mapped[int] = mapped_column(Integer, nullable=False, default=3)

    # Relationships
    exposures: Mapped[list["Exposure"]] = relationship(back_populates="broker")


from app.models.exposure import Exposure
