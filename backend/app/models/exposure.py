"""Exposure model - tracks where user's data was found."""

import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.database import Base


class Exposure(Base):
    """Record of user's data found on a data broker site during a scan."""

    __tablename__ = "exposures"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    scan_id: Mapped[str] = mapped_column(String(36), ForeignKey("scans.id"), nullable=False, index=True)
    data_broker_id: Mapped[str] = mapped_column(String(36), ForeignKey("data_brokers.id"), nullable=False, index=True)

    # What was found, e.g. ["Full Name", "Current Address", "Phone Number"]
    exposed_data: Mapped[list] = mapped_column(JSON, nullable=False)
    profile_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    discovered_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    scan: Mapped["Scan"] = relationship(back_populates="exposures")
    broker: Mapped["DataBroker"] = relationship(back_populates="exposures")
    requests: Mapped[list["RemovalRequest"]] = relationship(back_populates="exposure")


from app.models.scan import Scan
from app.models.broker import DataBroker
from app.models.request import RemovalRequest
