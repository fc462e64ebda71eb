"""Scan model - one run of the broker scan."""

import uuid
from datetime import datetime
from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.database import Base
from app.models.constants import ScanStatus


class Scan(Base):
    """Progress and outcome of scanning the broker catalog for one user."""

    __tablename__ = "scans"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    # Status: running, completed, failed
    status: Mapped[str] = mapped_column(String(20), default=ScanStatus.RUNNING, nullable=False)

    # Progress counters, sites_found <= sites_scanned <= catalog size
    sites_scanned: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    sites_found: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # 0-100, set once on completion
    privacy_score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship(back_populates="scans")
    exposures: Mapped[list["Exposure"]] = relationship(back_populates="scan")


from app.models.user import User
from app.models.exposure import Exposure
