"""Removal request model - tracks opt-out requests."""

import uuid
from datetime import datetime
from sqlalchemy import String, Integer, DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.database import Base
from app.models.constants import RemovalStatus


class RemovalRequest(Base):
    """Removal/opt-out request for a single exposure."""

    __tablename__ = "removal_requests"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    exposure_id: Mapped[str] = mapped_column(String(36), ForeignKey("exposures.id"), nullable=False, index=True)

    # Status: pending, submitted, in-progress, action-required, completed, failed
    status: Mapped[str] = mapped_column(String(50), default=RemovalStatus.PENDING, nullable=False)

    # email-verification, id-verification
    action_required: Mapped[str | None] = mapped_column(String(50), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    retry_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    submitted_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    # Relationships
    exposure: Mapped["Exposure"] = relationship(back_populates="requests")


from app.models.exposure import Exposure
