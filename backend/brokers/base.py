"""Base definitions for the data broker catalog."""

from dataclasses import dataclass, field, asdict
from typing import Optional


@dataclass(frozen=True)
class BrokerInfo:
    """Data broker reference information."""
    name: str
    url: str
    category: str  # people-search, marketing, credit, public-records
    priority: str  # high, medium, low
    opt_out_url: Optional[str]
    opt_out_process: str
    estimated_processing_time: str
    difficulty_rating: int  # 1-5
    required_info: tuple[str, ...] = field(default_factory=tuple)

    def to_record(self, position: int) -> dict:
        """Column values for inserting this broker at the given catalog position."""
        record = asdict(self)
        record["required_info"] = list(self.required_info)
        record["position"] = position
        return record
