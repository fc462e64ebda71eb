"""Simulated data broker scanner service.

No broker site is contacted. Whether a broker "has" the user's data is a
fixed function of the broker's position in the catalog and its priority, so
the same catalog always produces the same exposures and privacy score.
"""

import math
from dataclasses import dataclass, field
from typing import Optional

from app.core.logging import get_logger
from app.db.storage import Storage
from app.models.broker import DataBroker
from app.models.constants import BrokerPriority, ScanStatus
from app.models.exposure import Exposure
from app.models.scan import Scan

logger = get_logger(__name__)

PRIORITY_WEIGHTS = {
    BrokerPriority.HIGH: 7,
    BrokerPriority.MEDIUM: 3,
    BrokerPriority.LOW: 1,
}

FIND_PROBABILITIES = {
    BrokerPriority.HIGH: 0.6,
    BrokerPriority.MEDIUM: 0.3,
    BrokerPriority.LOW: 0.1,
}

# Labels that may be reported as exposed when a broker lists them as required info
RECOGNIZED_DATA_TYPES = (
    "Full Name",
    "Current Address",
    "Phone Number",
    "Age",
    "Email Address",
    "Previous Addresses",
    "Date of Birth",
    "Relatives",
    "Social Profiles",
    "Criminal Records",
    "Associates",
    "Public Records",
    "Address History",
    "Phone Numbers",
    "Contact Info",
    "Reputation Score",
    "Reviews",
    "Photos",
    "Family Members",
)

COMMON_EXPOSURES = ("Full Name", "Current Address", "Phone Number", "Email Address")
DEFAULT_EXPOSURES = ("Full Name", "Phone Number", "Address")
MAX_EXPOSED_ITEMS = 6


def broker_weight(priority: str) -> int:
    """Seed multiplier for a broker priority (anything unknown counts as low)."""
    return PRIORITY_WEIGHTS.get(priority, PRIORITY_WEIGHTS[BrokerPriority.LOW])


def find_probability(priority: str) -> float:
    return FIND_PROBABILITIES.get(priority, FIND_PROBABILITIES[BrokerPriority.LOW])


def is_exposure_found(index: int, priority: str) -> bool:
    """Decide whether the broker at 0-based catalog ``index`` exposes the user.

    seed = (index + 1) * weight(priority); the pseudo-random value is the
    last digit of the seed divided by ten.
    """
    seed = (index + 1) * broker_weight(priority)
    pseudo_random = (seed % 10) / 10
    return pseudo_random < find_probability(priority)


def generate_exposed_data(required_info: list[str] | None) -> list[str]:
    """Build the ordered list (at most six labels) of exposed data types."""
    exposed_data: list[str] = []

    for item in required_info or []:
        if item in RECOGNIZED_DATA_TYPES and len(exposed_data) < MAX_EXPOSED_ITEMS:
            exposed_data.append(item)

    for item in COMMON_EXPOSURES:
        if item not in exposed_data and len(exposed_data) < MAX_EXPOSED_ITEMS:
            exposed_data.append(item)

    return exposed_data if exposed_data else list(DEFAULT_EXPOSURES)


def build_profile_url(broker_url: str, first_name: str, last_name: str) -> str:
    return f"{broker_url.rstrip('/')}/profile/{first_name}-{last_name}"


def calculate_privacy_score(exposures_found: int, total_sites: int) -> int:
    """
    Score from 0 (heavily exposed) to 100 (nothing found).

    100 - exposure percentage * 1.5, rounded half up and floored at 0.
    """
    if total_sites <= 0:
        return 100

    exposure_percentage = (exposures_found / total_sites) * 100
    return max(0, math.floor(100 - exposure_percentage * 1.5 + 0.5))


@dataclass
class ExposureWithBroker:
    """An exposure together with the broker it was found on."""
    exposure: Exposure
    broker: Optional[DataBroker] = None


@dataclass
class ScanResults:
    """A scan and everything it found."""
    scan: Scan
    exposures: list[ExposureWithBroker] = field(default_factory=list)


class ScanningService:
    """Starts scans and reads their results."""

    def __init__(self, storage: Storage):
        self.storage = storage

    async def start_scan(self, user_id: str) -> Scan:
        """Create a running scan and start it in the background.

        The caller is expected to have checked that the user exists.
        """
        from app.workers.runner import spawn
        from app.workers.tasks.scan_brokers import perform_scan

        scan = await self.storage.create_scan(
            user_id=user_id,
            status=ScanStatus.RUNNING,
            sites_scanned=0,
            sites_found=0,
            privacy_score=0,
        )
        logger.info("scan_created", scan_id=scan.id, user_id=user_id)

        spawn(perform_scan(scan.id, self.storage), name=f"scan:{scan.id}")
        return scan

    async def get_user_latest_scan(self, user_id: str) -> Scan | None:
        scans = await self.storage.get_scans_by_user_id(user_id)
        if not scans:
            return None
        return max(scans, key=lambda s: s.created_at)

    async def get_scan_results(self, scan_id: str) -> ScanResults | None:
        scan = await self.storage.get_scan(scan_id)
        if not scan:
            return None

        exposures = await self.storage.get_exposures_by_scan_id(scan_id)
        brokers: dict[str, DataBroker | None] = {}
        results = []
        for exposure in exposures:
            if exposure.data_broker_id not in brokers:
                brokers[exposure.data_broker_id] = await self.storage.get_data_broker(exposure.data_broker_id)
            results.append(ExposureWithBroker(exposure=exposure, broker=brokers[exposure.data_broker_id]))

        return ScanResults(scan=scan, exposures=results)
