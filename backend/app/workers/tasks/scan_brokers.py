"""Broker scanning task."""

import asyncio
from datetime import datetime

from app.config import settings
from app.core.logging import get_logger
from app.db.storage import Storage
from app.models.constants import ScanStatus
from app.services.scanner import (
    build_profile_url,
    calculate_privacy_score,
    generate_exposed_data,
    is_exposure_found,
)

logger = get_logger(__name__)


async def perform_scan(scan_id: str, storage: Storage) -> None:
    """Background entry point. Never raises; failures are logged."""
    try:
        await _perform_scan(scan_id, storage)
    except Exception:
        logger.exception("scan_failed", scan_id=scan_id)
        await _mark_scan_failed(scan_id, storage)


async def _perform_scan(scan_id: str, storage: Storage) -> None:
    scan = await storage.get_scan(scan_id)
    if not scan:
        logger.warning("scan_aborted", scan_id=scan_id, reason="scan_not_found")
        return

    user = await storage.get_user(scan.user_id)
    if not user:
        logger.warning("scan_aborted", scan_id=scan_id, reason="user_not_found", user_id=scan.user_id)
        await _mark_scan_failed(scan_id, storage)
        return

    brokers = await storage.get_data_brokers()
    logger.info("scan_started", scan_id=scan_id, user_id=user.id, brokers=len(brokers))

    sites_scanned = 0
    sites_found = 0

    # One broker at a time so pollers see the counters grow
    for index, broker in enumerate(brokers):
        await asyncio.sleep(settings.scan_delay_seconds)

        sites_scanned += 1

        if is_exposure_found(index, broker.priority):
            sites_found += 1
            await storage.create_exposure(
                scan_id=scan_id,
                data_broker_id=broker.id,
                exposed_data=generate_exposed_data(broker.required_info),
                profile_url=build_profile_url(broker.url, user.first_name, user.last_name),
            )

        await storage.update_scan(
            scan_id,
            sites_scanned=sites_scanned,
            sites_found=sites_found,
        )
        logger.debug(
            "scan_progress",
            scan_id=scan_id,
            broker=broker.name,
            sites_scanned=sites_scanned,
            sites_found=sites_found,
        )

    exposures = await storage.get_exposures_by_scan_id(scan_id)
    privacy_score = calculate_privacy_score(len(exposures), len(brokers))

    await storage.update_scan(
        scan_id,
        status=ScanStatus.COMPLETED,
        privacy_score=privacy_score,
        completed_at=datetime.utcnow(),
    )
    logger.info(
        "scan_completed",
        scan_id=scan_id,
        exposures=len(exposures),
        privacy_score=privacy_score,
    )


async def _mark_scan_failed(scan_id: str, storage: Storage) -> None:
    """Move a scan that can no longer finish out of ``running``."""
    if not settings.mark_stalled_runs_failed:
        return

    try:
        updated = await storage.update_scan(
            scan_id,
            status=ScanStatus.FAILED,
            completed_at=datetime.utcnow(),
        )
    except Exception:
        logger.exception("scan_failure_not_recorded", scan_id=scan_id)
        return

    if updated:
        logger.info("scan_marked_failed", scan_id=scan_id)
