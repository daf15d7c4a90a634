"""
Admin Caller
Periodic id-server admin calls: IDV data deletion, then funds transfer
"""

import asyncio
import logging
from typing import Optional, Tuple

import httpx
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from src.core.config import Settings, load_settings
from src.core.services.id_server_admin import (
    DeleteUserDataResponse,
    TransferFundsResponse,
    trigger_deletion_of_user_idv_data,
    trigger_transfer_of_funds,
)

logger = logging.getLogger(__name__)

ADMIN_CALLS_JOB_ID = "id_server_admin_calls"


class AdminCaller:
    """Runs both admin calls on one shared client. Ticks never overlap, so no locking."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client

    async def tick(self) -> Tuple[Optional[DeleteUserDataResponse], Optional[TransferFundsResponse]]:
        # deletion must finish before transfer starts
        deletion = await trigger_deletion_of_user_idv_data(self.client, self.settings)
        transfer = await trigger_transfer_of_funds(self.client, self.settings)
        return deletion, transfer


def build_scheduler(caller: AdminCaller, settings: Settings) -> AsyncIOScheduler:
    """
    One interval job; first fire is one full interval after start.
    Late fires are coalesced into a single run and never overlap a running tick.
    """
    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        caller.tick,
        "interval",
        seconds=settings.interval_seconds,
        id=ADMIN_CALLS_JOB_ID,
        max_instances=1,
        coalesce=True,
        misfire_grace_time=None,
    )
    return scheduler


async def run_admin_caller(settings: Settings, client: httpx.AsyncClient):
    """Main loop; runs until the process is stopped"""

    caller = AdminCaller(settings, client)
    scheduler = build_scheduler(caller, settings)

    print("=" * 50)
    print("🚀 id-server Admin Caller started")
    print(f"   id-server: {settings.id_server_url}")
    print(f"   Environment: {settings.environment}")
    print(f"   Interval: {settings.interval_seconds}s")
    print("=" * 50)

    scheduler.start()
    try:
        await asyncio.Event().wait()
    finally:
        scheduler.shutdown(wait=False)


def setup_logging(level: str = "INFO"):
    """Console logging for the daemon; the root level is always applied"""
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)


async def run_single_cycle(client: Optional[httpx.AsyncClient] = None):
    """Run one tick right now (manual runs)"""
    settings = load_settings()
    setup_logging(settings.log_level)

    if client is not None:
        return await AdminCaller(settings, client).tick()

    async with httpx.AsyncClient() as client:
        return await AdminCaller(settings, client).tick()


if __name__ == "__main__":
    asyncio.run(run_single_cycle())
