"""
Scheduler process.

Enqueues periodic maintenance actors and serves the health endpoints.

Run with:
    affiliates-scheduler
"""

import asyncio
import signal

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from loguru import logger

from affiliates.config.settings import settings
from affiliates.utils.logging import setup_logging
from jobs.health import start_health_server, stop_health_server
from jobs.tasks.session_cleanup import purge_expired_sessions


def enqueue_session_purge() -> None:
    """Hand the session sweep to a dramatiq worker."""
    purge_expired_sessions.send()
    logger.debug("Session purge enqueued")


def create_scheduler() -> AsyncIOScheduler:
    """Build the scheduler with all periodic jobs registered."""
    scheduler = AsyncIOScheduler(timezone="UTC")
    scheduler.add_job(
        enqueue_session_purge,
        IntervalTrigger(minutes=settings.session_sweep_interval_minutes),
        id="purge_expired_sessions",
        name="Purge expired affiliate sessions",
        replace_existing=True,
        coalesce=True,
        max_instances=1,
    )
    return scheduler


async def run() -> None:
    """Run scheduler until SIGINT/SIGTERM."""
    scheduler = create_scheduler()
    scheduler.start()
    logger.info(
        f"Scheduler started: session sweep every "
        f"{settings.session_sweep_interval_minutes} minutes"
    )

    runner = await start_health_server(
        scheduler, port=settings.health_check_port
    )

    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop_event.set)

    try:
        await stop_event.wait()
    finally:
        logger.info("Shutting down scheduler...")
        scheduler.shutdown(wait=False)
        await stop_health_server(runner)


def main() -> None:
    """Console entry point."""
    setup_logging()
    asyncio.run(run())


if __name__ == "__main__":
    main()
