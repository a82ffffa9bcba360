"""
Affiliate session cleanup task.

Deletes sessions past their absolute expiry. Scheduled by jobs.scheduler;
login also purges opportunistically when SESSION_PURGE_ON_ISSUE is set.
"""

import dramatiq
from loguru import logger

from affiliates.services.auth import AuthService
from jobs.async_runner import create_local_session, run_async
from jobs.broker import broker  # noqa: F401  (registers the broker)


@dramatiq.actor(max_retries=3, time_limit=60_000)  # 1 min timeout
def purge_expired_sessions() -> dict:
    """
    Delete expired affiliate sessions.

    Returns:
        Dict with deleted count
    """
    logger.info("Starting affiliate session cleanup...")

    try:
        deleted = run_async(_purge_async())
    except Exception as e:
        logger.exception(f"Affiliate session cleanup failed: {e}")
        return {"deleted": 0}

    logger.info(f"Affiliate session cleanup complete: {deleted} sessions deleted")
    return {"deleted": deleted}


async def _purge_async() -> int:
    async with create_local_session() as session:
        return await AuthService(session).purge_expired_sessions()
