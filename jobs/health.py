"""
Health check server for the scheduler process.

Endpoints:
- /health: scheduler state and registered jobs
- /readiness: scheduler running and database reachable
- /liveness: process alive
"""

import asyncio

from aiohttp import web
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from affiliates.config.database import async_engine

SCHEDULER_KEY = web.AppKey("scheduler", AsyncIOScheduler)


def _job_info(scheduler: AsyncIOScheduler) -> list[dict]:
    jobs = []
    for job in scheduler.get_jobs():
        # Pending jobs (scheduler not started) have no next_run_time yet
        next_run = getattr(job, "next_run_time", None)
        jobs.append(
            {
                "id": job.id,
                "name": job.name,
                "next_run_time": next_run.isoformat() if next_run else None,
            }
        )
    return jobs


async def health_handler(request: web.Request) -> web.Response:
    """Report scheduler state and jobs."""
    scheduler = request.app[SCHEDULER_KEY]
    jobs = _job_info(scheduler)
    return web.json_response(
        {
            "status": "healthy" if scheduler.running else "stopped",
            "scheduler_running": scheduler.running,
            "jobs_count": len(jobs),
            "jobs": jobs,
        },
        status=200 if scheduler.running else 503,
    )


async def database_reachable() -> bool:
    """Run a trivial query against the main engine."""
    try:
        async with async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Readiness database check failed: {e}")
        return False
    return True


async def readiness_handler(request: web.Request) -> web.Response:
    """Ready once the scheduler runs and the database answers."""
    scheduler_ok = request.app[SCHEDULER_KEY].running
    database_ok = await database_reachable()
    ready = scheduler_ok and database_ok
    return web.json_response(
        {
            "status": "ready" if ready else "not_ready",
            "ready": ready,
            "scheduler": scheduler_ok,
            "database": database_ok,
        },
        status=200 if ready else 503,
    )


async def liveness_handler(request: web.Request) -> web.Response:
    """Process is alive."""
    return web.json_response({"status": "alive", "alive": True})


def create_health_app(scheduler: AsyncIOScheduler) -> web.Application:
    """Build the aiohttp application for a scheduler."""
    app = web.Application()
    app[SCHEDULER_KEY] = scheduler
    app.router.add_get("/health", health_handler)
    app.router.add_get("/readiness", readiness_handler)
    app.router.add_get("/liveness", liveness_handler)
    return app


async def start_health_server(
    scheduler: AsyncIOScheduler,
    host: str = "0.0.0.0",
    port: int = 8081,
) -> web.AppRunner:
    """
    Start health check server.

    Args:
        scheduler: Scheduler to report on
        host: Host to bind to
        port: Port to bind to

    Returns:
        AppRunner for cleanup
    """
    runner = web.AppRunner(create_health_app(scheduler))
    await runner.setup()
    await web.TCPSite(runner, host, port).start()

    logger.info(f"Health check server started on {host}:{port}")
    return runner


async def stop_health_server(runner: web.AppRunner, timeout: int = 5) -> None:
    """Stop health check server, giving up after timeout seconds."""
    try:
        await asyncio.wait_for(runner.cleanup(), timeout=timeout)
    except TimeoutError:
        logger.warning(f"Health check server cleanup timed out after {timeout}s")
    else:
        logger.info("Health check server stopped")
