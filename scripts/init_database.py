#!/usr/bin/env python3
"""Initialize database tables."""

import asyncio
import sys

from loguru import logger

from affiliates.config.database import async_engine, init_database

# Configure logger for script
logger.remove()
logger.add(sys.stderr, level="INFO")


async def main() -> None:
    """Create all tables and release the engine."""
    logger.info("Creating tables (checkfirst=True)...")
    try:
        await init_database()
    finally:
        await async_engine.dispose()
    logger.success("Database tables created successfully!")


if __name__ == "__main__":
    asyncio.run(main())
