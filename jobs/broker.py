"""
Dramatiq broker configuration.

Redis-based message broker for task queue. The testing environment gets an
in-memory StubBroker so actors can be enqueued without Redis.
"""

import dramatiq
from dramatiq.brokers.redis import RedisBroker
from dramatiq.brokers.stub import StubBroker
from dramatiq.middleware import CurrentMessage, Retries, ShutdownNotifications
from loguru import logger

from affiliates.config.settings import settings

if settings.environment == "testing":
    broker = StubBroker()
    broker.emit_after("process_boot")
else:
    broker = RedisBroker(
        host=settings.redis_host,
        port=settings.redis_port,
        password=settings.redis_password or None,
        db=settings.redis_db,
    )
    broker.add_middleware(ShutdownNotifications())
    broker.add_middleware(CurrentMessage())
    broker.add_middleware(
        Retries(
            max_retries=3,
            min_backoff=1000,  # 1 second
            max_backoff=60000,  # 1 minute
        )
    )

dramatiq.set_broker(broker)

logger.info(
    f"Dramatiq broker initialized: {type(broker).__name__} "
    f"(environment={settings.environment})"
)
