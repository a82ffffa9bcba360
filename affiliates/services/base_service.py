"""
Base service class.

Provides common functionality for all service classes including session management,
logging, and helper decorators.
"""

import functools
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.utils.datetime_utils import utc_now
from affiliates.utils.exceptions import PersistenceFailure

T = TypeVar("T")

# Zero-argument callable returning an aware UTC datetime
Clock = Callable[[], datetime]


@dataclass
class ServiceResult:
    """
    Standard service result container.

    Used to return structured results from service methods.
    """
    success: bool
    data: Any = None
    error: str | None = None
    error_code: str | None = None


class BaseService:
    """
    Base service class.

    Provides common functionality for all service classes:
    - Session management
    - Logging with bound service context
    - Injectable clock
    - Transaction helpers
    """

    def __init__(
        self, session: AsyncSession, clock: Clock | None = None
    ) -> None:
        """
        Initialize base service.

        Args:
            session: Async database session
            clock: Time source (defaults to utc_now)
        """
        self.session = session
        self.clock = clock or utc_now
        self.logger = logger.bind(service=self.__class__.__name__)

    async def commit(self) -> None:
        """Commit current transaction."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback current transaction."""
        await self.session.rollback()


def transaction(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator to wrap method in transaction with automatic commit/rollback.

    Commits on success, rolls back on exception. Storage errors are
    re-raised as PersistenceFailure; domain errors propagate unchanged.

    Usage:
        @transaction
        async def my_service_method(self, ...):
            ...

    Args:
        func: Async method to wrap

    Returns:
        Wrapped async method
    """
    @functools.wraps(func)
    async def wrapper(self: BaseService, *args: Any, **kwargs: Any) -> Any:
        try:
            result = await func(self, *args, **kwargs)
            await self.commit()
            return result
        except SQLAlchemyError as e:
            await self.rollback()
            self.logger.error(
                f"Transaction failed in {func.__name__}",
                extra={
                    "error": str(e),
                    "function": func.__name__,
                },
            )
            raise PersistenceFailure() from e
        except Exception:
            await self.rollback()
            raise

    return wrapper


def log_operation(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator to log method entry/exit with timing.

    Usage:
        @log_operation
        async def my_service_method(self, affiliate_id: str):
            ...

    Args:
        func: Async method to wrap

    Returns:
        Wrapped async method
    """
    @functools.wraps(func)
    async def wrapper(self: BaseService, *args: Any, **kwargs: Any) -> Any:
        start_time = time.time()

        self.logger.debug(
            f"Starting {func.__name__}",
            extra={
                "function": func.__name__,
                "args_count": len(args),
                "kwargs_keys": list(kwargs.keys()),
            },
        )

        try:
            result = await func(self, *args, **kwargs)
        except Exception as e:
            self.logger.warning(
                f"Failed {func.__name__}",
                extra={
                    "function": func.__name__,
                    "error": str(e),
                    "duration_seconds": round(time.time() - start_time, 3),
                    "success": False,
                },
            )
            raise

        self.logger.info(
            f"Completed {func.__name__}",
            extra={
                "function": func.__name__,
                "duration_seconds": round(time.time() - start_time, 3),
                "success": True,
            },
        )
        return result

    return wrapper
