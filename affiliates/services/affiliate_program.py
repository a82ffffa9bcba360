"""
Affiliate program facade.

Single entry point for the transport layer. Every operation returns a
ServiceResult; domain and storage errors become error/error_code pairs
instead of exceptions.
"""

import random
from collections.abc import Awaitable
from decimal import Decimal
from typing import Any

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.services.accrual import AccrualService
from affiliates.services.auth import AuthService
from affiliates.services.auth.constants import REGISTRATION_SUCCESS_MESSAGE
from affiliates.services.base_service import Clock, ServiceResult
from affiliates.services.dashboard import DashboardService
from affiliates.services.notification import NotificationService, Notifier
from affiliates.utils.exceptions import AffiliateError, PersistenceFailure


class AffiliateProgram:
    """
    Public operations of the affiliate program.

    Usage:
        async with get_session() as session:
            program = AffiliateProgram(session)
            result = await program.login(email, password)
            if result.success:
                token = result.data["token"]
    """

    def __init__(
        self,
        session: AsyncSession,
        notifier: Notifier | None = None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize facade.

        Args:
            session: Database session
            notifier: Email notifier (defaults to queue-backed service)
            clock: Time source
            rng: Random source for affiliate IDs
        """
        notifier = notifier or NotificationService()
        self.session = session

        self.auth = AuthService(session, notifier=notifier, clock=clock, rng=rng)
        self.accrual = AccrualService(session, notifier=notifier, clock=clock)
        self.dashboard = DashboardService(session, clock=clock)

    async def _run(self, operation: str, call: Awaitable[Any]) -> ServiceResult:
        try:
            data = await call
        except AffiliateError as e:
            logger.debug(
                f"{operation} rejected",
                extra={"error_code": e.code, "error": e.message},
            )
            return ServiceResult(
                success=False, error=e.message, error_code=e.code
            )
        except SQLAlchemyError as e:
            # Reset the session after a failed read
            await self.session.rollback()
            logger.error(
                f"{operation} failed in storage", extra={"error": str(e)}
            )
            failure = PersistenceFailure()
            return ServiceResult(
                success=False, error=failure.message, error_code=failure.code
            )
        return ServiceResult(success=True, data=data)

    async def register(
        self, name: str, email: str, password: str
    ) -> ServiceResult:
        """Register affiliate; data holds affiliate_id and message."""

        async def call() -> dict[str, Any]:
            affiliate = await self.auth.register(name, email, password)
            return {
                "affiliate_id": affiliate.id,
                "message": REGISTRATION_SUCCESS_MESSAGE,
            }

        return await self._run("register", call())

    async def login(self, email: str, password: str) -> ServiceResult:
        """Login; data holds affiliate_id, name, email and token."""

        async def call() -> dict[str, Any]:
            result = await self.auth.login(email, password)
            return result.to_dict()

        return await self._run("login", call())

    async def validate_session(self, token: str) -> ServiceResult:
        """Validate token; data is the owning Affiliate."""
        return await self._run(
            "validate_session", self.auth.validate_session(token)
        )

    async def get_dashboard(self, affiliate_id: str) -> ServiceResult:
        """Dashboard; data is a DashboardSnapshot."""
        return await self._run(
            "get_dashboard", self.dashboard.get_dashboard(affiliate_id)
        )

    async def record_click(
        self,
        affiliate_id: str,
        page: str,
        campaign: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        referrer: str | None = None,
    ) -> ServiceResult:
        """Record referral click; data is the ClickEvent."""
        return await self._run(
            "record_click",
            self.accrual.record_click(
                affiliate_id,
                page,
                campaign=campaign,
                ip_address=ip_address,
                user_agent=user_agent,
                referrer=referrer,
            ),
        )

    async def record_sale(
        self,
        affiliate_id: str,
        order_id: str,
        sale_amount: Decimal | int | float | str,
        product_details: str = "",
    ) -> ServiceResult:
        """Record sale; data is the commission amount."""

        async def call() -> Decimal:
            accrual = await self.accrual.record_sale(
                affiliate_id, order_id, sale_amount, product_details
            )
            return accrual.commission_amount

        return await self._run("record_sale", call())

    async def activate_affiliate(self, affiliate_id: str) -> ServiceResult:
        """Approve pending affiliate."""
        return await self._run(
            "activate_affiliate", self.auth.activate_affiliate(affiliate_id)
        )

    async def suspend_affiliate(self, affiliate_id: str) -> ServiceResult:
        """Suspend affiliate."""
        return await self._run(
            "suspend_affiliate", self.auth.suspend_affiliate(affiliate_id)
        )

    async def recompute_aggregates(self, affiliate_id: str) -> ServiceResult:
        """Re-derive cached totals from the ledger."""
        return await self._run(
            "recompute_aggregates",
            self.accrual.recompute_aggregates(affiliate_id),
        )
