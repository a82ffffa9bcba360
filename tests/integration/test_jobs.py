"""
Integration tests for background jobs.

Tests cover:
- Queue-backed notifier enqueueing deliver_email on the stub broker
- SMTP delivery actor
- Session purge actor and scheduler wiring
- Health endpoints
"""

import threading
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from aiohttp.test_utils import make_mocked_request

from affiliates.config.settings import settings
from affiliates.services.notification import NotificationService
from jobs.broker import broker
from jobs.health import create_health_app, health_handler, liveness_handler
from jobs.scheduler import create_scheduler
from jobs.tasks.email_delivery import deliver_email
from jobs.tasks.session_cleanup import purge_expired_sessions


@pytest.fixture(autouse=True)
def empty_queues():
    """Start each test with empty stub queues."""
    broker.flush_all()
    yield
    broker.flush_all()


class TestNotificationService:
    """Test enqueueing emails."""

    @pytest.mark.asyncio
    async def test_notify_enqueues(self):
        """A message lands on the delivery queue."""
        queued = await NotificationService().notify(
            "jane@example.com", "Subject", "Body"
        )

        assert queued is True
        assert broker.queues[deliver_email.queue_name].qsize() == 1

    @pytest.mark.asyncio
    async def test_no_recipient(self):
        """Missing recipient is skipped."""
        queued = await NotificationService().notify("", "Subject", "Body")

        assert queued is False
        assert broker.queues[deliver_email.queue_name].qsize() == 0

    @pytest.mark.asyncio
    async def test_enqueue_failure_swallowed(self):
        """Broker errors are logged and reported as False."""
        with patch.object(deliver_email, "send", side_effect=ConnectionError("redis")):
            queued = await NotificationService().notify(
                "jane@example.com", "Subject", "Body"
            )

        assert queued is False

    @pytest.mark.asyncio
    async def test_enqueue_runs_off_event_loop(self):
        """The blocking broker call runs in an executor thread."""
        callers = []

        def record_thread(*args):
            callers.append(threading.get_ident())

        with patch.object(deliver_email, "send", side_effect=record_thread):
            queued = await NotificationService().notify(
                "jane@example.com", "Subject", "Body"
            )

        assert queued is True
        assert callers and callers[0] != threading.get_ident()


class TestDeliverEmail:
    """Test the SMTP actor body."""

    def test_not_configured(self, monkeypatch):
        """Without SMTP_HOST nothing is sent."""
        monkeypatch.setattr(settings, "smtp_host", None)

        assert deliver_email.fn("jane@example.com", "Subject", "Body") is False

    def test_sends_via_smtp(self, monkeypatch):
        """Message goes through STARTTLS, login and sendmail."""
        monkeypatch.setattr(settings, "smtp_host", "smtp.example.com")
        monkeypatch.setattr(settings, "smtp_username", "mailer")
        monkeypatch.setattr(settings, "smtp_password", "secret")
        server = MagicMock()

        with patch("jobs.tasks.email_delivery.smtplib.SMTP") as smtp:
            smtp.return_value.__enter__.return_value = server
            assert deliver_email.fn("jane@example.com", "Hello", "Body") is True

        server.starttls.assert_called_once()
        server.login.assert_called_once_with("mailer", "secret")
        sender, recipients, raw = server.sendmail.call_args.args
        assert recipients == ["jane@example.com"]
        assert "Subject: Hello" in raw


class TestSessionPurgeActor:
    """Test the cleanup actor wrapper."""

    def test_reports_deleted(self):
        """Deleted count is returned."""
        with patch(
            "jobs.tasks.session_cleanup._purge_async", AsyncMock(return_value=3)
        ):
            assert purge_expired_sessions.fn() == {"deleted": 3}

    def test_failure_returns_zero(self):
        """Errors are logged and reported as zero deletions."""
        with patch(
            "jobs.tasks.session_cleanup._purge_async",
            AsyncMock(side_effect=RuntimeError("db down")),
        ):
            assert purge_expired_sessions.fn() == {"deleted": 0}


class TestScheduler:
    """Test scheduler wiring and health endpoints."""

    def test_sweep_job_registered(self):
        """Session sweep is scheduled."""
        scheduler = create_scheduler()

        job_ids = [job.id for job in scheduler.get_jobs()]

        assert "purge_expired_sessions" in job_ids

    @pytest.mark.asyncio
    async def test_health_reports_stopped_scheduler(self):
        """Not-started scheduler is reported as stopped."""
        app = create_health_app(create_scheduler())
        request = make_mocked_request("GET", "/health", app=app)

        response = await health_handler(request)

        assert response.status == 503

    @pytest.mark.asyncio
    async def test_liveness(self):
        """Liveness is always OK."""
        app = create_health_app(create_scheduler())
        request = make_mocked_request("GET", "/liveness", app=app)

        response = await liveness_handler(request)

        assert response.status == 200

    def test_routes(self):
        """Health endpoints are served at their documented paths."""
        app = create_health_app(create_scheduler())

        paths = {route.resource.canonical for route in app.router.routes()}

        assert {"/health", "/readiness", "/liveness"} <= paths
