"""Pytest configuration and fixtures."""
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app


@pytest_asyncio.fixture
async def app_client():
    """
    Create a test client bound to the ASGI app.

    No external services are involved; the work-time API is stateless.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client


@pytest.fixture
def make_entry():
    """Factory for TimeEntry models with UTC timestamps."""
    from app.models.time_entry import TimeEntry

    def _make_entry(
        entry_id: str,
        day: str,
        clock_in: str,
        clock_out: str | None = None,
        break_minutes: float = 0,
    ) -> TimeEntry:
        return TimeEntry(
            id=entry_id,
            date=day,
            clock_in=datetime.fromisoformat(clock_in).replace(tzinfo=timezone.utc),
            clock_out=(
                datetime.fromisoformat(clock_out).replace(tzinfo=timezone.utc)
                if clock_out
                else None
            ),
            break_minutes=break_minutes,
        )

    return _make_entry
