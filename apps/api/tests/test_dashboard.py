"""Tests for dashboard contact stats."""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from httpx import AsyncClient

from contacts_api.db.models import Contact
from contacts_api.services import dashboard_service

UTC = timezone.utc
# A Wednesday
NOW = datetime(2026, 3, 18, 12, 0, tzinfo=UTC)


def add_contact(db, account_id: int, created_at: datetime, deleted: bool = False) -> Contact:
    contact = Contact(
        account_id=account_id,
        first_name="Stat",
        last_name="Contact",
        created_at=created_at,
        updated_at=created_at,
        deleted_at=created_at if deleted else None,
    )
    db.add(contact)
    db.commit()
    return contact


@pytest.fixture
def seeded(db, test_account, other_account):
    add_contact(db, test_account.id, datetime(2026, 3, 18, 9, 0, tzinfo=UTC))    # today
    add_contact(db, test_account.id, datetime(2026, 3, 17, 15, 0, tzinfo=UTC))   # yesterday
    add_contact(db, test_account.id, datetime(2026, 3, 10, 10, 0, tzinfo=UTC))   # last week
    add_contact(db, test_account.id, datetime(2026, 2, 20, 10, 0, tzinfo=UTC))   # last month
    add_contact(db, test_account.id, datetime(2026, 1, 5, 10, 0, tzinfo=UTC))    # older
    add_contact(db, test_account.id, datetime(2026, 3, 18, 8, 0, tzinfo=UTC), deleted=True)
    add_contact(db, other_account.id, datetime(2026, 3, 18, 10, 0, tzinfo=UTC))
    return test_account


def test_compute_windows_weeks_start_on_monday():
    windows = dashboard_service.compute_windows(NOW, UTC)

    assert windows.today == datetime(2026, 3, 18, tzinfo=UTC)
    assert windows.tomorrow == datetime(2026, 3, 19, tzinfo=UTC)
    assert windows.yesterday == datetime(2026, 3, 17, tzinfo=UTC)
    assert windows.week_start == datetime(2026, 3, 16, tzinfo=UTC)
    assert windows.last_week_start == datetime(2026, 3, 9, tzinfo=UTC)
    assert windows.month_start == datetime(2026, 3, 1, tzinfo=UTC)
    assert windows.last_month_start == datetime(2026, 2, 1, tzinfo=UTC)
    assert windows.thirty_days_ago == datetime(2026, 2, 16, 12, 0, tzinfo=UTC)


def test_compute_windows_across_year_boundary():
    windows = dashboard_service.compute_windows(datetime(2026, 1, 10, 8, 0, tzinfo=UTC), UTC)

    assert windows.month_start == datetime(2026, 1, 1, tzinfo=UTC)
    assert windows.last_month_start == datetime(2025, 12, 1, tzinfo=UTC)


def test_compute_windows_uses_local_calendar():
    new_york = ZoneInfo("America/New_York")
    # 23:00 on March 17th in New York (EDT, UTC-4)
    now = datetime(2026, 3, 18, 3, 0, tzinfo=UTC)

    windows = dashboard_service.compute_windows(now, new_york)

    assert windows.today == datetime(2026, 3, 17, 4, 0, tzinfo=UTC)
    assert windows.yesterday == datetime(2026, 3, 16, 4, 0, tzinfo=UTC)


def test_contact_stats_scoped_to_account(db, seeded):
    stats = dashboard_service.get_contact_stats(db, seeded.id, UTC, now=NOW)

    assert stats == {
        "totalContacts": 5,
        "contactsToday": 1,
        "contactsYesterday": 1,
        "contactsThisWeek": 2,
        "contactsLastWeek": 1,
        "contactsThisMonth": 3,
        "contactsLastMonth": 1,
        "avgPerDay": "0.1",
    }


def test_contact_stats_across_accounts(db, seeded):
    stats = dashboard_service.get_contact_stats(db, None, UTC, now=NOW)

    assert stats["totalContacts"] == 6
    assert stats["contactsToday"] == 2
    assert stats["avgPerDay"] == "0.2"


def test_contact_stats_empty(db, test_account):
    stats = dashboard_service.get_contact_stats(db, test_account.id, UTC, now=NOW)

    assert stats["totalContacts"] == 0
    assert stats["avgPerDay"] == "0.0"


@pytest.mark.asyncio
async def test_dashboard_stats_endpoint(authed_client: AsyncClient, db, test_account, other_account):
    now = datetime.now(UTC)
    add_contact(db, test_account.id, now)
    add_contact(db, other_account.id, now)

    response = await authed_client.get("/api/dashboard/stats")

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {
        "totalContacts",
        "contactsToday",
        "contactsYesterday",
        "contactsThisWeek",
        "contactsLastWeek",
        "contactsThisMonth",
        "contactsLastMonth",
        "avgPerDay",
    }
    assert data["totalContacts"] == 1
    assert isinstance(data["avgPerDay"], str)


@pytest.mark.asyncio
async def test_dashboard_stats_requires_auth(client: AsyncClient):
    response = await client.get("/api/dashboard/stats")

    assert response.status_code == 401
