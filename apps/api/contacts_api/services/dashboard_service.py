"""Dashboard service - contact creation counts for dashboard widgets."""

from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone, tzinfo

from sqlalchemy import func
from sqlalchemy.orm import Session

from contacts_api.db.models import Contact


@dataclass(frozen=True)
class StatsWindows:
    """Period boundaries in UTC, derived from one wall-clock instant."""
    today: datetime
    tomorrow: datetime
    yesterday: datetime
    week_start: datetime
    last_week_start: datetime
    month_start: datetime
    last_month_start: datetime
    thirty_days_ago: datetime


def _local_midnight(day, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz).astimezone(timezone.utc)


def compute_windows(now: datetime, tz: tzinfo) -> StatsWindows:
    """
    Compute calendar boundaries for ``now`` as seen in ``tz``.

    Weeks start on Monday. Every window is half-open: [start, next_start).
    """
    local_now = now.astimezone(tz)
    today = local_now.date()

    week_start = today - timedelta(days=today.weekday())
    month_start = today.replace(day=1)
    last_month_start = (month_start - timedelta(days=1)).replace(day=1)

    return StatsWindows(
        today=_local_midnight(today, tz),
        tomorrow=_local_midnight(today + timedelta(days=1), tz),
        yesterday=_local_midnight(today - timedelta(days=1), tz),
        week_start=_local_midnight(week_start, tz),
        last_week_start=_local_midnight(week_start - timedelta(days=7), tz),
        month_start=_local_midnight(month_start, tz),
        last_month_start=_local_midnight(last_month_start, tz),
        thirty_days_ago=now.astimezone(timezone.utc) - timedelta(days=30),
    )


def get_contact_stats(
    db: Session,
    account_id: int | None,
    tz: tzinfo,
    now: datetime | None = None,
) -> dict:
    """
    Get contact creation statistics for the dashboard.

    Counts cover active (not soft-deleted) contacts. Passing account_id=None
    counts across all accounts.

    Returns:
        dict keyed by the dashboard field names
    """
    now = now or datetime.now(timezone.utc)
    w = compute_windows(now, tz)

    base = db.query(func.count(Contact.id)).filter(Contact.deleted_at.is_(None))
    if account_id is not None:
        base = base.filter(Contact.account_id == account_id)

    def created_between(start: datetime, end: datetime | None = None) -> int:
        query = base.filter(Contact.created_at >= start)
        if end is not None:
            query = query.filter(Contact.created_at < end)
        return query.scalar() or 0

    last_30_days = created_between(w.thirty_days_ago)

    return {
        "totalContacts": base.scalar() or 0,
        "contactsToday": created_between(w.today, w.tomorrow),
        "contactsYesterday": created_between(w.yesterday, w.today),
        "contactsThisWeek": created_between(w.week_start),
        "contactsLastWeek": created_between(w.last_week_start, w.week_start),
        "contactsThisMonth": created_between(w.month_start),
        "contactsLastMonth": created_between(w.last_month_start, w.month_start),
        "avgPerDay": f"{last_30_days / 30:.1f}",
    }
