"""Pydantic schemas for dashboard widgets."""

from pydantic import BaseModel


class DashboardStats(BaseModel):
    """Contact creation counts for the dashboard header cards."""

    totalContacts: int
    contactsToday: int
    contactsYesterday: int
    contactsThisWeek: int
    contactsLastWeek: int
    contactsThisMonth: int
    contactsLastMonth: int
    avgPerDay: str  # one decimal place, e.g. "1.3"
