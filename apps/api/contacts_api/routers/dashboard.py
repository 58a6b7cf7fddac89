"""Dashboard router - API endpoints for dashboard widgets."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from contacts_api.core.config import settings
from contacts_api.core.deps import get_account_scope, get_db
from contacts_api.schemas.dashboard import DashboardStats
from contacts_api.services import dashboard_service

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_stats(
    account_id: int = Depends(get_account_scope),
    db: Session = Depends(get_db),
) -> DashboardStats:
    """
    Contact creation counts for today, yesterday, this/last week,
    this/last month, plus the 30-day daily average.
    """
    stats = dashboard_service.get_contact_stats(
        db=db,
        account_id=account_id if settings.DASHBOARD_SCOPE_TO_ACCOUNT else None,
        tz=settings.tzinfo,
    )
    return DashboardStats(**stats)
