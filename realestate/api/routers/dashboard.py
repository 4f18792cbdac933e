from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from realestate.api.deps import get_db
from realestate.errors import DomainValidationError
from realestate.schemas.dashboard import DashboardStats
from realestate.schemas.types import BigIntId
from realestate.services.dashboard import get_dashboard_stats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_stats(
    owner_id: BigIntId | None = Query(None, alias="ownerId"),
    db: Session = Depends(get_db),
):
    """
    Owner dashboard: KPIs, alerts, six-month cash flow and property overview.
    """
    if owner_id is None:
        raise DomainValidationError("ownerId is required")
    return get_dashboard_stats(db, owner_id)
