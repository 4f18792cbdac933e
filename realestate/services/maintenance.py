import logging

from sqlalchemy.orm import Session

import realestate.repositories.maintenance as maintenance_repo
import realestate.repositories.property as property_repo
from realestate.db.models.maintenance_request import (
    MaintenanceRequest as MaintenanceRequestModel,
)
from realestate.domain.statuses import PRIORITY_MEDIUM, initial_maintenance_status
from realestate.errors import MissingTableError, NotFoundError
from realestate.schemas.maintenance import MaintenanceRequestCreate

logger = logging.getLogger(__name__)


def list_requests(
    db: Session,
    owner_id: int,
    status: str | None = None,
    property_id: str | None = None,
) -> list[MaintenanceRequestModel]:
    """List an owner's maintenance requests; an unmigrated table reads as empty."""
    try:
        return maintenance_repo.get_requests_by_owner_id(
            db, owner_id, status=status, property_id=property_id
        )
    except MissingTableError:
        logger.warning("Maintenance table does not exist yet. Returning empty list.")
        return []


def create_request(db: Session, data: MaintenanceRequestCreate) -> MaintenanceRequestModel:
    """
    Create a maintenance request.

    Priority defaults to medium; the status is scheduled when a date is
    given and pending otherwise.

    Raises:
        NotFoundError: If the property doesn't exist
        MissingTableError: If the maintenance table has not been created
    """
    if not property_repo.get_property_by_id(db, data.property_id):
        raise NotFoundError(f"Property with id {data.property_id} not found")

    fields = data.model_dump()
    fields["priority"] = data.priority or PRIORITY_MEDIUM
    fields["status"] = initial_maintenance_status(data.scheduled_date is not None)
    return maintenance_repo.create_request(db, **fields)
