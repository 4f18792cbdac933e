from sqlalchemy.orm import Session, joinedload

from realestate.db.guards import missing_table_guard
from realestate.db.models.maintenance_request import (
    MaintenanceRequest as MaintenanceRequestModel,
)

TABLE_LABEL = "Maintenance requests"


def get_requests_by_owner_id(
    db: Session,
    owner_id: int,
    status: str | None = None,
    property_id: str | None = None,
) -> list[MaintenanceRequestModel]:
    """
    Get an owner's maintenance requests, newest first.

    Raises:
        MissingTableError: If the maintenance table has not been created.
    """
    with missing_table_guard(db, TABLE_LABEL):
        query = (
            db.query(MaintenanceRequestModel)
            .options(joinedload(MaintenanceRequestModel.property))
            .filter(MaintenanceRequestModel.owner_id == owner_id)
        )
        if status is not None:
            query = query.filter(MaintenanceRequestModel.status == status)
        if property_id is not None:
            query = query.filter(MaintenanceRequestModel.property_id == property_id)
        return query.order_by(MaintenanceRequestModel.created_at.desc()).all()


def create_request(db: Session, **fields) -> MaintenanceRequestModel:
    """Create a new maintenance request. Pure data access - no business logic."""
    with missing_table_guard(db, TABLE_LABEL):
        db_request = MaintenanceRequestModel(**fields)
        db.add(db_request)
        db.commit()
        db.refresh(db_request)
        return db_request
