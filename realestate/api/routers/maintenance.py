from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from realestate.api.deps import get_db
from realestate.errors import DomainValidationError
from realestate.schemas.maintenance import (
    MaintenanceRequestCreate,
    MaintenanceRequestWithProperty,
)
from realestate.schemas.types import BigIntId
from realestate.services import maintenance as maintenance_service

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.get("", response_model=list[MaintenanceRequestWithProperty])
def get_owner_maintenance_requests(
    owner_id: BigIntId | None = Query(None, alias="ownerId"),
    status_filter: str | None = Query(None, alias="status"),
    property_id: str | None = Query(None, alias="propertyId"),
    db: Session = Depends(get_db),
):
    """
    Get an owner's maintenance requests, newest first.
    """
    if owner_id is None:
        raise DomainValidationError("ownerId is required")
    requests = maintenance_service.list_requests(
        db, owner_id, status=status_filter, property_id=property_id
    )
    return [MaintenanceRequestWithProperty.model_validate(req) for req in requests]


@router.post(
    "",
    response_model=MaintenanceRequestWithProperty,
    status_code=status.HTTP_201_CREATED,
)
def create_maintenance_request(
    request_data: MaintenanceRequestCreate, db: Session = Depends(get_db)
):
    """
    Create a maintenance request.
    """
    maintenance_request = maintenance_service.create_request(db, request_data)
    return MaintenanceRequestWithProperty.model_validate(maintenance_request)
