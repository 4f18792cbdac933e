from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from realestate.api.deps import get_db
from realestate.errors import DomainValidationError
from realestate.schemas.property import Property, PropertyCreate, PropertyDetail, PropertyUpdate
from realestate.schemas.types import BigIntId
from realestate.services import property as property_service

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=list[Property])
def get_owner_properties(
    owner_id: BigIntId | None = Query(None, alias="ownerId"),
    db: Session = Depends(get_db),
):
    """
    Get all properties of an owner, newest first, with the owner's public profile.
    """
    if owner_id is None:
        raise DomainValidationError("ownerId is required")
    properties = property_service.list_properties(db, owner_id)
    return [Property.model_validate(prop) for prop in properties]


@router.post("", response_model=Property, status_code=status.HTTP_201_CREATED)
def create_new_property(property_data: PropertyCreate, db: Session = Depends(get_db)):
    """
    Create a new property. ``ownerId``, ``name``, ``type``, ``address`` and ``city`` are required.
    """
    db_property = property_service.create_property(db, property_data)
    return Property.model_validate(db_property)


@router.get("/{property_id}", response_model=PropertyDetail)
def get_property_by_id(property_id: str, db: Session = Depends(get_db)):
    """
    Get a property with its units, contracts (with payments) and maintenance requests.
    """
    return PropertyDetail.model_validate(property_service.get_property(db, property_id))


@router.put("/{property_id}", response_model=PropertyDetail)
def update_property_by_id(
    property_id: str,
    property_data: PropertyUpdate,
    db: Session = Depends(get_db),
):
    """
    Update a property.

    Fields not included in the request are not updated.
    """
    db_property = property_service.update_property(db, property_id, property_data)
    return PropertyDetail.model_validate(db_property)


@router.delete("/{property_id}")
def delete_property_by_id(property_id: str, db: Session = Depends(get_db)):
    """
    Delete a property together with its units, contracts, payments,
    maintenance requests, visit appointments and ratings.
    """
    property_service.delete_property(db, property_id)
    return {"message": "Property deleted successfully"}
