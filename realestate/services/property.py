import logging

from sqlalchemy.orm import Session

import realestate.repositories.property as property_repo
import realestate.repositories.user as user_repo
from realestate.core.config import settings
from realestate.db.models.property import Property as PropertyModel
from realestate.domain.statuses import PROPERTY_AVAILABLE
from realestate.errors import NotFoundError
from realestate.schemas.property import PropertyCreate, PropertyUpdate

logger = logging.getLogger(__name__)


def list_properties(db: Session, owner_id: int) -> list[PropertyModel]:
    return property_repo.get_properties_by_owner_id(db, owner_id)


def get_property(db: Session, property_id: str) -> PropertyModel:
    """
    Get a property with its units, contracts, payments and maintenance requests.

    Raises:
        NotFoundError: If property doesn't exist
    """
    db_property = property_repo.get_property_detail(db, property_id)
    if not db_property:
        raise NotFoundError("Property not found")
    return db_property


def create_property(db: Session, data: PropertyCreate) -> PropertyModel:
    """
    Create a property for an existing owner.

    New properties are available, and default to the configured country.

    Raises:
        NotFoundError: If the owner doesn't exist
    """
    if not user_repo.get_user_by_id(db, data.owner_id):
        raise NotFoundError("Owner not found")

    fields = data.model_dump()
    fields["country"] = data.country or settings.default_country
    fields["status"] = PROPERTY_AVAILABLE
    return property_repo.create_property(db, **fields)


def update_property(db: Session, property_id: str, data: PropertyUpdate) -> PropertyModel:
    """
    Apply a partial update: only fields present (and not null) in the request change.

    Raises:
        NotFoundError: If property doesn't exist
    """
    changes = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None
    }
    property_repo.update_property(db, property_id, **changes)
    return get_property(db, property_id)


def delete_property(db: Session, property_id: str) -> None:
    """
    Delete a property with everything that hangs off it.

    Raises:
        NotFoundError: If property doesn't exist
    """
    property_repo.delete_property(db, property_id)
    logger.info("Deleted property %s", property_id)
