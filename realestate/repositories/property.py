from sqlalchemy.orm import Session, joinedload, selectinload

from realestate.db.models.contract import Contract as ContractModel
from realestate.db.models.property import Property as PropertyModel
from realestate.errors import NotFoundError

# Columns a PUT may change
UPDATABLE_FIELDS = (
    "name",
    "type",
    "address",
    "city",
    "neighborhood",
    "area",
    "rooms",
    "bathrooms",
    "construction_year",
    "description",
    "images",
    "features",
    "monthly_rent",
    "public_display",
    "status",
)


def get_property_by_id(db: Session, property_id: str) -> PropertyModel | None:
    """Get a property by ID with its owner loaded."""
    return (
        db.query(PropertyModel)
        .options(joinedload(PropertyModel.owner))
        .filter(PropertyModel.id == property_id)
        .first()
    )


def get_property_detail(db: Session, property_id: str) -> PropertyModel | None:
    """Get a property with owner, units, contracts (with payments) and maintenance requests."""
    return (
        db.query(PropertyModel)
        .options(
            joinedload(PropertyModel.owner),
            selectinload(PropertyModel.units),
            selectinload(PropertyModel.contracts).selectinload(ContractModel.payments),
            selectinload(PropertyModel.maintenance_requests),
        )
        .filter(PropertyModel.id == property_id)
        .first()
    )


def get_properties_by_owner_id(db: Session, owner_id: int) -> list[PropertyModel]:
    """Get all properties of an owner, newest first."""
    return (
        db.query(PropertyModel)
        .options(joinedload(PropertyModel.owner))
        .filter(PropertyModel.owner_id == owner_id)
        .order_by(PropertyModel.created_at.desc())
        .all()
    )


def get_properties_with_units_and_contracts(
    db: Session, owner_id: int
) -> list[PropertyModel]:
    return (
        db.query(PropertyModel)
        .options(
            selectinload(PropertyModel.units),
            selectinload(PropertyModel.contracts),
        )
        .filter(PropertyModel.owner_id == owner_id)
        .all()
    )


def create_property(db: Session, **fields) -> PropertyModel:
    """Create a new property in the database. Pure data access - no business logic."""
    db_property = PropertyModel(**fields)
    db.add(db_property)
    db.commit()
    db.refresh(db_property)
    return db_property


def update_property(db: Session, property_id: str, **kwargs) -> PropertyModel:
    """
    Update a property. Only updates fields that are explicitly provided.

    Fields not provided are not updated.
    """
    db_property = get_property_by_id(db, property_id)
    if not db_property:
        raise NotFoundError("Property not found")

    for field in UPDATABLE_FIELDS:
        if field in kwargs:
            setattr(db_property, field, kwargs[field])

    db.commit()
    db.refresh(db_property)
    return db_property


def delete_property(db: Session, property_id: str) -> None:
    """Delete a property and its dependent records. Pure data access - no business logic."""
    db_property = get_property_by_id(db, property_id)
    if not db_property:
        raise NotFoundError("Property not found")

    db.delete(db_property)
    db.commit()
