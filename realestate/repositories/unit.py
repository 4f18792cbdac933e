from sqlalchemy.orm import Session

from realestate.db.models.unit import Unit as UnitModel


def get_unit_by_id(db: Session, unit_id: str) -> UnitModel | None:
    """Get a unit by ID."""
    return db.query(UnitModel).filter(UnitModel.id == unit_id).first()
