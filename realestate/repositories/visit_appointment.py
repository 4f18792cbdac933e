from sqlalchemy.orm import Session, joinedload

from realestate.db.models.visit_appointment import (
    PropertyVisitAppointment as AppointmentModel,
)


def get_appointments(
    db: Session, owner_id: int | None = None, property_id: str | None = None
) -> list[AppointmentModel]:
    """Get visit appointments, soonest first, optionally filtered by owner and property."""
    query = db.query(AppointmentModel).options(joinedload(AppointmentModel.property))
    if owner_id is not None:
        query = query.filter(AppointmentModel.owner_id == owner_id)
    if property_id is not None:
        query = query.filter(AppointmentModel.property_id == property_id)
    return query.order_by(AppointmentModel.scheduled_date.asc()).all()


def create_appointment(db: Session, **fields) -> AppointmentModel:
    """Create a new visit appointment. Pure data access - no business logic."""
    db_appointment = AppointmentModel(**fields)
    db.add(db_appointment)
    db.commit()
    db.refresh(db_appointment)
    return db_appointment
