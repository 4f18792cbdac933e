from sqlalchemy.orm import Session

import realestate.repositories.property as property_repo
import realestate.repositories.visit_appointment as appointment_repo
from realestate.db.models.visit_appointment import (
    PropertyVisitAppointment as AppointmentModel,
)
from realestate.errors import NotFoundError
from realestate.schemas.visit_appointment import VisitAppointmentCreate


def list_appointments(
    db: Session, owner_id: int | None = None, property_id: str | None = None
) -> list[AppointmentModel]:
    return appointment_repo.get_appointments(db, owner_id=owner_id, property_id=property_id)


def book_appointment(db: Session, data: VisitAppointmentCreate) -> AppointmentModel:
    """
    Book a visit of an existing property.

    Raises:
        NotFoundError: If the property doesn't exist
    """
    if not property_repo.get_property_by_id(db, data.property_id):
        raise NotFoundError(f"Property with id {data.property_id} not found")
    return appointment_repo.create_appointment(db, **data.model_dump())
