from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from realestate.api.deps import get_db
from realestate.schemas.types import BigIntId
from realestate.schemas.visit_appointment import VisitAppointment, VisitAppointmentCreate
from realestate.services import visit_appointment as appointment_service

router = APIRouter(prefix="/property-visit-appointments", tags=["visit appointments"])


@router.get("", response_model=list[VisitAppointment])
def get_visit_appointments(
    owner_id: BigIntId | None = Query(None, alias="ownerId"),
    property_id: str | None = Query(None, alias="propertyId"),
    db: Session = Depends(get_db),
):
    """
    Get visit appointments, soonest first. Both filters are optional.
    """
    appointments = appointment_service.list_appointments(
        db, owner_id=owner_id, property_id=property_id
    )
    return [VisitAppointment.model_validate(appt) for appt in appointments]


@router.post("", response_model=VisitAppointment, status_code=status.HTTP_201_CREATED)
def book_visit_appointment(
    appointment_data: VisitAppointmentCreate, db: Session = Depends(get_db)
):
    """
    Book a property visit.
    """
    appointment = appointment_service.book_appointment(db, appointment_data)
    return VisitAppointment.model_validate(appointment)
