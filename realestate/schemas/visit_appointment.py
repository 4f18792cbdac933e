from datetime import datetime

from realestate.schemas.base import CamelModel, RequestModel
from realestate.schemas.summary import PropertySummary
from realestate.schemas.types import BigIntId


class VisitAppointment(CamelModel):
    id: str
    property_id: str
    owner_id: BigIntId
    requester_id: BigIntId | None = None
    requester_name: str
    requester_email: str | None = None
    requester_phone: str | None = None
    visit_type: str
    scheduled_date: datetime
    time_slot: str
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
    property: PropertySummary | None = None


class VisitAppointmentCreate(RequestModel):
    property_id: str
    owner_id: BigIntId
    requester_id: BigIntId | None = None
    requester_name: str
    requester_email: str | None = None
    requester_phone: str | None = None
    visit_type: str
    scheduled_date: datetime
    time_slot: str
    notes: str | None = None
