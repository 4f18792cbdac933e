from datetime import datetime

from realestate.schemas.base import CamelModel, RequestModel
from realestate.schemas.summary import PropertySummary
from realestate.schemas.types import BigIntId


class MaintenanceRequest(CamelModel):
    id: str
    property_id: str
    owner_id: BigIntId
    unit: str | None = None
    type: str
    priority: str
    problem_description: str
    contact_name: str | None = None
    contact_phone: str | None = None
    scheduled_date: datetime | None = None
    cost: float | None = None
    status: str
    created_at: datetime
    updated_at: datetime


class MaintenanceRequestWithProperty(MaintenanceRequest):
    property: PropertySummary | None = None


class MaintenanceRequestCreate(RequestModel):
    property_id: str
    owner_id: BigIntId
    unit: str | None = None
    type: str
    priority: str | None = None
    problem_description: str
    contact_name: str | None = None
    contact_phone: str | None = None
    scheduled_date: datetime | None = None
    cost: float | None = None
