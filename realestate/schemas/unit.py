from datetime import datetime

from realestate.schemas.base import CamelModel


class Unit(CamelModel):
    id: str
    property_id: str
    unit_number: str
    type: str | None = None
    area: float | None = None
    status: str
    created_at: datetime
    updated_at: datetime
