from datetime import datetime

from pydantic import Field

from realestate.schemas.base import CamelModel, RequestModel
from realestate.schemas.payment import Payment
from realestate.schemas.summary import PropertySummary, UnitSummary
from realestate.schemas.types import BigIntId


class Contract(CamelModel):
    id: str
    property_id: str
    unit_id: str | None = None
    owner_id: BigIntId
    tenant_id: str | None = None
    tenant_name: str | None = None
    tenant_email: str | None = None
    tenant_phone: str | None = None
    type: str
    start_date: datetime
    end_date: datetime
    monthly_rent: float
    deposit: float | None = None
    notes: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime
    payments: list[Payment] = []


class ContractDetail(Contract):
    property: PropertySummary | None = None
    unit: UnitSummary | None = None


class ContractCreate(RequestModel):
    property_id: str
    unit_id: str | None = None
    owner_id: BigIntId
    tenant_id: str | None = None
    tenant_name: str | None = None
    tenant_email: str | None = None
    tenant_phone: str | None = None
    type: str
    start_date: datetime
    end_date: datetime
    monthly_rent: float = Field(..., gt=0)
    deposit: float | None = None
    notes: str | None = None
