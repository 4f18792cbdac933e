from datetime import datetime

from realestate.schemas.base import CamelModel, RequestModel
from realestate.schemas.contract import ContractDetail
from realestate.schemas.summary import OwnerSummary
from realestate.schemas.types import BigIntId


class Tenant(CamelModel):
    id: str
    user_id: BigIntId | None = None
    first_name: str
    last_name: str
    phone_number: str
    email: str | None = None
    national_id: str | None = None
    city: str | None = None
    address: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    notes: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime
    user: OwnerSummary | None = None


class TenantDetail(Tenant):
    contracts: list[ContractDetail] = []


class TenantUpsert(RequestModel):
    first_name: str
    last_name: str
    phone_number: str
    email: str | None = None
    national_id: str | None = None
    city: str | None = None
    address: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    user_id: BigIntId | None = None
    notes: str | None = None
