from datetime import datetime

from pydantic import Field

from realestate.schemas.base import CamelModel, RequestModel
from realestate.schemas.summary import ContractSummary
from realestate.schemas.types import BigIntId


class Payment(CamelModel):
    id: str
    contract_id: str | None = None
    owner_id: BigIntId
    type: str
    amount: float
    due_date: datetime
    paid_date: datetime | None = None
    payment_method: str | None = None
    notes: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime


class PaymentWithContract(Payment):
    contract: ContractSummary | None = None


class PaymentCreate(RequestModel):
    contract_id: str | None = None
    owner_id: BigIntId
    type: str
    amount: float = Field(..., gt=0)
    due_date: datetime
    payment_method: str | None = None
    notes: str | None = None
