from datetime import datetime
from typing import Any

from pydantic import field_validator

from realestate.schemas.base import CamelModel, RequestModel
from realestate.schemas.contract import Contract
from realestate.schemas.maintenance import MaintenanceRequest
from realestate.schemas.summary import OwnerSummary
from realestate.schemas.types import BigIntId
from realestate.schemas.unit import Unit


def _number_to_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class Property(CamelModel):
    id: str
    owner_id: BigIntId
    name: str
    type: str
    address: str
    city: str
    neighborhood: str | None = None
    area: float | None = None
    rooms: str | None = None
    bathrooms: str | None = None
    construction_year: str | None = None
    unit_number: str | None = None
    postal_code: str | None = None
    country: str | None = None
    property_sub_type: str | None = None
    features: Any = None
    monthly_rent: float | None = None
    insurance: float | None = None
    available_from: datetime | None = None
    min_rental_period: str | None = None
    public_display: bool
    payment_email: str | None = None
    support_phone: str | None = None
    payment_account: str | None = None
    description: str | None = None
    images: Any = None
    status: str
    created_at: datetime
    updated_at: datetime
    owner: OwnerSummary | None = None


class PropertyDetail(Property):
    units: list[Unit] = []
    contracts: list[Contract] = []
    maintenance_requests: list[MaintenanceRequest] = []


class PropertyCreate(RequestModel):
    owner_id: BigIntId
    name: str
    type: str
    address: str
    city: str
    neighborhood: str | None = None
    area: float | None = None
    rooms: str | None = None
    bathrooms: str | None = None
    construction_year: str | None = None
    description: str | None = None
    images: Any = None
    unit_number: str | None = None
    postal_code: str | None = None
    country: str | None = None
    property_sub_type: str | None = None
    features: Any = None
    monthly_rent: float | None = None
    insurance: float | None = None
    available_from: datetime | None = None
    min_rental_period: str | None = None
    public_display: bool = False
    payment_email: str | None = None
    support_phone: str | None = None
    payment_account: str | None = None

    @field_validator("rooms", "bathrooms", "construction_year", "min_rental_period", mode="before")
    @classmethod
    def numbers_to_str(cls, v: Any) -> Any:
        return _number_to_str(v)


class PropertyUpdate(RequestModel):
    name: str | None = None
    type: str | None = None
    address: str | None = None
    city: str | None = None
    neighborhood: str | None = None
    area: float | None = None
    rooms: str | None = None
    bathrooms: str | None = None
    construction_year: str | None = None
    description: str | None = None
    images: Any = None
    features: Any = None
    monthly_rent: float | None = None
    public_display: bool | None = None
    status: str | None = None

    @field_validator("rooms", "bathrooms", "construction_year", mode="before")
    @classmethod
    def numbers_to_str(cls, v: Any) -> Any:
        return _number_to_str(v)
