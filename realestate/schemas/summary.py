"""Projections of related records embedded in other responses."""

from realestate.schemas.base import CamelModel
from realestate.schemas.types import BigIntId


class OwnerSummary(CamelModel):
    """Public part of a user. Never carries the password hash."""

    id: BigIntId
    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None


class PropertySummary(CamelModel):
    id: str
    name: str
    address: str | None = None
    city: str | None = None
    neighborhood: str | None = None


class UnitSummary(CamelModel):
    id: str
    unit_number: str


class ContractSummary(CamelModel):
    id: str
    tenant_name: str | None = None
    property: PropertySummary | None = None
