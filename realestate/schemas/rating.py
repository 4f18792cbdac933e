from datetime import datetime
from typing import Any

from pydantic import Field

from realestate.schemas.base import CamelModel, RequestModel
from realestate.schemas.summary import PropertySummary
from realestate.schemas.types import BigIntId


class PropertyRating(CamelModel):
    id: str
    property_id: str
    contract_id: str | None = None
    tenant_user_id: BigIntId | None = None
    stay_period_from: datetime | None = None
    stay_period_to: datetime | None = None
    overall_property_rating: float
    property_ratings: Any = None
    owner_ratings: Any = None
    satisfaction_level: str | None = None
    positives: str | None = None
    negatives: str | None = None
    photos: Any = None
    improve_comment: bool
    correct_grammar: bool
    privacy_option: str
    created_at: datetime
    updated_at: datetime
    property: PropertySummary | None = None


class PropertyRatingCreate(RequestModel):
    property_id: str
    contract_id: str | None = None
    tenant_user_id: BigIntId | None = None
    stay_period_from: datetime | None = None
    stay_period_to: datetime | None = None
    overall_property_rating: float = Field(..., gt=0, le=5)
    property_ratings: dict[str, Any] | None = None
    owner_ratings: dict[str, Any] | None = None
    satisfaction_level: str | None = None
    positives: str | None = None
    negatives: str | None = None
    photos: list[Any] | None = None
    improve_comment: bool = False
    correct_grammar: bool = False
    privacy_option: str | None = None
