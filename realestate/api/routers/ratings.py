from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from realestate.api.deps import get_db
from realestate.schemas.rating import PropertyRating, PropertyRatingCreate
from realestate.schemas.types import BigIntId
from realestate.services import rating as rating_service

router = APIRouter(prefix="/ratings", tags=["ratings"])


@router.get("", response_model=list[PropertyRating])
def get_ratings(
    property_id: str | None = Query(None, alias="propertyId"),
    tenant_user_id: BigIntId | None = Query(None, alias="tenantUserId"),
    db: Session = Depends(get_db),
):
    """
    Get property ratings, newest first.
    """
    ratings = rating_service.list_ratings(
        db, property_id=property_id, tenant_user_id=tenant_user_id
    )
    return [PropertyRating.model_validate(rating) for rating in ratings]


@router.post("", response_model=PropertyRating, status_code=status.HTTP_201_CREATED)
def create_new_rating(rating_data: PropertyRatingCreate, db: Session = Depends(get_db)):
    """
    Rate a property. A tenant can rate each property only once.
    """
    rating = rating_service.create_rating(db, rating_data)
    return PropertyRating.model_validate(rating)
