import logging

from sqlalchemy.orm import Session

import realestate.repositories.property as property_repo
import realestate.repositories.rating as rating_repo
from realestate.db.models.rating import PropertyRating as RatingModel
from realestate.domain.statuses import PRIVACY_PUBLIC
from realestate.errors import DuplicateResourceError, MissingTableError, NotFoundError
from realestate.schemas.rating import PropertyRatingCreate

logger = logging.getLogger(__name__)

ALREADY_RATED = "لقد قمت بتقييم هذا العقار مسبقاً"


def list_ratings(
    db: Session, property_id: str | None = None, tenant_user_id: int | None = None
) -> list[RatingModel]:
    """List ratings; an unmigrated ratings table reads as empty."""
    try:
        return rating_repo.get_ratings(
            db, property_id=property_id, tenant_user_id=tenant_user_id
        )
    except MissingTableError:
        logger.warning("Property ratings table does not exist yet. Returning empty list.")
        return []


def create_rating(db: Session, data: PropertyRatingCreate) -> RatingModel:
    """
    Rate a property.

    A tenant (tenantUserId) may rate a given property only once; anonymous
    ratings are not deduplicated.

    Raises:
        NotFoundError: If the property doesn't exist
        DuplicateResourceError: If the tenant already rated the property
        MissingTableError: If the ratings table has not been created
    """
    if not property_repo.get_property_by_id(db, data.property_id):
        raise NotFoundError(f"Property with id {data.property_id} not found")

    if data.tenant_user_id is not None:
        existing = rating_repo.get_rating_by_property_and_tenant(
            db, data.property_id, data.tenant_user_id
        )
        if existing:
            raise DuplicateResourceError(ALREADY_RATED)

    fields = data.model_dump()
    fields["privacy_option"] = data.privacy_option or PRIVACY_PUBLIC
    return rating_repo.create_rating(db, **fields)
