from sqlalchemy.orm import Session, joinedload

from realestate.db.guards import missing_table_guard
from realestate.db.models.rating import PropertyRating as RatingModel

TABLE_LABEL = "Property ratings"


def get_rating_by_property_and_tenant(
    db: Session, property_id: str, tenant_user_id: int
) -> RatingModel | None:
    """Get a tenant's rating of a property. Used to check for duplicates."""
    with missing_table_guard(db, TABLE_LABEL):
        return (
            db.query(RatingModel)
            .filter(
                RatingModel.property_id == property_id,
                RatingModel.tenant_user_id == tenant_user_id,
            )
            .first()
        )


def get_ratings(
    db: Session, property_id: str | None = None, tenant_user_id: int | None = None
) -> list[RatingModel]:
    """Get ratings, newest first, optionally filtered by property and tenant."""
    with missing_table_guard(db, TABLE_LABEL):
        query = db.query(RatingModel).options(joinedload(RatingModel.property))
        if property_id is not None:
            query = query.filter(RatingModel.property_id == property_id)
        if tenant_user_id is not None:
            query = query.filter(RatingModel.tenant_user_id == tenant_user_id)
        return query.order_by(RatingModel.created_at.desc()).all()


def create_rating(db: Session, **fields) -> RatingModel:
    """Create a new rating. Pure data access - no business logic."""
    with missing_table_guard(db, TABLE_LABEL):
        db_rating = RatingModel(**fields)
        db.add(db_rating)
        db.commit()
        db.refresh(db_rating)
        return db_rating
