from sqlalchemy.orm import Session

from realestate.db.models.user import User as UserModel
from realestate.db.types import utcnow
from realestate.errors import NotFoundError


def get_user_by_email(db: Session, email: str) -> UserModel | None:
    """Get a user by email."""
    return db.query(UserModel).filter(UserModel.email == email).first()


def get_user_by_id(db: Session, user_id: int) -> UserModel | None:
    """Get a user by ID."""
    return db.query(UserModel).filter(UserModel.id == user_id).first()


def get_user_by_phone(db: Session, phone_number: str) -> UserModel | None:
    return db.query(UserModel).filter(UserModel.phone_number == phone_number).first()


def get_user_by_national_id(db: Session, national_id: str) -> UserModel | None:
    return db.query(UserModel).filter(UserModel.national_id == national_id).first()


def find_other_user(
    db: Session, user_id: int, *, email: str | None = None,
    phone_number: str | None = None, national_id: str | None = None,
) -> UserModel | None:
    """Find a user other than ``user_id`` holding the given unique value."""
    query = db.query(UserModel).filter(UserModel.id != user_id)
    if email is not None:
        query = query.filter(UserModel.email == email)
    if phone_number is not None:
        query = query.filter(UserModel.phone_number == phone_number)
    if national_id is not None:
        query = query.filter(UserModel.national_id == national_id)
    return query.first()


def get_latest_user_by_type(db: Session, user_type: str) -> UserModel | None:
    """Get the most recently created user of the given type."""
    return (
        db.query(UserModel)
        .filter(UserModel.user_type == user_type)
        .order_by(UserModel.created_at.desc(), UserModel.id.desc())
        .first()
    )


def create_user(
    db: Session,
    email: str,
    first_name: str,
    last_name: str,
    phone_number: str,
    national_id: str,
    user_type: str,
    password_hash: str,
    city: str | None = None,
    neighborhood: str | None = None,
    postal_code: str | None = None,
) -> UserModel:
    """Create a new user in the database. Pure data access - no business logic."""
    db_user = UserModel(
        email=email,
        first_name=first_name,
        last_name=last_name,
        phone_number=phone_number,
        national_id=national_id,
        user_type=user_type,
        password_hash=password_hash,
        city=city,
        neighborhood=neighborhood,
        postal_code=postal_code,
        is_verified=False,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def touch_last_login(db: Session, user: UserModel) -> UserModel:
    user.last_login = utcnow()
    db.commit()
    db.refresh(user)
    return user


def update_user(db: Session, user_id: int, **kwargs) -> UserModel:
    """
    Update a user. Only updates fields that are explicitly provided.

    Fields not provided are not updated; a provided None clears the column.
    """
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    for field in (
        "first_name",
        "last_name",
        "email",
        "national_id",
        "phone_number",
        "password_hash",
    ):
        if field in kwargs:
            setattr(user, field, kwargs[field])

    db.commit()
    db.refresh(user)
    return user
