import logging

from sqlalchemy.orm import Session

import realestate.repositories.user as user_repo
from realestate.core.config import settings
from realestate.core.security import (
    MIN_PASSWORD_LENGTH,
    get_password_hash,
    validate_password,
    verify_password,
)
from realestate.db.models.user import User as UserModel
from realestate.domain.statuses import USER_TYPE_OWNER
from realestate.errors import DomainValidationError, DuplicateResourceError, NotFoundError
from realestate.schemas.user import UserUpdateRequest

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> UserModel:
    """
    Get a user by ID.

    Raises:
        NotFoundError: If user doesn't exist
    """
    user = user_repo.get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def get_demo_owner(db: Session) -> UserModel:
    """
    Return the most recently created owner.

    This is a stand-in for a session-derived owner id used by the demo
    dashboard; it performs no authentication. Disabled unless
    DEMO_OWNER_LOOKUP is set.

    Raises:
        NotFoundError: If the lookup is disabled or no owner exists
    """
    if not settings.demo_owner_lookup:
        raise NotFoundError("No owner found")

    logger.warning("Unauthenticated owner lookup used (DEMO_OWNER_LOOKUP is enabled)")
    user = user_repo.get_latest_user_by_type(db, USER_TYPE_OWNER)
    if not user:
        raise NotFoundError("No owner found")
    return user


def update_user(db: Session, data: UserUpdateRequest) -> UserModel:
    """
    Update a user's profile with business logic validation.

    - A password change requires the correct current password
    - Email, phone number and national ID must not belong to another user

    Only fields present in the request are changed. Blank phone and national
    ID clear the stored value.

    Raises:
        DomainValidationError: If userId is missing or the password change is rejected
        NotFoundError: If user doesn't exist
        DuplicateResourceError: If a unique value is already in use
    """
    if data.user_id is None:
        raise DomainValidationError("userId is required")

    user = get_user(db, data.user_id)
    provided = data.model_fields_set

    if data.new_password:
        if not data.current_password:
            raise DomainValidationError("Current password is required to change password")
        if not verify_password(data.current_password, user.password_hash):
            raise DomainValidationError("Current password is incorrect")
        is_valid, _ = validate_password(data.new_password)
        if not is_valid:
            raise DomainValidationError(
                f"New password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

    update_fields = {}
    if "first_name" in provided and data.first_name is not None:
        update_fields["first_name"] = data.first_name
    if "last_name" in provided and data.last_name is not None:
        update_fields["last_name"] = data.last_name
    if "email" in provided and data.email is not None:
        if user_repo.find_other_user(db, user.id, email=data.email):
            raise DuplicateResourceError("Email already in use")
        update_fields["email"] = data.email
    if "national_id" in provided:
        if data.national_id and user_repo.find_other_user(
            db, user.id, national_id=data.national_id
        ):
            raise DuplicateResourceError("National ID already in use")
        update_fields["national_id"] = data.national_id
    if "phone" in provided:
        if data.phone and user_repo.find_other_user(db, user.id, phone_number=data.phone):
            raise DuplicateResourceError("Phone number already in use")
        update_fields["phone_number"] = data.phone
    if data.new_password:
        update_fields["password_hash"] = get_password_hash(data.new_password)

    return user_repo.update_user(db, user.id, **update_fields)
