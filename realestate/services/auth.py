"""Auth service: login, signup and token-based user lookup."""

import logging

from sqlalchemy.orm import Session

import realestate.repositories.user as user_repo
from realestate.core.security import (
    create_access_token,
    get_password_hash,
    validate_password,
    verify_password,
)
from realestate.db.models.user import User as UserModel
from realestate.domain.statuses import USER_TYPE_LABELS
from realestate.errors import (
    DomainValidationError,
    DuplicateResourceError,
    UnauthorizedError,
)
from realestate.schemas.user import LoginResponse, SignupRequest, UserProfile

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "البريد الإلكتروني أو كلمة المرور غير صحيحة"
LOGIN_SUCCESS = "تم تسجيل الدخول بنجاح"


def login(db: Session, email: str, password: str) -> LoginResponse:
    """
    Authenticate user by email and password and record the login time.

    Raises:
        UnauthorizedError: If email not found or password incorrect.
    """
    user = user_repo.get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        raise UnauthorizedError(INVALID_CREDENTIALS)

    user = user_repo.touch_last_login(db, user)
    access_token = create_access_token(data={"sub": user.id})
    return LoginResponse(
        message=LOGIN_SUCCESS,
        user=UserProfile.model_validate(user),
        access_token=access_token,
    )


def resolve_user_type(label: str) -> str:
    """Map a signup form label (Arabic) to the stored user type."""
    if label in USER_TYPE_LABELS:
        return USER_TYPE_LABELS[label]
    if label in USER_TYPE_LABELS.values():
        return label
    raise DomainValidationError("Invalid user type")


def signup(db: Session, data: SignupRequest) -> UserModel:
    """
    Register a new user.

    - Maps the user type label to its stored value
    - Validates email, phone number and national ID uniqueness
    - Validates password length

    Raises:
        DomainValidationError: If user type or password is invalid
        DuplicateResourceError: If email, phone or national ID is taken
    """
    user_type = resolve_user_type(data.user_type)

    if user_repo.get_user_by_email(db, data.email):
        raise DuplicateResourceError("User with this email already exists")
    if user_repo.get_user_by_phone(db, data.phone):
        raise DuplicateResourceError("User with this phone number already exists")
    if user_repo.get_user_by_national_id(db, data.national_id):
        raise DuplicateResourceError("User with this national ID already exists")

    is_valid, error_message = validate_password(data.password)
    if not is_valid:
        raise DomainValidationError(error_message)

    user = user_repo.create_user(
        db,
        email=data.email,
        first_name=data.first_name,
        last_name=data.last_name,
        phone_number=data.phone,
        national_id=data.national_id,
        user_type=user_type,
        password_hash=get_password_hash(data.password),
        city=data.city,
        neighborhood=data.neighborhood,
        postal_code=data.postal_code,
    )
    logger.info("Registered user %s as %s", user.id, user_type)
    return user
