from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from realestate.api.deps import get_current_user, get_db
from realestate.db.models.user import User as UserModel
from realestate.schemas.user import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    UserProfile,
    UserResponse,
)
from realestate.services import auth as auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Login endpoint - returns the user profile and a JWT access token.
    """
    return auth_service.login(db, credentials.email, credentials.password)


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(user_data: SignupRequest, db: Session = Depends(get_db)):
    """
    Register a new user. ``userType`` accepts the Arabic form labels
    (e.g. "مالك عقار") or the stored values (e.g. "owner").
    """
    user = auth_service.signup(db, user_data)
    return UserResponse(
        message="Account created successfully",
        user=UserProfile.model_validate(user),
    )


@router.get("/me", response_model=UserProfile)
def get_current_user_info(current_user: UserModel = Depends(get_current_user)):
    """Get current authenticated user information."""
    return UserProfile.model_validate(current_user)
