from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from realestate.api.deps import get_db
from realestate.schemas.types import BigIntId
from realestate.schemas.user import OwnerLookup, UserProfile, UserResponse, UserUpdateRequest
from realestate.services import user as user_service

router = APIRouter(prefix="/user", tags=["users"])


@router.get("/get-owner-id", response_model=OwnerLookup)
def get_owner_id(db: Session = Depends(get_db)):
    """
    Return the most recently registered property owner.

    Demo helper with no authentication; controlled by DEMO_OWNER_LOOKUP.
    """
    return OwnerLookup.model_validate(user_service.get_demo_owner(db))


@router.put("/update", response_model=UserResponse)
def update_user(user_data: UserUpdateRequest, db: Session = Depends(get_db)):
    """
    Update a user's profile.

    Fields not included in the request are not updated. Changing the
    password requires ``currentPassword``.
    """
    user = user_service.update_user(db, user_data)
    return UserResponse(
        message="User updated successfully",
        user=UserProfile.model_validate(user),
    )


@router.get("/{user_id:int}", response_model=UserProfile)
def get_user_by_id(user_id: BigIntId, db: Session = Depends(get_db)):
    """Get a user by ID. The password hash is never returned."""
    return UserProfile.model_validate(user_service.get_user(db, user_id))
