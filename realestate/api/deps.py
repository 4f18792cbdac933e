from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from realestate.core.security import decode_token
from realestate.db import SessionLocal
from realestate.db.models.user import User
from realestate.schemas.types import parse_big_int

# Login takes a JSON body, so tokens are pasted as plain bearer credentials
bearer_scheme = HTTPBearer(auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Get the current authenticated user from JWT token."""
    if credentials is None:
        raise _credentials_error("Not authenticated")

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise _credentials_error()

    # Only access tokens authenticate requests
    if payload.get("type") != "access":
        raise _credentials_error()

    try:
        user_id = parse_big_int(payload.get("sub"))
    except ValueError:
        raise _credentials_error()

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise _credentials_error("User not found")

    return user
