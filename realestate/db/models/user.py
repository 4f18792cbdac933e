from sqlalchemy import Boolean, Column, DateTime, String

from realestate.db.base import Base, BigIntegerType
from realestate.db.types import utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(BigIntegerType, primary_key=True, autoincrement=True)
    email = Column(String(320), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone_number = Column(String(32), unique=True, nullable=True)
    national_id = Column(String(32), unique=True, nullable=True)
    user_type = Column(String(32), nullable=False, index=True)
    city = Column(String(100), nullable=True)
    neighborhood = Column(String(100), nullable=True)
    postal_code = Column(String(20), nullable=True)
    profile_image = Column(String, nullable=True)
    is_verified = Column(Boolean, nullable=False, default=False)
    password_hash = Column(String, nullable=False)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
