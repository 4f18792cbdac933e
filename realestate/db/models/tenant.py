from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from realestate.db.base import Base, BigIntegerType
from realestate.db.types import new_uuid, utcnow


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(BigIntegerType, ForeignKey("users.id"), unique=True, nullable=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone_number = Column(String(32), unique=True, nullable=False, index=True)
    email = Column(String(320), unique=True, nullable=True)
    national_id = Column(String(32), unique=True, nullable=True)
    city = Column(String(100), nullable=True)
    address = Column(String(500), nullable=True)
    emergency_contact = Column(String(255), nullable=True)
    emergency_phone = Column(String(32), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(50), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    user = relationship("User", backref="tenant_profiles")
    contracts = relationship("Contract", back_populates="tenant")
