from sqlalchemy import Column, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from realestate.db.base import Base, BigIntegerType
from realestate.db.types import new_uuid, utcnow


class MaintenanceRequest(Base):
    __tablename__ = "maintenance_requests"

    id = Column(String(36), primary_key=True, default=new_uuid)
    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    owner_id = Column(BigIntegerType, nullable=False, index=True)
    unit = Column(String(50), nullable=True)
    type = Column(String(100), nullable=False)
    priority = Column(String(20), nullable=False)
    problem_description = Column(Text, nullable=False)
    contact_name = Column(String(255), nullable=True)
    contact_phone = Column(String(32), nullable=True)
    scheduled_date = Column(DateTime, nullable=True)
    cost = Column(Float, nullable=True)
    status = Column(String(50), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    property = relationship("Property", back_populates="maintenance_requests")
