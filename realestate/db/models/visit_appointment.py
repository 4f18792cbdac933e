from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from realestate.db.base import Base, BigIntegerType
from realestate.db.types import new_uuid, utcnow


class PropertyVisitAppointment(Base):
    __tablename__ = "property_visit_appointments"

    id = Column(String(36), primary_key=True, default=new_uuid)
    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    owner_id = Column(BigIntegerType, nullable=False, index=True)
    requester_id = Column(BigIntegerType, nullable=True)
    requester_name = Column(String(255), nullable=False)
    requester_email = Column(String(320), nullable=True)
    requester_phone = Column(String(32), nullable=True)
    visit_type = Column(String(50), nullable=False)
    scheduled_date = Column(DateTime, nullable=False)
    time_slot = Column(String(50), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    property = relationship("Property", back_populates="visit_appointments")
