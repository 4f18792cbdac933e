from sqlalchemy import Column, DateTime, Float, ForeignKey, String
from sqlalchemy.orm import relationship

from realestate.db.base import Base
from realestate.db.types import new_uuid, utcnow


class Unit(Base):
    __tablename__ = "units"

    id = Column(String(36), primary_key=True, default=new_uuid)
    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    unit_number = Column(String(50), nullable=False)
    type = Column(String(100), nullable=True)
    area = Column(Float, nullable=True)
    status = Column(String(50), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    property = relationship("Property", back_populates="units")
