from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from realestate.db.base import Base, BigIntegerType
from realestate.db.types import new_uuid, utcnow


class PropertyRating(Base):
    __tablename__ = "property_ratings"

    id = Column(String(36), primary_key=True, default=new_uuid)
    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    contract_id = Column(String(36), nullable=True)
    tenant_user_id = Column(BigIntegerType, nullable=True, index=True)
    stay_period_from = Column(DateTime, nullable=True)
    stay_period_to = Column(DateTime, nullable=True)
    overall_property_rating = Column(Float, nullable=False)
    property_ratings = Column(JSON(none_as_null=True), nullable=True)
    owner_ratings = Column(JSON(none_as_null=True), nullable=True)
    satisfaction_level = Column(String(50), nullable=True)
    positives = Column(Text, nullable=True)
    negatives = Column(Text, nullable=True)
    photos = Column(JSON(none_as_null=True), nullable=True)
    improve_comment = Column(Boolean, nullable=False, default=False)
    correct_grammar = Column(Boolean, nullable=False, default=False)
    privacy_option = Column(String(20), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    property = relationship("Property", back_populates="ratings")
