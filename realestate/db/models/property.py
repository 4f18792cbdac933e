from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from realestate.db.base import Base, BigIntegerType
from realestate.db.types import new_uuid, utcnow


class Property(Base):
    __tablename__ = "properties"

    id = Column(String(36), primary_key=True, default=new_uuid)
    owner_id = Column(BigIntegerType, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)
    address = Column(String(500), nullable=False)
    city = Column(String(100), nullable=False)
    neighborhood = Column(String(100), nullable=True)
    area = Column(Float, nullable=True)
    rooms = Column(String(20), nullable=True)
    bathrooms = Column(String(20), nullable=True)
    construction_year = Column(String(10), nullable=True)

    # Location details
    unit_number = Column(String(50), nullable=True)
    postal_code = Column(String(20), nullable=True)
    country = Column(String(100), nullable=True)
    property_sub_type = Column(String(100), nullable=True)

    features = Column(JSON(none_as_null=True), nullable=True)

    # Pricing
    monthly_rent = Column(Float, nullable=True)
    insurance = Column(Float, nullable=True)
    available_from = Column(DateTime, nullable=True)
    min_rental_period = Column(String(50), nullable=True)
    public_display = Column(Boolean, nullable=False, default=False)

    # Payment system
    payment_email = Column(String(320), nullable=True)
    support_phone = Column(String(32), nullable=True)
    payment_account = Column(String(100), nullable=True)

    description = Column(Text, nullable=True)
    images = Column(JSON(none_as_null=True), nullable=True)
    status = Column(String(50), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    owner = relationship("User", backref="properties")
    units = relationship("Unit", back_populates="property", cascade="all, delete-orphan")
    contracts = relationship(
        "Contract", back_populates="property", cascade="all, delete-orphan"
    )
    maintenance_requests = relationship(
        "MaintenanceRequest",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="desc(MaintenanceRequest.created_at)",
    )
    visit_appointments = relationship(
        "PropertyVisitAppointment",
        back_populates="property",
        cascade="all, delete-orphan",
    )
    ratings = relationship(
        "PropertyRating", back_populates="property", cascade="all, delete-orphan"
    )
