from sqlalchemy import Column, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from realestate.db.base import Base, BigIntegerType
from realestate.db.types import new_uuid, utcnow


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(String(36), primary_key=True, default=new_uuid)
    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    unit_id = Column(String(36), ForeignKey("units.id"), nullable=True)
    owner_id = Column(BigIntegerType, nullable=False, index=True)
    tenant_id = Column(String(36), ForeignKey("tenants.id"), nullable=True, index=True)
    tenant_name = Column(String(255), nullable=True)
    tenant_email = Column(String(320), nullable=True)
    tenant_phone = Column(String(32), nullable=True)
    type = Column(String(100), nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    monthly_rent = Column(Float, nullable=False)
    deposit = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(50), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    property = relationship("Property", back_populates="contracts")
    unit = relationship("Unit")
    tenant = relationship("Tenant", back_populates="contracts")
    payments = relationship(
        "Payment",
        back_populates="contract",
        cascade="all, delete-orphan",
        order_by="desc(Payment.due_date)",
    )
