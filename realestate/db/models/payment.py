from sqlalchemy import Column, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from realestate.db.base import Base, BigIntegerType
from realestate.db.types import new_uuid, utcnow


class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=new_uuid)
    contract_id = Column(String(36), ForeignKey("contracts.id"), nullable=True, index=True)
    owner_id = Column(BigIntegerType, nullable=False, index=True)
    type = Column(String(100), nullable=False)
    amount = Column(Float, nullable=False)
    due_date = Column(DateTime, nullable=False)
    paid_date = Column(DateTime, nullable=True)
    payment_method = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(50), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    contract = relationship("Contract", back_populates="payments")
