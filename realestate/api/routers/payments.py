from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from realestate.api.deps import get_db
from realestate.errors import DomainValidationError
from realestate.schemas.payment import PaymentCreate, PaymentWithContract
from realestate.schemas.types import BigIntId
from realestate.services import payment as payment_service

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=list[PaymentWithContract])
def get_owner_payments(
    owner_id: BigIntId | None = Query(None, alias="ownerId"),
    status_filter: str | None = Query(None, alias="status"),
    contract_id: str | None = Query(None, alias="contractId"),
    db: Session = Depends(get_db),
):
    """
    Get an owner's payments, latest due date first.
    """
    if owner_id is None:
        raise DomainValidationError("ownerId is required")
    payments = payment_service.list_payments(
        db, owner_id, status=status_filter, contract_id=contract_id
    )
    return [PaymentWithContract.model_validate(payment) for payment in payments]


@router.post("", response_model=PaymentWithContract, status_code=status.HTTP_201_CREATED)
def create_new_payment(payment_data: PaymentCreate, db: Session = Depends(get_db)):
    """
    Record a payment. New payments are due.
    """
    payment = payment_service.create_payment(db, payment_data)
    return PaymentWithContract.model_validate(payment)
