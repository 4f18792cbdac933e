import logging

from sqlalchemy.orm import Session

import realestate.repositories.payment as payment_repo
from realestate.db.models.payment import Payment as PaymentModel
from realestate.domain.statuses import PAYMENT_DUE
from realestate.errors import MissingTableError
from realestate.schemas.payment import PaymentCreate

logger = logging.getLogger(__name__)


def list_payments(
    db: Session,
    owner_id: int,
    status: str | None = None,
    contract_id: str | None = None,
) -> list[PaymentModel]:
    """List an owner's payments; an unmigrated payments table reads as empty."""
    try:
        return payment_repo.get_payments_by_owner_id(
            db, owner_id, status=status, contract_id=contract_id
        )
    except MissingTableError:
        logger.warning("Payments table does not exist yet. Returning empty list.")
        return []


def create_payment(db: Session, data: PaymentCreate) -> PaymentModel:
    """
    Record a new payment as due.

    Raises:
        MissingTableError: If the payments table has not been created
    """
    return payment_repo.create_payment(db, status=PAYMENT_DUE, **data.model_dump())
