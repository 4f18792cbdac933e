from sqlalchemy.orm import Session, joinedload

from realestate.db.guards import missing_table_guard
from realestate.db.models.contract import Contract as ContractModel
from realestate.db.models.payment import Payment as PaymentModel

TABLE_LABEL = "Payments"


def get_payments_by_owner_id(
    db: Session,
    owner_id: int,
    status: str | None = None,
    contract_id: str | None = None,
) -> list[PaymentModel]:
    """
    Get an owner's payments ordered by due date (latest first).

    Raises:
        MissingTableError: If the payments table has not been created.
    """
    with missing_table_guard(db, TABLE_LABEL):
        query = (
            db.query(PaymentModel)
            .options(
                joinedload(PaymentModel.contract).joinedload(ContractModel.property)
            )
            .filter(PaymentModel.owner_id == owner_id)
        )
        if status is not None:
            query = query.filter(PaymentModel.status == status)
        if contract_id is not None:
            query = query.filter(PaymentModel.contract_id == contract_id)
        return query.order_by(PaymentModel.due_date.desc()).all()


def create_payment(db: Session, **fields) -> PaymentModel:
    """Create a new payment in the database. Pure data access - no business logic."""
    with missing_table_guard(db, TABLE_LABEL):
        db_payment = PaymentModel(**fields)
        db.add(db_payment)
        db.commit()
        db.refresh(db_payment)
        return db_payment
