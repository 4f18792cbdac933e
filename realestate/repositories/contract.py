from sqlalchemy.orm import Session, joinedload, selectinload

from realestate.db.models.contract import Contract as ContractModel


def _with_relations(query):
    return query.options(
        joinedload(ContractModel.property),
        joinedload(ContractModel.unit),
        selectinload(ContractModel.payments),
    )


def get_contract_by_id(db: Session, contract_id: str) -> ContractModel | None:
    """Get a contract by ID with property, unit and payments loaded."""
    return (
        _with_relations(db.query(ContractModel))
        .filter(ContractModel.id == contract_id)
        .first()
    )


def get_contracts_by_owner_id(
    db: Session, owner_id: int, status: str | None = None
) -> list[ContractModel]:
    """Get an owner's contracts, newest first, optionally filtered by status."""
    query = _with_relations(db.query(ContractModel)).filter(
        ContractModel.owner_id == owner_id
    )
    if status is not None:
        query = query.filter(ContractModel.status == status)
    return query.order_by(ContractModel.created_at.desc()).all()


def create_contract(db: Session, **fields) -> ContractModel:
    """Create a new contract in the database. Pure data access - no business logic."""
    db_contract = ContractModel(**fields)
    db.add(db_contract)
    db.commit()
    db.refresh(db_contract)
    return db_contract
