from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from realestate.api.deps import get_db
from realestate.errors import DomainValidationError
from realestate.schemas.contract import ContractCreate, ContractDetail
from realestate.schemas.types import BigIntId
from realestate.services import contract as contract_service

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.get("", response_model=list[ContractDetail])
def get_owner_contracts(
    owner_id: BigIntId | None = Query(None, alias="ownerId"),
    status_filter: str | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    """
    Get an owner's contracts, newest first, with property, unit and payments.
    """
    if owner_id is None:
        raise DomainValidationError("ownerId is required")
    contracts = contract_service.list_contracts(db, owner_id, status=status_filter)
    return [ContractDetail.model_validate(contract) for contract in contracts]


@router.post("", response_model=ContractDetail, status_code=status.HTTP_201_CREATED)
def create_new_contract(contract_data: ContractCreate, db: Session = Depends(get_db)):
    """
    Create a new contract.

    The tenant is either a registered tenant (``tenantId``) or described
    inline (``tenantName``, ``tenantEmail``, ``tenantPhone``).
    """
    contract = contract_service.create_contract(db, contract_data)
    return ContractDetail.model_validate(contract)
