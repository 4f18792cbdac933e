from sqlalchemy.orm import Session

import realestate.repositories.contract as contract_repo
import realestate.repositories.property as property_repo
import realestate.repositories.tenant as tenant_repo
import realestate.repositories.unit as unit_repo
from realestate.db.models.contract import Contract as ContractModel
from realestate.domain.statuses import ACTIVE
from realestate.errors import DomainValidationError, NotFoundError
from realestate.schemas.contract import ContractCreate


def list_contracts(
    db: Session, owner_id: int, status: str | None = None
) -> list[ContractModel]:
    return contract_repo.get_contracts_by_owner_id(db, owner_id, status=status)


def create_contract(db: Session, data: ContractCreate) -> ContractModel:
    """
    Create a new active contract with business logic validation.

    - Requires a registered tenant (tenantId) or inline tenant details (tenantName)
    - Validates tenant, property and unit exist
    - Validates end date doesn't precede start date

    Inline tenant fields left empty are filled from the registered tenant.

    Raises:
        DomainValidationError: If the tenant reference is missing or dates are inverted
        NotFoundError: If tenant, property or unit doesn't exist
    """
    if not data.tenant_id and not data.tenant_name:
        raise DomainValidationError("tenantId or tenantName is required")

    if data.end_date < data.start_date:
        raise DomainValidationError(
            f"End date ({data.end_date.date()}) cannot precede start date ({data.start_date.date()})"
        )

    fields = data.model_dump()

    if data.tenant_id:
        tenant = tenant_repo.get_tenant_by_id(db, data.tenant_id)
        if not tenant:
            raise NotFoundError(f"Tenant with id {data.tenant_id} not found")
        fields["tenant_name"] = data.tenant_name or f"{tenant.first_name} {tenant.last_name}"
        fields["tenant_email"] = data.tenant_email or tenant.email
        fields["tenant_phone"] = data.tenant_phone or tenant.phone_number

    if not property_repo.get_property_by_id(db, data.property_id):
        raise NotFoundError(f"Property with id {data.property_id} not found")

    if data.unit_id:
        unit = unit_repo.get_unit_by_id(db, data.unit_id)
        if not unit or unit.property_id != data.property_id:
            raise NotFoundError(f"Unit with id {data.unit_id} not found")

    created = contract_repo.create_contract(db, status=ACTIVE, **fields)
    return contract_repo.get_contract_by_id(db, created.id)
