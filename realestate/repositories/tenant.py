from sqlalchemy.orm import Session, joinedload, selectinload

from realestate.db.models.contract import Contract as ContractModel
from realestate.db.models.tenant import Tenant as TenantModel

LOOKUP_COLUMNS = {
    "user_id": TenantModel.user_id,
    "phone_number": TenantModel.phone_number,
    "email": TenantModel.email,
    "national_id": TenantModel.national_id,
}


def get_tenant_by_id(db: Session, tenant_id: str) -> TenantModel | None:
    """Get a tenant by ID."""
    return db.query(TenantModel).filter(TenantModel.id == tenant_id).first()


def get_tenant_by_phone(db: Session, phone_number: str) -> TenantModel | None:
    """Get a tenant by phone number."""
    return (
        db.query(TenantModel).filter(TenantModel.phone_number == phone_number).first()
    )


def find_tenant_with_contracts(db: Session, field: str, value) -> TenantModel | None:
    """
    Find a tenant by one of its unique columns (user_id, phone_number, email, national_id).

    Loads the linked user and every contract with its property, unit and payments.
    """
    column = LOOKUP_COLUMNS[field]
    return (
        db.query(TenantModel)
        .options(
            joinedload(TenantModel.user),
            selectinload(TenantModel.contracts).options(
                joinedload(ContractModel.property),
                joinedload(ContractModel.unit),
                selectinload(ContractModel.payments),
            ),
        )
        .filter(column == value)
        .first()
    )


def find_other_tenant(
    db: Session,
    tenant_id: str | None,
    *,
    email: str | None = None,
    national_id: str | None = None,
    user_id: int | None = None,
) -> TenantModel | None:
    """Find a tenant other than ``tenant_id`` holding the given unique value."""
    query = db.query(TenantModel)
    if tenant_id is not None:
        query = query.filter(TenantModel.id != tenant_id)
    if email is not None:
        query = query.filter(TenantModel.email == email)
    if national_id is not None:
        query = query.filter(TenantModel.national_id == national_id)
    if user_id is not None:
        query = query.filter(TenantModel.user_id == user_id)
    return query.first()


def create_tenant(db: Session, **fields) -> TenantModel:
    """Create a new tenant in the database. Pure data access - no business logic."""
    db_tenant = TenantModel(**fields)
    db.add(db_tenant)
    db.commit()
    db.refresh(db_tenant)
    return db_tenant


def update_tenant(db: Session, tenant: TenantModel, **kwargs) -> TenantModel:
    """Overwrite the given columns of an already-loaded tenant."""
    for field, value in kwargs.items():
        setattr(tenant, field, value)

    db.commit()
    db.refresh(tenant)
    return tenant
