import logging

from sqlalchemy.orm import Session

import realestate.repositories.tenant as tenant_repo
from realestate.db.models.tenant import Tenant as TenantModel
from realestate.domain.statuses import ACTIVE
from realestate.errors import DomainValidationError, DuplicateResourceError, NotFoundError
from realestate.schemas.tenant import TenantUpsert

logger = logging.getLogger(__name__)

# Optional fields that keep their stored value when the request omits them
FALLBACK_FIELDS = (
    "email",
    "national_id",
    "city",
    "address",
    "emergency_contact",
    "emergency_phone",
    "user_id",
    "notes",
)


def find_tenant(
    db: Session,
    user_id: int | None = None,
    phone_number: str | None = None,
    email: str | None = None,
    national_id: str | None = None,
) -> TenantModel:
    """
    Look a tenant up by the first given key, in order: userId, phoneNumber, email, nationalId.

    Raises:
        DomainValidationError: If no lookup key is given
        NotFoundError: If no tenant matches
    """
    lookups = (
        ("user_id", user_id),
        ("phone_number", phone_number),
        ("email", email),
        ("national_id", national_id),
    )
    for field, value in lookups:
        if value is not None:
            tenant = tenant_repo.find_tenant_with_contracts(db, field, value)
            if not tenant:
                raise NotFoundError("Tenant not found")
            return tenant

    raise DomainValidationError("phoneNumber, email, nationalId or userId is required")


def ensure_unique_values(
    db: Session,
    tenant_id: str | None,
    email: str | None,
    national_id: str | None,
    user_id: int | None,
) -> None:
    """
    Check the unique tenant columns before a write.

    Raises:
        DuplicateResourceError: If another tenant already holds the email, national ID or user
    """
    if email and tenant_repo.find_other_tenant(db, tenant_id, email=email):
        raise DuplicateResourceError("Email already in use")
    if national_id and tenant_repo.find_other_tenant(db, tenant_id, national_id=national_id):
        raise DuplicateResourceError("National ID already in use")
    if user_id is not None and tenant_repo.find_other_tenant(db, tenant_id, user_id=user_id):
        raise DuplicateResourceError("User is already linked to another tenant")


def upsert_tenant(db: Session, data: TenantUpsert) -> tuple[TenantModel, bool]:
    """
    Create a tenant, or update the one already registered with the same phone number.

    On update the names are overwritten and every other field keeps its
    stored value unless the request provides a new one.

    Returns:
        (tenant, created)

    Raises:
        DuplicateResourceError: If the email, national ID or user belongs to another tenant
    """
    existing = tenant_repo.get_tenant_by_phone(db, data.phone_number)
    if existing:
        changes = {"first_name": data.first_name, "last_name": data.last_name}
        for field in FALLBACK_FIELDS:
            value = getattr(data, field)
            changes[field] = value if value is not None else getattr(existing, field)
        ensure_unique_values(
            db,
            existing.id,
            changes["email"],
            changes["national_id"],
            changes["user_id"],
        )
        tenant = tenant_repo.update_tenant(db, existing, **changes)
        logger.info("Updated tenant %s matched by phone number", tenant.id)
        return tenant, False

    ensure_unique_values(db, None, data.email, data.national_id, data.user_id)
    tenant = tenant_repo.create_tenant(db, status=ACTIVE, **data.model_dump())
    logger.info("Created tenant %s", tenant.id)
    return tenant, True
