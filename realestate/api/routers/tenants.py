from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from realestate.api.deps import get_db
from realestate.schemas.tenant import Tenant, TenantDetail, TenantUpsert
from realestate.schemas.types import BigIntId
from realestate.services import tenant as tenant_service

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.get("", response_model=TenantDetail)
def find_tenant(
    user_id: BigIntId | None = Query(None, alias="userId"),
    phone_number: str | None = Query(None, alias="phoneNumber"),
    email: str | None = Query(None),
    national_id: str | None = Query(None, alias="nationalId"),
    db: Session = Depends(get_db),
):
    """
    Find a tenant by userId, phoneNumber, email or nationalId (first one given wins),
    with the linked user and all contracts.
    """
    tenant = tenant_service.find_tenant(
        db,
        user_id=user_id,
        phone_number=phone_number,
        email=email,
        national_id=national_id,
    )
    return TenantDetail.model_validate(tenant)


@router.post("", response_model=Tenant, status_code=status.HTTP_201_CREATED)
def upsert_tenant(
    tenant_data: TenantUpsert, response: Response, db: Session = Depends(get_db)
):
    """
    Create a tenant, or update the tenant registered with the same phone number.

    Returns 201 when created and 200 when an existing tenant was updated.
    Optional fields omitted from the request keep their stored values.
    """
    tenant, created = tenant_service.upsert_tenant(db, tenant_data)
    if not created:
        response.status_code = status.HTTP_200_OK
    return Tenant.model_validate(tenant)
