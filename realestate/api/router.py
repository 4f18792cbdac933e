from fastapi import APIRouter

from realestate.api.routers import (
    auth,
    contracts,
    dashboard,
    maintenance,
    payments,
    properties,
    ratings,
    tenants,
    users,
    visit_appointments,
)

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(properties.router)
api_router.include_router(contracts.router)
api_router.include_router(payments.router)
api_router.include_router(maintenance.router)
api_router.include_router(visit_appointments.router)
api_router.include_router(ratings.router)
api_router.include_router(tenants.router)
api_router.include_router(dashboard.router)
