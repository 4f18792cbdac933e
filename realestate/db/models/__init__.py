from realestate.db.models.user import User
from realestate.db.models.property import Property
from realestate.db.models.unit import Unit
from realestate.db.models.tenant import Tenant
from realestate.db.models.contract import Contract
from realestate.db.models.payment import Payment
from realestate.db.models.maintenance_request import MaintenanceRequest
from realestate.db.models.visit_appointment import PropertyVisitAppointment
from realestate.db.models.rating import PropertyRating

__all__ = [
    "User",
    "Property",
    "Unit",
    "Tenant",
    "Contract",
    "Payment",
    "MaintenanceRequest",
    "PropertyVisitAppointment",
    "PropertyRating",
]
