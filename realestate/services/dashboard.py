from sqlalchemy.orm import Session

import realestate.repositories.property as property_repo
import realestate.services.maintenance as maintenance_service
import realestate.services.payment as payment_service
from realestate.db.types import utcnow
from realestate.domain.dashboard import DashboardCalculator
from realestate.domain.statuses import ACTIVE
from realestate.schemas.dashboard import DashboardStats


def get_dashboard_stats(db: Session, owner_id: int) -> DashboardStats:
    """
    Summarize an owner's portfolio: KPIs, alerts, six-month cash flow and
    per-property occupancy.

    Missing payments or maintenance tables count as no records.
    """
    properties = property_repo.get_properties_with_units_and_contracts(db, owner_id)
    contracts = [c for prop in properties for c in prop.contracts]
    payments = payment_service.list_payments(db, owner_id)
    maintenance = maintenance_service.list_requests(db, owner_id)

    calculator = DashboardCalculator(as_of=utcnow())
    return DashboardStats.model_validate(
        {
            "kpis": {
                "total_properties": len(properties),
                "occupancy_rate": calculator.occupancy_rate(properties),
                "collected_rents": calculator.collected_rents(payments),
                "expenses": calculator.expenses(maintenance),
                "monthly_revenue": calculator.monthly_revenue(contracts),
            },
            "alerts": {
                "urgent": calculator.urgent_maintenance(maintenance),
                "due_invoices": calculator.due_invoices(payments),
            },
            "cash_flow": calculator.cash_flow(payments, maintenance),
            "properties_overview": [
                calculator.property_overview(prop) for prop in properties
            ],
            "active_contracts": sum(1 for c in contracts if c.status == ACTIVE),
        }
    )
