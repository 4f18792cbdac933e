"""Owner dashboard figures computed from already-loaded records."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from realestate.domain.statuses import (
    ACTIVE,
    MAINTENANCE_COMPLETED,
    MAINTENANCE_OPEN,
    PAYMENT_DUE,
    PAYMENT_PAID,
    PAYMENT_TYPE_RENT,
    PRIORITY_URGENT,
    UNIT_RENTED,
)

DUE_SOON_DAYS = 5
CASH_FLOW_MONTHS = 6

RATING_EXCELLENT = "ممتاز"
RATING_GOOD = "جيد"
RATING_AVERAGE = "متوسط"


def percentage(part: int, whole: int) -> int:
    """Percentage rounded half up, 0 when there is nothing to measure."""
    if whole <= 0:
        return 0
    return math.floor(part * 100 / whole + 0.5)


def occupancy_rating(occupancy: int) -> str:
    if occupancy >= 95:
        return RATING_EXCELLENT
    if occupancy >= 80:
        return RATING_GOOD
    return RATING_AVERAGE


def month_start(moment: datetime, months_back: int) -> datetime:
    """First instant of the month ``months_back`` months before ``moment``."""
    index = moment.year * 12 + (moment.month - 1) - months_back
    return datetime(index // 12, index % 12 + 1, 1)


def is_collected_rent(payment) -> bool:
    return payment.type == PAYMENT_TYPE_RENT and payment.status == PAYMENT_PAID


def is_paid_expense(request) -> bool:
    return request.status == MAINTENANCE_COMPLETED and bool(request.cost)


@dataclass(frozen=True, slots=True)
class DashboardCalculator:
    """Computes dashboard figures "as of" a given moment."""

    as_of: datetime

    def occupancy_rate(self, properties) -> int:
        units = [unit for prop in properties for unit in prop.units]
        rented = [unit for unit in units if unit.status == UNIT_RENTED]
        return percentage(len(rented), len(units))

    def collected_rents(self, payments) -> float:
        return sum(p.amount for p in payments if is_collected_rent(p))

    def expenses(self, maintenance) -> float:
        return sum(m.cost for m in maintenance if is_paid_expense(m))

    def monthly_revenue(self, contracts) -> float:
        return sum(c.monthly_rent for c in contracts if c.status == ACTIVE)

    def urgent_maintenance(self, maintenance) -> int:
        return sum(
            1
            for m in maintenance
            if m.priority == PRIORITY_URGENT and m.status in MAINTENANCE_OPEN
        )

    def due_invoices(self, payments) -> int:
        horizon = self.as_of + timedelta(days=DUE_SOON_DAYS)
        return sum(
            1
            for p in payments
            if p.status == PAYMENT_DUE and self.as_of <= p.due_date <= horizon
        )

    def cash_flow(self, payments, maintenance) -> list[dict]:
        months = []
        for months_back in range(CASH_FLOW_MONTHS - 1, -1, -1):
            start = month_start(self.as_of, months_back)
            end = month_start(self.as_of, months_back - 1)
            income = sum(
                p.amount
                for p in payments
                if is_collected_rent(p) and start <= p.due_date < end
            )
            spent = sum(
                m.cost
                for m in maintenance
                if is_paid_expense(m) and start <= m.updated_at < end
            )
            months.append(
                {
                    "month": start.strftime("%Y-%m"),
                    "income": income,
                    "expenses": spent,
                    "net": income - spent,
                }
            )
        return months

    def property_overview(self, prop) -> dict:
        rented = sum(1 for unit in prop.units if unit.status == UNIT_RENTED)
        occupancy = percentage(rented, len(prop.units))
        return {
            "id": prop.id,
            "name": prop.name,
            "units": len(prop.units),
            "occupancy": occupancy,
            "monthly_revenue": self.monthly_revenue(prop.contracts),
            "status": occupancy_rating(occupancy),
        }
