from realestate.schemas.base import CamelModel


class DashboardKpis(CamelModel):
    total_properties: int
    occupancy_rate: int
    collected_rents: float
    expenses: float
    monthly_revenue: float


class DashboardAlerts(CamelModel):
    urgent: int
    due_invoices: int


class CashFlowMonth(CamelModel):
    month: str
    income: float
    expenses: float
    net: float


class PropertyOverview(CamelModel):
    id: str
    name: str
    units: int
    occupancy: int
    monthly_revenue: float
    status: str


class DashboardStats(CamelModel):
    kpis: DashboardKpis
    alerts: DashboardAlerts
    cash_flow: list[CashFlowMonth]
    properties_overview: list[PropertyOverview]
    active_contracts: int
