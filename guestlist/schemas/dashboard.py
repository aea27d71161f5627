from .common import CamelModel


class DashboardStats(CamelModel):
    total_guests: int = 0
    total_functions: int = 0
    total_expenses: float = 0.0
    total_rsvps: int = 0
