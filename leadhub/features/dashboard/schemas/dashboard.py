from pydantic import Field

from leadhub.platform.schemas import CamelModel


class DashboardStats(CamelModel):
    total_leads: int
    hot_leads: int
    conversion_rate: str = Field(..., description="Qualified share of leads in percent, one decimal digit")
    active_funnels: int
    average_score: int
