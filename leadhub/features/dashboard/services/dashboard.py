from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Sequence

from leadhub.features.dashboard.schemas.dashboard import DashboardStats
from leadhub.features.lead_magnets.schemas.lead_magnet_schema import LeadMagnetRead
from leadhub.features.leads.schemas.lead_schema import LeadRead
from leadhub.platform.storage.base import Storage

HOT_STATUS = "hot"
QUALIFIED_STATUS = "qualified"
ACTIVE_STATUS = "active"


def format_one_decimal(value: float) -> str:
    """One decimal digit, halves rounded up on the exact binary value."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    """Nearest integer; halves go towards positive infinity."""
    return int((Decimal(value) + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


def compute_dashboard_stats(
    leads: Sequence[LeadRead], magnets: Sequence[LeadMagnetRead]
) -> DashboardStats:
    total = len(leads)
    hot = sum(1 for lead in leads if lead.status == HOT_STATUS)
    qualified = sum(1 for lead in leads if lead.status == QUALIFIED_STATUS)
    active = sum(1 for magnet in magnets if magnet.status == ACTIVE_STATUS)

    if total:
        conversion_rate = format_one_decimal(qualified / total * 100)
        average_score = round_half_up(sum(lead.score for lead in leads) / total)
    else:
        conversion_rate = "0.0"
        average_score = 0

    return DashboardStats(
        total_leads=total,
        hot_leads=hot,
        conversion_rate=conversion_rate,
        active_funnels=active,
        average_score=average_score,
    )


class DashboardService:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def get_dashboard_stats(self) -> DashboardStats:
        # Recomputed on every call; cost grows linearly with leads and magnets
        leads = await self.storage.get_leads()
        magnets = await self.storage.get_lead_magnets()
        return compute_dashboard_stats(leads, magnets)
