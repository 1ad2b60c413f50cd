from leadhub.features.leads.models.lead_model import Lead

__all__ = ["Lead"]
