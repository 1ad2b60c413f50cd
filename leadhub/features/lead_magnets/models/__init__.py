from leadhub.features.lead_magnets.models.lead_magnet_model import LeadMagnet

__all__ = ["LeadMagnet"]
