"""Load the sample leads and lead magnets into the configured database."""
import asyncio

from leadhub.features.lead_magnets.schemas.lead_magnet_schema import LeadMagnetCreate
from leadhub.features.leads.schemas.lead_schema import LeadCreate
from leadhub.platform.config import settings
from leadhub.platform.storage import DatabaseStorage
from leadhub.platform.storage.sample_data import SAMPLE_LEAD_MAGNETS, SAMPLE_LEADS
from leadhub.platform.validation import validate_create


async def seed_data():
    storage = DatabaseStorage(settings.DATABASE_URL, create_tables=True)
    await storage.init()
    try:
        for payload in SAMPLE_LEADS:
            lead = await storage.create_lead(validate_create(payload, LeadCreate))
            print(f"Lead {lead.id}: {lead.name}")
        for payload in SAMPLE_LEAD_MAGNETS:
            magnet = await storage.create_lead_magnet(validate_create(payload, LeadMagnetCreate))
            print(f"Lead magnet {magnet.id}: {magnet.title}")
    finally:
        await storage.close()


if __name__ == "__main__":
    asyncio.run(seed_data())
