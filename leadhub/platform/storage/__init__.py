from leadhub.platform.storage.base import Storage
from leadhub.platform.storage.database import DatabaseStorage
from leadhub.platform.storage.memory import MemoryStorage


def build_storage(settings) -> Storage:
    """Pick the backend named by ``settings.STORAGE_BACKEND``."""
    if settings.STORAGE_BACKEND == "memory":
        return MemoryStorage(seed=settings.SEED_SAMPLE_DATA)
    return DatabaseStorage(settings.DATABASE_URL, create_tables=settings.CREATE_TABLES_ON_STARTUP)


__all__ = ["Storage", "MemoryStorage", "DatabaseStorage", "build_storage"]
