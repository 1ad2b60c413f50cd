from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from leadhub.features.auth.schemas.user import UpsertUser, UserRead
from leadhub.features.lead_magnets.schemas.lead_magnet_schema import (
    LeadMagnetCreate,
    LeadMagnetRead,
    LeadMagnetUpdate,
)
from leadhub.features.leads.schemas.lead_schema import LeadCreate, LeadRead, LeadUpdate
from leadhub.platform.logger import get_logger
from leadhub.platform.storage.base import Storage
from leadhub.platform.storage.sample_data import SAMPLE_LEAD_MAGNETS, SAMPLE_LEADS
from leadhub.platform.utils.timestamps import next_timestamp, utcnow
from leadhub.platform.validation import validate_create

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class _Table(Generic[RecordT]):
    """Integer-keyed records with their own id sequence starting at 1."""

    def __init__(self, record_schema: type[RecordT]):
        self.record_schema = record_schema
        self.rows: dict[int, RecordT] = {}
        self.next_id = 1

    def list(self) -> list[RecordT]:
        rows = sorted(self.rows.values(), key=lambda row: (row.created_at, row.id), reverse=True)
        return [row.model_copy(deep=True) for row in rows]

    def get(self, record_id: int) -> Optional[RecordT]:
        row = self.rows.get(record_id)
        return row.model_copy(deep=True) if row is not None else None

    def insert(self, data: BaseModel) -> RecordT:
        record_id = self.next_id
        self.next_id += 1
        now = utcnow()
        row = self.record_schema(id=record_id, created_at=now, updated_at=now, **data.model_dump())
        self.rows[record_id] = row
        return row.model_copy(deep=True)

    def update(self, record_id: int, changes: BaseModel) -> Optional[RecordT]:
        current = self.rows.get(record_id)
        if current is None:
            return None
        values = changes.model_dump(exclude_unset=True)
        values["updated_at"] = next_timestamp(current.updated_at)
        row = current.model_copy(update=values, deep=True)
        self.rows[record_id] = row
        return row.model_copy(deep=True)

    def delete(self, record_id: int) -> bool:
        return self.rows.pop(record_id, None) is not None


class MemoryStorage(Storage):
    """
    Process-local storage for tests and bootstrapping.

    Not safe under concurrent mutation: id counters and read-modify-write
    updates are unguarded.
    """

    def __init__(self, seed: bool = True):
        self.users: dict[str, UserRead] = {}
        self.leads: _Table[LeadRead] = _Table(LeadRead)
        self.lead_magnets: _Table[LeadMagnetRead] = _Table(LeadMagnetRead)
        if seed:
            self._seed_sample_data()

    def _seed_sample_data(self) -> None:
        for payload in SAMPLE_LEADS:
            self.leads.insert(validate_create(payload, LeadCreate))
        for payload in SAMPLE_LEAD_MAGNETS:
            self.lead_magnets.insert(validate_create(payload, LeadMagnetCreate))
        logger.info(
            "Seeded in-memory storage with %d leads and %d lead magnets",
            len(SAMPLE_LEADS),
            len(SAMPLE_LEAD_MAGNETS),
        )

    async def get_user(self, user_id: str) -> Optional[UserRead]:
        user = self.users.get(user_id)
        return user.model_copy(deep=True) if user is not None else None

    async def upsert_user(self, user: UpsertUser) -> UserRead:
        values = user.model_dump(exclude_unset=True)
        existing = self.users.get(user.id)
        if existing is not None:
            values["updated_at"] = next_timestamp(existing.updated_at)
            stored = existing.model_copy(update=values)
        else:
            now = utcnow()
            stored = UserRead(created_at=now, updated_at=now, **values)
        self.users[user.id] = stored
        return stored.model_copy(deep=True)

    async def get_leads(self) -> list[LeadRead]:
        return self.leads.list()

    async def get_lead(self, lead_id: int) -> Optional[LeadRead]:
        return self.leads.get(lead_id)

    async def create_lead(self, lead: LeadCreate) -> LeadRead:
        return self.leads.insert(lead)

    async def update_lead(self, lead_id: int, changes: LeadUpdate) -> Optional[LeadRead]:
        return self.leads.update(lead_id, changes)

    async def delete_lead(self, lead_id: int) -> bool:
        return self.leads.delete(lead_id)

    async def get_lead_magnets(self) -> list[LeadMagnetRead]:
        return self.lead_magnets.list()

    async def get_lead_magnet(self, magnet_id: int) -> Optional[LeadMagnetRead]:
        return self.lead_magnets.get(magnet_id)

    async def create_lead_magnet(self, magnet: LeadMagnetCreate) -> LeadMagnetRead:
        return self.lead_magnets.insert(magnet)

    async def update_lead_magnet(
        self, magnet_id: int, changes: LeadMagnetUpdate
    ) -> Optional[LeadMagnetRead]:
        return self.lead_magnets.update(magnet_id, changes)

    async def delete_lead_magnet(self, magnet_id: int) -> bool:
        return self.lead_magnets.delete(magnet_id)
