from typing import Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, select

from leadhub.features.auth.models.user import User
from leadhub.features.auth.schemas.user import UpsertUser, UserRead
from leadhub.features.lead_magnets.models.lead_magnet_model import LeadMagnet
from leadhub.features.lead_magnets.schemas.lead_magnet_schema import (
    LeadMagnetCreate,
    LeadMagnetRead,
    LeadMagnetUpdate,
)
from leadhub.features.leads.models.lead_model import Lead
from leadhub.features.leads.schemas.lead_schema import LeadCreate, LeadRead, LeadUpdate
from leadhub.platform.db.base import Base
from leadhub.platform.db.session import create_engine_for, create_session_factory
from leadhub.platform.logger import get_logger
from leadhub.platform.schemas import INT_COLUMN_MAX, INT_COLUMN_MIN
from leadhub.platform.storage.base import Storage
from leadhub.platform.utils.timestamps import next_timestamp, utcnow

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _unstorable_id(record_id) -> bool:
    """Integer ids the INTEGER primary key can never hold; such rows cannot exist."""
    return isinstance(record_id, int) and not INT_COLUMN_MIN <= record_id <= INT_COLUMN_MAX


class DatabaseStorage(Storage):
    """
    SQLAlchemy-backed storage. One session per operation; each write is a
    single commit, so atomicity is whatever the database gives one statement.
    """

    def __init__(self, database_url: str, create_tables: bool = True):
        self.engine = create_engine_for(database_url)
        self.session_factory = create_session_factory(self.engine)
        self.create_tables = create_tables

    async def init(self) -> None:
        if self.create_tables:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables ensured")

    async def close(self) -> None:
        await self.engine.dispose()

    # ── Generic row helpers ─────────────────────
    async def _list(self, model, schema: type[RecordT]) -> list[RecordT]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(model).order_by(model.created_at.desc(), model.id.desc())
            )
            return [schema.model_validate(row) for row in result.scalars().all()]

    async def _get(self, model, schema: type[RecordT], record_id) -> Optional[RecordT]:
        if _unstorable_id(record_id):
            return None
        async with self.session_factory() as session:
            row = await session.get(model, record_id)
            return schema.model_validate(row) if row is not None else None

    async def _create(self, model, schema: type[RecordT], data: BaseModel) -> RecordT:
        async with self.session_factory() as session:
            now = utcnow()
            row = model(created_at=now, updated_at=now, **data.model_dump())
            session.add(row)
            try:
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            await session.refresh(row)
            return schema.model_validate(row)

    async def _update(
        self, model, schema: type[RecordT], record_id, changes: BaseModel
    ) -> Optional[RecordT]:
        if _unstorable_id(record_id):
            return None
        async with self.session_factory() as session:
            row = await session.get(model, record_id)
            if row is None:
                return None
            for field, value in changes.model_dump(exclude_unset=True).items():
                setattr(row, field, value)
            row.updated_at = next_timestamp(row.updated_at)
            try:
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            await session.refresh(row)
            return schema.model_validate(row)

    async def _delete(self, model, record_id) -> bool:
        if _unstorable_id(record_id):
            return False
        async with self.session_factory() as session:
            result = await session.execute(delete(model).where(model.id == record_id))
            await session.commit()
            return (result.rowcount or 0) > 0

    # ── Users ───────────────────────────────────
    async def get_user(self, user_id: str) -> Optional[UserRead]:
        return await self._get(User, UserRead, user_id)

    async def upsert_user(self, user: UpsertUser) -> UserRead:
        values = user.model_dump(exclude_unset=True, exclude={"id"})
        async with self.session_factory() as session:
            row = await session.get(User, user.id)
            if row is None:
                now = utcnow()
                row = User(id=user.id, created_at=now, updated_at=now, **values)
                session.add(row)
            else:
                for field, value in values.items():
                    setattr(row, field, value)
                row.updated_at = next_timestamp(row.updated_at)
            try:
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            await session.refresh(row)
            return UserRead.model_validate(row)

    # ── Leads ───────────────────────────────────
    async def get_leads(self) -> list[LeadRead]:
        return await self._list(Lead, LeadRead)

    async def get_lead(self, lead_id: int) -> Optional[LeadRead]:
        return await self._get(Lead, LeadRead, lead_id)

    async def create_lead(self, lead: LeadCreate) -> LeadRead:
        return await self._create(Lead, LeadRead, lead)

    async def update_lead(self, lead_id: int, changes: LeadUpdate) -> Optional[LeadRead]:
        return await self._update(Lead, LeadRead, lead_id, changes)

    async def delete_lead(self, lead_id: int) -> bool:
        return await self._delete(Lead, lead_id)

    # ── Lead magnets ────────────────────────────
    async def get_lead_magnets(self) -> list[LeadMagnetRead]:
        return await self._list(LeadMagnet, LeadMagnetRead)

    async def get_lead_magnet(self, magnet_id: int) -> Optional[LeadMagnetRead]:
        return await self._get(LeadMagnet, LeadMagnetRead, magnet_id)

    async def create_lead_magnet(self, magnet: LeadMagnetCreate) -> LeadMagnetRead:
        return await self._create(LeadMagnet, LeadMagnetRead, magnet)

    async def update_lead_magnet(
        self, magnet_id: int, changes: LeadMagnetUpdate
    ) -> Optional[LeadMagnetRead]:
        return await self._update(LeadMagnet, LeadMagnetRead, magnet_id, changes)

    async def delete_lead_magnet(self, magnet_id: int) -> bool:
        return await self._delete(LeadMagnet, magnet_id)
