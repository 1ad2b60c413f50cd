"""
Storage contract shared by every backend.

Handlers only talk to ``Storage``; ``MemoryStorage`` and ``DatabaseStorage``
must be indistinguishable through it. Lookups that miss return ``None``,
deletes report whether a record was removed, and no operation raises for an
unknown id.
"""

from abc import ABC, abstractmethod
from typing import Optional

from leadhub.features.auth.schemas.user import UpsertUser, UserRead
from leadhub.features.lead_magnets.schemas.lead_magnet_schema import (
    LeadMagnetCreate,
    LeadMagnetRead,
    LeadMagnetUpdate,
)
from leadhub.features.leads.schemas.lead_schema import LeadCreate, LeadRead, LeadUpdate


class Storage(ABC):
    async def init(self) -> None:
        """Prepare the backend; called once at application startup."""

    async def close(self) -> None:
        """Release resources; called once at application shutdown."""

    # ── Users ───────────────────────────────────
    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[UserRead]:
        ...

    @abstractmethod
    async def upsert_user(self, user: UpsertUser) -> UserRead:
        """Insert, or overwrite the fields that were set on ``user``.

        ``updated_at`` is refreshed on every call.
        """

    # ── Leads ───────────────────────────────────
    @abstractmethod
    async def get_leads(self) -> list[LeadRead]:
        """All leads, newest ``created_at`` first (ties: highest id first)."""

    @abstractmethod
    async def get_lead(self, lead_id: int) -> Optional[LeadRead]:
        ...

    @abstractmethod
    async def create_lead(self, lead: LeadCreate) -> LeadRead:
        ...

    @abstractmethod
    async def update_lead(self, lead_id: int, changes: LeadUpdate) -> Optional[LeadRead]:
        """Apply the fields set on ``changes``.

        ``updated_at`` moves forward even when nothing else changed.
        """

    @abstractmethod
    async def delete_lead(self, lead_id: int) -> bool:
        ...

    # ── Lead magnets ────────────────────────────
    @abstractmethod
    async def get_lead_magnets(self) -> list[LeadMagnetRead]:
        ...

    @abstractmethod
    async def get_lead_magnet(self, magnet_id: int) -> Optional[LeadMagnetRead]:
        ...

    @abstractmethod
    async def create_lead_magnet(self, magnet: LeadMagnetCreate) -> LeadMagnetRead:
        ...

    @abstractmethod
    async def update_lead_magnet(
        self, magnet_id: int, changes: LeadMagnetUpdate
    ) -> Optional[LeadMagnetRead]:
        ...

    @abstractmethod
    async def delete_lead_magnet(self, magnet_id: int) -> bool:
        ...
