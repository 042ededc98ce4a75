"""Service account repository port."""

from typing import Protocol
from uuid import UUID

from rolegate.domain.entities import ServiceAccount


class ServiceAccountRepository(Protocol):
    """Port for service account lookups."""

    async def get_by_id(self, service_account_id: UUID) -> ServiceAccount | None: ...

    async def list_all(self) -> list[ServiceAccount]:
        """All service accounts, newest first."""
        ...

    async def search(self, term: str) -> list[ServiceAccount]:
        """Service accounts whose name or email contains term, newest first."""
        ...

    async def for_email(self, email: str) -> ServiceAccount | None: ...

    async def for_emails(self, emails: list[str]) -> list[ServiceAccount]:
        """Resolve every email; raises NotFound if any has no service account."""
        ...
