"""Permission checker port - authorization decisions."""

from typing import Protocol
from uuid import UUID

from rolegate.domain.entities import Permission


class PermissionChecker(Protocol):
    """Port for checking whether a service account holds permissions."""

    async def check(self, service_account_id: UUID, permission: Permission) -> bool: ...

    async def missing(
        self, service_account_id: UUID, permissions: list[Permission]
    ) -> list[Permission]:
        """Permissions the service account does not hold, from one load of its grants."""
        ...
