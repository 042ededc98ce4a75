"""Permission repository port."""

from typing import Protocol
from uuid import UUID

from rolegate.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for permission persistence."""

    async def get_by_id(self, permission_id: UUID) -> Permission | None: ...

    async def list_by_role(self, role_id: UUID) -> list[Permission]: ...

    async def list_for_service_account(self, service_account_id: UUID) -> list[Permission]: ...

    async def create(self, permission: Permission) -> Permission: ...

    async def delete(self, permission_id: UUID) -> None: ...
