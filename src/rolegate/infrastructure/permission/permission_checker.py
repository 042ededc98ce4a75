"""Permission checker implementation - checks against a service account's held permissions."""

from uuid import UUID

from rolegate.domain.entities import Permission


class RoleGatePermissionChecker:
    """Checks service account permissions against its roles' grants."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def _held(self, service_account_id: UUID) -> list[Permission]:
        async with self._uow_factory() as uow:
            return await uow.permissions.list_for_service_account(service_account_id)

    async def check(self, service_account_id: UUID, permission: Permission) -> bool:
        """Check if service account holds permission."""
        return permission.is_present(await self._held(service_account_id))

    async def check_string(self, service_account_id: UUID, permission: str) -> bool:
        """Check a permission given in Service::OwnershipLevel::Action::ResourceHierarchy form."""
        return await self.check(service_account_id, Permission.build(permission))

    async def missing(
        self, service_account_id: UUID, permissions: list[Permission]
    ) -> list[Permission]:
        """Permissions not held by the service account; its grants are loaded once."""
        held = await self._held(service_account_id)
        return [p for p in permissions if not p.is_present(held)]
