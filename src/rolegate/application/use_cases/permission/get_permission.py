"""Get permission use case."""

from uuid import UUID

from rolegate.application.ports import PermissionChecker
from rolegate.application.use_cases.authorization import ensure_actor_may
from rolegate.domain.entities import Permission
from rolegate.domain.exceptions import NotFound


class GetPermissionUseCase:
    """Load a stored permission by id."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        app_name: str,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._app_name = app_name

    async def execute(self, permission_id: UUID, actor_id: UUID | None = None) -> Permission:
        """When actor_id is given it must hold <app_name>::RL::GetPermission::*."""
        if actor_id is not None:
            await ensure_actor_may(
                self._permission_checker, self._app_name, actor_id, "GetPermission"
            )
        async with self._uow_factory() as uow:
            permission = await uow.permissions.get_by_id(permission_id)
        if not permission:
            raise NotFound("Permission", str(permission_id))
        return permission
