"""List service accounts use case."""

from uuid import UUID

from rolegate.application.ports import PermissionChecker
from rolegate.application.use_cases.authorization import ensure_actor_may
from rolegate.domain.entities import ServiceAccount


class ListServiceAccountsUseCase:
    """List service accounts, optionally filtered by a name or email fragment."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        app_name: str,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._app_name = app_name

    async def execute(
        self, term: str | None = None, actor_id: UUID | None = None
    ) -> list[ServiceAccount]:
        """When actor_id is given it must hold <app_name>::RL::ListServiceAccounts::*."""
        if actor_id is not None:
            await ensure_actor_may(
                self._permission_checker, self._app_name, actor_id, "ListServiceAccounts"
            )
        async with self._uow_factory() as uow:
            if term:
                return await uow.service_accounts.search(term)
            return await uow.service_accounts.list_all()
