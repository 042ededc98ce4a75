"""Attribute permissions to roles use case."""

import logging
from uuid import UUID, uuid4

from rolegate.application.dto.attribution_dto import PermissionsAttributeInput
from rolegate.application.ports import PermissionChecker, UnitOfWork
from rolegate.application.use_cases.authorization import ensure_actor_owns
from rolegate.domain.entities import Permission

logger = logging.getLogger(__name__)


async def write_cross_product(
    uow: UnitOfWork, role_ids: list[UUID], permissions: list[Permission]
) -> list[Permission]:
    """Create one copy of every permission for every role."""
    created = []
    for role_id in role_ids:
        for permission in permissions:
            created.append(await uow.permissions.create(permission.bound_to(role_id, uuid4())))
    return created


class AttributePermissionsUseCase:
    """Grant a batch of permissions to several roles as one transaction."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, input_data: PermissionsAttributeInput) -> list[Permission]:
        """Write roles x permissions. Any failure rolls back the whole batch."""
        if input_data.actor_id is not None:
            await ensure_actor_owns(
                self._permission_checker, input_data.actor_id, input_data.permissions
            )

        async with self._uow_factory() as uow:
            created = await write_cross_product(
                uow, input_data.role_ids, input_data.permissions
            )

        logger.info(
            "attributed %d permissions to %d roles",
            len(input_data.permissions),
            len(input_data.role_ids),
        )
        return created
