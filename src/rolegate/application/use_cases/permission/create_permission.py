"""Create permission use case."""

import logging
from dataclasses import replace
from uuid import UUID, uuid4

from rolegate.domain.entities import Permission

logger = logging.getLogger(__name__)


class CreatePermissionUseCase:
    """Grant a single permission string to a role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, role_id: UUID, permission: str, alias: str | None = None
    ) -> Permission:
        """Parse permission and store it for role_id. Raises ValidationError on bad input."""
        template = replace(Permission.build(permission), alias=alias)
        async with self._uow_factory() as uow:
            created = await uow.permissions.create(template.bound_to(role_id, uuid4()))
        logger.info("created permission %s for role %s", created, role_id)
        return created
