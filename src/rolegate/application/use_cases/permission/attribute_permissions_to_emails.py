"""Attribute permissions to service accounts by email use case."""

import logging

from rolegate.application.dto.attribution_dto import PermissionsAttributeToEmailsInput
from rolegate.application.ports import PermissionChecker
from rolegate.application.use_cases.authorization import ensure_actor_owns
from rolegate.application.use_cases.permission.attribute_permissions import (
    write_cross_product,
)
from rolegate.domain.entities import Permission

logger = logging.getLogger(__name__)


class AttributePermissionsToEmailsUseCase:
    """Grant a batch of permissions to the base roles of service accounts."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, input_data: PermissionsAttributeToEmailsInput) -> list[Permission]:
        """Resolve emails to base roles, then write base roles x permissions.

        An email without a service account raises NotFound before any write.
        """
        if input_data.actor_id is not None:
            await ensure_actor_owns(
                self._permission_checker, input_data.actor_id, input_data.permissions
            )

        async with self._uow_factory() as uow:
            accounts = await uow.service_accounts.for_emails(input_data.emails)
            role_ids = [sa.base_role_id for sa in accounts]
            created = await write_cross_product(uow, role_ids, input_data.permissions)

        logger.info(
            "attributed %d permissions to %d service accounts",
            len(input_data.permissions),
            len(accounts),
        )
        return created
