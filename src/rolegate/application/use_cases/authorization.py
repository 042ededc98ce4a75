"""Actor checks shared by use cases."""

import logging
from dataclasses import replace
from uuid import UUID

from rolegate.application.ports import PermissionChecker
from rolegate.domain.entities import Permission, lender_permission
from rolegate.domain.exceptions import PermissionDenied
from rolegate.domain.value_objects import OwnershipLevel

logger = logging.getLogger(__name__)


async def ensure_actor_owns(
    permission_checker: PermissionChecker,
    actor_id: UUID,
    permissions: list[Permission],
) -> None:
    """Actor must hold every permission as owner to grant it to others."""
    owned = [replace(p, ownership_level=OwnershipLevel.OWNER) for p in permissions]
    missing = await permission_checker.missing(actor_id, owned)
    if missing:
        logger.warning("actor %s cannot grant %s", actor_id, missing[0])
        raise PermissionDenied(f"Service account does not own {missing[0]}")


async def ensure_actor_may(
    permission_checker: PermissionChecker,
    app_name: str,
    actor_id: UUID,
    action: str,
    resource_hierarchy: str = "*",
) -> None:
    """Actor must hold RoleGate's own app_name::RL::action::resource_hierarchy."""
    required = Permission.build(lender_permission(app_name, action, resource_hierarchy))
    if not await permission_checker.check(actor_id, required):
        logger.warning("actor %s lacks %s", actor_id, required)
        raise PermissionDenied(f"Service account lacks {required}")
