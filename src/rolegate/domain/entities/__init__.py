"""Domain entities."""

from rolegate.domain.entities.permission import (
    Permission,
    build_permissions,
    lender_permission,
    validate_permission,
)
from rolegate.domain.entities.service_account import ServiceAccount

__all__ = [
    "Permission",
    "ServiceAccount",
    "build_permissions",
    "lender_permission",
    "validate_permission",
]
