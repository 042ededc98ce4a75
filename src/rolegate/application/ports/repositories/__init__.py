"""Repository ports."""

from rolegate.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from rolegate.application.ports.repositories.service_account_repository import (
    ServiceAccountRepository,
)

__all__ = [
    "PermissionRepository",
    "ServiceAccountRepository",
]
