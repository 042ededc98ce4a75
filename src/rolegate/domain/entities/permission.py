"""Permission entity - ownership level of an action over a resource, bound to a role."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from uuid import UUID

from rolegate.domain.exceptions import ValidationError
from rolegate.domain.value_objects import Action, OwnershipLevel, ResourceHierarchy
from rolegate.domain.value_objects.resource_hierarchy import SEPARATOR

WILDCARD = "*"
FORMAT = "Service::OwnershipLevel::Action::{ResourceHierarchy}"


def validate_permission(value: str) -> bool:
    """Validate a permission in string format.

    Raises ValidationError naming the rule that failed.
    """
    parts = value.split(SEPARATOR)
    if len(parts) < 4:
        raise ValidationError(f"Incomplete permission. Expected format: {FORMAT}")
    OwnershipLevel.parse(parts[1])
    if any(part == "" for part in parts):
        raise ValidationError("No parts can be empty")
    return True


@dataclass(frozen=True)
class Permission:
    """Permission - role may exercise (and, as owner, grant) an action over a resource."""

    service: str
    ownership_level: OwnershipLevel
    action: Action
    resource_hierarchy: ResourceHierarchy
    id: UUID | None = None
    role_id: UUID | None = None
    alias: str | None = None

    @classmethod
    def build(cls, value: str) -> "Permission":
        """Parse Service::OwnershipLevel::Action::ResourceHierarchy."""
        validate_permission(value)
        parts = value.split(SEPARATOR)
        return cls(
            service=parts[0],
            ownership_level=OwnershipLevel(parts[1]),
            action=Action(parts[2]),
            resource_hierarchy=ResourceHierarchy(SEPARATOR.join(parts[3:])),
        )

    def bound_to(self, role_id: UUID, permission_id: UUID) -> "Permission":
        """Copy of this permission granted to role_id."""
        return replace(self, id=permission_id, role_id=role_id)

    def is_present(self, permissions: Iterable["Permission"]) -> bool:
        """Check if this permission is satisfied by any single held permission."""
        for held in permissions:
            if held.service != WILDCARD and held.service != self.service:
                continue
            if not held.action.is_all() and held.action != self.action:
                continue
            if held.ownership_level.less(self.ownership_level):
                continue
            if held.resource_hierarchy.contains(self.resource_hierarchy):
                return True
        return False

    def has_service_full_access(self) -> bool:
        """Any action over any resource hierarchy of the service."""
        return self.action.is_all() and self.resource_hierarchy.is_all()

    def has_service_full_ownership(self) -> bool:
        return self.has_service_full_access() and self.ownership_level is OwnershipLevel.OWNER

    def __str__(self) -> str:
        return SEPARATOR.join(
            (
                self.service,
                self.ownership_level.value,
                str(self.action),
                str(self.resource_hierarchy),
            )
        )


def build_permissions(
    values: Iterable[str], aliases: Mapping[str, str] | None = None
) -> list[Permission]:
    """Build all permissions or none; the first invalid string raises."""
    aliases = aliases or {}
    return [replace(Permission.build(v), alias=aliases.get(v)) for v in values]


def lender_permission(app_name: str, action: str, resource_hierarchy: str) -> str:
    """Permission string allowing action over RoleGate's own resources."""
    return SEPARATOR.join((app_name, OwnershipLevel.LENDER.value, action, resource_hierarchy))
