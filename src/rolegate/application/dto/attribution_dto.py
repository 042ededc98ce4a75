"""Permission attribution DTOs."""

from dataclasses import dataclass
from uuid import UUID

from rolegate.domain.entities import Permission, build_permissions


@dataclass
class PermissionsAttributeInput:
    """Grant permissions to every role in role_ids."""

    role_ids: list[UUID]
    permissions: list[Permission]
    actor_id: UUID | None = None

    @classmethod
    def from_strings(
        cls,
        role_ids: list[UUID],
        permissions: list[str],
        aliases: dict[str, str] | None = None,
        actor_id: UUID | None = None,
    ) -> "PermissionsAttributeInput":
        return cls(
            role_ids=role_ids,
            permissions=build_permissions(permissions, aliases),
            actor_id=actor_id,
        )


@dataclass
class PermissionsAttributeToEmailsInput:
    """Grant permissions to the base role of each service account in emails."""

    emails: list[str]
    permissions: list[Permission]
    actor_id: UUID | None = None

    @classmethod
    def from_strings(
        cls,
        emails: list[str],
        permissions: list[str],
        aliases: dict[str, str] | None = None,
        actor_id: UUID | None = None,
    ) -> "PermissionsAttributeToEmailsInput":
        return cls(
            emails=emails,
            permissions=build_permissions(permissions, aliases),
            actor_id=actor_id,
        )
