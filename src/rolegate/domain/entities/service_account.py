"""Service account entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class ServiceAccount:
    """Service account - principal acting through its base role and bound roles."""

    id: UUID
    name: str
    base_role_id: UUID
    email: str | None = None
    key_id: str | None = None
    key_secret: str | None = None
