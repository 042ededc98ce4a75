"""Action performed by a service account, defined by RoleGate clients."""

from dataclasses import dataclass

WILDCARD = "*"


@dataclass(frozen=True)
class Action:
    """Opaque action name. "*" matches any action."""

    value: str

    def is_all(self) -> bool:
        return self.value == WILDCARD

    def __str__(self) -> str:
        return self.value
