"""Ownership levels - holding rights over a resource."""

from enum import StrEnum

from rolegate.domain.exceptions import ValidationError


class OwnershipLevel(StrEnum):
    """Holding rights of a permission.

    OWNER can exercise the action over the resource and grant the exact same
    rights to other parties. LENDER can only exercise the action.
    """

    OWNER = "RO"
    LENDER = "RL"

    @classmethod
    def parse(cls, value: str) -> "OwnershipLevel":
        """Build an OwnershipLevel from its code, rejecting unknown codes."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationError("OwnershipLevel needs to be RO or RL") from None

    def less(self, other: "OwnershipLevel") -> bool:
        """Return True if self < other. LENDER < OWNER is the only strict pair."""
        return self is OwnershipLevel.LENDER and other is OwnershipLevel.OWNER
