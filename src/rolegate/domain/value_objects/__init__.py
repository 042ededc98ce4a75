"""Domain value objects."""

from rolegate.domain.value_objects.action import Action
from rolegate.domain.value_objects.ownership_level import OwnershipLevel
from rolegate.domain.value_objects.resource_hierarchy import ResourceHierarchy

__all__ = [
    "Action",
    "OwnershipLevel",
    "ResourceHierarchy",
]
