"""Resource hierarchy - complete or open path to a resource.

Complete: maestro::sniper-3d::na::sniper3d-red
Open: maestro::sniper-3d::stag::*
"""

from dataclasses import dataclass

SEPARATOR = "::"
WILDCARD = "*"


@dataclass(frozen=True)
class ResourceHierarchy:
    """Colon-segmented path where a "*" segment matches everything below it."""

    value: str

    @property
    def segments(self) -> list[str]:
        return self.value.split(SEPARATOR)

    def is_all(self) -> bool:
        return self.value == WILDCARD

    def permission_matches(self) -> list[str]:
        """All hierarchies a stored permission could use to match this one.

        Ordered from least to most specific:
        "x::y::z" -> ["*", "x::*", "x::y::*", "x::y::z"]
        """
        if self.is_all():
            return [self.value]
        parts = self.segments
        matches = [WILDCARD]
        for i in range(1, len(parts)):
            if parts[i] == WILDCARD:
                break
            matches.append(SEPARATOR.join(parts[:i]) + SEPARATOR + WILDCARD)
        matches.append(self.value)
        return matches

    def contains(self, other: "ResourceHierarchy") -> bool:
        """Check whether this hierarchy contains other.

        A wildcard segment absorbs everything at and below its depth, so
        "a::*" contains "a::b::c" while "a::b" does not.
        """
        mine = self.segments
        theirs = other.segments
        if len(mine) > len(theirs):
            return False
        for i, segment in enumerate(theirs):
            if i >= len(mine):
                return False
            if mine[i] == WILDCARD:
                return True
            if segment != mine[i]:
                return False
        return True

    def __str__(self) -> str:
        return self.value
