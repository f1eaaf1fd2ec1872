"""A list of Facebook permissions."""

from __future__ import annotations

from collections.abc import Iterable


class FBPermissions:
    """An ordered collection of permission names."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[str]) -> None:
        self._values: tuple[str, ...] = tuple(values)

    @property
    def values(self) -> tuple[str, ...]:
        """The permission names, in order."""
        return self._values

    @classmethod
    def from_string(cls, permissions: str) -> FBPermissions:
        """Build from a comma separated list of permission names."""
        return cls(permissions.split(","))

    @staticmethod
    def difference(minuend: FBPermissions, subtrahend: FBPermissions) -> FBPermissions:
        """Permissions of ``minuend`` with one occurrence of each of ``subtrahend`` removed."""
        remaining = list(minuend.values)
        for other in subtrahend.values:
            if other in remaining:
                remaining.remove(other)
        return FBPermissions(remaining)

    def __str__(self) -> str:
        return ",".join(self._values)

    def __repr__(self) -> str:
        return f"FBPermissions({list(self._values)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FBPermissions):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)