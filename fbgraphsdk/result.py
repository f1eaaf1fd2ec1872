"""Result container for Graph API calls: either a value or an error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FBError:
    """Error information reported by an SDK operation or by Facebook."""

    code: int
    error_type: str
    message: str


class FBResult:
    """Holds either a successful value or an :class:`FBError`, never both."""

    __slots__ = ("_object", "_error")

    def __init__(self, obj: Any) -> None:
        if isinstance(obj, FBError):
            self._error: FBError | None = obj
            self._object: Any = None
        else:
            self._error = None
            self._object = obj

    @property
    def succeeded(self) -> bool:
        """True when the result carries a value rather than an error."""
        return self._object is not None

    @property
    def object(self) -> Any:
        """The value carried by a successful result, else None."""
        return self._object

    @property
    def error_info(self) -> FBError | None:
        """The error carried by a failed result, else None."""
        return self._error

    def __repr__(self) -> str:
        if self._error is not None:
            return f"FBResult(error={self._error!r})"
        return f"FBResult(object={self._object!r})"