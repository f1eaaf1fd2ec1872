"""Value converter that multiplies a number by a factor given as text."""

from __future__ import annotations

import re
from numbers import Real
from typing import Any

_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


def _parse_leading_float(text: str) -> float:
    match = _LEADING_NUMBER.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    return float(match.group(1))


class ScaleConverter:
    """Scales a numeric value by the factor passed as the converter parameter."""

    def convert(self, value: Any, target_type: Any, parameter: str, language: str | None) -> float:
        """Return ``value`` times the number at the start of ``parameter``."""
        if target_type is not float:
            raise ValueError(f"target type must be float, not {target_type!r}")
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"value must be a number, not {type(value).__name__}")
        if not isinstance(parameter, str):
            raise TypeError(f"parameter must be a string, not {type(parameter).__name__}")
        return float(value) * _parse_leading_float(parameter)

    def convert_back(self, value: Any, target_type: Any, parameter: str, language: str | None) -> float:
        """Reverse conversion is not supported."""
        raise NotImplementedError("ScaleConverter does not convert back")