"""Colours in hue/luminosity/saturation form, convertible to and from RGB."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            channel = getattr(self, name)
            if not 0 <= channel <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {channel}")


def _to_byte(fraction: float) -> int:
    return min(255, max(0, int(fraction * 255)))


def _transform_color(t1: float, t2: float, t3: float) -> float:
    if t3 < 0:
        t3 += 1.0
    if t3 > 1:
        t3 -= 1.0

    if 6.0 * t3 < 1:
        return t2 + (t1 - t2) * 6.0 * t3
    if 2.0 * t3 < 1:
        return t1
    if 3.0 * t3 < 2:
        return t2 + (t1 - t2) * ((2.0 / 3.0) - t3) * 6.0
    return t2


@dataclass
class HlsColor:
    """A colour as hue (degrees), luminosity, saturation and alpha (all 0..1)."""

    hue: float = 0.0
    luminosity: float = 0.0
    saturation: float = 0.0
    alpha: float = 1.0

    @classmethod
    def from_rgb(cls, color: Color) -> HlsColor:
        """Build from an RGBA colour."""
        red = color.r / 255.0
        green = color.g / 255.0
        blue = color.b / 255.0
        alpha = color.a / 255.0

        smallest = min(red, green, blue)
        largest = max(red, green, blue)
        delta = largest - smallest

        if largest == smallest:
            return cls(hue=0.0, luminosity=largest, saturation=0.0, alpha=alpha)

        luminosity = (smallest + largest) / 2.0
        if luminosity < 0.5:
            saturation = delta / (largest + smallest)
        else:
            saturation = delta / (2.0 - largest - smallest)

        if red == largest:
            hue = (green - blue) / delta
        elif green == largest:
            hue = 2.0 + (blue - red) / delta
        else:
            hue = 4.0 + (red - green) / delta

        hue *= 60
        if hue < 0:
            hue += 360

        return cls(hue=hue, luminosity=luminosity, saturation=saturation, alpha=alpha)

    def to_rgb(self) -> Color:
        """Convert to an RGBA colour, truncating each channel to a byte."""
        lum, sat = self.luminosity, self.saturation
        alpha = _to_byte(self.alpha)

        if sat == 0:
            grey = _to_byte(lum)
            return Color(grey, grey, grey, alpha)

        if lum < 0.5:
            t1 = lum * (1.0 + sat)
        else:
            t1 = lum + sat - lum * sat
        t2 = 2.0 * lum - t1
        h = self.hue / 360

        red = _transform_color(t1, t2, h + 1.0 / 3.0)
        green = _transform_color(t1, t2, h)
        blue = _transform_color(t1, t2, h - 1.0 / 3.0)

        return Color(_to_byte(red), _to_byte(green), _to_byte(blue), alpha)