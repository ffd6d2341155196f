"""Depth-dependent colours for directory and file boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

Color = tuple[float, float, float]

_DIR_BASE: Color = (0xB6 / 256.0, 0xD4 / 256.0, 0xF2 / 256.0)
_FILE_BASE: Color = (0xF4 / 256.0, 0xB9 / 256.0, 0xD1 / 256.0)
_SHADES = 5
_DARKEN_STEP = 0.87

_RAD_60 = math.pi / 3.0
_RAD_120 = math.pi * (2.0 / 3.0)
_RAD_180 = math.pi
_RAD_240 = math.pi + math.pi / 3.0
_RAD_300 = math.pi + math.pi * (2.0 / 3.0)
_RAD_360 = 2.0 * math.pi


@dataclass(frozen=True)
class RGBA:
    red: float
    green: float
    blue: float
    alpha: float = 1.0


@dataclass
class HSL:
    """Hue in radians, saturation and lightness in 0..1."""

    hue: float
    saturation: float
    lightness: float

    @classmethod
    def from_rgb(cls, color: Color) -> HSL:
        r, g, b = color
        high = max(r, g, b)
        low = min(r, g, b)
        d = high - low
        lightness = (high + low) / 2.0
        norm = math.sqrt(r * r + g * g + b * b - r * g - r * b - g * b)
        denom = 1.0 - abs(2.0 * lightness - 1.0)
        if norm == 0.0 or denom == 0.0:
            raise ValueError(f"colour has no defined hue: {color!r}")
        ratio = max(-1.0, min(1.0, (r - g / 2.0 - b / 2.0) / norm))
        angle = math.acos(ratio)
        hue = angle if g >= b else 2.0 * math.pi - angle
        return cls(hue=hue, saturation=d / denom, lightness=lightness)

    def to_rgb(self) -> Color:
        d = self.saturation * (1.0 - abs(2.0 * self.lightness - 1.0))
        m = self.lightness - d / 2.0
        x = d * (1.0 - abs((self.hue / _RAD_60) % 2.0 - 1.0))
        hue = self.hue
        if 0.0 <= hue < _RAD_60:
            return (d + m, x + m, m)
        if _RAD_60 <= hue < _RAD_120:
            return (x + m, d + m, m)
        if _RAD_120 <= hue < _RAD_180:
            return (m, d + m, x + m)
        if _RAD_180 <= hue < _RAD_240:
            return (m, x + m, d + m)
        if _RAD_240 <= hue < _RAD_300:
            return (x + m, m, d + m)
        if _RAD_300 <= hue <= _RAD_360:
            return (d + m, m, x + m)
        raise ValueError(f"hue out of range: {hue}")


def darken(ratio: float, color: Color) -> Color:
    """Scale the colour's lightness and saturation by ``ratio``."""
    hsl = HSL.from_rgb(color)
    hsl.lightness *= ratio
    hsl.saturation *= ratio
    return hsl.to_rgb()


def _shades(base: Color) -> tuple[RGBA, ...]:
    return tuple(RGBA(*darken(_DARKEN_STEP**depth, base)) for depth in range(_SHADES))


_DIR_COLORS = _shades(_DIR_BASE)
_FILE_COLORS = _shades(_FILE_BASE)


def depth_dir_color(depth: int) -> RGBA:
    return _DIR_COLORS[depth % _SHADES]


def depth_file_color(depth: int) -> RGBA:
    return _FILE_COLORS[depth % _SHADES]