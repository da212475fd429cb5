"""Static lookup tables from CSS values to Tailwind tokens.

Every lookup returns ``None`` on a miss; callers build an arbitrary-value
class (``mt-[13px]``) with :func:`arbitrary` instead.
"""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)

_PIXEL_RE = re.compile(r"^\s*(-?\d+)px\s*$", re.IGNORECASE)


class ScaleTable(Generic[K]):
    """Immutable, ordered mapping from a normalized key to a token."""

    def __init__(self, name: str, entries: Mapping[K, str]) -> None:
        self.name = name
        self._entries: Mapping[K, str] = MappingProxyType(dict(entries))

    def lookup(self, key: K) -> str | None:
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def items(self):
        return self._entries.items()

    def __repr__(self) -> str:
        return f"ScaleTable({self.name!r}, {len(self)} entries)"


SPACING = ScaleTable[int]("spacing", {
    0: "0",
    1: "px",
    4: "1",
    8: "2",
    12: "3",
    16: "4",
    20: "5",
    24: "6",
    32: "8",
    40: "10",
    48: "12",
    64: "16",
    80: "20",
    96: "24",
    128: "32",
    160: "40",
    192: "48",
    224: "56",
    256: "64",
})

TYPE_SCALE = ScaleTable[int]("type-scale", {
    12: "xs",
    14: "sm",
    16: "base",
    18: "lg",
    20: "xl",
    24: "2xl",
    30: "3xl",
    36: "4xl",
    48: "5xl",
    60: "6xl",
    72: "7xl",
    96: "8xl",
    128: "9xl",
})

# Keys are lowercased literals; values are palette tokens without the prefix.
COLORS = ScaleTable[str]("color", {
    "black": "black",
    "white": "white",
    "#000": "black",
    "#fff": "white",
    "#ffffff": "white",
    "#000000": "black",
})

FONT_WEIGHTS = ScaleTable[str]("font-weight", {
    "normal": "font-normal",
    "bold": "font-bold",
    "100": "font-thin",
    "200": "font-extralight",
    "300": "font-light",
    "400": "font-normal",
    "500": "font-medium",
    "600": "font-semibold",
    "700": "font-bold",
    "800": "font-extrabold",
    "900": "font-black",
})

DISPLAY = ScaleTable[str]("display", {
    "block": "block",
    "inline": "inline",
    "inline-block": "inline-block",
    "flex": "flex",
    "inline-flex": "inline-flex",
    "grid": "grid",
    "none": "hidden",
})


def arbitrary(prefix: str, value: str) -> str:
    """Build a bracketed arbitrary-value class, e.g. ``mt-[13px]``."""
    return f"{prefix}-[{value}]"


def parse_pixels(value: str) -> int | None:
    """Return the integer pixel count of *value*, or ``None`` for other forms.

    Only whole ``px`` values are recognized: ``16px`` -> 16, ``1.5px`` -> None,
    ``1rem`` -> None.
    """
    match = _PIXEL_RE.match(value)
    if match is None:
        return None
    return int(match.group(1))


def lookup_spacing(px: int) -> str | None:
    return SPACING.lookup(px)


def lookup_type_scale(px: int) -> str | None:
    return TYPE_SCALE.lookup(px)


def lookup_color(literal: str, prefix: str) -> str | None:
    """Map a color literal to ``{prefix}-{token}``; case-insensitive."""
    token = COLORS.lookup(literal.strip().lower())
    if token is None:
        return None
    return f"{prefix}-{token}"


def lookup_font_weight(value: str) -> str | None:
    return FONT_WEIGHTS.lookup(value.strip().lower())


def lookup_display(value: str) -> str | None:
    return DISPLAY.lookup(value.strip().lower())
