"""Expand ``margin``/``padding`` shorthands into directional parts."""

from __future__ import annotations

from typing import NamedTuple

SHORTHAND_PREFIXES = {"margin": "m", "padding": "p"}


class ShorthandPart(NamedTuple):
    sub_prefix: str  # "m", "my", "mt", ...
    value: str


def split_values(value: str) -> list[str]:
    """Split a CSS value on whitespace outside parentheses.

    ``"calc(1px + 2px) 4px"`` -> ``["calc(1px + 2px)", "4px"]``
    """
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in value.strip():
        if ch == "(":
            depth += 1
        elif ch == ")" and depth:
            depth -= 1
        if ch.isspace() and depth == 0:
            if current:
                parts.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        parts.append("".join(current))
    return parts


def expand_shorthand(property: str, value: str) -> list[ShorthandPart]:
    """Expand a margin/padding value using CSS's positional rule.

    1 value applies to every side, 2 values are vertical then horizontal, and
    4 values are top, right, bottom, left. Any other count returns a single
    part carrying the untouched raw value.
    """
    try:
        prefix = SHORTHAND_PREFIXES[property]
    except KeyError:
        raise ValueError(f"Not a spacing shorthand: {property!r}") from None

    values = split_values(value)
    if len(values) == 1:
        return [ShorthandPart(prefix, values[0])]
    if len(values) == 2:
        return [
            ShorthandPart(f"{prefix}y", values[0]),
            ShorthandPart(f"{prefix}x", values[1]),
        ]
    if len(values) == 4:
        return [
            ShorthandPart(f"{prefix}{side}", v)
            for side, v in zip("trbl", values)
        ]
    return [ShorthandPart(prefix, value.strip())]
