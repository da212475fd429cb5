"""Candidate generation: map each declaration to Tailwind utility classes.

Dispatch is a closed table keyed by property name. Properties without a
handler get the generic ``{property}-[{value}]`` class, so generation never
fails.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable

from design_copier.mapping.scales import (
    arbitrary,
    lookup_color,
    lookup_display,
    lookup_font_weight,
    lookup_spacing,
    lookup_type_scale,
    parse_pixels,
)
from design_copier.mapping.shorthand import expand_shorthand
from design_copier.model import Candidate, Declaration, Rule

Handler = Callable[[Declaration], list[str]]


def spacing_class(value: str, prefix: str) -> str:
    """``("16px", "mt")`` -> ``"mt-4"``; anything off the scale -> ``"mt-[value]"``."""
    px = parse_pixels(value)
    if px is not None:
        step = lookup_spacing(px)
        if step is not None:
            return f"{prefix}-{step}"
    return arbitrary(prefix, value)


def _color(prefix: str) -> Handler:
    def handler(decl: Declaration) -> list[str]:
        return [lookup_color(decl.value, prefix) or arbitrary(prefix, decl.value)]

    return handler


def _spacing_shorthand(decl: Declaration) -> list[str]:
    return [
        spacing_class(part.value, part.sub_prefix)
        for part in expand_shorthand(decl.property, decl.value)
    ]


def _single_side(prefix: str) -> Handler:
    def handler(decl: Declaration) -> list[str]:
        return [spacing_class(decl.value, prefix)]

    return handler


def _font_size(decl: Declaration) -> list[str]:
    px = parse_pixels(decl.value)
    size = lookup_type_scale(px) if px is not None else None
    return [f"text-{size}" if size else arbitrary("text", decl.value)]


def _font_weight(decl: Declaration) -> list[str]:
    # Misses use the utility prefix "font", not the property name.
    return [lookup_font_weight(decl.value) or arbitrary("font", decl.value)]


def _display(decl: Declaration) -> list[str]:
    return [lookup_display(decl.value) or arbitrary(decl.property, decl.value)]


def _fallback(decl: Declaration) -> list[str]:
    return [arbitrary(decl.property, decl.value)]


HANDLERS: Mapping[str, Handler] = MappingProxyType({
    "color": _color("text"),
    "background-color": _color("bg"),
    "margin": _spacing_shorthand,
    "padding": _spacing_shorthand,
    "margin-top": _single_side("mt"),
    "margin-right": _single_side("mr"),
    "margin-bottom": _single_side("mb"),
    "margin-left": _single_side("ml"),
    "font-size": _font_size,
    "font-weight": _font_weight,
    "display": _display,
})


def classes_for(decl: Declaration) -> list[str]:
    """Return the utility classes for one declaration, in generation order."""
    handler = HANDLERS.get(decl.property, _fallback)
    return [cls for cls in handler(decl) if cls]


def generate_candidates(rule: Rule) -> list[Candidate]:
    """Generate one Candidate per effective declaration of *rule*."""
    return [
        Candidate(declaration=decl, classes=tuple(classes_for(decl)))
        for decl in rule.effective_declarations()
    ]


def suggest_classes(rule: Rule) -> list[str]:
    """Flatten the candidate classes of *rule*."""
    return [cls for c in generate_candidates(rule) for cls in c.classes]
