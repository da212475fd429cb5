from design_copier.mapping.candidates import (
    classes_for,
    generate_candidates,
    spacing_class,
    suggest_classes,
)
from design_copier.mapping.scales import (
    ScaleTable,
    arbitrary,
    lookup_color,
    lookup_display,
    lookup_font_weight,
    lookup_spacing,
    lookup_type_scale,
    parse_pixels,
)
from design_copier.mapping.shorthand import ShorthandPart, expand_shorthand

__all__ = [
    "ScaleTable",
    "ShorthandPart",
    "arbitrary",
    "classes_for",
    "expand_shorthand",
    "generate_candidates",
    "lookup_color",
    "lookup_display",
    "lookup_font_weight",
    "lookup_spacing",
    "lookup_type_scale",
    "parse_pixels",
    "spacing_class",
    "suggest_classes",
]
