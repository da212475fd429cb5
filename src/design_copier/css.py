"""Parse raw CSS text into Rule objects.

Parsing never fails as a whole: a rule whose body cannot be read yields a Rule
with no declarations, and stray top-level garbage is skipped.

Example:
    .box { color: black; margin: 4px 8px; }
    @media (min-width: 640px) { .box { display: none; } }
"""

from __future__ import annotations

import logging

import tinycss2

from design_copier.model import Declaration, Rule

__all__ = ["parse_declarations"]

logger = logging.getLogger(__name__)

# Block at-rules whose content is itself a list of rules.
_GROUPING_AT_RULES = frozenset({"media", "supports", "layer", "container", "document"})


def _serialize(tokens) -> str:
    return tinycss2.serialize([t for t in tokens if t.type != "comment"]).strip()


def _normalize_selector(prelude) -> str:
    return " ".join(_serialize(prelude).split())


def _parse_body(content) -> tuple[Declaration, ...]:
    """Parse the declarations of one rule block, dropping unreadable ones."""
    declarations: list[Declaration] = []
    for node in tinycss2.parse_blocks_contents(
        content or [], skip_comments=True, skip_whitespace=True
    ):
        if node.type != "declaration":
            continue
        value = _serialize(node.value)
        if not value:
            continue
        name = node.name if node.name.startswith("--") else node.lower_name
        declarations.append(
            Declaration(property=name, value=value, important=node.important)
        )
    return tuple(declarations)


def _collect(nodes, rules: list[Rule]) -> None:
    for node in nodes:
        if node.type == "qualified-rule":
            rules.append(
                Rule(
                    selector=_normalize_selector(node.prelude),
                    declarations=_parse_body(node.content),
                )
            )
        elif node.type == "at-rule":
            if node.content is None or node.lower_at_keyword not in _GROUPING_AT_RULES:
                continue
            _collect(
                tinycss2.parse_rule_list(
                    node.content, skip_comments=True, skip_whitespace=True
                ),
                rules,
            )
        elif node.type == "error":
            logger.debug(
                "Skipping unparseable CSS at %s:%s: %s",
                node.source_line,
                node.source_column,
                node.message,
            )


def parse_declarations(css_text: str) -> list[Rule]:
    """Parse *css_text* into rules in source order.

    Rules nested in ``@media``/``@supports``/``@layer`` blocks are included;
    other at-rules (``@font-face``, ``@keyframes``...) are not.
    """
    rules: list[Rule] = []
    if not css_text:
        return rules
    _collect(
        tinycss2.parse_stylesheet(css_text, skip_comments=True, skip_whitespace=True),
        rules,
    )
    return rules
