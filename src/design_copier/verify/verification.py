"""Verification pass: corroborate candidates against real compiler output."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from design_copier.mapping import generate_candidates
from design_copier.model import Rule
from design_copier.verify.compiler import Compiler

logger = logging.getLogger(__name__)

PLACEHOLDER = "temp-selector"

# "." followed by an identifier; backslash escapes (".mt-\[13px\]") are allowed.
_CLASS_RE = re.compile(r"\.(-?[A-Za-z_](?:\\.|[A-Za-z0-9_\-:/])*)")
_ESCAPE_RE = re.compile(r"\\(.)")


@dataclass(frozen=True)
class VerificationResult:
    compiled_classes: frozenset[str]  # every class selector the compiler emitted
    confirmed_classes: frozenset[str]  # the subset that is also a candidate


def build_synthetic_stylesheet(rules: Sequence[Rule]) -> str:
    """Render one placeholder rule per input rule, carrying its original CSS.

    The stylesheet opens with ``@tailwind utilities;`` so the compiler emits
    the utilities it finds while scanning the content documents.
    """
    lines = ["@tailwind utilities;"]
    for index, rule in enumerate(rules):
        body = "; ".join(decl.as_css() for decl in rule.declarations)
        lines.append(f".{PLACEHOLDER}-{index} {{ {body} }}")
    return "\n".join(lines)


def extract_class_names(css: str) -> list[str]:
    """Collect class names from compiled CSS, unescaped, in first-seen order.

    Placeholder selectors are skipped.
    """
    seen: dict[str, None] = {}
    for match in _CLASS_RE.finditer(css):
        name = _ESCAPE_RE.sub(r"\1", match.group(1))
        if PLACEHOLDER in name:
            continue
        seen.setdefault(name, None)
    return list(seen)


def verify(markup_html: str, rules: Sequence[Rule], compiler: Compiler) -> VerificationResult:
    """Compile the rules against *markup_html* and confirm candidate classes.

    The original declarations are compiled, not the candidate class names; a
    candidate counts as confirmed when the compiler emitted a rule for it
    while scanning the markup. Raises :class:`CompilerError` on failure.
    """
    stylesheet = build_synthetic_stylesheet(rules)
    compiled_css = compiler.compile(stylesheet, [markup_html])
    compiled = frozenset(extract_class_names(compiled_css))

    candidate_classes = {
        cls
        for rule in rules
        for candidate in generate_candidates(rule)
        for cls in candidate.classes
    }
    confirmed = compiled & candidate_classes
    logger.debug(
        "Compiler emitted %d classes, %d of %d candidates confirmed",
        len(compiled),
        len(confirmed),
        len(candidate_classes),
    )
    return VerificationResult(compiled_classes=compiled, confirmed_classes=confirmed)
