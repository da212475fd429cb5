"""Extraction: turn captured markup and CSS into a ResultBundle."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from design_copier.css import parse_declarations
from design_copier.errors import CompilerError
from design_copier.mapping import generate_candidates
from design_copier.model import (
    TAILWIND_PROCESSING_ERROR,
    ProcessingError,
    ResultBundle,
    RuleCandidates,
)
from design_copier.verify import Compiler, verify

logger = logging.getLogger(__name__)


def collect_existing_classes(html: str) -> list[str]:
    """Return every class name used in *html*, deduplicated in document order."""
    soup = BeautifulSoup(html or "", "html.parser")
    seen: dict[str, None] = {}
    for element in soup.find_all(class_=True):
        classes = element.get("class") or []
        if isinstance(classes, str):
            classes = classes.split()
        for cls in classes:
            cls = cls.strip()
            if cls:
                seen.setdefault(cls, None)
    return list(seen)


def _processing_error(exc: CompilerError) -> ProcessingError:
    return ProcessingError(
        message=f"Failed to process with Tailwind: {exc}",
        code=TAILWIND_PROCESSING_ERROR,
        details={
            "type": type(exc.cause or exc).__name__,
            "returncode": exc.returncode,
            "stderr": exc.stderr,
        },
    )


def extract_tailwind_classes(html: str, styles: str, compiler: Compiler) -> ResultBundle:
    """Map *styles* to Tailwind candidates and confirm them against *html*.

    A compiler failure does not abort the extraction: the bundle keeps the
    existing classes and every candidate, and carries the error instead of
    confirmed classes.
    """
    existing = tuple(collect_existing_classes(html))
    rules = parse_declarations(styles)
    entries = tuple(
        RuleCandidates(rule=rule, candidates=tuple(generate_candidates(rule)))
        for rule in rules
    )

    try:
        result = verify(html, rules, compiler)
    except CompilerError as exc:
        logger.warning("Tailwind verification failed: %s", exc)
        return ResultBundle(
            existing_classes=existing,
            entries=entries,
            error=_processing_error(exc),
        )

    confirmed = result.confirmed_classes
    entries = tuple(
        RuleCandidates(
            rule=entry.rule,
            candidates=tuple(c.confirm(confirmed) for c in entry.candidates),
        )
        for entry in entries
    )
    return ResultBundle(
        existing_classes=existing,
        entries=entries,
        confirmed_classes=confirmed,
    )
