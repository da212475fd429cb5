"""Result model: candidates, processing errors, and the extraction bundle."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from design_copier.model.declaration import Declaration, Rule

TAILWIND_PROCESSING_ERROR = "TAILWIND_PROCESSING_ERROR"


@dataclass(frozen=True)
class Candidate:
    """Utility classes generated for one declaration.

    ``classes`` holds more than one entry when a shorthand expands into several
    directional classes. ``confirmed`` is only set after verification saw one
    of the classes in the compiler's output.
    """

    declaration: Declaration
    classes: tuple[str, ...]
    confirmed: bool = False

    def confirm(self, confirmed_classes: Iterable[str]) -> Candidate:
        seen = set(confirmed_classes)
        return replace(self, confirmed=any(cls in seen for cls in self.classes))


@dataclass(frozen=True)
class RuleCandidates:
    """A parsed rule together with the candidates generated for it."""

    rule: Rule
    candidates: tuple[Candidate, ...] = ()

    def classes(self) -> list[str]:
        """All candidate classes of the rule, in generation order."""
        return [cls for candidate in self.candidates for cls in candidate.classes]


@dataclass(frozen=True)
class ProcessingError:
    """Structured description of a failed verification pass."""

    message: str
    code: str = TAILWIND_PROCESSING_ERROR
    details: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.code, "details": self.details}


@dataclass(frozen=True)
class ResultBundle:
    """Everything one extraction request produced.

    ``confirmed_classes`` is ``None`` when verification did not complete; in
    that case ``error`` says why and the candidates are still usable.
    """

    existing_classes: tuple[str, ...] = ()
    entries: tuple[RuleCandidates, ...] = ()
    confirmed_classes: frozenset[str] | None = None
    error: ProcessingError | None = None

    @property
    def candidate_classes(self) -> set[str]:
        return {cls for entry in self.entries for cls in entry.classes()}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape consumed by the tool transport.

        Rules sharing a selector are merged in source order.
        """
        css_to_tailwind: dict[str, list[str]] = {}
        suggestions: dict[str, list[str]] = {}
        for entry in self.entries:
            selector = entry.rule.selector
            css_to_tailwind.setdefault(selector, []).extend(
                decl.as_css() for decl in entry.rule.declarations
            )
            suggestions.setdefault(selector, []).extend(entry.classes())

        data: dict[str, Any] = {
            "existingClasses": list(self.existing_classes),
            "cssToTailwind": css_to_tailwind,
            "tailwindSuggestions": suggestions,
        }
        if self.confirmed_classes is not None:
            data["extractedClasses"] = sorted(self.confirmed_classes)
        if self.error is not None:
            data["error"] = self.error.to_dict()
        return data
