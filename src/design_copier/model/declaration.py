"""Declaration model: Declaration and Rule dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair from a CSS rule body.

    ``value`` is the text after the colon, trimmed, with any ``!important``
    flag moved to ``important``. Function calls such as ``rotate(5deg)`` are
    kept as opaque text.
    """

    property: str
    value: str
    important: bool = False

    def as_css(self) -> str:
        """Render the declaration as literal CSS (without a trailing ``;``)."""
        suffix = " !important" if self.important else ""
        return f"{self.property}: {self.value}{suffix}"


@dataclass(frozen=True)
class Rule:
    """A selector paired with its declarations in source order."""

    selector: str
    declarations: tuple[Declaration, ...] = ()

    def effective_declarations(self) -> list[Declaration]:
        """Collapse repeated properties so later declarations override earlier ones.

        A repeated property keeps the position of its first occurrence and the
        value of its last.
        """
        collapsed: dict[str, Declaration] = {}
        for decl in self.declarations:
            collapsed[decl.property] = decl
        return list(collapsed.values())
