"""Tool registry: the commands design_copier exposes to remote callers."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from design_copier.capture import CapturedPage, capture_page
from design_copier.config import DesignCopierConfig, build_compiler
from design_copier.emitters import (
    FRAMEWORK_TEMPLATES,
    to_css,
    to_framework_component,
    to_styled_components,
)
from design_copier.errors import (
    CaptureError,
    ErrorCode,
    InvalidArgumentError,
    ToolError,
)
from design_copier.extract import extract_tailwind_classes
from design_copier.verify import Compiler

logger = logging.getLogger(__name__)

EXTRACT_FORMATS = ("css", "tailwind", "react")

Executor = Callable[[dict[str, Any]], str]
CaptureFn = Callable[..., CapturedPage]


@dataclass(frozen=True)
class ToolDefinition:
    """Schema definition for a remotely invokable tool."""

    name: str
    description: str
    parameters: dict[str, Any] = field(default_factory=dict)  # JSON Schema, root type "object"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.parameters,
        }


@dataclass(frozen=True)
class RegisteredTool:
    """A tool definition paired with its executor.

    The executor takes the call arguments and returns the response text.
    """

    definition: ToolDefinition
    executor: Executor


class ToolRegistry:
    """Registry of tools. Latest-wins on name collision, insertion-order stable."""

    def __init__(self) -> None:
        self._tools: dict[str, RegisteredTool] = {}

    def register(self, tool: RegisteredTool) -> None:
        self._tools[tool.definition.name] = tool

    def unregister(self, name: str) -> None:
        self._tools.pop(name, None)

    def get(self, name: str) -> RegisteredTool | None:
        return self._tools.get(name)

    def definitions(self) -> list[ToolDefinition]:
        return [t.definition for t in self._tools.values()]

    def names(self) -> list[str]:
        return list(self._tools.keys())

    def call(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """Run tool *name* and return its text output.

        Raises :class:`ToolError`: ``METHOD_NOT_FOUND`` for an unknown tool,
        ``INVALID_PARAMS`` for bad arguments, ``INTERNAL_ERROR`` otherwise.
        """
        tool = self.get(name)
        if tool is None:
            raise ToolError(f"Unknown tool: {name}", code=ErrorCode.METHOD_NOT_FOUND)
        args = arguments or {}
        _check_required(tool.definition, args)
        try:
            return tool.executor(args)
        except ToolError:
            raise
        except InvalidArgumentError as exc:
            raise ToolError(str(exc), code=ErrorCode.INVALID_PARAMS, cause=exc) from exc
        except Exception as exc:
            logger.exception("Tool %s failed", name)
            raise ToolError(
                f"Tool {name} failed: {exc}", code=ErrorCode.INTERNAL_ERROR, cause=exc
            ) from exc


def _check_required(definition: ToolDefinition, args: dict[str, Any]) -> None:
    properties = definition.parameters.get("properties", {})
    required = definition.parameters.get("required", [])
    for key in required:
        if key not in args:
            raise ToolError(f"Missing required argument: {key}", code=ErrorCode.INVALID_PARAMS)
    for key, value in args.items():
        schema = properties.get(key)
        if schema is None:
            continue
        if value is None and key not in required:
            continue
        if schema.get("type") == "string" and not isinstance(value, str):
            raise ToolError(f"Argument {key} must be a string", code=ErrorCode.INVALID_PARAMS)
        if "enum" in schema and value not in schema["enum"]:
            choices = ", ".join(schema["enum"])
            raise ToolError(
                f"Argument {key} must be one of: {choices}", code=ErrorCode.INVALID_PARAMS
            )


# ---------------------------------------------------------------------------
# Built-in tools
# ---------------------------------------------------------------------------


SNAPSHOT = ToolDefinition(
    name="designcopier_snapshot",
    description="Capture webpage or element styles",
    parameters={
        "type": "object",
        "properties": {
            "url": {"type": "string", "description": "URL to capture"},
            "selector": {
                "type": "string",
                "description": "Optional CSS selector for specific element",
            },
        },
        "required": ["url"],
    },
)

EXTRACT = ToolDefinition(
    name="designcopier_extract",
    description="Extract styles and convert to different formats",
    parameters={
        "type": "object",
        "properties": {
            "html": {"type": "string", "description": "HTML content"},
            "styles": {"type": "string", "description": "CSS styles"},
            "format": {
                "type": "string",
                "enum": list(EXTRACT_FORMATS),
                "description": "Output format",
            },
        },
        "required": ["html", "styles", "format"],
    },
)

APPLY = ToolDefinition(
    name="designcopier_apply",
    description="Apply extracted styles to target framework",
    parameters={
        "type": "object",
        "properties": {
            "styles": {"type": "string", "description": "Extracted styles"},
            "targetFramework": {
                "type": "string",
                "description": "Target framework",
                "enum": list(FRAMEWORK_TEMPLATES),
            },
            "componentName": {
                "type": "string",
                "description": "Name for the generated component",
            },
        },
        "required": ["styles", "targetFramework", "componentName"],
    },
)


def _snapshot(config: DesignCopierConfig, capture: CaptureFn) -> Executor:
    def executor(args: dict[str, Any]) -> str:
        try:
            page = capture(
                args["url"],
                args.get("selector"),
                timeout_ms=config.capture_timeout_ms,
                wait_until=config.wait_until,
            )
        except CaptureError as exc:
            raise ToolError(str(exc), code=ErrorCode.INTERNAL_ERROR, cause=exc) from exc
        return json.dumps(page.to_dict(), indent=2)

    return executor


def extract_styles(html: str, styles: str, fmt: str, compiler: Compiler) -> Any:
    """Convert *styles* to *fmt*: a string for css/react, a dict for tailwind."""
    if fmt == "tailwind":
        return extract_tailwind_classes(html, styles, compiler).to_dict()
    if fmt == "react":
        return to_styled_components(styles)
    if fmt == "css":
        return to_css(styles)
    raise InvalidArgumentError(f"Unsupported format: {fmt}")


def _extract(compiler: Compiler) -> Executor:
    def executor(args: dict[str, Any]) -> str:
        result = extract_styles(args["html"], args["styles"], args["format"], compiler)
        return json.dumps(result, indent=2, default=str)

    return executor


def _apply(args: dict[str, Any]) -> str:
    return to_framework_component(
        args["styles"], args["targetFramework"], args["componentName"]
    )


def build_registry(
    config: DesignCopierConfig | None = None,
    compiler: Compiler | None = None,
    capture: CaptureFn = capture_page,
) -> ToolRegistry:
    """Create a registry with the snapshot, extract, and apply tools."""
    config = config or DesignCopierConfig()
    compiler = compiler or build_compiler(config)

    registry = ToolRegistry()
    registry.register(RegisteredTool(SNAPSHOT, _snapshot(config, capture)))
    registry.register(RegisteredTool(EXTRACT, _extract(compiler)))
    registry.register(RegisteredTool(APPLY, _apply))
    return registry
