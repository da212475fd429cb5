"""Tests for the tool registry and built-in tools."""

import json

import pytest

from design_copier.capture import CapturedPage
from design_copier.config import DesignCopierConfig
from design_copier.errors import CaptureError, CompilerError, ErrorCode, ToolError
from design_copier.tools import (
    RegisteredTool,
    ToolDefinition,
    ToolRegistry,
    build_registry,
)
from design_copier.verify import TailwindCompiler
from tests.fakes import FakeCompiler


def _registry(compiler=None, capture=None):
    def default_capture(url, selector=None, **kwargs):
        return CapturedPage(html=f"<p>{url}</p>", styles=f"sel={selector}")

    return build_registry(
        DesignCopierConfig(),
        compiler=compiler or FakeCompiler(),
        capture=capture or default_capture,
    )


# ---------------------------------------------------------------------------
# Registry mechanics
# ---------------------------------------------------------------------------


class TestToolRegistry:
    def _tool(self, name, result="ok"):
        return RegisteredTool(ToolDefinition(name, "d"), lambda args: result)

    def test_register_and_get(self):
        registry = ToolRegistry()
        registry.register(self._tool("a"))
        assert registry.get("a").definition.name == "a"
        assert registry.get("missing") is None

    def test_latest_wins(self):
        registry = ToolRegistry()
        registry.register(self._tool("a", "first"))
        registry.register(self._tool("a", "second"))
        assert registry.call("a") == "second"
        assert registry.names() == ["a"]

    def test_unregister(self):
        registry = ToolRegistry()
        registry.register(self._tool("a"))
        registry.unregister("a")
        registry.unregister("a")
        assert registry.names() == []

    def test_unknown_tool(self):
        with pytest.raises(ToolError) as info:
            ToolRegistry().call("nope")
        assert info.value.code is ErrorCode.METHOD_NOT_FOUND

    def test_unexpected_failure_is_internal(self):
        def boom(args):
            raise RuntimeError("kaput")

        registry = ToolRegistry()
        registry.register(RegisteredTool(ToolDefinition("a", "d"), boom))
        with pytest.raises(ToolError) as info:
            registry.call("a")
        assert info.value.code is ErrorCode.INTERNAL_ERROR


class TestBuiltinRegistry:
    def test_tool_names(self):
        assert _registry().names() == [
            "designcopier_snapshot",
            "designcopier_extract",
            "designcopier_apply",
        ]

    def test_definitions_serialize(self):
        data = [d.to_dict() for d in _registry().definitions()]
        assert data[1]["inputSchema"]["required"] == ["html", "styles", "format"]


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


class TestSnapshotTool:
    def test_returns_json(self):
        text = _registry().call("designcopier_snapshot", {"url": "https://x.test", "selector": "#a"})
        assert json.loads(text) == {"styles": "sel=#a", "html": "<p>https://x.test</p>"}

    def test_null_selector_accepted(self):
        text = _registry().call("designcopier_snapshot", {"url": "https://x.test", "selector": None})
        assert json.loads(text)["styles"] == "sel=None"

    def test_non_string_selector(self):
        with pytest.raises(ToolError) as info:
            _registry().call("designcopier_snapshot", {"url": "https://x.test", "selector": 3})
        assert info.value.code is ErrorCode.INVALID_PARAMS

    def test_missing_url(self):
        with pytest.raises(ToolError) as info:
            _registry().call("designcopier_snapshot", {})
        assert info.value.code is ErrorCode.INVALID_PARAMS

    def test_capture_failure_is_internal(self):
        def failing(url, selector=None, **kwargs):
            raise CaptureError("Failed to capture styles: timeout")

        with pytest.raises(ToolError) as info:
            _registry(capture=failing).call("designcopier_snapshot", {"url": "https://x.test"})
        assert info.value.code is ErrorCode.INTERNAL_ERROR


class TestExtractTool:
    def test_tailwind(self):
        compiler = FakeCompiler(output=".text-black{}")
        text = _registry(compiler).call(
            "designcopier_extract",
            {"html": "<p class='x'></p>", "styles": ".a { color: black; }", "format": "tailwind"},
        )
        data = json.loads(text)
        assert data["tailwindSuggestions"] == {".a": ["text-black"]}
        assert data["extractedClasses"] == ["text-black"]

    def test_tailwind_compiler_failure_still_succeeds(self):
        compiler = FakeCompiler(error=CompilerError("bad css", returncode=1))
        text = _registry(compiler).call(
            "designcopier_extract",
            {"html": "", "styles": ".a { display: none; }", "format": "tailwind"},
        )
        data = json.loads(text)
        assert data["error"]["code"] == "TAILWIND_PROCESSING_ERROR"
        assert data["tailwindSuggestions"] == {".a": ["hidden"]}

    def test_unencodable_markup_still_succeeds(self):
        registry = _registry(TailwindCompiler("definitely-not-tailwind"))
        text = registry.call(
            "designcopier_extract",
            {"html": "<p>\ud800</p>", "styles": ".a { display: none; }", "format": "tailwind"},
        )
        data = json.loads(text)
        assert data["error"]["code"] == "TAILWIND_PROCESSING_ERROR"
        assert data["tailwindSuggestions"] == {".a": ["hidden"]}

    def test_css_format(self):
        text = _registry().call(
            "designcopier_extract", {"html": "", "styles": ".a{}", "format": "css"}
        )
        assert json.loads(text) == ".a{}"

    def test_react_format(self):
        text = _registry().call(
            "designcopier_extract", {"html": "", "styles": "color: red;", "format": "react"}
        )
        assert json.loads(text).startswith("import styled from 'styled-components';")

    def test_unknown_format(self):
        with pytest.raises(ToolError) as info:
            _registry().call("designcopier_extract", {"html": "", "styles": "", "format": "scss"})
        assert info.value.code is ErrorCode.INVALID_PARAMS


class TestApplyTool:
    def test_react(self):
        text = _registry().call(
            "designcopier_apply",
            {"styles": "color: red;", "targetFramework": "react", "componentName": "Hero"},
        )
        assert "export const Hero" in text

    def test_unsupported_framework(self):
        with pytest.raises(ToolError) as info:
            _registry().call(
                "designcopier_apply",
                {"styles": "", "targetFramework": "solid", "componentName": "Hero"},
            )
        assert info.value.code is ErrorCode.INVALID_PARAMS

    def test_bad_component_name(self):
        with pytest.raises(ToolError) as info:
            _registry().call(
                "designcopier_apply",
                {"styles": "", "targetFramework": "vue", "componentName": "not valid"},
            )
        assert info.value.code is ErrorCode.INVALID_PARAMS

    def test_non_string_argument(self):
        with pytest.raises(ToolError) as info:
            _registry().call(
                "designcopier_apply",
                {"styles": 3, "targetFramework": "vue", "componentName": "Hero"},
            )
        assert info.value.code is ErrorCode.INVALID_PARAMS
