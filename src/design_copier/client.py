"""HTTP client for a running design_copier server."""
from __future__ import annotations

import json
from typing import Any

import httpx

from design_copier.errors import ErrorCode, ToolError, TransportError


class DesignCopierClient:
    """Thin wrapper around :mod:`httpx` that maps errors into design_copier exceptions."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:5000",
        timeout: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=httpx.Timeout(timeout, connect=10.0),
            transport=transport,
        )

    def __enter__(self) -> DesignCopierClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            resp = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request timed out: {exc}", cause=exc) from exc
        except httpx.TransportError as exc:
            raise TransportError(f"Could not reach server: {exc}", cause=exc) from exc

        try:
            body = resp.json()
        except ValueError:
            body = {}

        if resp.status_code >= 300:
            error = body.get("error") if isinstance(body, dict) else None
            if isinstance(error, dict):
                try:
                    code = ErrorCode(error.get("code"))
                except ValueError:
                    code = ErrorCode.INTERNAL_ERROR
                raise ToolError(error.get("message", resp.text), code=code)
            raise ToolError(
                f"HTTP {resp.status_code}: {resp.text}", code=ErrorCode.INTERNAL_ERROR
            )
        return body

    def list_tools(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/tools").get("tools", [])

    def call_tool(self, name: str, arguments: dict[str, Any]) -> str:
        """Invoke *name* and return the text of its first content item."""
        body = self._request("POST", f"/api/tools/{name}", json=arguments)
        content = body.get("content") or [{}]
        return content[0].get("text", "")

    # --- Convenience wrappers ---

    def snapshot(self, url: str, selector: str | None = None) -> dict[str, str]:
        args = {"url": url}
        if selector:
            args["selector"] = selector
        return json.loads(self.call_tool("designcopier_snapshot", args))

    def extract(self, html: str, styles: str, format: str = "tailwind") -> Any:
        return json.loads(
            self.call_tool(
                "designcopier_extract", {"html": html, "styles": styles, "format": format}
            )
        )

    def apply(self, styles: str, target_framework: str, component_name: str) -> str:
        return self.call_tool(
            "designcopier_apply",
            {
                "styles": styles,
                "targetFramework": target_framework,
                "componentName": component_name,
            },
        )
