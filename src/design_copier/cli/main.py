"""Design Copier CLI entry point: Click group with subcommands."""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from design_copier import __version__


@click.group()
@click.version_option(version=__version__, prog_name="design-copier")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Design Copier - capture page styles and translate them to Tailwind."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("url")
@click.option("--selector", default=None, help="CSS selector of a single element")
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the snapshot JSON to this file",
)
def snapshot(url: str, selector: str | None, output: str | None) -> None:
    """Capture a page's HTML and styles."""
    from design_copier.capture import capture_page
    from design_copier.config import DesignCopierConfig
    from design_copier.errors import CaptureError

    config = DesignCopierConfig.from_env()
    try:
        page = capture_page(
            url,
            selector,
            timeout_ms=config.capture_timeout_ms,
            wait_until=config.wait_until,
        )
    except CaptureError as exc:
        click.echo(f"Capture error: {exc}", err=True)
        sys.exit(1)

    text = json.dumps(page.to_dict(), indent=2)
    if output:
        Path(output).write_text(text, encoding="utf-8")
        click.echo(f"Snapshot written to {output}")
    else:
        click.echo(text)


@cli.command()
@click.option("--html", "html_file", required=True, type=click.Path(exists=True), help="HTML file")
@click.option("--styles", "styles_file", required=True, type=click.Path(exists=True), help="CSS file")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["css", "tailwind", "react"]),
    default="tailwind",
    show_default=True,
    help="Output format",
)
def extract(html_file: str, styles_file: str, fmt: str) -> None:
    """Convert captured styles to another format."""
    from design_copier.config import DesignCopierConfig, build_compiler
    from design_copier.tools import extract_styles

    html = Path(html_file).read_text(encoding="utf-8")
    styles = Path(styles_file).read_text(encoding="utf-8")
    compiler = build_compiler(DesignCopierConfig.from_env()) if fmt == "tailwind" else None

    result = extract_styles(html, styles, fmt, compiler)
    if isinstance(result, str):
        click.echo(result)
        return
    click.echo(json.dumps(result, indent=2, default=str))
    if "error" in result:
        click.echo(f"Warning: {result['error']['message']}", err=True)


@cli.command()
@click.option("--styles", "styles_file", required=True, type=click.Path(exists=True), help="CSS file")
@click.option("--framework", required=True, help="Target framework (react, vue, svelte, angular)")
@click.option("--name", "component_name", required=True, help="Component name")
def apply(styles_file: str, framework: str, component_name: str) -> None:
    """Wrap styles in a component for a target framework."""
    from design_copier.emitters import to_framework_component
    from design_copier.errors import InvalidArgumentError

    styles = Path(styles_file).read_text(encoding="utf-8")
    try:
        click.echo(to_framework_component(styles, framework, component_name))
    except InvalidArgumentError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@cli.command()
def tools() -> None:
    """List the tools exposed by the server."""
    from design_copier.tools import APPLY, EXTRACT, SNAPSHOT

    for definition in (SNAPSHOT, EXTRACT, APPLY):
        required = definition.parameters.get("required", [])
        click.echo(f"{definition.name}: {definition.description}")
        click.echo(f"  required: {', '.join(required)}")


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str | None, port: int | None, debug: bool) -> None:
    """Start the Design Copier tool server."""
    from dataclasses import replace

    from design_copier.config import DesignCopierConfig, build_compiler
    from design_copier.tools import build_registry
    from design_copier.verify import check_version_compatibility
    from design_copier.web.app import create_app

    config = DesignCopierConfig.from_env()
    config = replace(config, host=host or config.host, port=port or config.port)
    compiler = build_compiler(config)
    check_version_compatibility(compiler)

    app = create_app(registry=build_registry(config, compiler=compiler), config=config)
    click.echo(f"Starting Design Copier on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
