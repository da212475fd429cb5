"""Tailwind compiler capability: compile a stylesheet against markup."""

from __future__ import annotations

import logging
import re
import shlex
import subprocess
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from design_copier.errors import CompilerError

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"tailwindcss\s+v?(\d+\.\d+\.\d+\S*)", re.IGNORECASE)


class Compiler(Protocol):
    """Compiles *stylesheet*, scanning *content* documents for class names.

    Implementations raise :class:`CompilerError` on failure.
    """

    def compile(self, stylesheet: str, content: Sequence[str]) -> str: ...


class TailwindCompiler:
    """Runs the Tailwind CSS CLI in a scratch directory.

    The stylesheet and each content document are written to temporary files,
    the CLI is invoked with ``--content`` pointing at the documents, and the
    generated CSS is read back. Autoprefixing is the CLI's default; pass
    ``autoprefix=False`` to disable it.
    """

    def __init__(
        self,
        executable: str = "tailwindcss",
        config_path: str | Path | None = None,
        timeout: float = 60.0,
        autoprefix: bool = True,
    ) -> None:
        self._command = shlex.split(executable)
        self._config_path = Path(config_path) if config_path else None
        self._timeout = timeout
        self._autoprefix = autoprefix

    @property
    def command(self) -> list[str]:
        return list(self._command)

    def compile(self, stylesheet: str, content: Sequence[str]) -> str:
        with tempfile.TemporaryDirectory(prefix="design-copier-") as tmp:
            workdir = Path(tmp)
            input_path = workdir / "input.css"
            output_path = workdir / "output.css"

            content_paths = []
            try:
                input_path.write_text(stylesheet, encoding="utf-8")
                for index, document in enumerate(content):
                    path = workdir / f"page-{index}.html"
                    path.write_text(document, encoding="utf-8")
                    content_paths.append(str(path))
            except (OSError, UnicodeError) as exc:
                raise CompilerError(
                    f"Could not write Tailwind input: {exc}", cause=exc
                ) from exc

            args = [*self._command, "-i", str(input_path), "-o", str(output_path)]
            if content_paths:
                args += ["--content", ",".join(content_paths)]
            if self._config_path is not None:
                args += ["-c", str(self._config_path)]
            if not self._autoprefix:
                args.append("--no-autoprefixer")

            self._run(args, cwd=workdir)

            try:
                return output_path.read_text(encoding="utf-8")
            except FileNotFoundError as exc:
                raise CompilerError(
                    "Tailwind finished without writing output", cause=exc
                ) from exc
            except (OSError, UnicodeError) as exc:
                raise CompilerError(
                    f"Could not read Tailwind output: {exc}", cause=exc
                ) from exc

    def version(self) -> str | None:
        """Return the CLI's version string, or ``None`` if it is not reported."""
        proc = self._run([*self._command, "--help"])
        match = _VERSION_RE.search(proc.stdout or "") or _VERSION_RE.search(proc.stderr or "")
        return match.group(1) if match else None

    def _run(
        self, args: list[str], cwd: Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        logger.debug("Running %s", shlex.join(args))
        try:
            proc = subprocess.run(
                args,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except FileNotFoundError as exc:
            raise CompilerError(
                f"Tailwind executable not found: {self._command[0]}", cause=exc
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise CompilerError(
                f"Tailwind timed out after {self._timeout:g}s", cause=exc
            ) from exc
        except OSError as exc:
            raise CompilerError(f"Could not run Tailwind: {exc}", cause=exc) from exc

        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip()
            first_line = stderr.splitlines()[0] if stderr else "no output"
            raise CompilerError(
                f"Tailwind exited with status {proc.returncode}: {first_line}",
                returncode=proc.returncode,
                stderr=stderr,
            )
        return proc


def check_version_compatibility(compiler: TailwindCompiler) -> str | None:
    """Log the Tailwind CLI version and warn about a 4.x CLI.

    The 4.x CLI dropped the ``--content`` and ``-c`` flags this module passes.
    Never raises; returns the version when it could be read.
    """
    try:
        version = compiler.version()
    except CompilerError as exc:
        logger.warning("Could not check Tailwind version: %s", exc)
        return None

    if version is None:
        logger.warning("Could not determine Tailwind version from %s", compiler.command)
        return None

    logger.info("Using Tailwind CSS v%s", version)
    if version.startswith("4."):
        logger.warning(
            "Tailwind CSS v%s may not accept the v3 CLI flags used for verification; "
            "consider Tailwind CSS v3.x.",
            version,
        )
    return version
