from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TAILWIND_CONFIG = "tailwind.config.js"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DesignCopierConfig:
    tailwind_bin: str = "tailwindcss"
    tailwind_config: str | None = None
    compile_timeout: float = 60.0
    autoprefix: bool = True
    capture_timeout_ms: int = 30_000
    wait_until: str = "networkidle"  # playwright load state
    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DesignCopierConfig:
        """Build a config from ``DESIGN_COPIER_*`` environment variables.

        Unset variables keep the dataclass defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        autoprefix = env.get("DESIGN_COPIER_AUTOPREFIX")
        return cls(
            tailwind_bin=env.get("DESIGN_COPIER_TAILWIND_BIN", defaults.tailwind_bin),
            tailwind_config=env.get("DESIGN_COPIER_TAILWIND_CONFIG") or None,
            compile_timeout=float(
                env.get("DESIGN_COPIER_COMPILE_TIMEOUT", defaults.compile_timeout)
            ),
            autoprefix=(
                defaults.autoprefix
                if autoprefix is None
                else autoprefix.strip().lower() in _TRUTHY
            ),
            capture_timeout_ms=int(
                env.get("DESIGN_COPIER_CAPTURE_TIMEOUT_MS", defaults.capture_timeout_ms)
            ),
            host=env.get("DESIGN_COPIER_HOST", defaults.host),
            port=int(env.get("DESIGN_COPIER_PORT", defaults.port)),
        )

    def resolve_tailwind_config(self, cwd: str | Path | None = None) -> Path | None:
        """Return the Tailwind config file to compile with, if any.

        An explicitly configured path wins. Otherwise ``tailwind.config.js`` in
        *cwd* (default: the process working directory) is used when present.
        ``None`` means the compiler falls back to Tailwind's default theme.
        """
        if self.tailwind_config:
            return Path(self.tailwind_config)
        candidate = Path(cwd or os.getcwd()) / DEFAULT_TAILWIND_CONFIG
        if candidate.is_file():
            return candidate
        return None


def build_compiler(config: DesignCopierConfig | None = None):
    """Construct the Tailwind CLI compiler described by *config*."""
    from design_copier.verify import TailwindCompiler

    config = config or DesignCopierConfig()
    return TailwindCompiler(
        executable=config.tailwind_bin,
        config_path=config.resolve_tailwind_config(),
        timeout=config.compile_timeout,
        autoprefix=config.autoprefix,
    )
