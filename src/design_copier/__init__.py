"""Design Copier: translate captured CSS into Tailwind utility classes."""

__version__ = "0.1.0"
