from design_copier.cli.main import cli

__all__ = ["cli"]
