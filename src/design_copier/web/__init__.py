from design_copier.web.app import create_app

__all__ = ["create_app"]
