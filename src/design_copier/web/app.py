from __future__ import annotations

from flask import Flask

from design_copier.config import DesignCopierConfig
from design_copier.tools import ToolRegistry, build_registry


def create_app(
    registry: ToolRegistry | None = None,
    config: DesignCopierConfig | None = None,
    flask_config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app exposing the tool registry."""
    app = Flask(__name__)
    app.config.update(flask_config or {})

    config = config or DesignCopierConfig.from_env()
    app.extensions["design_copier_config"] = config
    app.extensions["tool_registry"] = registry or build_registry(config)

    from design_copier.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
