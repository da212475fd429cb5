from __future__ import annotations

import pytest

from design_copier.capture import CapturedPage
from design_copier.config import DesignCopierConfig
from design_copier.tools import build_registry
from design_copier.web.app import create_app
from tests.fakes import FakeCompiler


def fake_capture(url, selector=None, **kwargs):
    return CapturedPage(html="<div class='card'></div>", styles=".card { color: black; }")


@pytest.fixture
def compiler():
    return FakeCompiler(output=".text-black { color: #000 }")


@pytest.fixture
def app(compiler):
    """Create a Flask app backed by fake collaborators."""
    config = DesignCopierConfig()
    registry = build_registry(config, compiler=compiler, capture=fake_capture)
    application = create_app(registry=registry, config=config)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
