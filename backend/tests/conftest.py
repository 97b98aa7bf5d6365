from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from app import create_app
from core.config import DEFAULT_POLICY


@pytest.fixture()
def flask_app():
    app = create_app(DEFAULT_POLICY)
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(flask_app) -> FlaskClient:
    with flask_app.test_client() as test_client:
        yield test_client
