"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from app.api.routes import api_bp
from core.config import GrowthPolicy, load_policy


def create_app(policy: Optional[GrowthPolicy] = None) -> Flask:
    """Build the Flask app instance.

    The growth policy comes from PLANNER_* environment variables unless one is
    passed in explicitly.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = Flask(__name__)
    app.config["GROWTH_POLICY"] = load_policy() if policy is None else policy

    CORS(
        app,
        resources={
            r"/api/*": {
                "origins": [
                    "http://localhost:5173",
                    "http://127.0.0.1:5173",
                ]
            }
        },
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
