"""HTTP API for the payday engine."""

from payday_engine.api.app import app, create_app

__all__ = ["app", "create_app"]
