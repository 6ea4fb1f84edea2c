"""HTTP API for person records."""

from .app import create_app

__all__ = ["create_app"]
