"""HTTP layer exposing the joined partner cache."""

from .main import create_app

__all__ = ["create_app"]
