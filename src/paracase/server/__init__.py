"""HTTP interface for paracase."""

from .app import create_app

__all__ = ["create_app"]
