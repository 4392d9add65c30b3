"""CLI commands for health-profile."""

from .interactive import app
from .init import init
from .profiles import profile

__all__ = [
    "app",
    "init",
    "profile",
]
