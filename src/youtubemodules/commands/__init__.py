"""Command module initialization."""

from .base import YouTubeCommand
from .renumber import RenumberCommand  # noqa: F401

__all__ = ["YouTubeCommand", "RenumberCommand"]
