"""Core data models for token-counter."""

from .display import DisplayConfig
from .source import Source
from .stats import TokenStats

__all__ = [
    "DisplayConfig",
    "Source",
    "TokenStats",
]
