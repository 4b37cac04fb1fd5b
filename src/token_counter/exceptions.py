"""Custom exceptions for token-counter."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

__all__ = [
    "ConfigurationError",
    "EncodingError",
    "InputReadError",
    "InvalidTextError",
    "TokenCounterError",
    "TokenizerLoadError",
    "TokenizerNotFoundError",
]


class TokenCounterError(Exception):
    """Base exception for all token-counter errors."""


class ConfigurationError(TokenCounterError):
    """Raised when mutually exclusive options are combined."""


class TokenizerNotFoundError(TokenCounterError):
    """Raised when a named tokenizer is absent from every search path.

    The message lists each path that was checked, one per line.
    """

    def __init__(self, name: str, searched_paths: Sequence[Path]) -> None:
        self.name = name
        self.searched_paths = list(searched_paths)
        listing = "\n  ".join(str(p) for p in self.searched_paths)
        super().__init__(f"Tokenizer '{name}' not found. Searched in:\n  {listing}")


class TokenizerLoadError(TokenCounterError):
    """Raised when a tokenizer description cannot be read or parsed."""

    def __init__(self, message: str, source: str | Path | None = None) -> None:
        super().__init__(message)
        self.source = source


class InputReadError(TokenCounterError):
    """Raised when an input file or stream cannot be read."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidTextError(InputReadError):
    """Raised when input bytes are not valid UTF-8 text."""


class EncodingError(TokenCounterError):
    """Raised when the encoder fails to tokenize a text."""
