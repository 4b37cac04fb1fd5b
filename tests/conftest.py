"""Shared fixtures for token-counter tests."""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path

import pytest

from token_counter.exceptions import EncodingError
from token_counter.resolver import DEFAULT_TOKENIZER_ASSET, load_default_tokenizer


class FakeEncoder:
    """A simple encoder that emits one id per whitespace-separated word.

    Satisfies the Encoder protocol without loading a tokenizer model.
    """

    def encode(self, text: str) -> list[int]:
        """Encode by splitting on whitespace."""
        return list(range(len(text.split())))


class FailingEncoder:
    """Encoder whose ``encode`` always fails, for error-path tests."""

    def encode(self, text: str) -> list[int]:
        msg = "failed to encode text: unsupported input"
        raise EncodingError(msg)


def default_tokenizer_bytes() -> bytes:
    """Raw JSON of the tokenizer bundled with the package."""
    return files("token_counter").joinpath(DEFAULT_TOKENIZER_ASSET).read_bytes()


@pytest.fixture
def encoder() -> FakeEncoder:
    """Return a FakeEncoder instance for testing."""
    return FakeEncoder()


@pytest.fixture
def default_encoder():
    """The real bundled tokenizer, loaded once per process."""
    return load_default_tokenizer()


@pytest.fixture
def tokenizer_file(tmp_path: Path) -> Path:
    """A copy of the bundled tokenizer JSON on disk."""
    path = tmp_path / "custom.json"
    path.write_bytes(default_tokenizer_bytes())
    return path
