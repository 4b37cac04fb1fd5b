"""Tests for token_counter.encoders.tiktoken_encoder.

tiktoken downloads its BPE ranks on first use, which is unavailable in this
test environment, so the module is replaced in ``sys.modules`` with a mock
whose encoding splits on whitespace.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from token_counter.encoders.tiktoken_encoder import TiktokenEncoder
from token_counter.exceptions import EncodingError, TokenizerLoadError
from token_counter.protocols.encoder import Encoder


class _MockEncoding:
    """Mock tiktoken encoding for offline testing."""

    name = "cl100k_base"

    def __init__(self) -> None:
        self.calls: list[dict] = []

    def encode(self, text: str, **kwargs: object) -> list[int]:
        self.calls.append(kwargs)
        return list(range(len(text.split())))


def _mock_tiktoken(encoding: object | None = None) -> MagicMock:
    module = MagicMock()
    module.get_encoding.return_value = encoding if encoding is not None else _MockEncoding()
    return module


class TestTiktokenEncoder:
    def test_encode_counts_tokens(self) -> None:
        with patch.dict("sys.modules", {"tiktoken": _mock_tiktoken()}):
            encoder = TiktokenEncoder()
        assert len(encoder.encode("Hello there, world")) == 3

    def test_default_encoding_name(self) -> None:
        module = _mock_tiktoken()
        with patch.dict("sys.modules", {"tiktoken": module}):
            TiktokenEncoder()
        module.get_encoding.assert_called_once_with("cl100k_base")

    def test_special_tokens_encoded_as_text(self) -> None:
        encoding = _MockEncoding()
        with patch.dict("sys.modules", {"tiktoken": _mock_tiktoken(encoding)}):
            encoder = TiktokenEncoder()
        encoder.encode("<|endoftext|>")
        assert encoding.calls == [{"disallowed_special": ()}]

    def test_unknown_encoding_raises_load_error(self) -> None:
        module = MagicMock()
        module.get_encoding.side_effect = ValueError("Unknown encoding nope")
        with (
            patch.dict("sys.modules", {"tiktoken": module}),
            pytest.raises(TokenizerLoadError, match="nope"),
        ):
            TiktokenEncoder("nope")

    def test_encode_failure_wrapped(self) -> None:
        encoding = MagicMock()
        encoding.encode.side_effect = RuntimeError("bad input")
        with patch.dict("sys.modules", {"tiktoken": _mock_tiktoken(encoding)}):
            encoder = TiktokenEncoder()
        with pytest.raises(EncodingError, match="bad input"):
            encoder.encode("x")

    def test_missing_tiktoken_raises_import_error(self) -> None:
        with (
            patch.dict("sys.modules", {"tiktoken": None}),
            pytest.raises(ImportError, match="pip install tiktoken"),
        ):
            TiktokenEncoder()

    def test_satisfies_protocol(self) -> None:
        with patch.dict("sys.modules", {"tiktoken": _mock_tiktoken()}):
            encoder = TiktokenEncoder()
        assert isinstance(encoder, Encoder)
        assert "cl100k_base" in repr(encoder)
