"""Encoder backed by OpenAI's tiktoken library."""

from __future__ import annotations

import logging

from token_counter.exceptions import EncodingError, TokenizerLoadError

logger = logging.getLogger(__name__)


class TiktokenEncoder:
    """Encoder using a named tiktoken encoding (default ``cl100k_base``).

    Special-token strings such as ``<|endoftext|>`` are encoded as plain
    text rather than rejected, matching the "no special tokens" counting rule.

    The tiktoken import is deferred to ``__init__`` so that importing this
    module does not require tiktoken when callers only use JSON tokenizers.
    """

    __slots__ = ("_encoding",)

    def __init__(self, encoding_name: str = "cl100k_base") -> None:
        try:
            import tiktoken
        except ImportError:
            msg = (
                "tiktoken is required for TiktokenEncoder. "
                "Install it with: pip install token-counter[tiktoken] "
                "or pip install tiktoken"
            )
            raise ImportError(msg) from None

        try:
            self._encoding = tiktoken.get_encoding(encoding_name)
        except ValueError as e:
            msg = f"failed to load tiktoken encoding {encoding_name!r}: {e}"
            raise TokenizerLoadError(msg, source=encoding_name) from e
        logger.debug("Loaded tiktoken encoding %s", encoding_name)

    def encode(self, text: str) -> list[int]:
        try:
            return self._encoding.encode(text, disallowed_special=())
        except Exception as e:
            msg = f"failed to encode text: {e}"
            raise EncodingError(msg) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(encoding={self._encoding.name!r})"
