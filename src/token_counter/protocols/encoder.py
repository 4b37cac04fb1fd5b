"""Encoder protocol for tokenizer abstraction."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class Encoder(Protocol):
    """Protocol for turning text into token ids.

    The default implementation wraps a HuggingFace ``tokenizers`` JSON
    model, but any encoder works (e.g., tiktoken, sentencepiece) as long
    as it exposes ``encode``.
    """

    def encode(self, text: str) -> Sequence[int]:
        """Encode ``text`` into a sequence of token ids.

        Parameters:
            text: The full input text.  No special tokens are inserted.

        Returns:
            The token ids in order.  Only the length is used for counting.

        Raises:
            EncodingError: If the underlying model cannot encode ``text``.
        """
        ...
