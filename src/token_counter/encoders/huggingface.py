"""Encoder backed by a HuggingFace ``tokenizers`` JSON description."""

from __future__ import annotations

import logging
from pathlib import Path

from tokenizers import Tokenizer

from token_counter.exceptions import EncodingError, TokenizerLoadError

logger = logging.getLogger(__name__)


class HuggingFaceEncoder:
    """Wraps a :class:`tokenizers.Tokenizer` loaded from ``tokenizer.json``.

    Any model the ``tokenizers`` library can deserialize (BPE, WordPiece,
    Unigram, WordLevel) is accepted.  Encoding never adds special tokens, so
    the count reflects the text alone.

    Implements the Encoder protocol via structural subtyping.

    Example::

        encoder = HuggingFaceEncoder.from_file("gpt2.json")
        ids = encoder.encode("Hello, world!")
    """

    __slots__ = ("_source", "_tokenizer")

    def __init__(self, tokenizer: Tokenizer, source: str | Path | None = None) -> None:
        self._tokenizer = tokenizer
        self._source = source

    @classmethod
    def from_file(cls, path: str | Path) -> HuggingFaceEncoder:
        """Load a tokenizer JSON file.

        Raises:
            TokenizerLoadError: If the file does not exist or is not a valid
                tokenizer description.
        """
        path = Path(path)
        if not path.is_file():
            msg = f"failed to load tokenizer: {path} does not exist"
            raise TokenizerLoadError(msg, source=path)
        try:
            tokenizer = Tokenizer.from_file(str(path))
        except Exception as e:
            msg = f"failed to load tokenizer from {path}: {e}"
            raise TokenizerLoadError(msg, source=path) from e
        logger.debug("Loaded tokenizer from %s", path)
        return cls(tokenizer, source=path)

    @classmethod
    def from_json(cls, data: str | bytes, source: str | None = None) -> HuggingFaceEncoder:
        """Load a tokenizer from an in-memory JSON document.

        Raises:
            TokenizerLoadError: If ``data`` is not a valid tokenizer description.
        """
        try:
            if isinstance(data, bytes):
                tokenizer = Tokenizer.from_buffer(data)
            else:
                tokenizer = Tokenizer.from_str(data)
        except Exception as e:
            msg = f"failed to load tokenizer: {e}"
            raise TokenizerLoadError(msg, source=source) from e
        return cls(tokenizer, source=source)

    @property
    def vocab_size(self) -> int:
        return self._tokenizer.get_vocab_size(with_added_tokens=True)

    def encode(self, text: str) -> list[int]:
        """Encode text without inserting special tokens."""
        try:
            encoding = self._tokenizer.encode(text, add_special_tokens=False)
        except Exception as e:
            msg = f"failed to encode text: {e}"
            raise EncodingError(msg) from e
        return encoding.ids

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={str(self._source)!r})"
