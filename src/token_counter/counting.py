"""Token, line, and byte counting over texts, files, and streams."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from token_counter.exceptions import InputReadError, InvalidTextError
from token_counter.models.stats import TokenStats
from token_counter.protocols.encoder import Encoder

__all__ = [
    "count_bytes",
    "count_file",
    "count_lines",
    "count_reader",
    "count_stats",
    "count_tokens",
]

logger = logging.getLogger(__name__)


def count_tokens(text: str, encoder: Encoder) -> int:
    """Number of token ids ``encoder`` produces for ``text``.

    Raises:
        EncodingError: If the encoder rejects the text.
    """
    return len(encoder.encode(text))


def count_lines(text: str) -> int:
    """Count ``\\n``-delimited lines.

    A trailing partial line counts; the empty remainder after a final
    newline does not.  ``\\r\\n`` endings count once.
    """
    if not text:
        return 0
    newlines = text.count("\n")
    return newlines if text.endswith("\n") else newlines + 1


def count_stats(text: str, encoder: Encoder) -> TokenStats:
    """Counts for ``text``; ``bytes`` is the UTF-8 length, not characters."""
    tokens = count_tokens(text, encoder)
    return TokenStats(
        tokens=tokens,
        lines=count_lines(text),
        bytes=len(text.encode("utf-8")),
    )


def count_bytes(data: bytes, encoder: Encoder, path: Path | None = None) -> TokenStats:
    """Decode raw input as UTF-8 and count it.

    Raises:
        InvalidTextError: If ``data`` is not valid UTF-8.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"not valid UTF-8 text ({e.reason} at byte {e.start})"
        raise InvalidTextError(msg, path=path) from e
    return count_stats(text, encoder)


def count_file(path: str | Path, encoder: Encoder) -> TokenStats:
    """Read an entire file and count it.

    Raises:
        InputReadError: If the file cannot be read.
        InvalidTextError: If the file is not valid UTF-8.
        EncodingError: If the encoder rejects the text.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        msg = e.strerror or str(e)
        raise InputReadError(msg, path=path) from e
    stats = count_bytes(data, encoder, path=path)
    logger.debug("Counted %s: %s", path, stats)
    return stats


def count_reader(stream: BinaryIO, encoder: Encoder) -> TokenStats:
    """Read a binary stream to exhaustion, then count it."""
    try:
        data = stream.read()
    except OSError as e:
        msg = f"failed to read input: {e}"
        raise InputReadError(msg) from e
    return count_bytes(data, encoder)
