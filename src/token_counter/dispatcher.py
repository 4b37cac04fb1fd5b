"""Drives counting over stdin, a single file, or a batch of files."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import BinaryIO

from token_counter.counting import count_file, count_reader
from token_counter.exceptions import TokenCounterError
from token_counter.formatting import format_stats
from token_counter.models.display import DisplayConfig
from token_counter.models.source import Source
from token_counter.models.stats import TokenStats
from token_counter.protocols.encoder import Encoder

__all__ = ["EXIT_FAILURE", "EXIT_SUCCESS", "PROG", "STDIN_NOTICE", "run"]

logger = logging.getLogger(__name__)

PROG = "tc"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
STDIN_NOTICE = f"{PROG}: reading from stdin (use --help for usage information)"
TOTAL_LABEL = "total"

LineWriter = Callable[[str], None]


def _count_source(source: Source, encoder: Encoder, stdin: BinaryIO | None) -> TokenStats:
    if source.path is None:
        return count_reader(stdin if stdin is not None else sys.stdin.buffer, encoder)
    return count_file(source.path, encoder)


def _report_failure(source: Source, exc: TokenCounterError, err: LineWriter) -> None:
    label = source.label if source.label is not None else "stdin"
    err(f"{PROG}: {label}: {exc}")


def run(
    sources: Sequence[Source],
    encoder: Encoder,
    display: DisplayConfig,
    *,
    out: LineWriter,
    err: LineWriter,
    stdin: BinaryIO | None = None,
) -> int:
    """Count every source and print one line per source (plus a total).

    The mode is fixed by the number of sources:

    - none: read standard input fully and print one unlabeled line;
    - one: print one labeled line, a failure fails the run;
    - several: print a labeled line per readable source, report failures
      on ``err`` and keep going, then always print a ``total`` line.

    Parameters:
        sources: Files in the order given on the command line.
        encoder: Shared, read-only encoder.
        display: Which fields to print.
        out: Receives result lines.
        err: Receives diagnostics and the interactive-stdin notice.
        stdin: Binary stream for the no-source mode.  Defaults to
            ``sys.stdin.buffer``.

    Returns:
        ``EXIT_SUCCESS`` if every source was counted, else ``EXIT_FAILURE``.
    """
    if not sources:
        stream = stdin if stdin is not None else sys.stdin.buffer
        if stream.isatty():
            err(STDIN_NOTICE)
        logger.debug("Counting standard input")
        return _run_single(Source.stdin(), encoder, display, out, err, stream)

    if len(sources) == 1:
        logger.debug("Counting single file %s", sources[0].label)
        return _run_single(sources[0], encoder, display, out, err, stdin)

    logger.debug("Counting %d files", len(sources))
    total = TokenStats()
    failures = 0
    for source in sources:
        try:
            stats = _count_source(source, encoder, stdin)
        except TokenCounterError as e:
            logger.debug("Skipping %s: %s", source.label, e)
            _report_failure(source, e, err)
            failures += 1
            continue
        out(format_stats(stats, display, source.label))
        total.add(stats)

    out(format_stats(total, display, TOTAL_LABEL))
    return EXIT_FAILURE if failures else EXIT_SUCCESS


def _run_single(
    source: Source,
    encoder: Encoder,
    display: DisplayConfig,
    out: LineWriter,
    err: LineWriter,
    stdin: BinaryIO | None,
) -> int:
    try:
        stats = _count_source(source, encoder, stdin)
    except TokenCounterError as e:
        _report_failure(source, e, err)
        return EXIT_FAILURE
    out(format_stats(stats, display, source.label))
    return EXIT_SUCCESS
