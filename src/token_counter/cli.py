"""Command-line interface: ``tc``, a wc-style token counter."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from token_counter import __version__
from token_counter.dispatcher import PROG, run
from token_counter.exceptions import ConfigurationError, TokenCounterError
from token_counter.models.display import DisplayConfig
from token_counter.models.source import Source
from token_counter.resolver import resolve_tokenizer

app = typer.Typer(
    name=PROG,
    help="Token counter - count LLM tokens in files (similar to wc for words).",
    add_completion=False,
)
# Only log records go through rich; result and error lines are echoed as-is.
err_console = Console(stderr=True, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("token_counter")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG} {__version__}")
        raise typer.Exit()


def _out(line: str) -> None:
    typer.echo(line)


def _err(line: str) -> None:
    typer.echo(line, err=True)


@app.command()
def main(
    files: list[str] | None = typer.Argument(  # noqa: B008
        None, metavar="FILE...", help="Input files (reads from stdin if not provided)"
    ),
    tokenizer_path: Path | None = typer.Option(  # noqa: B008
        None, "--tokenizer-path", "-t", metavar="PATH", help="Path to custom tokenizer JSON file"
    ),
    tokenizer_name: str | None = typer.Option(
        None, "--tokenizer-name", "-n", metavar="NAME", help="Named tokenizer (e.g. gpt4, bert)"
    ),
    tokens_only: bool = typer.Option(False, "--tokens-only", help="Show only token count"),
    lines: bool = typer.Option(False, "--lines", "-l", help="Show line count"),
    bytes_: bool = typer.Option(False, "--bytes", "-c", help="Show byte count"),
    verbose: bool = typer.Option(False, "--verbose", help="Log tokenizer resolution to stderr"),
    version: bool = typer.Option(  # noqa: ARG001
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Count LLM tokens, lines, and bytes, like wc for tokens.

    With no FILE, read standard input.  With several, also print a total line.

    The bundled default tokenizer is a small WordPiece vocabulary, so its
    counts are only approximate.  Use --tokenizer-path or --tokenizer-name
    to count with a real model's tokenizer.json.
    """
    _configure_logging(verbose)
    display = DisplayConfig.from_flags(tokens_only=tokens_only, lines=lines, bytes_=bytes_)

    try:
        encoder = resolve_tokenizer(path=tokenizer_path, name=tokenizer_name)
    except ConfigurationError as e:
        raise typer.BadParameter(
            str(e), param_hint="'--tokenizer-path' / '--tokenizer-name'"
        ) from e
    except TokenCounterError as e:
        _err(f"{PROG}: {e}")
        raise typer.Exit(code=1) from e

    sources = [Source.from_path(f) for f in files or []]
    exit_code = run(sources, encoder, display, out=_out, err=_err)
    if exit_code:
        raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
