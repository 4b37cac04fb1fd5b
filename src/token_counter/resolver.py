"""Tokenizer resolution: explicit path, named lookup, or the bundled default."""

from __future__ import annotations

import functools
import logging
import os
import sys
from importlib.resources import files
from pathlib import Path

from token_counter.encoders.huggingface import HuggingFaceEncoder
from token_counter.exceptions import (
    ConfigurationError,
    TokenizerLoadError,
    TokenizerNotFoundError,
)
from token_counter.protocols.encoder import Encoder

__all__ = [
    "DEFAULT_TOKENIZER_ASSET",
    "find_tokenizer_by_name",
    "load_default_tokenizer",
    "resolve_tokenizer",
    "tokenizer_search_paths",
]

logger = logging.getLogger(__name__)

DEFAULT_TOKENIZER_ASSET = "assets/default.json"

_APP_DIR = "tc"
_SYSTEM_SHARE_DIRS = (
    Path("/opt/homebrew/share") / _APP_DIR / "tokenizers",
    Path("/usr/local/share") / _APP_DIR / "tokenizers",
)


def _user_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / _APP_DIR / "tokenizers"


def tokenizer_search_paths(name: str) -> list[Path]:
    """Candidate files for a named tokenizer, highest priority first.

    1. ``assets/tokenizers/`` at the root of a development checkout
    2. ``<sys.prefix>/share/tc/tokenizers/`` for installed packages
    3. the user config directory (``$XDG_CONFIG_HOME`` or ``~/.config``)
    4. ``/opt/homebrew/share/tc/tokenizers/``
    5. ``/usr/local/share/tc/tokenizers/``
    """
    filename = f"{name}.json"
    dev_root = Path(__file__).resolve().parents[2]
    directories = [
        dev_root / "assets" / "tokenizers",
        Path(sys.prefix) / "share" / _APP_DIR / "tokenizers",
        _user_config_dir(),
        *_SYSTEM_SHARE_DIRS,
    ]
    return [directory / filename for directory in directories]


def find_tokenizer_by_name(name: str) -> Path:
    """Return the first existing ``<name>.json`` across the search paths.

    Raises:
        TokenizerNotFoundError: If no candidate exists.  The error lists
            every path that was checked.
    """
    candidates = tokenizer_search_paths(name)
    for path in candidates:
        logger.debug("Checking %s", path)
        if path.is_file():
            return path
    raise TokenizerNotFoundError(name, candidates)


@functools.cache
def load_default_tokenizer() -> HuggingFaceEncoder:
    """Parse the tokenizer bundled with the package, once per process.

    Call ``load_default_tokenizer.cache_clear()`` to force a reload
    (useful in tests).

    Raises:
        TokenizerLoadError: If the bundled asset is missing or corrupt,
            which indicates a broken installation.
    """
    resource = files("token_counter").joinpath(DEFAULT_TOKENIZER_ASSET)
    try:
        data = resource.read_bytes()
    except OSError as e:
        msg = f"bundled tokenizer {DEFAULT_TOKENIZER_ASSET} is missing: {e}"
        raise TokenizerLoadError(msg, source=DEFAULT_TOKENIZER_ASSET) from e
    try:
        return HuggingFaceEncoder.from_json(data, source=DEFAULT_TOKENIZER_ASSET)
    except TokenizerLoadError as e:
        msg = f"bundled tokenizer {DEFAULT_TOKENIZER_ASSET} is corrupt: {e}"
        raise TokenizerLoadError(msg, source=DEFAULT_TOKENIZER_ASSET) from e


def resolve_tokenizer(path: str | Path | None = None, name: str | None = None) -> Encoder:
    """Pick and load the tokenizer for a run.

    Parameters:
        path: Explicit tokenizer JSON file.
        name: Named tokenizer looked up via :func:`tokenizer_search_paths`.

    With neither given, the bundled default is returned.

    Raises:
        ConfigurationError: If both ``path`` and ``name`` are given.
        TokenizerNotFoundError: If ``name`` is not found in any search path.
        TokenizerLoadError: If the selected file cannot be loaded.
    """
    if path is not None and name is not None:
        msg = "--tokenizer-path and --tokenizer-name are mutually exclusive"
        raise ConfigurationError(msg)

    if path is not None:
        return HuggingFaceEncoder.from_file(path)

    if name is not None:
        found = find_tokenizer_by_name(name)
        logger.debug("Resolved tokenizer %r to %s", name, found)
        return HuggingFaceEncoder.from_file(found)

    return load_default_tokenizer()
