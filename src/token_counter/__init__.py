"""token-counter: count LLM tokens, lines, and bytes, like wc for tokens.

Counting:
    count_tokens, count_lines, count_stats, count_bytes, count_file,
    count_reader

Tokenizers:
    resolve_tokenizer, find_tokenizer_by_name, tokenizer_search_paths,
    load_default_tokenizer, HuggingFaceEncoder, TiktokenEncoder

Protocols (extension points):
    Encoder

Models:
    TokenStats, DisplayConfig, Source

Output:
    format_stats, run

Exceptions:
    TokenCounterError, ConfigurationError, TokenizerNotFoundError,
    TokenizerLoadError, InputReadError, InvalidTextError, EncodingError
"""

from importlib.metadata import PackageNotFoundError, version

from token_counter.counting import (
    count_bytes,
    count_file,
    count_lines,
    count_reader,
    count_stats,
    count_tokens,
)
from token_counter.dispatcher import run
from token_counter.encoders import HuggingFaceEncoder, TiktokenEncoder
from token_counter.exceptions import (
    ConfigurationError,
    EncodingError,
    InputReadError,
    InvalidTextError,
    TokenCounterError,
    TokenizerLoadError,
    TokenizerNotFoundError,
)
from token_counter.formatting import format_stats
from token_counter.models import DisplayConfig, Source, TokenStats
from token_counter.protocols import Encoder
from token_counter.resolver import (
    find_tokenizer_by_name,
    load_default_tokenizer,
    resolve_tokenizer,
    tokenizer_search_paths,
)

try:
    __version__ = version("token-counter")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "ConfigurationError",
    "DisplayConfig",
    "Encoder",
    "EncodingError",
    "HuggingFaceEncoder",
    "InputReadError",
    "InvalidTextError",
    "Source",
    "TiktokenEncoder",
    "TokenCounterError",
    "TokenStats",
    "TokenizerLoadError",
    "TokenizerNotFoundError",
    "count_bytes",
    "count_file",
    "count_lines",
    "count_reader",
    "count_stats",
    "count_tokens",
    "find_tokenizer_by_name",
    "format_stats",
    "load_default_tokenizer",
    "resolve_tokenizer",
    "run",
    "tokenizer_search_paths",
]
