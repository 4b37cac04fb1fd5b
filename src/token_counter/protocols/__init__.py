"""Protocol definitions for token-counter's pluggable encoders."""

from .encoder import Encoder

__all__ = ["Encoder"]
