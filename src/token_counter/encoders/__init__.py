"""Encoder implementations satisfying the Encoder protocol."""

from .huggingface import HuggingFaceEncoder
from .tiktoken_encoder import TiktokenEncoder

__all__ = ["HuggingFaceEncoder", "TiktokenEncoder"]
