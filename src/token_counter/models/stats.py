"""Token, line, and byte count statistics."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TokenStats(BaseModel):
    """Counts produced for one input source, or the running total of many.

    Instances start zero-valued.  ``add`` accumulates in place (used for the
    multi-file total), while ``+`` returns a fresh instance.
    """

    model_config = ConfigDict(validate_assignment=True)

    tokens: int = Field(default=0, ge=0)
    lines: int = Field(default=0, ge=0)
    bytes: int = Field(default=0, ge=0)

    def add(self, other: TokenStats) -> None:
        """Add another TokenStats to this one, field by field."""
        self.tokens += other.tokens
        self.lines += other.lines
        self.bytes += other.bytes

    def __add__(self, other: object) -> TokenStats:
        if not isinstance(other, TokenStats):
            return NotImplemented
        return TokenStats(
            tokens=self.tokens + other.tokens,
            lines=self.lines + other.lines,
            bytes=self.bytes + other.bytes,
        )
