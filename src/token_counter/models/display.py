"""Display configuration for formatted output."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class DisplayConfig(BaseModel):
    """Which of the three counts are shown, in token/line/byte order."""

    model_config = ConfigDict(frozen=True)

    show_tokens: bool = True
    show_lines: bool = True
    show_bytes: bool = True

    @model_validator(mode="after")
    def validate_not_empty(self) -> Self:
        if not (self.show_tokens or self.show_lines or self.show_bytes):
            msg = "DisplayConfig must show at least one field"
            raise ValueError(msg)
        return self

    @classmethod
    def from_flags(
        cls, tokens_only: bool = False, lines: bool = False, bytes_: bool = False
    ) -> DisplayConfig:
        """Build a config from CLI flags.  No flags at all means show everything."""
        nothing_specified = not (tokens_only or lines or bytes_)
        return cls(
            show_tokens=tokens_only or nothing_specified,
            show_lines=lines or nothing_specified,
            show_bytes=bytes_ or nothing_specified,
        )
