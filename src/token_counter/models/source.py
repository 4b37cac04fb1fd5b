"""Input source descriptor."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Source(BaseModel):
    """Standard input (``name=None``) or a file named on the command line.

    ``name`` keeps the argument exactly as typed so that output labels match
    it; ``path`` is the filesystem view of the same argument.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None

    @classmethod
    def stdin(cls) -> Source:
        return cls()

    @classmethod
    def from_path(cls, path: str | Path) -> Source:
        return cls(name=str(path))

    @property
    def path(self) -> Path | None:
        return None if self.name is None else Path(self.name)

    @property
    def is_stdin(self) -> bool:
        return self.name is None

    @property
    def label(self) -> str | None:
        """Name shown next to the counts; None for standard input."""
        return self.name
