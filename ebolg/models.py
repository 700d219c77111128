"""Post and build result models."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import HTML_SUFFIX


class PostMetadata(BaseModel):
    """Front matter of a post."""

    model_config = ConfigDict(extra="allow")

    title: str
    date: dt.date
    summary: str | None = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value


@dataclass(frozen=True)
class Post:
    source: Path
    relative: Path
    metadata: PostMetadata
    body: str

    @property
    def output_name(self) -> Path:
        return self.relative.with_suffix(HTML_SUFFIX)

    @property
    def sort_key(self) -> tuple[dt.date, str]:
        return (self.metadata.date, self.relative.as_posix())


class BuildReport(BaseModel):
    """Result of a site build."""

    out_dir: Path
    written: list[Path] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    stylesheet: Path | None = None
    index: Path | None = None
    warnings: list[str] = Field(default_factory=list)
