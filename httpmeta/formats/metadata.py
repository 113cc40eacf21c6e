"""Pydantic models for the metadata assembled from response headers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator

U64_MAX = 2**64 - 1


class EntryMode(str, Enum):
    FILE = "file"
    DIR = "dir"


class ExactRange(BaseModel):
    """``bytes start-end/total``: inclusive range inside a resource of ``total`` bytes."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["exact"] = "exact"
    start: int = Field(ge=0, le=U64_MAX)
    end: int = Field(ge=0, le=U64_MAX)
    total: int | None = Field(default=None, ge=0, le=U64_MAX)

    @model_validator(mode="after")
    def _check_bounds(self) -> ExactRange:
        if self.start > self.end:
            raise ValueError(f"range start {self.start} is after end {self.end}")
        if self.total is not None and self.end >= self.total:
            raise ValueError(f"range end {self.end} is outside total size {self.total}")
        return self

    @property
    def size(self) -> int:
        """Number of bytes covered by the range."""
        return self.end - self.start + 1

    @property
    def range(self) -> range:
        return range(self.start, self.end + 1)

    def to_header(self) -> str:
        total = "*" if self.total is None else str(self.total)
        return f"bytes {self.start}-{self.end}/{total}"


class UnsatisfiedRange(BaseModel):
    """``bytes */total``: the requested range couldn't be served."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unsatisfied"] = "unsatisfied"
    total: int | None = Field(default=None, ge=0, le=U64_MAX)

    def to_header(self) -> str:
        total = "*" if self.total is None else str(self.total)
        return f"bytes */{total}"


ContentRange = Union[ExactRange, UnsatisfiedRange]


class Metadata(BaseModel):
    """Metadata of one storage entry, built from standard HTTP headers.

    Unset fields mean the header was absent. Instances are frozen; use
    ``with_updates`` to layer backend-specific values on top.
    """

    model_config = ConfigDict(frozen=True)

    mode: EntryMode
    content_length: int | None = Field(default=None, ge=0, le=U64_MAX)
    content_type: str | None = None
    content_range: ContentRange | None = Field(default=None, discriminator="kind")
    etag: str | None = None
    content_md5: str | None = None
    last_modified: AwareDatetime | None = None
    content_disposition: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.mode is EntryMode.DIR

    @property
    def is_file(self) -> bool:
        return self.mode is EntryMode.FILE

    def with_updates(self, **fields: Any) -> Metadata:
        """Return a validated copy with *fields* replaced."""
        unknown = set(fields) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown metadata fields: {', '.join(sorted(unknown))}")
        return type(self).model_validate({**self.model_dump(), **fields})
