"""Guide descriptor model.

A guide is one documentation unit: a markup source file plus an optional
companion download (usually a PDF). Descriptors are immutable and validated
on construction so the rest of the app can use ``id`` directly in URLs and
HTML element ids.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Identifier-safe characters only: ids end up in URLs and element ids.
GUIDE_ID_PATTERN = r"^[A-Za-z0-9_-]+$"


def _check_relative_path(value: str) -> str:
    path = PurePosixPath(value.replace("\\", "/"))
    if path.is_absolute() or ".." in path.parts:
        raise ValueError(f"must be a relative path inside the guides directory: {value!r}")
    return value


class Guide(BaseModel):
    """A registered guide.

    Attributes:
        id: Unique, stable lookup key (letters, digits, ``_`` and ``-``)
        title: Display title shown on the accordion button
        description: Optional one-line summary shown above the content
        source_file: Markup source, relative to the guides directory
        companion_file: Optional downloadable companion, relative to the guides directory
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(pattern=GUIDE_ID_PATTERN, max_length=100)
    title: str = Field(min_length=1)
    description: str | None = Field(default=None)
    source_file: str = Field(alias="sourceFile", min_length=1)
    companion_file: str | None = Field(default=None, alias="companionFile")

    @field_validator("source_file")
    @classmethod
    def validate_source_file(cls, v: str) -> str:
        return _check_relative_path(v)

    @field_validator("companion_file")
    @classmethod
    def validate_companion_file(cls, v: str | None) -> str | None:
        if not v:
            return None
        return _check_relative_path(v)

    @property
    def collapse_id(self) -> str:
        """Element id of the collapsible body for this guide."""
        return f"guide-{self.id}-collapse"

    @property
    def heading_id(self) -> str:
        """Element id of the accordion header for this guide."""
        return f"guide-{self.id}-heading"
