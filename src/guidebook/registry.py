"""Guide registry.

The registry is a static, ordered list of guide descriptors. By default it is
the built-in ``DEFAULT_GUIDES``; a JSON index file can replace it:

    [
      {
        "id": "rigit_zoo_guide",
        "title": "Rigit Zoo Walkthrough",
        "description": "...",
        "sourceFile": "rigit_zoo_guide.md",
        "companionFile": "rigit_zoo_guide.pdf"
      }
    ]

Source and companion files live in the guides directory.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import ValidationError

from .errors import RegistryError
from .models.guide import Guide

logger = logging.getLogger(__name__)

DEFAULT_GUIDES: tuple[Guide, ...] = (
    Guide(
        id="rigit_zoo_guide",
        title="Rigit Zoo Walkthrough",
        description="Rigit Zoo past exam-style ASP.NET Core MVC task.",
        source_file="rigit_zoo_guide.md",
        companion_file="rigit_zoo_guide.pdf",
    ),
)


class GuideRegistry:
    """Ordered, read-only collection of guides keyed by id."""

    def __init__(self, guides: Iterable[Guide] = DEFAULT_GUIDES):
        self._guides: tuple[Guide, ...] = tuple(guides)
        self._by_id: dict[str, Guide] = {}
        for guide in self._guides:
            if guide.id in self._by_id:
                raise ValueError(f"Duplicate guide id: {guide.id!r}")
            self._by_id[guide.id] = guide

    @classmethod
    def from_file(cls, path: str | Path) -> GuideRegistry:
        """Load a registry from a JSON index file.

        Raises:
            RegistryError: If the file is missing, not valid JSON, not a list,
                or contains an invalid or duplicate descriptor
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RegistryError(f"Cannot read guide index {path}: {e}") from e

        if not isinstance(data, list):
            raise RegistryError(f"Guide index {path} must contain a JSON array")

        guides = []
        for position, entry in enumerate(data):
            try:
                guides.append(Guide.model_validate(entry))
            except ValidationError as e:
                raise RegistryError(f"Invalid guide #{position} in {path}: {e}") from e

        try:
            registry = cls(guides)
        except ValueError as e:
            raise RegistryError(f"{e} in {path}") from e

        logger.info(f"Loaded {len(registry)} guides from {path}")
        return registry

    def list_guides(self) -> list[Guide]:
        """Return all guides in registration order."""
        return list(self._guides)

    def get_guide(self, guide_id: str) -> Guide | None:
        return self._by_id.get(guide_id)

    def __len__(self) -> int:
        return len(self._guides)

    def __iter__(self) -> Iterator[Guide]:
        return iter(self._guides)

    def __contains__(self, guide_id: object) -> bool:
        return guide_id in self._by_id


def load_registry(index_file: str | Path | None = None) -> GuideRegistry:
    """Load the registry from ``index_file`` if given, else the built-in guides."""
    if index_file:
        return GuideRegistry.from_file(index_file)
    return GuideRegistry(DEFAULT_GUIDES)
