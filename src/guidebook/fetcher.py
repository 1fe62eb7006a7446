"""Content fetcher - retrieves raw guide source text on demand.

Sources are plain files in the guides directory. Every fetch reads the file
again; nothing is cached here, so an edited guide is picked up on the next
request. Callers that cache rendered output key it on ``source_mtime``.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .errors import GuideNotFoundError, GuideUnavailableError
from .models.guide import Guide
from .registry import GuideRegistry

logger = logging.getLogger(__name__)


class GuideFetcher:
    """Reads guide sources and companion files from a guides directory."""

    def __init__(self, guides_path: str | Path, registry: GuideRegistry):
        """Initialize fetcher.

        Args:
            guides_path: Directory containing guide sources and companions
            registry: Registry used to resolve guide ids
        """
        self.guides_path = Path(guides_path)
        self.registry = registry

    def get_guide(self, guide_id: str) -> Guide:
        """Look up a guide, raising GuideNotFoundError if it is not registered."""
        guide = self.registry.get_guide(guide_id)
        if guide is None:
            raise GuideNotFoundError(guide_id)
        return guide

    def _resolve(self, guide_id: str, relative: str) -> Path:
        root = self.guides_path.resolve()
        path = (root / relative).resolve()
        if not path.is_relative_to(root):
            raise GuideUnavailableError(guide_id, f"{relative} is outside the guides directory")
        return path

    def source_path(self, guide_id: str) -> Path:
        guide = self.get_guide(guide_id)
        return self._resolve(guide_id, guide.source_file)

    def source_mtime(self, guide_id: str) -> float:
        """Modification time of the guide source.

        Raises:
            GuideNotFoundError: Unknown guide id
            GuideUnavailableError: Source file cannot be stat'ed
        """
        path = self.source_path(guide_id)
        try:
            return path.stat().st_mtime
        except OSError as e:
            raise GuideUnavailableError(guide_id, str(e)) from e

    def fetch_source(self, guide_id: str) -> str:
        """Read the raw markup source of a guide.

        Raises:
            GuideNotFoundError: Unknown guide id
            GuideUnavailableError: Source file missing or unreadable
        """
        path = self.source_path(guide_id)
        logger.debug(f"Fetching guide {guide_id} from {path}")
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise GuideUnavailableError(guide_id, str(e)) from e

    async def fetch(self, guide_id: str) -> str:
        """Async variant of fetch_source; the file read runs in a worker thread."""
        return await asyncio.to_thread(self.fetch_source, guide_id)

    def companion_path(self, guide_id: str) -> Path | None:
        """Path of the guide's companion file, or None if it has none on disk."""
        guide = self.get_guide(guide_id)
        if not guide.companion_file:
            return None
        try:
            path = self._resolve(guide_id, guide.companion_file)
        except GuideUnavailableError:
            logger.warning(f"Companion for {guide_id} resolves outside the guides directory")
            return None
        if not path.is_file():
            return None
        return path
