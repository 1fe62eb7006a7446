"""Guide service - fetch and render guide content on demand.

The once-per-guide lazy-load guard lives in the page script, per browser
tab. The server renders whatever is requested and never answers with an
empty body, so every tab can fill its own content slots.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from flask import current_app

from ...errors import GuideUnavailableError
from ...fetcher import GuideFetcher
from ...markup import render_markup
from ...registry import GuideRegistry

logger = logging.getLogger(__name__)

EXTENSION_KEY = "guidebook"

UNAVAILABLE_MESSAGE = (
    '<div class="text-danger small guide-unavailable">'
    "Unable to load this guide. Ensure the Markdown file exists in the "
    "<code>/guides</code> folder.</div>"
)


class LoadStatus(Enum):
    """Outcome of a load attempt."""

    LOADED = "loaded"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class LoadResult:
    status: LoadStatus
    html: str = ""


class GuideService:
    """Renders guides to HTML, caching by source modification time."""

    def __init__(self, registry: GuideRegistry, fetcher: GuideFetcher):
        self.registry = registry
        self.fetcher = fetcher
        # guide_id -> (html, source mtime)
        self._cache: dict[str, tuple[str, float]] = {}

    async def render(self, guide_id: str) -> str:
        """Fetch a guide's source and convert it to HTML.

        Returns cached HTML if the source hasn't been modified since it was
        last rendered.

        Raises:
            GuideNotFoundError: Unknown guide id
            GuideUnavailableError: Source could not be retrieved
        """
        current_mtime = self.fetcher.source_mtime(guide_id)

        cached = self._cache.get(guide_id)
        if cached is not None and cached[1] == current_mtime:
            logger.debug(f"Render cache hit for {guide_id}")
            return cached[0]

        source = await self.fetcher.fetch(guide_id)
        html = render_markup(source)
        self._cache[guide_id] = (html, current_mtime)
        return html

    async def load(self, guide_id: str) -> LoadResult:
        """Render a guide for display, containing retrieval failures.

        A failure becomes an inline message scoped to this guide; it never
        propagates. GuideNotFoundError still does.
        """
        try:
            html = await self.render(guide_id)
        except GuideUnavailableError as e:
            logger.warning(f"Failed to load guide {guide_id}: {e.reason}")
            return LoadResult(LoadStatus.UNAVAILABLE, UNAVAILABLE_MESSAGE)

        return LoadResult(LoadStatus.LOADED, html)

    def clear_cache(self) -> None:
        self._cache.clear()


def get_guide_service() -> GuideService:
    """Get the guide service bound to the current app."""
    return current_app.extensions[EXTENSION_KEY]
