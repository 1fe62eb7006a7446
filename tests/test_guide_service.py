"""Tests for guide rendering and failure containment."""

import os

import pytest

from guidebook.errors import GuideNotFoundError
from guidebook.fetcher import GuideFetcher
from guidebook.webapp.services.guide_service import (
    UNAVAILABLE_MESSAGE,
    GuideService,
    LoadStatus,
)


@pytest.fixture
def service(guides_dir, registry):
    return GuideService(registry, GuideFetcher(guides_dir, registry))


@pytest.fixture
def fetch_calls(service, monkeypatch):
    """Record every source fetch made by the service."""
    calls = []
    original = service.fetcher.fetch

    async def counting_fetch(guide_id):
        calls.append(guide_id)
        return await original(guide_id)

    monkeypatch.setattr(service.fetcher, "fetch", counting_fetch)
    return calls


class TestGuideService:
    """Tests for rendering with an mtime-keyed cache."""

    @pytest.mark.asyncio
    async def test_render(self, service):
        html = await service.render("alpha")
        assert html.startswith("<h1>Alpha Guide</h1>")
        assert "<strong>bold</strong>" in html
        assert "<ul>\n<li>first</li>\n<li>second</li>\n</ul>" in html

    @pytest.mark.asyncio
    async def test_cache_hit_skips_fetch(self, service, fetch_calls):
        first = await service.render("alpha")
        second = await service.render("alpha")
        assert first == second
        assert fetch_calls == ["alpha"]

    @pytest.mark.asyncio
    async def test_modified_source_is_rerendered(self, service, guides_dir, fetch_calls):
        await service.render("alpha")
        source = guides_dir / "alpha.md"
        source.write_text("# Changed", encoding="utf-8")
        stat = source.stat()
        os.utime(source, (stat.st_atime, stat.st_mtime + 10))

        assert await service.render("alpha") == "<h1>Changed</h1>"
        assert fetch_calls == ["alpha", "alpha"]

    @pytest.mark.asyncio
    async def test_clear_cache(self, service, fetch_calls):
        await service.render("alpha")
        service.clear_cache()
        await service.render("alpha")
        assert fetch_calls == ["alpha", "alpha"]


class TestLoad:
    """Loads always render; failures are contained and can be retried."""

    @pytest.mark.asyncio
    async def test_loaded(self, service):
        result = await service.load("alpha")
        assert result.status is LoadStatus.LOADED
        assert "<h1>Alpha Guide</h1>" in result.html

    @pytest.mark.asyncio
    async def test_repeated_load_returns_content(self, service):
        """Every caller gets the full fragment, not just the first one."""
        first = await service.load("alpha")
        second = await service.load("alpha")
        assert second.status is LoadStatus.LOADED
        assert second.html == first.html

    @pytest.mark.asyncio
    async def test_failure_is_contained(self, service):
        result = await service.load("beta")
        assert result.status is LoadStatus.UNAVAILABLE
        assert result.html == UNAVAILABLE_MESSAGE

    @pytest.mark.asyncio
    async def test_failure_does_not_affect_other_guides(self, service):
        await service.load("beta")
        result = await service.load("alpha")
        assert result.status is LoadStatus.LOADED

    @pytest.mark.asyncio
    async def test_retry_after_failure(self, service, guides_dir):
        assert (await service.load("beta")).status is LoadStatus.UNAVAILABLE

        (guides_dir / "beta.md").write_text("Now *here*", encoding="utf-8")
        result = await service.load("beta")
        assert result.status is LoadStatus.LOADED
        assert result.html == "<p>Now <em>here</em></p>"

    @pytest.mark.asyncio
    async def test_unknown_guide_propagates(self, service):
        with pytest.raises(GuideNotFoundError):
            await service.load("missing")
