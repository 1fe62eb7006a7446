"""Services for the webapp."""

from .guide_service import GuideService, LoadResult, LoadStatus, get_guide_service

__all__ = ["GuideService", "LoadResult", "LoadStatus", "get_guide_service"]
