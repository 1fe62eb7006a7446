"""Exception types for Guidebook.

Retrieval failures are a single kind, ``GuideUnavailableError``. Callers that
request guide content catch it at the call site and show an inline message;
it is never allowed to abort the page or affect other guides.
"""


class GuidebookError(Exception):
    """Base class for all Guidebook errors."""


class RegistryError(GuidebookError):
    """The guide registry could not be loaded or is invalid."""


class GuideNotFoundError(GuidebookError, LookupError):
    """No guide is registered under the requested identifier."""

    def __init__(self, guide_id: str):
        self.guide_id = guide_id
        super().__init__(f"Unknown guide: {guide_id!r}")


class GuideUnavailableError(GuidebookError):
    """The source text of a registered guide could not be retrieved."""

    def __init__(self, guide_id: str, reason: str):
        self.guide_id = guide_id
        self.reason = reason
        super().__init__(f"Guide {guide_id!r} is unavailable: {reason}")
