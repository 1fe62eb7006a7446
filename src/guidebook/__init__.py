"""Guidebook - render lightweight-markup guides as HTML.

The core is ``render_markup``, a pure markup-to-HTML converter. The Flask
shell in ``guidebook.webapp`` serves registered guides in an accordion with
lazy loading and a persisted light/dark theme.
"""

from guidebook.markup import convert, escape_html, render_markup
from guidebook.models.guide import Guide
from guidebook.registry import DEFAULT_GUIDES, GuideRegistry, load_registry

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_GUIDES",
    "Guide",
    "GuideRegistry",
    "convert",
    "escape_html",
    "load_registry",
    "render_markup",
]
