"""Route blueprints for the webapp."""

from . import guides, theme

__all__ = ["guides", "theme"]
