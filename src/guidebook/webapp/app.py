"""Flask application factory."""

import logging

from flask import Flask, current_app, request

from ..fetcher import GuideFetcher
from ..preferences import PREFERS_COLOR_SCHEME_HEADER, THEMES, is_valid_theme, resolve_theme
from ..registry import load_registry
from .config import Config
from .services.guide_service import EXTENSION_KEY, GuideService

logger = logging.getLogger(__name__)


def current_theme() -> str:
    """Resolve the display theme for the current request.

    Theme can be set via:
    1. Query parameter: ?theme=dark (this request only)
    2. Cookie: guidebook-theme=dark
    3. Client hint: Sec-CH-Prefers-Color-Scheme
    4. Default: DEFAULT_THEME from config
    """
    theme = request.args.get("theme")
    if is_valid_theme(theme):
        return theme
    return resolve_theme(
        request.cookies.get(current_app.config["THEME_COOKIE"]),
        request.headers.get(PREFERS_COLOR_SCHEME_HEADER),
        current_app.config["DEFAULT_THEME"],
    )


def create_app(config_class=Config):
    """Create and configure the Flask application."""
    app = Flask(
        __name__,
        template_folder="templates",
        static_folder="static",
    )
    app.config.from_object(config_class)

    # Fail fast on a broken registry
    registry = load_registry(app.config.get("GUIDE_INDEX_FILE"))
    fetcher = GuideFetcher(app.config["GUIDES_PATH"], registry)
    app.extensions[EXTENSION_KEY] = GuideService(registry, fetcher)
    logger.info(f"Serving {len(registry)} guides from {fetcher.guides_path}")

    # Register blueprints
    from .routes import guides, theme

    app.register_blueprint(guides.bp)
    app.register_blueprint(theme.bp)

    @app.context_processor
    def inject_theme():
        """Inject theme variable into all templates."""
        return {"theme": current_theme(), "available_themes": THEMES}

    @app.after_request
    def request_color_scheme_hint(response):
        # Ask the browser to send its color scheme on later requests.
        response.headers.setdefault("Accept-CH", PREFERS_COLOR_SCHEME_HEADER)
        return response

    return app


def main():
    """Entry point for serving the webapp directly."""
    app = create_app()
    app.run(debug=True, host="127.0.0.1", port=5000)


if __name__ == "__main__":
    main()
