"""Theme routes - toggle and persist the light/dark preference."""

from flask import Blueprint, current_app, jsonify, redirect, request, url_for

from ...preferences import toggle_theme
from ..app import current_theme

bp = Blueprint("theme", __name__, url_prefix="/theme")


@bp.route("/toggle", methods=["POST"])
def toggle():
    """Flip the theme and store it in the preference cookie.

    JSON callers get ``{"theme": ...}``; form posts are redirected back to
    the guide list.
    """
    theme = toggle_theme(current_theme())

    if request.accept_mimetypes.best == "application/json":
        response = jsonify({"theme": theme})
    else:
        response = redirect(url_for("guides.index"))

    response.set_cookie(
        current_app.config["THEME_COOKIE"],
        theme,
        max_age=current_app.config["THEME_COOKIE_MAX_AGE"],
        samesite="Lax",
    )
    return response
