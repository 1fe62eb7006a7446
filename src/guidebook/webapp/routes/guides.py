"""Guide routes - the accordion page and lazily loaded guide content."""

from flask import Blueprint, abort, make_response, render_template, send_file

from ...errors import GuideNotFoundError
from ..services.guide_service import LoadStatus, get_guide_service

bp = Blueprint("guides", __name__)

_STATUS_CODES = {
    LoadStatus.LOADED: 200,
    LoadStatus.UNAVAILABLE: 503,
}


@bp.route("/")
def index():
    """Render the guide accordion. Guide content is fetched when expanded."""
    guide_service = get_guide_service()

    return render_template("pages/guides.html", guides=guide_service.registry.list_guides())


@bp.route("/guides/<guide_id>/content")
async def content(guide_id: str):
    """Return a guide's rendered HTML fragment.

    Always renders in full; the page script loads each guide once per tab.
    503 with an inline message if the source could not be retrieved.
    """
    guide_service = get_guide_service()
    if guide_id not in guide_service.registry:
        abort(404)

    result = await guide_service.load(guide_id)

    response = make_response(result.html, _STATUS_CODES[result.status])
    response.headers["Cache-Control"] = "no-store"
    return response


@bp.route("/guides/<guide_id>/download")
def download(guide_id: str):
    """Download a guide's companion file."""
    guide_service = get_guide_service()
    try:
        path = guide_service.fetcher.companion_path(guide_id)
    except GuideNotFoundError:
        abort(404)
    if path is None:
        abort(404)

    return send_file(path, as_attachment=True, download_name=path.name)
