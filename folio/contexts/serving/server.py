"""
Static Site Server

Serves the page shell and its static resources:

    GET /               -> index.html
    GET /src/<path>     -> files under <site_root>/src (content document, scripts)
    GET /assets/<path>  -> files under <site_root>/assets (resume, images)

Nothing is rendered per request; the page renders itself from src/data.json.
"""

from pathlib import Path
from typing import Optional

from flask import Blueprint, Flask, current_app, send_from_directory

from folio.contexts.serving.logger import _log_debug
from folio.utils.config import SITE_ROOT

SHELL_FILENAME = "index.html"

bp = Blueprint("site", __name__)


def _site_root() -> Path:
    return Path(current_app.config["SITE_ROOT"])


@bp.route("/")
def index():
    return send_from_directory(_site_root(), SHELL_FILENAME)


@bp.route("/src/<path:filename>")
def src_file(filename):
    return send_from_directory(_site_root() / "src", filename)


@bp.route("/assets/<path:filename>")
def asset_file(filename):
    return send_from_directory(_site_root() / "assets", filename)


def create_app(site_root: Optional[Path] = None) -> Flask:
    """
    Build the Flask app serving the site directory.

    Args:
        site_root: Directory holding index.html, src/ and assets/ (defaults to SITE_ROOT)

    Raises:
        FileNotFoundError: If the site root has no index.html
    """
    site_root = Path(site_root or SITE_ROOT).resolve()
    if not (site_root / SHELL_FILENAME).is_file():
        raise FileNotFoundError(f"Page shell not found: {site_root / SHELL_FILENAME}")

    app = Flask(__name__)
    app.config["SITE_ROOT"] = str(site_root)
    app.register_blueprint(bp)
    _log_debug(f"Serving site root {site_root}")
    return app
