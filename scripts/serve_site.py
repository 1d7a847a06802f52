#!/usr/bin/env python3
"""
Static Site Server CLI

Serves the page shell, the content document and assets with Flask.

Examples:\n

    serve_site.py                              # Serve on the configured host and port

    serve_site.py --port 8080                  # Serve on another port

    PORT=5000 serve_site.py                    # Port from the environment

    serve_site.py --site-root /srv/portfolio   # Serve another site directory
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from folio.contexts.serving import create_app
from folio.utils.config import LOGS_PATH, SITE_ROOT, load_settings
from folio.utils.logger import setup_logger
from folio.utils.timestamp import now

app = typer.Typer(
    help="Serve the portfolio site",
    add_completion=False,
)


@app.command()
def serve(
    port: Annotated[
        Optional[int],
        typer.Option(
            "--port",
            "-p",
            help="Port to listen on (default: PORT environment variable, then settings)",
            min=1,
            max=65535,
        ),
    ] = None,
    host: Annotated[
        Optional[str],
        typer.Option(
            "--host",
            help="Interface to bind (default: settings server.host)",
        ),
    ] = None,
    site_root: Annotated[
        Path,
        typer.Option(
            "--site-root",
            help="Directory holding index.html, src/ and assets/",
        ),
    ] = SITE_ROOT,
):
    """
    Run the static site server.

    Serves GET /, /src/<path> and /assets/<path> from the site root.
    """
    settings = load_settings()
    port = port or int(settings.server.port)
    host = host or str(settings.server.host)

    setup_logger(
        "serve",
        LOGS_PATH / f"serve_{now()}",
        extra_provenance={"Site root": str(site_root), "Address": f"{host}:{port}"},
    )

    try:
        flask_app = create_app(site_root)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nServing {site_root} on http://{host}:{port}", fg=typer.colors.BLUE, bold=True)
    flask_app.run(host=host, port=port)


if __name__ == "__main__":
    app()
