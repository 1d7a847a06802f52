#!/usr/bin/env python3
"""
Headless Page Rendering CLI

Runs the portfolio page without a browser and inspects the content document.

Commands:
    render - Render the page shell with the content document to static HTML
    check  - Load the content document without fallback and report what it holds

Examples:\n

    render_site.py render                                # Print the rendered page

    render_site.py render --output outs/index.html       # Write the rendered page

    render_site.py render --hash projects                # Render scrolled to #projects

    render_site.py render --reduced-motion               # Render with all fade-ins revealed

    render_site.py check --content src/data.json         # Validate the content document
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.bootstrap import install_error_handlers, render_snapshot
from folio.contexts.content import ContentLoader, ContentLoadError
from folio.utils.config import LOGS_PATH, SITE_ROOT, load_settings
from folio.utils.logger import setup_logger
from folio.utils.timestamp import now

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path.cwd()))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Render the portfolio page headlessly and check its content document",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    content: Annotated[
        Optional[str],
        typer.Option(
            "--content",
            "-c",
            help="Content document (path relative to the site root, absolute path or URL)",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the rendered HTML here instead of stdout",
        ),
    ] = None,
    reduced_motion: Annotated[
        bool,
        typer.Option(
            "--reduced-motion",
            help="Render as a reduced-motion user (every fade-in revealed, instant scrolls)",
        ),
    ] = False,
    location_hash: Annotated[
        str,
        typer.Option(
            "--hash",
            help="URL fragment to open the page at (e.g., projects)",
        ),
    ] = "",
    site_root: Annotated[
        Path,
        typer.Option(
            "--site-root",
            help="Directory holding index.html and src/",
        ),
    ] = SITE_ROOT,
):
    """
    Render the page shell with its content to static HTML.

    Runs the full startup sequence against a headless environment: content
    load, section rendering, navigation, hash routing and fade-in reveals.

    Examples:\n

        $ render_site.py render --output outs/index.html

        $ render_site.py render --content https://example.com/data.json
    """
    overrides = [f"content.source={content}"] if content else None
    settings = load_settings(overrides=overrides)

    log_dir = LOGS_PATH / f"render_{now()}"
    setup_logger(
        "render",
        log_dir,
        extra_provenance={"Content": settings.content.source, "Site root": str(site_root)},
        console=output is not None,
    )

    handlers = install_error_handlers()
    try:
        html, state = render_snapshot(
            settings=settings,
            reduced_motion=reduced_motion,
            location_hash=location_hash,
            site_root=site_root,
        )
    finally:
        handlers.uninstall()

    if output is None:
        typer.echo(html)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
        typer.secho(f"✓ Rendered page written to {display_path(output)}", fg=typer.colors.GREEN)
        typer.echo(f"  Active section: {state.navigation.active_section_id}")
        typer.echo(f"  Log: {display_path(log_dir / 'render.log')}")

    if state.render_failures:
        typer.secho(
            f"✗ {len(state.render_failures)} sections failed to render",
            fg=typer.colors.RED,
            err=True,
        )
        for failure in state.render_failures:
            typer.secho(f"  - {failure.section}: {failure.original_error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("check")
def check_command(
    content: Annotated[
        Optional[str],
        typer.Option(
            "--content",
            "-c",
            help="Content document (path relative to the site root, absolute path or URL)",
        ),
    ] = None,
    site_root: Annotated[
        Path,
        typer.Option(
            "--site-root",
            help="Directory relative content paths resolve against",
        ),
    ] = SITE_ROOT,
):
    """
    Load the content document without falling back.

    Exits with code 1 and the load error when the document would be replaced
    by the fallback content on the page.

    Examples:\n

        $ render_site.py check

        $ render_site.py check --content /tmp/draft.json
    """
    settings = load_settings()
    loader = ContentLoader(
        source=content or settings.content.source,
        site_root=site_root,
        timeout_s=float(settings.content.timeout_s),
    )

    typer.secho(f"\nChecking: {loader.resolved_source}", fg=typer.colors.BLUE, bold=True)

    try:
        portfolio = loader.fetch()
    except ContentLoadError as e:
        typer.secho("✗ Content document does not load", fg=typer.colors.RED, bold=True, err=True)
        for line in str(e).splitlines():
            typer.secho(f"  {line}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Content document loads", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Name: {portfolio.about.name}")
    typer.echo(f"  Experience: {len(portfolio.experience)}")
    typer.echo(f"  Education: {len(portfolio.education)}")
    typer.echo(f"  Projects: {len(portfolio.projects)}")
    typer.echo(f"  Certifications: {len(portfolio.certifications)}")
    typer.echo(f"  Hobbies: {len(portfolio.hobbies)}")


if __name__ == "__main__":
    app()
