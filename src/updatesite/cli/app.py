# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Annotated

import typer

from updatesite.core.constants import OutputFormat

app = typer.Typer(
    name="updatesite",
    help="Plugin update site: store catalogs and report available updates",
    no_args_is_help=True,
)

SiteOption = Annotated[
    str | None,
    typer.Option("--site", "-s", help="Update site id (defaults to UPDATESITE_SITE_ID)"),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format"),
]


@app.callback()
def main() -> None:
    """Plugin update site: store catalogs and report available updates."""
    from updatesite.core.config import get_settings
    from updatesite.core.logging import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)


def _load_site(site_id: str | None):
    from updatesite.core.config import get_settings
    from updatesite.site import UpdateSite

    return UpdateSite.from_settings(get_settings(), site_id=site_id)


@app.command()
def fetch(
    site_id: SiteOption = None,
    force: Annotated[
        bool, typer.Option("--force", help="Fetch even if the stored catalog is fresh")
    ] = False,
) -> None:
    """Download the catalog from the configured update site URL and store it."""
    from updatesite.core.config import get_settings
    from updatesite.core.exceptions import UpdateSiteError
    from updatesite.remote.client import UpdateSiteClient

    settings = get_settings()
    site = _load_site(site_id)

    if not force and not site.is_due(settings.refresh_interval):
        typer.echo(f"Catalog for site '{site.id}' is up to date.")
        return

    client = UpdateSiteClient(timeout=settings.fetch_timeout)
    try:
        stored = asyncio.run(site.update_directly(client))
    except UpdateSiteError as exc:
        typer.echo(f"Fetch failed: {exc}", err=True)
        raise typer.Exit(1) from exc

    if stored:
        typer.echo(f"Stored catalog for site '{site.id}' at {site.data_file.path}")
    else:
        typer.echo(f"Update site returned an empty document for site '{site.id}'.", err=True)
        raise typer.Exit(1)


@app.command(name="post-back")
def post_back(
    source: Annotated[
        str, typer.Argument(help="Catalog document file, or '-' for stdin")
    ],
    site_id: SiteOption = None,
) -> None:
    """Store a catalog document verbatim, as the receive endpoint does."""
    if source == "-":
        document = sys.stdin.read()
    else:
        path = Path(source)
        if not path.is_file():
            typer.echo(f"File not found: {source}", err=True)
            raise typer.Exit(1)
        document = path.read_text(encoding="utf-8")

    site = _load_site(site_id)
    if site.post_back(document):
        typer.echo(f"Stored catalog for site '{site.id}' at {site.data_file.path}")
    else:
        typer.echo("Document is blank; nothing stored.")


@app.command()
def installed(
    site_id: SiteOption = None,
    fmt: FormatOption = OutputFormat.CONSOLE,
) -> None:
    """List catalog plugins that are installed."""
    site = _load_site(site_id)
    _output_plugins(
        site.get_installed(),
        fmt,
        title=f"Installed Plugins ({site.id})",
        empty_message="No installed plugins found in the catalog.",
    )


@app.command()
def updates(
    site_id: SiteOption = None,
    fmt: FormatOption = OutputFormat.CONSOLE,
) -> None:
    """List installed plugins with a newer version available."""
    from updatesite.core.exceptions import VersionParseError

    site = _load_site(site_id)
    try:
        plugins = site.get_updates()
    except VersionParseError as exc:
        typer.echo(f"Catalog contains an unparseable version: {exc}", err=True)
        raise typer.Exit(1) from exc

    _output_plugins(
        plugins,
        fmt,
        title=f"Available Updates ({site.id})",
        empty_message="All installed plugins are up to date.",
    )


@app.command()
def compare(
    candidate: Annotated[str, typer.Argument(help="Candidate (new) version")],
    baseline: Annotated[str, typer.Argument(help="Baseline (installed) version")],
) -> None:
    """Report whether CANDIDATE is newer than BASELINE."""
    from updatesite.core.exceptions import VersionParseError
    from updatesite.plugins.versions import is_newer

    try:
        newer = is_newer(candidate, baseline)
    except VersionParseError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    typer.echo("newer" if newer else "not newer")


def _output_plugins(plugins, fmt: OutputFormat, *, title: str, empty_message: str) -> None:
    if fmt == OutputFormat.JSON:
        from updatesite.cli.formatters.json_fmt import format_plugins_json

        sys.stdout.write(format_plugins_json(plugins) + "\n")
    else:
        from updatesite.cli.formatters.console import format_plugin_table

        format_plugin_table(plugins, title=title, empty_message=empty_message)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
) -> None:
    """Start the update site API server."""
    import uvicorn

    from updatesite.core.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "updatesite.api.app:_create_app_from_env",
        host=host or settings.api_host,
        port=port or settings.api_port,
        factory=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    from updatesite import __version__

    typer.echo(f"updatesite v{__version__}")
