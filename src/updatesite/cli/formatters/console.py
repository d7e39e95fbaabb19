# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output for plugin listings."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from updatesite.models.plugin import PluginDescriptor

console = Console()


def format_plugin_table(
    plugins: list[PluginDescriptor],
    *,
    title: str,
    empty_message: str,
) -> None:
    """Print *plugins* as a table, or *empty_message* when there are none.

    The title and catalog values are escaped, so brackets print literally.
    """
    if not plugins:
        console.print(f"[dim]{empty_message}[/dim]")
        return

    table = Table(title=escape(title))
    table.add_column("Plugin", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Installed")
    table.add_column("Available", style="bold")

    for p in plugins:
        available = escape(p.version)
        if p.installed_version is not None and p.version != p.installed_version:
            available = f"[green]{available}[/green]"
        table.add_row(
            escape(p.id),
            escape(p.title or "-"),
            escape(p.installed_version or "-"),
            available,
        )

    console.print(table)
