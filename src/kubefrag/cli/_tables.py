"""Rich table builders used by the CLI.

Kept separate to keep the command module smaller.
"""

from __future__ import annotations

from rich.table import Table

from kubefrag.core.models import ResourceList


def build_mappings_table(mappings: dict[str, list[str]]) -> Table:
    """Build the (Kind, Tokens, Suffix) table for `kubefrag mappings`."""
    table = Table(show_header=True, title="Kind Mappings")
    table.add_column("Kind", style="cyan")
    table.add_column("Tokens")
    table.add_column("Suffix")
    for kind, tokens in mappings.items():
        table.add_row(kind, ", ".join(tokens), tokens[-1])
    return table


def build_resources_table(resources: ResourceList) -> Table:
    """Build the (Kind, Name, API Version) summary table for `kubefrag build`."""
    table = Table(show_header=True)
    table.add_column("Kind", style="cyan")
    table.add_column("Name")
    table.add_column("API Version")
    for item in resources.items:
        table.add_row(item.kind, item.name or "", item.api_version or "")
    return table
