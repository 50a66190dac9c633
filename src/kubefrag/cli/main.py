"""kubefrag CLI - Kubernetes resource fragment enrichment.

This module provides the command-line interface for kubefrag, enabling
building resource lists from fragment directories and inspecting the
kind/filename mappings.
"""

from __future__ import annotations

import json
import logging
import traceback
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from kubefrag.core.errors import KubefragError

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="kubefrag",
    help="Enrich Kubernetes resource fragments from file naming conventions",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

FRAGMENT_EXTENSIONS = (".yaml", ".yml", ".json")

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")


def print_error(e: KubefragError) -> None:
    """Print a kubefrag error with its details."""
    err_console.print(f"[red]Error:[/red] {escape(e.message)}")
    if e.details:
        err_console.print(f"  [dim]{escape(e.details)}[/dim]")
    print_exception(e)


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through rich."""
    from kubefrag.core.config import get_config

    level = logging.DEBUG if verbose else get_config().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging and full tracebacks"),
    ] = False,
) -> None:
    """kubefrag CLI - Kubernetes resource fragment enrichment."""
    set_verbose(verbose)
    configure_logging(verbose)


def get_client(mappings_file: Path | None = None):
    """Create a client, adding mappings from ``mappings_file`` if given."""
    from kubefrag.client import KubefragClient
    from kubefrag.mappings.catalog import load_mappings_file

    try:
        client = KubefragClient()
        if mappings_file is not None:
            client.upsert_mappings(load_mappings_file(mappings_file))
        return client
    except KubefragError as e:
        print_error(e)
        raise typer.Exit(1)


def collect_fragment_files(paths: list[Path]) -> list[Path]:
    """Expand directories into their fragment files, sorted by name."""
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(
                sorted(
                    (
                        child
                        for child in path.iterdir()
                        if child.is_file() and child.suffix.lower() in FRAGMENT_EXTENSIONS
                    ),
                    key=lambda child: child.name,
                )
            )
        else:
            files.append(path)
    return files


MappingsFileOption = Annotated[
    Optional[Path],
    typer.Option(
        "--mappings-file",
        "-m",
        help="YAML file with additional kind/filename mappings",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
]


@app.command()
def build(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Fragment files or directories holding fragments", exists=True),
    ],
    name: Annotated[
        Optional[str],
        typer.Option("--name", "-n", help="Default resource name (defaults to directory name)"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file path (defaults to stdout)"),
    ] = None,
    output_format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: yaml or json"),
    ] = None,
    mappings_file: MappingsFileOption = None,
) -> None:
    """Build a resource list from fragment files.

    Example:
        kubefrag build src/main/jkube
        kubefrag build src/main/jkube --name my-app -o resources.yaml
    """
    if output_format is not None and output_format not in ("yaml", "json"):
        err_console.print(f"[red]Error:[/red] Invalid format: {escape(output_format)}")
        err_console.print("  Valid options: yaml, json")
        raise typer.Exit(1)

    client = get_client(mappings_file)
    directories = [path for path in paths if path.is_dir()]
    default_name = name or (directories[0].resolve().name if directories else None)

    try:
        resources = client.build_resource_list(collect_fragment_files(paths), default_name)
        text = client.render(resources, output_format)
    except KubefragError as e:
        print_error(e)
        raise typer.Exit(1)

    if output is None:
        typer.echo(text, nl=False)
        return

    try:
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        print_error(KubefragError(f"Cannot write output file {output}", details=str(e)))
        raise typer.Exit(1)

    from kubefrag.cli._tables import build_resources_table

    console.print(f"[green]✓[/green] Wrote {len(resources.items)} resources to: {output}")
    if resources.items:
        console.print(build_resources_table(resources))


@app.command()
def mappings(
    mappings_file: MappingsFileOption = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
) -> None:
    """List the kind/filename token mappings.

    Example:
        kubefrag mappings
        kubefrag mappings --mappings-file extra-mappings.yaml --json
    """
    from kubefrag.cli._tables import build_mappings_table

    client = get_client(mappings_file)
    current = client.registry.mappings()

    if json_output:
        typer.echo(json.dumps(current, ensure_ascii=False, indent=2))
        return

    console.print(build_mappings_table(current))


@app.command()
def suffix(
    name: Annotated[str, typer.Argument(help="Resource name")],
    kind: Annotated[str, typer.Argument(help="Resource kind")],
    mappings_file: MappingsFileOption = None,
) -> None:
    """Print the name suffixed with the kind's filename token.

    Example:
        kubefrag suffix my-app DeploymentConfig
    """
    client = get_client(mappings_file)
    typer.echo(client.suffix_for_kind(name, kind))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
