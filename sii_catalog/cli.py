"""
CLI entry point for sii-catalog.
"""

import dataclasses
import json
import logging
from functools import wraps
from pathlib import Path

import typer
from rich.console import Console

from sii_catalog.aggregate import build_source_path, scan_tree
from sii_catalog.config import (
    CONFIG_FILENAME,
    CatalogConfig,
    load_config,
    write_default_config,
)
from sii_catalog.exceptions import (
    InvalidConfigError,
    OutputWriteError,
    ScanRootNotFoundError,
    SiiCatalogError,
    format_error_for_cli,
)
from sii_catalog.export import (
    OUTPUT_FORMATS,
    engine_to_dict,
    save_document,
    to_document,
    transmission_to_dict,
)
from sii_catalog.models.records import RECORD_SCHEMA_VERSION, Complete
from sii_catalog.parse.engine import parse_engine_file
from sii_catalog.parse.transmission import parse_transmission_file
from sii_catalog.util.files import list_subdirs
from sii_catalog.util.progress import folder_progress, show_skipped, show_summary

app = typer.Typer(
    name="sii-catalog",
    help="Build an engine/transmission catalog from truck .sii definition files",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def handle_errors(func):
    """Decorator to handle exceptions in CLI commands with nice formatting."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except SiiCatalogError as e:
            console.print(format_error_for_cli(e))
            raise typer.Exit(1)
        except Exception as e:
            console.print(f"[red]Unexpected error:[/red] {str(e)}")
            console.print("\n[yellow]This may be a bug. Re-run with --verbose for details.[/yellow]")
            logger.exception("Unexpected error")
            raise typer.Exit(1)

    return wrapper


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich; DEBUG when verbose, WARNING otherwise."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def resolve_config(config_file: Path | None) -> CatalogConfig:
    """Load --config if given, else ./sii-catalog.yaml if present, else defaults."""
    if config_file is not None:
        return load_config(config_file)

    local_config = Path.cwd() / CONFIG_FILENAME
    if local_config.exists():
        logger.debug(f"Using configuration {local_config}")
        return load_config(local_config)

    return CatalogConfig()


@app.command()
@handle_errors
def init(
    directory: Path = typer.Argument(Path("."), help="Directory to write sii-catalog.yaml into"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration"),
):
    """Write a default sii-catalog.yaml configuration."""
    config_file = write_default_config(directory, force=force)

    console.print(f"[green]✓ Wrote configuration to {config_file}[/green]")
    console.print("\n[dim]Next steps:[/dim]")
    console.print(f"  # Set scan.root in {config_file.name} to your extracted def/vehicle/truck")
    console.print("  sii-catalog scan")


@app.command()
@handle_errors
def scan(
    config_file: Path | None = typer.Option(None, "--config", help="Configuration file"),
    root: Path | None = typer.Option(None, "--root", help="Truck definition root to scan"),
    out: Path | None = typer.Option(None, "--out", help="Output file"),
    compact: bool = typer.Option(
        False, "--compact", help="Write compact JSON (json format only)"
    ),
    fmt: str | None = typer.Option(None, "--format", help="Output format (json|yaml)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Scan brand.model folders and write the engine/transmission catalog."""
    configure_logging(verbose)

    config = resolve_config(config_file)
    overrides = {}
    if root is not None:
        overrides["root"] = root
    if out is not None:
        overrides["output"] = out
    if compact:
        overrides["pretty"] = False
    if fmt is not None:
        if fmt not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                f"unsupported output format '{fmt}' (expected one of: {', '.join(OUTPUT_FORMATS)})"
            )
        overrides["output_format"] = fmt
    config = dataclasses.replace(config, **overrides)
    if compact and config.output_format != "json":
        raise InvalidConfigError(
            f"--compact only applies to json output, not {config.output_format}"
        )

    if not config.root.is_dir():
        raise ScanRootNotFoundError(str(config.root))

    console.print(f"[bold blue]Scanning definitions in:[/bold blue] {config.root}")

    total = len(list_subdirs(config.root))
    with folder_progress(total) as on_folder:
        report = scan_tree(config, on_folder=on_folder)

    document = to_document(report.entries)
    if not save_document(document, config.output, config.output_format, config.pretty):
        raise OutputWriteError(str(config.output))

    console.print(f"[green]✓ Catalog written to {config.output}[/green]")
    show_summary(
        "Scan summary",
        {
            "Folders scanned": report.folders_seen,
            "Files parsed": report.files_parsed,
            "Brands": len(document),
            "Models": len(report.entries),
            "Engines": report.engines_found,
            "Transmissions": report.transmissions_found,
            "Skipped items": len(report.skipped),
            "Record schema": f"v{RECORD_SCHEMA_VERSION}",
        },
    )
    if verbose:
        show_skipped(report.skipped)


@app.command()
@handle_errors
def inspect(
    file: Path = typer.Argument(..., help="Engine or transmission .sii file"),
    kind: str | None = typer.Option(
        None, "--kind", help="engine|transmission (default: from the parent folder name)"
    ),
    config_file: Path | None = typer.Option(None, "--config", help="Configuration file"),
    require_rpm_limit: bool = typer.Option(
        False,
        "--require-rpm-limit",
        help="Reject engines without rpm_limit (also enabled by scan.require_rpm_limit)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Parse a single definition file and print the extracted record."""
    configure_logging(verbose)

    if not file.is_file():
        raise SiiCatalogError(
            f"File not found: {file}",
            "Check that the file path is correct and the file exists:\n" f"  ls -l {file}",
        )

    config = resolve_config(config_file)
    component_dirs = {"engine": config.engine_dir, "transmission": config.transmission_dir}
    if kind is None:
        kind = next((k for k, d in component_dirs.items() if d == file.parent.name), None)
    if kind not in component_dirs:
        raise SiiCatalogError(
            f"Cannot tell whether {file.name} is an engine or a transmission",
            "Pass the component type explicitly:\n"
            f"  sii-catalog inspect {file} --kind engine",
        )

    source_path = build_source_path(
        config.code_prefix, file.parent.parent.name, component_dirs[kind], file.name
    )
    if kind == "engine":
        result = parse_engine_file(
            file, source_path, require_rpm_limit or config.require_rpm_limit
        )
    else:
        result = parse_transmission_file(file, source_path)

    if not isinstance(result, Complete):
        console.print(f"[yellow]No {kind} record in {file.name}:[/yellow] {result.reason}")
        raise typer.Exit(1)

    to_dict = engine_to_dict if kind == "engine" else transmission_to_dict
    console.print_json(json.dumps(to_dict(result.record), ensure_ascii=False))


if __name__ == "__main__":
    app()
