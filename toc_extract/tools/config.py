"""
Config tool: CLI subapp only. Implementation in toc_extract.config.
"""

from pathlib import Path
from typing import Optional

import typer

from toc_extract import config as config_module
from toc_extract.models import ExtractionConfig

config_app = typer.Typer(help="Extraction thresholds stored in .toc_extract.json.")


@config_app.command("show")
def _show() -> None:
    """Show the resolved config file and the thresholds in effect."""
    path = config_module.get_config_path()
    if path.is_file():
        typer.echo(f"Config file: {path}")
    else:
        typer.echo(f"Config file: {path} (not found; using defaults)")
    cfg = config_module.load_config(path if path.is_file() else None)
    for key, value in cfg.model_dump().items():
        typer.echo(f"  {key}: {value}")


@config_app.command("init")
def _init(
    path: Optional[Path] = typer.Argument(None, help="Where to write (default: ./.toc_extract.json)"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a config file with default thresholds."""
    target = path or (Path.cwd() / config_module.CONFIG_FILENAME)
    if target.exists() and not force:
        typer.echo(f"Error: {target} exists (use --force to overwrite)", err=True)
        raise typer.Exit(1)
    written = config_module.save_config(ExtractionConfig(), target)
    typer.echo(f"Wrote {written}")
