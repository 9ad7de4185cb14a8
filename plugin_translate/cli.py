"""CLI entry point for plugin-translate."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.syntax import Syntax
from rich.table import Table

from plugin_translate.config import TranslateConfig, load_config
from plugin_translate.config.loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE
from plugin_translate.translate import PluginTranslator, TranslateReport

app = typer.Typer(
    name="plugin-translate",
    help="Generate OpenCode commands and agents from Claude Code plugin sources.",
)

config_app = typer.Typer(help="Manage plugin-translate configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: TranslateConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _get_config() -> TranslateConfig:
    if _config is None:
        return load_config()
    return _config


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[level],
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help=f"Path to {CONFIG_FILENAME}")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    _configure_logging(_config.log_level)


def _display_report(report: TranslateReport) -> None:
    title = "Translation (dry run)" if report.dry_run else "Translation"
    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Commands", str(report.commands))
    table.add_row("Agents", str(report.agents))
    table.add_row("Skipped", str(len(report.skipped)))
    table.add_row("Duration", f"{report.duration:.2f}s")
    rprint(table)

    for skip in report.skipped:
        rprint(f"  [yellow]skipped:[/yellow] {skip.kind.value} {skip.name} ({skip.reason})")


@app.command()
def run(
    root: str = typer.Argument(".", help="Plugin root containing commands/ and agents/"),
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Preview without writing")] = False,
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: table or json")
    ] = "table",
) -> None:
    """Translate plugin commands and agents into the .opencode/ tree."""
    if format not in ("table", "json"):
        rprint(f"[red]Error:[/red] Invalid format '{format}'. Choose table or json.")
        raise typer.Exit(1)

    cfg = _get_config()
    translator = PluginTranslator(Path(root), cfg)

    try:
        report = translator.translate(dry_run=dry_run)
    except OSError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if format == "json":
        typer.echo(report.model_dump_json(indent=2))
        return

    if dry_run:
        table = Table(title="Dry Run — files that would be written")
        table.add_column("Source", style="cyan")
        table.add_column("Destination", style="green")
        for r in report.converted:
            table.add_row(r.source, r.destination)
        rprint(table)

    _display_report(report)
    rprint(f"\n[green]Done![/green] Commands: {report.commands}, Agents: {report.agents}")


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    import yaml

    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False, sort_keys=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default plugin-translate.yaml in current directory."""
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        rprint(f"[yellow]{CONFIG_FILENAME} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
