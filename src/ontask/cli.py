"""OnTask CLI - list checkboxes across your notes."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.streams_plugin import StreamsDataError
from .config import load_config
from .core.checkboxes import CheckboxItem
from .workflows import get_folder_config, get_registry, get_service, get_stream_provider


def _setup_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _item_to_dict(item: CheckboxItem) -> dict:
    return {
        "path": item.document.path,
        "line": item.line_number,
        "status": item.status,
        "text": item.checkbox_text,
        "source": item.source_name,
    }


def _parse_date(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        click.echo(f"Error: invalid date '{value}', expected YYYY-MM-DD", err=True)
        sys.exit(1)


@click.group()
@click.version_option()
def main():
    """OnTask - checkboxes from daily notes, folders and streams."""
    pass


@main.command("list")
@click.option("--today", "only_today", is_flag=True, help="Only notes named with today's date")
@click.option("--limit", "-n", type=click.IntRange(min=0), default=None,
              help="Maximum number of checkboxes (defaults to DEFAULT_LIMIT)")
@click.option("--strategy", "-s", "strategies", multiple=True,
              help="Strategy to use (repeatable), defaults to ACTIVE_STRATEGIES")
@click.option("--folder", "folder_path", default=None, help="Folder for the folder strategy")
@click.option("--no-recursive", is_flag=True, help="Only scan the folder's direct children")
@click.option("--date", "-d", "as_of", default=None,
              help="Treat this date (YYYY-MM-DD) as today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def list_checkboxes(only_today: bool, limit: int | None, strategies: tuple[str, ...],
                    folder_path: str | None, no_recursive: bool, as_of: str | None,
                    as_json: bool, debug: bool):
    """List checkboxes from the active strategies."""
    _setup_logging(debug)
    config = load_config()
    target = _parse_date(as_of)

    folder_config = get_folder_config(
        config, folder_path, recursive=False if no_recursive else None
    )
    names = list(strategies) or list(config.active_strategies)
    if folder_path is not None and "folder" not in names:
        names.append("folder")

    try:
        service = get_service(config, names, as_of=target, folder_config=folder_config)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    items = service.find_all_checkboxes(
        only_show_today=only_today,
        limit=limit if limit is not None else config.default_limit,
    )

    if as_json:
        click.echo(json.dumps([_item_to_dict(i) for i in items], indent=2))
        return

    if not items:
        click.echo("No checkboxes found.")
        return

    for item in items:
        click.echo(f"[{item.status}] {item.checkbox_text}  ({item.source_name}: "
                   f"{item.document.path}:{item.line_number})")


@main.command()
def strategies():
    """Show registered strategies and whether they are available."""
    config = load_config()
    try:
        registry = get_registry(config)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    for name in registry.get_available_strategies():
        strategy = registry.create_strategy(name)
        mark = "✓" if strategy.is_available() else "✗"
        active = " (active)" if name in config.active_strategies else ""
        click.echo(f"  {mark} {name}{active}")


@main.command()
def streams():
    """List streams from the Streams plugin."""
    config = load_config()
    provider = get_stream_provider(config)

    if not provider.is_available():
        click.echo(f"Streams plugin not found ({provider.data_file})")
        return

    try:
        all_streams = provider.get_all_streams()
    except StreamsDataError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not all_streams:
        click.echo("No streams configured.")
        return

    for stream in all_streams:
        folder = stream.folder or "(no folder)"
        click.echo(f"  {stream.name:20} {folder}")
