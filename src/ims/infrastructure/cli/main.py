from pathlib import Path

import click

from ims.infrastructure.bootstrap import CACHE_DIR_ENV, DEFAULT_CACHE_DIR
from ims.infrastructure.cli.item_commands import (
    item_delete,
    item_list,
    item_register,
    item_search,
    item_show,
    item_update,
)
from ims.infrastructure.cli.photo_commands import photo_get, photo_set
from ims.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--cache",
    "cache_dir",
    envvar=CACHE_DIR_ENV,
    default=DEFAULT_CACHE_DIR,
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Cache directory holding inventory.json and photos/.",
)
@click.option("--log-level", default=None, help="Log level (default: $LOG_LEVEL or WARNING).")
@click.pass_context
def cli(ctx: click.Context, cache_dir: Path, log_level: str | None) -> None:
    """IMS: Inventory Management Service"""
    configure_logging(log_level)
    ctx.obj = cache_dir


@cli.group()
def item() -> None:
    """Manage inventory items."""


@cli.group()
def photo() -> None:
    """Manage item photos."""


# Register subcommands
item.add_command(item_delete)
item.add_command(item_list)
item.add_command(item_register)
item.add_command(item_search)
item.add_command(item_show)
item.add_command(item_update)
photo.add_command(photo_get)
photo.add_command(photo_set)
