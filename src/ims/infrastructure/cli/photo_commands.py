"""CLI commands for item photos."""

from __future__ import annotations

from pathlib import Path

import click

from ims.application.get_photo import GetPhotoHandler
from ims.application.replace_photo import ReplacePhotoHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import inventory_store
from ims.infrastructure.cli.item_commands import read_photo_file


@click.command("set")
@click.argument("item_id", type=int)
@click.argument("photo", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def photo_set(cache_dir: Path, item_id: int, photo: Path) -> None:
    """Upload or replace the JPEG photo of an item."""
    photo_bytes = read_photo_file(photo)

    try:
        handler = ReplacePhotoHandler(store=inventory_store(cache_dir))
        handler.handle(item_id, photo_bytes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Photo updated")


@click.command("get")
@click.argument("item_id", type=int)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the photo here instead of to stdout.",
)
@click.pass_obj
def photo_get(cache_dir: Path, item_id: int, output: Path | None) -> None:
    """Fetch the raw JPEG bytes of an item's photo."""
    try:
        data = GetPhotoHandler(store=inventory_store(cache_dir)).handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if output is None:
        click.get_binary_stream("stdout").write(data)
    else:
        try:
            output.write_bytes(data)
        except OSError as exc:
            raise click.ClickException(f"Cannot write {output}: {exc.strerror or exc}")
        click.echo(f"Photo for item #{item_id} written to {output}")
