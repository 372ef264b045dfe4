"""CLI commands for inventory items."""

from __future__ import annotations

import json
from pathlib import Path

import click

from ims.application.delete_item import DeleteItemHandler
from ims.application.list_items import ListItemsHandler
from ims.application.register_item import RegisterItemHandler
from ims.application.search_item import SearchItemHandler
from ims.application.show_item import ShowItemHandler
from ims.application.update_item import UpdateItemHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.record import RecordPatch
from ims.infrastructure.bootstrap import inventory_store


def echo_json(data: object) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def read_photo_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise click.ClickException(f"Cannot read {path}: {exc.strerror or exc}")


@click.command("register")
@click.option("--name", required=True, help="Item name.")
@click.option("--description", default="", help="Free-text description.")
@click.option(
    "--photo",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JPEG photo to attach.",
)
@click.pass_obj
def item_register(cache_dir: Path, name: str, description: str, photo: Path | None) -> None:
    """Register a new inventory item."""
    # Read the bytes so the user's file is copied, not moved.
    photo_bytes = read_photo_file(photo) if photo is not None else None

    try:
        handler = RegisterItemHandler(store=inventory_store(cache_dir))
        dto = handler.handle(name=name, description=description, photo=photo_bytes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_json(dto.to_dict())


@click.command("list")
@click.pass_obj
def item_list(cache_dir: Path) -> None:
    """List all inventory items."""
    try:
        items = ListItemsHandler(store=inventory_store(cache_dir)).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_json([dto.to_dict() for dto in items])


@click.command("show")
@click.argument("item_id", type=int)
@click.pass_obj
def item_show(cache_dir: Path, item_id: int) -> None:
    """Show one inventory item."""
    try:
        dto = ShowItemHandler(store=inventory_store(cache_dir)).handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_json(dto.to_dict())


@click.command("update")
@click.argument("item_id", type=int)
@click.option("--name", default=None, help="New name (blank keeps the current one).")
@click.option("--description", default=None, help="New description (blank keeps the current one).")
@click.pass_obj
def item_update(
    cache_dir: Path, item_id: int, name: str | None, description: str | None
) -> None:
    """Update an item's name and/or description."""
    patch = RecordPatch(inventory_name=name, description=description)

    try:
        dto = UpdateItemHandler(store=inventory_store(cache_dir)).handle(item_id, patch)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_json(dto.to_dict())


@click.command("delete")
@click.argument("item_id", type=int)
@click.pass_obj
def item_delete(cache_dir: Path, item_id: int) -> None:
    """Delete an item. Its photo stays on disk."""
    try:
        DeleteItemHandler(store=inventory_store(cache_dir)).handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Deleted")


@click.command("search")
@click.argument("item_id")
@click.option(
    "--has-photo",
    default="",
    help="Include the photo reference when set to 1, on or true.",
)
@click.pass_obj
def item_search(cache_dir: Path, item_id: str, has_photo: str) -> None:
    """Look up an item by ID."""
    try:
        dto = SearchItemHandler(store=inventory_store(cache_dir)).handle(item_id, has_photo)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_json(dto.to_dict())
