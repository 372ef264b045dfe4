"""Tests for the ims command-line interface."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from ims.infrastructure.cli.main import cli
from tests.fakes import JPEG_BYTES


@pytest.fixture
def cache(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("IMS_CACHE_DIR", raising=False)
    return tmp_path / "cache"


@pytest.fixture
def run(cache):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--cache", str(cache), *args], catch_exceptions=False)

    return _run


@pytest.fixture
def photo_file(tmp_path):
    path = tmp_path / "drill.jpg"
    path.write_bytes(JPEG_BYTES)
    return path


class TestItemCommands:

    def test_register_prints_created_item(self, run, cache):
        result = run("item", "register", "--name", "Drill", "--description", "Cordless")
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "id": 1,
            "inventory_name": "Drill",
            "description": "Cordless",
            "photo_reference": "/inventory/1/photo",
        }
        assert (cache / "inventory.json").exists()

    def test_register_with_photo_keeps_source_file(self, run, cache, photo_file):
        result = run("item", "register", "--name", "Drill", "--photo", str(photo_file))
        assert result.exit_code == 0
        assert photo_file.exists()
        assert (cache / "photos" / "1.jpg").read_bytes() == JPEG_BYTES

    def test_register_blank_name_fails(self, run):
        result = run("item", "register", "--name", "  ")
        assert result.exit_code == 1
        assert "inventory_name is required" in result.output

    def test_list(self, run):
        run("item", "register", "--name", "Drill")
        run("item", "register", "--name", "Saw")
        result = run("item", "list")
        assert [item["id"] for item in json.loads(result.output)] == [1, 2]

    def test_show_missing_item(self, run):
        result = run("item", "show", "3")
        assert result.exit_code == 1
        assert "Item #3 not found" in result.output

    def test_update_ignores_blank_description(self, run):
        run("item", "register", "--name", "Drill", "--description", "Cordless")
        result = run("item", "update", "1", "--name", "Hammer drill", "--description", "")
        assert result.exit_code == 0
        item = json.loads(result.output)
        assert item["inventory_name"] == "Hammer drill"
        assert item["description"] == "Cordless"

    def test_delete_always_succeeds(self, run):
        result = run("item", "delete", "99")
        assert result.exit_code == 0
        assert result.output.strip() == "Deleted"

    def test_search_short_and_full_form(self, run):
        run("item", "register", "--name", "Saw")

        short = run("item", "search", "1", "--has-photo", "0")
        assert json.loads(short.output) == {"id": 1, "inventory_name": "Saw", "description": ""}

        full = run("item", "search", "1", "--has-photo", "true")
        assert json.loads(full.output)["photo_reference"] == "/inventory/1/photo"

    def test_search_unknown(self, run):
        result = run("item", "search", "abc")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_new_item_does_not_inherit_deleted_items_photo(self, run, photo_file):
        run("item", "register", "--name", "Drill")
        run("item", "register", "--name", "Saw", "--photo", str(photo_file))
        run("item", "delete", "2")

        result = run("item", "register", "--name", "Ladder")
        assert json.loads(result.output)["id"] == 3

        photo = run("photo", "get", "3")
        assert photo.exit_code == 1
        assert "Photo for item #3 not found" in photo.output

    def test_unreadable_photo_file_reported(self, run, photo_file, monkeypatch):
        def denied(self):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_bytes", denied)
        result = run("item", "register", "--name", "Drill", "--photo", str(photo_file))
        assert result.exit_code == 1
        assert "Cannot read" in result.output
        assert "Permission denied" in result.output

    def test_corrupt_store_reported(self, run, cache):
        run("item", "list")
        (cache / "inventory.json").write_text("{oops", encoding="utf-8")
        result = run("item", "list")
        assert result.exit_code == 1
        assert "is corrupt" in result.output


class TestPhotoCommands:

    def test_set_then_get_to_file(self, run, photo_file, tmp_path):
        run("item", "register", "--name", "Drill")
        result = run("photo", "set", "1", str(photo_file))
        assert result.exit_code == 0
        assert "Photo updated" in result.output

        out = tmp_path / "out.jpg"
        result = run("photo", "get", "1", "--output", str(out))
        assert result.exit_code == 0
        assert out.read_bytes() == JPEG_BYTES

    def test_get_to_stdout(self, run, photo_file):
        run("photo", "set", "1", str(photo_file))
        result = run("photo", "get", "1")
        assert result.exit_code == 0
        assert result.stdout_bytes == JPEG_BYTES

    def test_get_missing_photo(self, run):
        run("item", "register", "--name", "Drill")
        result = run("photo", "get", "1")
        assert result.exit_code == 1
        assert "Photo for item #1 not found" in result.output

    def test_set_non_jpeg(self, run, tmp_path):
        bogus = tmp_path / "notes.txt"
        bogus.write_text("hello", encoding="utf-8")
        result = run("photo", "set", "1", str(bogus))
        assert result.exit_code == 1
        assert "JPEG" in result.output
