"""Tests for the RegisterItem use case."""

import pytest

from ims.application.register_item import RegisterItemHandler
from ims.domain.exceptions import ValidationError
from tests.fakes import JPEG_BYTES, FakeInventoryStore


class TestRegisterItem:

    def test_register_without_photo(self):
        store = FakeInventoryStore()
        dto = RegisterItemHandler(store).handle("Drill", "Cordless")

        assert dto.to_dict() == {
            "id": 1,
            "inventory_name": "Drill",
            "description": "Cordless",
            "photo_reference": "/inventory/1/photo",
        }
        assert store.photo_exists(1) is False

    def test_missing_description_defaults_to_empty(self):
        dto = RegisterItemHandler(FakeInventoryStore()).handle("Saw", None)
        assert dto.description == ""

    def test_register_with_photo_stores_blob(self):
        store = FakeInventoryStore()
        dto = RegisterItemHandler(store).handle("Drill", photo=JPEG_BYTES)
        assert store.read_photo(dto.id) == JPEG_BYTES

    def test_empty_photo_means_no_photo(self):
        store = FakeInventoryStore()
        dto = RegisterItemHandler(store).handle("Drill", photo=b"")
        assert store.photo_exists(dto.id) is False

    @pytest.mark.parametrize("name", [None, "", "  "])
    def test_missing_name_rejected(self, name):
        store = FakeInventoryStore()
        with pytest.raises(ValidationError, match="inventory_name is required"):
            RegisterItemHandler(store).handle(name, "Cordless")
        assert store.load() == []

    def test_non_jpeg_photo_rejected_before_record_is_created(self):
        store = FakeInventoryStore()
        with pytest.raises(ValidationError, match="JPEG"):
            RegisterItemHandler(store).handle("Drill", photo=b"not a jpeg")
        assert store.load() == []
