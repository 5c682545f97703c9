"""Tests for InventoryService add/search/update/delete."""

import pytest

from chipstock.db.store import RecordStore
from chipstock.models.product import Chip
from chipstock.models.result import Outcome
from chipstock.services.inventory_service import InventoryService


@pytest.fixture
def service(store):
    return InventoryService(store)


def on_disk(path):
    return RecordStore(path).load()


class TestAdd:

    def test_adds_and_persists(self, service, data_file):
        chip = Chip(20, "New", 4, "S", 60, "B", 0)
        res = service.add(chip)

        assert res.ok
        assert service.list_all()[-1] == chip
        assert on_disk(data_file)[-1] == chip

    def test_duplicate_id_rejected(self, service, data_file):
        before = data_file.read_text()
        res = service.add(Chip(7, "Clone", 1, "S", 1, "B", 0))

        assert res.outcome is Outcome.DUPLICATE
        assert res.chip.product_name == "Nacho"
        assert len(service.list_all()) == 3
        assert data_file.read_text() == before

    def test_id_availability(self, service):
        assert not service.is_id_available(7)
        assert service.is_id_available(8)


class TestSearch:

    def test_found(self, service):
        res = service.search(12)
        assert res.ok
        assert res.chip.brand_name == "Lays"

    def test_not_found_has_no_side_effect(self, service, data_file):
        before = data_file.read_text()
        res = service.search(99)
        assert res.outcome is Outcome.NOT_FOUND
        assert res.chip is None
        assert data_file.read_text() == before


class TestUpdate:

    def test_no_changes_leaves_record_identical(self, service, data_file):
        before = data_file.read_text()
        res = service.update(7, product_name=None, quantity=None, seller_name=None,
                             price=None, brand_name=None, deadstock=None)
        assert res.ok
        assert data_file.read_text() == before

    def test_single_field_changes_only_that_field(self, service, data_file):
        res = service.update(7, quantity=30)

        assert res.chip == Chip(7, "Nacho", 30, "Crunch Ltd", 250, "Doritos", 2)
        assert on_disk(data_file)[1].quantity == 30

    def test_empty_string_is_a_real_value(self, service):
        assert service.update(7, product_name="").chip.product_name == ""

    def test_not_confirmed_cancels(self, service, data_file):
        before = data_file.read_text()
        res = service.update(7, confirmed=False, quantity=30)
        assert res.outcome is Outcome.CANCELLED
        assert res.chip.quantity == 3
        assert data_file.read_text() == before

    def test_not_found(self, service):
        assert service.update(99, quantity=1).outcome is Outcome.NOT_FOUND

    def test_product_id_cannot_change(self, service):
        with pytest.raises(TypeError, match="product_id"):
            service.update(7, product_id=8)


class TestDelete:

    def test_removes_exactly_one(self, service, data_file):
        res = service.delete(7)

        assert res.ok
        assert res.chip.product_id == 7
        assert [c.product_id for c in service.list_all()] == [1, 12]
        assert [c.product_id for c in on_disk(data_file)] == [1, 12]

    def test_missing_id_leaves_collection(self, service):
        res = service.delete(99)
        assert res.outcome is Outcome.NOT_FOUND
        assert len(service.list_all()) == 3

    def test_not_confirmed_keeps_record(self, service):
        res = service.delete(7, confirmed=False)
        assert res.outcome is Outcome.CANCELLED
        assert service.search(7).ok

    def test_duplicate_ids_delete_first_only(self, data_file):
        store = RecordStore(data_file)
        store.save([Chip(4, "First", 1, "S", 1, "B", 0), Chip(4, "Second", 2, "S", 2, "B", 0)])
        service = InventoryService(store)

        service.delete(4)

        assert [c.product_name for c in service.list_all()] == ["Second"]
