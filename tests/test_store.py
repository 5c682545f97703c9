"""Tests for RecordStore load/save/find against a real file."""

import logging

import pytest

from chipstock.db.store import RecordStore
from chipstock.errors import NotFoundError, StoreIOError
from chipstock.models.product import Chip


class TestLoad:

    def test_missing_file_is_created_empty(self, tmp_path):
        path = tmp_path / "nested" / "chips.csv"
        store = RecordStore(path)

        assert store.load() == []
        assert path.exists()
        assert path.read_text() == ""

    def test_save_then_load_keeps_order_and_fields(self, store, data_file, sample_chips):
        reloaded = RecordStore(data_file)
        assert reloaded.load() == sample_chips

    def test_skips_blank_and_malformed_lines(self, data_file, caplog):
        data_file.write_text(
            "1,A,10,S,100,B,0\n"
            "\n"
            "2,short,row\n"
            "oops,A,10,S,100,B,0\n"
            "3,C,5,S,50,B\n"
        )
        store = RecordStore(data_file)

        with caplog.at_level(logging.WARNING, logger="chipstock.db.store"):
            chips = store.load()

        assert [c.product_id for c in chips] == [1, 3]
        assert chips[1].deadstock == 0
        assert "line 3" in caplog.text
        assert "line 4" in caplog.text

    def test_oversized_id_is_skipped(self, data_file, caplog):
        data_file.write_text(
            "1,A,10,S,100,B,0\n"
            + "9" * 5000 + ",Huge,1,S,1,B,0\n"
            "3,C,5,S,50,B,0\n"
        )
        store = RecordStore(data_file)

        with caplog.at_level(logging.WARNING, logger="chipstock.db.store"):
            chips = store.load()

        assert [c.product_id for c in chips] == [1, 3]
        assert "line 2" in caplog.text

    def test_undecodable_bytes_skip_only_that_line(self, data_file, caplog):
        data_file.write_bytes(
            b"1,A,10,S,100,B,0\n"
            b"2,\xff\xfe,1,S,1,B,0\n"
            b"3,C,5,S,50,B,0\n"
        )
        store = RecordStore(data_file)

        with caplog.at_level(logging.WARNING, logger="chipstock.db.store"):
            chips = store.load()

        assert [c.product_id for c in chips] == [1, 3]
        assert "line 2" in caplog.text

    def test_non_ascii_text_round_trips(self, data_file):
        store = RecordStore(data_file)
        store.save([Chip(1, "Jalapeño", 2, "Señor Snacks", 40, "Café", 0)])
        assert RecordStore(data_file).load()[0].product_name == "Jalapeño"

    def test_windows_line_endings(self, data_file):
        data_file.write_bytes(b"1,A,10,S,100,B,2\r\n2,C,1,S,5,D,0\r\n")
        store = RecordStore(data_file)
        assert [c.deadstock for c in store.load()] == [2, 0]

    def test_duplicate_ids_are_kept_and_first_wins(self, data_file, caplog):
        data_file.write_text("4,First,1,S,1,B,0\n4,Second,2,S,2,B,0\n")
        store = RecordStore(data_file)

        with caplog.at_level(logging.WARNING, logger="chipstock.db.store"):
            store.load()

        assert len(store) == 2
        assert store.find(4).product_name == "First"
        assert "Duplicate product ID 4" in caplog.text

    def test_unreadable_path_raises(self, tmp_path):
        # A directory exists but cannot be read as a file.
        with pytest.raises(StoreIOError):
            RecordStore(tmp_path).load()

    def test_load_replaces_memory(self, store, data_file):
        data_file.write_text("99,Only,1,S,1,B,0\n")
        store.load()
        assert [c.product_id for c in store] == [99]


class TestSave:

    def test_writes_one_line_per_record(self, store, data_file):
        assert data_file.read_text().splitlines() == [
            "1,A,10,S,100,B,0",
            "7,Nacho,3,Crunch Ltd,250,Doritos,2",
            "12,Salted,0,Spud Co,3500,Lays,5",
        ]

    def test_truncates_previous_contents(self, store, data_file):
        store.save([Chip(2, "B", 1, "S", 1, "B", 0)])
        assert data_file.read_text() == "2,B,1,S,1,B,0\n"

    def test_empty_store_writes_empty_file(self, store, data_file):
        store.save([])
        assert data_file.read_text() == ""

    def test_unwritable_path_raises_and_keeps_memory(self, store, tmp_path):
        store.path = tmp_path
        with pytest.raises(StoreIOError, match="writing"):
            store.add(Chip(5, "New", 1, "S", 1, "B", 0))
        assert store.exists(5)


class TestLookup:

    def test_find(self, store):
        assert store.find(7).product_name == "Nacho"
        assert store.find(8) is None

    def test_get_raises_not_found(self, store):
        with pytest.raises(NotFoundError) as exc:
            store.get(8)
        assert exc.value.product_id == 8

    def test_remove_only_that_record(self, data_file):
        store = RecordStore(data_file)
        first = Chip(4, "First", 1, "S", 1, "B", 0)
        second = Chip(4, "Second", 2, "S", 2, "B", 0)
        store.save([first, second])

        store.remove(first)

        assert store.records == (second,)
        assert data_file.read_text() == "4,Second,2,S,2,B,0\n"

    def test_records_view_is_a_copy(self, store):
        view = store.records
        assert isinstance(view, tuple)
        assert len(view) == len(store)
