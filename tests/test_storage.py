"""
Unit tests for raw text persistence
"""
import json

import pytest

from storage import RawTextStore, StorageError


@pytest.fixture
def store(tmp_path):
    return RawTextStore(tmp_path / "state" / "storage.json")


class TestRawTextStore:
    """load / save / clear of the pasted text"""

    def test_missing_file(self, store):
        assert store.load() is None

    def test_round_trip(self, store):
        store.save("111.222.33\nKrzesło\n4")
        assert store.load() == "111.222.33\nKrzesło\n4"
        assert RawTextStore(store.path).load() == "111.222.33\nKrzesło\n4"

    def test_default_key(self, store):
        store.save("x")
        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert data == {"ikea_raw": "x"}

    def test_clear(self, store):
        store.save("x")
        store.clear()
        assert store.load() is None

    def test_clear_without_file(self, store):
        store.clear()
        assert not store.path.exists()

    def test_other_keys_kept(self, store):
        other = RawTextStore(store.path, key="other")
        other.save("keep me")
        store.save("x")
        store.clear()
        assert other.load() == "keep me"

    def test_corrupt_file(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json", encoding="utf-8")
        assert store.load() is None

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        store = RawTextStore(blocker / "storage.json")
        with pytest.raises(StorageError):
            store.save("x")
