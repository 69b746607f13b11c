# =============================================================================
# tests/unit/test_local_storage.py
# Unit Tests for device-local key/value storage
# =============================================================================

import pytest

from agriscan_core.offline import LocalStorage


class TestLocalStorageStrings:

    def test_missing_key_returns_none(self, storage):
        assert storage.get_item("nothing") is None

    def test_set_and_overwrite(self, storage):
        storage.set_item("k", "one")
        storage.set_item("k", "two")
        assert storage.get_item("k") == "two"
        assert storage.keys() == ["k"]

    def test_remove_item(self, storage):
        storage.set_item("k", "v")
        storage.remove_item("k")
        assert storage.get_item("k") is None

    def test_clear(self, storage):
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.clear()
        assert storage.keys() == []

    def test_values_persist_across_instances(self, tmp_path):
        path = tmp_path / "agriscan.db"
        first = LocalStorage(path)
        first.set_item("localDiseases", "[]")
        first.close()

        second = LocalStorage(path)
        assert second.get_item("localDiseases") == "[]"
        second.close()


class TestLocalStorageJson:

    def test_round_trip_keeps_unicode(self, storage):
        storage.set_json("recentTranslations", [{"english": "rice", "filipino": "bigás"}])
        assert storage.get_json("recentTranslations") == [{"english": "rice", "filipino": "bigás"}]
        assert "bigás" in storage.get_item("recentTranslations")

    def test_default_for_missing_key(self, storage):
        assert storage.get_json("nothing", default=[]) == []

    def test_corrupt_value_treated_as_missing(self, storage):
        storage.set_item("localDiseases", "{not json")
        assert storage.get_json("localDiseases", default="fallback") == "fallback"


class TestLocalStorageTransactions:

    def test_failed_transaction_rolls_back(self, storage):
        storage.set_item("k", "before")
        with pytest.raises(RuntimeError):
            with storage.transaction() as conn:
                conn.execute("UPDATE local_storage SET value = 'after' WHERE key = 'k'")
                raise RuntimeError("abort")
        assert storage.get_item("k") == "before"


class TestLocalStorageNamespaces:
    """One file, one slice of keys per device"""

    def test_namespaces_do_not_see_each_other(self, storage):
        farmer_a = storage.scoped("a")
        farmer_b = storage.scoped("b")

        farmer_a.set_json("recentTranslations", [{"english": "rice", "filipino": "bigas"}])

        assert farmer_b.get_json("recentTranslations") is None
        assert farmer_a.keys() == ["recentTranslations"]
        assert farmer_b.keys() == []

    def test_same_key_kept_per_namespace(self, storage):
        storage.scoped("a").set_item("localDiseases", "[1]")
        storage.scoped("b").set_item("localDiseases", "[2]")

        assert storage.scoped("a").get_item("localDiseases") == "[1]"
        assert storage.scoped("b").get_item("localDiseases") == "[2]"

    def test_clear_only_touches_own_namespace(self, storage):
        storage.scoped("a").set_item("k", "1")
        storage.scoped("b").set_item("k", "2")

        storage.scoped("a").clear()

        assert storage.scoped("a").get_item("k") is None
        assert storage.scoped("b").get_item("k") == "2"

    def test_remove_item_scoped(self, storage):
        storage.set_item("k", "root")
        storage.scoped("a").set_item("k", "a")

        storage.scoped("a").remove_item("k")

        assert storage.get_item("k") == "root"

    def test_unscoped_view_lists_prefixed_keys(self, storage):
        storage.scoped("a").set_item("k", "1")
        assert storage.keys() == ["a:k"]
