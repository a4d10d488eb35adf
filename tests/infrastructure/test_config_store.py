"""Tests for ConfigStore persistence and corruption recovery."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from quickstand.domain.models import ConfigDocument, Repository, Standup
from quickstand.infrastructure.config_store import ConfigStore, ConfigStoreError


def _sample_doc() -> ConfigDocument:
    doc = ConfigDocument()
    doc.repositories["r1"] = Repository(id="r1", path="/src/api", name="api")
    doc.standups["s1"] = Standup(
        id="s1",
        name="Eng",
        repositories=["r1"],
        created_at="2024-01-01T00:00:00.000Z",
        updated_at="2024-01-01T00:00:00.000Z",
    )
    doc.default_standup_id = "s1"
    return doc


class TestLoad:
    def test_missing_file_creates_empty_document(self, store: ConfigStore) -> None:
        doc = store.load()
        assert doc.standups == {}
        assert doc.repositories == {}
        assert doc.default_standup_id is None
        assert store.path.is_file()
        assert json.loads(store.path.read_text()) == {"standups": {}, "repositories": {}}

    def test_creates_config_dir_recursively(self, tmp_path: Path) -> None:
        store = ConfigStore(tmp_path / "a" / "b" / "c")
        store.load()
        assert (tmp_path / "a" / "b" / "c" / "config.json").is_file()

    def test_reads_existing_document(self, store: ConfigStore) -> None:
        store.save(_sample_doc())
        doc = store.load()
        assert doc.default_standup_id == "s1"
        assert doc.standups["s1"].repositories == ["r1"]
        assert doc.repositories["r1"].active is True

    def test_malformed_json_recovers_with_empty_document(
        self, store: ConfigStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        store.config_dir.mkdir(parents=True)
        store.path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="quickstand"):
            doc = store.load()

        assert doc.standups == {}
        assert doc.repositories == {}
        assert json.loads(store.path.read_text()) == {"standups": {}, "repositories": {}}
        assert any("corrupted" in rec.getMessage() for rec in caplog.records)

    def test_wrong_shape_is_treated_as_corrupt(self, store: ConfigStore) -> None:
        store.config_dir.mkdir(parents=True)
        store.path.write_text('["not", "a", "document"]', encoding="utf-8")
        doc = store.load()
        assert doc == ConfigDocument()

    def test_undecodable_bytes_are_treated_as_corrupt(self, store: ConfigStore) -> None:
        store.config_dir.mkdir(parents=True)
        store.path.write_bytes(b"\xff\xfe\x00garbage")
        assert store.load() == ConfigDocument()

    def test_config_dir_is_a_file_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = ConfigStore(blocker)
        with pytest.raises(ConfigStoreError, match="Failed to create config directory"):
            store.load()

    def test_unreadable_path_raises(self, store: ConfigStore) -> None:
        # A directory where the file should be cannot be read as text.
        store.path.mkdir(parents=True)
        with pytest.raises(ConfigStoreError, match="Failed to load config"):
            store.load()


class TestSave:
    def test_camel_case_keys_on_disk(self, store: ConfigStore) -> None:
        store.save(_sample_doc())
        raw = json.loads(store.path.read_text())
        assert raw["defaultStandupId"] == "s1"
        standup = raw["standups"]["s1"]
        assert standup["createdAt"] == "2024-01-01T00:00:00.000Z"
        assert "updatedAt" in standup
        assert "description" not in standup

    def test_pretty_printed(self, store: ConfigStore) -> None:
        store.save(_sample_doc())
        assert store.path.read_text().startswith('{\n  "standups": {')

    def test_round_trip_is_idempotent(self, store: ConfigStore) -> None:
        store.save(_sample_doc())
        before = store.path.read_text()
        store.save(store.load())
        assert store.path.read_text() == before

    def test_explicit_nulls_are_dropped_on_save(self, store: ConfigStore) -> None:
        raw = _sample_doc().to_json_dict()
        raw["defaultStandupId"] = None
        raw["standups"]["s1"]["description"] = None
        store.config_dir.mkdir(parents=True)
        store.path.write_text(json.dumps(raw), encoding="utf-8")

        doc = store.load()
        assert doc.default_standup_id is None
        assert doc.standups["s1"].description is None

        store.save(doc)
        saved = json.loads(store.path.read_text())
        assert "defaultStandupId" not in saved
        assert "description" not in saved["standups"]["s1"]
        assert store.load() == doc

    def test_preserves_standup_insertion_order(self, store: ConfigStore) -> None:
        doc = ConfigDocument()
        for sid in ("zeta", "alpha", "mid"):
            doc.standups[sid] = Standup(id=sid, name=sid, created_at="t", updated_at="t")
        store.save(doc)
        assert list(store.load().standups) == ["zeta", "alpha", "mid"]

    def test_no_temp_files_left_behind(self, store: ConfigStore) -> None:
        store.save(_sample_doc())
        store.save(_sample_doc())
        assert sorted(p.name for p in store.config_dir.iterdir()) == ["config.json"]

    def test_save_into_unwritable_target_raises(self, store: ConfigStore) -> None:
        # os.replace cannot overwrite a non-empty directory.
        (store.path / "child").mkdir(parents=True)
        with pytest.raises(ConfigStoreError, match="Failed to save config"):
            store.save(ConfigDocument())


class TestTransaction:
    def test_saves_when_marked_changed(self, store: ConfigStore) -> None:
        with store.transaction() as txn:
            txn.doc.repositories["r1"] = Repository(id="r1", path="/x", name="x")
            txn.mark_changed()
        assert "r1" in store.load().repositories

    def test_skips_save_when_unchanged(self, store: ConfigStore) -> None:
        store.save(_sample_doc())
        with store.transaction() as txn:
            txn.doc.repositories.clear()
        assert "r1" in store.load().repositories

    def test_exception_discards_changes(self, store: ConfigStore) -> None:
        store.save(_sample_doc())
        with pytest.raises(RuntimeError), store.transaction() as txn:
            txn.doc.standups.clear()
            txn.mark_changed()
            raise RuntimeError("boom")
        assert "s1" in store.load().standups
