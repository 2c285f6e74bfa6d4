"""Tests for the JSON file storage adapter."""

import json
from pathlib import Path

import pytest
from pydantic import BaseModel

from commuter.adapters.storage import JsonFileStorage
from commuter.domain.errors import StorageError
from commuter.domain.models import Configuration, SavedLocations


def test_load_returns_none_when_nothing_saved(tmp_path: Path) -> None:
    """Given an empty directory, when loading, then None is returned."""
    storage = JsonFileStorage(tmp_path)

    assert storage.load(Configuration) is None
    assert storage.load(SavedLocations) is None


def test_load_returns_none_when_directory_missing(tmp_path: Path) -> None:
    """Given a storage directory that does not exist, when loading, then None is returned."""
    storage = JsonFileStorage(tmp_path / "missing")

    assert storage.load(Configuration) is None


def test_save_creates_directory_and_file(tmp_path: Path) -> None:
    """Given a new directory, when saving, then it is created with the record file inside."""
    directory = tmp_path / ".commuter"
    storage = JsonFileStorage(directory)

    storage.save(Configuration(api_key="abc"))

    data = json.loads((directory / "config.json").read_text(encoding="utf-8"))
    assert data == {"api_key": "abc"}


def test_saved_records_load_back(tmp_path: Path) -> None:
    """Given saved records, when loading them, then equal records are returned."""
    storage = JsonFileStorage(tmp_path)
    locations = SavedLocations(locations={"work": "1 Office Park", "home": "123 Main St."})

    storage.save(Configuration(api_key="abc"))
    storage.save(locations)

    assert storage.load(Configuration) == Configuration(api_key="abc")
    loaded = storage.load(SavedLocations)
    assert loaded == locations
    assert loaded is not None
    assert list(loaded.locations) == ["work", "home"]


def test_record_types_use_separate_files(tmp_path: Path) -> None:
    """Given both record types, when saving, then each goes to its own file."""
    storage = JsonFileStorage(tmp_path)

    storage.save(Configuration(api_key="abc"))
    storage.save(SavedLocations(locations={"home": "123 Main St."}))

    assert storage.path_for(Configuration) == tmp_path / "config.json"
    assert storage.path_for(SavedLocations) == tmp_path / "locations.json"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["config.json", "locations.json"]


def test_load_invalid_content_raises_storage_error(tmp_path: Path) -> None:
    """Given a corrupt file, when loading, then StorageError names the file."""
    (tmp_path / "locations.json").write_text("{not json", encoding="utf-8")
    storage = JsonFileStorage(tmp_path)

    with pytest.raises(StorageError, match="locations.json"):
        storage.load(SavedLocations)


def test_unknown_record_type_raises_storage_error(tmp_path: Path) -> None:
    """Given a record type without a file, when saving, then StorageError is raised."""

    class Unknown(BaseModel):
        value: int = 1

    storage = JsonFileStorage(tmp_path)

    with pytest.raises(StorageError, match="Unknown"):
        storage.save(Unknown())


def test_save_failure_raises_storage_error(tmp_path: Path) -> None:
    """Given a storage path that is a file, when saving, then StorageError is raised."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    storage = JsonFileStorage(blocker)

    with pytest.raises(StorageError, match="could not write"):
        storage.save(Configuration(api_key="abc"))
