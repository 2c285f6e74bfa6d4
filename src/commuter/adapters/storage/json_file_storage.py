"""JSON file storage adapter."""

import logging
from pathlib import Path

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from commuter.domain.errors import StorageError
from commuter.domain.models import Configuration, SavedLocations
from commuter.domain.ports.storage_provider import RecordT, StorageProvider

logger = logging.getLogger(__name__)

# One file per record type inside the storage directory
RECORD_FILES: dict[type[BaseModel], str] = {
    Configuration: "config.json",
    SavedLocations: "locations.json",
}


class JsonFileStorage(StorageProvider):
    """Stores each record type as a JSON file in a directory."""

    def __init__(self, directory: Path) -> None:
        """Initialize with the directory records are kept in."""
        self._directory = directory

    def path_for(self, record_type: type[BaseModel]) -> Path:
        """Get the file a record type is stored in."""
        try:
            return self._directory / RECORD_FILES[record_type]
        except KeyError:
            raise StorageError(f"cannot store records of type {record_type.__name__}") from None

    def load(self, record_type: type[RecordT]) -> RecordT | None:
        """Load a record, returning None if it has never been saved."""
        path = self.path_for(record_type)
        if not path.exists():
            logger.debug(f"No {record_type.__name__} stored at {path}")
            return None

        try:
            return record_type.model_validate_json(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StorageError(f"could not read {path}: {e}") from e
        except PydanticValidationError as e:
            raise StorageError(f"invalid content in {path}: {e}") from e

    def save(self, record: BaseModel) -> None:
        """Write a record, creating the storage directory if needed."""
        path = self.path_for(type(record))
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            path.write_text(record.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"could not write {path}: {e}") from e
        logger.debug(f"Saved {type(record).__name__} to {path}")
