"""Storage provider port."""

from typing import Protocol, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class StorageProvider(Protocol):
    """Port for persisting records such as the configuration and saved locations."""

    def load(self, record_type: type[RecordT]) -> RecordT | None:
        """Load the stored record of the given type, or None if nothing is stored yet."""
        ...

    def save(self, record: BaseModel) -> None:
        """Persist a record, replacing any previous one of the same type."""
        ...
