"""Storage adapters."""

from commuter.adapters.storage.json_file_storage import JsonFileStorage

__all__ = ["JsonFileStorage"]
