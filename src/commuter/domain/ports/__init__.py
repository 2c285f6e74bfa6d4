"""Ports (interfaces) for the ports-and-adapters architecture."""

from commuter.domain.ports.durationer import Durationer
from commuter.domain.ports.indicator import Indicator
from commuter.domain.ports.line_reader import LineReader
from commuter.domain.ports.locator import Locator
from commuter.domain.ports.router import Router
from commuter.domain.ports.storage_provider import StorageProvider

__all__ = [
    "Durationer",
    "Indicator",
    "LineReader",
    "Locator",
    "Router",
    "StorageProvider",
]
