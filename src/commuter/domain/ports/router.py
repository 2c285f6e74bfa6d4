"""Router port."""

from typing import Protocol

from commuter.domain.ports.durationer import Durationer
from commuter.domain.ports.locator import Locator


class Router(Durationer, Locator, Protocol):
    """Port for a mapping provider that computes durations and locates the device."""
