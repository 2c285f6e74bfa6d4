"""Exception hierarchy for commuter.

Validation errors are raised before a command runs and stop it without
side effects. Provider errors raised while computing a single travel mode
are contained by the commute command; everywhere else they propagate to
the entry point, which prints them and exits non-zero.
"""


class CommuterError(Exception):
    """Base class for all errors reported to the user."""


class ValidationError(CommuterError):
    """A command's preconditions are not met."""


class MissingFieldError(ValidationError):
    """A required field was left empty."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing required field: {field}")


class ConflictingInputError(ValidationError):
    """Two inputs were given that cannot be used together."""

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(f"{first} and {second} cannot be used together")


class NoTransportSelectedError(ValidationError):
    """No travel mode is enabled."""

    def __init__(self) -> None:
        super().__init__("no travel mode selected")


class ProviderConstructionError(CommuterError):
    """The mapping provider client could not be created."""


class ProviderError(CommuterError):
    """The mapping provider failed to answer a request."""


class RouteNotFoundError(ProviderError):
    """The provider found no route between the two locations."""

    def __init__(self, origin: str, destination: str, status: str) -> None:
        self.origin = origin
        self.destination = destination
        self.status = status
        super().__init__(f"no route from '{origin}' to '{destination}' ({status})")


class StorageError(CommuterError):
    """A record could not be loaded or saved."""
