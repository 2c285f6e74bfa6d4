"""Configuration domain model."""

from pydantic import BaseModel, ConfigDict


class Configuration(BaseModel):
    """Persisted user configuration.

    A missing record means the tool has not been configured yet.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
