"""Exception classes for the nearby assistant."""

from typing import Any


class NearbyError(Exception):
    """Base exception for the nearby assistant."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(NearbyError):
    """Startup configuration is missing or invalid. Fatal."""


class SearchServiceError(NearbyError):
    """The Overpass service failed or answered with something unusable."""


class DeliveryError(NearbyError):
    """An outbound action could not be handed to the delivery webhook."""


class UserInputError(NearbyError):
    """The user asked for something we can't do yet; message is user-facing."""
