"""
Domain errors raised by services and translated to HTTP by the API layer.

Services never raise ``HTTPException`` themselves.  Instead they raise
one of the classes below, and ``api.errors`` maps each class to a
status code through ``ERROR_STATUS``.
"""


class SubwayError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(SubwayError):
    """A referenced resource does not exist."""

    entity = "Resource"

    def __init__(self, identifier: object) -> None:
        self.identifier = identifier
        super().__init__(f"{self.entity} {identifier} not found")


class LineNotFoundError(NotFoundError):
    entity = "Line"


class StationNotFoundError(NotFoundError):
    entity = "Station"


class DuplicateLineNameError(SubwayError):
    """A line with the same name already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Line name '{name}' already exists")


class InvalidLineError(SubwayError):
    """The line request is well formed but cannot be applied."""


class StationInUseError(SubwayError):
    """The station is still referenced by at least one line."""

    def __init__(self, station_id: int) -> None:
        self.station_id = station_id
        super().__init__(f"Station {station_id} is used by a line")
