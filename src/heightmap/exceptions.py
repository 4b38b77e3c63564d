"""Custom exceptions for heightmap generation."""


class HeightmapError(Exception):
    """Base exception for heightmap errors."""

    pass


class InvalidParametersError(HeightmapError, ValueError):
    """Raised when generation parameters violate their contract.

    Attributes:
        errors: Every problem found, in the order they were checked.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid generation parameters: " + "; ".join(self.errors))
