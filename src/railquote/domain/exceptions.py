"""Exceptions raised by the quote domain."""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """Raised when numeric input cannot produce a meaningful quote.

    Covers non-finite section lengths and non-positive or non-finite
    spacing bounds. Invalid style/infill combinations are not reported
    through this exception; the computations stay total over those.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class StanchionLimitError(InvalidConfigurationError):
    """Raised when a rail length needs more stanchions than the search bound allows."""

    def __init__(self, length_feet: float, max_spacing_feet: float, limit: int) -> None:
        self.length_feet = length_feet
        self.max_spacing_feet = max_spacing_feet
        self.limit = limit
        super().__init__(
            f"Rail length {length_feet} ft needs more than {limit} stanchions "
            f"at {max_spacing_feet} ft maximum spacing",
            field="length_feet",
        )
