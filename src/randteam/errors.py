"""Exceptions raised while generating a team."""
from typing import Optional


class RandteamError(Exception):
    """Base class for team generation errors."""


class RemoteError(RandteamError):
    """The data service answered with a non-success status."""

    def __init__(self, status: Optional[int], url: str):
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status} for {url}")


class InsufficientCandidatesError(RandteamError):
    """Not enough species survived filtering to fill a team."""

    def __init__(self, found: int, required: int = 6):
        self.found = found
        self.required = required
        super().__init__(
            f"Not enough Pokemon to generate a full team "
            f"(found {found}, need {required})"
        )


class OutOfRangeGenerationError(RandteamError):
    """Requested generation is outside the supported range."""

    def __init__(self, generation: int, low: int = 1, high: int = 9):
        self.generation = generation
        super().__init__(f"Please enter a generation between {low} and {high}.")


class NoItemAvailableError(RandteamError):
    """The generation has no held items to choose from."""

    def __init__(self, generation: int):
        self.generation = generation
        super().__init__(f"No held items available for generation {generation}")
