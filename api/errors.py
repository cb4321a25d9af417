"""
Failure taxonomy for upstream puzzle sources.
Clients raise TransportFailure / DecodeFailure; adapters raise ShapeFailure.
All three are absorbed at the adapter boundary and mean "try the next source".
"""


class PuzzleSourceError(Exception):
    """Base for any failure to get a usable puzzle out of one source."""


class TransportFailure(PuzzleSourceError):
    """Network unreachable, timeout, or non-success status."""


class DecodeFailure(PuzzleSourceError):
    """Response body is not valid JSON."""


class ShapeFailure(PuzzleSourceError):
    """Decoded document is missing required fields or does not yield 16 words."""
