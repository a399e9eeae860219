from __future__ import annotations


class GraphError(Exception):
    """Base class for every error raised by the graph library."""


class InvalidArgumentError(GraphError, ValueError):
    """A constructor argument or algorithm input is not acceptable."""


class OutOfRangeError(GraphError, IndexError):
    """A vertex or element index lies outside its valid domain."""


class CapacityExceededError(GraphError):
    """A fixed-capacity container is already full."""


class EmptyError(GraphError):
    """A value was requested from an empty container."""


def check_positive(name: str, value: int) -> None:
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}.")


def check_index(name: str, index: int, limit: int) -> None:
    if not 0 <= index < limit:
        raise OutOfRangeError(f"{name} {index} out of range [0, {limit}).")
