"""Outcome values for graph mutations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Status(IntEnum):
    """Outcome of a graph mutation."""

    #: The graph changed as requested.
    OK = 1
    #: Nothing to do, e.g. inserting a vertex that already exists.
    UNCHANGED = 2
    #: A vertex or edge the operation needs is absent.
    NOT_FOUND = 3
    #: The request itself is malformed, e.g. a negative weight.
    INVALID = 4
    #: A vertex id lies outside the configured id domain.
    CAPACITY_EXCEEDED = 5


@dataclass(frozen=True)
class OpResult:
    """Result of a mutating graph operation.

    Truthy when the operation succeeded or was a no-op, so callers that only
    care about failure can write ``if not graph.insert_edge(...)``.

    Attributes:
        status: Outcome category.
        message: Human-readable detail, empty on success.
        count: Number of edges removed by the operation, if any.
    """

    status: Status
    message: str = ""
    count: int = 0

    def __bool__(self) -> bool:
        return self.status in (Status.OK, Status.UNCHANGED)

    @property
    def changed(self) -> bool:
        """True only if the graph was modified."""
        return self.status == Status.OK

    @classmethod
    def ok(cls, count: int = 0) -> OpResult:
        return cls(Status.OK, count=count)

    @classmethod
    def unchanged(cls, message: str = "") -> OpResult:
        return cls(Status.UNCHANGED, message)

    @classmethod
    def not_found(cls, message: str) -> OpResult:
        return cls(Status.NOT_FOUND, message)

    @classmethod
    def invalid(cls, message: str) -> OpResult:
        return cls(Status.INVALID, message)

    @classmethod
    def capacity_exceeded(cls, message: str) -> OpResult:
        return cls(Status.CAPACITY_EXCEEDED, message)


class CapacityExceededError(ValueError):
    """Raised by read-only queries given a vertex id outside the id domain."""

    def __init__(self, vertex_id: int, capacity: int) -> None:
        super().__init__(
            f"Vertex id {vertex_id} is outside the supported domain [0, {capacity})."
        )
        self.vertex_id = vertex_id
        self.capacity = capacity
