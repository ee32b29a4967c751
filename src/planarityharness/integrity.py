"""Harness integrity exceptions.

These exceptions indicate HARNESS FAILURES: the graph structures or the
statistics of a test run can no longer be trusted. The runner converts them
into Failure values at its seams; library callers using the graph layer
directly see them propagate.

Design:
    - Carry diagnostic context for post-mortem analysis
    - Immutable after construction
    - @final decorator prevents subclassing

Hierarchy:
    HarnessIntegrityError (base - harness failures)
    ├─ ContextAllocationError (test context cannot be sized)
    ├─ CounterOverflowError (statistics counter would wrap)
    ├─ GraphCopyError (full copy or adjacency-list copy refused)
    ├─ GraphCorruptionError (edge refused despite full arc capacity)
    └─ GraphTransferError (bit-matrix cannot be transferred)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

__all__ = [
    "ContextAllocationError",
    "CounterOverflowError",
    "FailureContext",
    "GraphCopyError",
    "GraphCorruptionError",
    "GraphTransferError",
    "HarnessIntegrityError",
    "ImmutabilityViolationError",
]


@dataclass(frozen=True, slots=True)
class FailureContext:
    """Context for harness failure diagnosis.

    Attributes:
        component: Harness component where the error occurred (transfer, context, runner)
        operation: Operation being performed (add_edge, copy, count)
        candidate: Ordinal of the candidate graph being processed (optional)
        selector: Selector tag being executed (optional)
        detail: Free-form detail such as capacities or vertex counts (optional)
    """

    component: str
    operation: str
    candidate: int | None = None
    selector: str | None = None
    detail: str | None = None


class HarnessIntegrityError(Exception):
    """Base exception for all harness integrity failures.

    This exception is immutable after construction to prevent
    tampering with failure evidence.

    Subclasses are @final to prevent further inheritance.

    Attributes:
        context: Structured diagnostic context for post-mortem analysis
    """

    __slots__ = ("_context", "_frozen")

    # Type annotations for __slots__ attributes (mypy requirement)
    _context: FailureContext | None
    _frozen: bool

    def __init__(
        self,
        message: str,
        context: FailureContext | None = None,
    ) -> None:
        """Initialize HarnessIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        super().__init__(message)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_frozen", True)

    # Python's exception handling sets these attributes when propagating exceptions.
    _PYTHON_EXCEPTION_ATTRS: frozenset[str] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    def __setattr__(self, name: str, value: object) -> None:
        """Reject all attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in self._PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify harness error attribute: {name}"
            raise ImmutabilityViolationError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete harness error attribute: {name}"
        raise ImmutabilityViolationError(msg)

    @property
    def context(self) -> FailureContext | None:
        """Structured diagnostic context."""
        return self._context

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


@final
class ImmutabilityViolationError(HarnessIntegrityError):
    """Attempt to mutate a harness error after construction."""


@final
class GraphCorruptionError(HarnessIntegrityError):
    """Edge insertion refused while the graph had room for every possible edge.

    The target graph was sized for the complete graph on its vertices, so a
    refusal can only mean its internal state is corrupt.
    """


@final
class GraphTransferError(HarnessIntegrityError):
    """Bit-matrix graph cannot be transferred into the target graph.

    Raised when the candidate has more vertices than the target was
    allocated for.
    """


@final
class GraphCopyError(HarnessIntegrityError):
    """Graph copy refused.

    Raised by full copies between graphs of different allocation and by
    adjacency-list copies whose source does not fit the target.
    """


@final
class ContextAllocationError(HarnessIntegrityError):
    """Test context cannot be allocated for the requested sizes."""


@final
class CounterOverflowError(HarnessIntegrityError):
    """Statistics counter would exceed its representable limit.

    Attributes:
        limit: The counter limit that would have been exceeded
    """

    __slots__ = ("_limit",)

    _limit: int

    def __init__(
        self,
        message: str,
        context: FailureContext | None = None,
        *,
        limit: int = 0,
    ) -> None:
        """Initialize CounterOverflowError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
            limit: Counter limit that would have been exceeded
        """
        # Must set before calling super().__init__ which freezes
        object.__setattr__(self, "_limit", limit)
        super().__init__(message, context)

    @property
    def limit(self) -> int:
        """Counter limit that would have been exceeded."""
        return self._limit
