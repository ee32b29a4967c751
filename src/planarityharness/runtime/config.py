"""Run configuration for the test harness.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from planarityharness.constants import (
    COLOR_THRESHOLD,
    COUNTER_LIMIT,
    DEBUG_PROGRESS_INTERVAL,
    PROGRESS_INTERVAL,
    complete_edge_count,
)
from planarityharness.enums import ALL_SELECTORS_TAG, Selector

__all__ = ["HarnessConfig"]


@dataclass(frozen=True, slots=True)
class HarnessConfig:
    """Immutable configuration for one test run.

    All fields have usable defaults; ``HarnessConfig()`` tests planarity with
    complete-graph capacity and writes failure artifacts to the current
    directory.

    Attributes:
        command: Selector tag, or ``"a"`` to run every selector (default: "p")
        min_edges: Smallest edge count shown in the report (default: 0)
        max_edges: Largest edge count shown in the report; None means the
            complete graph on the run's vertex count (default: None)
        edge_capacity: Edge capacity of every allocated graph; None means the
            complete graph, smaller values make transfer stop early
            (default: None)
        mod: Generator partition modulus, echoed in the report when > 1
            (default: 0)
        res: Generator partition residue, echoed with mod (default: 0)
        quiet: Suppress progress lines (default: False)
        progress_interval: Candidates between progress lines (default: 379)
        counter_limit: Largest value a statistics counter may reach
            (default: 2**64 - 1)
        color_threshold: Color count at which coloring is a negative result
            (default: 6)
        artifact_dir: Directory receiving failure artifacts (default: ".")
        write_artifacts: Write failure artifacts at all (default: True)

    Example:
        >>> config = HarnessConfig(command="a", quiet=True)
        >>> len(config.selectors)
        7
        >>> HarnessConfig.debug().progress_interval
        1
    """

    command: str = Selector.PLANARITY.value
    min_edges: int = 0
    max_edges: int | None = None
    edge_capacity: int | None = None
    mod: int = 0
    res: int = 0
    quiet: bool = False
    progress_interval: int = PROGRESS_INTERVAL
    counter_limit: int = COUNTER_LIMIT
    color_threshold: int = COLOR_THRESHOLD
    artifact_dir: Path = field(default_factory=Path)
    write_artifacts: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If command is not a selector tag, an edge bound or
                capacity is negative, the edge range is empty, res is not
                below mod, or an interval, limit or threshold is not positive.
        """
        Selector.resolve(self.command)
        if self.min_edges < 0:
            msg = "min_edges must be non-negative"
            raise ValueError(msg)
        if self.max_edges is not None and self.max_edges < self.min_edges:
            msg = "max_edges must not be below min_edges"
            raise ValueError(msg)
        if self.edge_capacity is not None and self.edge_capacity < 0:
            msg = "edge_capacity must be non-negative"
            raise ValueError(msg)
        if self.mod < 0 or self.res < 0:
            msg = "mod and res must be non-negative"
            raise ValueError(msg)
        if self.mod > 1 and self.res >= self.mod:
            msg = "res must be below mod"
            raise ValueError(msg)
        if self.progress_interval <= 0:
            msg = "progress_interval must be positive"
            raise ValueError(msg)
        if self.counter_limit <= 0:
            msg = "counter_limit must be positive"
            raise ValueError(msg)
        if self.color_threshold <= 0:
            msg = "color_threshold must be positive"
            raise ValueError(msg)
        if not isinstance(self.artifact_dir, Path):
            object.__setattr__(self, "artifact_dir", Path(self.artifact_dir))

    @classmethod
    def debug(cls, command: str = Selector.PLANARITY.value, **overrides: object) -> HarnessConfig:
        """Configuration that reports progress after every candidate."""
        overrides.setdefault("progress_interval", DEBUG_PROGRESS_INTERVAL)
        return cls(command, **overrides)  # type: ignore[arg-type]

    @property
    def selectors(self) -> tuple[Selector, ...]:
        """Selectors run against each candidate, in execution order."""
        return Selector.resolve(self.command)

    @property
    def is_all_mode(self) -> bool:
        """True when every selector runs against each candidate."""
        return self.command == ALL_SELECTORS_TAG

    def resolved_max_edges(self, vertex_count: int) -> int:
        """Largest reported edge count for graphs on vertex_count vertices."""
        if self.max_edges is None:
            return complete_edge_count(vertex_count)
        return self.max_edges

    def resolved_edge_capacity(self, vertex_count: int) -> int:
        """Edge capacity of graphs allocated for vertex_count vertices."""
        if self.edge_capacity is None:
            return complete_edge_count(vertex_count)
        return self.edge_capacity
