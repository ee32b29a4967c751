"""Final statistics report.

One table per AlgorithmResult, bracketed by Begin/End Stats lines, with a
row per edge count in the configured range and a totals row.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .labels import labels_for

if TYPE_CHECKING:
    from planarityharness.enums import RunStatus
    from planarityharness.runtime.config import HarnessConfig
    from planarityharness.runtime.context import AlgorithmResult, TestContext

__all__ = ["format_report", "format_stats"]

_RULE = "-------  ----------  ----------  ----------"


def format_stats(
    result: AlgorithmResult,
    *,
    status: RunStatus,
    vertex_count: int,
    min_edges: int,
    max_edges: int,
    mod: int = 0,
    res: int = 0,
) -> str:
    """Render the statistics table for one selector.

    Edge counts without a bucket (beyond the graphs' vertex count) are
    shown as zero rows.

    Example:
        >>> print(format_stats(result, status=RunStatus.SUCCESS,
        ...                    vertex_count=3, min_edges=3, max_edges=3))
        Begin Stats for Algorithm Planarity
        Status=SUCCESS
        maxn=3, mine=3, maxe=3
        # Edges    # Graphs      Planar  Not Planar
        -------  ----------  ----------  ----------
              3           1           1           0
        TOTALS            1           1           0
        End Stats for Algorithm Planarity
    """
    labels = labels_for(result.selector)
    lines = [
        f"Begin Stats for Algorithm {labels.algorithm}",
        f"Status={status}",
        f"maxn={vertex_count}, mine={min_edges}, maxe={max_edges}",
    ]
    if mod > 1:
        lines.append(f"mod={mod}, res={res}")
    lines.append(f"# Edges  {'# Graphs':>10}  {labels.ok:>10}  {labels.negative:>10}")
    lines.append(_RULE)

    for edge_count in range(min_edges, max_edges + 1):
        if edge_count < len(result.buckets):
            bucket = result.buckets[edge_count]
            seen, ok = bucket.graphs_seen, bucket.graphs_ok
        else:
            seen = ok = 0
        lines.append(f"{edge_count:7d}  {seen:10d}  {ok:10d}  {seen - ok:10d}")

    total = result.total
    lines.append(
        f"TOTALS   {total.graphs_seen:10d}  {total.graphs_ok:10d}  {total.graphs_rejected:10d}"
    )
    lines.append(f"End Stats for Algorithm {labels.algorithm}")
    return "\n".join(lines) + "\n"


def format_report(context: TestContext, config: HarnessConfig, status: RunStatus) -> str:
    """Render the tables of every selector in context, in execution order."""
    return "".join(
        format_stats(
            result,
            status=status,
            vertex_count=context.vertex_count,
            min_edges=context.min_edges,
            max_edges=context.max_edges,
            mod=config.mod,
            res=config.res,
        )
        for result in context.results
    )
