"""Tests for diagnostics.report and diagnostics.labels."""

from __future__ import annotations

from planarityharness.diagnostics import SELECTOR_LABELS, format_report, format_stats, labels_for
from planarityharness.enums import RunStatus, Selector
from planarityharness.graph import WorkingGraph
from planarityharness.runtime import AlgorithmResult, HarnessConfig, acquire_context


def _result(selector: Selector, vertex_count: int) -> AlgorithmResult:
    return AlgorithmResult(
        selector=selector,
        original=WorkingGraph(vertex_count),
        working=WorkingGraph(vertex_count),
    )


class TestLabels:
    """Per-selector table labels."""

    def test_every_selector_labelled(self) -> None:
        """No selector is missing a label triple."""
        assert set(SELECTOR_LABELS) == set(Selector)

    def test_coloring_labels(self) -> None:
        """Coloring columns mention the color threshold."""
        labels = labels_for(Selector.VERTEX_COLORING)
        assert (labels.ok, labels.negative) == ("<=5 colors", ">5 colors")


class TestFormatStats:
    """Layout of one statistics table."""

    def test_layout(self) -> None:
        """Rows per edge count between min and max, then totals."""
        result = _result(Selector.OUTERPLANARITY, 4)
        result.count_seen(3, 100)
        result.count_ok(3)
        result.count_seen(4, 100)
        text = format_stats(
            result, status=RunStatus.SUCCESS, vertex_count=4, min_edges=3, max_edges=4
        )
        assert text == (
            "Begin Stats for Algorithm Outerplanarity\n"
            "Status=SUCCESS\n"
            "maxn=4, mine=3, maxe=4\n"
            "# Edges    # Graphs    Embedded  Obstructed\n"
            "-------  ----------  ----------  ----------\n"
            "      3           1           1           0\n"
            "      4           1           0           1\n"
            "TOTALS            2           1           1\n"
            "End Stats for Algorithm Outerplanarity\n"
        )

    def test_totals_include_rows_outside_range(self) -> None:
        """Totals cover every counted graph, not only displayed rows."""
        result = _result(Selector.PLANARITY, 4)
        result.count_seen(1, 100)
        result.count_seen(5, 100)
        text = format_stats(
            result, status=RunStatus.SUCCESS, vertex_count=4, min_edges=5, max_edges=5
        )
        assert "      5           1           0           1\n" in text
        assert "TOTALS            2           0           2\n" in text

    def test_mod_res_line(self) -> None:
        """The partition line appears only for mod > 1."""
        result = _result(Selector.PLANARITY, 3)
        with_mod = format_stats(
            result,
            status=RunStatus.SUCCESS,
            vertex_count=3,
            min_edges=0,
            max_edges=0,
            mod=4,
            res=1,
        )
        without = format_stats(
            result, status=RunStatus.SUCCESS, vertex_count=3, min_edges=0, max_edges=0, mod=1
        )
        assert "maxn=3, mine=0, maxe=0\nmod=4, res=1\n" in with_mod
        assert "mod=" not in without

    def test_error_status(self) -> None:
        """The status line reflects the run status."""
        text = format_stats(
            _result(Selector.SEARCH_K4, 3),
            status=RunStatus.ERROR,
            vertex_count=3,
            min_edges=0,
            max_edges=0,
        )
        assert text.splitlines()[:2] == ["Begin Stats for Algorithm K4 Search", "Status=ERROR"]

    def test_rows_beyond_buckets(self) -> None:
        """Edge counts past the complete graph show as zero rows."""
        text = format_stats(
            _result(Selector.PLANARITY, 2),
            status=RunStatus.SUCCESS,
            vertex_count=2,
            min_edges=2,
            max_edges=3,
        )
        assert "      2           0           0           0\n" in text
        assert "      3           0           0           0\n" in text


class TestFormatReport:
    """Concatenated tables for a whole context."""

    def test_all_mode_order(self) -> None:
        """Tables follow selector execution order."""
        config = HarnessConfig(command="a")
        context = acquire_context(config, 3)
        text = format_report(context, config, RunStatus.SUCCESS)
        begins = [line for line in text.splitlines() if line.startswith("Begin Stats")]
        assert begins == [
            f"Begin Stats for Algorithm {labels_for(s).algorithm}" for s in Selector
        ]

    def test_uses_context_edge_range(self) -> None:
        """The configured range is echoed in every table."""
        config = HarnessConfig(min_edges=1, max_edges=2, mod=3, res=2)
        context = acquire_context(config, 4)
        text = format_report(context, config, RunStatus.SUCCESS)
        assert "maxn=4, mine=1, maxe=2\nmod=3, res=2\n" in text
