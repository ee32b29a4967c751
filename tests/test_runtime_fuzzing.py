"""Exhaustive and randomized sweeps of the default suite in all mode.

Every selector runs against the same candidate, so the answers must agree
with one another:
- planarity and drawing accept exactly the same graphs;
- outerplanarity accepts exactly the graphs with neither a K4 nor a K2,3 minor;
- every planar graph has no K3,3 minor.

Note: This file is marked with pytest.mark.fuzz and is excluded from normal
test runs. Run via: pytest -m fuzz
"""

from __future__ import annotations

from itertools import combinations, product

import pytest
from hypothesis import HealthCheck, event, given, settings

from planarityharness.algorithms import AlgorithmSuite
from planarityharness.enums import OutcomeStatus, Selector
from planarityharness.graph import BitMatrixGraph
from planarityharness.runtime import (
    HarnessConfig,
    TestContext,
    acquire_context,
    populate_originals,
    run_selectors,
)
from tests.strategies import bit_matrix_graphs

pytestmark = pytest.mark.fuzz

_CONFIG = HarnessConfig(command="a", quiet=True, write_artifacts=False)
_SUITE = AlgorithmSuite()


def _accepted(context: TestContext, matrix: BitMatrixGraph) -> dict[Selector, bool]:
    assert populate_originals(context, matrix) is None
    outcomes = run_selectors(context, _SUITE, _CONFIG)
    assert len(outcomes) == len(Selector)
    for outcome in outcomes:
        assert not outcome.is_failure, outcome.failure
    return {o.selector: o.status is OutcomeStatus.ACCEPTED for o in outcomes}


def _check_agreement(accepted: dict[Selector, bool]) -> None:
    assert accepted[Selector.PLANARITY] == accepted[Selector.DRAWING]
    assert accepted[Selector.OUTERPLANARITY] == (
        accepted[Selector.SEARCH_K4] and accepted[Selector.SEARCH_K23]
    )
    if accepted[Selector.PLANARITY]:
        assert accepted[Selector.SEARCH_K33]


class TestExhaustive:
    """Every labelled graph on a few vertices."""

    @pytest.mark.parametrize("vertex_count", [1, 2, 3, 4, 5])
    def test_all_graphs(self, vertex_count: int) -> None:
        """No failures and consistent answers over all 2^(n(n-1)/2) graphs."""
        context = acquire_context(_CONFIG, vertex_count)
        pairs = list(combinations(range(vertex_count), 2))
        for mask in product((False, True), repeat=len(pairs)):
            matrix = BitMatrixGraph.from_edges(
                vertex_count, [pair for pair, keep in zip(pairs, mask, strict=True) if keep]
            )
            accepted = _accepted(context, matrix)
            _check_agreement(accepted)
            # At most five vertices means at most five colors.
            assert accepted[Selector.VERTEX_COLORING]

        expected = 2 ** len(pairs)
        for result in context.results:
            assert result.total.graphs_seen == expected
            assert sum(b.graphs_seen for b in result.buckets) == expected
            assert sum(b.graphs_ok for b in result.buckets) == result.total.graphs_ok


class TestRandomized:
    """Random larger candidates."""

    @given(matrix=bit_matrix_graphs(min_vertices=6, max_vertices=10))
    @settings(max_examples=200, deadline=None, suppress_health_check=[HealthCheck.too_slow])
    def test_selectors_agree(self, matrix: BitMatrixGraph) -> None:
        """Property: the selectors' answers are mutually consistent."""
        context = acquire_context(_CONFIG, matrix.vertex_count)
        accepted = _accepted(context, matrix)
        event(f"planar={accepted[Selector.PLANARITY]}")
        event(f"outerplanar={accepted[Selector.OUTERPLANARITY]}")
        _check_agreement(accepted)
