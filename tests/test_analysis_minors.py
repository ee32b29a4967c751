"""Tests for analysis.minors: outerplanarity and small minor detection."""

import networkx as nx
from hypothesis import given, settings

from planarityharness.analysis import (
    augment_with_apex,
    find_k4_block,
    find_k23_block,
    find_k33_block,
    has_k4_minor,
    has_k23_minor,
    has_k33_minor,
    is_outerplanar,
    kuratowski_type,
    series_parallel_core,
)
from tests.strategies import networkx_graphs


def _subdivide(graph: nx.Graph, u: int, v: int) -> nx.Graph:
    subdivided = nx.Graph(graph)
    middle = max(subdivided.nodes) + 1
    subdivided.remove_edge(u, v)
    subdivided.add_edges_from([(u, middle), (middle, v)])
    return subdivided


# ============================================================================
# OUTERPLANARITY
# ============================================================================


class TestOuterplanarity:
    """Apex augmentation and the outerplanarity test."""

    def test_apex_adjacent_to_all(self) -> None:
        """The apex gets one past the largest label and every vertex as neighbor."""
        augmented, apex = augment_with_apex(nx.path_graph(3))
        assert apex == 3
        assert set(augmented.neighbors(apex)) == {0, 1, 2}

    def test_apex_of_empty_graph(self) -> None:
        """An empty graph gets apex 0."""
        augmented, apex = augment_with_apex(nx.Graph())
        assert apex == 0
        assert augmented.number_of_nodes() == 1

    def test_cycle_is_outerplanar(self) -> None:
        """Every cycle is outerplanar."""
        assert is_outerplanar(nx.cycle_graph(7))

    def test_k4_is_not_outerplanar(self) -> None:
        """K4 is planar but not outerplanar."""
        assert not is_outerplanar(nx.complete_graph(4))

    def test_k23_is_not_outerplanar(self) -> None:
        """K2,3 is planar but not outerplanar."""
        assert not is_outerplanar(nx.complete_bipartite_graph(2, 3))

    def test_fan_is_outerplanar(self) -> None:
        """A triangulated polygon is outerplanar."""
        fan = nx.path_graph(5)
        fan.add_edges_from((0, v) for v in range(2, 5))
        assert is_outerplanar(fan)


# ============================================================================
# K4
# ============================================================================


class TestK4Minor:
    """Series-parallel reduction."""

    def test_k4(self) -> None:
        """K4 itself."""
        assert has_k4_minor(nx.complete_graph(4))

    def test_subdivided_k4(self) -> None:
        """Subdivisions keep the K4 minor."""
        assert has_k4_minor(_subdivide(nx.complete_graph(4), 0, 1))

    def test_series_parallel_graphs(self) -> None:
        """Trees, cycles and K2,3 reduce to nothing."""
        assert series_parallel_core(nx.balanced_tree(2, 3)) == set()
        assert series_parallel_core(nx.cycle_graph(5)) == set()
        assert not has_k4_minor(nx.complete_bipartite_graph(2, 3))

    def test_k4_block_found(self) -> None:
        """The block holding K4 is reported, not a pendant path."""
        graph = nx.complete_graph(4)
        graph.add_edges_from([(3, 4), (4, 5)])
        assert find_k4_block(graph) == frozenset({0, 1, 2, 3})

    def test_no_block_without_k4(self) -> None:
        """None when the graph has no K4 minor."""
        assert find_k4_block(nx.cycle_graph(6)) is None


# ============================================================================
# K2,3
# ============================================================================


class TestK23Minor:
    """Blocks that are neither outerplanar nor K4."""

    def test_k23(self) -> None:
        """K2,3 itself."""
        assert has_k23_minor(nx.complete_bipartite_graph(2, 3))

    def test_k4_alone_has_no_k23(self) -> None:
        """K4 has only four vertices."""
        assert not has_k23_minor(nx.complete_graph(4))

    def test_k5_has_k23(self) -> None:
        """Larger non-outerplanar blocks contain K2,3."""
        assert has_k23_minor(nx.complete_graph(5))

    def test_two_k4_sharing_a_vertex(self) -> None:
        """Blocks are judged separately."""
        graph = nx.complete_graph(4)
        graph.add_edges_from(nx.relabel_nodes(nx.complete_graph(4), {0: 3, 1: 4, 2: 5, 3: 6}).edges)
        assert not has_k23_minor(graph)
        assert find_k23_block(graph) is None


# ============================================================================
# K3,3
# ============================================================================


class TestK33Minor:
    """Separation-pair decomposition of nonplanar blocks."""

    def test_k33(self) -> None:
        """K3,3 itself."""
        assert has_k33_minor(nx.complete_bipartite_graph(3, 3))

    def test_k5_has_no_k33(self) -> None:
        """K5 is nonplanar without a K3,3 minor."""
        assert not has_k33_minor(nx.complete_graph(5))

    def test_petersen(self) -> None:
        """The Petersen graph contains K3,3."""
        assert has_k33_minor(nx.petersen_graph())

    def test_k6_has_k33(self) -> None:
        """K6 contains K3,3 as a subgraph."""
        assert has_k33_minor(nx.complete_graph(6))

    def test_k5_with_subdivided_edge(self) -> None:
        """Subdividing K5 once does not create a K3,3 minor."""
        assert not has_k33_minor(_subdivide(nx.complete_graph(5), 0, 1))

    def test_two_k5_sharing_an_edge(self) -> None:
        """Gluing K5s along an edge splits at the separation pair."""
        graph = nx.complete_graph(5)
        graph.add_edges_from(
            nx.relabel_nodes(nx.complete_graph(5), {0: 0, 1: 1, 2: 5, 3: 6, 4: 7}).edges
        )
        # Contract-free argument: each piece is K5, and K3,3 is 3-connected.
        assert not has_k33_minor(graph)

    def test_k33_block_found(self) -> None:
        """The nonplanar block is the one reported."""
        graph = nx.complete_bipartite_graph(3, 3)
        graph.add_edge(5, 6)
        assert find_k33_block(graph) == frozenset(range(6))

    @given(networkx_graphs(max_vertices=7))
    @settings(max_examples=100)
    def test_planar_graphs_have_no_k33(self, graph: nx.Graph) -> None:
        """A K3,3 minor implies nonplanarity."""
        is_planar, _ = nx.check_planarity(graph)
        if is_planar:
            assert not has_k33_minor(graph)


# ============================================================================
# CHARACTERIZATIONS
# ============================================================================


class TestCharacterizations:
    """Cross-checks between the minor tests and planarity."""

    @given(networkx_graphs(max_vertices=7))
    @settings(max_examples=100)
    def test_outerplanar_iff_no_k4_and_no_k23(self, graph: nx.Graph) -> None:
        """Outerplanar graphs are exactly those without K4 and K2,3 minors."""
        assert is_outerplanar(graph) == (not has_k4_minor(graph) and not has_k23_minor(graph))

    @given(networkx_graphs(max_vertices=7))
    @settings(max_examples=100)
    def test_nonplanar_has_k5_or_k33(self, graph: nx.Graph) -> None:
        """Wagner: nonplanar graphs without K3,3 contain a K5 subdivision."""
        is_planar, certificate = nx.check_planarity(graph, counterexample=True)
        if not is_planar and not has_k33_minor(graph):
            assert kuratowski_type(certificate.edges()) == "K5"


# ============================================================================
# KURATOWSKI SUBDIVISIONS
# ============================================================================


class TestKuratowskiType:
    """Classifying Kuratowski subgraphs."""

    def test_k5(self) -> None:
        """K5 is its own branch graph."""
        assert kuratowski_type(nx.complete_graph(5).edges) == "K5"

    def test_subdivided_k33(self) -> None:
        """Degree-2 vertices are suppressed."""
        graph = _subdivide(nx.complete_bipartite_graph(3, 3), 0, 3)
        assert kuratowski_type(graph.edges) == "K3,3"

    def test_planar_graph(self) -> None:
        """Planar edge sets are neither."""
        assert kuratowski_type(nx.complete_graph(4).edges) is None

    def test_empty(self) -> None:
        """No edges, no obstruction."""
        assert kuratowski_type([]) is None

    def test_cycle(self) -> None:
        """A cycle collapses to a loop and is rejected."""
        assert kuratowski_type(nx.cycle_graph(4).edges) is None
