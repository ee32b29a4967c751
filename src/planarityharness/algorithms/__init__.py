"""Algorithm capabilities called by the test harness.

The harness depends only on the protocols defined here. The default suite
runs networkx planarity testing, minor searches and greedy coloring.

Python 3.13+.
"""

from .coloring import GreedyColoring
from .embedding import NetworkXEmbedder, rotation_system_to_embedding
from .protocols import AlgorithmSuite, ColoringCapability, EmbeddingCapability

__all__ = [
    "AlgorithmSuite",
    "ColoringCapability",
    "EmbeddingCapability",
    "GreedyColoring",
    "NetworkXEmbedder",
    "rotation_system_to_embedding",
]
