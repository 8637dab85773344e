###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""Module containing Kruskal's minimum spanning tree algorithm."""

import logging
import math
from typing import Hashable, Iterable, TypeVar

from tqdm import tqdm

from ufgraph.algorithms.components import check_undirected
from ufgraph.datastructures.disjointset import ForestDisjointSet
from ufgraph.datastructures.graph import Graph, GraphEdge, GraphNode
from ufgraph.errors import EdgeWeightError

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "KruskalMSTComputer",
    "kruskal_minimum_spanning_forest",
    "total_weight"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


LT = TypeVar("LT", bound=Hashable)


def total_weight(edges: Iterable[GraphEdge[LT]]) -> float:
    """Get the sum of the weights of the given weighted edges."""
    return math.fsum(edge.weight for edge in edges)  # type: ignore


class KruskalMSTComputer:
    """
    Computes minimum spanning forests of weighted undirected graphs with
    Kruskal's algorithm, using a disjoint-set forest to detect cycles.

    The computer holds only configuration. Every computation allocates its
    own disjoint-set forest, so a single computer can be used for any number
    of computations, including concurrent ones on different graphs.
    """

    __KRUSKAL_LOGGER = logging.getLogger("KruskalMSTComputer")

    __slots__ = {
        "__debug": "Whether to log debug messages.",
        "__enable_progress_bar": "Whether to show a progress bar."
    }

    def __init__(
        self,
        debug: bool = False,
        enable_progress_bar: bool = False
    ) -> None:
        """
        Create a new minimum spanning tree computer.

        Parameters
        ----------
        `debug: bool = False` - Whether to log debug messages.

        `enable_progress_bar: bool = False` - Whether to enable a progress
        bar to show the progress of scanning the sorted edges.
        """
        self.__debug: bool = debug
        self.__enable_progress_bar: bool = enable_progress_bar

    @staticmethod
    def __sorted_edges(graph: Graph[LT]) -> list[GraphEdge[LT]]:
        """
        Validate the weights of all edges of the graph, and sort the edges by
        weight in ascending order.

        The sort is stable, so edges of equal weight keep the deterministic
        order in which the graph yields them.
        """
        edges: list[GraphEdge[LT]] = []
        for edge in graph.iter_edges():
            weight = edge.weight
            if weight is None:
                raise EdgeWeightError(f"The edge {edge!r} is unweighted.")
            if not math.isfinite(weight) or weight < 0.0:
                raise EdgeWeightError(
                    f"The edge {edge!r} must have a finite non-negative "
                    "weight.")
            edges.append(edge)
        edges.sort(key=lambda edge: edge.weight)
        return edges

    def compute_msp(self, graph: Graph[LT]) -> list[GraphEdge[LT]]:
        """
        Compute a minimum spanning forest of a weighted undirected graph.

        The edges are scanned in order of ascending weight, and an edge is
        accepted if and only if its nodes are currently in different disjoint
        sub-sets (otherwise the edge would form a cycle), in which case the
        sub-sets are unioned.

        Parameters
        ----------
        `graph: Graph[LT]` - An undirected graph, whose edges all have finite
        non-negative weights.

        Returns
        -------
        `list[GraphEdge[LT]]` - The accepted edges, in order of acceptance.
        If the graph is connected, this is a minimum spanning tree with
        `graph.node_count() - 1` edges. Otherwise, it is a minimum spanning
        forest with one tree per connected component.

        Raises
        ------
        `PreconditionError` - If the graph is None or directed.

        `EdgeWeightError` - If any edge is unweighted, or its weight is
        negative or infinite. No partial result is returned.
        """
        check_undirected(graph)
        edges: list[GraphEdge[LT]] = self.__sorted_edges(graph)
        forest = ForestDisjointSet[GraphNode[LT]](graph, debug=self.__debug)

        if self.__enable_progress_bar:
            progress_bar = tqdm(
                total=len(edges),
                desc="Kruskal",
                unit="edge",
                leave=False,
                colour="cyan"
            )

        msp: list[GraphEdge[LT]] = []
        for edge in edges:
            node_1, node_2 = edge.node_1, edge.node_2
            if forest.find_set(node_1) != forest.find_set(node_2):
                msp.append(edge)
                forest.union(node_1, node_2)
            if self.__enable_progress_bar:
                progress_bar.update(1)

        if self.__enable_progress_bar:
            progress_bar.close()

        if self.__debug:
            self.__KRUSKAL_LOGGER.debug(
                "Accepted %d and rejected %d of %d edges, "
                "spanning forest of %d trees with total weight %s.",
                len(msp), len(edges) - len(msp), len(edges),
                graph.node_count() - len(msp), total_weight(msp)
            )
        return msp


def kruskal_minimum_spanning_forest(
    graph: Graph[LT]
) -> list[GraphEdge[LT]]:
    """
    Compute a minimum spanning forest of a weighted undirected graph.

    See `KruskalMSTComputer.compute_msp`.
    """
    return KruskalMSTComputer().compute_msp(graph)
