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

"""Module containing connected components of undirected graphs."""

import logging
from typing import Hashable, TypeVar

from ufgraph.datastructures.disjointset import ForestDisjointSet
from ufgraph.datastructures.graph import Graph, GraphNode
from ufgraph.errors import PreconditionError

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "ConnectedComponentsComputer",
    "connected_components",
    "check_undirected"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


LT = TypeVar("LT", bound=Hashable)


def check_undirected(graph: Graph[LT] | None) -> None:
    """
    Check that the given graph is an undirected graph.

    Raises
    ------
    `PreconditionError` - If the graph is None or directed.
    """
    if graph is None:
        raise PreconditionError("The graph must not be None.")
    if graph.is_directed():
        raise PreconditionError(f"The graph {graph!s} must be undirected.")


class ConnectedComponentsComputer:
    """
    Computes the connected components of undirected graphs using a
    disjoint-set forest.

    The computer holds only configuration. Every computation allocates its
    own disjoint-set forest, so a single computer can be used for any number
    of computations, including concurrent ones on different graphs.
    """

    __COMPONENTS_LOGGER = logging.getLogger("ConnectedComponentsComputer")

    __slots__ = {
        "__debug": "Whether to log debug messages."
    }

    def __init__(self, debug: bool = False) -> None:
        """
        Create a new connected components computer.

        `debug: bool = False` - Whether to log debug messages.
        """
        self.__debug: bool = debug

    def compute_connected_components(
        self,
        graph: Graph[LT]
    ) -> set[frozenset[GraphNode[LT]]]:
        """
        Compute the connected components of an undirected graph.

        Every node is first put into its own disjoint sub-set, then the
        sub-sets of the nodes of every edge are unioned. The final sub-sets
        are the connected components, two nodes are in the same component if
        and only if there is a path of edges between them.

        Parameters
        ----------
        `graph: Graph[LT]` - An undirected graph.

        Returns
        -------
        `set[frozenset[GraphNode[LT]]]` - The set of connected components,
        each a set of nodes. The components partition the nodes of the graph.
        The set is empty if the graph has no nodes.

        Raises
        ------
        `PreconditionError` - If the graph is None or directed.
        """
        check_undirected(graph)
        if graph.node_count() == 0:
            return set()

        forest = ForestDisjointSet[GraphNode[LT]](graph, debug=self.__debug)
        unions: int = 0
        for edge in graph.iter_edges():
            node_1, node_2 = edge.node_1, edge.node_2
            if forest.find_set(node_1) != forest.find_set(node_2):
                forest.union(node_1, node_2)
                unions += 1

        components = set(forest.find_all_sets().values())

        if self.__debug:
            self.__COMPONENTS_LOGGER.debug(
                "Found %d connected components of %d nodes and %d edges "
                "with %d unions.",
                len(components), graph.node_count(), graph.edge_count(),
                unions
            )
        return components


def connected_components(graph: Graph[LT]) -> set[frozenset[GraphNode[LT]]]:
    """
    Compute the connected components of an undirected graph.

    See `ConnectedComponentsComputer.compute_connected_components`.
    """
    return ConnectedComponentsComputer().compute_connected_components(graph)
