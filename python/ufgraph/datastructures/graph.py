###########################################################################
###########################################################################
## Undirected graphs represented by adjacency matrices.                  ##
##                                                                       ##
## Copyright (C)  2022  Oliver Michael Kamperis                          ##
## Email: o.m.kamperis@gmail.com                                         ##
##                                                                       ##
## This program is free software: you can redistribute it and/or modify  ##
## it under the terms of the GNU General Public License as published by  ##
## the Free Software Foundation, either version 3 of the License, or     ##
## any later version.                                                    ##
##                                                                       ##
## This program is distributed in the hope that it will be useful,       ##
## but WITHOUT ANY WARRANTY; without even the implied warranty of        ##
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the          ##
## GNU General Public License for more details.                          ##
##                                                                       ##
## You should have received a copy of the GNU General Public License     ##
## along with this program. If not, see <https://www.gnu.org/licenses/>. ##
###########################################################################
###########################################################################

"""Module containing graph nodes, graph edges and adjacency matrix graphs."""

import abc
import collections.abc
import logging
import math
from typing import (Generic, Hashable, Iterator, KeysView, Optional,
                    SupportsFloat, TypeVar, final)

import numpy as np

from ufgraph.errors import (NodeIndexError, NodeNotFoundError,
                            PreconditionError,
                            UnsupportedGraphOperationError)

__copyright__ = "Copyright (C) 2022 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "GraphNode",
    "GraphEdge",
    "Graph",
    "AdjacencyMatrixUndirectedGraph"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


# Graph node label type (must be hashable).
LT = TypeVar("LT", bound=Hashable)


@final
class GraphNode(Generic[LT]):
    """
    A node of a graph, identified by its label.

    Two nodes are equal if and only if their labels are equal.
    """

    __slots__ = {
        "__label": "The label identifying the node."
    }

    def __init__(self, label: LT, /) -> None:
        """
        Create a new graph node with the given label.

        Raises
        ------
        `PreconditionError` - If the label is None.
        """
        if label is None:
            raise PreconditionError("The label of a node must not be None.")
        self.__label: LT = label

    def __repr__(self) -> str:
        """Get an instantiable string representation of the node."""
        return f"GraphNode({self.__label!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphNode):
            return NotImplemented
        return self.__label == other.label

    def __hash__(self) -> int:
        return hash(self.__label)

    @property
    def label(self) -> LT:
        """Get the label of the node."""
        return self.__label


@final
class GraphEdge(Generic[LT]):
    """
    An edge of a graph, connecting two nodes.

    An edge is either undirected (the default) or directed, and is either
    unweighted (the weight is None) or weighted. Two undirected edges are
    equal if they connect the same nodes, regardless of order. Two directed
    edges are equal if they connect the same nodes in the same order. The
    weight is not considered for equality.
    """

    __slots__ = {
        "__node_1": "The first node of the edge.",
        "__node_2": "The second node of the edge.",
        "__directed": "Whether the edge is directed from node 1 to node 2.",
        "__weight": "The weight of the edge, or None if unweighted."
    }

    def __init__(
        self,
        node_1: GraphNode[LT],
        node_2: GraphNode[LT], /,
        weight: SupportsFloat | None = None,
        directed: bool = False
    ) -> None:
        """
        Create a new graph edge.

        Parameters
        ----------
        `node_1: GraphNode[LT]` - The first node of the edge.

        `node_2: GraphNode[LT]` - The second node of the edge.

        `weight: SupportsFloat | None = None` - The weight of the edge. If
        None, the edge is unweighted.

        `directed: bool = False` - Whether the edge is directed from the first
        node to the second.

        Raises
        ------
        `PreconditionError` - If either node is None, or the weight is NaN.
        """
        if node_1 is None or node_2 is None:
            raise PreconditionError("The nodes of an edge must not be None.")
        self.__node_1: GraphNode[LT] = node_1
        self.__node_2: GraphNode[LT] = node_2
        self.__directed: bool = directed
        self.__weight: float | None = self.__check_weight(weight)

    @staticmethod
    def __check_weight(weight: SupportsFloat | None) -> float | None:
        if weight is None:
            return None
        weight = float(weight)
        if math.isnan(weight):
            raise PreconditionError("The weight of an edge must not be NaN.")
        return weight

    def __repr__(self) -> str:
        """Get an instantiable string representation of the edge."""
        return (f"GraphEdge({self.__node_1!r}, {self.__node_2!r}, "
                f"weight={self.__weight!r}, directed={self.__directed})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphEdge):
            return NotImplemented
        if self.__directed != other.is_directed():
            return False
        if self.__node_1 == other.node_1 and self.__node_2 == other.node_2:
            return True
        return (not self.__directed
                and self.__node_1 == other.node_2
                and self.__node_2 == other.node_1)

    def __hash__(self) -> int:
        if self.__directed:
            return hash((self.__node_1, self.__node_2))
        return hash(frozenset((self.__node_1, self.__node_2)))

    @property
    def node_1(self) -> GraphNode[LT]:
        """Get the first node of the edge."""
        return self.__node_1

    @property
    def node_2(self) -> GraphNode[LT]:
        """Get the second node of the edge."""
        return self.__node_2

    @property
    def weight(self) -> float | None:
        """Get the weight of the edge, None if the edge is unweighted."""
        return self.__weight

    @weight.setter
    def weight(self, weight: SupportsFloat | None) -> None:
        """Set the weight of the edge, None makes the edge unweighted."""
        self.__weight = self.__check_weight(weight)

    def has_weight(self) -> bool:
        """Whether the edge is weighted."""
        return self.__weight is not None

    def is_directed(self) -> bool:
        """Whether the edge is directed."""
        return self.__directed

    def is_loop(self) -> bool:
        """Whether the edge connects a node to itself."""
        return self.__node_1 == self.__node_2


class Graph(collections.abc.Collection, Generic[LT]):
    """
    Abstract base class for graphs whose nodes are labelled and indexed.

    A graph is a collection of its nodes. Every node has a position, a dense
    integer in the range `[0, node_count())`, assigned in the order in which
    the nodes were inserted.

    Sub-classes implement the abstract methods, and inherit convenience
    methods defined in terms of them.
    """

    __slots__ = ()

    def __contains__(self, node: object) -> bool:
        """Whether the given node is in the graph."""
        return isinstance(node, GraphNode) and self.contains_node(node)

    def __iter__(self) -> Iterator[GraphNode[LT]]:
        """Iterate over the nodes of the graph in position order."""
        for index in range(self.node_count()):
            yield self.get_node_at_index(index)

    def __len__(self) -> int:
        """The number of nodes in the graph."""
        return self.node_count()

    @abc.abstractmethod
    def node_count(self) -> int:
        """Get the number of nodes in the graph."""
        ...

    @abc.abstractmethod
    def edge_count(self) -> int:
        """Get the number of edges in the graph."""
        ...

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove all nodes and edges from the graph."""
        ...

    @abc.abstractmethod
    def is_directed(self) -> bool:
        """Whether the graph is directed."""
        ...

    @abc.abstractmethod
    def get_nodes(self) -> collections.abc.Set[GraphNode[LT]]:
        """Get the set of nodes of the graph."""
        ...

    @abc.abstractmethod
    def add_node(self, node: GraphNode[LT]) -> bool:
        """Add a node, returning False if it was already in the graph."""
        ...

    @abc.abstractmethod
    def remove_node(self, node: GraphNode[LT]) -> bool:
        """Remove a node, returning False if it was not in the graph."""
        ...

    @abc.abstractmethod
    def contains_node(self, node: GraphNode[LT]) -> bool:
        """Whether the given node is in the graph."""
        ...

    @abc.abstractmethod
    def get_node_of(self, label: LT) -> Optional[GraphNode[LT]]:
        """Get the node with the given label, or None if there is none."""
        ...

    @abc.abstractmethod
    def get_node_index_of(self, label: LT) -> int:
        """Get the position of the node with the given label."""
        ...

    @abc.abstractmethod
    def get_node_at_index(self, index: int) -> GraphNode[LT]:
        """Get the node at the given position."""
        ...

    @abc.abstractmethod
    def get_edge_at_node_indexes(
        self,
        index_1: int,
        index_2: int
    ) -> Optional[GraphEdge[LT]]:
        """Get the edge between the nodes at the given positions, if any."""
        ...

    @abc.abstractmethod
    def get_adjacent_nodes_of(
        self,
        node: GraphNode[LT]
    ) -> set[GraphNode[LT]]:
        """Get the nodes adjacent to the given node."""
        ...

    @abc.abstractmethod
    def get_predecessor_nodes_of(
        self,
        node: GraphNode[LT]
    ) -> set[GraphNode[LT]]:
        """Get the nodes with an edge directed to the given node."""
        ...

    @abc.abstractmethod
    def iter_edges(self) -> Iterator[GraphEdge[LT]]:
        """Iterate over the edges of the graph in a deterministic order."""
        ...

    @abc.abstractmethod
    def add_edge(self, edge: GraphEdge[LT]) -> bool:
        """Add an edge, returning False if it was already in the graph."""
        ...

    @abc.abstractmethod
    def remove_edge(self, edge: GraphEdge[LT]) -> bool:
        """Remove an edge, returning False if it was not in the graph."""
        ...

    @abc.abstractmethod
    def contains_edge(self, edge: GraphEdge[LT]) -> bool:
        """Whether the given edge is in the graph."""
        ...

    @abc.abstractmethod
    def get_edges_of(self, node: GraphNode[LT]) -> set[GraphEdge[LT]]:
        """Get the edges incident to the given node."""
        ...

    @abc.abstractmethod
    def get_ingoing_edges_of(
        self,
        node: GraphNode[LT]
    ) -> set[GraphEdge[LT]]:
        """Get the edges directed to the given node."""
        ...

    def get_edges(self) -> set[GraphEdge[LT]]:
        """Get the set of edges of the graph."""
        return set(self.iter_edges())

    def size(self) -> int:
        """Get the total number of nodes and edges in the graph."""
        return self.node_count() + self.edge_count()

    def is_empty(self) -> bool:
        """Whether the graph has no nodes (and therefore no edges)."""
        return self.node_count() == 0

    def contains_node_with_label(self, label: LT) -> bool:
        """Whether a node with the given label is in the graph."""
        return self.get_node_of(label) is not None

    def add_node_with_label(self, label: LT) -> bool:
        """
        Add a new node with the given label to the graph.

        Returns False if a node with the label is already in the graph.
        """
        return self.add_node(GraphNode(label))

    def remove_node_with_label(self, label: LT) -> bool:
        """
        Remove the node with the given label from the graph.

        Returns False if no node has the label.
        """
        node: Optional[GraphNode[LT]] = self.get_node_of(label)
        if node is None:
            return False
        return self.remove_node(node)

    def remove_node_at_index(self, index: int) -> bool:
        """
        Remove the node at the given position from the graph.

        Raises
        ------
        `NodeIndexError` - If the position is out of range.
        """
        return self.remove_node(self.get_node_at_index(index))

    def get_edge(
        self,
        node_1: GraphNode[LT],
        node_2: GraphNode[LT]
    ) -> Optional[GraphEdge[LT]]:
        """
        Get the edge in the graph connecting the given nodes, None if there is
        no such edge.

        Raises
        ------
        `PreconditionError` - If either node is None.

        `NodeNotFoundError` - If either node is not in the graph.
        """
        if node_1 is None or node_2 is None:
            raise PreconditionError("The nodes must not be None.")
        return self.get_edge_at_node_indexes(
            self.get_node_index_of(node_1.label),
            self.get_node_index_of(node_2.label)
        )

    def add_edge_between(self, label_1: LT, label_2: LT) -> bool:
        """
        Add an unweighted edge between the nodes with the given labels.

        Raises
        ------
        `NodeNotFoundError` - If either label is not in the graph.
        """
        return self.add_weighted_edge(label_1, label_2, None)

    def add_weighted_edge(
        self,
        label_1: LT,
        label_2: LT,
        weight: SupportsFloat | None
    ) -> bool:
        """
        Add an edge with the given weight between the nodes with the given
        labels.

        Raises
        ------
        `NodeNotFoundError` - If either label is not in the graph.
        """
        node_1 = self.get_node_of(label_1)
        node_2 = self.get_node_of(label_2)
        for label, node in ((label_1, node_1), (label_2, node_2)):
            if node is None:
                raise NodeNotFoundError(
                    f"No node with label {label!r} is in the graph.")
        return self.add_edge(GraphEdge(node_1, node_2, weight))


class AdjacencyMatrixUndirectedGraph(Graph[LT]):
    """
    An undirected graph represented by an adjacency matrix.

    Node labels must not be None, and nodes with equal labels are the same
    node. Nodes are given positions from 0 to `node_count() - 1`, in the order
    of their insertion, such that the adjacency matrix always has dimensions
    `node_count() * node_count()`. When a node is removed, the positions of
    all later nodes shift down by one.

    The cell at row i and column j of the matrix is None if the nodes at
    positions i and j are not adjacent, otherwise it holds the edge between
    them. The same edge object is always held in the cell at row j and column
    i. The matrix is a numpy object array, stored in a larger square buffer
    whose capacity doubles when it is full.

    Multigraphs are not supported, there can be at most one edge between any
    two nodes. Loops (edges from a node to itself) are only accepted if the
    graph was created with `allow_loops=True`, and are stored on the diagonal.

    Example Usage
    -------------
    ```
    >>> graph = AdjacencyMatrixUndirectedGraph[str]()
    >>> for label in "abc":
    ...     graph.add_node_with_label(label)
    >>> graph.add_weighted_edge("a", "b", 1.0)
    True
    >>> graph.get_node_index_of("c")
    2

    ## Removing a node shifts the positions of the later nodes.
    >>> graph.remove_node_with_label("a")
    True
    >>> graph.get_node_index_of("c")
    1
    >>> graph.edge_count()
    0
    ```
    """

    __GRAPH_LOGGER = logging.getLogger("AdjacencyMatrixUndirectedGraph")

    __INITIAL_CAPACITY: int = 8

    __slots__ = {
        "__index_of": "Dictionary mapping nodes to their positions.",
        "__node_of": "Dictionary mapping labels to nodes.",
        "__node_at": "List mapping positions to nodes.",
        "__matrix": "Square numpy object array buffer of edges.",
        "__edge_count": "The number of edges in the graph.",
        "__allow_loops": "Whether the graph allows loops or not.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(
        self, *,
        allow_loops: bool = False,
        debug: bool = False
    ) -> None:
        """
        Create a new empty undirected graph.

        Parameters
        ----------
        `allow_loops: bool = False` - Whether the graph allows loops or not.
        If True, a node can be adjacent to itself.

        `debug: bool = False` - Whether to log debug messages.
        """
        self.__index_of: dict[GraphNode[LT], int] = {}
        self.__node_of: dict[LT, GraphNode[LT]] = {}
        self.__node_at: list[GraphNode[LT]] = []
        self.__matrix: np.ndarray = self.__new_buffer(0)
        self.__edge_count: int = 0
        self.__allow_loops: bool = allow_loops
        self.__debug: bool = debug

    @staticmethod
    def __new_buffer(capacity: int) -> np.ndarray:
        """Create a new empty square matrix buffer of the given capacity."""
        return np.full((capacity, capacity), None, dtype=object)

    @staticmethod
    def __occupied(cells: np.ndarray) -> np.ndarray:
        """Get a boolean mask of the cells that hold an edge."""
        return np.not_equal(cells, None).astype(bool, copy=False)

    def __str__(self) -> str:
        return (f"Undirected Graph: total nodes = {self.node_count()}, "
                f"total edges = {self.__edge_count}")

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"nodes={self.__node_at!r}, "
                f"edges={list(self.iter_edges())!r}, "
                f"allow_loops={self.__allow_loops})")

    @property
    def allow_loops(self) -> bool:
        """Whether the graph allows loops."""
        return self.__allow_loops

    def __check_and_get_index(self, node: GraphNode[LT]) -> int:
        """
        Get the position of a node.

        Raises `PreconditionError` if the node is None, and
        `NodeNotFoundError` if the node is not in the graph.
        """
        if node is None:
            raise PreconditionError("The node must not be None.")
        index: int | None = self.__index_of.get(node)
        if index is None:
            raise NodeNotFoundError(f"The node {node!r} is not in {self!s}.")
        return index

    def __check_edge(self, edge: GraphEdge[LT]) -> tuple[int, int]:
        """
        Get the positions of the nodes of an edge.

        Raises `PreconditionError` if the edge is None or directed, and
        `NodeNotFoundError` if either of its nodes is not in the graph.
        """
        if edge is None:
            raise PreconditionError("The edge must not be None.")
        index_1: int = self.__check_and_get_index(edge.node_1)
        index_2: int = self.__check_and_get_index(edge.node_2)
        if edge.is_directed():
            raise PreconditionError(
                "Directed edges are not supported by undirected graphs.")
        return index_1, index_2

    def node_count(self) -> int:
        return len(self.__node_at)

    def edge_count(self) -> int:
        return self.__edge_count

    def clear(self) -> None:
        self.__index_of.clear()
        self.__node_of.clear()
        self.__node_at.clear()
        self.__matrix = self.__new_buffer(0)
        self.__edge_count = 0

    def is_directed(self) -> bool:
        return False

    def get_nodes(self) -> KeysView[GraphNode[LT]]:
        """
        Get a view of the set of nodes of the graph.

        The view reflects later changes to the graph, and iterates over the
        nodes in position order.
        """
        return self.__index_of.keys()

    def add_node(self, node: GraphNode[LT]) -> bool:
        """
        Add a node to the graph, at the next free position.

        The adjacency matrix grows by one row and one column, with no edges.

        Returns
        -------
        `bool` - True if the node was added, False if a node with the same
        label is already in the graph.

        Raises
        ------
        `PreconditionError` - If the node is None.
        """
        if node is None:
            raise PreconditionError("The node must not be None.")
        if node in self.__index_of:
            return False

        index: int = len(self.__node_at)
        capacity: int = self.__matrix.shape[0]
        if index == capacity:
            new_capacity = max(self.__INITIAL_CAPACITY, capacity * 2)
            matrix = self.__new_buffer(new_capacity)
            matrix[:index, :index] = self.__matrix[:index, :index]
            self.__matrix = matrix
            if self.__debug:
                self.__GRAPH_LOGGER.debug(
                    "Grew adjacency matrix capacity from %d to %d.",
                    capacity, new_capacity
                )

        self.__index_of[node] = index
        self.__node_of[node.label] = node
        self.__node_at.append(node)
        return True

    def remove_node(self, node: GraphNode[LT]) -> bool:
        """
        Remove a node and all its incident edges from the graph.

        The row and column of the node are removed from the adjacency matrix,
        and the positions of all nodes after the removed node are decremented
        by one.

        Returns
        -------
        `bool` - True if the node was removed, False if it was not in the
        graph.

        Raises
        ------
        `PreconditionError` - If the node is None.
        """
        if node is None:
            raise PreconditionError("The node must not be None.")
        index: int | None = self.__index_of.get(node)
        if index is None:
            return False

        total: int = len(self.__node_at)
        matrix: np.ndarray = self.__matrix
        incident: int = int(np.count_nonzero(
            self.__occupied(matrix[index, :total])))
        self.__edge_count -= incident

        # Shift the rows and columns after the removed node up and left by
        # one, then clear the now unused last row and column.
        matrix[index:total - 1, :total] = matrix[index + 1:total, :total]
        matrix[:total - 1, index:total - 1] = matrix[:total - 1, index + 1:total]
        matrix[total - 1, :total] = None
        matrix[:total, total - 1] = None

        # Compact the positions of all later nodes.
        del self.__node_at[index]
        for later_node in self.__node_at[index:]:
            self.__index_of[later_node] -= 1
        del self.__index_of[node]
        del self.__node_of[node.label]

        if self.__debug:
            self.__GRAPH_LOGGER.debug(
                "Removed node %r at position %d with %d incident edges, "
                "shifted %d later nodes.",
                node, index, incident, total - index - 1
            )
        return True

    def contains_node(self, node: GraphNode[LT]) -> bool:
        """
        Whether the given node is in the graph.

        Raises
        ------
        `PreconditionError` - If the node is None.
        """
        if node is None:
            raise PreconditionError("The node must not be None.")
        return node in self.__index_of

    def get_node_of(self, label: LT) -> Optional[GraphNode[LT]]:
        """
        Get the node with the given label, or None if no node has the label.

        Raises
        ------
        `PreconditionError` - If the label is None.
        """
        if label is None:
            raise PreconditionError("The label must not be None.")
        return self.__node_of.get(label)

    def get_node_index_of(self, label: LT) -> int:
        """
        Get the position of the node with the given label in constant time.

        Raises
        ------
        `PreconditionError` - If the label is None.

        `NodeNotFoundError` - If no node has the label.
        """
        node: Optional[GraphNode[LT]] = self.get_node_of(label)
        if node is None:
            raise NodeNotFoundError(
                f"No node with label {label!r} is in {self!s}.")
        return self.__index_of[node]

    def get_node_at_index(self, index: int) -> GraphNode[LT]:
        """
        Get the node at the given position in constant time.

        Raises
        ------
        `NodeIndexError` - If the position is not in the range
        `[0, node_count())`.
        """
        if not 0 <= index < len(self.__node_at):
            raise NodeIndexError(
                f"The position {index} is out of range for {self!s}.")
        return self.__node_at[index]

    def get_edge_at_node_indexes(
        self,
        index_1: int,
        index_2: int
    ) -> Optional[GraphEdge[LT]]:
        """
        Get the edge between the nodes at the given positions, or None if
        they are not adjacent.

        Raises
        ------
        `NodeIndexError` - If either position is out of range.
        """
        total: int = len(self.__node_at)
        for index in (index_1, index_2):
            if not 0 <= index < total:
                raise NodeIndexError(
                    f"The position {index} is out of range for {self!s}.")
        return self.__matrix[index_1, index_2]

    def get_adjacent_nodes_of(
        self,
        node: GraphNode[LT]
    ) -> set[GraphNode[LT]]:
        """
        Get the set of nodes adjacent to the given node.

        Raises
        ------
        `PreconditionError` - If the node is None.

        `NodeNotFoundError` - If the node is not in the graph.
        """
        index: int = self.__check_and_get_index(node)
        row: np.ndarray = self.__matrix[index, :len(self.__node_at)]
        node_at = self.__node_at
        return {node_at[j] for j in np.flatnonzero(self.__occupied(row))}

    def get_predecessor_nodes_of(
        self,
        node: GraphNode[LT]
    ) -> set[GraphNode[LT]]:
        """
        Not supported by undirected graphs.

        Raises
        ------
        `UnsupportedGraphOperationError` - Always.
        """
        raise UnsupportedGraphOperationError(
            "Predecessor nodes are not defined for an undirected graph.")

    def iter_edges(self) -> Iterator[GraphEdge[LT]]:
        """
        Iterate over the edges of the graph.

        Only the upper triangle (including the diagonal) of the adjacency
        matrix is scanned, so each edge is yielded once. Edges are yielded in
        row-major order of the positions of their nodes.
        """
        total: int = len(self.__node_at)
        cells: np.ndarray = self.__matrix[:total, :total]
        rows, columns = np.nonzero(np.triu(self.__occupied(cells)))
        for row, column in zip(rows, columns):
            yield cells[row, column]

    def add_edge(self, edge: GraphEdge[LT]) -> bool:
        """
        Add an undirected edge to the graph.

        Returns
        -------
        `bool` - True if the edge was added, False if the nodes of the edge
        are already adjacent (multigraphs are not supported).

        Raises
        ------
        `PreconditionError` - If the edge is None, is directed, or is a loop
        and the graph does not allow loops.

        `NodeNotFoundError` - If either node of the edge is not in the graph.
        """
        index_1, index_2 = self.__check_edge(edge)
        if index_1 == index_2 and not self.__allow_loops:
            raise PreconditionError(
                f"The edge {edge!r} is a loop, which {self!s} does not allow.")

        matrix: np.ndarray = self.__matrix
        if matrix[index_1, index_2] is not None:
            return False
        matrix[index_1, index_2] = edge
        matrix[index_2, index_1] = edge
        self.__edge_count += 1
        return True

    def remove_edge(self, edge: GraphEdge[LT]) -> bool:
        """
        Remove an undirected edge from the graph.

        Returns
        -------
        `bool` - True if the edge was removed, False if it was not in the
        graph.

        Raises
        ------
        `PreconditionError` - If the edge is None or is directed.

        `NodeNotFoundError` - If either node of the edge is not in the graph.
        """
        index_1, index_2 = self.__check_edge(edge)
        matrix: np.ndarray = self.__matrix
        if matrix[index_1, index_2] is None:
            return False
        matrix[index_1, index_2] = None
        matrix[index_2, index_1] = None
        self.__edge_count -= 1
        return True

    def contains_edge(self, edge: GraphEdge[LT]) -> bool:
        """
        Whether the given undirected edge is in the graph, regardless of the
        order of its nodes.

        Raises
        ------
        `PreconditionError` - If the edge is None or is directed.

        `NodeNotFoundError` - If either node of the edge is not in the graph.
        """
        index_1, index_2 = self.__check_edge(edge)
        return self.__matrix[index_1, index_2] is not None

    def get_edges_of(self, node: GraphNode[LT]) -> set[GraphEdge[LT]]:
        """
        Get the set of edges incident to the given node.

        Raises
        ------
        `PreconditionError` - If the node is None.

        `NodeNotFoundError` - If the node is not in the graph.
        """
        index: int = self.__check_and_get_index(node)
        row: np.ndarray = self.__matrix[index, :len(self.__node_at)]
        return set(row[self.__occupied(row)])

    def get_ingoing_edges_of(
        self,
        node: GraphNode[LT]
    ) -> set[GraphEdge[LT]]:
        """
        Not supported by undirected graphs.

        Raises
        ------
        `UnsupportedGraphOperationError` - Always.
        """
        raise UnsupportedGraphOperationError(
            "Ingoing edges are not defined for an undirected graph.")
