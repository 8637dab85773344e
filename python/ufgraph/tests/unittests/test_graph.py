import unittest

from ufgraph.datastructures.graph import (AdjacencyMatrixUndirectedGraph,
                                          GraphEdge, GraphNode)
from ufgraph.errors import (NodeIndexError, NodeNotFoundError,
                            PreconditionError,
                            UnsupportedGraphOperationError)


def make_graph(labels, edges=(), **kwargs):
    graph: AdjacencyMatrixUndirectedGraph = AdjacencyMatrixUndirectedGraph(
        **kwargs)
    for label in labels:
        graph.add_node_with_label(label)
    for edge in edges:
        graph.add_weighted_edge(*edge)
    return graph


class TestGraphElements(unittest.TestCase):
    def test_node_equality(self):
        self.assertEqual(GraphNode("a"), GraphNode("a"))
        self.assertNotEqual(GraphNode("a"), GraphNode("b"))
        self.assertEqual(hash(GraphNode("a")), hash(GraphNode("a")))

    def test_node_none_label(self):
        with self.assertRaises(PreconditionError):
            GraphNode(None)

    def test_undirected_edge_equality(self):
        a, b = GraphNode("a"), GraphNode("b")
        self.assertEqual(GraphEdge(a, b), GraphEdge(b, a))
        self.assertEqual(hash(GraphEdge(a, b)), hash(GraphEdge(b, a)))
        self.assertEqual(GraphEdge(a, b, 1.0), GraphEdge(a, b, 2.0))

    def test_directed_edge_equality(self):
        a, b = GraphNode("a"), GraphNode("b")
        self.assertEqual(
            GraphEdge(a, b, directed=True), GraphEdge(a, b, directed=True))
        self.assertNotEqual(
            GraphEdge(a, b, directed=True), GraphEdge(b, a, directed=True))
        self.assertNotEqual(GraphEdge(a, b, directed=True), GraphEdge(a, b))

    def test_edge_weight(self):
        a, b = GraphNode("a"), GraphNode("b")
        edge = GraphEdge(a, b)
        self.assertFalse(edge.has_weight())
        edge.weight = 3
        self.assertTrue(edge.has_weight())
        self.assertEqual(edge.weight, 3.0)
        with self.assertRaises(PreconditionError):
            GraphEdge(a, b, float("nan"))
        with self.assertRaises(PreconditionError):
            GraphEdge(a, None)


class TestGraph(unittest.TestCase):
    def test_empty_graph(self):
        graph = AdjacencyMatrixUndirectedGraph()
        self.assertEqual(graph.node_count(), 0)
        self.assertEqual(graph.edge_count(), 0)
        self.assertTrue(graph.is_empty())
        self.assertFalse(graph.is_directed())
        self.assertEqual(graph.get_edges(), set())

    def test_add_node(self):
        graph = AdjacencyMatrixUndirectedGraph()
        self.assertTrue(graph.add_node(GraphNode("a")))
        self.assertFalse(graph.add_node(GraphNode("a")))
        self.assertEqual(graph.node_count(), 1)
        self.assertIn(GraphNode("a"), graph)
        self.assertTrue(graph.contains_node_with_label("a"))
        with self.assertRaises(PreconditionError):
            graph.add_node(None)

    def test_node_positions(self):
        graph = make_graph("abcd")
        for index, label in enumerate("abcd"):
            self.assertEqual(graph.get_node_index_of(label), index)
            self.assertEqual(graph.get_node_at_index(index), GraphNode(label))
        self.assertEqual(list(graph), [GraphNode(label) for label in "abcd"])

    def test_node_lookup_errors(self):
        graph = make_graph("ab")
        with self.assertRaises(NodeNotFoundError):
            graph.get_node_index_of("z")
        with self.assertRaises(PreconditionError):
            graph.get_node_index_of(None)
        with self.assertRaises(NodeIndexError):
            graph.get_node_at_index(2)
        with self.assertRaises(IndexError):
            graph.get_node_at_index(-1)
        self.assertIsNone(graph.get_node_of("z"))

    def test_many_nodes(self):
        # Enough nodes to grow the matrix buffer several times.
        graph = make_graph(range(50))
        for i in range(49):
            graph.add_edge_between(i, i + 1)
        self.assertEqual(graph.node_count(), 50)
        self.assertEqual(graph.edge_count(), 49)
        self.assertEqual(
            graph.get_adjacent_nodes_of(GraphNode(25)),
            {GraphNode(24), GraphNode(26)}
        )

    def test_add_edge(self):
        graph = make_graph("abc")
        a, b = GraphNode("a"), GraphNode("b")
        edge = GraphEdge(a, b, 2.0)
        self.assertTrue(graph.add_edge(edge))
        self.assertFalse(graph.add_edge(GraphEdge(b, a, 5.0)))
        self.assertEqual(graph.edge_count(), 1)
        self.assertIs(graph.get_edge(a, b), edge)
        self.assertIs(graph.get_edge(b, a), edge)
        self.assertEqual(graph.get_edge(a, b).weight, 2.0)
        self.assertIsNone(graph.get_edge(a, GraphNode("c")))
        self.assertEqual(graph.size(), 4)

    def test_add_edge_errors(self):
        graph = make_graph("ab")
        a, b, z = GraphNode("a"), GraphNode("b"), GraphNode("z")
        with self.assertRaises(NodeNotFoundError):
            graph.add_edge(GraphEdge(a, z))
        with self.assertRaises(PreconditionError):
            graph.add_edge(GraphEdge(a, b, directed=True))
        with self.assertRaises(PreconditionError):
            graph.add_edge(None)
        with self.assertRaises(PreconditionError):
            graph.add_edge(GraphEdge(a, a))
        with self.assertRaises(NodeNotFoundError):
            graph.add_edge_between("a", "z")
        self.assertEqual(graph.edge_count(), 0)

    def test_loops(self):
        graph = make_graph("ab", allow_loops=True)
        a = GraphNode("a")
        self.assertTrue(graph.allow_loops)
        self.assertTrue(graph.add_edge(GraphEdge(a, a, 1.0)))
        self.assertEqual(graph.edge_count(), 1)
        self.assertEqual(graph.get_adjacent_nodes_of(a), {a})
        self.assertEqual(graph.get_edges(), {GraphEdge(a, a)})
        self.assertTrue(graph.remove_node(a))
        self.assertEqual(graph.edge_count(), 0)

    def test_edge_symmetry(self):
        graph = make_graph("abc", [("a", "b", 1.0)])
        a, b, c = GraphNode("a"), GraphNode("b"), GraphNode("c")
        self.assertTrue(graph.contains_edge(GraphEdge(a, b)))
        self.assertTrue(graph.contains_edge(GraphEdge(b, a)))
        self.assertFalse(graph.contains_edge(GraphEdge(a, c)))
        self.assertEqual(graph.get_edges_of(a), {GraphEdge(b, a)})
        self.assertEqual(graph.get_edges_of(b), {GraphEdge(a, b)})
        self.assertEqual(graph.get_edges_of(c), set())

    def test_get_edges(self):
        graph = make_graph(
            "abcd", [("a", "b", 1.0), ("b", "c", 2.0), ("a", "d", 3.0)])
        a, b, c, d = (GraphNode(label) for label in "abcd")
        self.assertEqual(
            graph.get_edges(),
            {GraphEdge(a, b), GraphEdge(b, c), GraphEdge(a, d)}
        )
        self.assertEqual(len(list(graph.iter_edges())), 3)
        self.assertEqual(
            [edge.weight for edge in graph.iter_edges()], [1.0, 3.0, 2.0])

    def test_adjacent_nodes(self):
        graph = make_graph("abcd", [("a", "b", 1.0), ("a", "c", 1.0)])
        a, b, c, d = (GraphNode(label) for label in "abcd")
        self.assertEqual(graph.get_adjacent_nodes_of(a), {b, c})
        self.assertEqual(graph.get_adjacent_nodes_of(b), {a})
        self.assertEqual(graph.get_adjacent_nodes_of(d), set())
        with self.assertRaises(NodeNotFoundError):
            graph.get_adjacent_nodes_of(GraphNode("z"))
        with self.assertRaises(PreconditionError):
            graph.get_adjacent_nodes_of(None)

    def test_remove_edge(self):
        graph = make_graph("abc", [("a", "b", 1.0)])
        a, b, c = GraphNode("a"), GraphNode("b"), GraphNode("c")
        self.assertTrue(graph.remove_edge(GraphEdge(b, a)))
        self.assertFalse(graph.contains_edge(GraphEdge(a, b)))
        self.assertFalse(graph.remove_edge(GraphEdge(a, b)))
        self.assertFalse(graph.remove_edge(GraphEdge(a, c)))
        self.assertEqual(graph.edge_count(), 0)

    def test_remove_node(self):
        graph = make_graph(
            "abcd",
            [("a", "b", 1.0), ("b", "c", 2.0), ("c", "d", 3.0),
             ("b", "d", 4.0)]
        )
        b = GraphNode("b")
        self.assertTrue(graph.remove_node(b))
        self.assertFalse(graph.remove_node(b))
        self.assertEqual(graph.node_count(), 3)
        self.assertEqual(graph.edge_count(), 1)
        self.assertNotIn(b, graph)
        self.assertIsNone(graph.get_node_of("b"))
        with self.assertRaises(PreconditionError):
            graph.remove_node(None)

    def test_remove_node_compacts_positions(self):
        graph = make_graph(
            "abcde", [("a", "e", 1.0), ("c", "d", 2.0), ("b", "e", 3.0)])
        self.assertTrue(graph.remove_node_with_label("b"))
        for index, label in enumerate("acde"):
            self.assertEqual(graph.get_node_index_of(label), index)
            self.assertEqual(graph.get_node_at_index(index).label, label)
        with self.assertRaises(NodeIndexError):
            graph.get_node_at_index(4)

        # The surviving edges have moved with their nodes.
        a, c, d, e = (GraphNode(label) for label in "acde")
        self.assertEqual(graph.get_edge_at_node_indexes(0, 3).weight, 1.0)
        self.assertEqual(graph.get_edge_at_node_indexes(3, 0).weight, 1.0)
        self.assertEqual(graph.get_edge_at_node_indexes(1, 2).weight, 2.0)
        self.assertIsNone(graph.get_edge_at_node_indexes(0, 1))
        self.assertEqual(graph.get_adjacent_nodes_of(e), {a})
        self.assertEqual(graph.get_adjacent_nodes_of(c), {d})
        self.assertEqual(graph.edge_count(), 2)
        self.assertEqual(list(graph.get_nodes()), [a, c, d, e])

        # New nodes take the next free position.
        graph.add_node_with_label("f")
        self.assertEqual(graph.get_node_index_of("f"), 4)
        self.assertEqual(graph.get_adjacent_nodes_of(GraphNode("f")), set())

    def test_remove_node_at_index(self):
        graph = make_graph("abc", [("a", "c", 1.0)])
        self.assertTrue(graph.remove_node_at_index(0))
        self.assertEqual(graph.get_node_index_of("c"), 1)
        self.assertEqual(graph.edge_count(), 0)
        with self.assertRaises(NodeIndexError):
            graph.remove_node_at_index(5)
        self.assertFalse(graph.remove_node_with_label("a"))

    def test_clear(self):
        graph = make_graph("abc", [("a", "b", 1.0)])
        graph.clear()
        self.assertTrue(graph.is_empty())
        self.assertEqual(graph.edge_count(), 0)
        self.assertEqual(graph.get_edges(), set())
        graph.add_node_with_label("a")
        self.assertEqual(graph.get_node_index_of("a"), 0)

    def test_directed_only_operations(self):
        graph = make_graph("ab")
        a = GraphNode("a")
        with self.assertRaises(UnsupportedGraphOperationError):
            graph.get_predecessor_nodes_of(a)
        with self.assertRaises(UnsupportedGraphOperationError):
            graph.get_ingoing_edges_of(a)
        with self.assertRaises(NotImplementedError):
            graph.get_ingoing_edges_of(a)

    def test_str(self):
        graph = make_graph("abc", [("a", "b", 1.0)])
        self.assertEqual(
            str(graph), "Undirected Graph: total nodes = 3, total edges = 1")


if __name__ == "__main__":
    unittest.main()
