import heapq
import random
import unittest

from bearmaps import GraphDB, GraphError, Router


def build_graph(coords, ways):
    graph = GraphDB()
    for node_id, (lon, lat) in coords.items():
        graph.add_node(node_id, lon, lat)
    for way_id, node_ids in ways.items():
        graph.add_way(way_id, node_ids, name=f"Way {way_id}")
    graph.clean()
    return graph


def dijkstra_distance(graph, source, target):
    """Exhaustive baseline: shortest distance or None if unreachable."""
    dist = {source: 0.0}
    done = set()
    pq = [(0.0, source)]
    while pq:
        d, v = heapq.heappop(pq)
        if v in done:
            continue
        done.add(v)
        for w in graph.adjacent(v):
            nd = d + graph.distance(v, w)
            if nd < dist.get(w, float("inf")):
                dist[w] = nd
                heapq.heappush(pq, (nd, w))
    return dist.get(target)


class TestRouter(unittest.TestCase):
    def setUp(self):
        # 0 - 1 - 2 - 3 along the equator, equal spacing
        self.linear = build_graph(
            {0: (0.0, 0.0), 1: (0.01, 0.0), 2: (0.02, 0.0), 3: (0.03, 0.0)},
            {10: [0, 1, 2, 3]},
        )

    def test_linear_graph(self):
        path = Router.shortest_path(self.linear, -0.001, 0.0005, 0.031, -0.0005)
        self.assertEqual(path, [0, 1, 2, 3])

    def test_linear_graph_reversed(self):
        path = Router.shortest_path(self.linear, 0.031, 0.0, -0.001, 0.0)
        self.assertEqual(path, [3, 2, 1, 0])

    def test_start_and_destination_snap_to_same_vertex(self):
        path = Router.shortest_path(self.linear, 0.0101, 0.0, 0.0099, 0.0)
        self.assertEqual(path, [1])

    def test_unreachable_destination(self):
        graph = build_graph(
            {0: (0.0, 0.0), 1: (0.01, 0.0), 2: (0.05, 0.0), 3: (0.06, 0.0)},
            {1: [0, 1], 2: [2, 3]},
        )
        self.assertIsNone(Router.shortest_path(graph, 0.0, 0.0, 0.06, 0.0))
        self.assertIsNone(Router.shortest_path_between(graph, 0, 3))

    def test_empty_graph(self):
        graph = GraphDB()
        graph.clean()
        self.assertIsNone(Router.shortest_path(graph, 0.0, 0.0, 1.0, 1.0))

    def test_unknown_vertex_is_fatal(self):
        with self.assertRaises(GraphError):
            Router.shortest_path_between(self.linear, 0, 42)

    def test_prefers_shorter_of_two_paths(self):
        # 0 -> 3 either directly along the bottom (via 1) or over a detour (via 2)
        graph = build_graph(
            {0: (0.0, 0.0), 1: (0.01, 0.0), 2: (0.01, 0.02), 3: (0.02, 0.0)},
            {1: [0, 2, 3], 2: [0, 1], 3: [1, 3]},
        )
        self.assertEqual(Router.shortest_path_between(graph, 0, 3), [0, 1, 3])

    def test_takes_detour_around_missing_link(self):
        # grid without the direct 0-3 edge
        coords = {
            0: (0.0, 0.0), 1: (0.01, 0.0), 2: (0.02, 0.0),
            3: (0.0, 0.01), 4: (0.01, 0.01), 5: (0.02, 0.01),
        }
        ways = {1: [0, 1, 2], 2: [3, 4, 5], 3: [2, 5]}
        graph = build_graph(coords, ways)
        self.assertEqual(Router.shortest_path_between(graph, 0, 3), [0, 1, 2, 5, 4, 3])

    def test_consecutive_vertices_are_adjacent(self):
        graph = self._random_graph(random.Random(3), 40, 80)
        path = Router.shortest_path(graph, 0.0, 0.0, 0.1, 0.1)
        self.assertIsNotNone(path)
        for v, w in zip(path, path[1:]):
            self.assertIn(w, graph.adjacent(v))

    def test_matches_dijkstra_on_random_graphs(self):
        rng = random.Random(11)
        for _ in range(25):
            graph = self._random_graph(rng, 30, 45, chain=rng.random() < 0.5)
            vertices = sorted(graph.vertices())
            source, target = rng.choice(vertices), rng.choice(vertices)
            expected = dijkstra_distance(graph, source, target)
            path = Router.shortest_path_between(graph, source, target)
            if expected is None:
                self.assertIsNone(path)
                continue
            self.assertIsNotNone(path)
            self.assertEqual(path[0], source)
            self.assertEqual(path[-1], target)
            self.assertAlmostEqual(graph.route_distance(path), expected, places=9)

    @staticmethod
    def _random_graph(rng, num_nodes, num_edges, chain=True):
        coords = {i: (rng.uniform(0, 0.1), rng.uniform(0, 0.1)) for i in range(num_nodes)}
        # a spanning chain keeps the corner query meaningful, extra edges add choices
        ways = {i: [i, i + 1] for i in range(num_nodes - 1)} if chain else {}
        for way_id in range(num_nodes, num_nodes + num_edges):
            a, b = rng.sample(range(num_nodes), 2)
            ways[way_id] = [a, b]
        return build_graph(coords, ways)


if __name__ == '__main__':
    unittest.main()
