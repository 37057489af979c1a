import unittest

from bearmaps import Direction, DirectionBuilder, GraphDB, NavigationDirection, Router


class TestDirectionClassification(unittest.TestCase):
    def test_thresholds(self):
        cases = [
            (0.0, Direction.STRAIGHT),
            (15.0, Direction.STRAIGHT),
            (-15.0, Direction.STRAIGHT),
            (15.0001, Direction.SLIGHT_RIGHT),
            (-15.0001, Direction.SLIGHT_LEFT),
            (30.0, Direction.SLIGHT_RIGHT),
            (-30.0, Direction.SLIGHT_LEFT),
            (30.0001, Direction.LEFT),
            (-30.0001, Direction.RIGHT),
            (100.0, Direction.LEFT),
            (-100.0, Direction.RIGHT),
            (100.0001, Direction.SHARP_RIGHT),
            (-100.0001, Direction.SHARP_LEFT),
            (180.0, Direction.SHARP_RIGHT),
            (-179.0, Direction.SHARP_LEFT),
        ]
        for relative, expected in cases:
            with self.subTest(relative=relative):
                self.assertEqual(DirectionBuilder.classify(relative), expected)


class TestDirectionBuilder(unittest.TestCase):
    def setUp(self):
        #   5
        #   |  Oxford St (north)
        #   3 ---- 4      unnamed spur east
        #   |
        # 0-1-2           Bancroft Way (east), then Oxford St turns north at 2
        self.graph = GraphDB()
        coords = {
            0: (0.0, 0.0), 1: (0.01, 0.0), 2: (0.02, 0.0),
            3: (0.02, 0.01), 4: (0.03, 0.01), 5: (0.02, 0.02),
        }
        for node_id, (lon, lat) in coords.items():
            self.graph.add_node(node_id, lon, lat)
        self.graph.add_way(100, [0, 1, 2], name="Bancroft Way")
        self.graph.add_way(200, [2, 3, 5], name="Oxford St")
        self.graph.add_way(300, [3, 4])
        self.graph.clean()

    def test_short_route_gives_no_directions(self):
        self.assertEqual(DirectionBuilder.route_directions(self.graph, []), [])
        self.assertEqual(DirectionBuilder.route_directions(self.graph, [0]), [])

    def test_single_way_route(self):
        route = [0, 1, 2]
        directions = DirectionBuilder.route_directions(self.graph, route)
        self.assertEqual(len(directions), 1)
        self.assertEqual(directions[0].direction, Direction.START)
        self.assertEqual(directions[0].way, "Bancroft Way")
        self.assertAlmostEqual(directions[0].distance, self.graph.route_distance(route))

    def test_way_change_starts_new_direction(self):
        route = [0, 1, 2, 3, 5]
        directions = DirectionBuilder.route_directions(self.graph, route)
        self.assertEqual([d.way for d in directions], ["Bancroft Way", "Oxford St"])
        self.assertEqual(directions[0].direction, Direction.START)
        # heading 90 then 0: relative bearing -90
        self.assertEqual(directions[1].direction, Direction.RIGHT)
        self.assertAlmostEqual(directions[0].distance, self.graph.route_distance([0, 1, 2]))
        self.assertAlmostEqual(directions[1].distance, self.graph.route_distance([2, 3, 5]))

    def test_unnamed_way_is_unknown_road(self):
        route = [2, 3, 4]
        directions = DirectionBuilder.route_directions(self.graph, route)
        self.assertEqual([d.way for d in directions], ["Oxford St", "unknown road"])
        # heading 0 then 90: relative bearing 90
        self.assertEqual(directions[1].direction, Direction.LEFT)

    def test_edge_without_shared_way_is_unknown_road(self):
        graph = GraphDB()
        graph.add_node(0, 0.0, 0.0)
        graph.add_node(1, 0.01, 0.0)
        graph.add_way(1, [0, 1], name="Piedmont Ave")
        graph.ways.clear()
        for node in graph.nodes.values():
            node.ways.clear()
        graph.clean()
        directions = DirectionBuilder.route_directions(graph, [0, 1])
        self.assertEqual(directions, [NavigationDirection(Direction.START, "unknown road", graph.distance(0, 1))])

    def test_distances_sum_to_route_distance(self):
        route = [0, 1, 2, 3, 4]
        directions = DirectionBuilder.route_directions(self.graph, route)
        self.assertEqual(len(directions), 3)
        self.assertAlmostEqual(sum(d.distance for d in directions),
                               self.graph.route_distance(route), places=12)

    def test_turn_across_north(self):
        # heading 350 then 10 is a 20 degree turn, not 340
        graph = GraphDB()
        graph.add_node(0, 0.0, 0.0)
        graph.add_node(1, -0.001736, 0.009848)
        graph.add_node(2, 0.0, 0.019696)
        graph.add_way(1, [0, 1], name="Spruce St")
        graph.add_way(2, [1, 2], name="Euclid Ave")
        graph.clean()
        self.assertAlmostEqual(graph.bearing(0, 1), 350.0, places=0)
        self.assertAlmostEqual(graph.bearing(1, 2), 10.0, places=0)

        directions = DirectionBuilder.route_directions(graph, [0, 1, 2])
        self.assertEqual([d.direction for d in directions], [Direction.START, Direction.SLIGHT_RIGHT])
        self.assertEqual(str(directions[1]).split(" and ")[0], "Slight right on Euclid Ave")

    def test_directions_for_computed_route(self):
        route = Router.shortest_path(self.graph, 0.0, 0.0, 0.02, 0.021)
        self.assertEqual(route, [0, 1, 2, 3, 5])
        directions = DirectionBuilder.route_directions(self.graph, route)
        self.assertEqual(
            [str(d).split(" and ")[0] for d in directions],
            ["Start on Bancroft Way", "Turn right on Oxford St"],
        )


if __name__ == '__main__':
    unittest.main()
