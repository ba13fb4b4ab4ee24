import unittest
import math
from trajsimp.core.point import Point
from trajsimp.modules.squish_e import BufferState, PriorityBuffer, SquishECompressor


def is_subsequence(result, points):
    it = iter(points)
    return all(any(p == q for q in it) for p in result)


def zigzag(n):
    return [Point(lat=float(i), lon=float((i * 7) % 5) * 0.3, time=float(i)) for i in range(n)]


class TestPriorityBuffer(unittest.TestCase):
    def test_single_eviction_removes_lowest_sed(self):
        # p1 lies on the p0 -> p2 chord, p2 does not lie on p1 -> p3
        points = [Point(0, 0, 0), Point(1, 1, 1), Point(2, 2, 2), Point(10, 10, 3)]
        buf = PriorityBuffer(ratio=100.0, initial_capacity=4)
        for p in points:
            buf.insert(p)

        self.assertEqual(buf.points(), [points[0], points[2], points[3]])
        self.assertEqual(buf.evicted, 1)
        # p2 re-estimated against its new neighbors p0 and p3
        self.assertAlmostEqual(buf.entries[1].cost, math.sqrt(2) * 14.0 / 3.0)

    def test_eviction_propagates_compensation(self):
        points = [Point(0, 0, 0), Point(1, 1, 1), Point(2, 0, 2), Point(3, 1, 3), Point(4, 0, 4)]
        buf = PriorityBuffer(ratio=1000.0, initial_capacity=100)
        for p in points:
            buf.insert(p)
        self.assertEqual([round(e.cost, 9) for e in buf.entries[1:-1]], [1.0, 1.0, 1.0])

        buf.evict(2)

        self.assertEqual(buf.points(), [points[0], points[1], points[3], points[4]])
        self.assertAlmostEqual(buf.entries[1].compensation, 1.0)
        self.assertAlmostEqual(buf.entries[2].compensation, 1.0)
        self.assertAlmostEqual(buf.entries[1].cost, 1.0 + 2.0 / 3.0)
        self.assertAlmostEqual(buf.entries[2].cost, 1.0 + 2.0 / 3.0)
        self.assertEqual(buf.entries[0].compensation, 0.0)

    def test_tail_keeps_absorbed_compensation(self):
        points = [Point(0, 0, 0), Point(1, 2, 1), Point(2, 0, 2), Point(3, 1, 3), Point(4, 0, 4)]
        buf = PriorityBuffer(ratio=1000.0, initial_capacity=5)
        for p in points:
            buf.insert(p)

        # p3 (cost 1) goes first; p2 is charged its own SED plus that cost
        self.assertEqual(buf.points(), [points[0], points[1], points[2], points[4]])
        self.assertAlmostEqual(buf.entries[2].cost, 1.0 + 4.0 / 3.0)
        self.assertAlmostEqual(buf.entries[-1].compensation, 1.0)
        self.assertTrue(buf.entries[-1].anchor)

    def test_anchors_are_never_evicted(self):
        buf = PriorityBuffer(ratio=2.0)
        for p in zigzag(3):
            buf.insert(p)
        with self.assertRaises(ValueError):
            buf.evict(0)
        with self.assertRaises(ValueError):
            buf.evict(len(buf) - 1)

    def test_two_points_do_nothing(self):
        buf = PriorityBuffer(ratio=2.0, initial_capacity=2)
        buf.insert(Point(0, 0, 0))
        buf.insert(Point(5, 5, 1))
        self.assertEqual(len(buf), 2)
        self.assertIsNone(buf.find_min())
        self.assertTrue(all(math.isinf(e.cost) for e in buf.entries))

    def test_ties_go_to_lowest_index(self):
        buf = PriorityBuffer(ratio=1000.0, initial_capacity=100)
        for i in range(6):
            buf.insert(Point(float(i), float(i), float(i)))
        self.assertEqual(buf.find_min(), 1)

    def test_capacity_schedule(self):
        buf = PriorityBuffer(ratio=2.0, initial_capacity=4)
        capacities = []
        for p in zigzag(10):
            buf.insert(p)
            capacities.append(buf.capacity)
        self.assertEqual(capacities, sorted(capacities))
        # grows once 8 / 2 >= 4
        self.assertEqual(buf.capacity, 5)

    def test_size_bound(self):
        buf = PriorityBuffer(ratio=3.0)
        for p in zigzag(200):
            buf.insert(p)
            self.assertLessEqual(len(buf), buf.capacity)

    def test_capacity_two_keeps_only_anchors(self):
        buf = PriorityBuffer(ratio=1000.0, initial_capacity=2)
        points = zigzag(6)
        for p in points:
            buf.insert(p)
            self.assertLessEqual(len(buf), 2)
        self.assertEqual(buf.points(), [points[0], points[-1]])

    def test_compensation_never_decreases(self):
        buf = PriorityBuffer(ratio=2.5)
        seen = {}
        for p in zigzag(120):
            buf.insert(p)
            for e in buf.entries:
                self.assertGreaterEqual(e.compensation, seen.get(e.point.time, 0.0))
                seen[e.point.time] = e.compensation
        buf.converge(0.5)
        for e in buf.entries:
            self.assertGreaterEqual(e.compensation, seen[e.point.time])

    def test_converge_states(self):
        buf = PriorityBuffer(ratio=2.0)
        self.assertEqual(buf.state, BufferState.GROWING)
        for p in zigzag(20):
            buf.insert(p)
        buf.converge(math.inf)
        self.assertEqual(buf.state, BufferState.DONE)
        self.assertEqual(len(buf), 2)
        with self.assertRaises(ValueError):
            buf.insert(Point(100, 100, 100))

    def test_converge_respects_error_bound(self):
        buf = PriorityBuffer(ratio=1000.0, initial_capacity=100)
        for p in zigzag(30):
            buf.insert(p)
        buf.converge(0.4)
        self.assertGreater(buf.evicted, 0)
        for entry in buf.entries[1:-1]:
            self.assertGreater(entry.cost, 0.4)

    def test_invalid_parameters(self):
        with self.assertRaises(ValueError):
            PriorityBuffer(ratio=0.0)
        with self.assertRaises(ValueError):
            PriorityBuffer(ratio=-1.0)
        with self.assertRaises(ValueError):
            PriorityBuffer(ratio=2.0, initial_capacity=1)


class TestSquishECompressor(unittest.TestCase):
    def setUp(self):
        self.compressor = SquishECompressor(ratio=2.0, sed_error=0.0)

    def test_two_points_unchanged(self):
        points = [Point(0, 0, 0), Point(3, 4, 10)]
        for ratio in (0.5, 2.0, 50.0):
            for bound in (0.0, math.inf):
                self.assertEqual(SquishECompressor(ratio, bound).compress(points), points)

    def test_infinite_error_bound_keeps_anchors(self):
        points = zigzag(50)
        result = SquishECompressor(ratio=2.0, sed_error=math.inf).compress(points)
        self.assertEqual(result, [points[0], points[-1]])

    def test_subsequence_and_anchors(self):
        points = zigzag(100)
        result = self.compressor.compress(points)
        self.assertTrue(is_subsequence(result, points))
        self.assertEqual(result[0], points[0])
        self.assertEqual(result[-1], points[-1])
        self.assertLessEqual(len(result), 50)

    def test_straight_line_collapses(self):
        # Every interior point costs (almost) nothing, so convergence removes them all
        points = [Point(float(i), float(i), float(i)) for i in range(20)]
        result = self.compressor.compress(points, sed_error=1e-9)
        self.assertEqual(result, [points[0], points[-1]])

    def test_streaming_matches_batch(self):
        points = zigzag(60)
        for p in points:
            self.compressor.process_point(p)
        streamed = self.compressor.flush()
        self.assertEqual(streamed, SquishECompressor(ratio=2.0, sed_error=0.0).compress(points))

    def test_compress_overrides(self):
        points = zigzag(40)
        result = self.compressor.compress(points, sed_error=math.inf)
        self.assertEqual(len(result), 2)
        self.assertEqual(self.compressor.sed_error, 0.0)

    def test_rejects_short_input(self):
        with self.assertRaises(ValueError):
            self.compressor.compress([Point(0, 0, 0)])
        with self.assertRaises(ValueError):
            self.compressor.compress([])
        with self.assertRaises(ValueError):
            self.compressor.flush()

    def test_failed_flush_resets_stream(self):
        self.compressor.process_point(Point(9, 9, 0))
        with self.assertRaises(ValueError):
            self.compressor.flush()

        points = [Point(0, 0, 1), Point(1, 1, 2)]
        for p in points:
            self.compressor.process_point(p)
        self.assertEqual(self.compressor.flush(), points)

    def test_rejects_bad_parameters(self):
        with self.assertRaises(ValueError):
            SquishECompressor(ratio=0.0)
        with self.assertRaises(ValueError):
            SquishECompressor(ratio=2.0, sed_error=-1.0)
        with self.assertRaises(ValueError):
            SquishECompressor(ratio=2.0, sed_error=float('nan'))

if __name__ == '__main__':
    unittest.main()
