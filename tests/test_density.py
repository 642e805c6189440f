import unittest

from fleetprob.domain.density import (
    base_probability_map,
    coverage_counts,
    normalize_map,
    unexplained_hits,
)


class CoverageTests(unittest.TestCase):
    def test_open_board_counts(self):
        coverage = coverage_counts(3, 3, [], [], [2])

        self.assertEqual(coverage.total, 12)
        self.assertEqual(coverage.counts[0][0], 2)
        self.assertEqual(coverage.counts[1][1], 4)
        self.assertEqual(coverage.counts[0][1], 3)

    def test_duplicate_lengths_are_counted_per_ship(self):
        single = coverage_counts(3, 3, [], [], [2])
        double = coverage_counts(3, 3, [], [], [2, 2])

        self.assertEqual(double.total, 2 * single.total)
        self.assertEqual(double.counts[1][1], 2 * single.counts[1][1])

    def test_fully_missed_board_has_no_placements(self):
        misses = [(r, c) for r in range(2) for c in range(2)]
        coverage = coverage_counts(2, 2, [], misses, [2])

        self.assertEqual(coverage.total, 0)

    def test_unexplained_hits(self):
        coverage = coverage_counts(3, 3, [(0, 0)], [(0, 1), (1, 0)], [2])

        self.assertEqual(unexplained_hits(coverage, [(0, 0)]), [(0, 0)])
        self.assertEqual(unexplained_hits(coverage, [(2, 2)]), [])


class BaseProbabilityTests(unittest.TestCase):
    def test_base_is_count_over_total(self):
        coverage = coverage_counts(3, 3, [], [], [2])
        grid = base_probability_map(3, 3, coverage, [], [])

        self.assertAlmostEqual(grid[0][0], 2 / 12)
        self.assertAlmostEqual(grid[1][1], 4 / 12)

    def test_known_cells_are_zero(self):
        hits = [(1, 1)]
        misses = [(0, 0)]
        coverage = coverage_counts(3, 3, hits, misses, [2])
        grid = base_probability_map(3, 3, coverage, hits, misses)

        self.assertEqual(grid[1][1], 0.0)
        self.assertEqual(grid[0][0], 0.0)
        self.assertGreater(grid[0][1], 0.0)

    def test_zero_total_gives_zero_map(self):
        coverage = coverage_counts(2, 2, [], [(0, 0), (0, 1), (1, 0), (1, 1)], [2])
        grid = base_probability_map(2, 2, coverage, [], [])

        self.assertEqual(grid, [[0.0, 0.0], [0.0, 0.0]])


class NormalizeTests(unittest.TestCase):
    def test_positive_cells_sum_to_one(self):
        grid = normalize_map([[1.0, 3.0], [0.0, 0.0]])

        self.assertEqual(grid, [[0.25, 0.75], [0.0, 0.0]])

    def test_already_normalized_is_unchanged(self):
        grid = normalize_map([[0.2, 0.0], [0.6, 0.2]])

        self.assertAlmostEqual(grid[0][0], 0.2)
        self.assertAlmostEqual(grid[1][0], 0.6)
        self.assertEqual(grid[0][1], 0.0)

    def test_all_zero_stays_zero(self):
        self.assertEqual(normalize_map([[0.0, 0.0]]), [[0.0, 0.0]])

    def test_returns_new_grid(self):
        source = [[2.0, 2.0]]
        result = normalize_map(source)

        self.assertIsNot(result, source)
        self.assertEqual(source, [[2.0, 2.0]])


if __name__ == "__main__":
    unittest.main()
