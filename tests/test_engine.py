import copy
import unittest

from fleetprob.domain.config import (
    CLASSIC_FLEET,
    MODE_NORMAL,
    MODE_OPTIMIZED,
    MODE_SUPER_AGGRESSIVE,
    MODE_TARGETING,
    NORMALIZATION_TOLERANCE,
)
from fleetprob.domain.types import SunkShip
from fleetprob.engine.probability import best_cells, compute_probabilities
from fleetprob.strategies.profiles import mode_keys


def _positive_sum(grid):
    return sum(v for row in grid for v in row if v > 0)


class WorkedScenarioTests(unittest.TestCase):
    HITS = [[2, 3], [2, 4]]
    MISSES = [[0, 0], [1, 1], [3, 3]]

    def setUp(self):
        self.grid = compute_probabilities(10, 10, self.HITS, self.MISSES, [5, 4, 3], MODE_NORMAL)

    def test_horizontal_extensions_lead(self):
        self.assertEqual(set(best_cells(self.grid, 2)), {(2, 2), (2, 5)})
        top = min(self.grid[2][2], self.grid[2][5])
        for r in range(10):
            for c in range(10):
                if (r, c) not in {(2, 2), (2, 5)}:
                    self.assertLess(self.grid[r][c], top)

    def test_known_cells_are_zero(self):
        for r, c in self.MISSES + self.HITS:
            self.assertEqual(self.grid[r][c], 0.0)

    def test_mass_sums_to_one(self):
        self.assertAlmostEqual(_positive_sum(self.grid), 1.0, delta=NORMALIZATION_TOLERANCE)

    def test_normal_with_hits_matches_targeting(self):
        targeting = compute_probabilities(10, 10, self.HITS, self.MISSES, [5, 4, 3], MODE_TARGETING)

        self.assertEqual(self.grid, targeting)


class DegenerateInputTests(unittest.TestCase):
    def test_no_ships_returns_zero_map(self):
        grid = compute_probabilities(4, 6, [(1, 1)], [(0, 0)], [], MODE_OPTIMIZED)

        self.assertEqual(len(grid), 4)
        self.assertTrue(all(len(row) == 6 for row in grid))
        self.assertEqual(_positive_sum(grid), 0)

    def test_contradictory_state_returns_zero_map(self):
        grid = compute_probabilities(10, 10, [(0, 0)], [(0, 1), (1, 0)], [2])

        self.assertEqual(grid, [[0.0] * 10 for _ in range(10)])

    def test_every_cell_missed_returns_zero_map(self):
        misses = [(r, c) for r in range(3) for c in range(3)]
        grid = compute_probabilities(3, 3, [], misses, [2])

        self.assertEqual(_positive_sum(grid), 0)

    def test_unknown_mode_raises(self):
        with self.assertRaises(ValueError):
            compute_probabilities(5, 5, [], [], [2], "sniper")


class InvariantTests(unittest.TestCase):
    HITS = [(4, 4), (6, 2)]
    MISSES = [(0, 0), (4, 5), (9, 9), (5, 2)]

    def test_known_cells_zero_and_mass_normalized_in_every_mode(self):
        for mode in mode_keys():
            for hits in ([], self.HITS):
                with self.subTest(mode=mode, hits=hits):
                    grid = compute_probabilities(10, 10, hits, self.MISSES, CLASSIC_FLEET, mode)
                    for r, c in list(hits) + self.MISSES:
                        self.assertEqual(grid[r][c], 0.0)
                    self.assertAlmostEqual(_positive_sum(grid), 1.0, delta=NORMALIZATION_TOLERANCE)
                    self.assertTrue(all(0.0 <= v <= 1.0 for row in grid for v in row))

    def test_repeated_calls_are_identical(self):
        for mode in mode_keys():
            first = compute_probabilities(10, 10, self.HITS, self.MISSES, CLASSIC_FLEET, mode)
            second = compute_probabilities(10, 10, self.HITS, self.MISSES, CLASSIC_FLEET, mode)
            self.assertEqual(first, second)

    def test_inputs_are_not_mutated(self):
        hits = [[4, 4], [6, 2]]
        misses = [[0, 0], [4, 5]]
        ships = [5, 4, 3]
        sunk = [SunkShip(2, ((6, 2), (6, 3)))]
        before = copy.deepcopy((hits, misses, ships, sunk))

        grid = compute_probabilities(10, 10, hits, misses, ships, MODE_NORMAL, sunk)
        grid[0][1] = 99.0
        again = compute_probabilities(10, 10, hits, misses, ships, MODE_NORMAL, sunk)

        self.assertEqual((hits, misses, ships, sunk), before)
        self.assertNotEqual(again[0][1], 99.0)

    def test_open_board_favours_centre(self):
        grid = compute_probabilities(5, 5, [], [], [3], MODE_NORMAL)

        # 30 placements of 3 cells: corner is covered by 2, centre by 6
        self.assertAlmostEqual(grid[0][0], 2 / 90)
        self.assertAlmostEqual(grid[2][2], 6 / 90)
        self.assertGreaterEqual(grid[2][2], grid[0][0])


class AlignmentMonotonicityTests(unittest.TestCase):
    def test_extensions_beat_perpendicular_neighbours(self):
        hits = [(4, 4), (4, 5)]
        for mode in (MODE_TARGETING, MODE_SUPER_AGGRESSIVE, MODE_OPTIMIZED):
            with self.subTest(mode=mode):
                grid = compute_probabilities(10, 10, hits, [], CLASSIC_FLEET, mode)
                self.assertGreater(grid[4][3], grid[3][4])
                self.assertGreater(grid[4][3], grid[5][4])
                self.assertGreater(grid[4][6], grid[3][5])
                self.assertGreater(grid[4][6], grid[5][5])


class SunkShipTests(unittest.TestCase):
    def test_sunk_hits_do_not_drive_optimized_targeting(self):
        hits = [(0, 0), (0, 1)]
        sunk = [SunkShip(2, ((0, 0), (0, 1)))]

        live = compute_probabilities(10, 10, hits, [], [3], MODE_OPTIMIZED)
        resolved = compute_probabilities(10, 10, hits, [], [3], MODE_OPTIMIZED, sunk)

        self.assertEqual(best_cells(live, 1), [(0, 2)])
        self.assertLess(resolved[0][2], live[0][2])
        self.assertEqual(resolved[0][0], 0.0)
        self.assertAlmostEqual(_positive_sum(resolved), 1.0, delta=NORMALIZATION_TOLERANCE)

    def test_sunk_hits_need_no_remaining_ship(self):
        hits = [(0, 0), (0, 1), (5, 5)]
        sunk = [SunkShip(2, ((0, 0), (0, 1)))]

        grid = compute_probabilities(10, 10, hits, [(0, 2), (1, 0), (1, 1)], [3], MODE_OPTIMIZED, sunk)

        self.assertGreater(_positive_sum(grid), 0.0)


class BestCellTests(unittest.TestCase):
    def test_ties_are_kept(self):
        grid = [[0.25, 0.25], [0.5, 0.0]]

        self.assertEqual(best_cells(grid, 1), [(1, 0)])
        self.assertEqual(best_cells(grid, 2), [(1, 0), (0, 0), (0, 1)])

    def test_empty_map(self):
        self.assertEqual(best_cells([[0.0, 0.0]], 3), [])


if __name__ == "__main__":
    unittest.main()
