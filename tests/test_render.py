import unittest

from fleetprob.engine.probability import compute_probabilities
from fleetprob.engine.render import visualize_probability_map


class VisualizeTests(unittest.TestCase):
    def test_small_grid_layout(self):
        text = visualize_probability_map([[0.5, 0.125]])

        expected = (
            "       0     1 \n"
            "   ------------\n"
            " 0 | 50.0% | 12.5% |\n"
            "   ------------\n"
        )
        self.assertEqual(text, expected)

    def test_one_line_per_row_plus_separators(self):
        grid = compute_probabilities(10, 10, [], [], [5, 4, 3, 3, 2])
        lines = visualize_probability_map(grid).splitlines()

        self.assertEqual(len(lines), 2 + 2 * 10)
        self.assertTrue(lines[2].startswith(" 0 |"))
        self.assertTrue(lines[-2].startswith(" 9 |"))
        self.assertEqual(lines[2].count("%"), 10)


if __name__ == "__main__":
    unittest.main()
