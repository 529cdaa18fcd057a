import unittest
from collections import Counter

from tetris_piece import KINDS
from tetris_rng import UniformRandom


class UniformRandomTests(unittest.TestCase):
    def test_same_seed_same_sequence(self):
        a = UniformRandom(1234)
        b = UniformRandom(1234)
        self.assertEqual([a.next_piece() for _ in range(200)],
                         [b.next_piece() for _ in range(200)])

    def test_draws_are_catalog_kinds(self):
        rng = UniformRandom(7)
        for _ in range(500):
            self.assertIn(rng.next_piece(), KINDS)

    def test_each_kind_about_one_in_seven(self):
        rng = UniformRandom(2024)
        n = 7000
        counts = Counter(rng.next_piece() for _ in range(n))
        self.assertEqual(set(counts), set(KINDS))
        for t in KINDS:
            # expected 1000, standard deviation about 29
            self.assertTrue(850 <= counts[t] <= 1150, (t, counts[t]))


if __name__ == "__main__":
    unittest.main()
