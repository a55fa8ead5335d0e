from convchain import DEMO_SAMPLE, Bitmap
from convchain.patterns import *
import numpy as np
import unittest

P = np.array(
    [
        [True, False, True],
        [True, True, False],
        [False, False, False],
    ]
)


def reverse_bits(value, length):
    return int(format(value, f"0{length}b")[::-1], 2)


class Tester(unittest.TestCase):
    def test_extract_wraps(self):
        sample = Bitmap.from_cells(3, 3, [True] + [False] * 8)
        pattern = extract_pattern(sample, 2, 2, 2)
        self.assertEqual(pattern.tolist(), [[False, False], [False, True]])
        self.assertEqual(pattern_index(pattern), 1)

        self.assertEqual(extract_pattern(sample, 3, 0, 0).shape, (3, 3))
        self.assertEqual(pattern_index(extract_pattern(sample, 3, 0, 0)), 256)

    def test_index_first_cell_is_msb(self):
        self.assertEqual(pattern_index([[True, False], [False, False]]), 8)
        self.assertEqual(pattern_index([[False, False], [False, True]]), 1)
        self.assertEqual(pattern_index([[False, True], [True, False]]), 6)
        self.assertEqual(pattern_index(np.ones((3, 3), dtype=bool)), 511)
        self.assertEqual(pattern_index(P), 0b101110000)

    def test_rotate(self):
        n = 3
        rotated = rotate(P)
        for y in range(n):
            for x in range(n):
                # rotated(x, y) == source(n - 1 - y, x)
                self.assertEqual(rotated[y, x], P[x, n - 1 - y])

        self.assertTrue((rotate(rotate(rotate(rotate(P)))) == P).all())

    def test_reflect(self):
        n = 3
        reflected = reflect(P)
        for y in range(n):
            for x in range(n):
                self.assertEqual(reflected[y, x], P[y, n - 1 - x])

    def test_symmetries(self):
        corner = np.array([[True, False], [False, False]])
        indices = [pattern_index(p) for p in symmetries(corner)]
        self.assertEqual(indices, [8, 2, 1, 4, 4, 1, 2, 8])

        # Fully symmetrical patterns repeat eight times.
        full = np.ones((2, 2), dtype=bool)
        self.assertEqual([pattern_index(p) for p in symmetries(full)], [15] * 8)

    def test_weights_checkerboard(self):
        sample = Bitmap.from_cells(2, 2, [True, False, False, True])
        weights = build_weights(sample, 2)
        self.assertEqual(len(weights), 16)
        self.assertEqual(weights[9], 16.0)
        self.assertEqual(weights[6], 16.0)
        for i in range(16):
            if i not in (6, 9):
                self.assertAlmostEqual(weights[i], 0.1)

    def test_weights_uniform_sample(self):
        weights = build_weights(Bitmap(2, 2), 2)
        self.assertEqual(weights[0], 32.0)
        self.assertTrue((weights[1:] == 0.1).all())

        weights = build_weights(Bitmap.from_cells(1, 1, [True]), 3)
        self.assertEqual(weights[511], 8.0)

    def test_weights_size_and_positive(self):
        for n in range(1, 4):
            weights = build_weights(DEMO_SAMPLE, n)
            self.assertEqual(len(weights), 2 ** (n * n))
            self.assertTrue((weights > 0).all())
            # Each anchor contributes eight counts.
            self.assertEqual(weights[weights >= 1.0].sum(), 8 * 10 * 10)

    def test_weights_deterministic(self):
        a = build_weights(DEMO_SAMPLE, 3)
        b = build_weights(DEMO_SAMPLE.copy(), 3)
        self.assertTrue(np.array_equal(a, b))

    def test_weights_invariant_under_half_turn(self):
        # Reversing the bit order is a half turn, which is in every orbit.
        weights = build_weights(DEMO_SAMPLE, 2)
        for i in range(16):
            self.assertEqual(weights[i], weights[reverse_bits(i, 4)])

    def test_check_pattern_size(self):
        for n in [0, -1, MAX_PATTERN_SIZE + 1, 2.5, True, "3"]:
            with self.assertRaises(ValueError):
                check_pattern_size(n)
        self.assertEqual(check_pattern_size(np.uint8(3)), 3)

    def test_window_index(self):
        field = Bitmap.from_cells(3, 3, [False] * 4 + [True] + [False] * 4)
        self.assertEqual(window_index(field.data, 2, 0, 0, 1, 1), (1, 1))
        self.assertEqual(window_index(field.data, 2, 0, 0, 0, 0), (1, -8))
        # Window anchored at (-1, -1) wraps to cells x, y in {2, 0}.
        self.assertEqual(window_index(field.data, 2, -1, -1, 1, 1), (0, 0))

        for sy in range(-1, 2):
            for sx in range(-1, 2):
                ind, _ = window_index(field.data, 2, sx, sy, 1, 1)
                self.assertEqual(ind, pattern_index(extract_pattern(field, 2, sx, sy)))


if __name__ == "__main__":
    unittest.main()
