"""
tests/quadhash_core/hashing/test_quadratic.py
Tests del Artilugio Cuadrático: troceado, raíces y empaquetado.
"""
import unittest
from quadhash_core.hashing.quadratic import (
    Chunks, RootPair, DegenerateInputError, QuadraticMixer,
    split_chunks, solve_quadratic, quadratic_division,
)


class TestChunkSplitting(unittest.TestCase):

    def test_even_split(self):
        """979899 (6 dígitos): trozos de 2 dígitos."""
        self.assertEqual(split_chunks(979899, 6), Chunks(97, 98, 99))

    def test_uneven_split(self):
        """
        15 dígitos: div=5, rem=5 -> p1=10^5, p2=10^10.
        """
        self.assertEqual(split_chunks(104101108108111, 15), Chunks(10410, 11081, 8111))
        self.assertEqual(split_chunks(9798, 4), Chunks(9, 9, 8))

    def test_short_numbers_have_zero_leading_coefficient(self):
        self.assertEqual(split_chunks(0, 1), Chunks(0, 0, 0))
        self.assertEqual(split_chunks(97, 2), Chunks(0, 0, 0))

    def test_negative_packed_value(self):
        """Con 0 dígitos todo el valor cae en 'a'."""
        num = -2871192997877187841
        self.assertEqual(split_chunks(num, 0), Chunks(num, 0, 0))


class TestRootSolver(unittest.TestCase):

    def test_complex_roots(self):
        """1·x² + 2·x + 6: D = -20 -> real = |-1|, imag = isqrt(20)."""
        self.assertEqual(solve_quadratic(Chunks(1, 2, 6)), RootPair(1, 4))

    def test_real_roots_ordered_before_abs(self):
        """
        12·x² + 61·x + 26: base = -2, paso = 49/24 = 2.
        Raíces 0 y -4: min = -4 -> real = 4, max = 0 -> imag = 0.
        """
        self.assertEqual(solve_quadratic(Chunks(12, 61, 26)), RootPair(4, 0))

    def test_truncation_toward_zero(self):
        """-51 / 38 trunca a -1 (no a -2 como haría //)."""
        self.assertEqual(solve_quadratic(Chunks(19, 51, 69)), RootPair(1, 51))

    def test_results_are_non_negative(self):
        for a in range(1, 12):
            for b in range(0, 30, 7):
                for c in range(0, 30, 5):
                    roots = solve_quadratic(Chunks(a, b, c))
                    self.assertGreaterEqual(roots.real, 0)
                    self.assertGreaterEqual(roots.imag, 0)

    def test_degenerate_raises_with_chunks(self):
        with self.assertRaises(DegenerateInputError) as ctx:
            solve_quadratic(Chunks(0, 0, 0))
        self.assertEqual(ctx.exception.chunks, Chunks(0, 0, 0))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_degenerate_after_wrap(self):
        """2·INT64_MIN envuelve a 0: también es degenerado, nunca ZeroDivisionError."""
        with self.assertRaises(DegenerateInputError):
            solve_quadratic(Chunks(-(1 << 63), 0, 0))


class TestPacking(unittest.TestCase):

    def test_pack(self):
        self.assertEqual(RootPair(1, 4).pack(), 1000004)
        self.assertEqual(RootPair(0, 14661).pack(), 14661)

    def test_mix_end_to_end(self):
        self.assertEqual(quadratic_division(979899, 6), 169)
        self.assertEqual(QuadraticMixer.mix(104101108108111, 15), 14661)
        self.assertEqual(QuadraticMixer.mix(7259900468384836804, 19), 1486829)
        self.assertEqual(QuadraticMixer.mix(-2871192997877187841, 0), 0)

    def test_mix_propagates_degenerate(self):
        with self.assertRaises(DegenerateInputError):
            QuadraticMixer.mix(97, 2)


if __name__ == '__main__':
    unittest.main()
