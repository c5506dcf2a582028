import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core import (
    CalculatorEngine, DivisionByZeroError, ImaginaryResultError,
    UnsupportedFunctionError, calculate_scientific_function
)


class TestTrigonometricFunctions(unittest.TestCase):
    def setUp(self):
        self.engine = CalculatorEngine()
        self.f = self.engine.calculate_scientific_function

    def test_sin_degrees(self):
        self.assertEqual(self.f('sin', 0, True), 0)
        self.assertEqual(self.f('sin', 90, True), 1)
        self.assertAlmostEqual(self.f('sin', 30, True), 0.5)

    def test_sin_radians(self):
        self.assertEqual(self.f('sin', 0, False), 0)
        self.assertEqual(self.f('sin', math.pi / 2, False), 1)
        self.assertAlmostEqual(self.f('sin', math.pi / 6, False), 0.5)

    def test_cos_snaps_to_zero(self):
        self.assertEqual(self.f('cos', 0, True), 1)
        self.assertEqual(self.f('cos', 90, True), 0)
        self.assertEqual(self.f('cos', math.pi / 2, False), 0)
        self.assertAlmostEqual(self.f('cos', 60, True), 0.5)

    def test_tan(self):
        self.assertEqual(self.f('tan', 0, True), 0)
        self.assertAlmostEqual(self.f('tan', 45, True), 1)
        self.assertEqual(self.f('tan', 180, True), 0)

    def test_inverse_trig_converts_output(self):
        self.assertAlmostEqual(self.f('asin', 1, True), 90)
        self.assertAlmostEqual(self.f('acos', 0.5, True), 60)
        self.assertAlmostEqual(self.f('atan', 1, True), 45)
        self.assertAlmostEqual(self.f('asin', 1, False), math.pi / 2)

    def test_inverse_trig_out_of_domain(self):
        self.assertTrue(math.isnan(self.f('asin', 2, True)))


class TestLogarithmicFunctions(unittest.TestCase):
    def setUp(self):
        self.f = CalculatorEngine().calculate_scientific_function

    def test_log(self):
        self.assertEqual(self.f('log', 100, True), 2)
        self.assertEqual(self.f('log', 1, True), 0)
        self.assertEqual(self.f('log', 100, False), 2)

    def test_ln(self):
        self.assertAlmostEqual(self.f('ln', math.e, True), 1)
        self.assertEqual(self.f('ln', 1, True), 0)

    def test_exp(self):
        self.assertAlmostEqual(self.f('exp', 1, True), math.e)
        self.assertEqual(self.f('exp', 0, True), 1)


class TestOtherFunctions(unittest.TestCase):
    def setUp(self):
        self.f = CalculatorEngine().calculate_scientific_function

    def test_sqrt(self):
        self.assertEqual(self.f('sqrt', 16, True), 4)
        with self.assertRaises(ImaginaryResultError):
            self.f('sqrt', -1, True)

    def test_cbrt(self):
        self.assertAlmostEqual(self.f('cbrt', 8, True), 2)
        self.assertAlmostEqual(self.f('cbrt', -8, True), -2)

    def test_pow2_and_abs(self):
        self.assertEqual(self.f('pow2', 3, True), 9)
        self.assertEqual(self.f('abs', -3.5, True), 3.5)

    def test_inv(self):
        self.assertEqual(self.f('inv', 2, True), 0.5)
        with self.assertRaises(DivisionByZeroError):
            self.f('inv', 0, True)

    def test_fact(self):
        self.assertEqual(self.f('fact', 5, True), 120)
        self.assertEqual(self.f('fact', 0, True), 1)
        self.assertAlmostEqual(self.f('fact', 0.5, True), math.sqrt(math.pi) / 2)
        self.assertEqual(self.f('fact', 171, True), math.inf)

    def test_fact_of_negative_is_nan(self):
        self.assertTrue(math.isnan(self.f('fact', -1, True)))

    def test_unsupported_function(self):
        with self.assertRaises(UnsupportedFunctionError) as ctx:
            self.f('tanh', 1, True)
        self.assertEqual(ctx.exception.name, 'tanh')

    def test_module_level_function(self):
        self.assertEqual(calculate_scientific_function('sqrt', 9, True), 3)


if __name__ == "__main__":
    unittest.main()
