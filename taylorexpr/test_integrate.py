#!/usr/bin/env python3

import unittest
import sys
import math

import numpy as np

from testutils import TaylorTestCase
from .series import TaylorPolynomial
from .integrate import riemann_sum, integrate_series, integrate, METHODS


class TestRiemannSum(TaylorTestCase):
    def test_left_sum(self):
        # left end points 0, 0.25, 0.5, 0.75
        self.assertAlmostEqual(riemann_sum(lambda x: x, 0.0, 1.0, 4), 0.375)
        self.assertAlmostEqual(riemann_sum(np.cos, 0.0, math.pi/2, 10000),
                               1.0, places=3)
        n = 1000
        self.assertAlmostEqual(riemann_sum(lambda x: x**2, 0.0, 1.0, n),
                               (n-1)*(2*n-1) / (6*n**2), places=12)

    def test_bounds(self):
        self.assertEqual(riemann_sum(np.cos, 1.0, 1.0, 10), 0.0)
        with self.assertRaises(ValueError):
            riemann_sum(np.cos, 1.0, 0.0, 10)
        with self.assertRaises(ValueError):
            riemann_sum(np.cos, 0.0, 1.0, 0)


class TestIntegrate(TaylorTestCase):
    def test_integrate_series(self):
        p = TaylorPolynomial([0, 0, 1])
        self.assertAlmostEqual(integrate_series(p, 0.0, 1.0), 1/3)
        self.assertAlmostEqual(integrate_series(p, -1.0, 2.0), 3.0)

    def test_methods(self):
        for method in METHODS:
            res = integrate("x^2", 0.0, 1.0, steps=100000, method=method)
            self.assertEqual(res.method, method)
            self.assertAlmostEqual(res.value, 1/3, places=4)
        res = integrate("x^2", 0.0, 1.0, method="series")
        self.assertAlmostEqual(res.value, 1/3, places=14)
        self.assertAlmostEqual(res.error, 1/12)
        res = integrate("x^2", 0.0, 1.0, method="quad")
        self.assertTrue(res.is_ok())
        self.assertAlmostEqual(res.value, 1/3, places=12)

    def test_functions(self):
        res = integrate("cos(x)", 0.0, math.pi/2, degree=20)
        self.assertAlmostEqual(res.value, 1.0, places=10)
        res = integrate("e^x*sin(x)", 0.0, 1.0, degree=20, method="quad")
        expected = 0.5 * (math.e * (math.sin(1) - math.cos(1)) + 1)
        self.assertAlmostEqual(res.value, expected, places=10)
        res = integrate("1/x", 1.0, 2.0, degree=25)
        self.assertAlmostEqual(res.value, math.log(2), places=8)

    def test_offset(self):
        res = integrate("ln(x)", 0.5, 1.5, offset=1.0, degree=20)
        self.assertAlmostEqual(res.value, 1.5*math.log(1.5) - 0.5*math.log(0.5) - 1,
                               places=6)

    def test_errors(self):
        with self.assertRaises(ValueError):
            integrate("x", 1.0, 0.0)
        with self.assertRaises(ValueError):
            integrate("x", 0.0, 1.0, method="simpson")
        self.assertEqual(integrate("x", 1.0, 1.0, method="quad").value, 0.0)
        self.assertEqual(integrate("x", 1.0, 1.0, method="riemann").value, 0.0)


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
