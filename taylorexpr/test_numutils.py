#!/usr/bin/env python3

import unittest
import sys
import math
import warnings

from scipy.integrate import quad, IntegrationWarning
from scipy.special import binom
import numpy as np

from testutils import TaylorTestCase
from .numutils import binomial, binomial_coeffs, generalized_binomial
from .numutils import inverse_factorials, raise_all_warnings
from .numutils import try_quad_tolerances, IntegrationResult


class TestBinomials(TaylorTestCase):
    def test_binomial(self):
        self.assertEqual(binomial(5, 3), 10)
        self.assertEqual(binomial(5, 0), 1)
        self.assertEqual(binomial(5, 5), 1)
        self.assertEqual(binomial(5, 6), 0)
        self.assertEqual(binomial(5, -1), 0)
        self.assertEqual(binomial(29, 14), 77558760)
        for n in range(30):
            for k in range(n+1):
                self.assertEqual(binomial(n, k), math.comb(n, k))

    def test_binomial_coeffs(self):
        self.assertEqual(binomial_coeffs(0), [1])
        self.assertEqual(binomial_coeffs(4), [1, 4, 6, 4, 1])
        # cached lists are built incrementally
        self.assertEqual(binomial_coeffs(7), [math.comb(7, k) for k in range(8)])
        self.assertEqual(binomial_coeffs(2), [1, 2, 1])

    def test_generalized_binomial(self):
        self.assertListAlmostEqual(generalized_binomial(2, 5), [1, 2, 1, 0, 0])
        self.assertListAlmostEqual(
            generalized_binomial(0.5, 10),
            [binom(0.5, k) for k in range(10)],
            places=14
        )
        self.assertListAlmostEqual(
            generalized_binomial(-1, 6), [1, -1, 1, -1, 1, -1]
        )
        self.assertEqual(len(generalized_binomial(0.5, 0)), 0)

    def test_inverse_factorials(self):
        self.assertListAlmostEqual(
            inverse_factorials(6), [1, 1, 1/2, 1/6, 1/24, 1/120], places=15
        )


class TestIntegration(TaylorTestCase):
    def test_raise_all_warnings(self):
        with self.assertRaises(FloatingPointError):
            with raise_all_warnings():
                np.pi / np.linspace(0, 1, 10)
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            np.pi / np.linspace(0, 1, 10)

    def test_try_quad_tolerances(self):
        res = try_quad_tolerances(
            lambda tol: quad(np.cos, 0, np.pi/2, epsabs=tol, epsrel=tol)
        )
        self.assertAlmostEqual(res[0], 1.0, places=10)
        with self.assertRaises(ValueError):
            try_quad_tolerances(lambda tol: tol, tol_min=1e-2, tol_max=1e-3)
        tried = []
        def _fails(tol):
            tried.append(tol)
            raise IntegrationWarning("no convergence")
        with self.assertRaises(IntegrationWarning):
            try_quad_tolerances(_fails, tol_min=1e-6, tol_max=1e-2)
        self.assertEqual(len(tried), 5)

    def test_integration_result(self):
        res = IntegrationResult(1.2, 2e-2, dict(), method="quad")
        self.assertTrue(res.is_ok())
        self.assertAlmostEqual(float(res), 1.2)
        self.assertEqual(repr(res), "1.2 +- 0.02 (quad)")
        res = IntegrationResult(1.8, None, warning="Something went wrong.")
        self.assertFalse(res.is_ok())
        self.assertEqual(repr(res), "1.8\nWarning: Something went wrong.")


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
