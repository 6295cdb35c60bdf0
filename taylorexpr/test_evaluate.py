#!/usr/bin/env python3

import unittest
import sys
import math

import sympy as sp

from testutils import TaylorTestCase
from .parsing import parse, MalformedExpressionError, UnknownTokenError
from .series import SeriesError, SeriesDegreeError
from .evaluate import SeriesEvaluator, taylor


class TestEvaluator(TaylorTestCase):
    def test_leaves(self):
        ev = SeriesEvaluator(offset=2.0, degree=5)
        x = ev.evaluate(parse("x"))
        self.assertEqual(x.center, 2.0)
        self.assertSeriesAlmostEqual(x, [2, 1])
        c = ev.evaluate(parse("3.5"))
        self.assertEqual(c.center, 2.0)
        self.assertSeriesAlmostEqual(c, [3.5])

    def test_arithmetic(self):
        self.assertSeriesAlmostEqual(taylor("x^2", degree=4), [0, 0, 1])
        self.assertSeriesAlmostEqual(taylor("(x+1)*(x-1)"), [-1, 0, 1])
        self.assertSeriesAlmostEqual(taylor("2^3^2"), [512])
        self.assertSeriesAlmostEqual(taylor("-x^2", degree=3), [0, 0, -1])
        self.assertSeriesAlmostEqual(taylor("2*-x"), [0, -2])
        self.assertSeriesAlmostEqual(taylor("x^2", offset=1.0), [1, 2, 1])

    def test_truncation(self):
        s = taylor("x^5+x", degree=3)
        self.assertEqual(s.max_pow, 3)
        self.assertSeriesAlmostEqual(s, [0, 1])
        s = taylor("1/(1+x)", degree=12)
        self.assertEqual(s.max_pow, 12)
        self.assertSeriesAlmostEqual(s, [(-1)**k for k in range(13)])

    def test_reciprocal_power(self):
        s = taylor("x^-1", offset=2.0, degree=6)
        self.assertSeriesAlmostEqual(s, [(-1)**k / 2**(k+1) for k in range(7)])
        with self.assertRaises(SeriesError):
            taylor("x^-1", offset=0.0)

    def test_real_power(self):
        s = taylor("x^0.5", offset=4.0, degree=10)
        self.assertAlmostEqual(s(4.2), math.sqrt(4.2), places=12)
        with self.assertRaises(SeriesError):
            taylor("x^0.5")
        with self.assertRaises(SeriesError):
            taylor("(-x)^1.5", offset=1.0)
        s = taylor("2^x", degree=6)
        self.assertSeriesAlmostEqual(
            s, [math.log(2)**k / math.factorial(k) for k in range(7)]
        )

    def test_compare_sympy(self):
        x = sp.Symbol('x')
        for text, expr in [("sin(x)*e^x", sp.sin(x)*sp.exp(x)),
                           ("cos(x)/(1-x)", sp.cos(x)/(1-x)),
                           ("tg(sin(x))", sp.tan(sp.sin(x))),
                           ("sqrt(1+x^2)", sp.sqrt(1+x**2)),
                           ("atg(2*x)-asin(x)", sp.atan(2*x)-sp.asin(x)),
                           ("sin(x)/x", sp.sin(x)/x)]:
            poly = sp.series(expr, x, 0, 10).removeO()
            coeffs = [float(poly.coeff(x, k)) for k in range(10)]
            s = taylor(text, degree=9)
            self.assertEqual(s.max_pow, 9)
            self.assertListAlmostEqual(s.a_n[:10], coeffs, places=12)

    def test_cancelled_factor(self):
        s = taylor("(e^x-1)/x", degree=3)
        self.assertEqual(s.max_pow, 3)
        self.assertSeriesAlmostEqual(s, [1, 1/2, 1/6, 1/24])
        s = taylor("sin(x)/x", degree=10)
        self.assertEqual(s.max_pow, 10)
        self.assertAlmostEqual(s[10], -1/math.factorial(11), places=15)
        s = taylor("(1-cos(x))/x^2", degree=6)
        self.assertSeriesAlmostEqual(s, [1/2, 0, -1/24, 0, 1/720, 0, -1/40320])
        s = taylor("x^3/x^2", offset=0.0, degree=4)
        self.assertSeriesAlmostEqual(s, [0, 1])

    def test_cancelled_factor_at_window_end(self):
        s = taylor("sin(x)/x", degree=29)
        self.assertEqual(s.max_pow, 28)
        self.assertAlmostEqual(s[28], 1/math.factorial(29), places=15)
        self.assertEqual(s[29], 0.0)

    def test_composite_values(self):
        text = "sin(x)*e^(x+1)-tg(x)/ln(x+9)+acos(-x)"
        def f(y):
            return (math.sin(y)*math.exp(y+1) - math.tan(y)/math.log(y+9)
                    + math.acos(-y))
        s = taylor(text, offset=0.3, degree=14)
        self.assertEqual(s.center, 0.3)
        for y in (0.3, 0.32, 0.25, 0.35):
            self.assertAlmostEqual(s(y), f(y), places=12)

    def test_errors(self):
        with self.assertRaises(SeriesError):
            taylor("ln(x)")
        with self.assertRaises(SeriesError):
            taylor("ctg(x)")
        with self.assertRaises(ZeroDivisionError):
            taylor("x/(x-x)")
        with self.assertRaises(SeriesDegreeError):
            SeriesEvaluator(degree=30)
        with self.assertRaises(MalformedExpressionError):
            taylor("x+")
        with self.assertRaises(UnknownTokenError):
            taylor("cosh(x)")


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
