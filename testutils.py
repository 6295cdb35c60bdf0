r"""@package testutils

Utilities to add more features to `unittest` classes.

This module provides a custom subclass of `unittest.TestCase`, namely
TaylorTestCase, which obeys the global configuration settings in
TestSettings. The latter can be configured by the script invoking the test
run.

This module also introduces a new decorator slowtest, which, when applied,
leads to the test being skipped on normal runs. The script starting the test
must set `TestSettings.skipslow` to `False` for the slow tests to be run.
"""

import sys
import functools
import unittest
import time

import numpy as np


__all__ = [
    "TaylorTestCase",
    "TestSettings",
    "slowtest",
]


def slowtest(func):
    """Decorator for skipping a test if TestSettings.skipslow is true."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if TestSettings.skipslow:
            raise unittest.SkipTest("skipping slow tests")
        return func(*args, **kwargs)
    return wrapper


class TaylorTestCase(unittest.TestCase):
    """Tweaked baseclass for unit tests.

    By deriving from this class, you:
        * Get timed individual tests (needs `verbosity=2`) if
          TestSettings.timing is true.
        * Can compare sequences of floats and series coefficients with
          assertListAlmostEqual().
    """
    @classmethod
    def setUpClass(cls):
        if cls is not TaylorTestCase:
            if cls.setUp is not TaylorTestCase.setUp:
                setUp = cls.setUp
                @functools.wraps(setUp)
                def setUpWrapper(self, *args, **kwargs):
                    TaylorTestCase.setUp(self)
                    return setUp(self, *args, **kwargs)
                cls.setUp = setUpWrapper

    def setUp(self):
        self.startTime = time.time()
        if TestSettings.timing:
            self.addCleanup(self.__printTiming)

    def __printTiming(self):
        duration = time.time() - self.startTime
        print("(%.4f seconds) ... " % (duration), file=sys.stderr, end='')

    def assertIsType(self, obj, cls):
        r"""Assert that an object is exactly of a certain type."""
        self.assertIs(type(obj), cls)

    def assertListAlmostEqual(self, a, b, places=None, delta=None):
        r"""Assert that two iterables contain (almost) the same values."""
        if places is not None and delta is not None:
            raise TypeError("Cannot use delta and places at the same time")
        if places is None and delta is None:
            places = 7
        a = list(a)
        b = list(b)
        if len(a) != len(b):
            raise self.failureException("Lists have different lengths (%d != %d)" % (len(a), len(b)))
        fails = []
        for i in range(len(a)):
            if a[i] == b[i]:
                continue
            if delta is not None:
                if abs(a[i]-b[i]) > delta:
                    fails.append(i)
            else:
                if round(abs(a[i]-b[i]), places) != 0:
                    fails.append(i)
        if fails:
            msg = "%d elements differ.\n" % len(fails)
            maxN = 9
            if len(fails) <= maxN:
                msg += "Differing elements:\n"
            else:
                msg += "First few differing elements:\n"
            msg += "\n".join(["  [{i}] {a} != {b}    (difference: {d})".format(i=i, a=a[i], b=b[i], d=(b[i]-a[i]))
                              for i in fails[:maxN]])
            raise self.failureException(msg)

    def assertSeriesAlmostEqual(self, series, coeffs, rtol=1e-9, atol=1e-12):
        r"""Assert that the leading coefficients of a series match `coeffs`.

        All coefficients of `series` beyond ``len(coeffs)`` must vanish.
        """
        expected = np.zeros(len(series.a_n))
        expected[:len(coeffs)] = np.asarray(coeffs, dtype=float)
        if not np.allclose(series.a_n, expected, rtol=rtol, atol=atol):
            bad = np.flatnonzero(~np.isclose(series.a_n, expected, rtol=rtol, atol=atol))
            raise self.failureException(
                "Series coefficients differ at powers %s:\n  got:      %s\n  expected: %s"
                % (list(bad), series.a_n[bad], expected[bad])
            )


class TestSettings(object):
    """Global settings for tests."""
    ## Stop test run on first fail/error.
    failfast = False
    ## Whether output is buffered.\ Just information, cannot be used to toggle output buffering.
    buffering = False
    ## Whether the timing for each test case should be printed.
    timing = False
    ## Control whether tests marked as slowtest should be skipped.
    skipslow = True
