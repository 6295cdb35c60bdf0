r"""@package taylorexpr.numutils

Miscellaneous numerical utilities and helpers.


@b Examples

```
    >>> binomial(5, 3)
    10
    >>> binomial_coeffs(4)
    [1, 4, 6, 4, 1]
```
"""

from contextlib import contextmanager
import math
import warnings

from scipy.integrate import IntegrationWarning
import numpy as np


__all__ = [
    "binomial",
    "binomial_coeffs",
    "generalized_binomial",
    "inverse_factorials",
    "raise_all_warnings",
    "try_quad_tolerances",
    "IntegrationResult",
    "NumericalError",
]


class NumericalError(Exception):
    r"""Exception raised for problems with numerical evaluation.

    For example, the integration driver raises this when no tolerance leads
    to a converged quadrature.
    """
    pass


def binomial(n, k):
    r"""Compute the binomial coefficient n choose k.

    Uses the multiplicative recurrence
    \f[
        {n \choose k} = \prod_{i=0}^{k-1} \frac{n-i}{i+1}
    \f]
    with ``k = min(k, n-k)`` to bound the number of iterations. Each
    intermediate product is itself a binomial coefficient, so integer
    division is exact.
    """
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def binomial_coeffs(n):
    r"""Compute all binomial coefficients n choose k for 0 <= k <= n.

    The result is a list of integers
    \f[
        {n \choose 0}, {n \choose 1}, \ldots, {n \choose n}.
    \f]
    """
    return _BinomialCoeffs.all_coeffs(n)


class _BinomialCoeffs():
    r"""Helper class to simply cache the coefficient lists.

    This is used by binomial_coeffs() to re-use once computed lists.
    """

    __binomial_coeffs = []

    @classmethod
    def all_coeffs(cls, n):
        r"""Generate and cache the results for binomial_coeffs()."""
        while len(cls.__binomial_coeffs) <= n:
            nn = len(cls.__binomial_coeffs)
            coeffs = [binomial(nn, k) for k in range(nn+1)]
            cls.__binomial_coeffs.append(coeffs)
        return cls.__binomial_coeffs[n]


def generalized_binomial(alpha, num):
    r"""Return the first `num` generalized binomial coefficients of `alpha`.

    These are the Maclaurin coefficients of \f$ (1+x)^\alpha \f$, i.e.
    \f[
        {\alpha \choose k} = \frac{\alpha (\alpha-1) \cdots (\alpha-k+1)}{k!}.
    \f]
    """
    coeffs = np.zeros(num)
    if num == 0:
        return coeffs
    coeffs[0] = 1.0
    for k in range(1, num):
        coeffs[k] = coeffs[k-1] * (alpha - (k-1)) / k
    return coeffs


def inverse_factorials(num):
    r"""Return the array ``[1/0!, 1/1!, ..., 1/(num-1)!]``."""
    return np.array([1.0 / math.factorial(k) for k in range(num)])


@contextmanager
def raise_all_warnings():
    r"""Context manager for turning numpy and native warnings into exceptions.

    For example:
    ```
        with raise_all_warnings():
            np.pi / np.linspace(0, 1, 10)
    ```
    Without the `raise_all_warnings()` context, the above code would just
    issue a warning but otherwise run fine. Inside the context, the division
    raises a `FloatingPointError` and `scipy.integrate.quad()` raises an
    `IntegrationWarning` instead of printing it.
    """
    old_settings = np.seterr(divide='raise', over='raise', invalid='raise')
    try:
        with warnings.catch_warnings():
            warnings.filterwarnings('error', category=IntegrationWarning)
            yield
    finally:
        np.seterr(**old_settings)


def try_quad_tolerances(func, args=(), kwargs=None, tol_min=1e-11,
                        tol_max=1e-2, tol_steps=None, verbose=False):
    r"""Try to run a given function with increasing tolerance until integration succeeds.

    @param func
        Callable performing the integration. This should issue or raise an
        `IntegrationWarning` for too low tolerances. It is called as
        ``func(tol, *args, **kwargs)``.
    @param args
        Optional additional positional arguments for `func`.
    @param kwargs
        Optional additional keyword arguments for `func`.
    @param tol_min
        Minimal tolerance to try first. Default is `1e-11`.
    @param tol_max
        Maximum tolerance to allow. If `func` fails for this tolerance, no
        more trials are done and the `IntegrationWarning` warning is raised.
        Default is `1e-2`.
    @param tol_steps
        How many steps to try when going from `tol_min` to `tol_max`. Should
        be at least two. Default is to go roughly through each order of
        magnitude.
    @param verbose
        If `True`, print the tolerances as they are tried out. Default is
        `False`.
    """
    if tol_min > tol_max:
        raise ValueError("minimal tolerance greater than maximum tolerance")
    tol_min = np.log10(tol_min)
    tol_max = np.log10(tol_max)
    if tol_steps is None:
        tol_steps = max(2, int(round(tol_max-tol_min) + 1))
    tols = np.logspace(tol_min, tol_max, tol_steps)
    with raise_all_warnings():
        for tol in tols:
            if verbose:
                print("Trying with tol=%s" % tol)
            try:
                return func(tol, *args, **(kwargs or dict()))
            except IntegrationWarning:
                if verbose:
                    print("... failed with tol=%s" % tol)
                if tol == tols[-1]:
                    raise


class IntegrationResult():
    r"""Wrapper of the `full_output` of a `quad()` call."""

    def __init__(self, value, error, info=None, warning=None, method=None):
        r"""Create a result object from the output of `quad()`.

        @param value
            Main result, i.e. the computed value.
        @param error
            The estimate of the error of the value.
        @param info
            Integration info object.
        @param warning
            Any warnings produced during integration.
        @param method
            Name of the method that produced the result.
        """
        ## Computed value.
        self.value = value
        ## Estimated error.
        self.error = error
        ## Info object of the integration `quad()` call.
        self.info = info
        ## Warnings produced while integrating (`None` in case of no warnings).
        self.warning = warning
        ## Integration method used.
        self.method = method

    def is_ok(self):
        r"""Return whether the result is OK and produced no warning."""
        return self.warning is None

    def __float__(self):
        return float(self.value)

    def __repr__(self):
        txt = "%s" % self.value
        if self.error is not None:
            txt += " +- %s" % self.error
        if self.method is not None:
            txt += " (%s)" % self.method
        if self.warning is not None:
            w = str(self.warning).split("\n")
            w = "\n       ".join(w)
            txt += "\nWarning: %s" % w
        return txt
