r"""@package taylorexpr.integrate

Definite integrals of expressions via their Taylor polynomials.

The expression is expanded about the midpoint of the integration interval
and the resulting polynomial is integrated by one of the following methods:

    * `"series"`: exact integration of the polynomial
    * `"riemann"`: left Riemann sum with a given number of steps
    * `"quad"`: adaptive quadrature using `scipy.integrate.quad`

The result is only as good as the polynomial approximation of the function
on the interval, i.e. intervals should lie well within the radius of
convergence of the expansion.


@b Examples

```
    res = integrate("sin(x)*e^(x+7)", 0.0, 1.0, steps=1000, method="riemann")
    print(res.value)
```
"""

from scipy.integrate import quad, IntegrationWarning
import numpy as np

from .evaluate import taylor
from .numutils import try_quad_tolerances, IntegrationResult, NumericalError
from .series import DEFAULT_DEGREE


__all__ = [
    "METHODS",
    "riemann_sum",
    "integrate_series",
    "integrate",
]


## Available integration methods.
METHODS = ("series", "riemann", "quad")


def riemann_sum(func, start, end, steps):
    r"""Left Riemann sum of `func` over `[start, end]`.

    The interval is divided into `steps` subintervals of equal width and
    `func` is sampled at their left end points. It is called once with the
    array of all sample points.

    Raises a `ValueError` if `start > end` or `steps < 1`. Equal bounds give
    `0`.
    """
    if start > end:
        raise ValueError("Range start %r is larger than range end %r."
                         % (start, end))
    steps = int(steps)
    if steps < 1:
        raise ValueError("Number of steps must be positive (got %d)." % steps)
    if start == end:
        return 0.0
    dx = (end - start) / steps
    pts = start + dx * np.arange(steps)
    return float(np.sum(func(pts)) * dx)


def integrate_series(series, start, end):
    r"""Exact integral of a Taylor polynomial over `[start, end]`."""
    return float(series.integral(start, end))


def _series_error(series, start, end):
    r"""Integral of the highest retained term as a rough error estimate."""
    top = series.max_pow
    if top == 0:
        return 0.0
    term = series - series.truncate(top - 1)
    return abs(float(term.integral(start, end)))


def integrate(text, start, end, steps=1000, degree=DEFAULT_DEGREE,
              method="series", offset=None):
    r"""Integrate an expression over `[start, end]`.

    @param text
        The expression to integrate, e.g. ``"sin(x)*e^(x+7)"``.
    @param start,end
        Integration bounds. A `ValueError` is raised for `start > end`.
    @param steps
        Number of steps for the `"riemann"` method. Ignored otherwise.
    @param degree
        Degree of the Taylor polynomial. Default is #DEFAULT_DEGREE.
    @param method
        One of #METHODS. Default is `"series"`.
    @param offset
        Expansion point. By default, the midpoint of the interval is used.

    @return A numutils.IntegrationResult. For `"series"`, its `error` is
        the integral of the highest retained term, a rough estimate of the
        truncation error. For `"quad"`, it is the quadrature error estimate
        and for `"riemann"` it is `None`.
    """
    if method not in METHODS:
        raise ValueError("Unknown integration method %r (available: %s)."
                         % (method, ", ".join(METHODS)))
    if start > end:
        raise ValueError("Range start %r is larger than range end %r."
                         % (start, end))
    if offset is None:
        offset = 0.5 * (start + end)
    series = taylor(text, offset=offset, degree=degree)
    if method == "series":
        return IntegrationResult(integrate_series(series, start, end),
                                 _series_error(series, start, end),
                                 method=method)
    if method == "riemann":
        return IntegrationResult(riemann_sum(series, start, end, steps), None,
                                 method=method)
    if start == end:
        return IntegrationResult(0.0, 0.0, method=method)
    try:
        res = try_quad_tolerances(
            lambda tol: quad(series, a=start, b=end, epsabs=tol, epsrel=tol,
                             full_output=True)
        )
    except IntegrationWarning as e:
        raise NumericalError("Quadrature did not converge: %s" % e)
    return IntegrationResult(*res[:4], method=method)
