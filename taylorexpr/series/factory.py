r"""@package taylorexpr.series.factory

Taylor polynomials of the elementary functions.

The entry point is from_func(), which returns the Taylor polynomial of one
of the elementary functions (see funcs.ELEMENTARY_FUNCS) about a given
point, truncated at a requested degree.

The exponential, sine and cosine are generated from closed form Maclaurin
coefficients and then re-centered with a Taylor shift (taylor_shift()). The
remaining functions are derived from these or from their derivatives using
the operations of poly.TaylorPolynomial:

    tan  = sin / cos            ctg  = cos / sin
    ln   = integral of 1/(1+x)  (1+x form, rescaled for other points)
    atg  = integral of 1/(1+y^2)
    asin = integral of 1/sqrt(1-y^2)

All computations use the complete coefficient window and truncate only at
the very end.


@b Examples

```
    print(from_func(Func.EXP, 0.0, 5))
    # 0.00833333333333333*x^5 + 0.0416666666666667*x^4 + ... + x + 1

    s = from_func(Func.SIN, 1.0, 8)
    s(1.1)      # ~ math.sin(1.1)
```
"""

import math
import warnings

import numpy as np

from ..funcs import Func, ELEMENTARY_FUNCS, require_all
from ..numutils import binomial_coeffs, generalized_binomial
from ..numutils import inverse_factorials
from .common import SERIES_LENGTH, DEFAULT_DEGREE, SeriesError
from .common import SeriesWarning, check_degree
from .poly import TaylorPolynomial


__all__ = [
    "from_func",
    "maclaurin",
    "taylor_shift",
]


_TOP = SERIES_LENGTH - 1

# Relative size of the first neglected shift contribution above which the
# expansion is reported as inaccurate.
_SHIFT_TOLERANCE = 1e-10

# Divisors of tan and cotan below this, relative to the size of the
# expansion point, count as zeros.
_POLE_TOLERANCE = 1e-12


def _window(coeffs, center=0.0):
    r"""Series using the complete window."""
    return TaylorPolynomial(coeffs, max_pow=_TOP, center=center)


def _exp_maclaurin():
    return _window(inverse_factorials(SERIES_LENGTH))


def _sin_maclaurin():
    a_n = inverse_factorials(SERIES_LENGTH)
    a_n[0::2] = 0.0
    a_n[3::4] *= -1
    return _window(a_n)


def _cos_maclaurin():
    a_n = inverse_factorials(SERIES_LENGTH)
    a_n[1::2] = 0.0
    a_n[2::4] *= -1
    return _window(a_n)


def _tan_maclaurin():
    return _sin_maclaurin() / _cos_maclaurin()


def _ln1p_maclaurin():
    r"""Series of \f$ \ln(1+x) \f$ as integral of \f$ 1/(1+x) \f$."""
    return (_window([1.0]) / _window([1.0, 1.0])).antiderivative()


def _sqrt1p_maclaurin():
    r"""Series of \f$ \sqrt{1+x} \f$."""
    return _window(generalized_binomial(0.5, SERIES_LENGTH))


_MACLAURIN = {
    Func.EXP: _exp_maclaurin,
    Func.SIN: _sin_maclaurin,
    Func.COS: _cos_maclaurin,
    Func.TAN: _tan_maclaurin,
    Func.LN: _ln1p_maclaurin,
    Func.SQRT: _sqrt1p_maclaurin,
}


def maclaurin(func, degree=DEFAULT_DEGREE):
    r"""Maclaurin series of one of the generating functions.

    Available for `EXP`, `SIN`, `COS` and `TAN` and for `LN` and `SQRT` in
    their ``1+x`` form, i.e. \f$ \ln(1+x) \f$ and \f$ \sqrt{1+x} \f$.
    """
    check_degree(degree)
    try:
        generate = _MACLAURIN[func]
    except KeyError:
        raise SeriesError("No Maclaurin series generator for '%s'." % func)
    return generate().truncate(degree)


def taylor_shift(series, offset):
    r"""Re-expand a series about a point shifted by `offset`.

    With \f$ x_0 \f$ the current center and \f$ x_1 = x_0 + a \f$ the new
    one, each term is expanded binomially,
    \f[
        c_p (x - x_0)^p = c_p \sum_{i=0}^p {p \choose i} a^i (x - x_1)^{p-i},
    \f]
    so that the result represents the same polynomial. For a series about
    `0`, this gives its Taylor polynomial about `offset`.
    """
    if offset == 0:
        return series.copy()
    a_n = np.zeros(SERIES_LENGTH)
    for p in range(series.max_pow + 1):
        c = series.a_n[p]
        if c == 0.0:
            continue
        coeffs = binomial_coeffs(p)
        for i in range(p + 1):
            a_n[p-i] += c * coeffs[i] * offset**i
    return TaylorPolynomial(a_n, max_pow=series.max_pow,
                            center=series.center + offset)


def _shifted(series, offset, name):
    r"""Shift a full-window Maclaurin series and check the neglected tail.

    The contribution of the last coefficient to the constant term estimates
    the size of the terms that did not fit into the window.
    """
    result = taylor_shift(series, offset)
    tail = abs(series.a_n[_TOP] * offset**_TOP)
    if tail > _SHIFT_TOLERANCE * max(1.0, abs(result.a_n[0])):
        warnings.warn(
            "Expansion of %s about %r is inaccurate: coefficients beyond "
            "power %d contribute about %.3g." % (name, offset, _TOP, tail),
            SeriesWarning
        )
    return result


def _periodic(series, offset, name):
    r"""Shift a 2pi-periodic series after reducing the offset."""
    reduced = math.remainder(offset, 2*math.pi)
    shifted = _shifted(series, reduced, name)
    return _window(shifted.a_n, center=offset)


def _exp(c):
    return _shifted(_exp_maclaurin(), c, "exp")


def _sin(c):
    return _periodic(_sin_maclaurin(), c, "sin")


def _cos(c):
    return _periodic(_cos_maclaurin(), c, "cos")


def _trig_quotient(num, den, c, name):
    r"""Quotient of two trigonometric series about `c`.

    A divisor whose constant term vanishes up to the rounding error of the
    reduced offset marks a pole of the quotient.
    """
    if abs(den[0]) < _POLE_TOLERANCE * max(1.0, abs(c)):
        raise SeriesError("%s has a pole at %r." % (name, c))
    return num / den


def _tan(c):
    return _trig_quotient(_sin(c), _cos(c), c, "tan")


def _cotan(c):
    return _trig_quotient(_cos(c), _sin(c), c, "cotan")


def _ln(c):
    if c <= 0:
        raise SeriesError("ln has no Taylor expansion about %r." % c)
    a_n = _ln1p_maclaurin().a_n * (1.0/c)**np.arange(SERIES_LENGTH)
    a_n[0] = math.log(c)
    return _window(a_n, center=c)


def _sqrt(c):
    if c <= 0:
        raise SeriesError("sqrt has no Taylor expansion about %r." % c)
    a_n = _sqrt1p_maclaurin().a_n * (1.0/c)**np.arange(SERIES_LENGTH)
    return _window(math.sqrt(c) * a_n, center=c)


def _arctan_derivative(c):
    r"""Series of \f$ 1/(1+y^2) \f$ about `c`."""
    one = _window([1.0], center=c)
    return one / _window([1.0 + c**2, 2*c, 1.0], center=c)


def _arctan(c):
    return _arctan_derivative(c).antiderivative(math.atan(c))


def _arccot(c):
    return (-_arctan_derivative(c)).antiderivative(math.pi/2 - math.atan(c))


def _arcsin_derivative(c):
    r"""Series of \f$ 1/\sqrt{1-y^2} \f$ about `c`."""
    if abs(c) >= 1:
        raise SeriesError("arcsin/arccos have no Taylor expansion about %r." % c)
    base = _window([1.0 - c**2, -2*c, -1.0], center=c)
    root = _sqrt(1.0 - c**2).compose(base)
    return _window([1.0], center=c) / root


def _arcsin(c):
    return _arcsin_derivative(c).antiderivative(math.asin(c))


def _arccos(c):
    return (-_arcsin_derivative(c)).antiderivative(math.acos(c))


_RULES = {
    Func.EXP: _exp,
    Func.SIN: _sin,
    Func.COS: _cos,
    Func.TAN: _tan,
    Func.COTAN: _cotan,
    Func.LN: _ln,
    Func.SQRT: _sqrt,
    Func.ARCTAN: _arctan,
    Func.ARCCOT: _arccot,
    Func.ARCSIN: _arcsin,
    Func.ARCCOS: _arccos,
}
require_all(_RULES, ELEMENTARY_FUNCS, "factory._RULES")


def from_func(func, offset=0.0, degree=DEFAULT_DEGREE):
    r"""Taylor polynomial of an elementary function.

    Args:
        func: Tag of the function, one of funcs.ELEMENTARY_FUNCS.
        offset: Expansion point. Default is `0`.
        degree: Highest power to keep. Must be less than #SERIES_LENGTH,
            otherwise a SeriesDegreeError is raised.

    Returns:
        A poly.TaylorPolynomial centered at `offset` with ``max_pow ==
        degree``.

    Raises a SeriesError if the function has no Taylor expansion about
    `offset` (e.g. `ln` about `0`) and warns with a SeriesWarning if the
    coefficient window is too small for the requested point.
    """
    check_degree(degree)
    try:
        rule = _RULES[func]
    except KeyError:
        raise SeriesError("'%s' is not an elementary function." % func)
    return rule(float(offset)).truncate(degree)
