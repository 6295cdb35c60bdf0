r"""@package taylorexpr.series.poly

Truncated power series and their ring operations.

A TaylorPolynomial stores exactly #SERIES_LENGTH coefficients \f$ a_n \f$
of powers of \f$ (x - x_0) \f$, where \f$ x_0 \f$ is the `center` of the
expansion, together with `max_pow`, the highest power considered meaningful
for this particular value. Results whose true degree would exceed
``SERIES_LENGTH-1`` are truncated silently. This is the intended precision
cap and not an error.


@b Examples

```
    p = TaylorPolynomial([1, 1])        # 1 + x
    q = TaylorPolynomial([1, -1])       # 1 - x
    print(p * q)                        # -x^2 + 1
    print((p * q) / q)                  # x + 1
    geometric = 1 / q                   # x^29 + ... + x^2 + x + 1
    quotient, remainder = divmod(p * q + 3, q)
```
"""

import numbers

import numpy as np

from .common import SERIES_LENGTH, SeriesError, SeriesDegreeError
from .common import ZeroSeriesDivisionError, check_degree


__all__ = [
    "TaylorPolynomial",
]


def _true_degree(a_n):
    r"""Index of the last nonzero coefficient (`0` for the zero series)."""
    nonzero = np.flatnonzero(a_n)
    if len(nonzero) == 0:
        return 0
    return int(nonzero[-1])


def _valuation(a_n):
    r"""Index of the first nonzero coefficient.

    Must not be called for all-zero coefficient lists.
    """
    return int(np.flatnonzero(a_n)[0])


def _fmt(value):
    r"""Format a coefficient for printing."""
    return "%.15g" % value


def _series_quotient(num, den):
    r"""Coefficients of the power series `num/den` for ``den[0] != 0``.

    Solves \f$ \sum_{j=0}^k d_j q_{k-j} = n_k \f$ for \f$ q_k \f$ order by
    order, so the result agrees with the true quotient in every slot.
    """
    q = np.zeros(len(num))
    for k in range(len(num)):
        acc = num[k]
        if k:
            acc -= np.dot(den[1:k+1], q[k-1::-1])
        q[k] = acc / den[0]
    return q


class TaylorPolynomial(object):
    r"""Truncated power series with a fixed-size coefficient window.

    Instances should be treated as immutable values: all operations return
    new objects. The supported operations are addition, subtraction,
    multiplication and division (by other series or by numbers), integer
    powers, `divmod()` (polynomial long division), composition,
    differentiation, integration and evaluation at points.

    Series expanded about different centers cannot be combined.
    """

    # Let numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    def __init__(self, coeffs=(), max_pow=None, center=0.0):
        r"""Create a series from its lowest order coefficients.

        Args:
            coeffs: Iterable of coefficients, starting with the constant
                term. Coefficients beyond the window are dropped, missing
                ones are zero.
            max_pow: Highest meaningful power. Coefficients above it are
                discarded. By default, the index of the last nonzero
                coefficient is used.
            center: Expansion point \f$ x_0 \f$. Default is `0`.
        """
        a_n = np.zeros(SERIES_LENGTH)
        coeffs = np.asarray(coeffs, dtype=float).ravel()[:SERIES_LENGTH]
        a_n[:len(coeffs)] = coeffs
        if max_pow is None:
            max_pow = _true_degree(a_n)
        if not 0 <= max_pow < SERIES_LENGTH:
            raise SeriesDegreeError(
                "max_pow=%r outside of the window [0, %d]."
                % (max_pow, SERIES_LENGTH-1)
            )
        max_pow = int(max_pow)
        a_n[max_pow+1:] = 0.0
        ## Coefficients of the powers `0, 1, ..., SERIES_LENGTH-1`.
        self.a_n = a_n
        ## Highest power considered valid for this value.
        self.max_pow = max_pow
        ## Point about which the series is expanded.
        self.center = float(center)

    @classmethod
    def constant(cls, value, center=0.0):
        r"""Series of the constant function `value`."""
        return cls([value], max_pow=0, center=center)

    @classmethod
    def variable(cls, center=0.0):
        r"""Series of the identity \f$ f(x) = x \f$ expanded about `center`."""
        return cls([center, 1.0], max_pow=1, center=center)

    def copy(self):
        r"""Create an independent copy of this series."""
        return TaylorPolynomial(self.a_n, max_pow=self.max_pow,
                                center=self.center)

    def __getitem__(self, power):
        return self.a_n[power]

    def __iter__(self):
        return iter(self.a_n)

    def lead(self):
        r"""Leading coefficient, i.e. the coefficient at `max_pow`."""
        return self.a_n[self.max_pow]

    def degree(self):
        r"""True degree, i.e. the highest power with nonzero coefficient."""
        return _true_degree(self.a_n)

    def order(self):
        r"""Lowest power with nonzero coefficient (`0` for the zero series)."""
        if self.is_zero():
            return 0
        return _valuation(self.a_n)

    def is_zero(self):
        r"""Whether all coefficients vanish."""
        return not np.any(self.a_n)

    def truncate(self, degree):
        r"""Return a copy with all powers above `degree` dropped."""
        check_degree(degree)
        return TaylorPolynomial(self.a_n[:degree+1],
                                max_pow=min(self.max_pow, degree),
                                center=self.center)

    def _coerce(self, other):
        r"""Convert `other` to a series compatible with this one.

        Numbers become constant series. Returns `NotImplemented` for
        unsupported types.
        """
        if isinstance(other, TaylorPolynomial):
            if other.center != self.center:
                raise ValueError(
                    "Cannot combine series expanded about %r and %r."
                    % (self.center, other.center)
                )
            return other
        if isinstance(other, numbers.Real):
            return TaylorPolynomial.constant(other, center=self.center)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return TaylorPolynomial(self.a_n + other.a_n,
                                max_pow=max(self.max_pow, other.max_pow),
                                center=self.center)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return TaylorPolynomial(self.a_n - other.a_n,
                                max_pow=max(self.max_pow, other.max_pow),
                                center=self.center)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other - self

    def __neg__(self):
        return TaylorPolynomial(-self.a_n, max_pow=self.max_pow,
                                center=self.center)

    def __pos__(self):
        return self.copy()

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        a_n = np.convolve(self.a_n, other.a_n)[:SERIES_LENGTH]
        max_pow = min(self.max_pow + other.max_pow, SERIES_LENGTH-1)
        return TaylorPolynomial(a_n, max_pow=max_pow, center=self.center)

    __rmul__ = __mul__

    def __truediv__(self, other):
        r"""Power series quotient.

        Leading zero coefficients common to both operands cancel, so that
        e.g. \f$ \sin(x)/x \f$ is well defined. If the divisor vanishes to
        higher order than the dividend, the quotient has a pole at the
        center and a SeriesError is raised. The quotient is an infinite series
        in general and is computed in every slot of the window, i.e. its
        `max_pow` is ``SERIES_LENGTH-1`` minus the cancelled order.

        Cancelling a common factor \f$ (x - x_0)^s \f$ moves the `s` highest
        coefficients of the operands out of the result. If the operands are
        themselves truncated expansions, the quotient is therefore only
        exact up to their degree minus `s`.
        """
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        if other.is_zero():
            raise ZeroSeriesDivisionError(
                "Cannot divide (%s) by the zero series (%s)." % (self, other)
            )
        shift = _valuation(other.a_n)
        num, den = self.a_n, other.a_n
        if shift:
            if np.any(num[:shift]):
                raise SeriesError(
                    "Quotient (%s) / (%s) has a pole at x = %r."
                    % (self, other, self.center)
                )
            num = num[shift:]
            den = den[shift:]
        max_pow = SERIES_LENGTH - 1 - shift
        return TaylorPolynomial(_series_quotient(num, den), max_pow=max_pow,
                                center=self.center)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other / self

    def __divmod__(self, other):
        r"""Polynomial long division.

        Returns the pair ``(quotient, remainder)`` with
        ``self == quotient * other + remainder`` and the degree of
        `remainder` lower than that of `other`. Leading terms are located
        by their true degree after each step.
        """
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        if other.is_zero():
            raise ZeroSeriesDivisionError(
                "Cannot divide (%s) by the zero series (%s)." % (self, other)
            )
        d_deg = other.degree()
        d_lead = other.a_n[d_deg]
        divisor = other.a_n[:d_deg+1]
        quotient = np.zeros(SERIES_LENGTH)
        rem = self.a_n.copy()
        r_deg = _true_degree(rem)
        while np.any(rem) and r_deg >= d_deg:
            shift = r_deg - d_deg
            term = rem[r_deg] / d_lead
            quotient[shift] += term
            rem[shift:r_deg+1] -= term * divisor
            rem[r_deg] = 0.0
            r_deg = _true_degree(rem)
        return (TaylorPolynomial(quotient, center=self.center),
                TaylorPolynomial(rem, center=self.center))

    def __pow__(self, exponent):
        r"""Integer power by repeated squaring.

        Negative exponents give the reciprocal of the positive power.
        """
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        if exponent < 0:
            return 1.0 / self**(-exponent)
        result = TaylorPolynomial.constant(1.0, center=self.center)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            exponent >>= 1
            if exponent:
                base = base * base
        return result

    def compose(self, inner):
        r"""Substitute the series `inner` into this one.

        This series is interpreted as a function of \f$ y - y_0 \f$, where
        \f$ y_0 \f$ is its center, and `inner` is substituted for \f$ y \f$
        using Horner's scheme. The result is expanded about the center of
        `inner`. For a proper series composition, the constant term of
        `inner` should equal the center of this series. Then every
        coefficient up to the window is exact.
        """
        h = inner - self.center
        result = TaylorPolynomial.constant(self.a_n[self.max_pow],
                                           center=inner.center)
        for k in range(self.max_pow - 1, -1, -1):
            result = result * h + self.a_n[k]
        return result

    def derivative(self):
        r"""Series of the derivative."""
        a_n = self.a_n[1:] * np.arange(1, SERIES_LENGTH)
        return TaylorPolynomial(a_n, max_pow=max(self.max_pow - 1, 0),
                                center=self.center)

    def antiderivative(self, constant=0.0):
        r"""Series of the antiderivative with the given constant term.

        The coefficient at the highest power of the window has no place in
        the result and is dropped.
        """
        a_n = np.zeros(SERIES_LENGTH)
        a_n[0] = constant
        a_n[1:] = self.a_n[:-1] / np.arange(1, SERIES_LENGTH)
        return TaylorPolynomial(a_n,
                                max_pow=min(self.max_pow + 1, SERIES_LENGTH-1),
                                center=self.center)

    def integral(self, start, end):
        r"""Definite integral of the polynomial from `start` to `end`.

        Unlike antiderivative(), this keeps the term at the top of the
        window.
        """
        k = np.arange(self.max_pow + 1)
        a_n = np.append(self.a_n[self.max_pow::-1] / (k[::-1] + 1), 0.0)
        x0 = self.center
        return np.polyval(a_n, end - x0) - np.polyval(a_n, start - x0)

    def __call__(self, x):
        r"""Evaluate the polynomial at the point(s) `x`."""
        return np.polyval(self.a_n[self.max_pow::-1],
                          np.asarray(x, dtype=float) - self.center)

    def _variable_str(self):
        if self.center == 0.0:
            return "x"
        sign = "-" if self.center > 0 else "+"
        return "(x %s %s)" % (sign, _fmt(abs(self.center)))

    def __str__(self):
        r"""Render as ``c_n*x^n + ... + c_0``.

        Zero coefficients are omitted, coefficients of magnitude one are
        elided except for the constant term and the first power is shown as
        plain `x`.
        """
        var = self._variable_str()
        parts = []
        for power in range(SERIES_LENGTH-1, -1, -1):
            c = self.a_n[power]
            if c == 0.0:
                continue
            mag = abs(c)
            if power == 0:
                term = _fmt(mag)
            else:
                pw = var if power == 1 else "%s^%d" % (var, power)
                term = pw if mag == 1.0 else "%s*%s" % (_fmt(mag), pw)
            if not parts:
                parts.append(("-" if c < 0 else "") + term)
            else:
                parts.append(("- " if c < 0 else "+ ") + term)
        if not parts:
            return "0"
        return " ".join(parts)

    def __repr__(self):
        return "<TaylorPolynomial(%s; max_pow=%d, center=%r)>" % (
            self, self.max_pow, self.center
        )
