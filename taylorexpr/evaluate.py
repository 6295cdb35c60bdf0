r"""@package taylorexpr.evaluate

Evaluation of expression trees as truncated power series.

The tree is walked bottom-up. Leaves become the series of the variable or
of constants, elementary functions are expanded about the value of their
argument at the expansion point and composed with the argument's series,
and the arithmetic operators are applied using the operations of
series.poly.TaylorPolynomial. Every intermediate result is truncated at the
requested degree.


@b Examples

```
    series = taylor("sin(x)*e^x", offset=0.0, degree=5)
    print(series)
    # -0.0333333333333333*x^5 + 0.333333333333333*x^3 + x^2 + x
```
"""

import operator

from .funcs import Func, BRACKETS, ELEMENTARY_FUNCS, require_all
from .parsing import parse
from .series import TaylorPolynomial, SeriesError, DEFAULT_DEGREE, from_func
from .series.common import SERIES_LENGTH, check_degree


__all__ = [
    "SeriesEvaluator",
    "taylor",
]


def _is_integer_constant(series):
    r"""Whether a series is a constant with integral value."""
    return series.degree() == 0 and float(series[0]).is_integer()


## Name of the SeriesEvaluator method handling each tag.
_HANDLERS = {
    Func.X: "_variable",
    Func.CONST: "_constant",
    Func.NEG: "_negation",
    Func.ADD: "_arithmetic",
    Func.SUB: "_arithmetic",
    Func.MUL: "_arithmetic",
    Func.DIV: "_arithmetic",
    Func.POW: "_power",
}
_HANDLERS.update(dict.fromkeys(ELEMENTARY_FUNCS, "_function"))
require_all(_HANDLERS, set(Func) - BRACKETS, "evaluate._HANDLERS")

_ARITHMETIC = {
    Func.ADD: operator.add,
    Func.SUB: operator.sub,
    Func.MUL: operator.mul,
}


class SeriesEvaluator(object):
    r"""Turn expression trees into Taylor polynomials about a fixed point.

    All series produced by one evaluator are expanded about `offset` and
    truncated at `degree`.
    """

    def __init__(self, offset=0.0, degree=DEFAULT_DEGREE):
        check_degree(degree)
        ## Expansion point.
        self.offset = float(offset)
        ## Highest power kept in the results.
        self.degree = degree

    def evaluate(self, node):
        r"""Evaluate the (sub)tree rooted at `node`.

        Returns a series.poly.TaylorPolynomial centered at `offset`.
        """
        try:
            handler = _HANDLERS[node.op]
        except KeyError:
            raise SeriesError("Cannot evaluate node '%s'." % node.label)
        return getattr(self, handler)(node)

    def _variable(self, node):
        return TaylorPolynomial.variable(self.offset).truncate(self.degree)

    def _constant(self, node):
        return TaylorPolynomial.constant(node.value, center=self.offset)

    def _negation(self, node):
        return -self.evaluate(node.first)

    def _arithmetic(self, node):
        if node.op is Func.DIV:
            return self._quotient(node)
        first = self.evaluate(node.first)
        second = self.evaluate(node.second)
        return _ARITHMETIC[node.op](first, second).truncate(self.degree)

    def _quotient(self, node):
        r"""Series of `first / second`.

        A common factor \f$ (x - x_0)^s \f$ cancels in the quotient and
        costs `s` powers of accuracy. Both operands are then expanded again
        to `s` additional powers. Where the window is too small for that,
        the result only reaches power ``SERIES_LENGTH-1-s``.
        """
        first = self.evaluate(node.first)
        second = self.evaluate(node.second)
        shift = second.order()
        if not shift:
            return (first / second).truncate(self.degree)
        extended = min(self.degree + shift, SERIES_LENGTH - 1)
        if extended > self.degree:
            sub = SeriesEvaluator(self.offset, extended)
            first = sub.evaluate(node.first)
            second = sub.evaluate(node.second)
        return (first / second).truncate(min(self.degree, extended - shift))

    def _function(self, node):
        return self._apply(node.op, self.evaluate(node.first))

    def _apply(self, func, inner):
        r"""Series of `func(inner)` for an elementary function `func`."""
        outer = from_func(func, inner[0], self.degree)
        return outer.compose(inner).truncate(self.degree)

    def _power(self, node):
        r"""Series of `base^exponent`.

        Integral constant exponents use repeated multiplication, negative
        ones the reciprocal. Other exponents are evaluated as
        \f$ \exp(h \ln g) \f$, which requires a positive base at the
        expansion point.
        """
        base = self.evaluate(node.first)
        exponent = self.evaluate(node.second)
        if _is_integer_constant(exponent):
            return (base ** int(exponent[0])).truncate(self.degree)
        if base[0] <= 0:
            raise SeriesError(
                "Non-integer power of (%s), which is not positive at x = %r."
                % (base, self.offset)
            )
        log_base = self._apply(Func.LN, base)
        return self._apply(Func.EXP, (exponent * log_base).truncate(self.degree))


def taylor(text, offset=0.0, degree=DEFAULT_DEGREE):
    r"""Parse an expression and return its Taylor polynomial.

    Args:
        text: Expression string, e.g. ``"sin(x)*e^(x+7)"``.
        offset: Expansion point. Default is `0`.
        degree: Highest power to keep. Default is #DEFAULT_DEGREE.
    """
    return SeriesEvaluator(offset, degree).evaluate(parse(text))
