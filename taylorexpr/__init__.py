r"""@package taylorexpr

Taylor polynomial approximation of single-variable expressions.

An expression string such as ``"sin(x)*e^(x+7)-tg(x)/ln(x-9)"`` is parsed
into an expression tree (see the parsing package), which is then evaluated
by propagating truncated power series through its nodes (see the series
package and evaluate.SeriesEvaluator). The result is the Taylor polynomial
of the whole expression about a chosen point, which can be evaluated,
printed or integrated (integrate.integrate()).


@b Examples

```
    from taylorexpr import taylor, integrate
    p = taylor("e^x", offset=1.0, degree=8)
    print(p)
    print(integrate("x^2", 0.0, 1.0).value)    # 0.333...
```
"""

from .funcs import Func
from .parsing import parse, ExpressionError
from .series import TaylorPolynomial, SeriesError, from_func
from .evaluate import SeriesEvaluator, taylor
from .integrate import integrate
