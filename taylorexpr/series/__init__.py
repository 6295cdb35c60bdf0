r"""@package taylorexpr.series

Truncated power series (Taylor polynomials).

Each series (poly.TaylorPolynomial) has a fixed window of
common.SERIES_LENGTH coefficients. The factory module produces the series
of elementary functions about arbitrary points and the poly module provides
the arithmetic to combine them.
"""

from .common import SERIES_LENGTH, DEFAULT_DEGREE
from .common import SeriesError, SeriesDegreeError, ZeroSeriesDivisionError
from .common import SeriesWarning
from .poly import TaylorPolynomial
from .factory import from_func, maclaurin, taylor_shift
