r"""@package taylorexpr.series.common

Constants and exceptions shared by the series modules.
"""

__all__ = [
    "SERIES_LENGTH",
    "DEFAULT_DEGREE",
    "SeriesError",
    "SeriesDegreeError",
    "ZeroSeriesDivisionError",
    "SeriesWarning",
]


## Number of coefficient slots of every truncated series. Powers above
## `SERIES_LENGTH-1` are dropped silently.
SERIES_LENGTH = 30

## Degree used when none is requested explicitly.
DEFAULT_DEGREE = 12


class SeriesError(ValueError):
    r"""Raised when a series cannot be formed or combined.

    Besides the specific subclasses, this is raised for expansions at points
    outside a function's domain and for quotients with a pole at the
    expansion point.
    """
    pass


class SeriesDegreeError(SeriesError):
    r"""Raised for a requested degree outside the coefficient window."""
    pass


class ZeroSeriesDivisionError(SeriesError, ZeroDivisionError):
    r"""Raised when dividing by the zero series."""
    pass


class SeriesWarning(UserWarning):
    """Warning issued when series may not be accurate within the window."""
    pass


def check_degree(degree):
    r"""Raise a SeriesDegreeError unless ``0 <= degree < SERIES_LENGTH``."""
    if not 0 <= degree < SERIES_LENGTH:
        raise SeriesDegreeError(
            "Requested degree %r outside of the window [0, %d]."
            % (degree, SERIES_LENGTH-1)
        )
