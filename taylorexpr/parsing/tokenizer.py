r"""@package taylorexpr.parsing.tokenizer

Split an expression string into tokens.

Numeric literals consist of digits and decimal points. Everything else is
matched exactly against keyword tables grouped by keyword length, trying
the shortest keywords first:

    1 character:  + - * / ^ x ( )
    2 characters: ln e^ tg
    3 characters: sin cos ctg atg
    4 characters: sqrt asin acos actg


@b Examples

```
    >>> [t.label for t in tokenize("sin(x)+cos(x)")]
    ['sin', '(', 'x', ')', '+', 'cos', '(', 'x', ')']
```
"""

from ..funcs import Func, ATOMS, require_all
from .common import Node, NumberFormatError, UnknownTokenError


__all__ = [
    "tokenize",
]


_NUMBER_CHARS = frozenset("0123456789.")

_KEYWORDS = {
    1: {
        "+": Func.ADD,
        "-": Func.SUB,
        "*": Func.MUL,
        "/": Func.DIV,
        "^": Func.POW,
        "x": Func.X,
        "(": Func.OPEN,
        ")": Func.CLOSE,
    },
    2: {
        "ln": Func.LN,
        "e^": Func.EXP,
        "tg": Func.TAN,
    },
    3: {
        "sin": Func.SIN,
        "cos": Func.COS,
        "ctg": Func.COTAN,
        "atg": Func.ARCTAN,
    },
    4: {
        "sqrt": Func.SQRT,
        "asin": Func.ARCSIN,
        "acos": Func.ARCCOS,
        "actg": Func.ARCCOT,
    },
}

_MAX_KEYWORD = max(_KEYWORDS)

# Every tag except those not spelled out in the text has a keyword.
require_all(
    {op: kw for table in _KEYWORDS.values() for kw, op in table.items()},
    set(Func) - {Func.NEG, Func.CONST},
    "tokenizer._KEYWORDS",
)

# After these, a '-' is a binary minus.
_OPERAND_ENDS = ATOMS | {Func.CLOSE}


def _match_keyword(text, pos):
    r"""Return the tag and length of the keyword starting at `pos`."""
    for length in range(1, _MAX_KEYWORD + 1):
        chunk = text[pos:pos+length]
        if len(chunk) < length:
            break
        op = _KEYWORDS[length].get(chunk)
        if op is not None:
            return op, length
    raise UnknownTokenError(text[pos:pos+_MAX_KEYWORD+1])


def _read_number(text, pos):
    r"""Return the constant token starting at `pos` and the end index."""
    end = pos
    while end < len(text) and text[end] in _NUMBER_CHARS:
        end += 1
    literal = text[pos:end]
    try:
        value = float(literal)
    except ValueError:
        raise NumberFormatError(literal)
    return Node(Func.CONST, value=value, pos=pos), end


def tokenize(expression):
    r"""Convert an expression string into a list of tokens.

    Tokens are parsing.common.Node objects without children. A minus sign
    at the beginning, after an opening bracket or after another operator is
    returned as unary negation (`Func.NEG`).

    Surrounding whitespace (e.g. a trailing newline) is ignored.

    Raises a NumberFormatError for malformed numbers and an
    UnknownTokenError for text not matching any keyword.
    """
    text = expression.strip()
    tokens = []
    pos = 0
    while pos < len(text):
        if text[pos] in _NUMBER_CHARS:
            token, pos = _read_number(text, pos)
            tokens.append(token)
            continue
        op, length = _match_keyword(text, pos)
        if op is Func.SUB and (not tokens or tokens[-1].op not in _OPERAND_ENDS):
            op = Func.NEG
        tokens.append(Node(op, pos=pos))
        pos += length
    return tokens
