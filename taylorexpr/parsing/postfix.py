r"""@package taylorexpr.parsing.postfix

Conversion of token lists from infix to postfix order (shunting-yard).

Each tag has an *incoming* priority, used when the token is read, and a
*stack* priority, used while it waits on the operator stack:

    tag                 incoming  stack
    constant, x            11       -     (never pushed)
    unary function          8       7
    unary minus             8       4
    ^                       5       4
    * /                     3       3
    + -                     2       2
    (                       9       0
    )                       1       0

Before a token is pushed, all stack entries with stack priority greater or
equal to its incoming priority are moved to the output. Since the stack
priority of `^` is lower than its incoming priority, `a^b^c` groups as
`a^(b^c)`, while all other binary operators associate to the left.
"""

from ..funcs import Func, ATOMS, ELEMENTARY_FUNCS, require_all
from .common import MalformedExpressionError


__all__ = [
    "infix_to_postfix",
]


_INCOMING = {
    Func.X: 11,
    Func.CONST: 11,
    Func.NEG: 8,
    Func.POW: 5,
    Func.MUL: 3,
    Func.DIV: 3,
    Func.ADD: 2,
    Func.SUB: 2,
    Func.OPEN: 9,
    Func.CLOSE: 1,
}
_INCOMING.update(dict.fromkeys(ELEMENTARY_FUNCS, 8))

_STACK = {
    Func.NEG: 4,
    Func.POW: 4,
    Func.MUL: 3,
    Func.DIV: 3,
    Func.ADD: 2,
    Func.SUB: 2,
    Func.OPEN: 0,
    Func.CLOSE: 0,
}
_STACK.update(dict.fromkeys(ELEMENTARY_FUNCS, 7))

require_all(_INCOMING, set(Func), "postfix._INCOMING")
require_all(_STACK, set(Func) - ATOMS, "postfix._STACK")


def _position(token):
    return "?" if token.pos is None else token.pos


def infix_to_postfix(tokens):
    r"""Reorder a list of tokens from infix to postfix notation.

    Brackets are consumed and do not appear in the result.

    Raises a MalformedExpressionError for unbalanced brackets.
    """
    postfix = []
    stack = []
    for token in tokens:
        op = token.op
        if op in ATOMS:
            postfix.append(token)
            continue
        priority = _INCOMING[op]
        while stack and _STACK[stack[-1].op] >= priority:
            postfix.append(stack.pop())
        if op is Func.CLOSE:
            # Only the opening bracket can stop a closing one.
            if not stack:
                raise MalformedExpressionError(
                    "Closing bracket at position %s has no opening bracket"
                    % _position(token), ")"
                )
            stack.pop()
            continue
        stack.append(token)
    while stack:
        token = stack.pop()
        if token.op is Func.OPEN:
            raise MalformedExpressionError(
                "Opening bracket at position %s is never closed"
                % _position(token), "("
            )
        postfix.append(token)
    return postfix
