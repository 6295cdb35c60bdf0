r"""@package taylorexpr.funcs

The closed set of tags an expression node can carry.

Every consumer that dispatches on the tag (the tokenizer's keyword tables,
the priority tables of the postfix conversion, the series rules and the
evaluator) keeps a lookup table keyed by Func and checks it against the
relevant group with require_all() at import time. Adding a tag without
updating a consumer therefore fails loudly as soon as the package is
imported.
"""

from enum import Enum


__all__ = [
    "Func",
    "ELEMENTARY_FUNCS",
    "UNARY_FUNCS",
    "BINARY_OPS",
    "ATOMS",
    "BRACKETS",
    "require_all",
]


class Func(Enum):
    r"""Tag of a token or expression tree node."""
    # elementary functions (unary)
    SIN = "sin"
    COS = "cos"
    TAN = "tg"
    COTAN = "ctg"
    LN = "ln"
    EXP = "e^"
    SQRT = "sqrt"
    ARCTAN = "atg"
    ARCCOT = "actg"
    ARCSIN = "asin"
    ARCCOS = "acos"
    # unary minus
    NEG = "neg"
    # binary operators
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    # brackets
    OPEN = "("
    CLOSE = ")"
    # leaves
    X = "x"
    CONST = "const"

    @property
    def is_unary(self):
        r"""Whether nodes with this tag take exactly one child."""
        return self in UNARY_FUNCS

    @property
    def is_binary(self):
        r"""Whether nodes with this tag take two children."""
        return self in BINARY_OPS

    @property
    def is_atom(self):
        r"""Whether this tag marks a leaf (the variable or a constant)."""
        return self in ATOMS

    @property
    def arity(self):
        r"""Number of children of a node with this tag."""
        if self.is_unary:
            return 1
        if self.is_binary:
            return 2
        return 0

    def __str__(self):
        return self.value


## Functions with a series expansion rule.
ELEMENTARY_FUNCS = frozenset([
    Func.SIN, Func.COS, Func.TAN, Func.COTAN, Func.LN, Func.EXP, Func.SQRT,
    Func.ARCTAN, Func.ARCCOT, Func.ARCSIN, Func.ARCCOS,
])

## Tags of nodes with exactly one child.
UNARY_FUNCS = ELEMENTARY_FUNCS | frozenset([Func.NEG])

## Tags of nodes with two children.
BINARY_OPS = frozenset([Func.ADD, Func.SUB, Func.MUL, Func.DIV, Func.POW])

## Leaf tags.
ATOMS = frozenset([Func.X, Func.CONST])

## Grouping markers, which never end up in a tree.
BRACKETS = frozenset([Func.OPEN, Func.CLOSE])


def require_all(table, members, name):
    r"""Make sure a dispatch table covers exactly the given tags.

    Raises a `TypeError` naming the missing or superfluous tags.
    """
    missing = set(members) - set(table)
    extra = set(table) - set(members)
    if missing or extra:
        raise TypeError(
            "Table %s does not match its tags (missing: %s, unexpected: %s)."
            % (name, sorted(f.name for f in missing),
               sorted(f.name for f in extra))
        )
