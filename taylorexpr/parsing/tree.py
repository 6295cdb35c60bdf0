r"""@package taylorexpr.parsing.tree

Build expression trees from postfix token lists.
"""

from ..funcs import BRACKETS
from .common import Node, MalformedExpressionError
from .postfix import infix_to_postfix
from .tokenizer import tokenize


__all__ = [
    "build_tree",
    "parse",
    "print_tree",
]


def build_tree(postfix):
    r"""Fold a postfix token list into an expression tree.

    Each operator takes its operands from the nodes built so far that have
    not been attached yet: unary functions the last one, binary operators
    the last two (the earlier one becomes `first`). The tokens are not
    modified, the tree consists of new nodes.

    Returns the root node. Raises a MalformedExpressionError if the list is
    empty, an operator lacks operands or more than one node remains at the
    end.
    """
    if not postfix:
        raise MalformedExpressionError("Empty expression", "")
    pending = []
    for token in postfix:
        op = token.op
        if op in BRACKETS:
            raise MalformedExpressionError("Bracket in postfix sequence",
                                           op.value)
        if len(pending) < op.arity:
            raise MalformedExpressionError(
                "Operator expects %d operand(s) but got %d"
                % (op.arity, len(pending)), op.value
            )
        node = Node(op, value=token.value, pos=token.pos)
        if op.arity == 2:
            node.second = pending.pop()
            node.first = pending.pop()
        elif op.arity == 1:
            node.first = pending.pop()
        pending.append(node)
    if len(pending) != 1:
        raise MalformedExpressionError(
            "Operands without operator", ", ".join(n.infix() for n in pending)
        )
    return pending[0]


def parse(expression):
    r"""Parse an expression string into a tree.

    @b Examples
    ```
        root = parse("sin(x)*e^(x+7)-tg(x)/ln(x-9)")
        root.print_tree()
    ```
    """
    return build_tree(infix_to_postfix(tokenize(expression)))


def print_tree(node):
    r"""Print an expression tree, one node per line."""
    node.print_tree()
