r"""@package taylorexpr.parsing.common

Token/node type and exceptions used by the parsing modules.
"""

from ..funcs import Func


__all__ = [
    "Node",
    "ExpressionError",
    "NumberFormatError",
    "UnknownTokenError",
    "MalformedExpressionError",
]


class ExpressionError(ValueError):
    r"""Base class for errors in the expression text.

    The offending part of the input is available as `fragment` and a human
    readable description as `reason`.
    """
    def __init__(self, reason, fragment):
        super(ExpressionError, self).__init__("%s: '%s'" % (reason, fragment))
        ## Description of the problem.
        self.reason = reason
        ## Part of the input that caused the problem.
        self.fragment = fragment


class NumberFormatError(ExpressionError):
    r"""A numeric literal could not be converted to a number."""
    def __init__(self, literal):
        super(NumberFormatError, self).__init__("Malformed number", literal)


class UnknownTokenError(ExpressionError):
    r"""Part of the input matches no known token."""
    def __init__(self, fragment):
        super(UnknownTokenError, self).__init__(
            "Unrecognized token (length %d)" % len(fragment), fragment
        )


class MalformedExpressionError(ExpressionError):
    r"""Tokens do not form a valid expression (operands, brackets)."""
    pass


class Node(object):
    r"""Token of an expression and node of the expression tree.

    Tokens produced by the tokenizer are nodes without children. The tree
    builder attaches children according to the arity of the tag: unary
    functions use `first` only, binary operators use `first` (left operand)
    and `second` (right operand). Leaves have no children.

    Each node owns its children, i.e. subtrees are never shared.
    """

    def __init__(self, op, value=None, first=None, second=None, pos=None):
        r"""Create a node.

        Args:
            op:     The funcs.Func tag.
            value:  Numeric value for `CONST` nodes.
            first:  First (or only) child.
            second: Second child of binary operators.
            pos:    Position of the token in the source text.
        """
        ## The funcs.Func tag of this node.
        self.op = op
        ## Value of constants, `None` for other tags.
        self.value = value
        ## First (or only) child.
        self.first = first
        ## Second child of binary operators.
        self.second = second
        ## Index of the token in the parsed string (if known).
        self.pos = pos

    @property
    def label(self):
        r"""Short description, i.e. the keyword or the constant's value."""
        if self.op is Func.CONST:
            return "%.15g" % self.value
        return self.op.value

    def children(self):
        r"""List of (key, child) pairs of the populated children."""
        return [(key, child) for key, child
                in (("first", self.first), ("second", self.second))
                if child is not None]

    def traverse_tree(self, include_root=False, parents=None):
        r"""Generator that walks through the complete tree (pre-order).

        In each iteration, the returned values represent the current node's
        parents (as a list from root to immediate parent), its key under
        which it is stored in its parent, and the node itself.

        @b Examples
        \code
            for parents, name, node in root.traverse_tree():
                print("-"*len(parents), name)
        \endcode
        """
        if parents is None:
            parents = []
        if include_root:
            yield parents, "", self
        parents = parents + [self]
        for name, child in self.children():
            yield parents, name, child
            for item in child.traverse_tree(parents=parents):
                yield item

    def print_tree(self, root_name='root'):
        r"""Print the whole tree.

        Each node is shown with the key under which it is stored in its
        parent and its label, indented by its depth.
        """
        def _p(node, name, parents=()):
            print("%s%s [%s]" % (". " * len(parents), name, node.label))
        _p(self, root_name)
        for parents, name, node in self.traverse_tree():
            _p(node, name, parents)

    def infix(self):
        r"""Fully bracketed string representation of the tree."""
        if self.op.is_atom:
            return self.label
        if self.op is Func.NEG:
            return "-(%s)" % self.first.infix()
        if self.op.is_unary:
            return "%s(%s)" % (self.op.value, self.first.infix())
        if self.op.is_binary:
            return "(%s %s %s)" % (self.first.infix(), self.op.value,
                                   self.second.infix())
        return self.op.value

    def __repr__(self):
        if self.first is None and self.second is None:
            return "<Node %s>" % self.label
        return "<Node %s>" % self.infix()
