r"""@package taylorexpr.parsing

Parsing of expression strings into expression trees.

The three stages are the tokenizer (tokenizer.tokenize()), the conversion to
postfix order (postfix.infix_to_postfix()) and the tree builder
(tree.build_tree()). The function tree.parse() runs all three.
"""

from .common import Node, ExpressionError, NumberFormatError
from .common import UnknownTokenError, MalformedExpressionError
from .tokenizer import tokenize
from .postfix import infix_to_postfix
from .tree import build_tree, parse, print_tree
