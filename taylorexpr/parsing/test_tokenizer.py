#!/usr/bin/env python3

import unittest
import sys

from testutils import TaylorTestCase
from ..funcs import Func
from .common import ExpressionError, NumberFormatError, UnknownTokenError
from .tokenizer import tokenize


def _ops(text):
    return [t.op for t in tokenize(text)]


class TestTokenizer(TaylorTestCase):
    def test_functions(self):
        self.assertEqual(
            [t.label for t in tokenize("sin(x)+cos(x)")],
            ["sin", "(", "x", ")", "+", "cos", "(", "x", ")"]
        )
        self.assertEqual(
            _ops("tg(x)*ctg(x)/ln(x)-e^x"),
            [Func.TAN, Func.OPEN, Func.X, Func.CLOSE, Func.MUL,
             Func.COTAN, Func.OPEN, Func.X, Func.CLOSE, Func.DIV,
             Func.LN, Func.OPEN, Func.X, Func.CLOSE, Func.SUB,
             Func.EXP, Func.X]
        )
        self.assertEqual(
            _ops("sqrt(atg(actg(asin(acos(x)))))")[:10:2],
            [Func.SQRT, Func.ARCTAN, Func.ARCCOT, Func.ARCSIN, Func.ARCCOS]
        )

    def test_numbers(self):
        tokens = tokenize("12.5*x^2+.5")
        self.assertEqual(tokens[0].op, Func.CONST)
        self.assertEqual(tokens[0].value, 12.5)
        self.assertEqual(tokens[4].value, 2.0)
        self.assertEqual(tokens[6].value, 0.5)
        self.assertEqual(tokenize("3.")[0].value, 3.0)
        self.assertEqual([t.pos for t in tokens], [0, 4, 5, 6, 7, 8, 9])

    def test_malformed_numbers(self):
        for text in ("1.2.3", ".", "x+1..2"):
            with self.assertRaises(NumberFormatError) as cm:
                tokenize(text)
            self.assertIsInstance(cm.exception, ExpressionError)
            self.assertIsInstance(cm.exception, ValueError)
        with self.assertRaises(NumberFormatError) as cm:
            tokenize("2*1.2.3")
        self.assertEqual(cm.exception.fragment, "1.2.3")

    def test_unknown_tokens(self):
        with self.assertRaises(UnknownTokenError) as cm:
            tokenize("exp(x)")
        self.assertEqual(cm.exception.fragment, "exp(x")
        self.assertIn("length 5", str(cm.exception))
        with self.assertRaises(UnknownTokenError) as cm:
            tokenize("x+y")
        self.assertEqual(cm.exception.fragment, "y")
        with self.assertRaises(UnknownTokenError):
            tokenize("sin (x)")
        with self.assertRaises(UnknownTokenError):
            tokenize("e")

    def test_whitespace(self):
        self.assertEqual(_ops("  x+1\n"), [Func.X, Func.ADD, Func.CONST])
        self.assertEqual(tokenize(""), [])

    def test_negation(self):
        self.assertEqual(_ops("-x"), [Func.NEG, Func.X])
        self.assertEqual(_ops("x-1"), [Func.X, Func.SUB, Func.CONST])
        self.assertEqual(_ops("(-x)"), [Func.OPEN, Func.NEG, Func.X, Func.CLOSE])
        self.assertEqual(_ops("2*-x"), [Func.CONST, Func.MUL, Func.NEG, Func.X])
        self.assertEqual(_ops("e^-x"), [Func.EXP, Func.NEG, Func.X])
        self.assertEqual(_ops("(x)-x"), [Func.OPEN, Func.X, Func.CLOSE,
                                         Func.SUB, Func.X])


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
