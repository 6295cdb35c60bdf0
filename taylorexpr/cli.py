#!/usr/bin/env python3
r"""@package taylorexpr.cli

Command line front end: expand a function and integrate it over a range.

Usage:
    taylorexpr [options] [FUNCTION START END STEPS]

Arguments not given on the command line are prompted for. Defaults for the
options are read from the `config.cfg` shipped with the package and may be
overridden by a `config.mine.cfg` in the current working directory.
"""

import sys
import os
import logging
from configparser import ConfigParser

from .integrate import integrate, METHODS
from .evaluate import taylor
from .parsing import parse, print_tree
from .numutils import NumericalError

op = os.path


__all__ = [
    "Main",
    "main",
]


HELP = """
        Integral approximator user manual

    Usage:
        taylorexpr [options] [FUNCTION START END STEPS]

    Options:
        --help          print this message
        -v, -verbose    print progress information
        --tree          print the expression tree of the function
        --degree N      degree of the Taylor polynomial (0 to 29)
        --offset A      expansion point (default: midpoint of the range)
        --method M      integration method, one of: {methods}

    Example call:
        taylorexpr

    Input the function in the shape of:  sin(x)*e^(x+7)-tg(x)/ln(x-9)
    Set parameters:  0.0 1.0 1000
                      |   |   |
    range start ------^   |   |
    range end ------------^   |
    number of steps ----------^

    This approximates the integral on the range from 0.0 to 1.0, where the
    `riemann` method uses 1000 steps.

    range start -> where the range starts (integer or real number)
    range end -> where the range ends (integer or real number)
    number of steps -> integer number of steps of the Riemann sum
        (recommended value is between 10^4 and 10^7)
""".format(methods=", ".join(METHODS))


class UsageError(ValueError):
    r"""Invalid command line arguments or input."""
    pass


class Main(object):
    def __init__(self, *args):
        self.args = list(args)
        self.root_dir = op.dirname(op.realpath(__file__))
        config = ConfigParser()
        with open(op.join(self.root_dir, 'config.cfg')) as cfg_file:
            config.read_file(cfg_file)
        config.read(op.join(os.getcwd(), "config.mine.cfg"))
        self.config = config

    def get(self, name):
        return self.config.get("defaults", name)

    def pop_flag(self, flag):
        try:
            self.args.remove(flag)
            return True
        except ValueError:
            pass
        return False

    def pop_option(self, option, default):
        r"""Remove `option` and its value from the arguments."""
        try:
            idx = self.args.index(option)
        except ValueError:
            return default
        try:
            value = self.args[idx+1]
        except IndexError:
            raise UsageError("Option %s requires a value." % option)
        del self.args[idx:idx+2]
        return value

    def read_function(self):
        if self.args:
            return self.args.pop(0)
        return input("f(x) = ")

    def read_parameters(self):
        r"""Return `(start, end, steps)` from the arguments or stdin."""
        params = self.args
        if not params:
            print("\nrange start, range end, step count: ")
            params = input().split()
        if len(params) == 2:
            params = params + [self.get("steps")]
        if len(params) != 3:
            raise UsageError(
                "Expected range start, range end and step count, got %r."
                % " ".join(params)
            )
        names = ("range start", "range end", "number of steps")
        values = []
        for name, conv, value in zip(names, (float, float, int), params):
            try:
                values.append(conv(value))
            except ValueError:
                raise UsageError("Error parsing %s argument: '%s'"
                                 % (name, value))
        return values

    def main(self):
        if self.pop_flag('--help') or self.pop_flag('-h'):
            print(HELP)
            return 0
        logging.captureWarnings(True)
        if self.pop_flag('-v') or self.pop_flag('-verbose'):
            logging.getLogger().setLevel(logging.INFO)
        show_tree = self.pop_flag('--tree')
        try:
            degree = int(self.pop_option('--degree', self.get("degree")))
            offset = self.pop_option('--offset', self.get("offset"))
            offset = float(offset) if offset else None
            method = self.pop_option('--method', self.get("method"))
            function = self.read_function()
            logging.info("Function: %s", function)
            if show_tree:
                print_tree(parse(function))
            start, end, steps = self.read_parameters()
            logging.info("Range: [%s, %s], steps: %s, degree: %s, method: %s",
                         start, end, steps, degree, method)
            if offset is None:
                offset = 0.5 * (start + end)
            print("f(x) ~ %s" % taylor(function, offset=offset, degree=degree))
            res = integrate(function, start, end, steps=steps, degree=degree,
                            method=method, offset=offset)
        except (ValueError, NumericalError) as e:
            print("Error: %s" % (e,), file=sys.stderr)
            return 1
        except EOFError:
            print("Error: unexpected end of input", file=sys.stderr)
            return 1
        print("integral = %s" % res.value)
        logging.info("Result: %r", res)
        return 0


def main():
    logging.basicConfig(format="%(levelname)s: %(message)s")
    sys.exit(Main(*sys.argv[1:]).main())


if __name__ == "__main__":
    main()
