"""
decfloat - main.py
Command-line decimal calculator

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import sys
import logging

from . import config
from .data import NAME, VERSION, COPYRIGHT, read_usage
from .base import error
from .values import Values, LESS, EQUAL, GREATER


# arithmetic operators and the in-place operation they perform
OPERATORS = {
    u'+': 'iadd',
    u'-': 'isub',
    u'*': 'imul',
    u'x': 'imul',
    u'/': 'idiv',
}

# comparison operators and the comparison results that make them true
COMPARISONS = {
    u'<': (LESS,),
    u'<=': (LESS, EQUAL),
    u'>': (GREATER,),
    u'>=': (GREATER, EQUAL),
    u'==': (EQUAL,),
    u'!=': (LESS, GREATER),
}


def main(*arguments):
    """Initialise, parse arguments and perform requested operations."""
    # get settings and prepare logging
    settings = config.Settings(arguments)
    if settings.version:
        # print version and exit
        _show_version()
    elif settings.help or not settings.operands:
        # print usage and exit
        _show_usage()
    else:
        _calculate(settings)


def _show_usage():
    """Show usage description."""
    sys.stdout.write(read_usage())

def _show_version():
    """Show version and copyright."""
    sys.stdout.write(u'%s %s\n%s\n' % (NAME, VERSION, COPYRIGHT))

def _calculate(settings):
    """Evaluate the expression on the command line and print the result."""
    values = Values(**settings.values_params)
    try:
        result = evaluate(settings.operands, values)
        if not isinstance(result, bool):
            result = _format(result, settings)
    except error.DecimalError as e:
        logging.error(e)
        sys.exit(1)
    sys.stdout.write(u'%s\n' % (result,))

def _format(result, settings):
    """Scale and convert the result for output."""
    result.iscale(settings.scale)
    if settings.convert == u'int':
        return u'%d' % (result.to_int(settings.bits),)
    elif settings.convert == u'float':
        return repr(result.to_value())
    return result.to_str()


def evaluate(tokens, values):
    """
    Evaluate an operand-operator sequence from left to right.
    Returns a Decimal, or a bool for a single comparison.
    """
    if not tokens:
        raise error.ExpressionError(error.MISSING_OPERAND)
    result = values.from_str(tokens[0])
    rest = tokens[1:]
    if len(rest) % 2:
        raise error.ExpressionError(error.MISSING_OPERAND, rest[-1], len(tokens) - 1)
    for pos in range(0, len(rest), 2):
        operator, operand = rest[pos].lower(), values.from_str(rest[pos+1])
        if operator in COMPARISONS:
            # comparison only works on two operands
            if len(rest) != 2:
                raise error.ExpressionError(error.BAD_OPERATOR, operator, pos + 1)
            return result.compare(operand) in COMPARISONS[operator]
        try:
            method = OPERATORS[operator]
        except KeyError:
            raise error.ExpressionError(error.BAD_OPERATOR, operator, pos + 1)
        logging.debug('%s %s %s', result, operator, operand)
        getattr(result, method)(operand)
    return result
