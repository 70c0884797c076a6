"""
decfloat - error.py
Error constants and exceptions

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

# error constants
# format errors
EMPTY_STRING = 1
MISPLACED_SIGN = 2
MULTIPLE_POINTS = 3
BAD_CHARACTER = 4
NO_DIGITS = 5
BAD_EXPONENT = 6
NOT_FINITE = 7
# arithmetic errors
DIVISION_BY_ZERO = 11
# conversion errors
UNSUPPORTED_VARIANT_TYPE = 21
# expression errors
BAD_OPERATOR = 31
MISSING_OPERAND = 32


class DecimalError(Exception):
    """Base type for decimal engine errors."""

    default_message = u'Unprintable error'
    messages = {
        EMPTY_STRING: u'Empty string',
        MISPLACED_SIGN: u"'-' is only allowed as the first character",
        MULTIPLE_POINTS: u'More than one decimal point',
        BAD_CHARACTER: u'Non-numerical character',
        NO_DIGITS: u'No digits',
        BAD_EXPONENT: u'Invalid exponent',
        NOT_FINITE: u'Not a finite number',
        DIVISION_BY_ZERO: u'Division by zero',
        UNSUPPORTED_VARIANT_TYPE: u'Variant is neither a number nor a string',
        BAD_OPERATOR: u'Unknown operator',
        MISSING_OPERAND: u'Missing operand',
    }

    def __init__(self, code, pos=None):
        """Set up the error."""
        self.code = code
        self.pos = pos
        self.message = self.messages.get(code, self.default_message)
        Exception.__init__(self, self.get_message())

    def get_message(self):
        """Error message, with source location if known."""
        if self.pos is not None:
            return u'%s at position %d' % (self.message, self.pos)
        return self.message


class FormatError(DecimalError, ValueError):
    """Malformed decimal representation."""

    def __init__(self, code, text=u'', pos=None):
        """Set up the error."""
        self.text = text
        DecimalError.__init__(self, code, pos)

    def get_message(self):
        """Error message, with the offending text."""
        return u'%s in %r' % (DecimalError.get_message(self), self.text)


class DivisionByZero(DecimalError, ZeroDivisionError):
    """Divisor is exactly zero."""

    def __init__(self):
        """Set up the error."""
        DecimalError.__init__(self, DIVISION_BY_ZERO)


class UnsupportedVariantType(DecimalError, TypeError):
    """Variant cannot be converted to a number."""

    def __init__(self, variant_type):
        """Set up the error."""
        self.variant_type = variant_type
        DecimalError.__init__(self, UNSUPPORTED_VARIANT_TYPE)

    def get_message(self):
        """Error message, with the variant type."""
        return u'%s: type %r' % (self.message, self.variant_type)


class ExpressionError(DecimalError, ValueError):
    """Malformed operator-operand sequence on the command line."""

    def __init__(self, code, token=u'', pos=None):
        """Set up the error."""
        self.token = token
        DecimalError.__init__(self, code, pos)

    def get_message(self):
        """Error message, with the offending token."""
        if self.token:
            return u'%s: %r' % (DecimalError.get_message(self), self.token)
        return DecimalError.get_message(self)
