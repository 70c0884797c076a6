"""
decfloat - values.py
Settings and conversions for decimal values

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from . import numbers


###############################################################################
# type checks

def check_value(inp):
    """Check if value is of Decimal type."""
    if not isinstance(inp, numbers.Decimal):
        raise TypeError('%s is not of class Decimal' % type(inp))
    return inp


###############################################################################
# settings and factory

class Values(object):
    """Settings shared by a family of decimal values."""

    def __init__(self, division_digits=numbers.DIVISION_DIGITS):
        """Set up the decimal settings."""
        self.division_digits = division_digits

    def __repr__(self):
        return 'Values[division_digits=%d]' % (self._division_digits,)

    @property
    def division_digits(self):
        """Lowest number of fractional digits computed in a division."""
        return self._division_digits

    @division_digits.setter
    def division_digits(self, digits):
        """Set the division precision floor."""
        if digits < 1:
            raise ValueError('division precision must be at least one digit, not %d' % (digits,))
        self._division_digits = digits

    def new_decimal(self):
        """Return a new zero Decimal."""
        return numbers.Decimal(self)

    def from_value(self, python_val):
        """Convert a Python int, float, str, bytes, Decimal or Variant to a new Decimal."""
        if isinstance(python_val, numbers.Decimal):
            return self.new_decimal().copy_from(python_val)
        return numbers.as_decimal(python_val, self)

    def from_str(self, text):
        """Parse a decimal representation into a new Decimal."""
        return self.new_decimal().from_str(text)


# settings used where none are given
DEFAULT_VALUES = Values()


def to_decimal(obj):
    """Convert a Python value or Variant to a new Decimal with default settings."""
    return DEFAULT_VALUES.from_value(obj)
