"""
decfloat - arbitrary-precision decimal numbers

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .data import NAME, VERSION, AUTHOR, COPYRIGHT
from .base.error import DecimalError, FormatError, DivisionByZero, UnsupportedVariantType
from .values import Decimal, DigitBuffer, Variant, Values, SharedDecimal
from .values import LESS, EQUAL, GREATER, to_decimal
from .main import main

__version__ = VERSION


def parse(text):
    """Parse a decimal representation into a new Decimal with default settings."""
    return to_decimal(text)
