"""
decfloat - numbers.py
Arbitrary-precision decimal values

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

# a Decimal is stored as a sign flag and two digit buffers:
#
#    1234.5678  ->  whole:    4 3 2 1       (units first, last = MSD)
#                   fraction: 5 6 7 8       (tenths first, last = LSD)
#
# both buffers are trimmed after every public operation: no zero above the MSD,
# no zero below the LSD. zero has two empty buffers and is never negative.
#
# values are mutable: methods starting with i work in-place and return self,
# the others return a modified copy.

import math
import struct
import logging

from ..base import error
from .digits import DigitBuffer
from .variant import Variant, STRING, NUMBER


# for str_to_decimal
# whitespace allowed around a representation
BLANKS = u' \t\n\r\f\v'
DIGITS = u'0123456789'
# scientific notation: mantissa, marker, exponent
EXPONENT_MARKERS = u'EeGg'

# comparison results
LESS, EQUAL, GREATER = -1, 0, 1

# lowest number of fractional digits computed in a division
DIVISION_DIGITS = 25

# formats for float conversion; enough digits to represent the float exactly
DOUBLE_FORMAT = u'%.25f'
SINGLE_FORMAT = u'%.25g'


##############################################################################
# decimal number

class Decimal(object):
    """Arbitrary-precision signed decimal number."""

    def __init__(self, values=None):
        """Initialise to zero."""
        self._values = values
        self._neg = False
        self._whole = DigitBuffer()
        self._fraction = DigitBuffer()

    def __repr__(self):
        """String representation for debugging."""
        return 'Decimal[%s]' % (self.to_str(),)

    def __str__(self):
        """Canonical decimal representation."""
        return self.to_str()

    # copying

    def new(self):
        """Create a new zero value."""
        return self.__class__(self._values)

    def clone(self):
        """Create a copy."""
        return self.new().copy_from(self)

    def copy_from(self, other):
        """Copy another value into this one."""
        if other is not self:
            self._neg = other._neg
            self._whole = other._whole.clone()
            self._fraction = other._fraction.clone()
        return self

    from_decimal = copy_from

    # properties

    def is_zero(self):
        """Value is zero."""
        return self._whole.is_empty() and self._fraction.is_empty()

    def is_negative(self):
        """Value is negative."""
        return self._neg

    def sign(self):
        """Sign of value."""
        if self.is_zero():
            return 0
        return -1 if self._neg else 1

    def integer_len(self):
        """Number of digits before the decimal point."""
        return len(self._whole)

    def fraction_len(self):
        """Number of digits after the decimal point."""
        return len(self._fraction)

    def division_digits(self):
        """Lowest number of fractional digits to compute in a division."""
        if self._values is None:
            return DIVISION_DIGITS
        return self._values.division_digits

    # Python int conversions

    def from_int(self, in_int):
        """Set value to Python int."""
        return self.from_str(u'%d' % (in_int,))

    def to_int(self, bits=None, unsigned=False):
        """Return integer part as Python int, optionally wrapped to a fixed width."""
        value = 0
        for digit in reversed(self._whole.digits()):
            value = value * 10 + digit
        if self._neg:
            value = -value
        if bits is not None:
            # two's complement wraparound, as a cast to a fixed-width type
            value &= (1 << bits) - 1
            if not unsigned and value >> (bits - 1):
                value -= 1 << bits
        return value

    # Python float conversions

    def from_value(self, in_float, single=False):
        """Set value to Python float."""
        if math.isinf(in_float) or math.isnan(in_float):
            raise error.FormatError(error.NOT_FINITE, u'%r' % (in_float,))
        if single:
            try:
                in_float = struct.unpack('<f', struct.pack('<f', in_float))[0]
            except OverflowError:
                raise error.FormatError(error.NOT_FINITE, u'%r' % (in_float,))
            return self.from_str(SINGLE_FORMAT % (in_float,))
        return self.from_str(DOUBLE_FORMAT % (in_float,))

    def to_value(self, single=False):
        """Return value as Python float."""
        whole = 0.
        for digit in reversed(self._whole.digits()):
            whole = whole * 10. + digit
        fraction = 0.
        for digit in reversed(self._fraction.digits()):
            fraction = fraction / 10. + digit
        value = whole + fraction / 10.
        if self._neg:
            value = -value
        if single:
            try:
                value = struct.unpack('<f', struct.pack('<f', value))[0]
            except OverflowError:
                value = math.copysign(float('inf'), value)
        return value

    # string conversions

    def from_str(self, text):
        """Set value to decimal representation, with optional exponent."""
        neg, whole, fraction, exp10 = str_to_decimal(text)
        # assemble in a staging value so that we're untouched on error
        staged = self.new()
        staged._neg = neg
        staged._whole = DigitBuffer(reversed(whole))
        staged._fraction = DigitBuffer(fraction)
        staged._trim()
        staged.iscale(exp10)
        return self.copy_from(staged)

    def to_str(self):
        """Convert to canonical decimal representation."""
        parts = [u'-'] if self._neg else []
        if self._whole.is_empty():
            parts.append(u'0')
        else:
            parts.extend(DIGITS[_d] for _d in reversed(self._whole.digits()))
        if not self._fraction.is_empty():
            parts.append(u'.')
            parts.extend(DIGITS[_d] for _d in self._fraction.digits())
        return u''.join(parts)

    # tagged value conversions

    def from_variant(self, in_variant):
        """Set value to the contents of a number or string Variant."""
        if in_variant.type == STRING:
            return self.from_str(in_variant.value)
        elif in_variant.type == NUMBER:
            if isinstance(in_variant.value, Decimal):
                return self.copy_from(in_variant.value)
            elif isinstance(in_variant.value, int):
                return self.from_int(in_variant.value)
            return self.from_value(float(in_variant.value))
        logging.debug('Cannot convert %r to Decimal', in_variant)
        raise error.UnsupportedVariantType(in_variant.type)

    # in-place unary operations

    def ineg(self):
        """Negate in-place."""
        if not self.is_zero():
            self._neg = not self._neg
        return self

    def iabs(self):
        """Absolute value in-place."""
        self._neg = False
        return self

    def itrunc(self):
        """Truncate towards zero in-place."""
        self._fraction.clear()
        return self._trim()

    def iscale(self, exponent):
        """Multiply in-place by 10 to the power of exponent."""
        if exponent > 0:
            self._shift_left(exponent)
        elif exponent < 0:
            self._shift_right(-exponent)
        return self

    scale_by_power_of_ten = iscale

    # in-place binary operations

    def iadd(self, rhs):
        """Add in-place."""
        rhs = self._coerce(rhs)
        if rhs is self:
            rhs = rhs.clone()
        if rhs.is_zero():
            return self
        subtract = self._neg != rhs._neg
        # for opposite signs, take the smaller magnitude from the larger
        # so that the borrow does not run off the top
        if subtract and self._abs_compare(rhs) == LESS:
            big, small, neg = rhs, self, rhs._neg
        else:
            big, small, neg = self, rhs, self._neg
        whole, fraction = self._whole, self._fraction
        # make both operands comparably sized
        top = max(whole.last, rhs._whole.last)
        bottom = max(fraction.last, rhs._fraction.last)
        whole.pad(top)
        fraction.pad(bottom)
        carry = 0
        for i in range(bottom, -1, -1):
            fraction[i], carry = _add_digits(
                big._fraction[i], small._fraction[i], carry, subtract
            )
        i = 0
        while carry or i <= top:
            if i >= whole.capacity():
                whole.grow(10)
            whole[i], carry = _add_digits(big._whole[i], small._whole[i], carry, subtract)
            i += 1
        self._neg = neg
        return self._trim()

    def isub(self, rhs):
        """Subtract in-place."""
        return self.iadd(self._coerce(rhs).clone().ineg())

    def imul(self, rhs):
        """Multiply in-place."""
        rhs = self._coerce(rhs)
        left, right = self._flat_digits(), rhs._flat_digits()
        decimals = len(self._fraction) + len(rhs._fraction)
        neg = self._neg != rhs._neg
        # run the outer loop over the shorter operand
        if len(left) < len(right):
            left, right = right, left
        product = bytearray(len(left) + len(right) + 2)
        for h, multiplier in enumerate(right):
            if not multiplier:
                continue
            carry = 0
            for m, digit in enumerate(left):
                carry, product[h+m] = divmod(product[h+m] + multiplier * digit + carry, 10)
            k = h + len(left)
            while carry:
                carry, product[k] = divmod(product[k] + carry, 10)
                k += 1
        # store as an integer and put the decimal point back
        self._neg = neg
        self._whole = DigitBuffer(product).trim()
        self._fraction = DigitBuffer()
        return self._shift_right(decimals)

    def idiv(self, rhs):
        """Divide in-place."""
        rhs = self._coerce(rhs)
        if rhs.is_zero():
            raise error.DivisionByZero()
        if self.is_zero():
            return self
        # stop a repeating expansion once the last quotient digit is this far out
        max_digits = max(
            self.division_digits(),
            len(self._whole) + len(self._fraction) + 2,
            len(rhs._whole) + len(rhs._fraction) + 2,
        )
        neg = self._neg != rhs._neg
        dividend = self.clone().iabs()
        divisor = rhs.clone().iabs()
        quotient = self.new()
        unit = self.new().from_int(1)
        # integer part: repeated subtraction, largest decimal scale first
        scale = 0
        while dividend.compare(divisor.clone().iscale(scale + 1)) != LESS:
            scale += 1
        for shift in range(scale, -1, -1):
            step = divisor.clone().iscale(shift)
            tick = unit.clone().iscale(shift)
            while dividend.compare(step) != LESS:
                dividend.iadd(step.clone().ineg())
                quotient.iadd(tick)
        # fractional part: bring down a zero whenever the remainder is too small
        while not dividend.is_zero() and len(unit._fraction) < max_digits:
            if dividend.compare(divisor) == LESS:
                dividend._shift_left(1)
                unit._shift_right(1)
            while dividend.compare(divisor) != LESS:
                dividend.iadd(divisor.clone().ineg())
                quotient.iadd(unit)
        if not dividend.is_zero():
            logging.debug(
                'Division of %s by %s truncated at %d fractional digits', self, rhs, max_digits
            )
        if neg:
            quotient.ineg()
        return self.copy_from(quotient)

    def ipow_int(self, expt):
        """Raise to integer power in-place."""
        if expt < 0:
            # may raise DivisionByZero, leaving us untouched
            inverse = self.new().from_int(1).idiv(self.clone().ipow_int(-expt))
            return self.copy_from(inverse)
        # exponentiation by squares
        result = self.new().from_int(1)
        base = self.clone()
        while expt:
            if expt & 1:
                result.imul(base)
            expt >>= 1
            if expt:
                base.imul(base)
        return self.copy_from(result)

    # operations returning a new value

    def neg(self):
        """Negated copy."""
        return self.clone().ineg()

    def abs(self):
        """Absolute value copy."""
        return self.clone().iabs()

    def scale(self, exponent):
        """Copy multiplied by 10 to the power of exponent."""
        return self.clone().iscale(exponent)

    def add(self, rhs):
        """Sum as new value."""
        return self.clone().iadd(rhs)

    def sub(self, rhs):
        """Difference as new value."""
        return self.clone().isub(rhs)

    def mul(self, rhs):
        """Product as new value."""
        return self.clone().imul(rhs)

    def div(self, rhs):
        """Quotient as new value."""
        return self.clone().idiv(rhs)

    # relations

    def compare(self, rhs):
        """Return LESS, EQUAL or GREATER."""
        rhs = self._coerce(rhs)
        if rhs is self:
            return EQUAL
        if self._neg != rhs._neg:
            return LESS if self._neg else GREATER
        result = self._abs_compare(rhs)
        return -result if self._neg else result

    def gt(self, rhs):
        """Greater than."""
        return self.compare(rhs) == GREATER

    def eq(self, rhs):
        """Equals."""
        return self.compare(rhs) == EQUAL

    ##########################################################################
    # Python operators

    __hash__ = None

    def __bool__(self):
        """Value is nonzero."""
        return not self.is_zero()

    def __int__(self):
        """Integer part."""
        return self.to_int()

    def __float__(self):
        """Nearest float."""
        return self.to_value()

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self.clone()

    def __abs__(self):
        return self.abs()

    def __eq__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        try:
            return self.compare(other) == EQUAL
        except (error.FormatError, error.UnsupportedVariantType):
            # not a number, so not equal to one
            return False

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.compare(other) == LESS

    def __le__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.compare(other) != GREATER

    def __gt__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.compare(other) == GREATER

    def __ge__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.compare(other) != LESS

    def __add__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self._coerce(other).clone().isub(self)

    def __mul__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self._coerce(other).clone().idiv(self)

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.clone().ipow_int(other)

    def __iadd__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.iadd(other)

    def __isub__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.isub(other)

    def __imul__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.imul(other)

    def __itruediv__(self, other):
        if not isinstance(other, CONVERTIBLE):
            return NotImplemented
        return self.idiv(other)

    ##########################################################################
    # implementation

    def _coerce(self, rhs):
        """Convert operand to Decimal with our settings."""
        return as_decimal(rhs, self._values)

    def _trim(self):
        """Remove insignificant zeros; zero is not negative."""
        self._whole.trim()
        self._fraction.trim()
        if self.is_zero():
            self._neg = False
        return self

    def _flat_digits(self):
        """All digits as one integer, least significant first."""
        return self._fraction.digits()[::-1] + self._whole.digits()

    def _shift_left(self, count):
        """Move the decimal point right by count positions."""
        # free up the lowest positions of the integer part
        self._whole.insert_front(count)
        # and fill them with the most significant fractional digits
        for i, digit in enumerate(self._fraction.take_front(count)):
            self._whole[count - i - 1] = digit
        return self._trim()

    def _shift_right(self, count):
        """Move the decimal point left by count positions."""
        # free up the highest positions of the fractional part
        self._fraction.insert_front(count)
        # and fill them with the least significant integer digits
        for i, digit in enumerate(self._whole.take_front(count)):
            self._fraction[count - i - 1] = digit
        return self._trim()

    def _abs_compare(self, rhs):
        """Compare absolute values of trimmed numbers."""
        # longer integer part is larger
        if self._whole.last != rhs._whole.last:
            return GREATER if self._whole.last > rhs._whole.last else LESS
        for i in range(self._whole.last, -1, -1):
            if self._whole[i] != rhs._whole[i]:
                return GREATER if self._whole[i] > rhs._whole[i] else LESS
        for i in range(min(self._fraction.last, rhs._fraction.last) + 1):
            if self._fraction[i] != rhs._fraction[i]:
                return GREATER if self._fraction[i] > rhs._fraction[i] else LESS
        # equal up to the shorter fraction: the longer one has more after that
        if self._fraction.last != rhs._fraction.last:
            return GREATER if self._fraction.last > rhs._fraction.last else LESS
        return EQUAL


# types that can be used where a Decimal operand is expected
CONVERTIBLE = (Decimal, int, float, str, bytes, bytearray, Variant)


def as_decimal(obj, values=None):
    """Convert a Python value or Variant to Decimal; a Decimal is returned as is."""
    if isinstance(obj, Decimal):
        return obj
    new = Decimal(values)
    if isinstance(obj, int):
        return new.from_int(obj)
    elif isinstance(obj, float):
        return new.from_value(obj)
    elif isinstance(obj, (str, bytes, bytearray)):
        return new.from_str(obj)
    elif isinstance(obj, Variant):
        return new.from_variant(obj)
    raise TypeError('%s cannot be converted to Decimal' % type(obj))


def _add_digits(left, right, carry, subtract):
    """Add or subtract one digit position, return digit and carry."""
    if subtract:
        # borrow ten up front, pay it back if we didn't need it
        digit = 10 + carry + left - right
        carry = -1
    else:
        digit = carry + left + right
        carry = 0
    if digit >= 10:
        carry += 1
        digit -= 10
    return digit, carry


##############################################################################
# convert string representation to decimal

def str_to_decimal(text):
    """
    Split a decimal representation into its parts.
    Returns sign, integer digits and fractional digits in reading order, and exponent.
    Raises FormatError if the representation is malformed.
    """
    if text is None:
        raise error.FormatError(error.EMPTY_STRING)
    if isinstance(text, (bytes, bytearray)):
        # anything outside ASCII will be rejected as non-numerical
        text = bytes(text).decode('latin-1')
    stripped = text.strip(BLANKS)
    if not stripped:
        raise error.FormatError(error.EMPTY_STRING, text)
    # report positions relative to the text as given
    offset = len(text) - len(text.lstrip(BLANKS))
    mantissa, exp10 = stripped, 0
    markers = [stripped.find(_c) for _c in EXPONENT_MARKERS if _c in stripped]
    if markers:
        split = min(markers)
        mantissa = stripped[:split]
        exp10 = _parse_exponent(stripped[split+1:], text, offset + split + 1)
    neg, whole, fraction = _parse_mantissa(mantissa, text, offset)
    return neg, whole, fraction, exp10

def _parse_mantissa(mantissa, text, offset):
    """Parse sign, digits and decimal point."""
    neg, found_point = False, False
    whole, fraction = bytearray(), bytearray()
    for pos, c in enumerate(mantissa):
        if c == u'-':
            if pos != 0:
                raise error.FormatError(error.MISPLACED_SIGN, text, offset + pos)
            neg = True
        elif c == u'.':
            if found_point:
                raise error.FormatError(error.MULTIPLE_POINTS, text, offset + pos)
            found_point = True
        elif c in DIGITS:
            if found_point:
                fraction.append(ord(c) - ord(u'0'))
            else:
                whole.append(ord(c) - ord(u'0'))
        else:
            raise error.FormatError(error.BAD_CHARACTER, text, offset + pos)
    if not whole and not fraction:
        raise error.FormatError(error.NO_DIGITS, text)
    return neg, whole, fraction

def _parse_exponent(exponent, text, offset):
    """Parse signed integer exponent."""
    neg = exponent[:1] == u'-'
    digits = exponent[1:] if exponent[:1] in (u'+', u'-') else exponent
    if not digits:
        raise error.FormatError(error.BAD_EXPONENT, text, offset)
    for pos, c in enumerate(digits):
        if c not in DIGITS:
            raise error.FormatError(error.BAD_EXPONENT, text, offset + pos + len(exponent) - len(digits))
    exp10 = int(digits)
    return -exp10 if neg else exp10
