"""
decfloat - digits.py
Growable decimal digit buffers

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

# a number is stored as two of these buffers:
#
# integer part:     position 0 = units, increasing positions increase magnitude
#                   last = index of the most significant digit (MSD)
# fractional part:  position 0 = tenths, increasing positions decrease magnitude
#                   last = index of the least significant digit (LSD)
#
# in both cases the buffer grows away from the decimal point, so that moving
# the point is a matter of inserting or removing positions at the front.
#
# storage may extend beyond the last significant position; those positions
# are kept at zero so that they can be declared significant without clearing.


class DigitBuffer(object):
    """Ordered, growable sequence of decimal digits."""

    def __init__(self, digits=(), last=None):
        """Initialise the buffer."""
        self._digits = bytearray(digits)
        if any(_d > 9 for _d in self._digits):
            raise ValueError('%r is not a sequence of decimal digits' % (digits,))
        if last is None:
            last = len(self._digits) - 1
        if not (-1 <= last < max(1, len(self._digits))):
            raise ValueError('index %d out of range for %d digits' % (last, len(self._digits)))
        self.last = last
        # clear anything above the last significant digit
        self._digits[last+1:] = bytes(len(self._digits) - last - 1)

    def __repr__(self):
        """String representation for debugging."""
        return 'DigitBuffer[%s|%d]' % (
            ''.join('%d' % _d for _d in self._digits[:self.last+1]), self.last
        )

    def __len__(self):
        """Number of significant digits."""
        return self.last + 1

    def __eq__(self, other):
        """Significant digits are equal."""
        if not isinstance(other, DigitBuffer):
            return NotImplemented
        return self.digits() == other.digits()

    def __ne__(self, other):
        """Significant digits differ."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __getitem__(self, index):
        """Digit at a position; positions beyond storage read as zero."""
        if index < 0:
            raise IndexError('negative digit position %d' % (index,))
        if index >= len(self._digits):
            return 0
        return self._digits[index]

    def __setitem__(self, index, digit):
        """Set digit at a position, growing as needed."""
        if index < 0:
            raise IndexError('negative digit position %d' % (index,))
        if not 0 <= digit <= 9:
            raise ValueError('%r is not a decimal digit' % (digit,))
        self.ensure(index + 1)
        self._digits[index] = digit
        if index > self.last:
            self.last = index

    def capacity(self):
        """Number of positions in storage."""
        return len(self._digits)

    def is_empty(self):
        """Buffer holds no significant digits."""
        return self.last < 0

    def digits(self):
        """Significant digits in position order."""
        return bytes(self._digits[:self.last+1])

    def clone(self):
        """Create a copy."""
        return DigitBuffer(self._digits[:self.last+1])

    def copy_from(self, other):
        """Copy another buffer into this one."""
        self._digits[:] = other._digits[:other.last+1]
        self.last = other.last
        return self

    def clear(self):
        """Remove all digits."""
        self._digits[:] = b''
        self.last = -1
        return self

    def ensure(self, size):
        """Grow storage with zeros to at least the given number of positions."""
        if size > len(self._digits):
            self._digits.extend(bytes(size - len(self._digits)))
        return self

    def grow(self, count):
        """Grow storage by a number of zero positions."""
        self._digits.extend(bytes(count))
        return self

    def pad(self, last):
        """Declare all positions up to and including last significant."""
        if last > self.last:
            self.ensure(last + 1)
            self.last = last
        return self

    def insert_front(self, count):
        """Insert zero positions at the front, moving all digits up."""
        if count > 0:
            self._digits[0:0] = bytes(count)
            self.last += count
        return self

    def take_front(self, count):
        """Remove up to count significant digits from the front and return them."""
        count = min(count, self.last + 1)
        taken = bytes(self._digits[:count])
        del self._digits[:count]
        self.last -= count
        return taken

    def trim(self):
        """Remove insignificant zeros at the top."""
        while self.last >= 0 and self._digits[self.last] == 0:
            self.last -= 1
        # keep storage beyond the last digit zeroed
        del self._digits[self.last+1:]
        return self
