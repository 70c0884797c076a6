"""
decfloat - variant.py
Tagged external values

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

# variant types
STRING = 'string'
NUMBER = 'number'
DATE = 'date'
TABLE = 'table'
TIME_SERIES = 'time-series'
LIST = 'list'

TYPES = (STRING, NUMBER, DATE, TABLE, TIME_SERIES, LIST)


class Variant(object):
    """Value tagged with its type, as handed over by external code."""

    STRING = STRING
    NUMBER = NUMBER
    DATE = DATE
    TABLE = TABLE
    TIME_SERIES = TIME_SERIES
    LIST = LIST

    def __init__(self, type, value=None):
        """Initialise the variant."""
        if type not in TYPES:
            raise ValueError('%r is not a variant type' % (type,))
        self.type = type
        self.value = value

    def __repr__(self):
        """String representation for debugging."""
        return 'Variant[%s %r]' % (self.type, self.value)

    @classmethod
    def string(cls, value):
        """Create a string variant."""
        return cls(STRING, value)

    @classmethod
    def number(cls, value):
        """Create a number variant."""
        return cls(NUMBER, value)

    def is_numeric(self):
        """Variant holds a number."""
        return self.type == NUMBER

    def is_string(self):
        """Variant holds a string."""
        return self.type == STRING
