"""
decfloat - values package
Decimal values and conversions

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from . import digits
from . import variant
from . import numbers
from . import values
from . import shared

from .digits import DigitBuffer
from .variant import Variant
from .numbers import *
from .values import *
from .shared import *
