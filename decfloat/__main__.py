"""
decfloat - arbitrary-precision decimal numbers

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .main import main

main()
