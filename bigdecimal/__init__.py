#
# An implementation of arbitrary-precision decimal arithmetic
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

from .context import *
from .errors import *
from .floats import *
from .number import *
from .rounding import *
from .text import *

from . import context, errors, floats, number, rounding, text

__all__ = (context.__all__ + errors.__all__ + floats.__all__ + number.__all__
           + rounding.__all__ + text.__all__)

__version__ = '1.0'
