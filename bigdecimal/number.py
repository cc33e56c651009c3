#
# An implementation of arbitrary-precision decimal arithmetic
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

import logging
from collections import namedtuple
from decimal import Decimal
from enum import IntEnum
from fractions import Fraction
from math import gcd, isinf, isnan, isqrt

from .context import (
    get_context, check_precision, check_rounding, power_of_ten,
    ROUND_CEILING, ROUND_FLOOR, ROUND_DOWN, ROUND_HALF_EVEN, ROUND_UNNECESSARY,
)
from .errors import DivisionByZero, ParseError, InvalidArgument, ConversionOverflow
from .floats import IEEEsingle, IEEEdouble, exact_string, FLOAT_SENTINELS
from .rounding import (
    MAX_SCALE, MIN_SCALE, range_checked_scale, digit_count, round_to_scale, round_to_digits,
    remove_trailing_zeros,
)
from .text import InvariantSettings, parse_parts, digits_to_int, int_to_digits

__all__ = ('BigDecimal', 'Compare', 'compare_any', 'MinusOne', 'Zero', 'One', 'Two', 'Ten',
           'Half', 'OneTenth', 'INT32_MIN', 'INT32_MAX', 'UINT32_MAX', 'INT64_MIN',
           'INT64_MAX', 'UINT64_MAX')

logger = logging.getLogger(__name__)


# Four-way result of the compare() operation.  UNORDERED only arises comparing with NaNs
# of other types.
class Compare(IntEnum):
    LESS_THAN = 0
    EQUAL = 1
    GREATER_THAN = 2
    UNORDERED = 3


# Fixed-width integer ranges for conversions
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT32_MAX = (1 << 32) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

# Extra digits a division calculates beyond those requested
DIVIDE_SLACK_DIGITS = 4


def _rounding(rounding, context):
    if rounding is None:
        return (context or get_context()).rounding
    return check_rounding(rounding)


def _precision(precision, context):
    if precision is None:
        return (context or get_context()).precision
    return check_precision(precision)


class BigDecimal(namedtuple('BigDecimal', 'unscaled scale')):
    '''An immutable decimal number of arbitrary precision.

    The value is unscaled * 10^-scale, where unscaled is an integer of any size and scale
    lies in [MIN_SCALE, MAX_SCALE].  A positive scale is the number of digits after the
    decimal point; a negative scale multiplies by that many trailing zeros.

    Many pairs represent the same number: 1.79 is (179, 2) and 1.790000 is (1790000, 6).
    The pair is preserved by operations, so it records the precision a value was computed
    with, but comparisons and hashes are by value, so the two compare equal.

    Operations that round take optional precision and rounding arguments.  If omitted
    the values in the context are used, and if that is omitted the process-wide context.
    '''

    def __new__(cls, unscaled=0, scale=0):
        '''Validate and create a decimal number unscaled * 10^-scale.'''
        if not isinstance(unscaled, int):
            raise TypeError('unscaled must be an integer')
        if not isinstance(scale, int):
            raise TypeError('scale must be an integer')
        range_checked_scale(scale)
        return super().__new__(cls, unscaled, scale)

    ##
    ## Constructors
    ##

    @classmethod
    def from_int(cls, value, scale=0):
        '''Return value * 10^-scale.'''
        if not isinstance(value, int):
            raise TypeError('from_int requires an integer')
        return cls(value, scale)

    @classmethod
    def try_parse(cls, text, settings=None):
        '''Return the number text represents, or None if it is not valid.  settings is an
        optional FormatSettings instance giving the separators.'''
        parts = parse_parts(text, settings)
        if parts is None:
            return None
        return cls(*parts)

    @classmethod
    def parse(cls, text, settings=None):
        '''As for try_parse() but raise ParseError if text is not valid.'''
        result = cls.try_parse(text, settings)
        if result is None:
            raise ParseError(text)
        return result

    @classmethod
    def from_string(cls, text, settings=None):
        '''Convert a string to a decimal number, raising ParseError if it is not valid.'''
        return cls.parse(text, settings)

    @classmethod
    def from_float(cls, value):
        '''Return the exact value of a float.  NaNs and infinities raise InvalidArgument.'''
        if not isinstance(value, float):
            raise TypeError('from_float requires a float')
        text = exact_string(value)
        if text in FLOAT_SENTINELS:
            raise InvalidArgument(f'cannot convert {text} to a decimal number')
        return cls.parse(text)

    @classmethod
    def from_single(cls, value):
        '''Return the exact value of a float after rounding it to IEEE single precision.'''
        return cls.from_float(cls.from_float(value).to_single())

    @classmethod
    def from_decimal(cls, value):
        '''Return the value of a decimal.Decimal, preserving its exponent.'''
        if not isinstance(value, Decimal):
            raise TypeError('from_decimal requires a Decimal instance')
        if not value.is_finite():
            raise InvalidArgument(f'cannot convert {value} to a decimal number')
        sign, digits, exponent = value.as_tuple()
        unscaled = digits_to_int(''.join(map(str, digits)))
        return cls(-unscaled if sign else unscaled, -exponent)

    @classmethod
    def from_value(cls, value):
        '''Return a decimal number derived from value.  Values of type int, float, str and
        Decimal are passed on to from_int, from_float, from_string and from_decimal
        respectively.'''
        if isinstance(value, BigDecimal):
            return value
        converter = _converters.get(type(value))
        if not converter:
            raise TypeError(f'from_value cannot convert values of type {type(value)}')
        return converter(value)

    ##
    ## Non-computational operations
    ##

    def sign(self):
        '''Return -1, 0 or 1.'''
        if self.unscaled < 0:
            return -1
        return 1 if self.unscaled else 0

    def is_zero(self):
        return self.unscaled == 0

    def is_negative(self):
        return self.unscaled < 0

    def precision(self):
        '''Return the number of significant digits.  Zero has precision 1.'''
        return digit_count(self.unscaled)

    def adjusted_exponent(self):
        '''Return the power of ten of the leading digit.'''
        return digit_count(self.unscaled) - 1 - self.scale

    def ulp(self):
        '''Return a unit in the last place: 10^-scale.'''
        return BigDecimal(1, self.scale)

    def as_integer_ratio(self):
        '''Return a pair (n, d) of integers that represent the number as a fraction in lowest
        terms and with a positive denominator.'''
        if self.scale <= 0:
            return self.unscaled * power_of_ten(-self.scale), 1
        numerator, denominator = self.unscaled, power_of_ten(self.scale)
        divisor = gcd(numerator, denominator)
        return numerator // divisor, denominator // divisor

    def negate(self):
        return BigDecimal(-self.unscaled, self.scale)

    def copy_abs(self):
        if self.unscaled < 0:
            return self.negate()
        return self

    ##
    ## Rounding
    ##

    def round_to_scale(self, new_scale, rounding=None, context=None):
        '''Return the number at new_scale, rounding if digits are lost.'''
        rounding = _rounding(rounding, context)
        unscaled = round_to_scale(self.unscaled, self.scale, new_scale, rounding)
        return BigDecimal(unscaled, new_scale)

    def round_to(self, digits, rounding=None, context=None):
        '''Round to a multiple of 10^digits, so round_to(-2) keeps two decimal places.'''
        return self.round_to_scale(-digits, rounding, context)

    def round_to_precision(self, precision, context=None):
        '''Return the number with the given number of significant digits, rounding with the
        context's rounding mode if digits are lost and extending the scale otherwise.'''
        precision = check_precision(precision)
        return self.round_to_scale(self.scale + precision - self.precision(), None, context)

    def remove_trailing_zeros(self, target_scale=0):
        '''Return the same number with trailing zeros removed, but with a scale no lower than
        target_scale.'''
        return BigDecimal(*remove_trailing_zeros(self.unscaled, self.scale, target_scale))

    def int_part(self):
        '''Return the integer part, truncated towards zero, at scale 0.'''
        return self.round_to_scale(0, ROUND_DOWN)

    def frac(self):
        '''Return the absolute value of the fractional part.'''
        return self.subtract(self.int_part()).copy_abs()

    ##
    ## Conversions
    ##

    def convert_to_integer(self, min_int, max_int, rounding=None, context=None):
        '''Return the number rounded to an integer in the inclusive range [min_int, max_int].
        If min_int == max_int == 0 the integers are unbounded.  Raises ConversionOverflow if
        the rounded value is out of range.
        '''
        if not (isinstance(min_int, int) and isinstance(max_int, int)):
            raise TypeError('min_int and max_int must be integers')
        if not min_int <= 0 <= max_int:
            raise ValueError('zero must lie between min_int and max_int')
        rounding = _rounding(rounding, context)
        result = round_to_scale(self.unscaled, self.scale, 0, rounding)
        if min_int != max_int and not min_int <= result <= max_int:
            raise ConversionOverflow(f'{self} does not fit in [{min_int:,d}, {max_int:,d}]')
        return result

    def to_int32(self):
        '''Return the value truncated to a signed 32-bit integer.'''
        return self.convert_to_integer(INT32_MIN, INT32_MAX, ROUND_DOWN)

    def to_uint32(self):
        '''Return the value truncated to an unsigned 32-bit integer.'''
        return self.convert_to_integer(0, UINT32_MAX, ROUND_DOWN)

    def to_int64(self):
        '''Return the value truncated to a signed 64-bit integer.'''
        return self.convert_to_integer(INT64_MIN, INT64_MAX, ROUND_DOWN)

    def to_uint64(self):
        '''Return the value truncated to an unsigned 64-bit integer.'''
        return self.convert_to_integer(0, UINT64_MAX, ROUND_DOWN)

    def round_to_int(self, rounding=None, context=None):
        '''Return the value rounded to a signed 64-bit integer.'''
        return self.convert_to_integer(INT64_MIN, INT64_MAX, rounding, context)

    def trunc(self):
        return self.to_int64()

    def to_float(self):
        '''Return the nearest double, rounding ties to even.  Values beyond the range of a
        double become infinities.'''
        return IEEEdouble.decimal_to_float(self.unscaled, self.scale)

    def to_single(self):
        '''Return the nearest IEEE single value, rounding ties to even, as a float.'''
        return IEEEsingle.decimal_to_float(self.unscaled, self.scale)

    def to_decimal(self):
        '''Return an equal decimal.Decimal with the same exponent.'''
        digits = tuple(int(digit) for digit in int_to_digits(abs(self.unscaled)))
        return Decimal((int(self.unscaled < 0), digits, -self.scale))

    def to_string(self, settings=None, context=None):
        '''Return the number in plain notation when it has a non-negative scale and is not
        too small, otherwise in scientific notation.  parse() recovers the exact pair.'''
        settings = settings or InvariantSettings
        delimiter = (context or get_context()).exponent_delimiter
        return settings.format_decimal(self.unscaled < 0, int_to_digits(abs(self.unscaled)),
                                       self.scale, delimiter)

    def to_plain_string(self, settings=None):
        '''Return the number without an exponent.'''
        settings = settings or InvariantSettings
        return settings.format_plain(self.unscaled < 0, int_to_digits(abs(self.unscaled)),
                                     self.scale)

    ##
    ## Arithmetic
    ##

    def add(self, rhs):
        '''Return the exact sum.  Its scale is the larger of the operand scales, except that
        adding zero returns the other operand unchanged.'''
        if not rhs.unscaled:
            return self
        if not self.unscaled:
            return rhs
        if self.scale > rhs.scale:
            return BigDecimal(self.unscaled + rhs.unscaled * power_of_ten(self.scale - rhs.scale),
                              self.scale)
        return BigDecimal(self.unscaled * power_of_ten(rhs.scale - self.scale) + rhs.unscaled,
                          rhs.scale)

    def subtract(self, rhs):
        '''Return the exact difference.'''
        return self.add(rhs.negate())

    def multiply(self, rhs):
        '''Return the exact product.  Its scale is the sum of the operand scales.'''
        return BigDecimal(self.unscaled * rhs.unscaled, self.scale + rhs.scale)

    def sqr(self):
        return self.multiply(self)

    def divide(self, rhs, precision=None, rounding=None, context=None):
        '''Return self / rhs rounded to at most precision significant digits.

        The preferred scale of the result is self.scale - rhs.scale; trailing zeros are
        removed down to that scale.  Raises DivisionByZero if rhs is zero.
        '''
        precision = _precision(precision, context)
        rounding = _rounding(rounding, context)
        if not rhs.unscaled:
            raise DivisionByZero(f'division of {self} by zero')
        target_scale = self.scale - rhs.scale
        if not self.unscaled:
            return BigDecimal(0, target_scale)

        sign = (self.unscaled < 0) != (rhs.unscaled < 0)
        lhs_mag, rhs_mag = abs(self.unscaled), abs(rhs.unscaled)

        # Scale the dividend so the quotient has a few more digits than required
        multiplier = precision + digit_count(rhs_mag) - digit_count(lhs_mag) + DIVIDE_SLACK_DIGITS
        multiplier = max(MIN_SCALE, min(multiplier, MAX_SCALE))
        if multiplier >= 0:
            quotient, remainder = divmod(lhs_mag * power_of_ten(multiplier), rhs_mag)
        else:
            quotient, remainder = divmod(lhs_mag, rhs_mag * power_of_ten(-multiplier))
        scale = target_scale + multiplier

        # The quotient has more digits than will be kept.  A non-zero remainder becomes a
        # final 1 digit so rounding knows something non-zero was lost.
        if remainder:
            quotient = quotient * 10 + 1
            scale += 1
        if sign:
            quotient = -quotient

        # Intermediate scales may lie outside the valid range; only the result is checked
        quotient, scale = round_to_digits(quotient, scale, precision, rounding)
        quotient, scale = remove_trailing_zeros(quotient, scale, target_scale)
        return BigDecimal(quotient, scale)

    def reciprocal(self, precision=None, rounding=None, context=None):
        '''Return 1 / self rounded to precision significant digits.'''
        return One.divide(self, precision, rounding, context)

    def int_divide(self, rhs):
        '''Return the integer part of self / rhs, truncated towards zero.  The preferred
        scale of the result is self.scale - rhs.scale.'''
        if not rhs.unscaled:
            raise DivisionByZero(f'integer division of {self} by zero')
        target_scale = self.scale - rhs.scale
        if self.copy_abs().compare(rhs.copy_abs()) == Compare.LESS_THAN:
            return BigDecimal(0, target_scale)

        # Enough precision that the integer part is calculated exactly
        precision = range_checked_scale(self.precision() + 3 * rhs.precision()
                                        + abs(target_scale) + 3)
        result = self.divide(rhs, precision, ROUND_DOWN)
        if result.scale > 0:
            result = result.round_to_scale(0, ROUND_DOWN)
            result = result.remove_trailing_zeros(target_scale)
        if result.scale < target_scale:
            result = result.round_to_scale(target_scale, ROUND_UNNECESSARY)
        return result

    def remainder(self, rhs):
        '''Return self - self.int_divide(rhs) * rhs.  The result has the sign of self.'''
        return self.subtract(self.int_divide(rhs).multiply(rhs))

    def divmod(self, rhs):
        '''Return the pair (int_divide, remainder).'''
        quotient = self.int_divide(rhs)
        return quotient, self.subtract(quotient.multiply(rhs))

    def sqrt(self, precision=None, context=None):
        '''Return the square root rounded to precision significant digits with the context's
        rounding mode.  Raises InvalidArgument if the number is negative.

        An integer square root of the scaled-up unscaled value is a good first guess.  It
        is refined by Newton-Raphson iteration until its square is within half a unit of
        10^-precision of the number.
        '''
        precision = _precision(precision, context)
        rounding = _rounding(None, context)
        if self.unscaled < 0:
            raise InvalidArgument(f'square root of negative number {self}')

        # The multiplier makes the scale even so it can be halved exactly
        multiplier = range_checked_scale(precision - self.precision() + 1)
        if (multiplier + self.scale) & 1:
            multiplier -= 1
        if multiplier >= 0:
            seed = isqrt(self.unscaled * power_of_ten(multiplier))
        else:
            seed = isqrt(self.unscaled // power_of_ten(-multiplier))
        result = BigDecimal(seed, range_checked_scale(self.scale + multiplier) >> 1)

        epsilon = Half.multiply(BigDecimal(1, precision))
        # The quotients must be precise enough for the square to get within epsilon
        divide_precision = 2 * precision + max(0, self.adjusted_exponent()) + 2
        iterations = 0
        while result.sqr().subtract(self).copy_abs().compare(epsilon) != Compare.LESS_THAN:
            quotient = self.divide(result, divide_precision, ROUND_HALF_EVEN)
            result = Half.multiply(result.add(quotient))
            iterations += 1
        logger.debug('square root to %d digits took %d iterations', precision, iterations)

        digits = result.precision()
        if digits > precision:
            unscaled, scale = round_to_digits(result.unscaled, result.scale, precision, rounding)
        else:
            scale = range_checked_scale(result.scale + precision - digits)
            unscaled = round_to_scale(result.unscaled, result.scale, scale, rounding)
        unscaled, scale = remove_trailing_zeros(unscaled, scale,
                                                min(self.scale, self.scale // 2))
        return BigDecimal(unscaled, scale)

    ##
    ## Comparisons
    ##

    def compare(self, rhs):
        '''Return self vs rhs as one of the Compare constants.  Only the values are compared,
        not the scales.'''
        lhs_sign, rhs_sign = self.sign(), rhs.sign()
        if lhs_sign != rhs_sign or lhs_sign == 0:
            return _compare_ints(lhs_sign, rhs_sign)

        # Different adjusted exponents decide without aligning the scales
        lhs_exp, rhs_exp = self.adjusted_exponent(), rhs.adjusted_exponent()
        if lhs_exp != rhs_exp:
            if lhs_sign < 0:
                return _compare_ints(rhs_exp, lhs_exp)
            return _compare_ints(lhs_exp, rhs_exp)

        if self.scale > rhs.scale:
            return _compare_ints(self.unscaled,
                                 rhs.unscaled * power_of_ten(self.scale - rhs.scale))
        return _compare_ints(self.unscaled * power_of_ten(rhs.scale - self.scale),
                             rhs.unscaled)

    def max(self, rhs):
        '''Return the larger of self and rhs; rhs if they are equal.'''
        return self if self.compare(rhs) == Compare.GREATER_THAN else rhs

    def min(self, rhs):
        '''Return the smaller of self and rhs; rhs if they are equal.'''
        return self if self.compare(rhs) == Compare.LESS_THAN else rhs

    ##
    ## Python operators
    ##

    def __repr__(self):
        return f"BigDecimal('{self.to_string()}')"

    def __str__(self):
        return self.to_string()

    def __abs__(self):
        return self.copy_abs()

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __eq__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare == Compare.EQUAL

    def __ne__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare != Compare.EQUAL

    def __lt__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare == Compare.LESS_THAN

    def __le__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare in (Compare.EQUAL, Compare.LESS_THAN)

    def __ge__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare in (Compare.EQUAL, Compare.GREATER_THAN)

    def __gt__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare == Compare.GREATER_THAN

    def __bool__(self):
        return bool(self.unscaled)

    def __int__(self):
        # Same as __trunc__
        return self.convert_to_integer(0, 0, ROUND_DOWN)

    def __float__(self):
        return self.to_float()

    def __trunc__(self):
        return self.convert_to_integer(0, 0, ROUND_DOWN)

    def __floor__(self):
        return self.convert_to_integer(0, 0, ROUND_FLOOR)

    def __ceil__(self):
        return self.convert_to_integer(0, 0, ROUND_CEILING)

    def __round__(self, ndigits=None):
        '''If ndigits is None, round to an integer under ROUND_HALF_EVEN.  Otherwise round to
        ndigits decimal places with ROUND_HALF_EVEN and the result is a BigDecimal.
        '''
        if ndigits is None:
            return self.convert_to_integer(0, 0, ROUND_HALF_EVEN)
        if not isinstance(ndigits, int):
            raise TypeError('ndigits must be an integer')
        return self.round_to_scale(ndigits, ROUND_HALF_EVEN)

    def __add__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.remainder(other)

    def __floordiv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.int_divide(other)

    def __divmod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.divmod(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __rsub__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __rtruediv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __rmod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.remainder(self)

    def __rfloordiv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.int_divide(self)

    def __rdivmod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.divmod(self)

    def __hash__(self):
        '''Python hash.  Must hash equally to other types with the same value.'''
        if self.scale <= 0:
            return hash(self.unscaled * power_of_ten(-self.scale))
        return hash(Fraction(*self.as_integer_ratio()))


def _compare_ints(lhs, rhs):
    if lhs < rhs:
        return Compare.LESS_THAN
    if lhs > rhs:
        return Compare.GREATER_THAN
    return Compare.EQUAL


def convert_for_arith(value):
    '''Convert value to something capable of doing arithmetic with a BigDecimal.

    BigDecimal values are returned unmodified.  Python ints, floats and Decimals are
    converted exactly; non-finite floats and Decimals raise InvalidArgument.  Otherwise
    None is returned.
    '''
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, int):
        return BigDecimal(int(value))
    if isinstance(value, float):
        return BigDecimal.from_float(value)
    if isinstance(value, Decimal):
        return BigDecimal.from_decimal(value)
    return None


def compare_any(value, other):
    '''LHS is a BigDecimal.  RHS is any type.  Returns None for types that cannot be
    compared.'''
    if isinstance(other, BigDecimal):
        return value.compare(other)
    if isinstance(other, int):
        return value.compare(BigDecimal(int(other)))
    if isinstance(other, float):
        if isnan(other):
            return Compare.UNORDERED
        if isinf(other):
            return Compare.LESS_THAN if other > 0 else Compare.GREATER_THAN
        return value.compare(BigDecimal.from_float(other))
    if isinstance(other, Decimal):
        # Deal with infinites and NaNs only here.  Let finite decimals fall through.
        if other.is_nan():
            return Compare.UNORDERED
        if other.is_infinite():
            return Compare.GREATER_THAN if other.is_signed() else Compare.LESS_THAN
        return value.compare(BigDecimal.from_decimal(other))
    if isinstance(other, Fraction):
        # Compare both sides as fractions; denominators are positive
        a, b = value.as_integer_ratio()
        return _compare_ints(a * other.denominator, b * other.numerator)
    return None


_converters = {
    int: BigDecimal.from_int,
    float: BigDecimal.from_float,
    str: BigDecimal.from_string,
    Decimal: BigDecimal.from_decimal,
}


MinusOne = BigDecimal(-1)
Zero = BigDecimal(0)
One = BigDecimal(1)
Two = BigDecimal(2)
Ten = BigDecimal(10)
Half = BigDecimal(5, 1)
OneTenth = BigDecimal(1, 1)
