#
# An implementation of arbitrary-precision decimal arithmetic
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#
# Rounding is done throughout with the remainder of a division by a power of ten rather
# than with guard and sticky digits.  Division truncates, so ROUND_UP, ROUND_DOWN,
# ROUND_CEILING and ROUND_FLOOR only need to know if the remainder is non-zero.  The
# round-to-nearest modes compare twice the remainder with the divisor: if greater the
# quotient is incremented, if equal the rounding mode settles the tie.
#

from .context import (
    power_of_ten, ROUND_CEILING, ROUND_FLOOR, ROUND_DOWN, ROUND_UP, ROUND_HALF_EVEN,
    ROUND_HALF_UP, ROUND_HALF_DOWN, ROUND_UNNECESSARY,
)
from .errors import Overflow, Underflow, RoundingRequired

__all__ = ('MAX_SCALE', 'MIN_SCALE', 'range_checked_scale', 'digit_count',
           'LF_EXACTLY_ZERO', 'LF_LESS_THAN_HALF', 'LF_EXACTLY_HALF', 'LF_MORE_THAN_HALF',
           'lost_fraction', 'round_up', 'divide_rounded', 'round_to_scale',
           'round_to_digits', 'remove_trailing_zeros')


# The scale is limited to what the unscaled value of the largest number could need: 2^31
# - 1 bytes of 4-byte limbs.
MAX_SCALE = (2 ** 31 - 1) // 4
MIN_SCALE = -MAX_SCALE - 1

# When digits are lost by a division these indicate what fraction of the last kept
# digit the remainder represents.
LF_EXACTLY_ZERO = 0
LF_LESS_THAN_HALF = 1
LF_EXACTLY_HALF = 2
LF_MORE_THAN_HALF = 3

# floor(log10(2) * 2^32)
LOG10_2_SCALED = 1292913986


def range_checked_scale(scale):
    '''Return scale if it is representable.  Raises Underflow if it is too large and Overflow
    if it is too small.'''
    if scale > MAX_SCALE:
        raise Underflow(f'scale {scale:,d} exceeds the maximum of {MAX_SCALE:,d}')
    if scale < MIN_SCALE:
        raise Overflow(f'scale {scale:,d} is below the minimum of {MIN_SCALE:,d}')
    return scale


def digit_count(value):
    '''Return the number of decimal digits of the magnitude of an integer.  Zero has one
    digit.'''
    value = abs(value)
    # The estimate from the bit length is never more than the true count
    digits = (value.bit_length() * LOG10_2_SCALED) >> 32
    while power_of_ten(digits) <= value:
        digits += 1
    return max(digits, 1)


def lost_fraction(remainder, divisor):
    '''Return the LF_ constant describing remainder / divisor, where 0 <= remainder <
    divisor.'''
    if remainder == 0:
        return LF_EXACTLY_ZERO
    twice = remainder + remainder
    if twice < divisor:
        return LF_LESS_THAN_HALF
    if twice == divisor:
        return LF_EXACTLY_HALF
    return LF_MORE_THAN_HALF


def round_up(rounding, lost_fraction, sign, is_odd):
    '''Return True if, when an operation is inexact, the result should be rounded up (i.e.,
    away from zero by incrementing the magnitude of the quotient).

    sign is True if the number is negative, and is_odd indicates if the last digit of the
    truncated quotient is odd, which is needed for ties-to-even rounding.  Raises
    RoundingRequired for ROUND_UNNECESSARY if anything was lost.
    '''
    if lost_fraction == LF_EXACTLY_ZERO:
        return False

    if rounding == ROUND_HALF_EVEN:
        if lost_fraction == LF_EXACTLY_HALF:
            return bool(is_odd)
        else:
            return lost_fraction == LF_MORE_THAN_HALF
    elif rounding == ROUND_CEILING:
        return not sign
    elif rounding == ROUND_FLOOR:
        return bool(sign)
    elif rounding == ROUND_DOWN:
        return False
    elif rounding == ROUND_UP:
        return True
    elif rounding == ROUND_HALF_DOWN:
        return lost_fraction == LF_MORE_THAN_HALF
    elif rounding == ROUND_HALF_UP:
        return lost_fraction != LF_LESS_THAN_HALF
    elif rounding == ROUND_UNNECESSARY:
        raise RoundingRequired('rounding necessary but ROUND_UNNECESSARY was requested')
    raise ValueError(f'unknown rounding mode: {rounding!r}')


def divide_rounded(magnitude, divisor, sign, rounding):
    '''Return the quotient magnitude / divisor rounded to an integer.  Both arguments are
    non-negative; sign is True if the value being rounded is negative.'''
    quotient, remainder = divmod(magnitude, divisor)
    if round_up(rounding, lost_fraction(remainder, divisor), sign, quotient & 1):
        quotient += 1
    return quotient


def round_to_scale(unscaled, scale, new_scale, rounding):
    '''Return the unscaled value of unscaled * 10^-scale at new_scale.

    Reducing the scale divides by a power of ten and rounds.  Increasing it multiplies by
    a power of ten which is exact.
    '''
    difference = range_checked_scale(scale - new_scale)
    if difference > 0:
        sign = unscaled < 0
        magnitude = abs(unscaled)
        if difference > digit_count(magnitude):
            # Everything is lost, and it is less than half of the divisor.  Avoid
            # calculating a huge power of ten.
            lost = LF_LESS_THAN_HALF if magnitude else LF_EXACTLY_ZERO
            quotient = int(round_up(rounding, lost, sign, False))
        else:
            quotient = divide_rounded(magnitude, power_of_ten(difference), sign, rounding)
        return -quotient if sign else quotient
    if difference < 0:
        return unscaled * power_of_ten(-difference)
    return unscaled


def round_to_digits(unscaled, scale, precision, rounding):
    '''Return a pair (unscaled, scale) with at most precision significant digits.  Values
    with no more digits than that are returned unchanged.  The scale is not range
    checked.'''
    digits = digit_count(unscaled)
    if digits <= precision:
        return unscaled, scale
    new_scale = scale + precision - digits
    unscaled = round_to_scale(unscaled, scale, new_scale, rounding)
    # Rounding up 99...9 carries into a new digit; the last digit is then a zero
    if digit_count(unscaled) > precision:
        unscaled //= 10
        new_scale -= 1
    return unscaled, new_scale


def remove_trailing_zeros(unscaled, scale, target_scale):
    '''Return a pair (unscaled, scale) of equal value with as many trailing zeros removed as
    possible, but with scale no lower than target_scale.

    The number of removable zeros is found by a binary search over the scales in
    [target_scale, scale], each probe dividing by a power of ten.  This is much faster
    than dividing by ten repeatedly when there are many zeros.
    '''
    if target_scale >= scale:
        return unscaled, scale

    sign = unscaled < 0
    value = abs(unscaled)
    low, high = target_scale, scale
    while high > low:
        middle = (low + high) // 2
        if value & 1:
            # Odd numbers are not divisible by ten
            low = middle + 1
            continue
        quotient, remainder = divmod(value, power_of_ten(scale - middle))
        if remainder == 0:
            # The zeros are gone; try removing more to the left
            value = quotient
            scale = high = middle
        else:
            low = middle + 1

    return (-value if sign else value), scale
