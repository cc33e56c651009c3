#
# An implementation of arbitrary-precision decimal arithmetic
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

from decimal import Decimal
from math import log2
from struct import Struct
from typing import NamedTuple

from .context import power_of_five, ROUND_HALF_EVEN
from .rounding import (
    digit_count, round_up, LF_EXACTLY_ZERO, LF_LESS_THAN_HALF, LF_EXACTLY_HALF,
    LF_MORE_THAN_HALF,
)

__all__ = ('BinaryFormat', 'IEEEhalf', 'IEEEsingle', 'IEEEdouble', 'exact_string',
           'decimal_to_binary', 'FLOAT_SENTINELS')


log2_10 = log2(10)

# What exact_string() returns for values without a decimal expansion
FLOAT_SENTINELS = ('NaN', 'Infinity', '-Infinity')


class BinaryFormat(NamedTuple):
    '''An IEEE-754 binary interchange format.  Only instantiate indirectly through the from_
    constructors.

    precision is the number of bits in the significand including the implicit integer
    bit.  e_max is the largest e such that 2^e is representable, and e_min = 1 - e_max is
    the smallest e such that 2^e is not a subnormal number.
    '''

    # These three attributes determine the rest, which are pre-calculated for efficiency
    precision: int
    e_max: int
    e_min: int

    # All a function of the 3 values above
    e_bias: int
    int_bit: int
    max_significand: int
    fmt_width: int

    @classmethod
    def from_triple(cls, precision, e_max, e_min):
        '''Make a BinaryFormat with pre-calculated values.  All constructors ultimately call
        this one.'''
        if not all(isinstance(arg, int) for arg in (precision, e_max, e_min)):
            raise TypeError('precision, e_max and e_min must be integers')
        if precision < 3:
            raise ValueError('precision must be at least 3 bits')
        if e_max < 2:
            raise ValueError('e_max must be at least 2')
        if e_min != 1 - e_max:
            raise ValueError('e_min must be 1 - e_max')
        e_bias = 1 - e_min
        int_bit = 1 << (precision - 1)
        max_significand = (1 << precision) - 1
        # The sign bit, the exponent field and the significand without its integer bit
        fmt_width = 1 + (e_max + 1).bit_length() + precision - 1
        return cls(precision, e_max, e_min, e_bias, int_bit, max_significand, fmt_width)

    @classmethod
    def from_pair(cls, precision, e_width):
        '''Construct from the specified precision and exponent width.'''
        e_max = (1 << (e_width - 1)) - 1
        return cls.from_triple(precision, e_max, 1 - e_max)

    @classmethod
    def from_IEEE(cls, fmt_width):
        '''The IEEE-754 format for the given width.  Only widths Python's struct module can
        convert to a float are supported.'''
        if fmt_width == 16:
            precision = 11
        elif fmt_width == 32:
            precision = 24
        elif fmt_width == 64:
            precision = 53
        else:
            raise ValueError(f'unsupported IEEE-754 format width {fmt_width}')
        return cls.from_pair(precision, fmt_width - precision)

    def __repr__(self):
        return f'BinaryFormat(precision={self.precision}, e_max={self.e_max}, e_min={self.e_min})'

    def round_parts(self, sign, exponent, significand):
        '''Round ± significand * 2^exponent to this format with ties to even.

        Returns a tuple (sign, exponent, significand) in IEEE encoding: the exponent is
        biased, zero for zeroes and subnormals, and e_max * 2 + 1 for infinities, and the
        significand excludes the integer bit.
        '''
        if significand == 0:
            return sign, 0, 0

        # Shifting the significand so the MSB is one gives us the natural shift.  However
        # we cannot fully shift if the exponent would fall below e_min; such numbers are
        # subnormal and lose more bits.
        size = significand.bit_length()
        exponent += self.precision - 1
        rshift = max(size - self.precision, self.e_min - exponent)

        significand, lost_fraction = shift_right(significand, rshift)
        exponent += rshift

        if round_up(ROUND_HALF_EVEN, lost_fraction, sign, significand & 1):
            significand += 1
            # If the significand now overflows, halve it and increment the exponent
            if significand > self.max_significand:
                significand >>= 1
                exponent += 1

        if exponent > self.e_max:
            return sign, self.e_max * 2 + 1, 0
        if significand < self.int_bit:
            # Subnormal, or zero if everything was rounded away
            return sign, 0, significand
        return sign, exponent + self.e_bias, significand - self.int_bit

    def pack(self, sign, exponent, significand):
        '''Packs the IEEE parts of a floating point number as little-endian bytes.

        exponent is the biased exponent in the IEEE sense, i.e., it is zero for zeroes and
        subnormals and e_max * 2 + 1 for NaNs and infinites.  significand must not include
        the integer bit.
        '''
        if not 0 <= significand < self.int_bit:
            raise ValueError('significand out of range')
        if not 0 <= exponent <= self.e_max * 2 + 1:
            raise ValueError('biased exponent out of range')

        # Build up the encoding from the parts
        value = exponent
        if sign:
            value += (self.e_max + 1) * 2
        value = (value << (self.precision - 1)) + significand
        return value.to_bytes(self.fmt_width // 8, 'little')

    def to_float(self, raw):
        '''Return the Python float holding the value of the packed bytes.'''
        result, = float_structs[self.fmt_width].unpack(raw)
        return result

    def decimal_to_float(self, unscaled, scale):
        '''Return the Python float nearest to unscaled * 10^-scale that is representable in
        this format, rounding ties to even.  Overflow gives an infinity, and underflow a
        subnormal number or zero.'''
        sign = unscaled < 0
        if unscaled == 0:
            return self.to_float(self.pack(False, 0, 0))

        # Test for obviously over-large and over-small magnitudes; the value lies in
        # [10^(frac_exp - 1), 10^frac_exp).
        frac_exp = digit_count(unscaled) - scale
        if (frac_exp - 1) * log2_10 >= self.e_max + 1:
            parts = (sign, self.e_max * 2 + 1, 0)
        elif frac_exp * log2_10 <= self.e_min - self.precision:
            parts = (sign, 0, 0)
        else:
            parts = self.round_parts(*scaled_binary(unscaled, scale, self.precision))
        return self.to_float(self.pack(*parts))


def scaled_binary(unscaled, scale, precision):
    '''Return a tuple (sign, exponent, significand) such that ± significand * 2^exponent is
    the value unscaled * 10^-scale.

    The decimal scale is eliminated with powers of five: multiplying by 10^n is
    multiplying by 5^n and adding n to the binary exponent, and dividing by 10^n is
    dividing a left-shifted significand by 5^n.  In the latter case the quotient has at
    least precision + 1 bits, and if the division is inexact a final 1 bit is appended so
    that rounding to precision bits treats the discarded bits as non-zero.
    '''
    sign = unscaled < 0
    magnitude = abs(unscaled)
    if scale <= 0:
        return sign, -scale, magnitude * power_of_five(-scale)

    divisor = power_of_five(scale)
    shift = divisor.bit_length() + precision + 1
    significand, remainder = divmod(magnitude << shift, divisor)
    exponent = -scale - shift
    if remainder:
        significand = (significand << 1) | 1
        exponent -= 1
    return sign, exponent, significand


def decimal_to_binary(unscaled, scale, precision):
    '''Return a tuple (sign, exponent, significand) for unscaled * 10^-scale where the
    significand has exactly precision bits, with ties rounded to even, and the value is
    approximately

        ± significand * 2^(exponent - (precision - 1))

    i.e. exponent is the binary exponent of the leading bit.  The exponent range is
    unbounded.  Zero returns (False, 0, 0).
    '''
    if unscaled == 0:
        return False, 0, 0
    sign, exponent, significand = scaled_binary(unscaled, scale, precision)
    size = significand.bit_length()
    significand, lost_fraction = shift_right(significand, size - precision)
    exponent += size - 1
    if round_up(ROUND_HALF_EVEN, lost_fraction, sign, significand & 1):
        significand += 1
        if significand.bit_length() > precision:
            significand >>= 1
            exponent += 1
    return sign, exponent, significand


def exact_string(value):
    '''Return the exact decimal expansion of a float, which always exists for finite values,
    or one of FLOAT_SENTINELS for NaNs and infinities.'''
    if not isinstance(value, float):
        raise TypeError('exact_string requires a float')
    return str(Decimal(value))


def lost_bits_from_rshift(significand, bits):
    '''Return what the lost bits would be were the significand shifted right the given number
    of bits (negative is a left shift).
    '''
    if bits <= 0:
        return LF_EXACTLY_ZERO
    # Prevent over-large shifts consuming memory
    bits = min(bits, significand.bit_length() + 2)
    bit_mask = 1 << (bits - 1)
    first_bit = bool(significand & bit_mask)
    second_bit = bool(significand & (bit_mask - 1))
    return (LF_EXACTLY_ZERO, LF_LESS_THAN_HALF,
            LF_EXACTLY_HALF, LF_MORE_THAN_HALF)[first_bit * 2 + second_bit]


def shift_right(significand, bits):
    '''Return the significand shifted right a given number of bits (left if bits is negative),
    and the fraction that is lost doing so.
    '''
    if bits <= 0:
        result = significand << -bits
    else:
        result = significand >> bits

    return result, lost_bits_from_rshift(significand, bits)


float_structs = {
    16: Struct('<e'),
    32: Struct('<f'),
    64: Struct('<d'),
}

IEEEhalf = BinaryFormat.from_IEEE(16)
IEEEsingle = BinaryFormat.from_IEEE(32)
IEEEdouble = BinaryFormat.from_IEEE(64)
