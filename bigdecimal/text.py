#
# An implementation of arbitrary-precision decimal arithmetic
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

import re

import attr

from .context import power_of_ten
from .rounding import MAX_SCALE, MIN_SCALE, digit_count

__all__ = ('FormatSettings', 'InvariantSettings', 'parse_parts', 'digits_to_int',
           'int_to_digits')


# Python refuses to convert very long integers to and from text in one go.  Longer digit
# strings are converted in pieces.
CHUNK_DIGITS = 4000

# Exponents with more digits than this cannot give a valid scale
MAX_EXPONENT_DIGITS = 10


def _check_decimal_separator(instance, attribute, value):
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f'{attribute.name} must be a single character')
    if value in '0123456789+-eE':
        raise ValueError(f'invalid {attribute.name}: {value!r}')


def _check_thousands_separator(instance, attribute, value):
    if not isinstance(value, str) or len(value) > 1:
        raise ValueError(f'{attribute.name} must be a single character or empty')
    if value and value in '0123456789+-eE':
        raise ValueError(f'invalid {attribute.name}: {value!r}')
    if value == instance.decimal_separator:
        raise ValueError('the separators must differ')


@attr.s(slots=True, frozen=True, kw_only=True)
class FormatSettings:
    '''Locale-dependent parts of the textual form of a decimal number.

    Parsing first translates the separators to their invariant forms, '.' and ',', so that
    "1.234,5" with German settings reads as 1234.5.  Output only ever uses the decimal
    separator; digits are never grouped.
    '''

    # The character separating the integer and fractional parts
    decimal_separator = attr.ib(default='.', validator=_check_decimal_separator)
    # The character grouping digits, ignored on input.  Empty if there is none.
    thousands_separator = attr.ib(default=',', validator=_check_thousands_separator)

    def is_invariant(self):
        return self.decimal_separator == '.' and self.thousands_separator == ','

    def to_invariant(self, text):
        '''Return text with our separators replaced by the invariant ones.'''
        if self.is_invariant():
            return text
        table = {ord(self.decimal_separator): '.'}
        if self.thousands_separator:
            table[ord(self.thousands_separator)] = ','
        return text.translate(table)

    def format_plain(self, sign, digits, scale):
        '''Return the number (-1)^sign * int(digits) * 10^-scale without an exponent.
        digits is a non-empty string of decimal digits.'''
        length = len(digits)
        if scale <= 0:
            if digits == '0':
                text = digits
            else:
                text = digits + '0' * -scale
        elif scale >= length:
            text = ''.join(('0', self.decimal_separator, '0' * (scale - length), digits))
        else:
            point = length - scale
            text = ''.join((digits[:point], self.decimal_separator, digits[point:]))
        return '-' + text if sign else text

    def format_decimal(self, sign, digits, scale, exponent_delimiter='e'):
        '''Return the number (-1)^sign * int(digits) * 10^-scale in plain notation if it has
        no negative scale and is not very small, otherwise in scientific notation with a
        single leading digit.
        '''
        adjusted_exponent = len(digits) - 1 - scale
        if scale >= 0 and adjusted_exponent >= -6:
            return self.format_plain(sign, digits, scale)

        parts = []
        if sign:
            parts.append('-')
        if len(digits) > 1:
            parts.extend((digits[0], self.decimal_separator, digits[1:]))
        else:
            parts.append(digits)
        parts.append(exponent_delimiter)
        if adjusted_exponent >= 0:
            parts.append('+')
        parts.append(str(adjusted_exponent))
        return ''.join(parts)


InvariantSettings = FormatSettings()


def parse_parts(text, settings=None):
    '''Parse a decimal number.  Return a pair (unscaled, scale), or None if text is not a
    valid number.

    The syntax is an optional sign, a digit sequence with at most one decimal point, and
    an optional exponent: 'e' or 'E', an optional sign and a digit sequence.  Thousands
    separators are ignored in the digit sequence, and surrounding whitespace is ignored.
    The scale is the number of digits after the decimal point less the exponent.
    '''
    if not isinstance(text, str):
        raise TypeError('text must be a string')
    if settings is not None:
        text = settings.to_invariant(text)

    match = DEC_STRING_REGEX.match(text.strip())
    if match is None:
        return None

    sign, int_str, frac_str, exponent_str = match.groups()
    frac_digits = frac_str.replace(',', '') if frac_str else ''
    digits = int_str.replace(',', '') + frac_digits
    if not digits:
        return None

    exponent = 0
    if exponent_str is not None:
        exponent_digits = exponent_str.lstrip('+-').lstrip('0')
        if len(exponent_digits) > MAX_EXPONENT_DIGITS:
            return None
        exponent = int(exponent_str)

    scale = len(frac_digits) - exponent
    if not MIN_SCALE <= scale <= MAX_SCALE:
        return None

    unscaled = digits_to_int(digits)
    return (-unscaled if sign == '-' else unscaled), scale


def digits_to_int(digits):
    '''Return the integer value of a string of decimal digits of any length.'''
    if len(digits) <= CHUNK_DIGITS:
        return int(digits)
    split = len(digits) // 2
    low = digits[split:]
    return digits_to_int(digits[:split]) * power_of_ten(len(low)) + digits_to_int(low)


def int_to_digits(value):
    '''Return the decimal digits of a non-negative integer of any size.'''
    if value < power_of_ten(CHUNK_DIGITS):
        return str(value)
    low_digits = digit_count(value) // 2
    high, low = divmod(value, power_of_ten(low_digits))
    return int_to_digits(high) + int_to_digits(low).rjust(low_digits, '0')


DEC_STRING_REGEX = re.compile(
    # sign[opt]
    '([-+]?)'
    # digits and thousands separators, then .fraction[opt]
    '([0-9,]*)(?:\\.([0-9,]*))?'
    # e sign[opt]dec-exponent   [opt]
    '(?:[eE]([-+]?[0-9]+))?$',
    re.ASCII
)
