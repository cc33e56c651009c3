#
# An implementation of arbitrary-precision decimal arithmetic
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

__all__ = ('BigDecimalError', 'ParseError', 'DivisionByZero', 'Overflow', 'Underflow',
           'InvalidArgument', 'ConversionOverflow', 'RoundingRequired')


class BigDecimalError(ArithmeticError):
    '''All exceptions raised by this package subclass from this.

    Errors are raised immediately and there is no partial result.  Where a built-in
    exception has the same meaning the error also derives from it, so that for example
    DivisionByZero can be caught as ZeroDivisionError.
    '''


class ParseError(BigDecimalError, ValueError):
    '''Raised when text is not a valid decimal number.'''

    def __init__(self, text):
        super().__init__(f'invalid decimal string: {text!r}')
        self.text = text


class DivisionByZero(BigDecimalError, ZeroDivisionError):
    '''A divide, integer divide or remainder operation with a zero divisor.'''


class Overflow(BigDecimalError, OverflowError):
    '''Raised when a result would need a scale below MIN_SCALE, i.e. its magnitude is too
    large to be represented.'''


class Underflow(BigDecimalError):
    '''Raised when a result would need a scale above MAX_SCALE, i.e. it has too many
    fractional digits to be represented.'''


class InvalidArgument(BigDecimalError, ValueError):
    '''Raised for operands with no decimal value, such as NaNs and infinities, and for
    operations without a real result.'''


class ConversionOverflow(BigDecimalError, OverflowError):
    '''Raised when a value does not fit the requested fixed-width integer type.'''


class RoundingRequired(BigDecimalError):
    '''Raised when ROUND_UNNECESSARY was requested but the result is inexact.'''
