from fractions import Fraction

from hypothesis import given, settings, strategies as st

from bigdecimal import *


unscaleds = st.integers(min_value=-10 ** 40, max_value=10 ** 40)
scales = st.integers(min_value=-60, max_value=60)
decimals = st.builds(BigDecimal, unscaleds, scales)
non_zero_decimals = decimals.filter(lambda value: value.unscaled != 0)
precisions = st.integers(min_value=1, max_value=40)
finite_floats = st.floats(allow_nan=False, allow_infinity=False)


def fraction(value):
    return Fraction(*value.as_integer_ratio())


def pair(value):
    return (value.unscaled, value.scale)


class TestText:

    @given(decimals)
    @settings(max_examples=100)
    def test_to_string_round_trip(self, value):
        assert pair(BigDecimal.parse(value.to_string())) == pair(value)

    @given(unscaleds, st.integers(min_value=0, max_value=60))
    @settings(max_examples=100)
    def test_plain_string_round_trip(self, unscaled, scale):
        value = BigDecimal(unscaled, scale)
        assert pair(BigDecimal.parse(value.to_plain_string())) == pair(value)

    @given(decimals)
    @settings(max_examples=100)
    def test_plain_string_value(self, value):
        assert BigDecimal.parse(value.to_plain_string()) == value


class TestArithmetic:

    @given(non_zero_decimals, non_zero_decimals)
    @settings(max_examples=100)
    def test_add_scale(self, lhs, rhs):
        result = lhs + rhs
        assert result.scale == max(lhs.scale, rhs.scale)
        assert fraction(result) == fraction(lhs) + fraction(rhs)

    @given(non_zero_decimals, non_zero_decimals)
    @settings(max_examples=100)
    def test_subtract(self, lhs, rhs):
        result = lhs - rhs
        assert result.scale == max(lhs.scale, rhs.scale)
        assert fraction(result) == fraction(lhs) - fraction(rhs)

    @given(decimals, decimals)
    @settings(max_examples=100)
    def test_multiply_scale(self, lhs, rhs):
        result = lhs * rhs
        assert result.scale == lhs.scale + rhs.scale
        assert fraction(result) == fraction(lhs) * fraction(rhs)

    @given(decimals, non_zero_decimals, precisions)
    @settings(max_examples=100)
    def test_divide_error(self, lhs, rhs, precision):
        result = lhs.divide(rhs, precision, ROUND_HALF_EVEN)
        assert result.precision() <= precision
        error = abs(fraction(result) - fraction(lhs) / fraction(rhs))
        assert error <= Fraction(1, 2) * Fraction(10) ** -result.scale

    @given(decimals, non_zero_decimals, precisions)
    @settings(max_examples=100)
    def test_divide_toward_zero(self, lhs, rhs, precision):
        result = lhs.divide(rhs, precision, ROUND_DOWN)
        assert abs(fraction(result)) <= abs(fraction(lhs) / fraction(rhs))

    @given(decimals, non_zero_decimals)
    @settings(max_examples=100)
    def test_divmod(self, lhs, rhs):
        quotient, remainder = lhs.divmod(rhs)
        assert quotient.frac().is_zero()
        assert fraction(quotient) == int(fraction(lhs) / fraction(rhs))
        assert quotient * rhs + remainder == lhs
        assert abs(remainder) < abs(rhs)
        assert remainder.is_zero() or remainder.is_negative() == lhs.is_negative()

    @given(st.integers(min_value=0, max_value=10 ** 40), scales,
           st.integers(min_value=2, max_value=30))
    @settings(max_examples=100)
    def test_sqrt(self, unscaled, scale, precision):
        value = BigDecimal(unscaled, scale)
        result = value.sqrt(precision)
        assert result.precision() <= precision
        error = abs(result.sqr() - value)
        assert error <= BigDecimal(1, precision) + value * BigDecimal(3, precision - 1)


class TestCompare:

    @given(decimals, decimals)
    @settings(max_examples=100)
    def test_compare(self, lhs, rhs):
        lhs_value, rhs_value = fraction(lhs), fraction(rhs)
        if lhs_value < rhs_value:
            answer = Compare.LESS_THAN
        elif lhs_value == rhs_value:
            answer = Compare.EQUAL
        else:
            answer = Compare.GREATER_THAN
        assert lhs.compare(rhs) == answer
        assert (lhs == rhs) == (hash(lhs) == hash(rhs) and lhs_value == rhs_value)

    @given(decimals, st.integers(min_value=0, max_value=5))
    @settings(max_examples=100)
    def test_trailing_zeros(self, value, zeros):
        padded = BigDecimal(value.unscaled * 10 ** zeros, value.scale + zeros)
        assert padded == value
        assert hash(padded) == hash(value)
        assert padded.remove_trailing_zeros(value.scale).scale <= value.scale


class TestFloatBridge:

    @given(finite_floats)
    @settings(max_examples=100)
    def test_float_round_trip(self, value):
        assert BigDecimal.from_float(value).to_float() == value

    @given(decimals)
    @settings(max_examples=100)
    def test_to_float(self, value):
        assert value.to_float() == float(str(value))

    @given(finite_floats)
    @settings(max_examples=100)
    def test_exact_string(self, value):
        assert Fraction(exact_string(value)) == Fraction(value)
