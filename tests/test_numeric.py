"""
Numeric normalization, rounding and positional rendering.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from decimal import Decimal
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bitsize.errors import InvalidArgumentError
from bitsize.numeric import finite_numeric, fmt_number, round_half_away, std_numeric, whole_as_int


# Tests ----------------------------------------------------------------------------------------------------------------

class TestStdNumeric:
    """Test conversion of supported numeric types to int or float."""

    @pytest.mark.parametrize(
        "value, expected, expected_type",
        [
            pytest.param(42, 42, int, id="int"),
            pytest.param(3.25, 3.25, float, id="float"),
            pytest.param(10 ** 30, 10 ** 30, int, id="huge-int"),
            pytest.param(Decimal("1536.0"), 1536, int, id="decimal-whole"),
            pytest.param(Decimal("1.5"), 1.5, float, id="decimal-fraction"),
            pytest.param(Fraction(6, 3), 2, int, id="fraction-whole"),
            pytest.param(Fraction(3, 2), 1.5, float, id="fraction-half"),
        ],
    )
    def test_supported(self, value, expected, expected_type):
        res = std_numeric(value)
        assert res == expected
        assert isinstance(res, expected_type)

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(True, id="bool"),
            pytest.param(None, id="none"),
            pytest.param("42", id="str"),
            pytest.param([1], id="list"),
            pytest.param(object(), id="object"),
        ],
    )
    def test_unsupported(self, value):
        with pytest.raises(TypeError):
            std_numeric(value)

    def test_index_protocol(self):
        class Index:
            def __index__(self):
                return 7

        assert std_numeric(Index()) == 7

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(math.nan, id="nan"),
            pytest.param(math.inf, id="inf"),
            pytest.param(-math.inf, id="-inf"),
        ],
    )
    def test_finite_rejects_special(self, value):
        with pytest.raises(InvalidArgumentError, match=r"finite number required"):
            finite_numeric(value)

    def test_whole_as_int(self):
        assert whole_as_int(2.0) == 2 and isinstance(whole_as_int(2.0), int)
        assert whole_as_int(2.5) == 2.5
        assert whole_as_int(7) == 7


class TestRoundHalfAway:

    @pytest.mark.parametrize(
        "number, precision, expected",
        [
            pytest.param(2.5, 0, 3, id="half-up"),
            pytest.param(-2.5, 0, -3, id="negative-half"),
            pytest.param(0.125, 2, 0.13, id="three-decimals"),
            pytest.param(1.005, 2, 1.01, id="repr-exact"),
            pytest.param(1.4, 0, 1, id="down"),
            pytest.param(10 ** 25, 2, 10 ** 25, id="huge-int"),
        ],
    )
    def test_rounding(self, number, precision, expected):
        assert round_half_away(number, precision) == expected

    def test_whole_result_is_int(self):
        assert isinstance(round_half_away(1.999, 2), int)

    def test_negative_precision(self):
        with pytest.raises(InvalidArgumentError, match=r"precision must be >= 0"):
            round_half_away(1.5, -1)

    def test_precision_type(self):
        with pytest.raises(TypeError, match=r"precision must be int"):
            round_half_away(1.5, 1.0)


class TestFmtNumber:

    @pytest.mark.parametrize(
        "number, precision, fixed, expected",
        [
            pytest.param(1.5, 2, False, "1.5", id="trim-zeros"),
            pytest.param(1.0, 2, False, "1", id="trim-point"),
            pytest.param(1.5, 3, True, "1.500", id="fixed"),
            pytest.param(2, 2, True, "2.00", id="fixed-int"),
            pytest.param(953.67431640625, 2, False, "953.67", id="round-down"),
            pytest.param(0.125, 2, False, "0.13", id="round-half"),
            pytest.param(-0.001, 2, False, "0", id="negative-zero"),
            pytest.param(-0.001, 2, True, "0.00", id="negative-zero-fixed"),
        ],
    )
    def test_precision(self, number, precision, fixed, expected):
        assert fmt_number(number, precision, fixed) == expected

    @pytest.mark.parametrize(
        "number, expected",
        [
            pytest.param(1048576, "1048576", id="int"),
            pytest.param(1048576.0, "1048576", id="whole-float"),
            pytest.param(1e-06, "0.000001", id="small"),
            pytest.param(1e24, "1000000000000000000000000", id="large"),
            pytest.param(0.0, "0", id="zero"),
            pytest.param(-1.25, "-1.25", id="negative"),
        ],
    )
    def test_positional(self, number, expected):
        assert fmt_number(number) == expected
