"""Tests for ComplexNumber equality, ordering and fuzzy comparison."""

import pytest

from complexnum.numeric import ComplexNumber, magnitude_ge, magnitude_le
from complexnum.value import ToleranceMode


class TestEquality:
    """Test exact component-wise equality."""

    def test_equal_components(self):
        """Test identical components compare equal."""
        assert ComplexNumber(2, 3) == ComplexNumber(2, 3)

    def test_no_tolerance(self):
        """Test equality is exact, not fuzzy."""
        assert ComplexNumber(0.1 + 0.2, 0) != ComplexNumber(0.3, 0)

    def test_not_equal(self):
        """Test != on differing imaginary parts."""
        assert ComplexNumber(2, 3) != ComplexNumber(2, 4)

    def test_scalar_equality_both_sides(self):
        """Test a real scalar compares as (c, 0)."""
        assert ComplexNumber(5) == 5
        assert 5 == ComplexNumber(5)
        assert ComplexNumber(5, 1) != 5
        assert 5 != ComplexNumber(5, 1)

    def test_builtin_complex_equality(self):
        """Test comparison with Python complex."""
        assert ComplexNumber(1, 2) == 1 + 2j
        assert 1 + 2j == ComplexNumber(1, 2)

    def test_negative_zero_equals_zero(self):
        """Test IEEE-754 signed zeros compare equal."""
        assert ComplexNumber(-0.0, 0.0) == ComplexNumber(0.0, -0.0)

    def test_nan_is_not_equal_to_itself(self):
        """Test NaN components follow float semantics."""
        z = ComplexNumber(float("nan"), 0)
        assert z != z

    def test_unrelated_type(self):
        """Test comparison with a non-number is simply unequal."""
        assert ComplexNumber(1, 0) != "1"
        assert not ComplexNumber(1, 0) == None  # noqa: E711


class TestOrdering:
    """Test the magnitude-then-real-then-imaginary total order."""

    def test_magnitude_decides_first(self):
        """Test the smaller magnitude is smaller regardless of components."""
        assert ComplexNumber(0, 1) < ComplexNumber(-2, 0)
        assert ComplexNumber(-2, 0) > ComplexNumber(0, 1)

    def test_equal_magnitude_ties_break_on_real(self):
        """Test (3,4) and (4,3) are strictly ordered by the real part."""
        a = ComplexNumber(3, 4)
        b = ComplexNumber(4, 3)
        assert a < b
        assert not b < a
        assert b > a
        assert a != b

    def test_non_strict_operators_agree_with_strict(self):
        """Test <= and >= use the same total order as < and >."""
        a = ComplexNumber(3, 4)
        b = ComplexNumber(4, 3)
        assert a <= b
        assert not b <= a
        assert b >= a
        assert not a >= b

    def test_equal_magnitude_and_real_ties_break_on_imaginary(self):
        """Test (3,-4) < (3,4)."""
        assert ComplexNumber(3, -4) < ComplexNumber(3, 4)

    def test_equal_values(self):
        """Test <= and >= hold for equal values while < and > do not."""
        a = ComplexNumber(1, 1)
        b = ComplexNumber(1, 1)
        assert a <= b and a >= b
        assert not a < b and not a > b

    def test_exactly_one_relation_holds(self):
        """Test trichotomy on equal-magnitude points of the circle |z| = 5."""
        points = [ComplexNumber(x, y) for x, y in [(3, 4), (4, 3), (-3, 4), (0, 5), (5, 0), (-5, 0), (3, -4)]]
        for a in points:
            for b in points:
                assert [a < b, a == b, a > b].count(True) == 1

    def test_sorted(self):
        """Test sorting a list uses the total order."""
        values = [ComplexNumber(4, 3), ComplexNumber(1, 0), ComplexNumber(3, 4), ComplexNumber(0, -1)]
        assert sorted(values) == [
            ComplexNumber(0, -1),
            ComplexNumber(1, 0),
            ComplexNumber(3, 4),
            ComplexNumber(4, 3),
        ]

    def test_sort_key(self):
        """Test sort_key() exposes (magnitude, real, imaginary)."""
        assert ComplexNumber(3, -4).sort_key() == (5.0, 3.0, -4.0)


class TestScalarOrdering:
    """Test ordering against real scalars on either side."""

    def test_magnitude_against_scalar(self):
        """Test |z| is compared with |c|."""
        assert ComplexNumber(3, 0) < -4
        assert -4 > ComplexNumber(3, 0)
        assert ComplexNumber(3, 4) > 4.9

    def test_tie_on_magnitude_uses_real_then_imaginary(self):
        """Test a scalar c behaves as (c, 0) on magnitude ties."""
        assert ComplexNumber(0, 5) < 5
        assert ComplexNumber(-5, 0) < 5
        assert ComplexNumber(5, 0) > -5
        assert ComplexNumber(0, 5) > -5

    def test_scalar_on_the_left_is_mirrored(self):
        """Test c OP z is the mirror of z OP' c."""
        z = ComplexNumber(0, 5)
        assert 5 > z
        assert not 5 < z
        assert 5 >= z
        assert not 5 <= z

    def test_equal_to_scalar(self):
        """Test <= and >= hold when z == c."""
        assert ComplexNumber(2, 0) <= 2
        assert ComplexNumber(2, 0) >= 2
        assert 2 <= ComplexNumber(2, 0)

    def test_unsupported_type(self):
        """Test ordering against a string raises TypeError."""
        with pytest.raises(TypeError):
            ComplexNumber(1, 1) < "a"


class TestMagnitudeComparators:
    """Test the magnitude-only named comparators."""

    def test_equal_magnitude_is_both_le_and_ge(self):
        """Test (3,4) and (4,3) are mutually <= by magnitude."""
        a = ComplexNumber(3, 4)
        b = ComplexNumber(4, 3)
        assert magnitude_le(a, b) and magnitude_le(b, a)
        assert magnitude_ge(a, b) and magnitude_ge(b, a)
        assert not a == b

    def test_with_scalars(self):
        """Test scalars contribute their absolute value."""
        assert magnitude_le(ComplexNumber(3, 4), -5)
        assert magnitude_ge(-5, ComplexNumber(3, 4))
        assert not magnitude_le(6, ComplexNumber(3, 4))

    def test_rejects_non_numbers(self):
        """Test a string argument raises TypeError."""
        with pytest.raises(TypeError):
            magnitude_le("5", ComplexNumber())


class TestFuzzyCompare:
    """Test compare() with tolerances."""

    def test_within_default_tolerance(self):
        """Test default relative tolerance 0.001."""
        assert ComplexNumber(2.0, 3.0).compare(ComplexNumber(2.0005, 3.0005)) is True

    def test_outside_tolerance(self):
        """Test values outside tolerance."""
        assert ComplexNumber(2, 3).compare(ComplexNumber(2, 4)) is False

    def test_absolute_mode(self):
        """Test absolute tolerance mode."""
        a = ComplexNumber(1000.0, 0.0)
        b = ComplexNumber(1000.5, 0.0)
        assert a.compare(b, tolerance=0.001) is True
        assert a.compare(b, tolerance=0.001, mode=ToleranceMode.ABSOLUTE) is False

    def test_scalar_is_promoted(self):
        """Test compare() promotes a real scalar to (c, 0)."""
        assert ComplexNumber(5, 0).compare(5.0001) is True

    def test_settings_defaults(self, override_settings):
        """Test tolerance defaults come from settings."""
        override_settings(DEFAULT_TOLERANCE=0.1, DEFAULT_TOLERANCE_MODE="absolute")
        assert ComplexNumber(1, 1).compare(ComplexNumber(1.05, 0.95)) is True

    def test_unsupported_type(self):
        """Test compare() with a non-number is False."""
        assert ComplexNumber(1, 1).compare("1+j") is False
