"""Tests for saturating Duration arithmetic."""

import pytest

from hms_duration import MAX_SECONDS, Duration


def test_add_and_subtract():
    """Test ordinary addition and subtraction."""
    d1 = Duration.from_seconds(100)
    d2 = Duration.from_seconds(50)

    assert (d1 + d2).as_seconds() == 150
    assert (d1 - d2).as_seconds() == 50


def test_subtraction_clamps_at_zero():
    """Test that a larger subtrahend yields exactly zero."""
    assert Duration.from_seconds(50) - Duration.from_seconds(100) == Duration.zero()
    assert Duration.zero() - Duration.from_hours(1) == Duration.zero()
    assert Duration.from_seconds(7) - Duration.from_seconds(7) == Duration.zero()


def test_subtraction_matches_clamped_difference():
    """Test (a - b) == max(0, a - b) over a spread of values."""
    values = [0, 1, 59, 60, 3600, 5445, MAX_SECONDS]
    for a in values:
        for b in values:
            result = Duration.from_seconds(a) - Duration.from_seconds(b)
            assert result.as_seconds() == max(0, a - b)


def test_addition_saturates_at_ceiling():
    """Test that overflowing sums clamp to MAX_SECONDS."""
    max_duration = Duration.from_seconds(MAX_SECONDS)
    one = Duration.from_seconds(1)
    assert (max_duration + one).as_seconds() == MAX_SECONDS

    large = Duration.from_seconds(MAX_SECONDS - 10)
    assert (large + Duration.from_seconds(20)).as_seconds() == MAX_SECONDS

    # Just below the ceiling stays exact
    near_max = Duration.from_seconds(MAX_SECONDS - 50)
    assert (near_max + Duration.from_seconds(30)).as_seconds() == MAX_SECONDS - 20


def test_addition_is_commutative_and_associative():
    """Test grouping and order do not change a sum."""
    a = Duration.from_hms(1, 2, 3)
    b = Duration.from_minutes(45)
    c = Duration.from_seconds(17)

    assert a + b == b + a
    assert (a + b) + c == a + (b + c)


def test_named_saturating_methods_match_operators():
    """Test saturating_add/saturating_sub mirror + and -."""
    a = Duration.from_minutes(45)
    b = Duration.from_minutes(30)
    assert a.saturating_add(b) == a + b
    assert a.saturating_sub(b) == a - b
    assert b.saturating_sub(a) == Duration.zero()


def test_operations_return_new_values():
    """Test that operands are left untouched."""
    a = Duration.from_seconds(100)
    b = Duration.from_seconds(40)
    _ = a + b
    _ = a - b
    assert a.as_seconds() == 100
    assert b.as_seconds() == 40


def test_add_seconds():
    """Test adding a raw second count."""
    d = Duration.from_minutes(1)
    assert d.add_seconds(30) == Duration.from_seconds(90)
    assert d.add_seconds(0) == d
    assert Duration.from_seconds(MAX_SECONDS).add_seconds(5).as_seconds() == (
        MAX_SECONDS
    )
    with pytest.raises(ValueError, match="non-negative"):
        d.add_seconds(-1)


def test_scalar_multiplication():
    """Test multiplying by a non-negative int, either side."""
    d = Duration.from_minutes(15)
    assert d * 4 == Duration.from_hours(1)
    assert 4 * d == Duration.from_hours(1)
    assert d * 0 == Duration.zero()
    assert (Duration.from_hours(1) * MAX_SECONDS).as_seconds() == MAX_SECONDS
    with pytest.raises(ValueError, match="non-negative"):
        d * -2


def test_scalar_floor_division():
    """Test dividing by a positive int floors the result."""
    assert Duration.from_seconds(100) // 3 == Duration.from_seconds(33)
    assert Duration.from_hours(1) // 4 == Duration.from_minutes(15)
    with pytest.raises(ValueError, match="divide a Duration by zero"):
        Duration.from_seconds(10) // 0
    with pytest.raises(ValueError, match="non-negative"):
        Duration.from_seconds(10) // -2


def test_mixed_type_arithmetic_is_rejected():
    """Test that ints, floats and strings do not mix with Duration in + and -."""
    d = Duration.from_seconds(10)
    with pytest.raises(TypeError):
        d + 5  # type: ignore[operator]
    with pytest.raises(TypeError):
        d - 5  # type: ignore[operator]
    with pytest.raises(TypeError):
        d * 1.5  # type: ignore[operator]
    with pytest.raises(TypeError):
        d * True  # type: ignore[operator]
    with pytest.raises(TypeError):
        d // 2.0  # type: ignore[operator]


def test_work_log_scenario():
    """Test summing shifts and computing remaining and overtime."""
    morning = Duration.from_hms(4, 0, 0)
    afternoon = Duration.from_hms(3, 30, 0)
    total = morning + afternoon
    target = Duration.from_hours(8)

    assert total.format() == "07:30:00"
    assert total.as_minutes() == 450
    assert (target - total).format() == "00:30:00"
    assert (total - target).format() == "00:00:00"
