import pytest

from clubbot.touchscreen import TouchPoint, point_from_samples, touch_pressure


def test_touch_point_defaults_and_equality():
    assert TouchPoint() == TouchPoint(0, 0, 0)
    assert TouchPoint(1, 2, 3) == TouchPoint(1, 2, 3)
    assert not TouchPoint(1, 2, 3) == TouchPoint(1, 2, 4)


def test_pressure_without_plate_resistance():
    assert touch_pressure(100, 200, 0, 0) == 1023 - 100


def test_pressure_equal_readings_gives_full_scale():
    assert touch_pressure(300, 300, 0, 0) == 1023


def test_pressure_with_plate_resistance():
    # (200/100 - 1) * x * 1024 / 1024 == x
    assert touch_pressure(100, 200, 512, 1024) == 512


def test_pressure_with_plate_resistance_zero_z1():
    with pytest.raises(ValueError):
        touch_pressure(0, 200, 512, 300)


def test_point_from_matching_samples():
    point = point_from_samples([500, 500], [300, 300], 100, 200)
    assert point.x == 1023 - 500
    assert point.y == 300
    assert point.z == touch_pressure(100, 200, point.x, 0)


def test_point_from_disagreeing_samples_has_no_pressure():
    point = point_from_samples([500, 501], [300, 300], 100, 200)
    assert point.z == 0
    point = point_from_samples([500, 500], [300, 299], 100, 200)
    assert point.z == 0


def test_point_uses_median_of_many_samples():
    point = point_from_samples([5, 1, 3], [9, 7, 8], 100, 100)
    assert point.x == 1023 - 3
    assert point.y == 8
    assert point.z == 1023


def test_point_single_sample():
    point = point_from_samples([10], [20], 50, 50)
    assert point == TouchPoint(1023 - 10, 20, 1023)


def test_point_pressure_uses_computed_x_with_plate():
    point = point_from_samples([511, 511], [0, 0], 100, 200, rxplate=1024)
    assert point.z == point.x


def test_point_requires_samples():
    with pytest.raises(ValueError):
        point_from_samples([], [1, 1], 0, 0)