import pytest

from clubbot.sensors import (
    BumperHit,
    Claw,
    UltrasonicSensor,
    bumper_state,
    echo_distance,
    ir_object_detected,
    keyes_ir_state,
)


@pytest.mark.parametrize(
    "right, left, expected",
    [
        (False, False, 0),
        (True, False, 1),
        (False, True, 2),
        (True, True, 3),
    ],
)
def test_bumper_state_bits(right, left, expected):
    assert bumper_state(right, left) == expected


def test_bumper_both_is_union():
    assert bumper_state(True, True) == BumperHit.RIGHT | BumperHit.LEFT


def test_echo_distance_zero():
    assert echo_distance(500, 500) == 0.0


def test_echo_distance_worked_example():
    assert echo_distance(0, 1000) == pytest.approx(17.13)


def test_echo_distance_is_linear():
    assert echo_distance(0, 400) == pytest.approx(2 * echo_distance(0, 200))


def test_echo_distance_counter_wrap():
    assert echo_distance(0xFFFFFFF0, 0x10) == pytest.approx(echo_distance(0, 0x20))


def test_echo_distance_truncated_to_16_bits():
    assert echo_distance(0, 0x10005) == pytest.approx(echo_distance(0, 5))


def test_ultrasonic_trigger_and_measure():
    sensor = UltrasonicSensor()
    sensor.trigger()
    assert sensor.triggered is True
    dist = sensor.measure(100, 1100)
    assert dist == pytest.approx(echo_distance(100, 1100))
    assert sensor.dist == dist
    assert sensor.triggered is False
    assert sensor.ready is False
    assert (sensor.start_time, sensor.end_time) == (100, 1100)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (True, True, False),
        (True, False, False),
        (False, True, False),
        (False, False, True),
    ],
)
def test_ir_object_detected(first, second, expected):
    assert ir_object_detected(first, second) is expected


def test_keyes_ir_left_only():
    assert keyes_ir_state((False, False), (True, True)) == BumperHit.LEFT


def test_keyes_ir_right_only():
    assert keyes_ir_state((False, True), (False, False)) == BumperHit.RIGHT


def test_keyes_ir_both_and_none():
    assert keyes_ir_state((False, False), (False, False)) == BumperHit.BOTH
    assert keyes_ir_state((True, False), (True, False)) == BumperHit.NONE


def test_claw_starts_open_and_closes():
    writes = []
    claw = Claw(writes.append)
    assert writes == [15]
    assert claw.closed is False
    claw.close()
    assert writes == [15, 100]
    assert claw.closed is True
    claw.open()
    assert writes[-1] == 15
    assert claw.closed is False


def test_claw_custom_positions():
    writes = []
    claw = Claw(writes.append, open_pos=20, close_pos=90)
    claw.close()
    assert writes == [20, 90]


def test_claw_rejects_out_of_range_position():
    with pytest.raises(ValueError):
        Claw(lambda pos: None, open_pos=200)