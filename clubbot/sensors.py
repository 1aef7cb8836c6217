"""Bumper, ultrasonic, infrared proximity and claw handling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Callable, Sequence

# Speed of sound halved, in cm per microsecond of echo time.
CM_PER_ECHO_MICROSECOND = 0.01713

SERVO_MIN = 0
SERVO_MAX = 180
CLAW_OPEN_POS = 15
CLAW_CLOSE_POS = 100


class BumperHit(IntFlag):
    """Which side of the robot reports contact or an object."""

    NONE = 0
    RIGHT = 0x01
    LEFT = 0x02
    BOTH = RIGHT | LEFT


def bumper_state(right_high: bool, left_high: bool) -> BumperHit:
    """Combine the two bumper switch levels into one result.

    The switches use pull-ups, so a high level marks that side.
    """
    state = BumperHit.NONE
    if right_high:
        state |= BumperHit.RIGHT
    if left_high:
        state |= BumperHit.LEFT
    return state


def echo_distance(start_time: int, end_time: int) -> float:
    """Distance in cm for an echo pulse between two microsecond timestamps.

    Timestamps are 32-bit counters; the pulse width is kept to 16 bits,
    as the measuring hardware does.
    """
    delta = ((end_time - start_time) & 0xFFFFFFFF) & 0xFFFF
    return CM_PER_ECHO_MICROSECOND * delta


@dataclass
class UltrasonicSensor:
    """State of one ultrasonic range finder."""

    trigger_pin_arduino: int = 0
    echo_pin_arduino: int = 0
    trigger_pin: int = 0
    echo_pin: int = 0
    triggered: bool = False
    ready: bool = False
    start_time: int = 0
    end_time: int = 0
    dist: float = 0.0

    def trigger(self) -> None:
        """Record that a ranging pulse has been sent."""
        self.triggered = True

    def measure(self, start_time: int, end_time: int) -> float:
        """Store the echo timestamps and return the distance they give."""
        self.start_time = start_time
        self.end_time = end_time
        self.dist = echo_distance(start_time, end_time)
        self.triggered = False
        self.ready = False
        return self.dist


def ir_object_detected(first_high: bool, second_high: bool) -> bool:
    """Decide detection from two reads of an active-low IR detector.

    A low first read is confirmed by a second low read; a high second
    read means the first was noise.
    """
    if first_high:
        return False
    return not second_high


def keyes_ir_state(
    left_reads: Sequence[bool], right_reads: Sequence[bool]
) -> BumperHit:
    """Combine the (first, second) reads of the left and right IR sensors."""
    state = BumperHit.NONE
    for reads, side in ((left_reads, BumperHit.LEFT), (right_reads, BumperHit.RIGHT)):
        first, second = reads
        if ir_object_detected(first, second):
            state |= side
    return state


class Claw:
    """A servo-driven claw that starts open."""

    def __init__(
        self,
        servo_write: Callable[[int], object],
        open_pos: int = CLAW_OPEN_POS,
        close_pos: int = CLAW_CLOSE_POS,
    ) -> None:
        for pos in (open_pos, close_pos):
            if not SERVO_MIN <= pos <= SERVO_MAX:
                raise ValueError(
                    f"servo position out of range {SERVO_MIN}..{SERVO_MAX}: {pos}"
                )
        self._write = servo_write
        self.open_pos = open_pos
        self.close_pos = close_pos
        self.closed = False
        self.open()

    def open(self) -> None:
        """Move the servo to the open position."""
        self._write(self.open_pos)
        self.closed = False

    def close(self) -> None:
        """Move the servo to the closed position."""
        self._write(self.close_pos)
        self.closed = True