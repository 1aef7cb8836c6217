"""Dead-reckoning odometry and target location for a differential-drive robot."""

from __future__ import annotations

import math
from dataclasses import dataclass

TWOPI = 6.28315
PI = 3.141593
HALFPI = 1.570796

# Standard base: 100 mm wheels, 3292.4 encoder pulses per revolution.
R_MTR_CLICKS_PER_CM = 104.8
L_MTR_CLICKS_PER_CM = 104.8
WHEEL_BASE = 23.25  # cm

ROTATE_START_DEG = 5.0
ROTATE_STOP_DEG = 0.50


@dataclass
class Location:
    """Robot pose; y is straight ahead at start and x is flipped."""

    theta: float = 0.0
    deg_theta: float = 0.0
    x_pos: float = 0.0
    y_pos: float = 0.0
    right_interval: int = 0
    left_interval: int = 0


@dataclass
class Target:
    """Where the robot is heading and how far off it is."""

    init_target_distance: float = 0.0
    target_distance: float = 0.0
    heading_error: float = 0.0
    deg_heading_error: float = 0.0
    target_bearing: float = 0.0
    deg_target_bearing: float = 0.0
    x_target: float = 0.0
    y_target: float = 0.0


def to_rad(deg: float) -> float:
    """Convert degrees to radians using the robot's TWOPI constant."""
    return deg * TWOPI / 360.0


def to_deg(rad: float) -> float:
    """Convert radians to degrees using the robot's TWOPI constant."""
    return (360.0 / TWOPI) * rad


class Odometer:
    """Turns cumulative encoder readings into pose updates."""

    def __init__(self) -> None:
        self._prev_right = 0
        self._prev_left = 0

    def interval_counts(self, right_count: int, left_count: int) -> tuple[int, int]:
        """Return encoder ticks since the last call as (right, left).

        ``left_count`` is the raw left encoder reading; the left motor is
        mounted reversed, so its sign is flipped.
        """
        right = right_count
        left = -left_count
        delta_right = right - self._prev_right
        delta_left = left - self._prev_left
        self._prev_right = right
        self._prev_left = left
        return delta_right, delta_left

    def update(self, location: Location, right_count: int, left_count: int) -> Location:
        """Advance ``location`` by the motion seen since the last reading."""
        delta_right, delta_left = self.interval_counts(right_count, left_count)
        location.right_interval = delta_right
        location.left_interval = delta_left

        right_cm = delta_right / R_MTR_CLICKS_PER_CM
        left_cm = delta_left / L_MTR_CLICKS_PER_CM
        cm = (right_cm + left_cm) / 2

        theta = location.theta + (right_cm - left_cm) / WHEEL_BASE
        theta -= TWOPI * int(theta / TWOPI)
        location.theta = theta
        location.deg_theta = (360 / TWOPI) * theta

        location.x_pos += cm * math.sin(theta)
        location.y_pos += cm * math.cos(theta)
        return location


def locate_target(target: Target, location: Location) -> Target:
    """Update distance, bearing and heading error of ``target`` from ``location``."""
    dx = target.x_target - location.x_pos
    dy = target.y_target - location.y_pos
    target.target_distance = math.sqrt(dx * dx + dy * dy)

    # Bearing is left untouched when dx is too small to divide by.
    if dx > 0.00001:
        target.target_bearing = HALFPI - math.atan(dy / dx)
    elif dx < -0.00001:
        target.target_bearing = -HALFPI - math.atan(dy / dx)

    error = target.target_bearing - location.theta
    if error > PI:
        error -= TWOPI
    elif error < -PI:
        error += TWOPI
    target.heading_error = error
    target.deg_heading_error = (360.0 / TWOPI) * error
    return target


def rotate_in_place_needed(target: Target) -> bool:
    """Tell whether the heading error calls for turning on the spot."""
    error = abs(target.deg_heading_error)
    needed = error >= ROTATE_START_DEG
    if error <= ROTATE_STOP_DEG:
        needed = False
    return needed