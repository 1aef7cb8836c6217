"""Waypoint route handling with temporary detour waypoints."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Sequence

from clubbot.navigation import TWOPI, Location, Target

LAST_ELEM = 9999
ROUTE_CAPACITY = 16
ARRIVAL_TOLERANCE = 0.5
DEFAULT_DECEL_DIST = 15.0

# Counter-clockwise one metre square, in cm.
DEFAULT_X = (0.0, 0.0, 100.0, 100.0, 0.0, LAST_ELEM)
DEFAULT_Y = (0.0, 100.0, 100.0, 0.0, 0.0, LAST_ELEM)


class Segment(IntEnum):
    """Outcome of checking progress towards the current waypoint."""

    EN_ROUTE = 0
    REACHED = 1
    DETOUR_REACHED = 2


class SlowReason(IntFlag):
    """Reasons the robot should slow down."""

    NONE = 0
    OBSTACLE = 0x01
    APPROACHING_TARGET = 0x02


@dataclass
class TempWaypoint:
    """A detour waypoint and the route point it temporarily replaces."""

    orig_waypt_num: int = 0
    orig_x_target: float = 0.0
    orig_y_target: float = 0.0
    active: bool = False
    temp_waypt_x: float = 0.0
    temp_waypt_y: float = 0.0


class Route:
    """A fixed-capacity list of waypoints ending with a LAST_ELEM marker."""

    def __init__(
        self,
        xs: Sequence[float] = DEFAULT_X,
        ys: Sequence[float] = DEFAULT_Y,
    ) -> None:
        if len(xs) != len(ys):
            raise ValueError("waypoint x and y lists differ in length")
        if len(xs) > ROUTE_CAPACITY:
            raise ValueError(f"a route holds at most {ROUTE_CAPACITY} waypoints")
        padding = [0.0] * (ROUTE_CAPACITY - len(xs))
        self.waypoint_x: list[float] = [float(x) for x in xs] + padding
        self.waypoint_y: list[float] = [float(y) for y in ys] + list(padding)
        self.index = 0
        self.temp = TempWaypoint()
        self.slow_flags = SlowReason.NONE

    def current(self) -> tuple[float, float]:
        """Return the waypoint being driven to."""
        return self.waypoint_x[self.index], self.waypoint_y[self.index]

    def advance(self) -> bool:
        """Move on to the next waypoint; return whether the route has ended."""
        if self.index + 1 >= ROUTE_CAPACITY:
            raise IndexError("route has no further waypoints")
        self.index += 1
        return self.at_end()

    def at_end(self) -> bool:
        """Tell whether the current waypoint is the end-of-route marker."""
        return self.waypoint_x[self.index] == LAST_ELEM

    def reset(self) -> None:
        """Zero every waypoint and return to the first one."""
        self.waypoint_x = [0.0] * ROUTE_CAPACITY
        self.waypoint_y = [0.0] * ROUTE_CAPACITY
        self.index = 0

    def create_temp_waypoint(
        self, location: Location, turn_angle: float, detour_dist: float
    ) -> tuple[float, float]:
        """Replace the current waypoint by a detour point.

        ``turn_angle`` (radians) is the deviation from the current heading and
        ``detour_dist`` (cm) how far to go. The original waypoint is saved
        only when no detour is already in play.
        """
        if not self.temp.active:
            self.temp.orig_waypt_num = self.index
            self.temp.orig_x_target, self.temp.orig_y_target = self.current()
            self.temp.active = True

        new_heading = location.theta + turn_angle
        if new_heading > TWOPI:
            new_heading -= TWOPI
        if new_heading < -TWOPI:
            new_heading += TWOPI

        self.temp.temp_waypt_x = detour_dist * math.sin(new_heading) + location.x_pos
        self.temp.temp_waypt_y = detour_dist * math.cos(new_heading) + location.y_pos

        self.waypoint_x[self.index] = self.temp.temp_waypt_x
        self.waypoint_y[self.index] = self.temp.temp_waypt_y
        return self.temp.temp_waypt_x, self.temp.temp_waypt_y

    def restore_original(self) -> None:
        """Put the saved waypoint back in place and clear the detour."""
        self.waypoint_x[self.index] = self.temp.orig_x_target
        self.waypoint_y[self.index] = self.temp.orig_y_target
        self.temp = TempWaypoint()

    def delta_target(
        self, target: Target, dec_dist: float = DEFAULT_DECEL_DIST
    ) -> Segment:
        """Classify progress towards ``target`` and flag deceleration."""
        distance = target.target_distance
        segment = Segment.EN_ROUTE
        if -ARRIVAL_TOLERANCE < distance < ARRIVAL_TOLERANCE:
            segment = Segment.REACHED
        if self.temp.active and segment == Segment.REACHED:
            segment = Segment.DETOUR_REACHED

        if -dec_dist <= distance <= dec_dist:
            self.slow_flags |= SlowReason.APPROACHING_TARGET
        else:
            self.slow_flags &= ~SlowReason.APPROACHING_TARGET
        return segment