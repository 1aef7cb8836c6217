"""Motor driver bridge control and motion-command helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

RIGHT_MOTOR = 0
LEFT_MOTOR = 1
PWM_MAX = 255

# The driver accepts direction codes up to this value. Codes above BRAKE_GND
# leave both bridge inputs low.
_MAX_DIRECTION_CODE = 4


class MotorDirection(IntEnum):
    """Bridge commands understood by the dual H-bridge motor driver."""

    BRAKE_VCC = 0
    CW = 1
    CCW = 2
    BRAKE_GND = 3


def bridge_levels(direction: int) -> tuple[bool, bool]:
    """Return the (INA, INB) logic levels that select ``direction``."""
    code = int(direction)
    if not 0 <= code <= _MAX_DIRECTION_CODE:
        raise ValueError(f"invalid motor direction code: {code}")
    in_a = code <= MotorDirection.CW
    in_b = code in (MotorDirection.BRAKE_VCC, MotorDirection.CCW)
    return in_a, in_b


@dataclass
class Motor:
    """Bridge input levels and PWM duty of one drive motor."""

    in_a: bool = False
    in_b: bool = False
    pwm: int = 0

    def go(self, direction: int, pwm: int) -> None:
        """Drive the motor in ``direction`` at duty ``pwm`` (0..255)."""
        duty = int(pwm)
        if not 0 <= duty <= PWM_MAX:
            raise ValueError(f"pwm out of range 0..{PWM_MAX}: {duty}")
        self.in_a, self.in_b = bridge_levels(direction)
        self.pwm = duty

    def off(self) -> None:
        """Brake the bridge to ground and remove drive."""
        self.in_a = False
        self.in_b = False
        self.pwm = 0


def clip(val: int, low: int, high: int) -> int:
    """Limit ``val`` to the range [low, high]."""
    if val > high:
        return high
    if val < low:
        return low
    return val


def clip_f(val: float, low: float, high: float) -> int:
    """Limit a float to [low, high] and truncate the result to an integer."""
    if val > high:
        return int(high)
    if val < low:
        return int(low)
    return int(val)


def slew(current: int, target: int, rate: int) -> int:
    """Move ``current`` towards ``target`` by at most ``rate``."""
    if target > current:
        stepped = current + rate
        if stepped <= target:
            return stepped
    elif target < current:
        stepped = current - rate
        if stepped >= target:
            return stepped
    return target