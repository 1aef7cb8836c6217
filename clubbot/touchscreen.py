"""Resistive touch screen point and pressure calculation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

ADC_MAX = 1023
PRESSURE_THRESHOLD = 10


@dataclass(frozen=True)
class TouchPoint:
    """A touch reading: position and pressure (0 means no valid touch)."""

    x: int = 0
    y: int = 0
    z: int = 0


def touch_pressure(z1: int, z2: int, touch_x: int, rxplate: int) -> int:
    """Pressure from the two cross-plate readings.

    With a known X-plate resistance the touch resistance is computed;
    otherwise a simple difference of the readings is used.
    """
    if rxplate != 0:
        if z1 == 0:
            raise ValueError("z1 reading of zero gives no pressure")
        rtouch = z2 / z1
        rtouch -= 1
        rtouch *= touch_x
        rtouch *= rxplate
        rtouch /= 1024
        return int(rtouch)
    return ADC_MAX - (z2 - z1)


def _settled_sample(samples: Sequence[int]) -> tuple[int, bool]:
    """Pick the representative sample and tell whether the reading is stable."""
    if not samples:
        raise ValueError("at least one sample is needed")
    values = list(samples)
    valid = True
    if len(values) == 2:
        valid = values[0] == values[1]
    elif len(values) > 2:
        values.sort()
    return values[len(values) // 2], valid


def point_from_samples(
    x_samples: Sequence[int],
    y_samples: Sequence[int],
    z1: int,
    z2: int,
    rxplate: int = 0,
) -> TouchPoint:
    """Build a touch point from raw analog samples.

    Two samples per axis must agree or the pressure is reported as zero;
    three or more are reduced to their median. The controller reports Y
    inverted, so it is flipped back.
    """
    x_raw, x_valid = _settled_sample(x_samples)
    y_raw, y_valid = _settled_sample(y_samples)
    x = ADC_MAX - x_raw
    y = ADC_MAX - y_raw
    z = touch_pressure(z1, z2, x, rxplate)
    if not (x_valid and y_valid):
        z = 0
    return TouchPoint(x, ADC_MAX - y, z)