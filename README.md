# clubbot

This package holds the decision-making logic of a small two-wheeled club robot,
written in plain Python with no dependencies outside the standard library.
Everything that would touch hardware is kept to pure functions and small
classes. You can feed them readings from real pins, from a simulator or from
test data.

## Modules

### `clubbot.motor`

- `MotorDirection` is an `IntEnum` of the H-bridge commands: `BRAKE_VCC`, `CW`,
  `CCW` and `BRAKE_GND`.
- `bridge_levels(direction)` returns the `(INA, INB)` logic levels for a
  direction code. It raises `ValueError` for codes outside 0..4.
- `Motor` is a dataclass with the fields `in_a`, `in_b` and `pwm`.
  - `go(direction, pwm)` sets the bridge levels and the duty. It raises
    `ValueError` if the duty is outside 0..255.
  - `off()` sets both levels low and the duty to zero.
- `clip(val, low, high)` limits a value to a range.
- `clip_f(val, low, high)` limits a float to a range and truncates the result
  to an integer.
- `slew(current, target, rate)` moves a value towards a target by at most
  `rate`.
- The constants `RIGHT_MOTOR` (0), `LEFT_MOTOR` (1) and `PWM_MAX` (255).

### `clubbot.navigation`

- `Location` is a dataclass holding the robot pose: `theta`, `deg_theta`,
  `x_pos`, `y_pos`, `right_interval` and `left_interval`. The y axis points
  straight ahead at the start, and the x axis is flipped.
- `Target` is a dataclass holding the target position and the computed
  `target_distance`, `target_bearing`, `heading_error` and
  `deg_heading_error`.
- `Odometer` turns cumulative encoder counts into pose updates.
  - `interval_counts(right, left)` returns the ticks since the last call. The
    sign of the left count is flipped.
  - `update(location, right, left)` advances a `Location`. It uses 104.8
    clicks/cm and a 23.25 cm wheel base.
- `locate_target(target, location)` fills in the distance, the bearing and the
  heading error. The heading error is wrapped to ±π.
- `rotate_in_place_needed(target)` returns true when the heading error is at
  least 5°, and false when it is 0.5° or less.
- `to_rad(deg)` and `to_deg(rad)` convert angles.

### `clubbot.waypoints`

- `Route(xs, ys)` holds up to 16 waypoints and ends with the `LAST_ELEM`
  (9999) marker. By default it is a counter-clockwise square of one metre.
  - `current()` returns the waypoint being driven to.
  - `advance()` moves to the next waypoint and returns whether the route has
    ended.
  - `at_end()` tells whether the current waypoint is the end marker.
  - `reset()` zeroes every waypoint and goes back to the first one.
  - `create_temp_waypoint(location, turn_angle, detour_dist)` replaces the
    current waypoint with a detour point. The original is saved in
    `route.temp`, a `TempWaypoint`.
  - `restore_original()` puts the saved waypoint back.
  - `delta_target(target, dec_dist=15.0)` returns a `Segment`: `EN_ROUTE`,
    `REACHED` or `DETOUR_REACHED`. It also sets or clears
    `SlowReason.APPROACHING_TARGET` in `route.slow_flags`.

### `clubbot.sensors`

- `bumper_state(right_high, left_high)` returns a `BumperHit` flag: `NONE`,
  `RIGHT`, `LEFT` or `BOTH`.
- `echo_distance(start_time, end_time)` converts an ultrasonic echo time in
  microseconds to centimetres. It uses 0.01713 cm/µs and a 16-bit pulse width.
- `UltrasonicSensor` is a dataclass.
  - `trigger()` marks that a ranging pulse has been sent.
  - `measure(start, end)` stores the echo timestamps and returns the distance.
- `ir_object_detected(first_high, second_high)` decides detection from two
  reads of an active-low IR detector.
- `keyes_ir_state(left_reads, right_reads)` combines the `(first, second)`
  read pairs of both sides into a `BumperHit`.
- `Claw(servo_write, open_pos=15, close_pos=100)` is a servo claw. It opens on
  creation and has `open()`, `close()` and `closed`. `servo_write` is any
  callable that takes a position from 0 to 180.

### `clubbot.touchscreen`

- `TouchPoint` is a frozen dataclass with the fields `x`, `y` and `z`.
- `point_from_samples(x_samples, y_samples, z1, z2, rxplate=0)` builds a point
  from raw 10-bit ADC samples.
  - With two samples per axis, the two must agree, otherwise `z` is 0.
  - With three or more samples, the median is used.
  - The y value is flipped back, because the controller reports it inverted.
- `touch_pressure(z1, z2, touch_x, rxplate)` computes the pressure.

### `clubbot.font`

- `FONT` is the corrected 256-glyph 5x7 table.
- `CLASSIC_FONT` is the older 255-glyph table, which lacks glyph #176.
- `glyph_columns(font, code)` returns the five column bytes of a glyph. The
  least significant bit of each byte is the top row.

### `clubbot.gfx`

- `Canvas` is an abstract drawing surface built on `draw_pixel`. It provides:
  - lines, rectangles and filled rectangles
  - circles and filled circles
  - rounded rectangles
  - triangles and filled triangles
  - MSB-first bitmaps (`draw_bitmap`) and XBM bitmaps (`draw_xbitmap`)
  - 5x7 text with scaling, wrapping and an optional CP437 mode: `draw_char`,
    `write`, `print`, `set_cursor`, `set_text_size`, `set_text_color`,
    `set_text_wrap` and `set_cp437`
  - quarter-turn rotation: `set_rotation`, `rotation`, `width` and `height`
- `FrameBuffer(width, height, background=0)` is an in-memory `Canvas`. Call
  `pixel(x, y)` to read a pixel back.
- `Button` is a labelled rounded-rectangle widget. It has `draw(inverted)` and
  `contains(x, y)`, plus the press tracking methods `press`, `is_pressed`,
  `just_pressed` and `just_released`.

## What the package does not do

The package does not read or write pins, encoders, timers, serial ports or
servos. It has no PID controller, no periodic control loop and no task
scheduler, and it has no driver for a physical display. The caller takes the
readings, calls these functions, and acts on what they return.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example: following a route

```python
from clubbot.navigation import Location, Odometer, Target, locate_target, rotate_in_place_needed
from clubbot.waypoints import Route, Segment

route = Route([0.0, 0.0, 100.0], [0.0, 100.0, 100.0])
location = Location()
target = Target()
odometer = Odometer()

right_count, left_count = 0, 0  # read these from your encoders each tick
if route.delta_target(target) == Segment.REACHED:
    route.advance()
target.x_target, target.y_target = route.current()
odometer.update(location, right_count, left_count)
locate_target(target, location)
if rotate_in_place_needed(target):
    ...  # spin towards target.heading_error
```

## Example: drawing

```python
from clubbot.gfx import FrameBuffer

fb = FrameBuffer(240, 320, 0x0000)
fb.draw_circle(120, 160, 40, 0xFFFF)
fb.set_cursor(10, 10)
fb.print("Hello")
print(fb.pixel(120, 120))  # 65535: the top of the circle
```