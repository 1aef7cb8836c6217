"""Device-independent drawing primitives, text rendering and touch buttons."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from clubbot.font import FONT, glyph_columns

WHITE = 0xFFFF
BUTTON_LABEL_MAX = 9
CHAR_WIDTH = 6
CHAR_HEIGHT = 8
CP437_MISSING_GLYPH = 176

Char = Union[int, str]


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _char_code(c: Char) -> int:
    code = ord(c) if isinstance(c, str) else int(c)
    if not 0 <= code <= 0xFF:
        raise ValueError(f"character code outside 0..255: {code}")
    return code


class Canvas(ABC):
    """Drawing surface built on a single pixel primitive.

    Subclasses supply ``draw_pixel`` and may override the line and
    rectangle primitives with faster versions.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.raw_width = width
        self.raw_height = height
        self._width = width
        self._height = height
        self._rotation = 0
        self.cursor_x = 0
        self.cursor_y = 0
        self.text_size = 1
        self.text_color = WHITE
        self.text_bg_color = WHITE
        self.wrap = True
        self.cp437 = False

    @abstractmethod
    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel."""

    # -- lines and rectangles -------------------------------------------

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line with Bresenham's algorithm."""
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0
        dx = x1 - x0
        dy = abs(y1 - y0)
        err = dx // 2
        ystep = 1 if y0 < y1 else -1
        y = y0
        for x in range(x0, x1 + 1):
            if steep:
                self.draw_pixel(y, x, color)
            else:
                self.draw_pixel(x, y, color)
            err -= dy
            if err < 0:
                y += ystep
                err += dx

    def draw_fast_vline(self, x: int, y: int, h: int, color: int) -> None:
        """Draw a vertical line ``h`` pixels long."""
        self.draw_line(x, y, x, y + h - 1, color)

    def draw_fast_hline(self, x: int, y: int, w: int, color: int) -> None:
        """Draw a horizontal line ``w`` pixels long."""
        self.draw_line(x, y, x + w - 1, y, color)

    def draw_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Draw a rectangle outline."""
        self.draw_fast_hline(x, y, w, color)
        self.draw_fast_hline(x, y + h - 1, w, color)
        self.draw_fast_vline(x, y, h, color)
        self.draw_fast_vline(x + w - 1, y, h, color)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Fill a rectangle."""
        for column in range(x, x + w):
            self.draw_fast_vline(column, y, h, color)

    def fill_screen(self, color: int) -> None:
        """Fill the whole surface."""
        self.fill_rect(0, 0, self._width, self._height, color)

    # -- circles ----------------------------------------------------------

    @staticmethod
    def _circle_steps(r: int):
        """Yield the (x, y) octant points of a midpoint circle."""
        f = 1 - r
        ddf_x = 1
        ddf_y = -2 * r
        x = 0
        y = r
        while x < y:
            if f >= 0:
                y -= 1
                ddf_y += 2
                f += ddf_y
            x += 1
            ddf_x += 2
            f += ddf_x
            yield x, y

    def draw_circle(self, x0: int, y0: int, r: int, color: int) -> None:
        """Draw a circle outline."""
        self.draw_pixel(x0, y0 + r, color)
        self.draw_pixel(x0, y0 - r, color)
        self.draw_pixel(x0 + r, y0, color)
        self.draw_pixel(x0 - r, y0, color)
        for x, y in self._circle_steps(r):
            self.draw_pixel(x0 + x, y0 + y, color)
            self.draw_pixel(x0 - x, y0 + y, color)
            self.draw_pixel(x0 + x, y0 - y, color)
            self.draw_pixel(x0 - x, y0 - y, color)
            self.draw_pixel(x0 + y, y0 + x, color)
            self.draw_pixel(x0 - y, y0 + x, color)
            self.draw_pixel(x0 + y, y0 - x, color)
            self.draw_pixel(x0 - y, y0 - x, color)

    def draw_circle_helper(
        self, x0: int, y0: int, r: int, corners: int, color: int
    ) -> None:
        """Draw the quarter arcs selected by the bits of ``corners``."""
        for x, y in self._circle_steps(r):
            if corners & 0x4:
                self.draw_pixel(x0 + x, y0 + y, color)
                self.draw_pixel(x0 + y, y0 + x, color)
            if corners & 0x2:
                self.draw_pixel(x0 + x, y0 - y, color)
                self.draw_pixel(x0 + y, y0 - x, color)
            if corners & 0x8:
                self.draw_pixel(x0 - y, y0 + x, color)
                self.draw_pixel(x0 - x, y0 + y, color)
            if corners & 0x1:
                self.draw_pixel(x0 - y, y0 - x, color)
                self.draw_pixel(x0 - x, y0 - y, color)

    def fill_circle(self, x0: int, y0: int, r: int, color: int) -> None:
        """Fill a circle."""
        self.draw_fast_vline(x0, y0 - r, 2 * r + 1, color)
        self.fill_circle_helper(x0, y0, r, 3, 0, color)

    def fill_circle_helper(
        self, x0: int, y0: int, r: int, corners: int, delta: int, color: int
    ) -> None:
        """Fill the right (bit 0) and/or left (bit 1) half of a circle.

        ``delta`` stretches each vertical span, for rounded rectangles.
        """
        for x, y in self._circle_steps(r):
            if corners & 0x1:
                self.draw_fast_vline(x0 + x, y0 - y, 2 * y + 1 + delta, color)
                self.draw_fast_vline(x0 + y, y0 - x, 2 * x + 1 + delta, color)
            if corners & 0x2:
                self.draw_fast_vline(x0 - x, y0 - y, 2 * y + 1 + delta, color)
                self.draw_fast_vline(x0 - y, y0 - x, 2 * x + 1 + delta, color)

    def draw_round_rect(
        self, x: int, y: int, w: int, h: int, r: int, color: int
    ) -> None:
        """Draw a rectangle outline with rounded corners of radius ``r``."""
        self.draw_fast_hline(x + r, y, w - 2 * r, color)
        self.draw_fast_hline(x + r, y + h - 1, w - 2 * r, color)
        self.draw_fast_vline(x, y + r, h - 2 * r, color)
        self.draw_fast_vline(x + w - 1, y + r, h - 2 * r, color)
        self.draw_circle_helper(x + r, y + r, r, 1, color)
        self.draw_circle_helper(x + w - r - 1, y + r, r, 2, color)
        self.draw_circle_helper(x + w - r - 1, y + h - r - 1, r, 4, color)
        self.draw_circle_helper(x + r, y + h - r - 1, r, 8, color)

    def fill_round_rect(
        self, x: int, y: int, w: int, h: int, r: int, color: int
    ) -> None:
        """Fill a rectangle with rounded corners of radius ``r``."""
        self.fill_rect(x + r, y, w - 2 * r, h, color)
        self.fill_circle_helper(x + w - r - 1, y + r, r, 1, h - 2 * r - 1, color)
        self.fill_circle_helper(x + r, y + r, r, 2, h - 2 * r - 1, color)

    # -- triangles --------------------------------------------------------

    def draw_triangle(
        self, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, color: int
    ) -> None:
        """Draw a triangle outline."""
        self.draw_line(x0, y0, x1, y1, color)
        self.draw_line(x1, y1, x2, y2, color)
        self.draw_line(x2, y2, x0, y0, color)

    def fill_triangle(
        self, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, color: int
    ) -> None:
        """Fill a triangle with horizontal spans."""
        if y0 > y1:
            y0, y1 = y1, y0
            x0, x1 = x1, x0
        if y1 > y2:
            y2, y1 = y1, y2
            x2, x1 = x1, x2
        if y0 > y1:
            y0, y1 = y1, y0
            x0, x1 = x1, x0

        if y0 == y2:
            a = min(x0, x1, x2)
            b = max(x0, x1, x2)
            self.draw_fast_hline(a, y0, b - a + 1, color)
            return

        dx01, dy01 = x1 - x0, y1 - y0
        dx02, dy02 = x2 - x0, y2 - y0
        dx12, dy12 = x2 - x1, y2 - y1
        sa = 0
        sb = 0

        # The y1 scanline belongs to the upper part only for a flat bottom.
        last = y1 if y1 == y2 else y1 - 1
        y = y0
        while y <= last:
            a = x0 + _tdiv(sa, dy01)
            b = x0 + _tdiv(sb, dy02)
            sa += dx01
            sb += dx02
            if a > b:
                a, b = b, a
            self.draw_fast_hline(a, y, b - a + 1, color)
            y += 1

        sa = dx12 * (y - y1)
        sb = dx02 * (y - y0)
        while y <= y2:
            a = x1 + _tdiv(sa, dy12)
            b = x0 + _tdiv(sb, dy02)
            sa += dx12
            sb += dx02
            if a > b:
                a, b = b, a
            self.draw_fast_hline(a, y, b - a + 1, color)
            y += 1

    # -- bitmaps ----------------------------------------------------------

    def draw_bitmap(
        self,
        x: int,
        y: int,
        bitmap: Sequence[int],
        w: int,
        h: int,
        color: int,
        bg: Optional[int] = None,
    ) -> None:
        """Draw a 1-bit bitmap, most significant bit leftmost.

        Clear bits are painted with ``bg`` unless it is None.
        """
        byte_width = (w + 7) // 8
        for j in range(h):
            for i in range(w):
                if bitmap[j * byte_width + i // 8] & (0x80 >> (i & 7)):
                    self.draw_pixel(x + i, y + j, color)
                elif bg is not None:
                    self.draw_pixel(x + i, y + j, bg)

    def draw_xbitmap(
        self, x: int, y: int, bitmap: Sequence[int], w: int, h: int, color: int
    ) -> None:
        """Draw an XBM bitmap, least significant bit leftmost."""
        byte_width = (w + 7) // 8
        for j in range(h):
            for i in range(w):
                if bitmap[j * byte_width + i // 8] & (1 << (i % 8)):
                    self.draw_pixel(x + i, y + j, color)

    # -- text -------------------------------------------------------------

    def draw_char(
        self, x: int, y: int, c: Char, color: int, bg: int, size: int
    ) -> None:
        """Draw one 5x7 glyph scaled by ``size``; ``bg == color`` is transparent."""
        if (
            x >= self._width
            or y >= self._height
            or x + CHAR_WIDTH * size - 1 < 0
            or y + CHAR_HEIGHT * size - 1 < 0
        ):
            return
        code = _char_code(c)
        if not self.cp437 and code >= CP437_MISSING_GLYPH:
            code = (code + 1) & 0xFF
        columns = glyph_columns(FONT, code) + b"\x00"
        for i, line in enumerate(columns):
            for j in range(CHAR_HEIGHT):
                if line & 0x1:
                    paint = color
                elif bg != color:
                    paint = bg
                else:
                    line >>= 1
                    continue
                if size == 1:
                    self.draw_pixel(x + i, y + j, paint)
                else:
                    self.fill_rect(x + i * size, y + j * size, size, size, paint)
                line >>= 1

    def write(self, c: Char) -> int:
        """Render one character at the cursor and advance it; return 1."""
        code = _char_code(c)
        if code == ord("\n"):
            self.cursor_y += self.text_size * CHAR_HEIGHT
            self.cursor_x = 0
        elif code != ord("\r"):
            self.draw_char(
                self.cursor_x,
                self.cursor_y,
                code,
                self.text_color,
                self.text_bg_color,
                self.text_size,
            )
            self.cursor_x += self.text_size * CHAR_WIDTH
            if self.wrap and self.cursor_x > self._width - self.text_size * CHAR_WIDTH:
                self.cursor_y += self.text_size * CHAR_HEIGHT
                self.cursor_x = 0
        return 1

    def print(self, text: str) -> int:
        """Write every character of ``text``; return how many were written."""
        return sum(self.write(ch) for ch in text)

    def set_cursor(self, x: int, y: int) -> None:
        """Move the text cursor."""
        self.cursor_x = x
        self.cursor_y = y

    def cursor(self) -> tuple[int, int]:
        """Return the text cursor position."""
        return self.cursor_x, self.cursor_y

    def set_text_size(self, size: int) -> None:
        """Set the text scale; values below 1 become 1."""
        self.text_size = size if size > 0 else 1

    def set_text_color(self, color: int, bg: Optional[int] = None) -> None:
        """Set text colours; without ``bg`` the background is transparent."""
        self.text_color = color
        self.text_bg_color = color if bg is None else bg

    def set_text_wrap(self, wrap: bool) -> None:
        """Turn wrapping at the right edge on or off."""
        self.wrap = bool(wrap)

    def set_cp437(self, enabled: bool = True) -> None:
        """Use the correct code page 437 character codes."""
        self.cp437 = bool(enabled)

    # -- geometry ---------------------------------------------------------

    def set_rotation(self, rotation: int) -> None:
        """Rotate the coordinate system by quarter turns."""
        self._rotation = rotation & 3
        if self._rotation in (0, 2):
            self._width, self._height = self.raw_width, self.raw_height
        else:
            self._width, self._height = self.raw_height, self.raw_width

    def rotation(self) -> int:
        """Return the current rotation, 0..3."""
        return self._rotation

    def width(self) -> int:
        """Width under the current rotation."""
        return self._width

    def height(self) -> int:
        """Height under the current rotation."""
        return self._height


class FrameBuffer(Canvas):
    """A canvas backed by an in-memory pixel array."""

    def __init__(self, width: int, height: int, background: int = 0) -> None:
        super().__init__(width, height)
        self._pixels = [[background] * width for _ in range(height)]

    def _to_raw(self, x: int, y: int) -> tuple[int, int]:
        if self._rotation == 1:
            return self.raw_width - 1 - y, x
        if self._rotation == 2:
            return self.raw_width - 1 - x, self.raw_height - 1 - y
        if self._rotation == 3:
            return y, self.raw_height - 1 - x
        return x, y

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points off the surface are ignored."""
        if x < 0 or y < 0 or x >= self._width or y >= self._height:
            return
        rx, ry = self._to_raw(x, y)
        self._pixels[ry][rx] = color

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at a point in rotated coordinates."""
        if x < 0 or y < 0 or x >= self._width or y >= self._height:
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height}")
        rx, ry = self._to_raw(x, y)
        return self._pixels[ry][rx]


class Button:
    """A labelled rounded-rectangle button centred on (x, y)."""

    def __init__(
        self,
        canvas: Canvas,
        x: int,
        y: int,
        w: int,
        h: int,
        outline: int,
        fill: int,
        text_color: int,
        label: str,
        text_size: int,
    ) -> None:
        self.canvas = canvas
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.outline_color = outline
        self.fill_color = fill
        self.text_color = text_color
        self.label = label[:BUTTON_LABEL_MAX]
        self.text_size = text_size
        self.rotation = canvas.rotation()
        self._current = False
        self._last = False

    def draw(self, inverted: bool = False) -> None:
        """Draw the button; ``inverted`` swaps fill and text colours."""
        if inverted:
            fill, text = self.text_color, self.fill_color
        else:
            fill, text = self.fill_color, self.text_color
        left = self.x - self.w // 2
        top = self.y - self.h // 2
        radius = min(self.w, self.h) // 4
        self.canvas.fill_round_rect(left, top, self.w, self.h, radius, fill)
        self.canvas.draw_round_rect(
            left, top, self.w, self.h, radius, self.outline_color
        )
        self.canvas.set_cursor(
            self.x - len(self.label) * 3 * self.text_size,
            self.y - 4 * self.text_size,
        )
        self.canvas.set_text_color(text)
        self.canvas.set_text_size(self.text_size)
        self.canvas.print(self.label)

    def contains(self, x: int, y: int) -> bool:
        """Tell whether a point falls on the button."""
        if x < self.x - self.w // 2 or x > self.x + self.w // 2:
            return False
        if y < self.y - self.h or y > self.y + self.h // 2:
            return False
        return True

    def press(self, pressed: bool) -> None:
        """Record the current pressed state."""
        self._last = self._current
        self._current = bool(pressed)

    def is_pressed(self) -> bool:
        """Tell whether the button is pressed now."""
        return self._current

    def just_pressed(self) -> bool:
        """Tell whether the button went down with the last update."""
        return self._current and not self._last

    def just_released(self) -> bool:
        """Tell whether the button came up with the last update."""
        return not self._current and self._last