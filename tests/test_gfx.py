import pytest

from clubbot.font import FONT, glyph_columns
from clubbot.gfx import Button, Canvas, FrameBuffer


def painted(fb, color):
    return {
        (x, y)
        for x in range(fb.width())
        for y in range(fb.height())
        if fb.pixel(x, y) == color
    }


@pytest.fixture
def fb():
    return FrameBuffer(40, 30, background=0)


def test_canvas_is_abstract():
    with pytest.raises(TypeError):
        Canvas(10, 10)


def test_background_and_clipping(fb):
    fb.draw_pixel(-1, 5, 7)
    fb.draw_pixel(40, 5, 7)
    fb.draw_pixel(3, 4, 7)
    assert painted(fb, 7) == {(3, 4)}
    with pytest.raises(IndexError):
        fb.pixel(40, 0)


def test_line_endpoints_and_length(fb):
    fb.draw_line(2, 3, 12, 8, 5)
    pts = painted(fb, 5)
    assert (2, 3) in pts and (12, 8) in pts
    assert len(pts) == 11
    assert len({x for x, _ in pts}) == 11


def test_steep_line_reversed(fb):
    fb.draw_line(5, 20, 7, 2, 5)
    pts = painted(fb, 5)
    assert (5, 20) in pts and (7, 2) in pts
    assert len({y for _, y in pts}) == len(pts) == 19


def test_hline_and_vline(fb):
    fb.draw_fast_hline(1, 1, 5, 3)
    fb.draw_fast_vline(10, 2, 4, 4)
    assert painted(fb, 3) == {(x, 1) for x in range(1, 6)}
    assert painted(fb, 4) == {(10, y) for y in range(2, 6)}


def test_rect_outline_and_fill(fb):
    fb.draw_rect(2, 2, 6, 4, 1)
    pts = painted(fb, 1)
    assert all(x in (2, 7) or y in (2, 5) for x, y in pts)
    assert (4, 3) not in pts
    fb.fill_rect(2, 2, 6, 4, 2)
    assert len(painted(fb, 2)) == 6 * 4


def test_fill_screen(fb):
    fb.fill_screen(9)
    assert len(painted(fb, 9)) == 40 * 30


def test_circle_symmetry(fb):
    fb.draw_circle(20, 15, 8, 1)
    pts = painted(fb, 1)
    for p in [(20, 23), (20, 7), (28, 15), (12, 15)]:
        assert p in pts
    assert (20, 15) not in pts
    assert pts == {(40 - x, y) for x, y in pts}
    assert pts == {(x, 30 - y) for x, y in pts}


def test_fill_circle_contains_outline(fb):
    fb.draw_circle(20, 15, 6, 1)
    outline = painted(fb, 1)
    fb.fill_circle(20, 15, 6, 2)
    filled = painted(fb, 2)
    assert outline <= filled
    assert (20, 15) in filled
    assert filled == {(40 - x, y) for x, y in filled}


def test_round_rect_fill_covers_outline(fb):
    fb.draw_round_rect(5, 5, 20, 12, 4, 1)
    outline = painted(fb, 1)
    fb.fill_round_rect(5, 5, 20, 12, 4, 2)
    filled = painted(fb, 2)
    assert outline <= filled
    assert (5, 5) not in filled
    assert all(5 <= x < 25 and 5 <= y < 17 for x, y in filled)


def test_fill_triangle_includes_outline(fb):
    fb.draw_triangle(3, 2, 30, 10, 10, 25, 1)
    outline = painted(fb, 1)
    fb.fill_triangle(3, 2, 30, 10, 10, 25, 2)
    filled = painted(fb, 2)
    assert {(3, 2), (30, 10), (10, 25)} <= filled
    assert len(outline - filled) <= len(outline) // 4


def test_fill_triangle_flat(fb):
    fb.fill_triangle(4, 5, 9, 5, 1, 5, 3)
    assert painted(fb, 3) == {(x, 5) for x in range(1, 10)}


def test_bitmap_with_background(fb):
    fb.draw_bitmap(0, 0, bytes([0x80, 0x01]), 8, 2, 1, 2)
    assert painted(fb, 1) == {(0, 0), (7, 1)}
    assert len(painted(fb, 2)) == 14


def test_xbitmap_bit_order(fb):
    fb.draw_xbitmap(0, 0, bytes([0x01]), 8, 1, 1)
    assert painted(fb, 1) == {(0, 0)}


def test_draw_char_matches_glyph(fb):
    fb.draw_char(0, 0, "A", 1, 2, 1)
    cols = glyph_columns(FONT, ord("A"))
    for i in range(6):
        for j in range(8):
            bit = i < 5 and cols[i] >> j & 1
            assert fb.pixel(i, j) == (1 if bit else 2)


def test_draw_char_scaled(fb):
    fb.draw_char(0, 0, "A", 1, 1, 2)
    cols = glyph_columns(FONT, ord("A"))
    for i in range(5):
        for j in range(8):
            expected = 1 if cols[i] >> j & 1 else 0
            assert fb.pixel(2 * i + 1, 2 * j + 1) == expected


def test_classic_charset_shifts_codes():
    a = FrameBuffer(8, 8)
    b = FrameBuffer(8, 8)
    a.draw_char(0, 0, 176, 1, 2, 1)
    b.set_cp437(True)
    b.draw_char(0, 0, 177, 1, 2, 1)
    assert painted(a, 1) == painted(b, 1)


def test_write_newline_and_wrap():
    fb = FrameBuffer(12, 30)
    fb.write("A")
    assert fb.cursor() == (6, 0)
    fb.write("B")
    assert fb.cursor() == (0, 8)
    fb.write("\r")
    assert fb.cursor() == (0, 8)
    fb.set_text_size(0)
    fb.write("\n")
    assert fb.cursor() == (0, 16)


def test_print_counts_and_rejects_wide(fb):
    assert fb.print("hi\n") == 3
    with pytest.raises(ValueError):
        fb.write("\u20ac")


def test_rotation_swaps_dimensions():
    fb = FrameBuffer(10, 20)
    fb.set_rotation(5)
    assert fb.rotation() == 1
    assert (fb.width(), fb.height()) == (20, 10)
    fb.draw_pixel(19, 0, 3)
    assert fb.pixel(19, 0) == 3
    fb.set_rotation(0)
    assert painted(fb, 3) == {(9, 19)}


def test_button_label_truncated_and_contains(fb):
    btn = Button(fb, 20, 15, 20, 10, 1, 2, 3, "ABCDEFGHIJKL", 1)
    assert btn.label == "ABCDEFGHI"
    assert btn.contains(20, 15)
    assert not btn.contains(31, 15)
    assert btn.contains(20, 5)
    assert not btn.contains(20, 21)


def test_button_draw_colors(fb):
    btn = Button(fb, 20, 15, 20, 10, 1, 2, 3, "", 1)
    btn.draw()
    assert fb.pixel(20, 15) == 2
    assert fb.pixel(20, 10) == 1
    btn.draw(True)
    assert fb.pixel(20, 15) == 3


def test_button_press_transitions(fb):
    btn = Button(fb, 20, 15, 20, 10, 1, 2, 3, "OK", 1)
    btn.press(True)
    assert btn.is_pressed() and btn.just_pressed()
    btn.press(True)
    assert not btn.just_pressed()
    btn.press(False)
    assert btn.just_released() and not btn.is_pressed()