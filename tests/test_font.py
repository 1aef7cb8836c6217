import pytest

from clubbot.font import CLASSIC_FONT, FONT, GLYPH_WIDTH, glyph_columns


def test_table_sizes():
    corrected = b"".join(glyph_columns(FONT, code) for code in range(256))
    classic = b"".join(glyph_columns(CLASSIC_FONT, code) for code in range(255))
    assert len(corrected) == len(FONT) == 256 * GLYPH_WIDTH
    assert len(classic) == len(CLASSIC_FONT) == 255 * GLYPH_WIDTH


def test_letter_a_glyph():
    assert glyph_columns(FONT, ord("A")) == bytes([0x7C, 0x12, 0x11, 0x12, 0x7C])


def test_digit_zero_glyph():
    assert glyph_columns(FONT, ord("0")) == bytes([0x3E, 0x51, 0x49, 0x45, 0x3E])


def test_light_shade_block_present_only_in_corrected_font():
    assert glyph_columns(FONT, 176) == bytes([0x55, 0x00, 0x55, 0x00, 0x55])
    assert glyph_columns(CLASSIC_FONT, 176) != glyph_columns(FONT, 176)


def test_space_and_last_glyph_are_blank():
    assert glyph_columns(FONT, ord(" ")) == bytes(GLYPH_WIDTH)
    assert glyph_columns(FONT, 255) == bytes(GLYPH_WIDTH)
    assert glyph_columns(CLASSIC_FONT, 254) == bytes(GLYPH_WIDTH)


@pytest.mark.parametrize("code", range(0, 132))
def test_fonts_agree_on_low_codes(code):
    assert glyph_columns(FONT, code) == glyph_columns(CLASSIC_FONT, code)


def test_glyphs_tile_the_table():
    joined = b"".join(glyph_columns(FONT, code) for code in range(256))
    assert joined == FONT


def test_every_glyph_has_five_columns():
    assert all(len(glyph_columns(CLASSIC_FONT, c)) == GLYPH_WIDTH for c in range(255))


@pytest.mark.parametrize("code", [-1, 256, 1000])
def test_out_of_range_code_rejected(code):
    with pytest.raises(ValueError):
        glyph_columns(FONT, code)


def test_classic_font_has_no_glyph_255():
    with pytest.raises(ValueError):
        glyph_columns(CLASSIC_FONT, 255)


def test_malformed_table_rejected():
    with pytest.raises(ValueError):
        glyph_columns(b"\x00\x01\x02", 0)