import pytest

from sigmakit.colors import color_names, get_color, pack_argb, unpack_argb
from sigmakit.palette_a_l import colors_a_to_l
from sigmakit.palette_m_z import colors_m_to_z


def test_get_color_known_constant():
    assert get_color("RED") == 0xFFFF0000
    assert get_color("WHITE") == 0xFFFFFFFF


def test_get_color_is_case_and_separator_insensitive():
    assert get_color("alice blue") == get_color("ALICE_BLUE")
    assert get_color("anti-flash-white") == get_color("ANTI_FLASH_WHITE")


def test_get_color_accepts_prefix():
    assert get_color("AE_COLORS_ZAFFRE") == get_color("zaffre")


def test_get_color_unknown_raises():
    with pytest.raises(KeyError):
        get_color("NOT_A_COLOUR")


def test_color_names_cover_both_halves_sorted():
    names = color_names()
    assert names == sorted(names)
    assert set(names) == set(colors_a_to_l()) | set(colors_m_to_z())
    assert len(names) == len(colors_a_to_l()) + len(colors_m_to_z())


def test_every_colour_is_opaque():
    assert all(unpack_argb(get_color(name))[0] == 0xFF for name in color_names())


@pytest.mark.parametrize("channels", [(0, 0, 0, 0), (255, 255, 255, 255), (12, 34, 56, 78), (255, 1, 2, 3)])
def test_pack_unpack_round_trip(channels):
    assert unpack_argb(pack_argb(*channels)) == channels


def test_unpack_pack_round_trip_over_palette():
    for name in color_names():
        value = get_color(name)
        assert pack_argb(*unpack_argb(value)) == value


def test_unpack_black():
    assert unpack_argb(get_color("BLACK")) == (255, 0, 0, 0)


@pytest.mark.parametrize("channels", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 300, 0), (0, 0, 0, -5)])
def test_pack_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        pack_argb(*channels)


@pytest.mark.parametrize("value", [-1, 0x1_0000_0000])
def test_unpack_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        unpack_argb(value)