import pytest

from sigmakit.palette_a_l import colors_a_to_l


@pytest.mark.parametrize(
    "name, value",
    [
        ("AIR_FORCE_BLUE", 0xFF5D8AA8),
        ("BLACK", 0xFF000000),
        ("GREEN", 0xFF00FF00),
        ("LINEN", 0xFFFAF0E6),
        ("LUST", 0xFFE62020),
    ],
)
def test_pinned_values_from_header(name, value):
    assert colors_a_to_l()[name] == value


def test_lime_green_value():
    assert colors_a_to_l()["LIME_GREEN"] == 0xFF32CD32


def test_names_start_with_a_to_l():
    names = colors_a_to_l().keys()
    assert names
    assert all("A" <= name[0] <= "L" for name in names)


def test_names_are_upper_snake_case():
    for name in colors_a_to_l():
        assert name == name.upper()
        assert " " not in name


def test_all_colours_fully_opaque():
    for value in colors_a_to_l().values():
        assert value >> 24 == 0xFF


def test_values_fit_in_32_bits():
    for value in colors_a_to_l().values():
        assert 0 <= value <= 0xFFFFFFFF


def test_returns_independent_copy():
    first = colors_a_to_l()
    first["BLACK"] = 0
    del first["LUST"]
    second = colors_a_to_l()
    assert second["BLACK"] == 0xFF000000
    assert "LUST" in second


def test_no_m_to_z_names():
    colors = colors_a_to_l()
    assert "MAGENTA" not in colors
    assert "WHITE" not in colors