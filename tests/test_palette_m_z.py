import pytest

from sigmakit.palette_a_l import colors_a_to_l
from sigmakit.palette_m_z import colors_m_to_z


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("RED", 0xFFFF0000),
        ("WHITE", 0xFFFFFFFF),
        ("YELLOW", 0xFFFFFF00),
        ("NAVY", 0xFF000080),
        ("ZINNWALDITE_BROWN", 0xFF2C1608),
        ("MAGENTA", 0xFFCA1F7B),
        ("TEAL", 0xFF008080),
    ],
)
def test_pinned_values_from_header(name, value):
    assert colors_m_to_z()[name] == value


def test_names_start_with_m_to_z():
    names = colors_m_to_z()
    assert names
    assert all("M" <= name[0] <= "Z" for name in names)


def test_names_are_upper_case_identifiers():
    assert all(name == name.upper() and name.isidentifier() for name in colors_m_to_z())


def test_all_colours_are_opaque_32_bit():
    for value in colors_m_to_z().values():
        assert 0 <= value <= 0xFFFFFFFF
        assert value >> 24 == 0xFF


def test_returns_independent_copy():
    first = colors_m_to_z()
    first["RED"] = 0
    del first["WHITE"]
    second = colors_m_to_z()
    assert second["RED"] == 0xFFFF0000
    assert second["WHITE"] == 0xFFFFFFFF


def test_no_overlap_with_first_half():
    assert set(colors_m_to_z()).isdisjoint(colors_a_to_l())


def test_malformed_header_entries_are_well_formed():
    colors = colors_m_to_z()
    assert colors["PERSIAN_INDIGO"] >> 24 == 0xFF
    assert colors["SEAL_BROWN"] >> 24 == 0xFF
    assert colors["SEAL_BROWN"] & 0xFFFF == 0x1414


def test_unknown_name_missing():
    with pytest.raises(KeyError):
        colors_m_to_z()["AMBER"]