"""Lookup of the named ARGB colour palette and ARGB packing helpers."""

from __future__ import annotations

from types import MappingProxyType

from sigmakit.palette_a_l import colors_a_to_l
from sigmakit.palette_m_z import colors_m_to_z

_PREFIX = "AE_COLORS_"
_PALETTE = MappingProxyType({**colors_a_to_l(), **colors_m_to_z()})


def _normalize(name: str) -> str:
    key = name.strip().upper().replace(" ", "_").replace("-", "_")
    if key.startswith(_PREFIX):
        key = key[len(_PREFIX):]
    return key


def get_color(name: str) -> int:
    """Return the 0xAARRGGBB value of a named colour.

    Names are matched case-insensitively; spaces and hyphens count as
    underscores and an ``AE_COLORS_`` prefix is accepted.
    """
    key = _normalize(name)
    try:
        return _PALETTE[key]
    except KeyError:
        raise KeyError(f"unknown colour name: {name!r}") from None


def color_names() -> list[str]:
    """Return every known colour name, sorted."""
    return sorted(_PALETTE)


def _check_channel(label: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{label} channel out of range 0..255: {value}")
    return value


def pack_argb(a: int, r: int, g: int, b: int) -> int:
    """Pack four 8-bit channels into a 0xAARRGGBB integer."""
    channels = zip("argb", (a, r, g, b))
    a, r, g, b = (_check_channel(label, value) for label, value in channels)
    return (a << 24) | (r << 16) | (g << 8) | b


def unpack_argb(value: int) -> tuple[int, int, int, int]:
    """Split a 0xAARRGGBB integer into its (a, r, g, b) channels."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"ARGB value out of range: {value:#x}")
    return (value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF