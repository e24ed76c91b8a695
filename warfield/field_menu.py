"""Layout and appearance of the pre-battle unit list and its portrait."""

from __future__ import annotations

from warfield.units import SoldiersType

Colour = tuple[float, float, float]

BLACK: Colour = (0.0, 0.0, 0.0)

BAR_COUNT = 10
SPRITE_COUNT = 11
_HIGHLIGHTABLE = 9
_BAR_X = -180.0
_BAR_TOP_Y = 180.0
_BAR_SPACING = 40.0

_PORTRAITS = {
    SoldiersType.INFANTRY: "RebelInfTexture",
    SoldiersType.MACHINEGUNNER: "RebelCavTexture",
    SoldiersType.ARTILLERY: "RebelArtTexture",
    SoldiersType.SCOUT: "RebelSctTexture",
    SoldiersType.ARMORED: "RebelArmTexture",
}


def portrait_texture(kind: SoldiersType) -> str:
    """Texture id of the portrait shown for a unit kind."""
    try:
        return _PORTRAITS[kind]
    except KeyError:
        raise ValueError(f"no portrait for {kind!r}") from None


def menu_bar_positions() -> list[tuple[float, float]]:
    """Screen positions of the separator bars, top to bottom."""
    return [(_BAR_X, _BAR_TOP_Y - _BAR_SPACING * row) for row in range(BAR_COUNT)]


def bar_colours(selected_index: int, ready: bool, highlight: Colour) -> list[Colour]:
    """Colour of every menu sprite; the selected row is lit unless ready."""
    colours = [BLACK] * SPRITE_COUNT
    if not ready and 0 <= selected_index < _HIGHLIGHTABLE:
        colours[selected_index] = highlight
    return colours


def menu_visible(in_field: bool, lighting: bool) -> bool:
    """Whether the menu bars are drawn this frame."""
    return in_field and lighting