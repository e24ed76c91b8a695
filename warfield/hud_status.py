"""What the unit status panels show: meter arrows, readouts, names and damage effects."""

from __future__ import annotations

from warfield.units import Admin, FieldCharacter

Colour = tuple[float, float, float, float]

ARROW_LEFT_X = 305.0
ARROW_RANGE = 140.0
CONCEALED_RATIO = 1.15
BAR_MOVING_TIME = 0.5

CONCEALED_READOUT = "ERR"
NO_SIGNAL = "信号無し"

REBEL_COLOUR: Colour = (0.0, 0.0, 1.0, 1.0)
IMPERIAL_COLOUR: Colour = (1.0, 0.0, 0.0, 1.0)
NEUTRAL_COLOUR: Colour = (1.0, 1.0, 1.0, 1.0)

_LIGHT_DAMAGE_RATIO = 0.66
_MEDIUM_DAMAGE_RATIO = 0.33


def _concealed(character: FieldCharacter) -> bool:
    return character.admin is Admin.IMPERIAL and not character.detected


def meter_arrow_end(current: float, maximum: float, concealed: bool) -> float:
    """Screen x where a meter arrow comes to rest.

    A concealed unit drives the arrow past the end of the scale.
    """
    if concealed:
        ratio = CONCEALED_RATIO
    else:
        if maximum <= 0:
            raise ValueError("meter maximum must be positive")
        ratio = current / maximum
    return ARROW_LEFT_X + ARROW_RANGE * ratio


def unit_readout(character: FieldCharacter | None) -> tuple[str, str]:
    """Soldier and morale figures shown on the digital meters."""
    if character is None:
        return "", ""
    if _concealed(character):
        return CONCEALED_READOUT, CONCEALED_READOUT
    return str(int(character.soldiers)), str(int(character.morales))


def status_name(character: FieldCharacter) -> str:
    """Name shown on the status panel; undetected enemies show no signal."""
    if character.admin is Admin.REBEL:
        return character.name
    if character.admin is Admin.IMPERIAL:
        return character.name if character.detected else NO_SIGNAL
    return ""


def label_colour(admin: Admin) -> Colour:
    """Colour of the status panel label for a faction."""
    if admin is Admin.REBEL:
        return REBEL_COLOUR
    if admin is Admin.IMPERIAL:
        return IMPERIAL_COLOUR
    return NEUTRAL_COLOUR


def damage_effect_count(ratio: float) -> int:
    """How many damage splashes to show for the remaining strength ratio."""
    if ratio > _LIGHT_DAMAGE_RATIO:
        return 1
    if ratio > _MEDIUM_DAMAGE_RATIO:
        return 2
    return 3