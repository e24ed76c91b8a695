"""Unit kinds, factions and the characters that stand on the battlefield."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import NamedTuple


class SoldiersType(Enum):
    """Branch of service a unit belongs to."""

    INFANTRY = auto()
    MACHINEGUNNER = auto()
    ARTILLERY = auto()
    SCOUT = auto()
    ARMORED = auto()


class AIRoutine(Enum):
    """Behaviour pattern assigned to an enemy unit."""

    NONE = auto()
    ATTACK = auto()
    DEFENCE = auto()
    SCOUT = auto()


class Admin(Enum):
    """Faction that controls a unit or square."""

    NONE = auto()
    REBEL = auto()
    IMPERIAL = auto()


class AbilityType(Enum):
    """Special abilities a unit may carry."""

    NONE = auto()
    CONCENTRATED_FIRE = auto()
    BAYONET_CHARGE = auto()
    SCOUT = auto()


class EnemyMove(Enum):
    """Action an AI-controlled unit has committed to this turn."""

    NONE = auto()
    WAIT = auto()
    ATTACK = auto()
    MOVE = auto()


def _no_abilities() -> list[AbilityType]:
    return [AbilityType.NONE, AbilityType.NONE, AbilityType.NONE]


@dataclass(eq=False)
class FieldCharacter:
    """A unit on the field, with its stats and per-turn AI decisions."""

    chara_id: int = -1
    name: str = ""
    kind: SoldiersType = SoldiersType.INFANTRY
    admin: Admin = Admin.NONE
    soldiers: float = -1.0
    max_soldiers: float = -1.0
    morales: float = -1.0
    max_morales: float = -1.0
    position: int = -1
    reach: float = -1.0
    move_range: float = -1.0
    power: float = -1.0
    defence: float = -1.0
    ai_routine: AIRoutine = AIRoutine.NONE
    moved: bool = False
    detected: bool = False
    dead: bool = False
    selected: bool = False
    ai_move: EnemyMove = EnemyMove.NONE
    move_ai_square_id: int = -1
    target_ai_character_id: int = -1
    target_ai_square: int | None = None
    nearest_enemy_square: int | None = None
    abilities: list[AbilityType] = field(default_factory=_no_abilities)

    def reset_ai(self) -> None:
        """Forget the AI decision taken for this turn."""
        self.ai_move = EnemyMove.NONE
        self.target_ai_square = None

    def soldier_ratio(self) -> float:
        """Remaining soldiers as a fraction of full strength."""
        if self.max_soldiers <= 0:
            raise ValueError("unit has no maximum soldier count")
        return self.soldiers / self.max_soldiers

    def morale_ratio(self) -> float:
        """Current morale as a fraction of the maximum."""
        if self.max_morales <= 0:
            raise ValueError("unit has no maximum morale")
        return self.morales / self.max_morales


class _Stats(NamedTuple):
    reach: float
    move_range: float
    power: float
    defence: float
    soldiers: float
    morales: float
    max_morales: float
    abilities: tuple[AbilityType, ...]


_UNIT_STATS: dict[SoldiersType, _Stats] = {
    SoldiersType.INFANTRY: _Stats(
        2.0, 5.0, 30.0, 0.0, 100.0, 50.0, 100.0,
        (AbilityType.BAYONET_CHARGE, AbilityType.SCOUT),
    ),
    SoldiersType.MACHINEGUNNER: _Stats(
        3.0, 4.0, 45.0, 0.0, 80.0, 60.0, 100.0,
        (AbilityType.CONCENTRATED_FIRE, AbilityType.SCOUT),
    ),
    SoldiersType.ARTILLERY: _Stats(
        5.0, 3.0, 40.0, 0.0, 30.0, 20.0, 100.0,
        (AbilityType.CONCENTRATED_FIRE,),
    ),
    SoldiersType.SCOUT: _Stats(
        5.0, 6.0, 20.0, 0.0, 50.0, 50.0, 100.0,
        (AbilityType.SCOUT,),
    ),
    SoldiersType.ARMORED: _Stats(
        4.0, 6.0, 40.0, 75.0, 25.0, 50.0, 100.0,
        (AbilityType.CONCENTRATED_FIRE, AbilityType.SCOUT),
    ),
}


def make_unit(
    kind: SoldiersType, chara_id: int, name: str, admin: Admin
) -> FieldCharacter:
    """Create a full-strength unit of the given kind."""
    try:
        stats = _UNIT_STATS[kind]
    except KeyError:
        raise ValueError(f"unknown unit kind: {kind!r}") from None
    abilities = _no_abilities()
    abilities[: len(stats.abilities)] = stats.abilities
    return FieldCharacter(
        chara_id=chara_id,
        name=name,
        kind=kind,
        admin=admin,
        soldiers=stats.soldiers,
        max_soldiers=stats.soldiers,
        morales=stats.morales,
        max_morales=stats.max_morales,
        reach=stats.reach,
        move_range=stats.move_range,
        power=stats.power,
        defence=stats.defence,
        abilities=abilities,
    )