"""Learning the player's tendencies from an action log and persisting them."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Iterable

DEFAULT_PATH = "LearningAIData.json"

_NEAR_DEAD_RATIO = 0.2
_LEADER_DAMAGE = 30.0


class PlayerTendency(IntEnum):
    """Overall style the player has shown."""

    NONE = 0
    OFFENSIVE = 1
    DEFENSIVE = 2
    NEAR_DEAD = 3
    LEADER = 4


class ActionName(Enum):
    """Actions a player unit can be logged as taking."""

    ATTACK = auto()
    WAIT = auto()
    MOVE = auto()
    CONCENTRATED_FIRE = auto()
    BAYONET_CHARGE = auto()
    SCOUT = auto()


@dataclass(frozen=True)
class PlayerActionLog:
    """One logged player action and the state of the unit that took it."""

    action_name: ActionName
    character_id: int = -1
    move_forward: int = 0
    hp_percentage: float = 1.0
    damage_dealt: float = 0.0


@dataclass
class LearningAIData:
    """What the AI has learned: the tendency and a unit to focus on."""

    player_tendency: PlayerTendency = PlayerTendency.NONE
    focus_allies_character_id: int = -1


_OFFENSIVE = {ActionName.ATTACK, ActionName.CONCENTRATED_FIRE, ActionName.BAYONET_CHARGE}
_DEFENSIVE = {ActionName.WAIT, ActionName.SCOUT}


def analyse_player_logs(logs: Iterable[PlayerActionLog]) -> LearningAIData:
    """Classify the player's behaviour from a list of logged actions."""
    offensive = defensive = 0
    min_hp_id = -1
    min_hp = 1.0
    max_damage_id = -1
    max_damage = 0.0

    for log in logs:
        if log.action_name in _OFFENSIVE:
            offensive += 1
        elif log.action_name in _DEFENSIVE:
            defensive += 1
        elif log.action_name is ActionName.MOVE:
            if log.move_forward > 0:
                offensive += 1
            else:
                defensive += 1

        if log.hp_percentage < min_hp:
            min_hp = log.hp_percentage
            min_hp_id = log.character_id
        if log.damage_dealt > max_damage:
            max_damage = log.damage_dealt
            max_damage_id = log.character_id

    if min_hp < _NEAR_DEAD_RATIO:
        return LearningAIData(PlayerTendency.NEAR_DEAD, min_hp_id)
    if offensive >= defensive:
        if max_damage > _LEADER_DAMAGE:
            return LearningAIData(PlayerTendency.LEADER, max_damage_id)
        return LearningAIData(PlayerTendency.OFFENSIVE, -1)
    return LearningAIData(PlayerTendency.DEFENSIVE, -1)


def save_learning_data(
    data: LearningAIData, path: str | os.PathLike[str] = DEFAULT_PATH
) -> None:
    """Write learned data as indented JSON."""
    document = {
        "playerTendency": int(data.player_tendency),
        "focusAliesCharacterID": data.focus_allies_character_id,
    }
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(document, handle, indent=4, sort_keys=True)
        handle.write("\n")


def load_learning_data(
    path: str | os.PathLike[str] = DEFAULT_PATH,
) -> LearningAIData | None:
    """Read learned data; None if the file cannot be opened."""
    try:
        with open(path, encoding="utf-8") as handle:
            document = json.load(handle)
    except OSError:
        return None
    try:
        tendency = PlayerTendency(document["playerTendency"])
        focus = int(document["focusAliesCharacterID"])
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed learning data in {path}") from exc
    return LearningAIData(tendency, focus)


def create_learning_data(
    logs: Iterable[PlayerActionLog], path: str | os.PathLike[str] = DEFAULT_PATH
) -> LearningAIData:
    """Analyse a log and save the result; returns what was saved."""
    data = analyse_player_logs(logs)
    save_learning_data(data, path)
    return data