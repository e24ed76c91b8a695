"""Enemy decision making: candidate actions, scoring and turn planning."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Sequence

from warfield.board import Board, Square, coords, manhattan
from warfield.units import Admin, EnemyMove, FieldCharacter

# Search radius used to find the rebel unit an enemy should march towards.
_SEEK_RADIUS = 15.0

ATTACK_SCORE = 1000.0
MOVE_BASE_SCORE = 1000.0
MOVE_DISTANCE_PENALTY = 10.0
WAIT_SCORE = 1.0


class AIActionType(Enum):
    """Kind of action an enemy unit may take."""

    NONE = auto()
    MOVE = auto()
    ATTACK = auto()
    USE_SKILL = auto()
    WAIT = auto()


@dataclass(frozen=True)
class EnemyAction:
    """One candidate action, with its target or destination."""

    action_type: AIActionType = AIActionType.NONE
    target_square_id: int = -1
    target_character_id: int = -1
    move_square_id: int = -1


def nearest_rebel_square(
    board: Board, reach: float, x: int, y: int
) -> Square | None:
    """The square of the closest rebel unit within `reach` steps of (x, y)."""
    radius = math.floor(reach)
    best: Square | None = None
    best_distance = math.inf
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            distance = abs(dx) + abs(dy)
            if distance > reach or not board.in_bounds(x + dx, y + dy):
                continue
            occupant = board.square_at(x + dx, y + dy).character
            if occupant is None or occupant.admin is not Admin.REBEL:
                continue
            if distance < best_distance:
                best_distance = distance
                best = board.square(occupant.position)
    return best


def generate_possible_actions(
    board: Board, character: FieldCharacter
) -> list[EnemyAction]:
    """Every action open to a unit: wait, attack if in range, and moves."""
    actions = [EnemyAction(AIActionType.WAIT)]
    x, y = coords(character.position)

    target = nearest_rebel_square(board, character.reach, x, y)
    if target is not None and target.character is not None:
        actions.append(
            EnemyAction(
                AIActionType.ATTACK,
                target_square_id=target.square_id,
                target_character_id=target.character.chara_id,
            )
        )

    nearest = nearest_rebel_square(board, _SEEK_RADIUS, x, y)
    character.nearest_enemy_square = None if nearest is None else nearest.square_id

    start = character.position
    queue: deque[tuple[int, int]] = deque([(start, 0)])
    visited = {start}
    while queue:
        current, cost = queue.popleft()
        occupant = board.square(current).character
        if (occupant is None or occupant is character) and current != start:
            actions.append(EnemyAction(AIActionType.MOVE, move_square_id=current))
        if cost >= character.move_range:
            continue
        for nxt in board.neighbours(current):
            blocker = board.square(nxt).character
            if (blocker is None or blocker is character) and nxt not in visited:
                visited.add(nxt)
                queue.append((nxt, cost + 1))
    return actions


def evaluate_action(character: FieldCharacter, action: EnemyAction) -> float:
    """Score an action; higher is better."""
    if action.action_type is AIActionType.ATTACK:
        return ATTACK_SCORE if action.target_character_id != -1 else 0.0
    if action.action_type is AIActionType.MOVE:
        if character.nearest_enemy_square is None:
            raise ValueError("unit has no known enemy to move towards")
        distance = manhattan(action.move_square_id, character.nearest_enemy_square)
        return MOVE_BASE_SCORE - distance * MOVE_DISTANCE_PENALTY
    if action.action_type is AIActionType.WAIT:
        return WAIT_SCORE
    return 0.0


def select_best_action(
    character: FieldCharacter, actions: Sequence[EnemyAction]
) -> EnemyAction:
    """The highest-scoring action; the earliest wins a tie."""
    if not actions:
        return EnemyAction()
    best = actions[0]
    best_score = -math.inf
    for action in actions:
        score = evaluate_action(character, action)
        if score > best_score:
            best_score = score
            best = action
    return best


class EnemyAI:
    """Plans the enemy side's turn on a board."""

    def __init__(self, board: Board) -> None:
        self.board = board

    def decide(self, character: FieldCharacter) -> EnemyAction:
        """Choose and record the best action for one unit."""
        action = select_best_action(
            character, generate_possible_actions(self.board, character)
        )
        if action.action_type is AIActionType.WAIT:
            character.ai_move = EnemyMove.WAIT
            character.target_ai_square = None
            character.target_ai_character_id = -1
            character.move_ai_square_id = -1
        elif action.action_type is AIActionType.ATTACK:
            character.ai_move = EnemyMove.ATTACK
            character.target_ai_square = action.target_square_id
            character.target_ai_character_id = action.target_character_id
            character.move_ai_square_id = -1
        elif action.action_type is AIActionType.MOVE:
            character.ai_move = EnemyMove.MOVE
            character.target_ai_square = None
            character.move_ai_square_id = action.move_square_id
        return action

    def plan_turn(self, enemies: Iterable[FieldCharacter]) -> bool:
        """Decide for every living unit; True once all of them have a plan."""
        units = list(enemies)
        for unit in units:
            if not unit.dead:
                self.decide(unit)
        decided = 0
        dead = 0
        for unit in units:
            if unit.dead:
                dead += 1
                unit.reset_ai()
            elif unit.ai_move is not EnemyMove.NONE:
                decided += 1
        return decided == len(units) - dead

    def all_moved(self, enemies: Iterable[FieldCharacter]) -> bool:
        """Whether every enemy unit has already acted this turn."""
        return all(unit.moved for unit in enemies)