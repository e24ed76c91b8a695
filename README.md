# warfield

Game logic for a turn-based tactics game played on a 10 × 15 grid of
squares. Every piece works on plain Python objects, so a front end or a
test can drive it directly.

## Modules

- `warfield.units` defines the unit kinds (`SoldiersType`: infantry, machine
  gunner, artillery, scout, armored), factions (`Admin`), abilities
  (`AbilityType`) and committed AI moves (`EnemyMove`).
  `make_unit(kind, chara_id, name, admin)` builds a full-strength
  `FieldCharacter` with the standard stats for its kind.
  `FieldCharacter.soldier_ratio()` and `morale_ratio()` report strength as
  fractions, and `reset_ai()` clears the unit's per-turn decision.
- `warfield.board` contains the `Board` of `Square`s. `square_id`, `coords`
  and `manhattan` convert between coordinates, ids and grid distance.
  `Board.place`, `move`, `remove` and `neighbours` manage units on the grid.
  Squares off the board and illegal placements raise `BoardError`.
- `warfield.enemy_ai` plans the enemy side's turn:
  - `generate_possible_actions` lists a unit's options. It can always wait,
    it can attack the nearest rebel within its reach, and it can move to any
    free square reachable within its move range, found by breadth-first
    search.
  - `evaluate_action` scores an action. An attack scores 1000, a move scores
    1000 minus 10 per square of distance to the nearest rebel, and a wait
    scores 1.
  - `select_best_action` picks the highest score. On a tie the earliest
    action wins.
  - `EnemyAI.decide` records the choice on the unit. `plan_turn` decides for
    every living unit, and `all_moved` checks whether the side has finished
    acting.
- `warfield.learning` summarises a list of `PlayerActionLog` entries into a
  `LearningAIData` profile with a `PlayerTendency`: offensive, defensive,
  near-dead (a unit below 20 % HP becomes the focus) or leader (a unit that
  dealt more than 30 damage becomes the focus). `save_learning_data` writes
  the profile as indented JSON. `load_learning_data` reads it back and
  returns `None` when the file cannot be opened. `create_learning_data`
  analyses the logs and saves the result in one step.
- `warfield.camera` provides `Vec3` and `FlyingCamera`:
  - `step` applies one frame of pan and zoom input, with momentum that
    decays.
  - `opening_step` runs the opening fly-in.
  - `focus_on` centres the camera over a point.
  - `battle_view` and `battle_camera_position` frame a fight from the side.
- `warfield.hud_status` calculates what the unit status panels show:
  - `meter_arrow_end` gives where a soldier or morale arrow rests.
  - `unit_readout` gives the meter figures; an undetected enemy shows
    `ERR`.
  - `status_name` gives the panel name; an undetected enemy shows no
    signal.
  - `label_colour` gives the faction colour.
  - `damage_effect_count` gives how many damage splashes (1 to 3) to show.
- `warfield.field_menu` covers the pre-battle unit list. `portrait_texture`
  maps a unit kind to its portrait, `menu_bar_positions` lays out the
  separator bars, `bar_colours` highlights the selected row, and
  `menu_visible` decides whether the menu is drawn.

## Example

```python
from warfield.board import Board
from warfield.units import Admin, SoldiersType, make_unit
from warfield.enemy_ai import EnemyAI

board = Board()
rebel = make_unit(SoldiersType.INFANTRY, 0, "1st Company", Admin.REBEL)
enemy = make_unit(SoldiersType.SCOUT, 0, "Recon", Admin.IMPERIAL)
board.place(rebel, 42)
board.place(enemy, 45)

ai = EnemyAI(board)
action = ai.decide(enemy)
print(action.action_type, action.target_square_id)  # AIActionType.ATTACK 42
```

## What it does not do

This is a library only. It has no command, no game loop and no rendering.
Callers draw sprites, models and text themselves. The package does not
include text or font layout for the HUD, terrain description panels,
on-screen guide text, side-menu styling, or the animated ability panel.
Combat resolution, damage and turn changes on the player side are also left
to the caller.

## Tests

```
pip install -e ".[test]"
pytest
```