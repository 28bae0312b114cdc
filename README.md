# feltside

This package holds the building blocks for a poker table. Its main game is 2-7 Triple Draw Lowball. It has these modules:

- **`feltside.model`** holds the data types. These are `Card`, `Rank`, `Suit`, `PlayerAction`, `PlayerState`, `Player` and `GameState`. `parse_card("AS")` turns a two-character code into a `Card`. The rank is written as `2`–`9`, `T`, `J`, `Q`, `K` or `A`, and the suit as `H`, `D`, `C` or `S` in either case. A malformed code raises `ValueError`.
- **`feltside.personality`** holds seven built-in opponent styles: Fish, Rock, TAG, LAG, Maniac, Calling Station and Shark. `get_personality(name)` looks one up and ignores case. An unknown name raises `KeyError`. `all_personalities()` returns all seven. You can also build your own `Personality`. Every trait must lie between 0.0 and 1.0, and `skill_level` between 1 and 10.
- **`feltside.ai`** holds the computer opponent. It provides:
  - `hand_strength`, `pot_odds`, `position_modifier` and `apply_tilt_modifier`.
  - `make_decision`, which returns a `Decision` with an action, an amount, a confidence and a reasoning.
  - `draw_decision`, which gives the indices of the cards to discard.
  - `get_tell`.
  - `AIState`, which tracks tilt and recent actions. It offers `reset()`, `update_tilt()` and `record()`.
- **`feltside.input_handler`** provides `InputHandler`, a keyboard state machine. Its modes are `InputMode.ACTION`, `AMOUNT`, `DRAW`, `MENU` and `SPECTATE`. It reports the player's choices through the callbacks set with `set_action_callback` and `set_draw_callback`.
- **`feltside.render`** draws onto an in-memory `Canvas`. It can draw cards in three sizes, chip stacks, oval and rectangular tables, player boxes, colour themes and animations queued on a `UIState`.
- **`feltside.heads_up`** provides `HeadsUpLayout`, a complete layout for a two-player table, drawn onto a `UIState`'s canvas.

## Installation

```
pip install feltside
```

To install the test tools as well:

```
pip install "feltside[test]"
```

## Example: an AI decision

```python
import random

from feltside.model import GameState, Player, parse_card
from feltside.personality import get_personality
from feltside.ai import AIState, make_decision

shark = get_personality("Shark")
state = AIState(shark)

hand = [parse_card(code) for code in ("7S", "5H", "4D", "3C", "2S")]
game = GameState(
    players=[Player(name="Bot", stack=1000, hole_cards=hand), Player(name="You", stack=1000)],
    big_blind=20,
)

decision = make_decision(game, 0, shark, state, random.Random(1))
print(decision.action, decision.amount, decision.reasoning)
```

`make_decision` and `get_tell` take any object with a `random()` method as their source of randomness. If you leave it out, they use the `random` module.

## Example: drawing a table

```python
from feltside.model import GameState, Player, parse_card
from feltside.render import Canvas, UIState
from feltside.heads_up import HeadsUpLayout

players = [Player(name="You", stack=980, bet=20), Player(name="Bot", stack=1000)]
ui = UIState(canvas=Canvas(40, 100), game_state=GameState(players=players))
layout = HeadsUpLayout(ui)
layout.calculate_positions(players)
layout.render_table()
layout.render_player(players[0], 0)
layout.render_pot(40)

for y in range(ui.canvas.height):
    print(ui.canvas.row(y))
```

`Canvas.row(y)` returns one line as plain text. `Canvas.cell(y, x)` returns a `Cell` that holds a character and its foreground and background colours, packed as with `rgb_color`. Writes that fall outside the canvas are clipped.

## Input handling

An `InputHandler` takes an optional game manager. This is any object with two methods:

- `valid_actions(player)`, which returns the open actions and the minimum and maximum wager.
- `pot_total()`.

The handler calls `valid_actions` from `update_valid_actions`. It calls `pot_total` for the half-pot and pot shortcuts in amount mode. If it needs a manager and has none, it raises `RuntimeError`. `process_key` accepts a one-character string or a character code. It returns `True` when it understood the key.

## What it does not do

- It has no command to run and no game loop.
- It has no betting-rules engine of its own. You supply the valid actions and the pot through the game manager object.
- It does not evaluate hands for other variants. Outside 2-7 Triple Draw Lowball, `hand_strength` returns 0.5.
- It does not draw to a real terminal. Everything is drawn onto a `Canvas` in memory, and showing that canvas is up to you.
- It has no networking and no storage.

The package needs only the Python standard library. It supports Python 3.10 and later.