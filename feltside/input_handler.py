"""Keyboard handling for a human player at the table."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Protocol

from feltside.model import PlayerAction

ESCAPE = "\x1b"
ENTER_KEYS = frozenset({"\n", "\r"})
BACKSPACE_KEYS = frozenset({"\x7f", "\x08"})

_MAX_DIGITS = 10
_STATUS_LIMIT = 255
_DRAW_SLOTS = 5

ActionCallback = Callable[[PlayerAction, int], None]
DrawCallback = Callable[[list[int]], None]


class GameManager(Protocol):
    """What the input handler needs to know about the game in progress."""

    def valid_actions(self, player: int) -> tuple[Iterable[PlayerAction], int, int]:
        """Actions open to ``player`` and the minimum and maximum wager."""
        ...

    def pot_total(self) -> int:
        ...


class InputMode(Enum):
    ACTION = "action"
    AMOUNT = "amount"
    DRAW = "draw"
    MENU = "menu"
    SPECTATE = "spectate"


def _normalise(key: str | int) -> str:
    if isinstance(key, int):
        return chr(key)
    return key


class InputHandler:
    """Turns key presses into betting and drawing decisions."""

    def __init__(self, game_mgr: GameManager | None = None) -> None:
        self.game_mgr = game_mgr
        self.mode = InputMode.SPECTATE
        self.show_help = True
        self.selected_action = PlayerAction.FOLD
        self.valid_actions: set[PlayerAction] = set()
        self.min_amount = 0
        self.max_amount = 0
        self.amount_text = ""
        self.cards_selected: set[int] = set()
        self.status_message = ""
        self.on_action: ActionCallback | None = None
        self.on_draw: DrawCallback | None = None

    # -- mode management -------------------------------------------------

    def set_mode(self, mode: InputMode) -> None:
        """Switch mode, clearing the state the new mode starts from."""
        self.mode = mode
        if mode is InputMode.AMOUNT:
            self.amount_text = ""
        elif mode is InputMode.DRAW:
            self.cards_selected.clear()

    def _set_status(self, message: str) -> None:
        self.status_message = message[:_STATUS_LIMIT]

    # -- key dispatch ----------------------------------------------------

    def process_key(self, key: str | int) -> bool:
        """Handle one key press; True when the key was understood."""
        key = _normalise(key)
        if self.mode is InputMode.ACTION:
            return self._action_key(key)
        if self.mode is InputMode.AMOUNT:
            return self._amount_key(key)
        if self.mode is InputMode.DRAW:
            return self._draw_key(key)
        if self.mode is InputMode.MENU:
            return key in ("q", "Q")
        if key in ("h", "H"):
            self.show_help = not self.show_help
            return True
        return key in ("q", "Q")

    def _emit_action(self, action: PlayerAction, amount: int = 0) -> None:
        if self.on_action is not None:
            self.on_action(action, amount)

    def _action_key(self, key: str) -> bool:
        lowered = key.lower()
        if lowered == "f" and PlayerAction.FOLD in self.valid_actions:
            self._emit_action(PlayerAction.FOLD)
            return True
        if lowered == "c":
            if PlayerAction.CHECK in self.valid_actions:
                self._emit_action(PlayerAction.CHECK)
                return True
            if PlayerAction.CALL in self.valid_actions:
                self._emit_action(PlayerAction.CALL)
                return True
        if lowered == "b" and PlayerAction.BET in self.valid_actions:
            self.start_amount_input(PlayerAction.BET)
            return True
        if lowered == "r" and PlayerAction.RAISE in self.valid_actions:
            self.start_amount_input(PlayerAction.RAISE)
            return True
        if lowered == "a" and PlayerAction.ALL_IN in self.valid_actions:
            self._emit_action(PlayerAction.ALL_IN)
            return True
        if lowered == "h":
            self.show_help = not self.show_help
            return True
        if lowered == "q":
            return True
        self._set_status("Invalid action. Press 'h' for help.")
        return False

    def _clamped(self, value: int) -> int:
        value = min(value, self.max_amount)
        return max(value, self.min_amount)

    def _pot_total(self) -> int:
        if self.game_mgr is None:
            raise RuntimeError("no game manager to read the pot from")
        return self.game_mgr.pot_total()

    def _amount_key(self, key: str) -> bool:
        if key in (ESCAPE, "q"):
            self.set_mode(InputMode.ACTION)
            self._set_status("Amount entry cancelled")
            return True

        if key in ENTER_KEYS:
            amount = self.amount()
            if self.min_amount <= amount <= self.max_amount:
                self._emit_action(self.selected_action, amount)
                self.set_mode(InputMode.SPECTATE)
                return True
            self._set_status(
                f"Invalid amount. Must be between ${self.min_amount} "
                f"and ${self.max_amount}"
            )
            return False

        if key in BACKSPACE_KEYS:
            self.amount_text = self.amount_text[:-1]
            return True

        if key.isdigit() and len(key) == 1 and len(self.amount_text) < _MAX_DIGITS:
            self.amount_text += key
            return True

        if key in ("m", "M"):
            self.amount_text = str(self.min_amount)
            return True
        if key in ("x", "X"):
            self.amount_text = str(self.max_amount)
            return True
        if key in ("p", "P"):
            self.amount_text = str(self._clamped(self._pot_total()))
            return True
        if key in ("h", "H"):
            self.amount_text = str(self._clamped(self._pot_total() // 2))
            return True
        return False

    def _draw_key(self, key: str) -> bool:
        if key in ("1", "2", "3", "4", "5"):
            self.toggle_card(int(key) - 1)
            return True
        if key in ENTER_KEYS:
            if self.on_draw is not None:
                self.on_draw(self.selected_cards())
            self.set_mode(InputMode.SPECTATE)
            return True
        if key in ("s", "S"):
            if self.on_draw is not None:
                self.on_draw([])
            self.set_mode(InputMode.SPECTATE)
            return True
        if key in ("a", "A"):
            self.cards_selected = set(range(_DRAW_SLOTS))
            return True
        if key in ("n", "N"):
            self.cards_selected.clear()
            return True
        if key in (ESCAPE, "q"):
            self.set_mode(InputMode.SPECTATE)
            return True
        return False

    # -- action mode -----------------------------------------------------

    def update_valid_actions(self, player: int) -> None:
        """Ask the game which actions and wager limits apply to ``player``."""
        if self.game_mgr is None:
            raise RuntimeError("no game manager to ask for valid actions")
        actions, minimum, maximum = self.game_mgr.valid_actions(player)
        self.valid_actions = set(actions)
        self.min_amount = minimum
        self.max_amount = maximum

    def action_help(self) -> str:
        """One-line summary of the keys open in action mode."""
        labels = (
            (PlayerAction.FOLD, "[F]old "),
            (PlayerAction.CHECK, "[C]heck "),
            (PlayerAction.CALL, "[C]all "),
            (PlayerAction.BET, "[B]et "),
            (PlayerAction.RAISE, "[R]aise "),
            (PlayerAction.ALL_IN, "[A]ll-in "),
        )
        parts = ["Actions: "]
        parts.extend(label for action, label in labels if action in self.valid_actions)
        parts.append("[H]elp [Q]uit")
        return "".join(parts)

    # -- amount mode -----------------------------------------------------

    def start_amount_input(self, action: PlayerAction) -> None:
        """Begin typing the amount for a bet or raise."""
        self.set_mode(InputMode.AMOUNT)
        self.selected_action = action
        verb = "bet" if action is PlayerAction.BET else "raise"
        self._set_status(
            f"Enter {verb} amount (${self.min_amount}-${self.max_amount}) "
            "or [M]in [H]alf-pot [P]ot [maX] [ESC]cancel"
        )

    def amount(self) -> int:
        """The amount typed so far, 0 when nothing is typed."""
        return int(self.amount_text) if self.amount_text else 0

    # -- draw mode -------------------------------------------------------

    def start_draw_selection(self) -> None:
        """Begin choosing cards to discard."""
        self.set_mode(InputMode.DRAW)
        self._set_status(
            "Select cards to discard (1-5) [S]tand-pat [A]ll [N]one [Enter]confirm"
        )

    def toggle_card(self, card_index: int) -> None:
        """Mark or unmark a card for discard; out-of-range indices are ignored."""
        if 0 <= card_index < _DRAW_SLOTS:
            self.cards_selected ^= {card_index}

    def selected_cards(self) -> list[int]:
        """Indices of the cards marked for discard, in order."""
        return sorted(self.cards_selected)

    @property
    def num_selected(self) -> int:
        return len(self.cards_selected)

    # -- callbacks -------------------------------------------------------

    def set_action_callback(self, callback: ActionCallback | None) -> None:
        self.on_action = callback

    def set_draw_callback(self, callback: DrawCallback | None) -> None:
        self.on_draw = callback