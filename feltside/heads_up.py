"""Table layout for two players sitting face to face."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from feltside.model import Card, Player, PlayerAction, PlayerState
from feltside.render import (
    Animation,
    AnimationType,
    CardSize,
    DetailLevel,
    UIState,
    render_chip_stack,
    render_fancy_card,
)

_COMMUNITY_SLOTS = 5
_CARD_SPACING = 7
_SLIDER_WIDTH = 50

_BUTTON_LABELS = {
    PlayerAction.FOLD: " FOLD ",
    PlayerAction.CHECK: " CHECK ",
    PlayerAction.CALL: " CALL ",
    PlayerAction.BET: " BET ",
    PlayerAction.RAISE: " RAISE ",
    PlayerAction.ALL_IN: " ALL-IN ",
}

_STATUS_TEXT = {
    PlayerState.FOLDED: "FOLDED",
    PlayerState.ALL_IN: "ALL-IN",
    PlayerState.SITTING_OUT: "SITTING OUT",
}


@dataclass
class HeadsUpPositions:
    """Screen anchors computed for a heads-up table."""

    player1_card_y: int = 0
    player1_card_x: int = 0
    player2_card_y: int = 0
    player2_card_x: int = 0
    pot_y: int = 0
    pot_x: int = 0
    community_y: int = 0
    community_x: int = 0


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


class HeadsUpLayout:
    """Large-card layout for a two-player table."""

    name = "Heads-Up"
    min_players = 2
    max_players = 2

    def __init__(self, ui: UIState) -> None:
        self.ui = ui
        self.positions = HeadsUpPositions()
        ui.layout_data = self.positions
        ui.detail_level = DetailLevel.HIGH
        ui.card_size = CardSize.LARGE

    # -- layout ------------------------------------------------------------

    def calculate_positions(self, players: Sequence[Player]) -> None:
        """Seat the two players opposite each other; other counts are ignored."""
        if len(players) != 2:
            return
        ui = self.ui
        pos = self.positions
        bottom, top = players

        bottom.ui_y = ui.term_height - 10
        bottom.ui_x = ui.term_width // 2 - 15
        top.ui_y = 5
        top.ui_x = ui.term_width // 2 - 15

        pos.player1_card_y = bottom.ui_y - 4
        pos.player1_card_x = bottom.ui_x + 5
        pos.player2_card_y = top.ui_y + 3
        pos.player2_card_x = top.ui_x + 5

        pos.community_y = ui.term_height // 2
        pos.community_x = (ui.term_width - 35) // 2
        pos.pot_y = ui.term_height // 2 - 3
        pos.pot_x = ui.term_width // 2 - 8

    def table_bounds(self) -> tuple[int, int, int, int]:
        """The table rectangle as (top, left, bottom, right)."""
        ui = self.ui
        return 8, ui.term_width // 4, ui.term_height - 8, ui.term_width * 3 // 4

    # -- rendering ---------------------------------------------------------

    def render_table(self) -> None:
        """Clear the screen and draw a rounded felt table."""
        canvas = self.ui.canvas
        canvas.set_bg(20, 20, 20)
        canvas.erase()

        top, left, bottom, right = self.table_bounds()
        inner = max(0, right - left - 1)

        canvas.set_fg(139, 69, 19)
        canvas.put(top, left, "╭")
        canvas.write("─" * inner)
        canvas.write("╮")

        for y in range(top + 1, bottom):
            canvas.put(y, left, "│")
            canvas.put(y, right, "│")

        canvas.put(bottom, left, "╰")
        canvas.write("─" * inner)
        canvas.write("╯")

        canvas.set_bg(0, 100, 0)
        for y in range(top + 1, bottom):
            for x in range(left + 1, right):
                if (x + y) % 11 == 0:
                    canvas.set_fg(0, 90, 0)
                    canvas.put(y, x, "·")
                else:
                    canvas.put(y, x, " ")

        canvas.set_bg_default()

    def render_player(self, player: Player | None, seat: int) -> None:
        """Draw a player's info box; empty seats draw nothing."""
        if player is None or player.state is PlayerState.EMPTY:
            return
        canvas = self.ui.canvas
        y, x = player.ui_y, player.ui_x

        canvas.set_bg_default()
        canvas.set_fg(255, 215, 0)
        canvas.put(y - 1, x - 1, "┌" + "─" * 29 + "┐")
        for line in range(3):
            canvas.put(y + line, x - 1, "│")
            canvas.put(y + line, x + 29, "│")
        canvas.put(y + 3, x - 1, "└" + "─" * 29 + "┘")

        canvas.set_fg(255, 255, 255)
        canvas.put(y, x, f"{player.name:<15}")
        if seat == 0:
            canvas.set_fg(0, 255, 255)
            canvas.write(" (YOU)")

        canvas.set_fg(0, 255, 0)
        canvas.put(y + 1, x, f"${player.stack:<10}")
        if player.bet > 0:
            canvas.set_fg(255, 255, 0)
            canvas.write(f" Bet: ${player.bet}")

        canvas.set_fg(200, 200, 200)
        canvas.put(y + 2, x, _STATUS_TEXT.get(player.state, ""))

    def render_community_cards(self, cards: Sequence[Card]) -> None:
        """Draw up to five board cards, with placeholders for the rest."""
        canvas = self.ui.canvas
        pos = self.positions

        canvas.set_bg_default()
        canvas.set_fg(255, 255, 255)
        canvas.put(pos.community_y - 2, pos.community_x + 10, "═ COMMUNITY ═")

        shown = list(cards[:_COMMUNITY_SLOTS])
        slots = shown + [None] * (_COMMUNITY_SLOTS - len(shown))
        for slot, card in enumerate(slots):
            card_x = pos.community_x + slot * _CARD_SPACING
            if card is not None:
                self.render_card(pos.community_y, card_x, card, False)
                continue
            canvas.set_bg_default()
            canvas.set_fg(100, 100, 100)
            canvas.put(pos.community_y, card_x, "┌────┐")
            canvas.put(pos.community_y + 1, card_x, "│ ?? │")
            canvas.put(pos.community_y + 2, card_x, "│    │")
            canvas.put(pos.community_y + 3, card_x, "└────┘")

    def render_pot(self, pot: int) -> None:
        """Draw the framed pot total and a chip stack beneath it."""
        canvas = self.ui.canvas
        pos = self.positions

        canvas.set_bg_default()
        canvas.set_fg(255, 215, 0)
        canvas.put(pos.pot_y, pos.pot_x, "╔" + "═" * 16 + "╗")
        canvas.put(pos.pot_y + 1, pos.pot_x, "║")
        canvas.put(pos.pot_y + 1, pos.pot_x + 17, "║")
        canvas.put(pos.pot_y + 2, pos.pot_x, "╚" + "═" * 16 + "╝")

        canvas.set_fg(0, 255, 0)
        canvas.put(pos.pot_y + 1, pos.pot_x + 2, f" POT: ${pot:<8}")

        if pot > 0:
            render_chip_stack(canvas, pos.pot_y + 3, pos.pot_x + 6, pot)

    def render_dealer_button(self, dealer_seat: int) -> None:
        """Mark the dealer next to their info box."""
        game = self.ui.game_state
        if game is None or not 0 <= dealer_seat < 2:
            return
        dealer = game.players[dealer_seat]
        canvas = self.ui.canvas
        canvas.set_bg(255, 255, 255)
        canvas.set_fg(0, 0, 0)
        canvas.put(dealer.ui_y + 1, dealer.ui_x + 20, " D ")

    def render_card(self, y: int, x: int, card: Card, face_down: bool) -> None:
        render_fancy_card(self.ui.canvas, y, x, card, face_down)

    def optimal_card_size(self, num_players: int) -> CardSize:
        """Heads-up always has room for large cards."""
        return CardSize.LARGE

    # -- animation ---------------------------------------------------------

    def start_deal_animation(
        self, to_seat: int, card: Card, face_down: bool
    ) -> bool:
        """Queue a card flying from the table centre to a seat."""
        ui = self.ui
        pos = self.positions
        if to_seat == 0:
            end_y, end_x = pos.player1_card_y, pos.player1_card_x
        else:
            end_y, end_x = pos.player2_card_y, pos.player2_card_x
        animation = Animation(
            type=AnimationType.DEAL_CARD,
            card=card,
            start_y=ui.term_height // 2,
            start_x=ui.term_width // 2,
            end_y=end_y,
            end_x=end_x,
            total_frames=20,
        )
        return ui.add_animation(animation)

    def start_chip_animation(self, from_seat: int, amount: int) -> bool:
        """Queue chips sliding from a seat into the pot."""
        ui = self.ui
        game = ui.game_state
        if game is None or not 0 <= from_seat < 2:
            return False
        player = game.players[from_seat]
        animation = Animation(
            type=AnimationType.SLIDE_CHIPS,
            chip_amount=amount,
            start_y=player.ui_y + 1,
            start_x=player.ui_x + 15,
            end_y=self.positions.pot_y + 1,
            end_x=self.positions.pot_x + 8,
            total_frames=30,
        )
        return ui.add_animation(animation)

    def process_animations(self) -> None:
        self.ui.process_animations()

    # -- controls ----------------------------------------------------------

    def render_action_buttons(self, actions: Iterable[PlayerAction]) -> None:
        """Draw a row of buttons for the given actions along the bottom."""
        canvas = self.ui.canvas
        button_y = self.ui.term_height - 3
        button_x = 10

        canvas.set_bg_default()
        for action in actions:
            label = _BUTTON_LABELS.get(action)
            if label is None:
                continue
            canvas.set_bg(50, 50, 50)
            canvas.set_fg(255, 255, 255)
            canvas.put(button_y, button_x, label)
            button_x += len(label) + 2
        canvas.set_bg_default()

    def render_bet_slider(self, minimum: int, maximum: int, current: int) -> None:
        """Draw a bet-size slider between ``minimum`` and ``maximum``."""
        canvas = self.ui.canvas
        slider_y = self.ui.term_height - 5
        slider_x = 10

        canvas.set_bg_default()
        canvas.set_fg(200, 200, 200)
        canvas.put(slider_y - 1, slider_x, f"Bet Size: ${current}")
        canvas.put(slider_y + 1, slider_x, f"${minimum}")
        canvas.put(slider_y + 1, slider_x + _SLIDER_WIDTH - 8, f"${maximum}")

        canvas.put(slider_y, slider_x, "[")
        canvas.write("─" * (_SLIDER_WIDTH - 2))
        canvas.write("]")

        if maximum > minimum:
            offset = _trunc_div(
                (current - minimum) * (_SLIDER_WIDTH - 2), maximum - minimum
            )
            canvas.set_fg(0, 255, 0)
            canvas.put(slider_y, slider_x + 1 + offset, "◆")