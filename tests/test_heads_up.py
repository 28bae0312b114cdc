import pytest

from feltside.heads_up import HeadsUpLayout
from feltside.model import (
    Card,
    GameState,
    Player,
    PlayerAction,
    PlayerState,
    Rank,
    Suit,
    parse_card,
)
from feltside.render import (
    AnimationType,
    Canvas,
    CardSize,
    DetailLevel,
    UIState,
    rgb_color,
)


def make_layout(height=40, width=100):
    ui = UIState(canvas=Canvas(height, width))
    return HeadsUpLayout(ui), ui


def seated_layout():
    layout, ui = make_layout()
    players = [
        Player(name="Alice", stack=1500),
        Player(name="Bob", stack=900),
    ]
    layout.calculate_positions(players)
    ui.game_state = GameState(players=players, pot=0)
    return layout, ui, players


def test_init_sets_high_detail_and_large_cards():
    layout, ui = make_layout()
    assert ui.detail_level is DetailLevel.HIGH
    assert ui.card_size is CardSize.LARGE
    assert ui.layout_data is layout.positions


@pytest.mark.parametrize("count", [1, 2, 6, 10])
def test_optimal_card_size_is_always_large(count):
    layout, _ = make_layout()
    assert layout.optimal_card_size(count) is CardSize.LARGE


def test_layout_limits():
    layout, _ = make_layout()
    assert layout.min_players == 2
    assert layout.max_players == 2
    assert layout.name == "Heads-Up"


def test_calculate_positions_ignores_wrong_player_count():
    layout, _ = make_layout()
    players = [Player(name=n) for n in ("a", "b", "c")]
    layout.calculate_positions(players)
    assert all(p.ui_y == 0 and p.ui_x == 0 for p in players)


def test_calculate_positions_seats_players_opposite():
    layout, ui, players = seated_layout()
    assert players[0].ui_x == players[1].ui_x
    assert players[1].ui_y == 5
    assert players[0].ui_y > players[1].ui_y
    pos = layout.positions
    assert pos.player1_card_y < players[0].ui_y
    assert pos.player2_card_y > players[1].ui_y
    assert pos.player2_card_y < pos.community_y < pos.player1_card_y


def test_table_bounds_are_ordered():
    layout, ui = make_layout()
    top, left, bottom, right = layout.table_bounds()
    assert top == 8
    assert top < bottom < ui.term_height
    assert 0 < left < right < ui.term_width


def test_render_table_draws_corners_and_felt():
    layout, ui = make_layout()
    layout.render_table()
    top, left, bottom, right = layout.table_bounds()
    canvas = ui.canvas
    assert canvas.cell(top, left).char == "╭"
    assert canvas.cell(top, right).char == "╮"
    assert canvas.cell(bottom, left).char == "╰"
    assert canvas.cell(bottom, right).char == "╯"
    assert canvas.row(top)[left + 1:right] == "─" * (right - left - 1)
    assert canvas.cell(top + 1, left).char == "│"
    assert canvas.cell(top + 1, left + 1).bg == rgb_color(0, 100, 0)
    assert canvas.bg is None


def test_render_table_texture_follows_diagonals():
    layout, ui = make_layout()
    layout.render_table()
    top, left, bottom, right = layout.table_bounds()
    for y in range(top + 1, bottom):
        for x in range(left + 1, right):
            char = ui.canvas.cell(y, x).char
            assert char == ("·" if (x + y) % 11 == 0 else " ")


def test_render_player_shows_name_stack_and_you_marker():
    layout, ui, players = seated_layout()
    layout.render_player(players[0], 0)
    name_row = ui.canvas.row(players[0].ui_y)
    assert "Alice" in name_row
    assert "(YOU)" in name_row
    assert "$1500" in ui.canvas.row(players[0].ui_y + 1)


def test_render_player_other_seat_has_no_you_marker():
    layout, ui, players = seated_layout()
    players[1].bet = 40
    players[1].state = PlayerState.FOLDED
    layout.render_player(players[1], 1)
    assert "(YOU)" not in ui.canvas.row(players[1].ui_y)
    assert "Bet: $40" in ui.canvas.row(players[1].ui_y + 1)
    assert "FOLDED" in ui.canvas.row(players[1].ui_y + 2)


def test_render_player_empty_seat_draws_nothing():
    layout, ui, players = seated_layout()
    players[0].state = PlayerState.EMPTY
    layout.render_player(players[0], 0)
    assert ui.canvas.row(players[0].ui_y).strip() == ""
    layout.render_player(None, 0)
    assert ui.canvas.row(players[0].ui_y).strip() == ""


def test_render_community_cards_with_placeholders():
    layout, ui, _ = seated_layout()
    cards = [parse_card(code) for code in ("AS", "7H", "2D")]
    layout.render_community_cards(cards)
    pos = layout.positions
    assert "═ COMMUNITY ═" in ui.canvas.row(pos.community_y - 2)
    middle = ui.canvas.row(pos.community_y + 1)
    assert middle.count("│ ?? │") == 2
    assert ui.canvas.cell(pos.community_y + 1, pos.community_x + 1).char == "A"
    assert ui.canvas.cell(pos.community_y + 2, pos.community_x + 2).char == "♠"


def test_render_community_cards_shows_ten_as_two_digits():
    layout, ui, _ = seated_layout()
    layout.render_community_cards([Card(Rank.TEN, Suit.CLUBS)])
    pos = layout.positions
    row = ui.canvas.row(pos.community_y + 1)
    assert row[pos.community_x + 1:pos.community_x + 3] == "10"


def test_render_pot_shows_amount_and_chips():
    layout, ui, _ = seated_layout()
    layout.render_pot(250)
    pos = layout.positions
    assert "POT: $250" in ui.canvas.row(pos.pot_y + 1)
    assert "●" in ui.canvas.row(pos.pot_y + 3)


def test_render_empty_pot_draws_no_chips():
    layout, ui, _ = seated_layout()
    layout.render_pot(0)
    pos = layout.positions
    assert "POT: $0" in ui.canvas.row(pos.pot_y + 1)
    assert "●" not in ui.canvas.row(pos.pot_y + 3)


def test_render_dealer_button_next_to_dealer():
    layout, ui, players = seated_layout()
    layout.render_dealer_button(1)
    row = ui.canvas.row(players[1].ui_y + 1)
    assert row[players[1].ui_x + 20:players[1].ui_x + 23] == " D "


@pytest.mark.parametrize("seat", [-1, 2])
def test_render_dealer_button_ignores_invalid_seat(seat):
    layout, ui, players = seated_layout()
    layout.render_dealer_button(seat)
    assert all(ui.canvas.row(y).strip() == "" for y in range(ui.term_height))


def test_render_dealer_button_without_game_does_nothing():
    layout, ui = make_layout()
    layout.render_dealer_button(0)
    assert all(ui.canvas.row(y).strip() == "" for y in range(ui.term_height))


def test_deal_animation_targets_seat_card_position():
    layout, ui, _ = seated_layout()
    card = parse_card("KD")
    assert layout.start_deal_animation(1, card, True)
    (anim,) = ui.animations
    assert anim.type is AnimationType.DEAL_CARD
    assert anim.card == card
    assert anim.active
    assert anim.total_frames == 20
    assert (anim.end_y, anim.end_x) == (
        layout.positions.player2_card_y,
        layout.positions.player2_card_x,
    )
    assert (anim.start_y, anim.start_x) == (ui.term_height // 2, ui.term_width // 2)


def test_chip_animation_requires_game_and_valid_seat():
    layout, ui = make_layout()
    assert not layout.start_chip_animation(0, 100)
    layout2, ui2, _ = seated_layout()
    assert not layout2.start_chip_animation(3, 100)
    assert ui.animations == [] and ui2.animations == []


def test_chip_animation_slides_into_pot():
    layout, ui, players = seated_layout()
    assert layout.start_chip_animation(0, 75)
    (anim,) = ui.animations
    assert anim.type is AnimationType.SLIDE_CHIPS
    assert anim.chip_amount == 75
    assert anim.total_frames == 30
    assert anim.start_y == players[0].ui_y + 1
    assert anim.end_y == layout.positions.pot_y + 1


def test_process_animations_advances_and_draws():
    layout, ui, _ = seated_layout()
    layout.start_deal_animation(0, parse_card("2C"), True)
    layout.process_animations()
    assert ui.animations[0].current_frame == 1
    start_row = ui.canvas.row(ui.term_height // 2)
    assert "[??]" in start_row


def test_action_buttons_in_order():
    layout, ui = make_layout()
    layout.render_action_buttons(
        [PlayerAction.FOLD, PlayerAction.CALL, PlayerAction.RAISE]
    )
    row = ui.canvas.row(ui.term_height - 3)
    assert row.startswith(" " * 10 + " FOLD ")
    assert row.index("FOLD") < row.index("CALL") < row.index("RAISE")
    assert "CHECK" not in row
    assert ui.canvas.bg is None


def test_bet_slider_marker_at_minimum():
    layout, ui = make_layout()
    layout.render_bet_slider(20, 200, 20)
    y = ui.term_height - 5
    assert ui.canvas.cell(y, 11).char == "◆"
    assert "Bet Size: $20" in ui.canvas.row(y - 1)
    assert "$200" in ui.canvas.row(y + 1)


def test_bet_slider_marker_moves_with_current():
    layout, ui = make_layout()
    layout.render_bet_slider(0, 100, 50)
    row_mid = ui.canvas.row(ui.term_height - 5)
    layout2, ui2 = make_layout()
    layout2.render_bet_slider(0, 100, 90)
    row_high = ui2.canvas.row(ui2.term_height - 5)
    assert row_mid.index("◆") < row_high.index("◆")


def test_bet_slider_without_range_has_no_marker():
    layout, ui = make_layout()
    layout.render_bet_slider(50, 50, 50)
    row = ui.canvas.row(ui.term_height - 5)
    assert "◆" not in row
    assert row.startswith(" " * 10 + "[")