"""Decision making for computer opponents."""

from __future__ import annotations

import random
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Protocol

from feltside.model import (
    VARIANT_27_TRIPLE_DRAW,
    Card,
    GameState,
    PlayerAction,
    Rank,
)
from feltside.personality import Personality

_RECENT_ACTIONS = 10
_ACTION_COUNT_CAP = 1000

_HIGH_CARD_STRENGTH = {
    Rank.SEVEN: 0.95,
    Rank.EIGHT: 0.85,
    Rank.NINE: 0.70,
    Rank.TEN: 0.50,
    Rank.JACK: 0.30,
    Rank.QUEEN: 0.20,
    Rank.KING: 0.15,
    Rank.ACE: 0.10,
}


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass
class Decision:
    """What an AI player chose to do, and why."""

    action: PlayerAction = PlayerAction.FOLD
    amount: int = 0
    confidence: float = 0.0
    reasoning: str | None = None


@dataclass
class AIState:
    """Per-session memory of one AI player."""

    personality: Personality
    hands_played: int = 0
    hands_won: int = 0
    bluffs_attempted: int = 0
    bluffs_successful: int = 0
    tilt_level: float = 0.0
    peak_stack: int = 0
    recent_losses: int = 0
    opponent_aggression: dict[int, float] = field(default_factory=dict)
    opponent_tightness: dict[int, float] = field(default_factory=dict)
    opponent_hands_seen: dict[int, int] = field(default_factory=dict)
    recent_actions: deque[PlayerAction] = field(
        default_factory=lambda: deque(maxlen=_RECENT_ACTIONS)
    )
    action_counts: Counter[PlayerAction] = field(default_factory=Counter)

    def reset(self) -> None:
        """Forget everything learned this session."""
        self.hands_played = 0
        self.hands_won = 0
        self.bluffs_attempted = 0
        self.bluffs_successful = 0
        self.tilt_level = 0.0
        self.peak_stack = 0
        self.recent_losses = 0
        self.opponent_aggression.clear()
        self.opponent_tightness.clear()
        self.opponent_hands_seen.clear()
        self.recent_actions.clear()
        self.action_counts.clear()

    def update_tilt(self, won_pot: bool, pot_size: int) -> None:
        """Calm down after a win, tilt further after a loss."""
        if won_pot:
            self.tilt_level *= 0.9
            if self.tilt_level < 0.1:
                self.tilt_level = 0.0
            return
        increase = self.personality.tilt_susceptibility * 0.1
        if pot_size > self.peak_stack * 0.2:
            increase *= 2.0
        self.tilt_level = min(1.0, self.tilt_level + increase)
        self.recent_losses += pot_size

    def record(self, action: PlayerAction) -> None:
        """Remember an action taken by this player."""
        if self.action_counts[action] < _ACTION_COUNT_CAP:
            self.action_counts[action] += 1
        self.recent_actions.appendleft(action)


def _is_high_card_low_hand(cards: list[Card]) -> bool:
    """True when a 2-7 hand has no pair, straight or flush."""
    ranks = [card.rank for card in cards]
    if len(set(ranks)) != len(ranks):
        return False
    if len(cards) == 5:
        if len({card.suit for card in cards}) == 1:
            return False
        ordered = sorted(ranks)
        if ordered[-1] - ordered[0] == 4:
            return False
    return True


def hand_strength(game: GameState, player_index: int) -> float:
    """Rough strength of a player's hand, 0.0 worst to 1.0 best."""
    player = game.players[player_index]
    if game.variant_name != VARIANT_27_TRIPLE_DRAW:
        return 0.5
    if not _is_high_card_low_hand(player.hole_cards):
        return 0.1
    highest = max((card.rank for card in player.hole_cards), default=Rank.TWO)
    return _HIGH_CARD_STRENGTH.get(highest, 0.5)


def pot_odds(game: GameState) -> float:
    """Share of the final pot the current bet represents."""
    if game.pot == 0:
        return 0.0
    return game.current_bet / (game.pot + game.current_bet)


def position_modifier(game: GameState, player_index: int) -> float:
    """How favourable a seat is: fewer live opponents gives a higher value."""
    count = game.num_players
    others = (game.players[(player_index + i) % count] for i in range(1, count))
    live = sum(1 for p in others if p.is_active and not p.has_folded)
    if game.num_active == 0:
        return 0.0
    return 1.0 - live / game.num_active


def apply_tilt_modifier(base_decision: float, tilt_level: float) -> float:
    """Push a strength value toward the extremes as tilt rises."""
    if tilt_level <= 0.0:
        return base_decision
    modifier = 1.0 + tilt_level * 0.5
    if base_decision > 0.5:
        return min(1.0, base_decision * modifier)
    return max(0.0, base_decision / modifier)


def make_decision(
    game: GameState,
    player_index: int,
    personality: Personality,
    state: AIState | None = None,
    rng: RandomSource | None = None,
) -> Decision:
    """Choose an action for the player at ``player_index``."""
    rng = rng if rng is not None else random
    player = game.players[player_index]

    strength = hand_strength(game, player_index)
    if state is not None:
        strength = apply_tilt_modifier(strength, state.tilt_level)

    odds = pot_odds(game)

    can_check = player.bet == game.current_bet
    can_call = game.current_bet > player.bet and player.stack > 0
    can_bet = game.current_bet == 0 and player.stack > 0
    can_raise = game.current_bet > 0 and player.stack > 0

    aggression_threshold = personality.aggression
    if odds > 0.3:
        aggression_threshold *= 0.8

    if strength < personality.tightness:
        if can_check:
            decision = Decision(PlayerAction.CHECK, 0, 0.8, "Weak hand, checking")
        elif odds < 0.2 and can_call:
            decision = Decision(PlayerAction.CALL, 0, 0.6, "Weak hand but good odds")
        else:
            decision = Decision(PlayerAction.FOLD, 0, 0.9, "Weak hand, folding")
    elif strength > 0.8:
        if can_bet and rng.random() < aggression_threshold:
            decision = Decision(
                PlayerAction.BET, game.big_blind * 2, 0.9, "Strong hand, betting"
            )
        elif can_raise and rng.random() < aggression_threshold:
            decision = Decision(
                PlayerAction.RAISE, game.current_bet * 2, 0.9, "Strong hand, raising"
            )
        elif can_call:
            decision = Decision(PlayerAction.CALL, 0, 0.8, "Strong hand, calling")
        else:
            decision = Decision(PlayerAction.CHECK, 0, 0.7, "Strong hand, checking")
    else:
        if can_check:
            decision = Decision(PlayerAction.CHECK, 0, 0.7, "Medium hand, checking")
        elif can_call and odds < 0.4:
            decision = Decision(PlayerAction.CALL, 0, 0.6, "Medium hand, calling")
        else:
            decision = Decision(PlayerAction.FOLD, 0, 0.7, "Medium hand, poor odds")

    if rng.random() < personality.bluff_frequency and strength < 0.3:
        if can_bet:
            decision = Decision(PlayerAction.BET, game.big_blind, 0.3, "Bluffing")
        elif can_raise and rng.random() < 0.5:
            decision = Decision(
                PlayerAction.RAISE, game.current_bet * 2, 0.3, "Bluff raise"
            )

    if decision.amount > player.stack:
        decision.amount = player.stack
        decision.action = PlayerAction.ALL_IN

    if state is not None:
        state.record(decision.action)

    return decision


def draw_decision(
    game: GameState, player_index: int, personality: Personality
) -> list[int]:
    """Indices of the cards to throw away in 2-7 triple draw."""
    cards = game.players[player_index].hole_cards
    rank_counts = Counter(card.rank for card in cards)
    suit_counts = Counter(card.suit for card in cards)
    is_flush = any(count >= 5 for count in suit_counts.values())

    discards = [
        index
        for index, card in enumerate(cards)
        if rank_counts[card.rank] > 1
        or card.rank >= Rank.JACK
        or (is_flush and suit_counts[card.suit] == 5)
    ]

    max_discards = int(5 * (1.0 - personality.tightness))
    return discards[:max_discards]


def get_tell(
    personality: Personality | None,
    is_bluffing: bool,
    rng: RandomSource | None = None,
) -> str | None:
    """A visible tell, shown only as often as the personality's reliability."""
    if personality is None:
        return None
    rng = rng if rng is not None else random
    if rng.random() > personality.tell_reliability:
        return None
    if is_bluffing:
        return personality.tell_when_bluffing
    return personality.tell_when_strong