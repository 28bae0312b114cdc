"""Core table model: cards, actions, players and the shared game state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

VARIANT_27_TRIPLE_DRAW = "2-7 Triple Draw Lowball"


class Suit(IntEnum):
    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    @property
    def letter(self) -> str:
        return self.name[0]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    @classmethod
    def from_char(cls, char: str) -> Suit:
        try:
            return _SUIT_BY_LETTER[char.upper()]
        except KeyError:
            raise ValueError(f"invalid suit: {char!r}") from None


_SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}
_SUIT_BY_LETTER = {suit.letter: suit for suit in Suit}


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def char(self) -> str:
        return _RANK_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> Rank:
        try:
            return _RANK_BY_CHAR[char]
        except KeyError:
            raise ValueError(f"invalid rank: {char!r}") from None


_RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}
_RANK_BY_CHAR = {char: rank for rank, char in _RANK_CHARS.items()}


@dataclass(frozen=True)
class Card:
    """A playing card."""

    rank: Rank
    suit: Suit

    def display(self) -> str:
        """Short form such as ``A♠``."""
        return f"{self.rank.char}{self.suit.symbol}"

    def is_red(self) -> bool:
        return self.suit.is_red

    def __str__(self) -> str:
        return self.display()


def parse_card(text: str) -> Card:
    """Parse a two-character card code such as ``AS`` or ``Th``.

    The rank is an upper-case letter or digit (``T`` for ten); the suit
    letter may be either case.
    """
    if len(text) != 2:
        raise ValueError(f"card code must be two characters: {text!r}")
    return Card(Rank.from_char(text[0]), Suit.from_char(text[1]))


class PlayerAction(IntEnum):
    FOLD = 0
    CHECK = 1
    CALL = 2
    BET = 3
    RAISE = 4
    ALL_IN = 5


class PlayerState(Enum):
    EMPTY = "empty"
    ACTIVE = "active"
    FOLDED = "folded"
    ALL_IN = "all_in"
    SITTING_OUT = "sitting_out"


@dataclass
class Player:
    """A seat at the table."""

    name: str = ""
    stack: int = 0
    bet: int = 0
    state: PlayerState = PlayerState.ACTIVE
    hole_cards: list[Card] = field(default_factory=list)
    ui_y: int = 0
    ui_x: int = 0

    @property
    def has_folded(self) -> bool:
        return self.state is PlayerState.FOLDED

    @property
    def is_active(self) -> bool:
        return self.state not in (PlayerState.EMPTY, PlayerState.SITTING_OUT)

    @property
    def num_hole_cards(self) -> int:
        return len(self.hole_cards)


@dataclass
class GameState:
    """The shared state of one hand in progress."""

    players: list[Player] = field(default_factory=list)
    pot: int = 0
    current_bet: int = 0
    big_blind: int = 0
    action_on: int = 0
    dealer_seat: int = 0
    variant_name: str = VARIANT_27_TRIPLE_DRAW

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def num_active(self) -> int:
        """Players still contesting the pot."""
        return sum(1 for p in self.players if p.is_active and not p.has_folded)