"""Built-in AI personalities and their traits."""

from __future__ import annotations

from dataclasses import dataclass, fields

_TRAITS = (
    "aggression",
    "tightness",
    "bluff_frequency",
    "fear_factor",
    "tilt_susceptibility",
    "position_awareness",
    "pot_odds_accuracy",
    "hand_reading_skill",
    "adaptability",
    "deception",
    "continuation_bet",
    "check_raise",
    "slow_play",
    "steal_frequency",
    "three_bet",
    "tell_reliability",
)


@dataclass(frozen=True, kw_only=True)
class Personality:
    """Playing style of an AI opponent; traits lie in 0.0-1.0."""

    name: str
    description: str = ""
    avatar: str = ""
    skill_level: int = 5

    aggression: float = 0.5
    tightness: float = 0.5
    bluff_frequency: float = 0.5
    fear_factor: float = 0.5
    tilt_susceptibility: float = 0.5

    position_awareness: float = 0.5
    pot_odds_accuracy: float = 0.5
    hand_reading_skill: float = 0.5
    adaptability: float = 0.5
    deception: float = 0.5

    continuation_bet: float = 0.5
    check_raise: float = 0.5
    slow_play: float = 0.5
    steal_frequency: float = 0.5
    three_bet: float = 0.5

    tell_when_bluffing: str | None = None
    tell_when_strong: str | None = None
    tell_reliability: float = 0.0

    def __post_init__(self) -> None:
        for trait in _TRAITS:
            value = getattr(self, trait)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{trait} must be within 0.0-1.0, got {value}")
        if not 1 <= self.skill_level <= 10:
            raise ValueError(f"skill_level must be within 1-10, got {self.skill_level}")

    def traits(self) -> dict[str, float]:
        """The numeric traits by name."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name in _TRAITS}


FISH = Personality(
    aggression=0.2, tightness=0.1, bluff_frequency=0.05, fear_factor=0.8,
    tilt_susceptibility=0.9, position_awareness=0.1, pot_odds_accuracy=0.2,
    hand_reading_skill=0.1, adaptability=0.1, deception=0.1,
    continuation_bet=0.3, check_raise=0.1, slow_play=0.1,
    steal_frequency=0.1, three_bet=0.05,
    tell_when_bluffing="hesitates", tell_when_strong="bets quickly",
    tell_reliability=0.7,
    name="Fish", description="Loose passive beginner who calls too much",
    avatar="🐟", skill_level=2,
)

ROCK = Personality(
    aggression=0.3, tightness=0.8, bluff_frequency=0.1, fear_factor=0.6,
    tilt_susceptibility=0.3, position_awareness=0.4, pot_odds_accuracy=0.6,
    hand_reading_skill=0.5, adaptability=0.3, deception=0.2,
    continuation_bet=0.4, check_raise=0.2, slow_play=0.3,
    steal_frequency=0.2, three_bet=0.1,
    tell_when_bluffing="fidgets", tell_when_strong="relaxed",
    tell_reliability=0.6,
    name="Rock", description="Tight passive player who only plays premium hands",
    avatar="🗿", skill_level=4,
)

TAG = Personality(
    aggression=0.7, tightness=0.7, bluff_frequency=0.3, fear_factor=0.3,
    tilt_susceptibility=0.4, position_awareness=0.8, pot_odds_accuracy=0.8,
    hand_reading_skill=0.7, adaptability=0.7, deception=0.6,
    continuation_bet=0.8, check_raise=0.5, slow_play=0.2,
    steal_frequency=0.7, three_bet=0.4,
    tell_when_bluffing="stares down", tell_when_strong="quick decisions",
    tell_reliability=0.4,
    name="TAG", description="Tight-aggressive solid player",
    avatar="🎯", skill_level=7,
)

LAG = Personality(
    aggression=0.8, tightness=0.4, bluff_frequency=0.5, fear_factor=0.2,
    tilt_susceptibility=0.5, position_awareness=0.9, pot_odds_accuracy=0.7,
    hand_reading_skill=0.8, adaptability=0.8, deception=0.9,
    continuation_bet=0.9, check_raise=0.7, slow_play=0.3,
    steal_frequency=0.9, three_bet=0.6,
    tell_when_bluffing="confident", tell_when_strong="casual",
    tell_reliability=0.3,
    name="LAG", description="Loose-aggressive skilled player",
    avatar="🔥", skill_level=8,
)

MANIAC = Personality(
    aggression=0.95, tightness=0.1, bluff_frequency=0.8, fear_factor=0.1,
    tilt_susceptibility=0.2, position_awareness=0.3, pot_odds_accuracy=0.4,
    hand_reading_skill=0.3, adaptability=0.2, deception=0.5,
    continuation_bet=0.95, check_raise=0.8, slow_play=0.05,
    steal_frequency=0.95, three_bet=0.8,
    tell_when_bluffing="animated", tell_when_strong="ecstatic",
    tell_reliability=0.8,
    name="Maniac", description="Ultra-aggressive wild player",
    avatar="🤪", skill_level=3,
)

CALLING_STATION = Personality(
    aggression=0.1, tightness=0.2, bluff_frequency=0.02, fear_factor=0.9,
    tilt_susceptibility=0.1, position_awareness=0.1, pot_odds_accuracy=0.3,
    hand_reading_skill=0.2, adaptability=0.1, deception=0.1,
    continuation_bet=0.1, check_raise=0.05, slow_play=0.8,
    steal_frequency=0.05, three_bet=0.02,
    tell_when_bluffing="nervous", tell_when_strong="smiles",
    tell_reliability=0.9,
    name="Calling Station", description="Passive player who calls almost everything",
    avatar="📞", skill_level=1,
)

SHARK = Personality(
    aggression=0.6, tightness=0.6, bluff_frequency=0.4, fear_factor=0.2,
    tilt_susceptibility=0.1, position_awareness=0.95, pot_odds_accuracy=0.95,
    hand_reading_skill=0.9, adaptability=0.95, deception=0.8,
    continuation_bet=0.7, check_raise=0.6, slow_play=0.4,
    steal_frequency=0.8, three_bet=0.5,
    tell_when_bluffing="neutral", tell_when_strong="neutral",
    tell_reliability=0.1,
    name="Shark", description="Balanced professional player",
    avatar="🦈", skill_level=10,
)

_BUILT_IN = (FISH, ROCK, TAG, LAG, MANIAC, CALLING_STATION, SHARK)
_BY_NAME = {p.name.lower(): p for p in _BUILT_IN}


def all_personalities() -> tuple[Personality, ...]:
    """Every built-in personality, from beginner to professional styles."""
    return _BUILT_IN


def get_personality(name: str) -> Personality:
    """Look up a built-in personality by name, ignoring case."""
    try:
        return _BY_NAME[name.strip().lower()]
    except KeyError:
        raise KeyError(f"unknown personality: {name!r}") from None