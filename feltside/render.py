"""Drawing primitives for the table view: cards, chips, tables and animations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum

from feltside.model import Card, GameState, Player, Rank

MAX_ANIMATIONS = 64

_FELT = (0, 100, 0)
_RAIL = (139, 69, 19)
_CHIP = "●"
_CHIP_DENOMINATIONS = (500, 100, 25, 5, 1)


def rgb_color(r: int, g: int, b: int) -> int:
    """Pack three 0-255 channels into a 24-bit colour value."""
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"colour channel out of range: {channel}")
    return (r << 16) | (g << 8) | b


@dataclass(frozen=True)
class Cell:
    """One character position on a canvas with its colours."""

    char: str = " "
    fg: int | None = None
    bg: int | None = None


_BLANK = Cell()


class Canvas:
    """A fixed-size grid of coloured character cells.

    Writes that fall outside the grid are clipped. A write places each
    character of the text in its own cell and leaves the cursor after it.
    """

    def __init__(self, height: int, width: int) -> None:
        if height < 0 or width < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.height = height
        self.width = width
        self.fg: int | None = None
        self.bg: int | None = None
        self.cursor = (0, 0)
        self._cells = [[_BLANK] * width for _ in range(height)]

    def set_fg(self, r: int, g: int, b: int) -> None:
        self.fg = rgb_color(r, g, b)

    def set_bg(self, r: int, g: int, b: int) -> None:
        self.bg = rgb_color(r, g, b)

    def set_fg_default(self) -> None:
        self.fg = None

    def set_bg_default(self) -> None:
        self.bg = None

    def erase(self) -> None:
        """Blank every cell and home the cursor."""
        self._cells = [[_BLANK] * self.width for _ in range(self.height)]
        self.cursor = (0, 0)

    def put(self, y: int, x: int, text: str) -> int:
        """Write ``text`` starting at row ``y``, column ``x``.

        Returns how many characters landed on the canvas.
        """
        written = 0
        if 0 <= y < self.height:
            row = self._cells[y]
            for offset, char in enumerate(text):
                column = x + offset
                if 0 <= column < self.width:
                    row[column] = Cell(char, self.fg, self.bg)
                    written += 1
        self.cursor = (y, x + len(text))
        return written

    def write(self, text: str) -> int:
        """Write ``text`` at the cursor."""
        y, x = self.cursor
        return self.put(y, x, text)

    def cell(self, y: int, x: int) -> Cell:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"cell ({y}, {x}) is outside the canvas")
        return self._cells[y][x]

    def row(self, y: int) -> str:
        """The characters of row ``y`` as a string."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the canvas")
        return "".join(cell.char for cell in self._cells[y])


class CardSize(Enum):
    MINI = "mini"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class DetailLevel(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AnimationType(Enum):
    DEAL_CARD = "deal_card"
    FLIP_CARD = "flip_card"
    SLIDE_CHIPS = "slide_chips"
    COLLECT_POT = "collect_pot"
    HIGHLIGHT = "highlight"
    CELEBRATION = "celebration"


@dataclass
class Animation:
    """A sprite moving from a start to an end position over some frames."""

    type: AnimationType = AnimationType.DEAL_CARD
    start_x: int = 0
    start_y: int = 0
    end_x: int = 0
    end_y: int = 0
    current_frame: int = 0
    total_frames: int = 0
    card: Card | None = None
    chip_amount: int = 0
    color: int = 0
    active: bool = False

    def update(self) -> None:
        """Advance one frame, stopping after the last."""
        if not self.active:
            return
        self.current_frame += 1
        if self.current_frame >= self.total_frames:
            self.active = False

    def is_complete(self) -> bool:
        return not self.active or self.current_frame >= self.total_frames

    def position(self) -> tuple[int, int]:
        """Current (y, x) on an ease-out curve between start and end."""
        if self.total_frames > 0:
            progress = self.current_frame / self.total_frames
        else:
            progress = 1.0
        progress = 1.0 - (1.0 - progress) * (1.0 - progress)
        y = self.start_y + int((self.end_y - self.start_y) * progress)
        x = self.start_x + int((self.end_x - self.start_x) * progress)
        return y, x


@dataclass
class UIState:
    """Everything the table view needs to draw a frame."""

    canvas: Canvas
    table_center_x: int = 0
    table_center_y: int = 0
    table_radius_x: int = 0
    table_radius_y: int = 0
    detail_level: DetailLevel = DetailLevel.MEDIUM
    card_size: CardSize = CardSize.MEDIUM
    animations_enabled: bool = True
    animation_speed: int = 0
    animations: list[Animation] = field(default_factory=list)
    color_felt: int = 0
    color_rail: int = 0
    color_text: int = 0
    color_highlight: int = 0
    game_state: GameState | None = None
    layout_data: object | None = None

    @property
    def term_height(self) -> int:
        return self.canvas.height

    @property
    def term_width(self) -> int:
        return self.canvas.width

    def add_animation(self, animation: Animation) -> bool:
        """Queue an active copy of ``animation``; False when the queue is full."""
        if len(self.animations) >= MAX_ANIMATIONS:
            return False
        self.animations.append(replace(animation, active=True))
        return True

    def process_animations(self) -> None:
        """Draw one frame of every active animation and drop finished ones."""
        canvas = self.canvas
        for animation in self.animations:
            if not animation.active:
                continue
            y, x = animation.position()
            if animation.type is AnimationType.DEAL_CARD and animation.card is not None:
                render_mini_card(canvas, y, x, animation.card, True)
            elif animation.type is AnimationType.SLIDE_CHIPS:
                canvas.set_fg(255, 215, 0)
                canvas.put(y, x, "$")
            animation.update()
        self.animations = [a for a in self.animations if a.active]


def _set_suit_colour(canvas: Canvas, card: Card, red: tuple[int, int, int]) -> None:
    if card.is_red():
        canvas.set_fg(*red)
    else:
        canvas.set_fg(0, 0, 0)


def render_fancy_card(
    canvas: Canvas, y: int, x: int, card: Card, face_down: bool
) -> None:
    """Draw a large four-line card with a drop shadow."""
    canvas.set_bg_default()
    canvas.set_fg(50, 50, 50)
    for line in range(1, 5):
        canvas.put(y + line, x + 1, "▓▓▓▓▓")

    if face_down:
        canvas.set_bg(0, 0, 128)
        canvas.set_fg(255, 215, 0)
        canvas.put(y, x, "╔═══╗")
        canvas.put(y + 1, x, "║♦♦♦║")
        canvas.put(y + 2, x, "║♦♦♦║")
        canvas.put(y + 3, x, "╚═══╝")
        return

    canvas.set_bg(255, 255, 255)
    canvas.set_fg(0, 0, 0)
    canvas.put(y, x, "┌────┐")
    canvas.put(y + 1, x, "│    │")
    canvas.put(y + 2, x, "│    │")
    canvas.put(y + 3, x, "└────┘")

    rank_text = "10" if card.rank is Rank.TEN else card.rank.char
    _set_suit_colour(canvas, card, (220, 20, 20))
    canvas.put(y + 1, x + 1, rank_text)
    canvas.put(y + 2, x + 2, card.suit.symbol)


def render_medium_card(
    canvas: Canvas, y: int, x: int, card: Card, face_down: bool
) -> None:
    """Draw a three-line card."""
    if face_down:
        canvas.set_bg(0, 0, 100)
        canvas.set_fg(255, 255, 255)
        canvas.put(y, x, "┌──┐")
        canvas.put(y + 1, x, "│▓▓│")
        canvas.put(y + 2, x, "└──┘")
        return

    canvas.set_bg(255, 255, 255)
    canvas.set_fg(0, 0, 0)
    canvas.put(y, x, "┌──┐")
    canvas.put(y + 1, x, "│")
    canvas.put(y + 1, x + 3, "│")
    canvas.put(y + 2, x, "└──┘")

    _set_suit_colour(canvas, card, (255, 0, 0))
    canvas.put(y + 1, x + 1, card.display())


def render_mini_card(
    canvas: Canvas, y: int, x: int, card: Card, face_down: bool
) -> None:
    """Draw a single-line card such as ``[A♠]``."""
    if face_down:
        canvas.set_bg(0, 0, 100)
        canvas.set_fg(255, 255, 255)
        canvas.put(y, x, "[??]")
        return

    canvas.set_bg(255, 255, 255)
    _set_suit_colour(canvas, card, (255, 0, 0))
    canvas.put(y, x, "[")
    canvas.write(card.display())
    canvas.write("]")


def chip_breakdown(amount: int) -> dict[int, int]:
    """Split ``amount`` into chips of 500, 100, 25, 5 and 1, largest first."""
    if amount < 0:
        raise ValueError(f"chip amount must not be negative: {amount}")
    counts: dict[int, int] = {}
    for denomination in _CHIP_DENOMINATIONS:
        counts[denomination], amount = divmod(amount, denomination)
    return counts


_CHIP_COLOURS = {
    500: (128, 0, 128),
    100: (0, 0, 0),
    25: (0, 255, 0),
    5: (255, 0, 0),
    1: (255, 255, 255),
}


def render_chip_stack(canvas: Canvas, y: int, x: int, amount: int) -> None:
    """Draw small stacks of chips, one stack per denomination."""
    counts = chip_breakdown(amount)
    stack_x = x

    for denomination in (500, 100, 25, 5):
        count = counts[denomination]
        if count == 0:
            continue
        canvas.set_fg(*_CHIP_COLOURS[denomination])
        shown = count if denomination == 5 else min(count, 5)
        for i in range(shown):
            canvas.put(y - i // 2, stack_x + i % 2, _CHIP)
        if denomination in (500, 100) and count > 5:
            canvas.put(y + 1, stack_x, str(count))
        stack_x += 3

    ones = counts[1]
    if ones:
        canvas.set_fg(*_CHIP_COLOURS[1])
        for i in range(ones):
            canvas.put(y, stack_x + i, _CHIP)


def render_player_info_box(canvas: Canvas, y: int, x: int, player: Player) -> None:
    """Draw a framed box with a player's name, stack and current bet."""
    canvas.set_bg_default()
    canvas.set_fg(200, 200, 200)
    canvas.put(y - 1, x - 1, "┌─────────────────┐")
    for line in range(3):
        canvas.put(y + line, x - 1, "│")
        canvas.put(y + line, x + 17, "│")
    canvas.put(y + 3, x - 1, "└─────────────────┘")

    canvas.set_fg(255, 255, 255)
    canvas.put(y, x, f"{player.name:<16}")

    canvas.set_fg(0, 255, 0)
    canvas.put(y + 1, x, f"${player.stack:<15}")

    if player.bet > 0:
        canvas.set_fg(255, 255, 0)
        canvas.put(y + 2, x, f"Bet: ${player.bet:<10}")


def render_oval_table(ui: UIState) -> None:
    """Draw an oval rail and fill it with felt."""
    canvas = ui.canvas
    cy, cx = ui.table_center_y, ui.table_center_x
    ry, rx = ui.table_radius_y, ui.table_radius_x

    canvas.set_fg(*_RAIL)
    angle = 0.0
    while angle < 2 * math.pi:
        y = cy + int(ry * math.sin(angle))
        x = cx + int(rx * math.cos(angle))
        if 0 <= y < ui.term_height and 0 <= x < ui.term_width:
            next_angle = angle + 0.05
            next_y = cy + int(ry * math.sin(next_angle))
            next_x = cx + int(rx * math.cos(next_angle))
            edge = "║" if abs(next_y - y) > abs(next_x - x) else "═"
            canvas.put(y, x, edge)
        angle += 0.05

    canvas.set_bg(*_FELT)
    for y in range(cy - ry + 1, cy + ry):
        for x in range(cx - rx + 1, cx + rx):
            dx = (x - cx) / rx
            dy = (y - cy) / ry
            if dx * dx + dy * dy < 0.9:
                canvas.put(y, x, " ")


def render_rectangular_table(ui: UIState) -> None:
    """Draw a rectangular rail with rounded corners and fill it with felt."""
    canvas = ui.canvas
    top = ui.table_center_y - ui.table_radius_y
    bottom = ui.table_center_y + ui.table_radius_y
    left = ui.table_center_x - ui.table_radius_x
    right = ui.table_center_x + ui.table_radius_x

    canvas.set_fg(*_RAIL)
    canvas.put(top, left, "╭")
    canvas.put(top, right, "╮")
    canvas.put(bottom, left, "╰")
    canvas.put(bottom, right, "╯")

    for x in range(left + 1, right):
        canvas.put(top, x, "─")
        canvas.put(bottom, x, "─")
    for y in range(top + 1, bottom):
        canvas.put(y, left, "│")
        canvas.put(y, right, "│")

    canvas.set_bg(*_FELT)
    for y in range(top + 1, bottom):
        canvas.put(y, left + 1, " " * max(0, right - left - 1))


def apply_theme_dark(ui: UIState) -> None:
    ui.color_felt = rgb_color(0, 80, 0)
    ui.color_rail = rgb_color(100, 50, 10)
    ui.color_text = rgb_color(200, 200, 200)
    ui.color_highlight = rgb_color(255, 215, 0)


def apply_theme_classic(ui: UIState) -> None:
    ui.color_felt = rgb_color(0, 100, 0)
    ui.color_rail = rgb_color(139, 69, 19)
    ui.color_text = rgb_color(255, 255, 255)
    ui.color_highlight = rgb_color(255, 255, 0)


def apply_theme_modern(ui: UIState) -> None:
    ui.color_felt = rgb_color(20, 60, 20)
    ui.color_rail = rgb_color(50, 50, 50)
    ui.color_text = rgb_color(230, 230, 230)
    ui.color_highlight = rgb_color(0, 200, 255)