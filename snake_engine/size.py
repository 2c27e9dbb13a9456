import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from snake_engine.model import Board, Snake, others

# --- Constants ---
BOARD_WEIGHT = 0.4
LARGEST_WEIGHT = 0.3
AVERAGE_WEIGHT = 0.3
DOMINANCE_BUFFER = 2     # aim to be this much longer than the biggest opponent
OPPONENT_PENALTY = 2     # per opponent: more snakes, less room to be long
MAINTAIN_BUFFER = 2      # segments above target still counted as "on target"
MIN_TARGET_LENGTH = 5
MAX_BOARD_FRACTION = 0.6
STARTING_LENGTH = 3      # stands in for opponent stats when we are alone


class GrowthMode(Enum):
    MUST_GROW = "must-grow"
    SHOULD_GROW = "should-grow"
    MAINTAIN = "maintain"
    AVOID_GROWTH = "avoid-growth"

    @property
    def wants_growth(self) -> bool:
        return self in (GrowthMode.MUST_GROW, GrowthMode.SHOULD_GROW)


@dataclass
class SizeStrategy:
    mode: GrowthMode
    target_length: int
    reason: str


def calculate_target_length(board: Board, you: Snake, snakes: Iterable[Snake]) -> int:
    """
    Preferred body length for this board and field of opponents.

    Weighted mix of sqrt(board area), largest opponent + buffer and the
    average opponent, less a per-opponent penalty, clamped to
    [max(5, largest opponent), 0.6 * area].
    """
    lengths = [snake.length for snake in others(you, snakes)]
    largest = max(lengths) if lengths else STARTING_LENGTH
    average = sum(lengths) / len(lengths) if lengths else STARTING_LENGTH

    board_term = int(math.sqrt(board.area))
    target = (board_term * BOARD_WEIGHT
              + (largest + DOMINANCE_BUFFER) * LARGEST_WEIGHT
              + average * AVERAGE_WEIGHT)
    target -= OPPONENT_PENALTY * len(lengths)

    lower = max(largest, MIN_TARGET_LENGTH)
    upper = int(board.area * MAX_BOARD_FRACTION)
    return min(max(int(round(target)), lower), upper)


def get_size_strategy(board: Board, you: Snake, snakes: Iterable[Snake]) -> SizeStrategy:
    snakes = list(snakes)
    target = calculate_target_length(board, you, snakes)
    lengths = [snake.length for snake in others(you, snakes)]
    largest = max(lengths) if lengths else 0

    if you.length < largest:
        return SizeStrategy(GrowthMode.MUST_GROW, target, f"shorter than largest opponent ({largest})")
    if you.length < target:
        return SizeStrategy(GrowthMode.SHOULD_GROW, target, "below target length")
    if you.length <= target + MAINTAIN_BUFFER:
        return SizeStrategy(GrowthMode.MAINTAIN, target, "at target length")
    return SizeStrategy(GrowthMode.AVOID_GROWTH, target, "above target length, mobility risk")
