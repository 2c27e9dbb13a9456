"""
Per-turn move decision.

decide_move() walks a fixed priority ladder once per turn:

    1. safe moves, with fallbacks when there are none
    2. size policy (growth mode)
    3. keep only moves with room for our whole body, if any
    4. endgame space denial (one opponent left, we are long)
    5. feeding when hungry or the size policy wants growth
    6. hunting a shorter snake
    7. default top-up feeding
    8. most room, refined by multi-turn prediction
"""
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from snake_engine import endgame, food, opponents, predictor
from snake_engine.grid import lenient_passable
from snake_engine.model import DIRECTIONS, Board, Snake
from snake_engine.move_validator import get_in_bounds_moves, get_non_self_colliding_moves, get_safe_moves
from snake_engine.observer import Observer, quiet
from snake_engine.size import get_size_strategy
from snake_engine.space import reachable_space


@dataclass
class MoveDecision:
    move: str
    shout: str = ""


def get_move_with_most_space(board: Board, you: Snake, snakes: List[Snake], moves: List[str]) -> str:
    """Move whose next cell has the largest lenient flood fill; ties keep the earliest move."""
    passable = lenient_passable(board, you, snakes)
    best_move, best_space = moves[0], 0
    for move in moves:
        space = reachable_space(you.head.step(move), board, passable)
        if space > best_space:
            best_move, best_space = move, space
    return best_move


def get_spacious_moves(board: Board, you: Snake, snakes: List[Snake], moves: List[str]) -> List[str]:
    passable = lenient_passable(board, you, snakes)
    return [m for m in moves if reachable_space(you.head.step(m), board, passable) >= you.length]


def _desperate_move(board: Board, you: Snake, rng: random.Random, log: Observer) -> str:
    for tier, moves in (("no self-collision", get_non_self_colliding_moves(board, you)),
                        ("in bounds", get_in_bounds_moves(board, you))):
        if moves:
            move = rng.choice(moves)
            log(f"[Move ] no safe moves, falling back to {tier}: {move}")
            return move
    move = rng.choice(DIRECTIONS)
    log(f"[Move ] no safe moves, every direction leaves the board: {move}")
    return move


def decide_move(board: Board, you: Snake, snakes: Optional[Iterable[Snake]] = None,
                rng: Optional[random.Random] = None, observer: Optional[Observer] = None,
                lookahead: bool = True) -> MoveDecision:
    """
    Choose this turn's direction for `you`.

    Never raises for game situations: every dead end degrades to a
    fallback and one of "up", "down", "left", "right" is always returned.
    """
    snakes = list(board.snakes if snakes is None else snakes)
    log = observer or quiet
    rng = rng or random.Random()

    safe_moves = get_safe_moves(board, you, snakes)
    log(f"[Move ] health={you.health} length={you.length} safe={','.join(safe_moves) or 'none'}")
    if not safe_moves:
        return MoveDecision(_desperate_move(board, you, rng, log), "Cornered!")

    strategy = get_size_strategy(board, you, snakes)
    log(f"[Size ] mode={strategy.mode.value} target={strategy.target_length} ({strategy.reason})")

    candidates = get_spacious_moves(board, you, snakes, safe_moves) or safe_moves
    log(f"[Move ] candidates={','.join(candidates)}")

    if endgame.is_endgame(board, you, snakes):
        move = endgame.get_endgame_move(board, you, snakes, candidates, log)
        if move is not None:
            return MoveDecision(move, "Endgame")

    if food.should_seek_food(you, strategy.mode):
        move = food.get_move_towards_food(board, you, snakes, candidates)
        if move is not None:
            log(f"[Food ] seeking food: {move}")
            shout = "Hungry!" if you.health < food.CRITICAL_HEALTH else "Growing"
            return MoveDecision(move, shout)

    if opponents.should_target_opponents(you, snakes):
        move = opponents.get_move_towards_opponent(board, you, snakes, candidates)
        if move is not None:
            log(f"[Hunt ] targeting smaller opponent: {move}")
            return MoveDecision(move, "Hunting")

    # TODO: drop this pass if match logs show it never fires after the gated one above
    if food.should_top_up(you, strategy.mode):
        move = food.get_move_towards_food(board, you, snakes, candidates)
        if move is not None:
            log(f"[Food ] topping up health: {move}")
            return MoveDecision(move, "Growing")

    move = get_move_with_most_space(board, you, snakes, candidates)
    if lookahead:
        predicted = predictor.get_move_with_best_future_position(board, you, snakes, candidates, log=log)
        if predicted is not None:
            move = predicted
    log(f"[Move ] maximizing space: {move}")
    return MoveDecision(move, "Surviving")
