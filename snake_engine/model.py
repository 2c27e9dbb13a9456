import typing
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple

# --- Direction tokens ---
# +Y is "up" on a Battlesnake board (origin bottom-left).
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"

# Fixed enumeration order, also used for every tie-break in the engine.
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

OFFSETS = {
    UP: (0, 1),
    DOWN: (0, -1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def step(self, direction: str) -> "Coordinate":
        dx, dy = OFFSETS[direction]
        return Coordinate(self.x + dx, self.y + dy)

    def neighbors(self) -> List["Coordinate"]:
        """The four cardinal neighbors, in DIRECTIONS order (may be off-board)."""
        return [self.step(direction) for direction in DIRECTIONS]

    def manhattan(self, other: "Coordinate") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


def direction_between(start: Coordinate, end: Coordinate) -> Optional[str]:
    """Direction token for a single step from start to an adjacent end cell."""
    for direction in DIRECTIONS:
        if start.step(direction) == end:
            return direction
    return None


@dataclass
class Snake:
    id: str
    body: List[Coordinate]
    health: int = 100
    length: Optional[int] = None

    def __post_init__(self):
        self.body = list(self.body)
        if self.length is None:
            self.length = len(self.body)

    @property
    def head(self) -> Coordinate:
        return self.body[0]

    @property
    def tail(self) -> Coordinate:
        return self.body[-1]


@dataclass
class Board:
    width: int
    height: int
    food: FrozenSet[Coordinate] = field(default_factory=frozenset)
    hazards: FrozenSet[Coordinate] = field(default_factory=frozenset)
    snakes: List[Snake] = field(default_factory=list)

    def __post_init__(self):
        self.food = frozenset(self.food)
        self.hazards = frozenset(self.hazards)
        self.snakes = list(self.snakes)

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: Coordinate) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def opponents_of(self, you: Snake, snakes: Optional[Iterable[Snake]] = None) -> List[Snake]:
        return others(you, self.snakes if snakes is None else snakes)


def others(you: Snake, snakes: Iterable[Snake]) -> List[Snake]:
    return [snake for snake in snakes if snake.id != you.id]


def advance_snake(snake: Snake, direction: str, food: Iterable[Coordinate]) -> Snake:
    """
    Move a snake one step and apply the growth/health rules.

    Eating keeps the tail in place for the turn (net growth of one) and
    resets health; any other move drops the tail and costs one health.
    """
    new_head = snake.head.step(direction)
    if new_head in food:
        return Snake(snake.id, [new_head] + snake.body, 100, snake.length + 1)
    return Snake(snake.id, [new_head] + snake.body[:-1], snake.health - 1, snake.length)


def with_snake(snakes: Iterable[Snake], replacement: Snake) -> List[Snake]:
    """Copy of the snake list with the entry sharing replacement's id swapped out."""
    return [replacement if snake.id == replacement.id else snake for snake in snakes]


# --- Battlesnake JSON translation ---

def _to_coordinate(point: typing.Dict) -> Coordinate:
    return Coordinate(int(point['x']), int(point['y']))


def _to_snake(data: typing.Dict) -> Snake:
    body = [_to_coordinate(segment) for segment in data['body']]
    if not body:
        raise ValueError(f"snake {data.get('id')!r} has an empty body")
    return Snake(
        id=str(data['id']),
        body=body,
        health=int(data.get('health', 100)),
        length=int(data.get('length', len(body))),
    )


def snapshot_from_game_state(game_state: typing.Dict) -> Tuple[Board, Snake]:
    """
    Convert a Battlesnake /move payload into the engine's snapshot.

    Returns:
        board (Board): dimensions, food, hazards and every snake on the board
        you (Snake): the controlled snake, as listed in board.snakes when present
    """
    board_data = game_state['board']
    width = int(board_data['width'])
    height = int(board_data['height'])
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid board size {width}x{height}")

    snakes = [_to_snake(s) for s in board_data['snakes']]
    you = _to_snake(game_state['you'])
    # Prefer the board's copy so identity checks line up with board.snakes
    for snake in snakes:
        if snake.id == you.id:
            you = snake
            break
    else:
        snakes.append(you)

    board = Board(
        width=width,
        height=height,
        food=frozenset(_to_coordinate(f) for f in board_data.get('food', [])),
        hazards=frozenset(_to_coordinate(h) for h in board_data.get('hazards', [])),
        snakes=snakes,
    )
    return board, you
