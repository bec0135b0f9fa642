"""Othello game logic."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

BOARD_SIZE = 8

# Returned by ``compute_greedy_move`` when the side to move has no legal move.
NO_MOVE: Tuple[int, int] = (-1, -1)

DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

_SYMBOLS = {"empty": ".", "dark": "X", "light": "O"}


class Cell(Enum):
    EMPTY = "empty"
    DARK = "dark"
    LIGHT = "light"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self.value]


class Side(Enum):
    DARK = "dark"
    LIGHT = "light"

    @property
    def opponent(self) -> "Side":
        return Side.LIGHT if self is Side.DARK else Side.DARK

    @property
    def cell(self) -> Cell:
        return Cell.DARK if self is Side.DARK else Cell.LIGHT


class Terminal(Enum):
    GAME_OVER = "over"


GAME_OVER = Terminal.GAME_OVER

Turn = Union[Side, Terminal]
Move = Tuple[int, int]
Grid = List[List[Cell]]


class InvalidMove(ValueError):
    """Raised by :meth:`Board.make_move` for a move the side to move may not play."""

    def __init__(self, row: int, col: int, reason: str) -> None:
        super().__init__(f"Invalid move at ({row}, {col}): {reason}")
        self.row = row
        self.col = col
        self.reason = reason


def inside(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def parse_turn(value: Any) -> Turn:
    """Return the side to move named by ``value`` (``"dark"``, ``"light"`` or ``"over"``)."""
    if isinstance(value, (Side, Terminal)):
        return value
    if value == GAME_OVER.value:
        return GAME_OVER
    try:
        return Side(value)
    except ValueError:
        raise ValueError(f"Unknown side to move: {value!r}") from None


class Board:
    """Othello board state and rules for a single game.

    The grid and the side to move are owned by the board. They only change
    through :meth:`make_move`; every query returns a fresh value so callers
    cannot corrupt the game by mutating what they were handed.
    """

    def __init__(self) -> None:
        self._grid: Grid = [[Cell.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        mid = BOARD_SIZE // 2
        # Starting pieces
        self._grid[mid - 1][mid - 1] = Cell.LIGHT
        self._grid[mid][mid] = Cell.LIGHT
        self._grid[mid - 1][mid] = Cell.DARK
        self._grid[mid][mid - 1] = Cell.DARK
        self._current: Turn = Side.DARK  # dark starts
        # Track the coordinates of the most recent move. ``None`` means no
        # moves have been played yet.
        self.last_move: Optional[Move] = None

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[Cell]],
        current: Turn,
        last_move: Optional[Move] = None,
    ) -> "Board":
        """Build a board from an explicit position.

        This is the entry point for fixtures and saved positions. No check is
        made that ``current`` actually has a legal move; the rules are applied
        from the next :meth:`make_move` onwards.
        """
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        for row in grid:
            for cell in row:
                if not isinstance(cell, Cell):
                    raise ValueError(f"Not a cell value: {cell!r}")
        board = cls.__new__(cls)
        board._grid = [list(row) for row in grid]
        board._current = parse_turn(current)
        board.last_move = tuple(last_move) if last_move is not None else None
        return board

    @classmethod
    def from_text(cls, text: str, current: Turn) -> "Board":
        """Build a board from a diagram as produced by ``str(board)``.

        Rows are separated by newlines and use ``.`` for empty cells, ``X``
        for dark and ``O`` for light. Whitespace inside a row is ignored.
        """
        by_symbol = {cell.symbol: cell for cell in Cell}
        grid = []
        for line in text.strip().splitlines():
            symbols = "".join(line.split())
            try:
                grid.append([by_symbol[s] for s in symbols])
            except KeyError as exc:
                raise ValueError(f"Unknown cell symbol {exc.args[0]!r}") from None
        return cls.from_grid(grid, current)

    @classmethod
    def from_state(cls, data: Dict[str, Any]) -> "Board":
        """Restore a board from the dict produced by :meth:`to_state`."""
        if not isinstance(data, dict):
            raise ValueError("Saved state must be an object")
        rows = data.get("board")
        if not isinstance(rows, list) or any(not isinstance(row, list) for row in rows):
            raise ValueError("Saved state has no board")
        try:
            grid = [[Cell(value) for value in row] for row in rows]
        except ValueError as exc:
            raise ValueError(f"Bad cell in saved board: {exc}") from None
        last = data.get("last")
        if last is not None:
            if (
                not isinstance(last, (list, tuple))
                or len(last) != 2
                or not all(isinstance(v, int) for v in last)
            ):
                raise ValueError(f"Bad last move: {last!r}")
            last = (last[0], last[1])
        return cls.from_grid(grid, parse_turn(data.get("current")), last)

    def to_state(self) -> Dict[str, Any]:
        """Return a JSON friendly description of the position."""
        return {
            "board": [[cell.value for cell in row] for row in self._grid],
            "current": self._current.value,
            "last": list(self.last_move) if self.last_move is not None else None,
        }

    def copy(self) -> "Board":
        """Return an independent copy of the game."""
        return Board.from_grid(self._grid, self._current, self.last_move)

    def __str__(self) -> str:
        return "\n".join("".join(cell.symbol for cell in row) for row in self._grid)

    # Queries

    def get_board(self) -> Grid:
        """Return a copy of the 8x8 grid."""
        return [row[:] for row in self._grid]

    @property
    def current(self) -> Turn:
        """The side to move, or ``GAME_OVER``."""
        return self._current

    def is_game_over(self) -> bool:
        return self._current is GAME_OVER

    def score(self) -> Tuple[int, int]:
        """Return ``(dark, light)`` disc counts."""
        dark = sum(cell is Cell.DARK for row in self._grid for cell in row)
        light = sum(cell is Cell.LIGHT for row in self._grid for cell in row)
        return dark, light

    def winner(self) -> Optional[Side]:
        """Return the side with more discs once the game is over.

        ``None`` is returned while the game is in progress and for a draw.
        """
        if not self.is_game_over():
            return None
        dark, light = self.score()
        if dark > light:
            return Side.DARK
        if light > dark:
            return Side.LIGHT
        return None

    # Rules

    def _capture_line(self, row: int, col: int, dr: int, dc: int, side: Side) -> List[Move]:
        """Return the opponent discs ``side`` would flip from (row, col) along (dr, dc).

        The run must be one or more opponent discs closed by a disc of
        ``side``. An empty cell or the board edge before the closing disc
        leaves nothing to flip.
        """
        opponent = side.opponent.cell
        r, c = row + dr, col + dc
        run = []
        while inside(r, c) and self._grid[r][c] is opponent:
            run.append((r, c))
            r += dr
            c += dc
        if run and inside(r, c) and self._grid[r][c] is side.cell:
            return run
        return []

    def _captures(self, row: int, col: int, side: Side) -> List[Move]:
        if not inside(row, col) or self._grid[row][col] is not Cell.EMPTY:
            return []
        captured = []
        for dr, dc in DIRECTIONS:
            captured.extend(self._capture_line(row, col, dr, dc, side))
        return captured

    def _side_to_move(self) -> Optional[Side]:
        return self._current if isinstance(self._current, Side) else None

    def is_valid_move(self, row: int, col: int) -> bool:
        side = self._side_to_move()
        if side is None or not inside(row, col) or self._grid[row][col] is not Cell.EMPTY:
            return False
        return any(self._capture_line(row, col, dr, dc, side) for dr, dc in DIRECTIONS)

    def valid_moves(self, side: Optional[Side] = None) -> List[Move]:
        """Return the legal moves of ``side`` (default: side to move) in row-major order."""
        if side is None:
            side = self._side_to_move()
            if side is None:
                return []
        return [
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if self._captures(r, c, side)
        ]

    def has_valid_moves(self, side: Optional[Side] = None) -> bool:
        if side is None:
            side = self._side_to_move()
            if side is None:
                return False
        return any(
            self._captures(r, c, side)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
        )

    def count_flips(self, row: int, col: int) -> int:
        """Return how many discs playing at (row, col) would flip.

        Cells that are off the board, occupied or otherwise illegal count 0.
        """
        side = self._side_to_move()
        if side is None:
            return 0
        return len(self._captures(row, col, side))

    def make_move(self, row: int, col: int) -> None:
        """Play the side to move at (row, col).

        Flips every captured run, then hands the turn to the opponent. If the
        opponent cannot move the turn passes straight back; if neither side
        can move the game is over. Raises :class:`InvalidMove` without
        touching the board when the move is not legal.
        """
        side = self._side_to_move()
        if side is None:
            raise InvalidMove(row, col, "the game is over")
        if not inside(row, col):
            raise InvalidMove(row, col, "outside the board")
        if self._grid[row][col] is not Cell.EMPTY:
            raise InvalidMove(row, col, "cell is occupied")
        captured = self._captures(row, col, side)
        if not captured:
            raise InvalidMove(row, col, "no discs would be flipped")

        self._grid[row][col] = side.cell
        self.last_move = (row, col)
        for r, c in captured:
            self._grid[r][c] = side.cell

        opponent = side.opponent
        if self.has_valid_moves(opponent):
            self._current = opponent
        elif self.has_valid_moves(side):
            logger.debug("%s has no legal move and passes", opponent.value)
            self._current = side
        else:
            logger.debug("Game over at score %s", self.score())
            self._current = GAME_OVER

    def compute_greedy_move(self) -> Move:
        """Return the legal move that flips the most discs.

        Cells are scanned row by row and ties keep the first cell found.
        ``NO_MOVE`` is returned when the side to move has no legal move.
        """
        best = NO_MOVE
        max_flips = 0
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                if not self.is_valid_move(r, c):
                    continue
                flips = self.count_flips(r, c)
                if flips > max_flips:
                    max_flips = flips
                    best = (r, c)
        return best


# Function interface for presentation code that prefers not to call methods.

def new_board() -> Board:
    return Board()


def get_board(board: Board) -> Grid:
    return board.get_board()


def get_side_to_move(board: Board) -> Turn:
    return board.current


def is_valid_move(board: Board, row: int, col: int) -> bool:
    return board.is_valid_move(row, col)


def make_move(board: Board, row: int, col: int) -> None:
    board.make_move(row, col)


def count_flips(board: Board, row: int, col: int) -> int:
    return board.count_flips(row, col)


def get_score(board: Board) -> Tuple[int, int]:
    return board.score()


def is_game_over(board: Board) -> bool:
    return board.is_game_over()


def compute_greedy_move(board: Board) -> Move:
    return board.compute_greedy_move()
