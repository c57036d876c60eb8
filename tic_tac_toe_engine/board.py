from dataclasses import dataclass
from typing import Final, Literal

from tic_tac_toe_engine.exception import CellOccupiedError, InvalidMarkError, OutOfBoundsError

BOARD_SIZE: Final = 3
PLAYER_SYMBOLS: Final = ("X", "O")
type PlayerSymbol = Literal["X", "O"]
type Position = tuple[int, int]


@dataclass(frozen=True, slots=True, order=True)
class Move:
    row: int
    col: int

    @property
    def position(self) -> Position:
        return (self.row, self.col)


# Rows, then columns, then the two diagonals. The order decides which line gets highlighted.
WIN_LINES: Final[tuple[tuple[Move, Move, Move], ...]] = (
    *(tuple(Move(r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)),
    *(tuple(Move(r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)),
    tuple(Move(i, i) for i in range(BOARD_SIZE)),
    tuple(Move(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)),
)  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class InProgress:
    pass


@dataclass(frozen=True, slots=True)
class Win:
    mark: PlayerSymbol


@dataclass(frozen=True, slots=True)
class Draw:
    pass


type GameOutcome = InProgress | Win | Draw


def opponent(mark: PlayerSymbol) -> PlayerSymbol:
    return "O" if mark == "X" else "X"


class Board:
    def __init__(self) -> None:
        self._board: list[list[PlayerSymbol | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @property
    def grid(self) -> list[list[PlayerSymbol | None]]:
        """Snapshot of the cells. Mutating it does not touch the board."""
        return [row[:] for row in self._board]

    def copy(self) -> "Board":
        copied = Board()
        copied._board = [row[:] for row in self._board]
        return copied

    def reset(self) -> None:
        for row in self._board:
            row[:] = [None] * BOARD_SIZE

    def cell(self, row: int, col: int) -> PlayerSymbol | None:
        self._check_bounds(row, col)
        return self._board[row][col]

    def is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def is_empty(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return self._board[row][col] is None

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.is_valid_position(row, col):
            msg = f"Position ({row}, {col}) is out of bounds."
            raise OutOfBoundsError(msg)

    def place(self, position: Move | Position, mark: str) -> None:
        row, col = position.position if isinstance(position, Move) else position

        if not self.is_empty(row, col):
            msg = f"Cell ({row}, {col}) is already occupied."
            raise CellOccupiedError(msg)

        if mark not in PLAYER_SYMBOLS:
            msg = f"Invalid mark: {mark!r}. Must be X or O."
            raise InvalidMarkError(msg)

        self._board[row][col] = mark  # type: ignore[assignment]

    def empty_cells(self) -> list[Move]:
        return [Move(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE) if self._board[r][c] is None]

    def move_count(self) -> int:
        return sum(cell is not None for row in self._board for cell in row)

    def check_win(self, mark: PlayerSymbol) -> bool:
        return self.winning_line(mark) is not None

    def winning_line(self, mark: PlayerSymbol) -> tuple[Move, Move, Move] | None:
        for line in WIN_LINES:
            if all(self._board[move.row][move.col] == mark for move in line):
                return line
        return None

    def get_winner(self) -> PlayerSymbol | None:
        for mark in PLAYER_SYMBOLS:
            if self.check_win(mark):
                return mark
        return None

    def is_full(self) -> bool:
        return all(all(cell is not None for cell in row) for row in self._board)

    def is_draw(self) -> bool:
        return self.is_full() and self.get_winner() is None

    def is_game_over(self) -> bool:
        return self.get_winner() is not None or self.is_full()

    def outcome(self) -> GameOutcome:
        winner = self.get_winner()
        if winner is not None:
            return Win(winner)
        if self.is_full():
            return Draw()
        return InProgress()

    def __str__(self) -> str:
        rows = [" " + " | ".join(cell or "-" for cell in row) + " " for row in self._board]
        return "\n-----------\n".join(rows)
