import logging
import random
from abc import ABC, abstractmethod
from typing import Final

from tic_tac_toe_engine.board import Board, Move, PlayerSymbol, opponent

logger = logging.getLogger(__name__)

CENTER: Final = Move(1, 1)
CORNERS: Final = (Move(0, 0), Move(0, 2), Move(2, 0), Move(2, 2))
EDGES: Final = (Move(0, 1), Move(1, 0), Move(1, 2), Move(2, 1))


class MoveStrategy(ABC):
    name: str

    @abstractmethod
    def choose(self, board: Board, mark: PlayerSymbol) -> Move | None:
        """Pick a move for `mark` on `board`, or None if the board has no empty cell.

        Implementations must not mutate `board`.
        """


class RandomStrategy(MoveStrategy):
    name = "Easy"

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)  # noqa: S311

    def choose(self, board: Board, mark: PlayerSymbol) -> Move | None:  # noqa: ARG002
        choices = board.empty_cells()
        if not choices:
            return None
        return self._random.choice(choices)


class SmartStrategy(MoveStrategy):
    """Win, block, center, corner, edge, then whatever is left."""

    name = "Smart"

    def choose(self, board: Board, mark: PlayerSymbol) -> Move | None:
        winning_move = self._find_winning_move(board, mark)
        if winning_move is not None:
            return winning_move

        blocking_move = self._find_winning_move(board, opponent(mark))
        if blocking_move is not None:
            return blocking_move

        for move in (CENTER, *CORNERS, *EDGES):
            if board.is_empty(move.row, move.col):
                return move

        empty_cells = board.empty_cells()
        return empty_cells[0] if empty_cells else None

    def _find_winning_move(self, board: Board, mark: PlayerSymbol) -> Move | None:
        for move in board.empty_cells():
            test_board = board.copy()
            test_board.place(move, mark)
            if test_board.check_win(mark):
                return move
        return None


class MinimaxStrategy(MoveStrategy):
    """Exhaustive minimax over the remaining game tree.

    Scores are `10 - depth` for a win and `depth - 10` for a loss, so the search
    prefers the fastest win and the slowest loss. There is no pruning and no
    transposition table; a 3x3 board is small enough to search completely.
    """

    name = "Impossible"

    def __init__(self) -> None:
        self._max_mark: PlayerSymbol = "X"
        self._min_mark: PlayerSymbol = "O"
        self._nodes_explored = 0

    @property
    def nodes_explored(self) -> int:
        """Number of positions scored during the last call to choose()."""
        return self._nodes_explored

    def choose(self, board: Board, mark: PlayerSymbol) -> Move | None:
        self._max_mark = mark
        self._min_mark = opponent(mark)
        self._nodes_explored = 0

        best_score: int | None = None
        best_move: Move | None = None
        for move in board.empty_cells():
            test_board = board.copy()
            test_board.place(move, self._max_mark)
            score = self.minimax(test_board, 0, is_maximizing=False)
            # Strictly greater: ties go to the first cell in row-major order.
            if best_score is None or score > best_score:
                best_score = score
                best_move = move

        logger.debug("Minimax explored %d nodes for %s, chose %s", self._nodes_explored, mark, best_move)
        return best_move

    def minimax(self, board: Board, depth: int, *, is_maximizing: bool) -> int:
        self._nodes_explored += 1

        if board.check_win(self._max_mark):
            return 10 - depth
        if board.check_win(self._min_mark):
            return depth - 10
        if board.is_full():
            return 0

        player = self._max_mark if is_maximizing else self._min_mark
        scores = []
        for move in board.empty_cells():
            test_board = board.copy()
            test_board.place(move, player)
            scores.append(self.minimax(test_board, depth + 1, is_maximizing=not is_maximizing))

        return max(scores) if is_maximizing else min(scores)
