import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, StrEnum, auto

from tic_tac_toe_engine.board import Board, Draw, InProgress, Move, PlayerSymbol, Position, Win, opponent
from tic_tac_toe_engine.exception import GameOverError, InvalidMoveError, LogicError, WrongTurnError
from tic_tac_toe_engine.player import Player
from tic_tac_toe_engine.player_ai import AiPlayer
from tic_tac_toe_engine.player_local import LocalPlayer
from tic_tac_toe_engine.strategy import MoveStrategy, RandomStrategy

logger = logging.getLogger(__name__)


class GameState(Enum):
    AWAITING_MARK_A = auto()
    AWAITING_MARK_B = auto()
    OVER = auto()


class GameResult(StrEnum):
    """Result of a match from the human player's point of view."""

    IN_PROGRESS = "IN_PROGRESS"
    HUMAN_WIN = "WIN"
    HUMAN_LOSS = "LOSS"
    DRAW = "TIE"


@dataclass(frozen=True, slots=True)
class MoveResult:
    move: Move
    symbol: PlayerSymbol
    game_over: bool
    winning_line: tuple[Move, Move, Move] | None
    status_message: str


@dataclass(frozen=True, slots=True)
class MatchRecord:
    result: GameResult
    move_count: int
    player_name: str
    opponent_name: str


class GameController:
    """Turn-taking controller for one human player against one AI player.

    Mark A is the symbol that moves first (``first_symbol``), mark B the other one.
    The controller is the only mutator of its board and is not thread-safe.
    """

    def __init__(
        self,
        human_player: LocalPlayer | None = None,
        ai_player: AiPlayer | None = None,
        first_symbol: PlayerSymbol = "X",
    ) -> None:
        self._human = human_player if human_player is not None else LocalPlayer("X")
        self._ai = ai_player if ai_player is not None else AiPlayer(opponent(self._human.symbol), RandomStrategy())
        if self._human.symbol == self._ai.symbol:
            msg = f"Both players use symbol {self._human.symbol}."
            raise ValueError(msg)
        if first_symbol not in (self._human.symbol, self._ai.symbol):
            msg = f"First symbol {first_symbol!r} belongs to neither player."
            raise ValueError(msg)

        self._board = Board()
        self._first_symbol = first_symbol
        self._state = GameState.AWAITING_MARK_A
        self._status_message = ""
        self._move_applied_cbs: list[Callable[[MoveResult], None]] = []
        self._game_over_cbs: list[Callable[[MatchRecord], None]] = []
        self.reset()

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def human_player(self) -> LocalPlayer:
        return self._human

    @property
    def ai_player(self) -> AiPlayer:
        return self._ai

    @property
    def current_symbol(self) -> PlayerSymbol | None:
        """Symbol whose move is awaited, or None once the game is over."""
        match self._state:
            case GameState.AWAITING_MARK_A:
                return self._first_symbol
            case GameState.AWAITING_MARK_B:
                return opponent(self._first_symbol)
            case GameState.OVER:
                return None

    @property
    def is_game_over(self) -> bool:
        return self._state is GameState.OVER

    @property
    def is_human_turn(self) -> bool:
        return self.current_symbol == self._human.symbol

    @property
    def status_message(self) -> str:
        return self._status_message

    @property
    def move_count(self) -> int:
        return self._human.moves_made + self._ai.moves_made

    def add_move_applied_cb(self, callback: Callable[[MoveResult], None]) -> None:
        self._move_applied_cbs.append(callback)

    def add_game_over_cb(self, callback: Callable[[MatchRecord], None]) -> None:
        self._game_over_cbs.append(callback)

    def set_agent_strategy(self, strategy: MoveStrategy) -> None:
        self._ai.set_strategy(strategy)
        logger.debug("AI strategy set to %s", strategy.name)

    def reset(self) -> None:
        self._board.reset()
        self._human.reset_moves()
        self._ai.reset_moves()
        self._state = GameState.AWAITING_MARK_A
        self._status_message = self._turn_message()
        logger.debug("New game, %s moves first", self._first_symbol)

    def apply_move(self, position: Move | Position) -> MoveResult:
        """Apply the human player's move."""
        self._check_turn(self._human)
        move = position if isinstance(position, Move) else Move(*position)
        self._board.place(move, self._human.symbol)
        return self._finish_move(self._human, move)

    def apply_agent_move(self) -> MoveResult | None:
        """Ask the AI player for a move and apply it.

        Returns None if the AI found no move; the game is then over without a winner.
        """
        self._check_turn(self._ai)
        move = self._ai.choose_move(self._board.copy())
        if move is None:
            logger.warning("No moves available for %s, ending the game", self._ai.symbol)
            self._state = GameState.OVER
            self._status_message = "No moves available!"
            self._notify_game_over()
            return None

        try:
            self._board.place(move, self._ai.symbol)
        except InvalidMoveError as e:
            msg = f"Strategy {self._ai.strategy.name} chose an invalid move {move}: {e}"
            raise LogicError(msg) from e
        return self._finish_move(self._ai, move)

    def outcome(self) -> GameResult:
        if self._state is not GameState.OVER:
            return GameResult.IN_PROGRESS
        winner = self._board.get_winner()
        if winner == self._human.symbol:
            return GameResult.HUMAN_WIN
        if winner == self._ai.symbol:
            return GameResult.HUMAN_LOSS
        return GameResult.DRAW

    def winning_line(self) -> tuple[Move, Move, Move] | None:
        winner = self._board.get_winner()
        return self._board.winning_line(winner) if winner is not None else None

    def _check_turn(self, player: Player) -> None:
        if self._state is GameState.OVER:
            raise GameOverError("Game is already over.")
        if self.current_symbol != player.symbol:
            msg = "Not your turn!" if player.is_human else "Not the computer's turn!"
            raise WrongTurnError(msg)

    def _finish_move(self, player: Player, move: Move) -> MoveResult:
        player.increment_moves()
        logger.debug("%s played %s", player, move)

        winning_line = None
        match self._board.outcome():
            case Win(mark):
                self._state = GameState.OVER
                self._status_message = "You win!" if mark == self._human.symbol else "Computer wins!"
                winning_line = self._board.winning_line(mark)
            case Draw():
                self._state = GameState.OVER
                self._status_message = "It's a tie!"
            case InProgress():
                if self._state is GameState.AWAITING_MARK_A:
                    self._state = GameState.AWAITING_MARK_B
                else:
                    self._state = GameState.AWAITING_MARK_A
                self._status_message = self._turn_message()

        result = MoveResult(
            move=move,
            symbol=player.symbol,
            game_over=self.is_game_over,
            winning_line=winning_line,
            status_message=self._status_message,
        )
        for callback in list(self._move_applied_cbs):
            callback(result)
        if self.is_game_over:
            self._notify_game_over()
        return result

    def _notify_game_over(self) -> None:
        record = MatchRecord(
            result=self.outcome(),
            move_count=self.move_count,
            player_name=self._human.name,
            opponent_name=self._ai.name,
        )
        logger.info("Game over: %s in %d moves against %s", record.result, record.move_count, record.opponent_name)
        for callback in list(self._game_over_cbs):
            callback(record)

    def _turn_message(self) -> str:
        if self.is_human_turn:
            return f"Your move ({self._human.symbol})"
        return "Computer's turn..."
