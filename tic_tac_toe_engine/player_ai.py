from tic_tac_toe_engine.board import Board, Move, PlayerSymbol
from tic_tac_toe_engine.player import Player
from tic_tac_toe_engine.strategy import MoveStrategy


class AiPlayer(Player):
    def __init__(self, symbol: PlayerSymbol, strategy: MoveStrategy) -> None:
        super().__init__(symbol, self._display_name(strategy))
        self._strategy = strategy

    @property
    def is_human(self) -> bool:
        return False

    @property
    def strategy(self) -> MoveStrategy:
        return self._strategy

    def set_strategy(self, strategy: MoveStrategy) -> None:
        self._strategy = strategy
        self._name = self._display_name(strategy)

    def choose_move(self, board: Board) -> Move | None:
        return self._strategy.choose(board, self._symbol)

    @staticmethod
    def _display_name(strategy: MoveStrategy) -> str:
        return f"Computer ({strategy.name})"
