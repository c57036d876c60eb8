from tic_tac_toe_engine.board import Board, Move, PlayerSymbol
from tic_tac_toe_engine.player import Player


class LocalPlayer(Player):
    def __init__(self, symbol: PlayerSymbol, name: str = "You") -> None:
        super().__init__(symbol, name)

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, board: Board) -> Move | None:  # noqa: ARG002
        # Human moves are supplied through GameController.apply_move().
        return None
