from abc import ABC, abstractmethod

from tic_tac_toe_engine.board import Board, Move, PlayerSymbol


class Player(ABC):
    def __init__(self, symbol: PlayerSymbol, name: str) -> None:
        self._symbol = symbol
        self._name = name
        self._moves_made = 0

    @property
    def symbol(self) -> PlayerSymbol:
        return self._symbol

    @property
    def name(self) -> str:
        return self._name

    @property
    def moves_made(self) -> int:
        return self._moves_made

    @property
    @abstractmethod
    def is_human(self) -> bool:
        pass

    def increment_moves(self) -> None:
        self._moves_made += 1

    def reset_moves(self) -> None:
        self._moves_made = 0

    @abstractmethod
    def choose_move(self, board: Board) -> Move | None:
        pass

    def __str__(self) -> str:
        return f"{self._name} ({self._symbol})"
