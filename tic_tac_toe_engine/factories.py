"""Factory functions for creating game components.

Provides factories for creating:
- Move strategies from a selection command ("random", "smart", "minimax")
- Fully wired game controllers from GameSettings
"""

from dataclasses import dataclass
from typing import Literal

from tic_tac_toe_engine.board import PlayerSymbol, opponent
from tic_tac_toe_engine.game import GameController
from tic_tac_toe_engine.player_ai import AiPlayer
from tic_tac_toe_engine.player_local import LocalPlayer
from tic_tac_toe_engine.strategy import MinimaxStrategy, MoveStrategy, RandomStrategy, SmartStrategy

type StrategyKind = Literal["random", "smart", "minimax"]


@dataclass(frozen=True, slots=True)
class GameSettings:
    human_symbol: PlayerSymbol = "X"
    human_name: str = "You"
    strategy: StrategyKind = "random"
    seed: int | None = None
    first_symbol: PlayerSymbol = "X"


def create_strategy(kind: StrategyKind, seed: int | None = None) -> MoveStrategy:
    match kind:
        case "random":
            return RandomStrategy(seed)
        case "smart":
            return SmartStrategy()
        case "minimax":
            return MinimaxStrategy()
        case _:
            msg = f"Unknown strategy: {kind}. Choose from 'random', 'smart', 'minimax'."
            raise ValueError(msg)


def create_game(settings: GameSettings | None = None) -> GameController:
    settings = settings if settings is not None else GameSettings()
    human_player = LocalPlayer(settings.human_symbol, settings.human_name)
    ai_player = AiPlayer(opponent(settings.human_symbol), create_strategy(settings.strategy, settings.seed))
    return GameController(human_player, ai_player, first_symbol=settings.first_symbol)
