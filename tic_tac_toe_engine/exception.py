class GameError(Exception):
    pass


class LogicError(GameError):
    pass


class InvalidMoveError(GameError):
    pass


class OutOfBoundsError(InvalidMoveError, IndexError):
    pass


class CellOccupiedError(InvalidMoveError):
    pass


class InvalidMarkError(InvalidMoveError):
    pass


class WrongTurnError(InvalidMoveError):
    pass


class GameOverError(InvalidMoveError):
    pass
