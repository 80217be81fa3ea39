from .board import Board, Card, Position
from .enums import BOARD_SIZE, MAX_WILD_DISTANCE, CardType, Direction, GameStatus
from .results import Failure, Result
from .state import CollapseRecord, GameState, Move, Player, WildMovementState

__all__ = [
    "BOARD_SIZE",
    "MAX_WILD_DISTANCE",
    "Board",
    "Card",
    "CardType",
    "CollapseRecord",
    "Direction",
    "Failure",
    "GameState",
    "GameStatus",
    "Move",
    "Player",
    "Position",
    "Result",
    "WildMovementState",
]
