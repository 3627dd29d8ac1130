from enum import IntEnum, StrEnum


class Side(IntEnum):
    FIRST = 1
    SECOND = 2

    @property
    def opponent(self) -> "Side":
        return Side.SECOND if self is Side.FIRST else Side.FIRST


class Cell(IntEnum):
    # Values line up with Side so a cell compares equal to its owner
    EMPTY = 0
    FIRST = 1
    SECOND = 2


class GameStatus(StrEnum):
    IN_PROGRESS = "IN_PROGRESS"
    WIN = "WIN"
    DRAW = "DRAW"


class WinDirection(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    MAJOR_DIAGONAL = "major diagonal"
    MINOR_DIAGONAL = "minor diagonal"


class PlayerType(StrEnum):
    HUMAN = "human"
    AI = "ai"
