from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class MoveRecord(BaseModel):
    model_config = ConfigDict(extra='ignore')

    side: int
    column: int
    row: int
    duration: Optional[float] = 0.0

    # Only filled in for engine moves
    score: Optional[float] = None
    nodes_explored: Optional[int] = None


class GameSnapshot(BaseModel):
    board: List[List[int]]
    current_side: int
    status: str
    winner: Optional[int] = None
    direction: Optional[str] = None
    history: List[MoveRecord]
    player_1_type: str
    player_2_type: str
