import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from connect4.models.enums import PlayerType, Side

load_dotenv()

DEFAULT_CONFIG_PATH = "config/game.yaml"

# Environment variable -> config key
ENV_OVERRIDES = {
    "C4_PLAYER_1": "player_1",
    "C4_PLAYER_2": "player_2",
    "C4_LOG_LEVEL": "log_level",
}


class GameConfig(BaseModel):
    player_1: PlayerType = PlayerType.HUMAN
    player_2: PlayerType = PlayerType.AI
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def player_type(self, side: Side) -> PlayerType:
        return self.player_1 if side == Side.FIRST else self.player_2


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    values = dict(data.get("players") or {})
    if "log_level" in data:
        values["log_level"] = data["log_level"]
    return values


def load_config(path: Optional[str] = None) -> GameConfig:
    """
    Loads config/game.yaml (defaults if missing), then applies
    C4_* environment overrides (.env is read on import).
    """
    values = _read_yaml(Path(path or os.getenv("C4_CONFIG", DEFAULT_CONFIG_PATH)))
    for env_key, field in ENV_OVERRIDES.items():
        if (env_val := os.getenv(env_key)) is not None:
            values[field] = env_val
    return GameConfig(**values)
