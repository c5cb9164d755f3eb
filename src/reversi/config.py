from __future__ import annotations

import logging
import os
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator
from typing import Optional

from reversi.othello.strategy import TieBreak

load_dotenv()


class Settings(BaseModel):
    seed: Optional[int] = None
    tie_break: TieBreak = TieBreak.COIN_FLIP
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f'Unknown log level "{value}"')
        return value

    @classmethod
    def from_env(cls) -> Settings:
        values: dict[str, str] = {}

        for key, env_var in [
            ("seed", "REVERSI_SEED"),
            ("tie_break", "REVERSI_TIE_BREAK"),
            ("log_level", "REVERSI_LOG_LEVEL"),
        ]:
            if env_var in os.environ:
                values[key] = os.environ[env_var]

        return cls.model_validate(values)
