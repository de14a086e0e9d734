from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the automata terminal UI.

    Values are loaded from environment variables and `.env`.

    Notes:
    - The timer duration and tick granularity are whole seconds or fractions;
      the timer screen keeps them as integer milliseconds.
    - Logs go to a file because the full-screen UI owns the terminal.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Timer screen
    AUTOMATA_TIMER_SECONDS: float = Field(default=60.0, gt=0)
    AUTOMATA_TICK_SECONDS: float = Field(default=1.0, gt=0)

    # What happens to a sub-screen's progress when it is entered again.
    # "reset" re-initializes it, "resume" keeps its previous state.
    AUTOMATA_REENTRY_POLICY: Literal["reset", "resume"] = Field(default="reset")

    # Rendering
    AUTOMATA_COLOR: bool = Field(default=True)

    # Logging (diagnostic; rotated daily)
    AUTOMATA_LOG_DIR: Path = Field(default=Path("_logs"))
    AUTOMATA_LOG_LEVEL: str = Field(default="INFO")
    AUTOMATA_LOG_BACKUP_COUNT: int = Field(default=14, ge=0)


def load_settings() -> Settings:
    return Settings()
