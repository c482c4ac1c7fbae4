"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    vault_root: Path = Field(
        default=Path(),
        description="Directory containing the markdown notes and checkboard.yml",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    watch: bool = Field(
        default=True,
        description="Watch the vault for changes while the board is open",
    )

    model_config = {
        "env_prefix": "CHECKBOARD_",
    }
