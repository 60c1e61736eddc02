import logging
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from osenv.core.models import RuntimeMode


def find_dotenv(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a .env file.

    Returns the first `.env` path found, or ``None``.
    """
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        candidate = parent / ".env"
        if candidate.is_file():
            return candidate
    return None


class ProbeSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OSENV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    runtime_mode: RuntimeMode = Field(
        default=RuntimeMode.SCRIPTED,
        description="standalone (packaged artifact) or scripted (interpreted in place)",
    )
    script_path: Path | None = Field(
        default=None,
        description="Path of the running script (falls back to sys.argv[0])",
    )
    install_root: Path | None = Field(
        default=None,
        description="System install root searched for default executables "
        "(falls back to sys.base_prefix)",
    )
    home_dir: Path | None = Field(
        default=None,
        description="Explicit home directory (falls back to HOME / USERPROFILE)",
    )
    code_dir_variable: str = Field(
        default="OSENV_LIBS",
        min_length=1,
        description="Environment variable that overrides the code directory",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    @classmethod
    def load(cls) -> "ProbeSettings":
        """Load settings, reading the nearest .env above the current directory."""
        return cls(_env_file=find_dotenv() or ".env")  # type: ignore[call-arg]


def configure_logging(settings: ProbeSettings) -> None:
    """Apply ``settings.log_level`` to the ``osenv`` logger hierarchy."""
    logging.getLogger("osenv").setLevel(settings.log_level)
