"""Configuration management for the docs parser.

Loads environment variables using pydantic-settings for type-safe configuration.
Tokenizer options and the log level are defined here.
"""

import os
from functools import lru_cache
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_LOADED = False
_ENV_LOCK = Lock()

SUPPORTED_PRESETS = ("commonmark", "default", "zero")


def _resolve_env_file() -> str | None:
    """Locate the .env file regardless of the current working directory.

    Preference order:
        1. DOCS_PARSER_ENV_FILE environment variable (explicit override)
        2. Current working directory (common for local runs)
        3. Ancestors of this file
    """
    override = os.getenv("DOCS_PARSER_ENV_FILE")
    if override:
        override_path = Path(override).expanduser()
        if override_path.is_file():
            return str(override_path)

    cwd_candidate = Path.cwd() / ".env"
    if cwd_candidate.is_file():
        return str(cwd_candidate)

    for parent in Path(__file__).resolve().parents:
        candidate = parent / ".env"
        if candidate.is_file():
            return str(candidate)

    return None


_DEFAULT_ENV_FILE = _resolve_env_file()


def ensure_env_loaded() -> None:
    """Load environment variables from disk exactly once."""
    global _ENV_LOADED

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        env_path = _DEFAULT_ENV_FILE or _resolve_env_file()
        if env_path:
            load_dotenv(env_path, override=False)

        _ENV_LOADED = True


ensure_env_loaded()


class DocsParserConfig(BaseSettings):
    """Main configuration class for the docs parser.

    Values come from environment variables (case-insensitive) or the .env file.
    """

    model_config = SettingsConfigDict(
        env_file=_DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== Tokenizer ==========
    markdown_preset: str = "commonmark"
    enable_strikethrough: bool = True

    # ========== Observability ==========
    log_level: str = "INFO"

    @field_validator("markdown_preset")
    @classmethod
    def _validate_markdown_preset(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_PRESETS:
            raise ValueError(
                f"markdown_preset must be one of {', '.join(SUPPORTED_PRESETS)}, got '{value}'"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log_level '{value}'")
        return value


@lru_cache(maxsize=1)
def get_config() -> DocsParserConfig:
    """Return cached Settings instance (process-local).

    Returns:
        DocsParserConfig: The configuration instance loaded from environment variables.
    """
    return DocsParserConfig()


__all__ = ["DocsParserConfig", "SUPPORTED_PRESETS", "ensure_env_loaded", "get_config"]
