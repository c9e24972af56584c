import logging
import os
from enum import Enum
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError

# Upper bound on cached transliteration results
MAX_CACHE_SIZE = 1000


class EditorMode(str, Enum):
    """How the word under the cursor is re-transliterated."""

    ROUNDTRIP = "roundtrip"  # forward(reverse(word)), per-keystroke path
    FORWARD = "forward"  # forward(word) only


class EngineConfig(BaseModel):
    """Transliteration engine configuration with validation."""

    cache_size: int = MAX_CACHE_SIZE
    preserve_case: bool = True
    ascii_harmony: bool = False

    @field_validator('cache_size')
    @classmethod
    def validate_cache_size(cls, v: int) -> int:
        if v < 1:
            raise ConfigurationError("cache_size must be positive")
        if v > MAX_CACHE_SIZE:
            raise ConfigurationError(f"cache_size too high (max {MAX_CACHE_SIZE})")
        return v


class EditorConfig(BaseModel):
    mode: EditorMode = EditorMode.ROUNDTRIP

    @field_validator('mode', mode='before')
    @classmethod
    def validate_mode(cls, v):
        if isinstance(v, EditorMode):
            return v
        try:
            return EditorMode(str(v).lower())
        except ValueError:
            choices = ", ".join(m.value for m in EditorMode)
            raise ConfigurationError(f"Unknown editor mode: {v} (expected one of {choices})")


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_bytes: int = 10485760
    backup_count: int = 5

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown log level: {v}")
        return level


class Config(BaseSettings):
    engine: EngineConfig = Field(default_factory=EngineConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BICHIG_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def from_toml(cls, path: str | Path) -> "Config":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = toml.load(f)
        except toml.TomlDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {e}", code="toml")

        return cls(**data)


_config: Optional[Config] = None


def load_config(path: Optional[str | Path] = None) -> Config:
    global _config
    if _config is None:
        if path is None:
            path = os.environ.get("BICHIG_CONFIG", "bichig.toml")

        config_path = Path(path)
        if config_path.exists():
            _config = Config.from_toml(config_path)
        else:
            _config = Config()

    return _config


def get_config() -> Config:
    if _config is None:
        return load_config()
    return _config


def get_loaded_config() -> Optional[Config]:
    """Return the configuration only if the host has already loaded it."""
    return _config


def reset_config() -> None:
    """Drop the loaded configuration (for testing)."""
    global _config
    _config = None
