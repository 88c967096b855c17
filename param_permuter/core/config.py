"""
Configuration management for Param Permuter using Pydantic settings.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError, ErrorCode

DEFAULT_CHUNK = 15


class GenerationStrategy(str, Enum):
    """How existing and new query parameters are merged."""
    NORMAL = "normal"
    COMBINE = "combine"
    IGNORE = "ignore"


# Strategies always run (and their output is concatenated) in this order.
STRATEGY_ORDER = (
    GenerationStrategy.NORMAL,
    GenerationStrategy.COMBINE,
    GenerationStrategy.IGNORE,
)


class ValueStrategy(str, Enum):
    """How the combine strategy treats the value of the parameter it modifies."""
    REPLACE = "replace"
    SUFFIX = "suffix"


class GenerationConfig(BaseModel):
    """Resolved configuration for a single generation run."""

    chunk: int = Field(default=DEFAULT_CHUNK, ge=1, description="Parameters per generated URL")
    values: List[str] = Field(min_length=1, description="Substitution values")
    value_strategy: ValueStrategy = Field(default=ValueStrategy.SUFFIX)
    double_encode: bool = Field(default=False)
    strategies: List[GenerationStrategy] = Field(min_length=1)
    skip_invalid: bool = Field(default=False, description="Skip invalid URLs instead of aborting")

    model_config = ConfigDict(frozen=True)

    @field_validator("strategies", mode="before")
    @classmethod
    def normalize_strategies(cls, v):
        """Accept comma separated entries and return them in run order."""
        if isinstance(v, str):
            v = [v]

        requested = set()
        for entry in v:
            if isinstance(entry, GenerationStrategy):
                requested.add(entry)
                continue
            for name in str(entry).split(","):
                name = name.strip().lower()
                if not name:
                    continue
                try:
                    requested.add(GenerationStrategy(name))
                except ValueError:
                    valid = ", ".join(s.value for s in STRATEGY_ORDER)
                    raise ValueError(f"Generation strategy {name!r} is not valid (choose from: {valid})") from None

        return [strategy for strategy in STRATEGY_ORDER if strategy in requested]

    @classmethod
    def build(cls, **kwargs) -> "GenerationConfig":
        """Validate keyword arguments, raising ConfigurationError on failure."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(problems, ErrorCode.CONFIG_INVALID, errors=e.errors()) from e


class Settings(BaseSettings):
    """Environment driven defaults for Param Permuter."""

    app_name: str = Field(default="Param Permuter")
    version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    chunk: int = Field(default=DEFAULT_CHUNK, ge=1)
    value_strategy: ValueStrategy = Field(default=ValueStrategy.SUFFIX)
    skip_invalid: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="PARAM_PERMUTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


_settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload the settings from environment variables."""
    global _settings
    _settings = Settings()
    return _settings
