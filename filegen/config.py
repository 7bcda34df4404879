import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the option resolver, overridable via FILEGEN_* env vars."""

    model_config = SettingsConfigDict(env_prefix="FILEGEN_", extra="ignore")

    out_dir: str = "dist"
    count: int = 20
    min_len: int = 50
    max_len: int = 500
    max_depth: int = 3

    log_level: str = "WARNING"


def load_settings(env_file: Path | None = None) -> Settings:
    if env_file is not None and env_file.is_file():
        load_dotenv(env_file, override=True)
    return Settings()


class GeneratorConfig(BaseModel):
    """Resolved options for one run. Values are clamped, never rejected."""

    model_config = ConfigDict(frozen=True)

    out_dir: Path
    count: int
    min_len: int
    max_len: int
    max_depth: int

    @field_validator("out_dir", mode="before")
    @classmethod
    def _absolute_out_dir(cls, value):
        # abspath, not resolve(): symlinks in the base are kept as given
        return Path(os.path.abspath(os.fspath(value)))

    @field_validator("count", "min_len")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        return max(0, value)

    @field_validator("max_len")
    @classmethod
    def _at_least_min(cls, value: int, info: ValidationInfo) -> int:
        min_len = info.data.get("min_len", 0)
        return max(min_len, value)

    @field_validator("max_depth")
    @classmethod
    def _at_least_one(cls, value: int) -> int:
        return max(1, value)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeneratorConfig":
        return cls(
            out_dir=settings.out_dir,
            count=settings.count,
            min_len=settings.min_len,
            max_len=settings.max_len,
            max_depth=settings.max_depth,
        )
