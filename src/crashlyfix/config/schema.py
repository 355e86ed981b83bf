"""Pydantic models for configuration schema."""

from typing import Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TraceConfig(BaseModel):
    """How the JavaScript trace is located inside a crash report."""

    marker: str = "JavascriptException"
    block_separator: str = "\n\n"

    @field_validator("marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Reject an empty marker, which would match any block."""
        if not v:
            raise ValueError("Trace marker must not be empty")
        return v


class FormatConfig(BaseModel):
    """Output formatting configuration."""

    shorten: bool = True
    excluded_prefix_marker: str = "node_modules"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"


class CrashlyfixConfig(BaseSettings):
    """Root configuration for crashlyfix."""

    trace: TraceConfig = TraceConfig()
    format: FormatConfig = FormatConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="CRASHLYFIX_",
        env_nested_delimiter="__",
    )
