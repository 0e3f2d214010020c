"""Configuration management for thread-grep."""

import codecs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="THREAD_GREP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input decoding
    input_encoding: str = Field(
        default="utf-8",
        description="Codec used to decode standard input"
    )
    decode_errors: str = Field(
        default="surrogateescape",
        description="Codec error handler for undecodable input (surrogateescape, strict, replace, ...). Also used when writing the report, so undecodable bytes are written back unchanged"
    )

    # Command defaults
    ignore_case: bool = Field(
        default=False,
        description="Match patterns case-insensitively unless overridden with -i"
    )
    show_stats: bool = Field(
        default=False,
        description="Print run statistics to stderr after the report"
    )

    @field_validator("input_encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    @field_validator("decode_errors")
    @classmethod
    def _check_error_handler(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as e:
            raise ValueError(f"unknown codec error handler: {value}") from e
        return value

    def decode(self, data: bytes) -> str:
        """Decode raw input with the configured codec."""
        return data.decode(self.input_encoding, self.decode_errors)

    def encode(self, text: str) -> bytes:
        """Encode report text with the codec used for input."""
        return text.encode(self.input_encoding, self.decode_errors)


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()

