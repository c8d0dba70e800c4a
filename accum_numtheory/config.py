"""
Number Theory Configuration

Environment-based configuration for the accumulator number-theory engine.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings from environment variables (prefix ACCUM_)."""

    model_config = SettingsConfigDict(
        env_prefix="ACCUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    log_format: str = Field(
        default="json",
        description="Log format: json or text"
    )

    # Primality testing
    max_discriminant_attempts: int = Field(
        default=1000,
        gt=0,
        description="Upper bound on Lucas discriminant candidates tried per number"
    )

    # Hash-to-prime
    hash_to_prime_max_attempts: int = Field(
        default=100_000,
        gt=0,
        description="Odd candidates tried before hash_to_prime gives up"
    )

    # Group parameters
    rsa_modulus_hex: Optional[str] = Field(
        default=None,
        description="Hex RSA modulus overriding the built-in 2048-bit demo modulus"
    )

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        if value.lower() not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value.lower()

    @field_validator("rsa_modulus_hex")
    @classmethod
    def _check_modulus_hex(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if not value.startswith("0x"):
            raise ValueError("rsa_modulus_hex must start with 0x")
        int(value, 16)
        return value


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get engine settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() rereads the environment."""
    global _settings
    _settings = None
