"""
Configuration module - centralized settings for the command bridge.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override in production, set environment variables:
        export OPENAI_API_KEY=sk-...
        export INVENTORY_PATH=/var/lib/homeai/devices.json
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    APP_NAME: str = "HomeAI Command Bridge"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # HTTP ingress; the accessory platform listens on 3000 by default
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # ---------------------------------------------------------------------------
    # COMPLETION SERVICE SETTINGS
    # ---------------------------------------------------------------------------
    # OPENAI_API_KEY: empty means the provider reports itself unavailable
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"

    # Request timeout in seconds, enforced by the OpenAI client
    AI_REQUEST_TIMEOUT: int = 30

    # Output budget and randomness for intent extraction.
    # Temperature stays at 0 so the same command maps to the same intent.
    INTENT_MAX_TOKENS: int = 150
    INTENT_TEMPERATURE: float = 0.0

    # ---------------------------------------------------------------------------
    # INVENTORY & DISPATCH SETTINGS
    # ---------------------------------------------------------------------------
    # INVENTORY_PATH: JSON device feed loaded at startup (empty = start empty)
    INVENTORY_PATH: str = ""

    # STRICT_SERVICE_MATCH: only accept a service whose name equals the
    # device name. When False, fall back to the first controllable service.
    STRICT_SERVICE_MATCH: bool = False

    # Plausible set-point range used when a temperature characteristic
    # carries no bounds of its own. Wide enough for Celsius and Fahrenheit.
    TARGET_TEMPERATURE_MIN: int = 0
    TARGET_TEMPERATURE_MAX: int = 100


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from homeai.core.config import settings
settings = Settings()
