"""
Centralized configuration with environment variable overrides.

All business constants (staffing ratios, validation limits, messaging
link settings) live here. Components receive the config through their
constructors; nothing reads it as ambient global state.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from cotizador.logging_context import install_quote_id_filter

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] [%(quote_id)s] %(levelname)s: %(message)s"


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class StaffingConfig:
    """Staffing ratios used by the calculators."""

    tables_per_waiter: int = _safe_int("TABLES_PER_WAITER", "4")


@dataclass(frozen=True)
class ValidationConfig:
    """Limits applied to the quote form."""

    name_min_length: int = _safe_int("NAME_MIN_LENGTH", "3")
    phone_length: int = _safe_int("PHONE_LENGTH", "10")


@dataclass(frozen=True)
class MessagingConfig:
    """Messaging-link settings and the fixed message framing."""

    whatsapp_number: str = os.getenv("WHATSAPP_NUMBER", "5219981447597")
    whatsapp_base_url: str = os.getenv("WHATSAPP_BASE_URL", "https://wa.me/")
    greeting: str = os.getenv("MESSAGE_GREETING", "Hola, me gustaría cotizar un evento:")
    closing: str = os.getenv(
        "MESSAGE_CLOSING", "Quedo pendiente de información y disponibilidad. ✨"
    )


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    staffing: StaffingConfig = field(default_factory=StaffingConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    messaging: MessagingConfig = field(default_factory=MessagingConfig)
    business_name: str = os.getenv("BUSINESS_NAME", "Meseros Yucatán")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.staffing.tables_per_waiter < 1:
        raise ValueError(
            f"TABLES_PER_WAITER must be >= 1, got {config.staffing.tables_per_waiter}"
        )
    if config.validation.name_min_length < 1:
        raise ValueError(
            f"NAME_MIN_LENGTH must be >= 1, got {config.validation.name_min_length}"
        )
    if config.validation.phone_length < 1:
        raise ValueError(
            f"PHONE_LENGTH must be >= 1, got {config.validation.phone_length}"
        )
    if not config.messaging.whatsapp_number.isdigit():
        raise ValueError(
            "WHATSAPP_NUMBER must contain digits only, "
            f"got {config.messaging.whatsapp_number!r}"
        )
    if not config.messaging.whatsapp_base_url.startswith(("http://", "https://")):
        raise ValueError(
            "WHATSAPP_BASE_URL must be an http(s) URL, "
            f"got {config.messaging.whatsapp_base_url!r}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for handler in logging.getLogger().handlers:
        install_quote_id_filter(handler)
    logger.info("Configuration loaded for '%s'", config.business_name)
    return config
