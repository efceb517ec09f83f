"""
Settings Module

Reads runtime configuration from the environment (and a local .env file).
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from esport_faker.domain.entities.entities import DEFAULT_LOCALE, Locale

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration.
    
    Attributes:
        default_locale: Locale used when a requested locale has no data
        seed: Seed for the shared random source (None = non-deterministic)
        log_level: Root log level name
        log_timezone: Timezone name used for log timestamps
    """
    default_locale: Locale = DEFAULT_LOCALE
    seed: Optional[int] = None
    log_level: str = "INFO"
    log_timezone: str = "UTC"


def _parse_locale(raw: Optional[str]) -> Locale:
    if not raw:
        return DEFAULT_LOCALE
    try:
        return Locale(raw)
    except ValueError:
        logger.warning(f"Unknown ESPORT_FAKER_DEFAULT_LOCALE '{raw}', using {DEFAULT_LOCALE.value}")
        return DEFAULT_LOCALE


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer ESPORT_FAKER_SEED '{raw}'")
        return None


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        default_locale=_parse_locale(os.getenv("ESPORT_FAKER_DEFAULT_LOCALE")),
        seed=_parse_seed(os.getenv("ESPORT_FAKER_SEED")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_timezone=os.getenv("LOG_TIMEZONE", "UTC"),
    )
