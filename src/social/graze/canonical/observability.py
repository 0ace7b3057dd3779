"""Logging and error reporting setup.

Configures standard library logging from a dictConfig file or sensible defaults, and enables
Sentry error reporting when a DSN is configured. Fallback warnings emitted by resolvers are
recorded as Sentry breadcrumbs.
"""

from typing import Optional
import json
import logging
from logging.config import dictConfig
import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from social.graze.canonical.config import Settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging_config_file = settings.logging_config_file or ""

    if len(logging_config_file) > 0:
        with open(logging_config_file) as fl:
            dictConfig(json.load(fl))
        return

    logging.basicConfig()
    logging.getLogger().setLevel(logging.DEBUG if settings.debug else logging.INFO)


def init_sentry(settings: Settings) -> bool:
    """Initialize Sentry error reporting.

    Args:
        settings: Settings carrying the optional Sentry DSN

    Returns:
        True if Sentry was initialized, False if no DSN is configured
    """
    if not settings.sentry_dsn:
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        integrations=[
            LoggingIntegration(level=logging.WARNING, event_level=logging.ERROR)
        ],
    )
    logger.info("Sentry error reporting enabled")
    return True


def configure_observability(settings: Optional[Settings] = None) -> Settings:
    if settings is None:
        settings = Settings()

    configure_logging(settings)
    init_sentry(settings)
    return settings
