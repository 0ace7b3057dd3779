"""
Configuration Module for Canonical Resolution

This module defines the settings used to build a versioned fallback resolver from the
environment, using Pydantic for settings validation.

Constructor arguments remain the primary way to configure a VersionedFallbackResolver. The
Settings class exists for deployments that wire the resolver up from environment variables,
and it also carries the logging and error reporting options read by the observability module.

Key configuration areas include:
- Identifier families eligible for fallback
- Logging configuration
- Error reporting
"""

from typing import Annotated, List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from social.graze.canonical.resolve.fallback import VersionedFallbackResolver
from social.graze.canonical.resolve.support import LoggerLike, ResourceResolver


class Settings(BaseSettings):
    """
    Application settings for canonical resolution.

    Values are loaded from environment variables with defaults that match the behavior of a
    VersionedFallbackResolver constructed without arguments.
    """

    debug: bool = False
    """
    Enable debug logging when no logging configuration file is given.
    Set with DEBUG=true environment variable.
    """

    canonical_prefixes: Annotated[Optional[List[str]], NoDecode] = None
    """
    Identifier prefixes eligible for version fallback.
    Set with CANONICAL_PREFIXES environment variable as comma-separated values.
    Unset keeps the default StructureDefinition family, an empty value matches every identifier.
    """

    logging_config_file: Optional[str] = None
    """
    Path to a JSON document passed to logging.config.dictConfig.
    Set with LOGGING_CONFIG_FILE environment variable.
    """

    sentry_dsn: Optional[str] = None
    """
    Sentry DSN for error reporting. Optional, no error reporting if not set.
    Set with SENTRY_DSN environment variable.
    """

    @field_validator("canonical_prefixes", mode="before")
    @classmethod
    def decode_canonical_prefixes(cls, v) -> Optional[List[str]]:
        """
        Validate and process the canonical_prefixes setting.

        This validator accepts either:
        - None, keeping the default prefix set
        - A comma-separated string, as read from the environment
        - A list of prefixes (for programmatic configuration)

        Raises:
            ValueError: If the input is none of the above, or a non-empty string holding
                only separators and whitespace
        """
        if v is None:
            return None
        elif isinstance(v, str):
            if v == "":
                return []
            prefixes = [prefix.strip() for prefix in v.split(",") if prefix.strip()]
            if len(prefixes) == 0:
                raise ValueError(
                    "canonical_prefixes contains no prefixes, leave it empty to match every identifier"
                )
            return prefixes
        elif isinstance(v, (list, tuple, set, frozenset)):
            return list(v)
        raise ValueError(
            "canonical_prefixes must be a comma-separated string or a list of prefixes"
        )


def create_fallback_resolver(
    inner: ResourceResolver,
    settings: Optional[Settings] = None,
    logger: Optional[LoggerLike] = None,
) -> VersionedFallbackResolver:
    """Build a VersionedFallbackResolver around inner using settings.

    Args:
        inner: Resolver to wrap
        settings: Settings to read prefixes from, loaded from the environment if None
        logger: Sink for fallback warnings, passed to the resolver

    Returns:
        Configured VersionedFallbackResolver
    """
    if settings is None:
        settings = Settings()

    return VersionedFallbackResolver(
        inner, prefixes=settings.canonical_prefixes, logger=logger
    )
