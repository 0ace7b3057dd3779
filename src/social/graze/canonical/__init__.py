"""
Canonical - Versioned Canonical Resolution

This package implements a fallback policy for resolving versioned canonical identifiers
(for example ``StructureDefinition/Medication|4.0.1``) against an existing resource resolver.
It does not store or index resources itself. It decorates a resolver supplied by the caller
and retries a missed versioned lookup with the version stripped.

Key Components:
- identifier: Canonical identifier parsing and prefix matching
- resolve: The resolver contract and the versioned fallback resolver
- config: Environment-backed settings and resolver construction
- observability: Logging configuration and error reporting

Resolution Flow:
1. Split the identifier on the first ``|`` into base and version
2. Skip identifiers without a base or outside the configured prefix families
3. Look up the exact versioned identifier
4. On a miss, look up the base identifier and log a warning if that succeeds
"""

from social.graze.canonical.identifier import (
    DELIMITER,
    HL7_STRUCTURE_DEFINITION_PREFIX,
    STRUCTURE_DEFINITION_PREFIX,
    ParsedCanonical,
    matches_prefix,
    parse_canonical,
)
from social.graze.canonical.resolve.fallback import VersionedFallbackResolver
from social.graze.canonical.resolve.support import LoggerLike, ResourceResolver

__all__ = [
    "DELIMITER",
    "HL7_STRUCTURE_DEFINITION_PREFIX",
    "STRUCTURE_DEFINITION_PREFIX",
    "LoggerLike",
    "ParsedCanonical",
    "ResourceResolver",
    "VersionedFallbackResolver",
    "matches_prefix",
    "parse_canonical",
]
