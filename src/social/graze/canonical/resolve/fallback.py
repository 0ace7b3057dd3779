"""Versioned canonical fallback resolution.

Wraps a ResourceResolver so that a versioned canonical identifier which the wrapped resolver
does not know is retried without its version. Exact matches always win.
"""

from typing import Any, Callable, FrozenSet, Iterable, Optional, Type, TypeVar
import logging

from social.graze.canonical.identifier import (
    STRUCTURE_DEFINITION_PREFIX,
    matches_prefix,
    parse_canonical,
)
from social.graze.canonical.resolve.support import LoggerLike, ResourceResolver

T = TypeVar("T")

DEFAULT_PREFIXES: FrozenSet[str] = frozenset({STRUCTURE_DEFINITION_PREFIX})


class VersionedFallbackResolver:
    """Resolver decorator that falls back to unversioned canonical identifiers.

    A lookup for ``base|version`` is first passed to the inner resolver unchanged. If the inner
    resolver returns None, the lookup is repeated with ``base`` alone and a warning is logged when
    that second attempt finds something. Identifiers without a version, with an empty base, or
    whose base matches none of the configured prefixes are not handled and resolve to None
    without consulting the inner resolver.

    The resolver holds no mutable state, so it is safe to share between callers as long as the
    inner resolver is.
    """

    def __init__(
        self,
        inner: ResourceResolver,
        prefixes: Optional[Iterable[str]] = None,
        logger: Optional[LoggerLike] = None,
    ) -> None:
        """
        Args:
            inner: Resolver to delegate lookups to
            prefixes: Identifier families eligible for fallback. None selects the
                StructureDefinition family, an empty collection matches every identifier
                and a single string is taken as one prefix.
            logger: Sink for the fallback warning, defaults to this module's logger
        """
        self._inner = inner
        if prefixes is None:
            self._prefixes: FrozenSet[str] = DEFAULT_PREFIXES
        elif isinstance(prefixes, str):
            self._prefixes = frozenset({prefixes})
        else:
            self._prefixes = frozenset(prefixes)
        self._logger: LoggerLike = logger or logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def inner(self) -> ResourceResolver:
        return self._inner

    @property
    def prefixes(self) -> FrozenSet[str]:
        return self._prefixes

    def fetch_resource(self, resource_type: Type[T], identifier: str) -> Optional[T]:
        """Resolve a resource of the expected type by canonical identifier.

        Args:
            resource_type: Expected resource type, passed through to the inner resolver
            identifier: Versioned canonical identifier

        Returns:
            The resource for the exact or the unversioned identifier, None if neither resolves
        """
        return self._fetch_with_fallback(
            identifier,
            lambda candidate: self._inner.fetch_resource(resource_type, candidate),
        )

    def fetch_structure_definition(self, identifier: str) -> Optional[Any]:
        """Resolve a structure definition by canonical identifier.

        Args:
            identifier: Versioned canonical identifier

        Returns:
            The structure definition for the exact or the unversioned identifier, None if
            neither resolves
        """
        return self._fetch_with_fallback(
            identifier, self._inner.fetch_structure_definition
        )

    def _fetch_with_fallback(
        self, identifier: str, fetcher: Callable[[str], Optional[T]]
    ) -> Optional[T]:
        parsed = parse_canonical(identifier)
        if parsed is None:
            return None

        if not matches_prefix(parsed.base, self._prefixes):
            return None

        result = fetcher(identifier)
        if result is not None:
            return result

        result = fetcher(parsed.base)
        if result is not None:
            self._logger.warning(
                "Requested versioned canonical '%s' not found, falling back to non-versioned '%s'",
                identifier,
                parsed.base,
            )
        return result

    def __repr__(self) -> str:
        return f"{self.name}(inner={self._inner!r}, prefixes={sorted(self._prefixes)!r})"
