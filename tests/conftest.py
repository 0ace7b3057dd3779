"""
Shared test configuration and fixtures for canonical resolution tests.

Provides a dictionary-backed resolver standing in for a real resolver chain, along with
mock inner resolvers and loggers used to observe delegation.
"""

from typing import Any, Dict, Optional
from unittest.mock import Mock
import pytest

from social.graze.canonical.resolve.support import LoggerLike


class Resource:
    """Minimal stand-in for a conformance resource."""

    def __init__(self, url: str) -> None:
        self.url = url

    def __repr__(self) -> str:
        return f"Resource({self.url!r})"


class StructureDefinition(Resource):
    pass


class DictResolver:
    """Resolver backed by a dictionary of identifier to resource.

    Records every identifier it is asked for so tests can check delegation order.
    """

    def __init__(self, resources: Optional[Dict[str, Any]] = None) -> None:
        self.resources = dict(resources or {})
        self.requests: list[tuple[str, str]] = []

    def fetch_resource(self, resource_type, identifier: str):
        self.requests.append(("fetch_resource", identifier))
        resource = self.resources.get(identifier)
        if resource is not None and not isinstance(resource, resource_type):
            return None
        return resource

    def fetch_structure_definition(self, identifier: str):
        self.requests.append(("fetch_structure_definition", identifier))
        return self.resources.get(identifier)


@pytest.fixture
def medication() -> StructureDefinition:
    return StructureDefinition("StructureDefinition/Medication")


@pytest.fixture
def mock_inner() -> Mock:
    """Inner resolver that misses every lookup unless a test says otherwise."""
    inner = Mock()
    inner.fetch_resource.return_value = None
    inner.fetch_structure_definition.return_value = None
    return inner


@pytest.fixture
def mock_logger() -> LoggerLike:
    return Mock()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings environment variables so Settings sees defaults."""
    for name in (
        "DEBUG",
        "CANONICAL_PREFIXES",
        "LOGGING_CONFIG_FILE",
        "SENTRY_DSN",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def dict_resolver():
    """Factory for DictResolver instances."""
    return DictResolver


@pytest.fixture
def resource_types():
    """Resource classes understood by DictResolver."""
    return Resource, StructureDefinition
