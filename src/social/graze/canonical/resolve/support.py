from abc import abstractmethod
from typing import Any, Optional, Protocol, Type, TypeVar, Union
import logging

T = TypeVar("T")


class ResourceResolver(Protocol):
    """ResourceResolver defines which lookups a resolver object should have.

    Both lookups return None when the resolver has no resource for the identifier.
    Errors are reserved for actual failures, never for a simple miss.
    """

    @abstractmethod
    def fetch_resource(self, resource_type: Type[T], identifier: str) -> Optional[T]:
        pass

    @abstractmethod
    def fetch_structure_definition(self, identifier: str) -> Optional[Any]:
        pass


class _LoggerStub(Protocol):
    """_LoggerStub defines which methods logger object should have."""

    @abstractmethod
    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass


LoggerLike = Union[_LoggerStub, logging.Logger]
