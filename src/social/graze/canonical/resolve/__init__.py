"""
Resource Resolution

This package defines the resolver contract consumed and exposed by this project, and the
fallback resolver that decorates it.

Key Components:
- support.py: ResourceResolver and LoggerLike protocols
- fallback.py: VersionedFallbackResolver implementation

Any object providing ``fetch_resource`` and ``fetch_structure_definition`` can be wrapped,
whether it is an in-memory map, a remote client or a composite chain of resolvers. A resolver
that has nothing for an identifier returns None so the caller can move on to the next one.
"""
