"""Canonical identifier parsing utilities.

Splits versioned canonical identifiers (``base|version``) and checks bases against
identifier family prefixes. The version part is carried through as-is and never validated.
"""

from typing import Iterable, Optional
from pydantic import BaseModel

DELIMITER = "|"

STRUCTURE_DEFINITION_PREFIX = "StructureDefinition/"
HL7_STRUCTURE_DEFINITION_PREFIX = "http://hl7.org/fhir/StructureDefinition/"


class ParsedCanonical(BaseModel):
    """Versioned canonical identifier split into its parts.

    Contains the base identifier and the raw version string following the delimiter.
    """

    base: str
    version: str


def parse_canonical(identifier: str) -> Optional[ParsedCanonical]:
    """Split a canonical identifier on its first version delimiter.

    Args:
        identifier: Canonical identifier, optionally suffixed with ``|version``

    Returns:
        ParsedCanonical if the identifier carries a version, None if the delimiter
        is missing or the base is empty
    """
    index = identifier.find(DELIMITER)
    if index <= 0:
        return None
    return ParsedCanonical(
        base=identifier[:index],
        version=identifier[index + len(DELIMITER) :],
    )


def matches_prefix(base: str, prefixes: Iterable[str]) -> bool:
    """Check if a base identifier belongs to one of the prefix families.

    Args:
        base: Unversioned canonical identifier
        prefixes: Literal string prefixes, an empty collection matches everything
            A single string is one prefix, not a collection of characters.

    Returns:
        True if prefixes is empty or any prefix starts base
    """
    if isinstance(prefixes, str):
        prefixes = (prefixes,)
    prefixes = tuple(prefixes)
    if len(prefixes) == 0:
        return True
    return any(base.startswith(prefix) for prefix in prefixes)
