"""Short display names for fully-qualified Cairo type identifiers."""

from types import MappingProxyType
from typing import Mapping

TYPE_SEPARATOR = '::'

# Keyed by the final path segment of a type identifier
TYPE_NAME_MAPPINGS: Mapping[str, str] = MappingProxyType(
    {
        'felt252': 'Felt252',
        'address': 'ContractAddress',
        'u256': 'U256',
    }
)


def last_segment(identifier: str) -> str:
    """Return the final ``::``-delimited segment of an identifier.

    Args:
        identifier: Type or item name, e.g. ``core::integer::u256``

    Returns:
        str: The last segment, or the identifier itself when it has no separator
    """
    return identifier.split(TYPE_SEPARATOR)[-1]


def readable_type_name(identifier: str) -> str:
    """Format a fully-qualified type identifier into a readable name.

    Only the final segment is looked up. Unknown types are returned unchanged,
    with their full path.

    Args:
        identifier: Fully-qualified type identifier

    Returns:
        str: Short display name
    """
    return TYPE_NAME_MAPPINGS.get(last_segment(identifier), identifier)
