"""Payload normalization: accept a JSON array, or a JSON string wrapping one."""

import json
import logging
from typing import Any, Dict, List, Optional, Union

from cairo_abi.errors import MalformedPayloadError

logger = logging.getLogger(__name__)

GenericItem = Optional[Dict[str, Any]]


def _reject_constant(name: str) -> Any:
    raise ValueError(f'Invalid JSON constant: {name}')


def _loads(text: Union[str, bytes]) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def _as_item_list(value: Any) -> Optional[List[GenericItem]]:
    """Return value as a list of generic items, or None if it has another shape."""
    if value is None:
        return []
    if not isinstance(value, list):
        return None
    if not all(item is None or isinstance(item, dict) for item in value):
        return None
    return value


def normalize_payload(payload: Union[str, bytes]) -> List[GenericItem]:
    """Parse an ABI payload into its ordered list of generic items.

    The payload is first read as a JSON array. Failing that, it is read as a
    JSON string whose contents are the array (a double-encoded ABI, as some
    explorers return it).

    Args:
        payload: Raw ABI text

    Returns:
        list: Generic items in source order. ``null`` entries are kept and
            classified as ignored by the decoder.

    Raises:
        MalformedPayloadError: If neither reading yields an array of objects
    """
    try:
        document = _loads(payload)
    except (ValueError, RecursionError) as e:
        raise MalformedPayloadError(f'Error unmarshalling ABI: {e}') from e

    items = _as_item_list(document)
    if items is not None:
        return items

    if not isinstance(document, str):
        raise MalformedPayloadError(f'Error unmarshalling ABI: expected a JSON array, got {type(document).__name__}')

    logger.debug('ABI payload is double-encoded, parsing inner string')
    try:
        inner = _loads(document)
    except (ValueError, RecursionError) as e:
        raise MalformedPayloadError(f'Error parsing ABI string: {e}') from e

    items = _as_item_list(inner)
    if items is None:
        raise MalformedPayloadError(f'Error parsing ABI string: expected a JSON array, got {type(inner).__name__}')
    return items
