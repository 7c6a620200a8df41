"""Classify generic ABI items and decode them into typed models."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from cairo_abi.errors import MalformedItemError
from cairo_abi.models import AbiItem, abi_item_adapter
from cairo_abi.payload import GenericItem, normalize_payload

logger = logging.getLogger(__name__)


class ItemKind(Enum):
    """Declared kind of a top-level ABI item"""

    INTERFACE = 'interface'
    EVENT = 'event'
    STRUCT = 'struct'
    IMPL = 'impl'
    ENUM = 'enum'
    IGNORED = 'ignored'


RECOGNIZED_KINDS = frozenset(kind.value for kind in ItemKind if kind is not ItemKind.IGNORED)


def classify_item(item: GenericItem) -> ItemKind:
    """Determine the kind of a generic item from its ``type`` tag.

    Missing, non-string and unknown tags all classify as IGNORED.
    """
    if not isinstance(item, dict):
        return ItemKind.IGNORED
    tag = item.get('type')
    if isinstance(tag, str) and tag in RECOGNIZED_KINDS:
        return ItemKind(tag)
    return ItemKind.IGNORED


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = '.'.join(str(part) for part in detail['loc'])
        parts.append(f'{location}: {detail["msg"]}' if location else detail['msg'])
    return '; '.join(parts)


def decode_item(item: GenericItem, index: Optional[int] = None) -> Optional[AbiItem]:
    """Decode one generic item into its typed variant.

    Args:
        item: Generic item as parsed from JSON
        index: Position of the item in the ABI array, for diagnostics

    Returns:
        The decoded model, or None if the item's kind is ignored

    Raises:
        MalformedItemError: If the tag is recognized but the shape does not match
    """
    kind = classify_item(item)
    if kind is ItemKind.IGNORED:
        return None

    try:
        return abi_item_adapter.validate_python(item)
    except ValidationError as e:
        name = item.get('name')
        item_name = name if isinstance(name, str) else None
        label = f"'{item_name}'" if item_name else 'without a valid name'
        position = f' at index {index}' if index is not None else ''
        raise MalformedItemError(
            f'Error decoding {kind.value} {label}{position}: {_describe_validation_error(e)}',
            index=index,
            item_type=kind.value,
            item_name=item_name,
        ) from e


@dataclass
class DecodeResult:
    """Outcome of decoding a whole ABI array"""

    items: List[AbiItem] = field(default_factory=list)
    diagnostics: List[MalformedItemError] = field(default_factory=list)
    ignored: int = 0

    @property
    def ok(self) -> bool:
        """True if no item failed to decode"""
        return not self.diagnostics


def decode_items(items: Iterable[GenericItem]) -> DecodeResult:
    """Decode every generic item, isolating failures to the item that caused them.

    Malformed items are skipped and recorded as diagnostics. Ignored items are
    skipped without any diagnostic.
    """
    result = DecodeResult()
    for index, item in enumerate(items):
        try:
            decoded = decode_item(item, index=index)
        except MalformedItemError as e:
            logger.warning(str(e))
            result.diagnostics.append(e)
            continue

        if decoded is None:
            result.ignored += 1
            continue
        result.items.append(decoded)

    logger.debug(
        f'Decoded {len(result.items)} ABI items '
        f'({len(result.diagnostics)} malformed, {result.ignored} ignored)'
    )
    return result


def decode_abi(payload: Union[str, bytes]) -> DecodeResult:
    """Normalize a raw payload and decode all of its items.

    Raises:
        MalformedPayloadError: If the payload itself cannot be parsed
    """
    return decode_items(normalize_payload(payload))

