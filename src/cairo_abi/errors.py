"""ABI decoding error types."""

from typing import Optional


class AbiDecodeError(Exception):
    """Base exception for all ABI decoding errors."""

    def __init__(self, message: str, error_code: str = ''):
        super().__init__(message)
        self.error_code = error_code


class MalformedPayloadError(AbiDecodeError):
    """Raised when the payload is neither a JSON array nor a JSON string holding one."""

    def __init__(self, message: str):
        super().__init__(message, error_code='MALFORMED_PAYLOAD')


class MalformedItemError(AbiDecodeError):
    """Raised when an item with a recognized type tag does not match its expected shape.

    Decoding a whole ABI never lets this escape: the item is skipped and the
    error is kept as a diagnostic.
    """

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        item_type: str = '',
        item_name: Optional[str] = None,
    ):
        super().__init__(message, error_code='MALFORMED_ITEM')
        self.index = index
        self.item_type = item_type
        self.item_name = item_name
