"""cairo-abi - decode Cairo contract ABIs into readable function and event signatures."""

from cairo_abi.abi import ContractAbi
from cairo_abi.decoder import DecodeResult, ItemKind, classify_item, decode_abi, decode_item, decode_items
from cairo_abi.errors import AbiDecodeError, MalformedItemError, MalformedPayloadError
from cairo_abi.payload import normalize_payload
from cairo_abi.signatures import EventSignature, FunctionSignature, render_abi, render_signatures
from cairo_abi.type_names import readable_type_name

__all__ = [
    'ContractAbi',
    'DecodeResult',
    'ItemKind',
    'classify_item',
    'decode_abi',
    'decode_item',
    'decode_items',
    'AbiDecodeError',
    'MalformedItemError',
    'MalformedPayloadError',
    'normalize_payload',
    'EventSignature',
    'FunctionSignature',
    'render_abi',
    'render_signatures',
    'readable_type_name',
]
