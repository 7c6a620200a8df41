from pathlib import Path
from typing import Dict, List, Union

from cairo_abi.decoder import decode_abi
from cairo_abi.models import EnumType, EventType, Function, ImplType, InterfaceType, StructType
from cairo_abi.signatures import Signature, render_signatures
from cairo_abi.type_names import last_segment


class ContractAbi:
    """A decoded Cairo contract ABI.

    Items that fail to decode are left out and kept in ``diagnostics``.
    """

    def __init__(self, payload: Union[str, bytes]):
        result = decode_abi(payload)
        self.items = result.items
        self.diagnostics = result.diagnostics
        self.interfaces: Dict[str, InterfaceType] = {}
        self.events: Dict[str, EventType] = {}
        self.structs: Dict[str, StructType] = {}
        self.enums: Dict[str, EnumType] = {}
        self.impls: Dict[str, ImplType] = {}
        for item in self.items:
            if isinstance(item, InterfaceType):
                self.interfaces[item.name] = item
            elif isinstance(item, EventType):
                # Keyed by short name, like the rendered signature
                self.events[last_segment(item.name)] = item
            elif isinstance(item, StructType):
                self.structs[item.name] = item
            elif isinstance(item, EnumType):
                self.enums[item.name] = item
            elif isinstance(item, ImplType):
                self.impls[item.name] = item

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'ContractAbi':
        return cls(Path(path).read_text())

    @property
    def functions(self) -> List[Function]:
        """All interface functions, in declaration order"""
        return [f for item in self.items if isinstance(item, InterfaceType) for f in item.items]

    def signatures(self) -> List[Signature]:
        return render_signatures(self.items)

    def lines(self) -> List[str]:
        return [signature.render() for signature in self.signatures()]
