"""Render decoded functions and events as human-readable signatures."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Union

from cairo_abi.decoder import decode_abi
from cairo_abi.models import AbiItem, EventType, Function, InterfaceType, Member
from cairo_abi.type_names import last_segment, readable_type_name


@dataclass(frozen=True)
class Parameter:
    """A named parameter with its display type name."""

    name: str
    type: str

    @classmethod
    def from_member(cls, member: Member) -> 'Parameter':
        return cls(name=member.name, type=readable_type_name(member.type))

    def render(self) -> str:
        return f'{self.name}: {self.type}'


def _render_parameters(parameters: Sequence[Parameter]) -> str:
    return ', '.join(p.render() for p in parameters)


@dataclass(frozen=True)
class FunctionSignature:
    """Display form of an interface function."""

    name: str
    inputs: List[Parameter] = field(default_factory=list)
    outputs: List[str] = field(default_factory=list)
    state_mutability: str = ''
    interface: str = ''

    kind = 'function'

    @classmethod
    def from_function(cls, function: Function, interface: str = '') -> 'FunctionSignature':
        return cls(
            name=function.name,
            inputs=[Parameter.from_member(m) for m in function.inputs],
            outputs=[readable_type_name(o.type) for o in function.outputs],
            state_mutability=function.state_mutability,
            interface=interface,
        )

    def render(self) -> str:
        return (
            f'Function: {self.name}({_render_parameters(self.inputs)}) '
            f'-> ({", ".join(self.outputs)}) [State Mutability: {self.state_mutability}]'
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind,
            'interface': self.interface,
            'name': self.name,
            'inputs': [{'name': p.name, 'type': p.type} for p in self.inputs],
            'outputs': list(self.outputs),
            'state_mutability': self.state_mutability,
        }


@dataclass(frozen=True)
class EventSignature:
    """Display form of an event: short name plus its data members."""

    name: str
    full_name: str
    members: List[Parameter] = field(default_factory=list)

    kind = 'event'

    @classmethod
    def from_event(cls, event: EventType) -> 'EventSignature':
        return cls(
            name=last_segment(event.name),
            full_name=event.name,
            members=[Parameter.from_member(m) for m in event.members],
        )

    def render(self) -> str:
        return f'Event: {self.name}({_render_parameters(self.members)})'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind,
            'name': self.name,
            'full_name': self.full_name,
            'members': [{'name': p.name, 'type': p.type} for p in self.members],
        }


Signature = Union[FunctionSignature, EventSignature]


def signatures_for(item: AbiItem) -> List[Signature]:
    """Signatures contributed by one decoded item.

    Interfaces yield one signature per function, in declaration order; events
    yield exactly one. Structs, enums and impls yield none.
    """
    if isinstance(item, InterfaceType):
        return [FunctionSignature.from_function(f, interface=item.name) for f in item.items]
    if isinstance(item, EventType):
        return [EventSignature.from_event(item)]
    return []


def render_signatures(items: Iterable[AbiItem]) -> List[Signature]:
    """Ordered signatures for a sequence of decoded items."""
    signatures: List[Signature] = []
    for item in items:
        signatures.extend(signatures_for(item))
    return signatures


def render_abi(payload: Union[str, bytes]) -> List[str]:
    """Decode a raw ABI payload and render one line per function and event.

    Malformed items are skipped with a logged warning.

    Raises:
        MalformedPayloadError: If the payload itself cannot be parsed
    """
    result = decode_abi(payload)
    return [signature.render() for signature in render_signatures(result.items)]
