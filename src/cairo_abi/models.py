"""Data models for Cairo contract ABI items.

Every top-level ABI item carries a ``type`` tag; :data:`AbiItem` is the tagged
union over the tags this package understands. Fields not declared here are
ignored, so newer compiler output still decodes.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class AbiModel(BaseModel):
    """Base for all ABI models: unknown fields are dropped, instances are immutable."""

    model_config = ConfigDict(extra='ignore', frozen=True)


class Member(AbiModel):
    """A named, typed parameter or field."""

    name: str = Field(..., description='Parameter or field name')
    type: str = Field(..., description='Fully-qualified type identifier, e.g. core::felt252')


class Output(AbiModel):
    """An unnamed return slot."""

    type: str = Field(..., description='Fully-qualified type identifier')


class Variant(AbiModel):
    """A named enum variant and the type it carries."""

    name: str = Field(..., description='Variant name')
    type: str = Field(..., description='Fully-qualified type of the variant payload, "()" for none')


class Function(AbiModel):
    """A function declared inside an interface."""

    type: str = Field('function', description='Entry kind, normally "function"')
    name: str
    inputs: List[Member] = Field(default_factory=list)
    outputs: List[Output] = Field(default_factory=list)
    state_mutability: str = Field(..., description='Effect class, e.g. "view" or "external"')


class InterfaceType(AbiModel):
    type: Literal['interface']
    name: str
    items: List[Function] = Field(default_factory=list)


class EventType(AbiModel):
    type: Literal['event']
    name: str
    kind: Optional[str] = Field(None, description='"struct" or "enum" for Cairo 1 events')
    members: List[Member] = Field(default_factory=list)
    variants: List[Variant] = Field(default_factory=list)


class StructType(AbiModel):
    type: Literal['struct']
    name: str
    members: List[Member] = Field(default_factory=list)


class EnumType(AbiModel):
    type: Literal['enum']
    name: str
    variants: List[Variant] = Field(default_factory=list)


class ImplType(AbiModel):
    type: Literal['impl']
    name: str
    interface_name: str


AbiItem = Annotated[
    Union[InterfaceType, EventType, StructType, EnumType, ImplType],
    Field(discriminator='type'),
]

abi_item_adapter = TypeAdapter(AbiItem)
