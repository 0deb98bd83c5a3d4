"""Identifier data: plain ids, namespaced ids, items and blocks with their states."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

DEFAULT_NAMESPACE = "minecraft"

PropertyValue = Union[bool, int, str]


@dataclass
class NormalId:
    """An identifier with an optional human-readable description."""

    name: str
    description: Optional[str] = None
    _name_hash: Optional[int] = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def make(cls, name: str, description: Optional[str] = None) -> NormalId:
        """Create an id from a name and an optional description."""
        return cls(name=name, description=description)

    def _build_hash(self) -> int:
        if self._name_hash is None:
            self._name_hash = hash(self.name)
        return self._name_hash

    def fast_match(self, name_hash: int) -> bool:
        """Tell whether ``name_hash`` equals the hash of this id's name."""
        return self._build_hash() == name_hash

    def hash_code(self) -> int:
        """Return the hash of this id's name."""
        return self._build_hash()


@dataclass
class NamespaceId(NormalId):
    """An identifier that lives in a namespace; ``None`` means the default one."""

    id_namespace: Optional[str] = None
    _with_namespace: Optional[NormalId] = field(
        default=None, init=False, repr=False, compare=False
    )

    def id_with_namespace(self) -> NormalId:
        """Return the id written as ``namespace:name``, built once and cached."""
        if self._with_namespace is None:
            namespace = self.id_namespace if self.id_namespace is not None else DEFAULT_NAMESPACE
            self._with_namespace = NormalId.make(f"{namespace}:{self.name}", self.description)
        return self._with_namespace


@dataclass
class ItemId(NamespaceId):
    """An item with an optional maximum data value and per-value descriptions."""

    max: Optional[int] = None
    descriptions: Optional[list[str]] = None

    def data_values(self) -> list[NormalId]:
        """Return the documented data values, numbered from zero.

        Raises ValueError when the maximum data value is negative.
        """
        if self.max is not None and self.max < 0:
            raise ValueError("item id max data value should be a positive number")
        if self.descriptions is None:
            return []
        return [NormalId.make(str(i), text) for i, text in enumerate(self.descriptions)]


class PropertyType(Enum):
    """The type of a block state value."""

    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"


@dataclass
class Property:
    """A block state a block has, with its default and, optionally, its valid values."""

    name: str
    type: PropertyType
    default_value: PropertyValue
    valid: Optional[list[PropertyValue]] = None

    def is_valid(self, value: PropertyValue) -> bool:
        """Tell whether ``value`` is allowed for this state."""
        return self.valid is None or value in self.valid


@dataclass
class BlockPropertyValueDescription:
    """One possible value of a block state and what it means."""

    value_name: PropertyValue
    description: Optional[str] = None


@dataclass
class BlockPropertyDescription:
    """Documentation of a block state and of its values."""

    type: PropertyType
    property_name: str
    description: Optional[str] = None
    values: list[BlockPropertyValueDescription] = field(default_factory=list)


@dataclass
class PerBlockPropertyDescription:
    """State documentation that applies only to the listed blocks."""

    blocks: list[str] = field(default_factory=list)
    properties: list[BlockPropertyDescription] = field(default_factory=list)


@dataclass
class BlockPropertyDescriptions:
    """All block state documentation: block-specific entries and common ones."""

    common: list[BlockPropertyDescription] = field(default_factory=list)
    block: list[PerBlockPropertyDescription] = field(default_factory=list)

    def get_property_description(
        self, block_id_with_namespace: str, block_id: str, property_name: str
    ) -> BlockPropertyDescription:
        """Find the description of a state, preferring block-specific entries.

        Raises LookupError when no entry describes the state.
        """
        for entry in self.block:
            if block_id in entry.blocks or block_id_with_namespace in entry.blocks:
                for description in entry.properties:
                    if description.property_name == property_name:
                        return description
        for description in self.common:
            if description.property_name == property_name:
                return description
        raise LookupError(
            f"fail to find block property value by block id {block_id_with_namespace} "
            f"and property name {property_name}"
        )


@dataclass
class BlockId(NamespaceId):
    """A block with the states it accepts."""

    properties: Optional[list[Property]] = None


@dataclass
class BlockIds:
    """Every known block together with the documentation of block states."""

    block_state_values: list[BlockId] = field(default_factory=list)
    block_property_descriptions: BlockPropertyDescriptions = field(
        default_factory=BlockPropertyDescriptions
    )