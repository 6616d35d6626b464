"""SchemaNode variants and NodeKind StrEnum for nested schema descriptions.

A schema graph is built from six node kinds. Composite kinds expose their
children through kind-specific attributes:

- ObjectSchema.fields   : ordered mapping of field name -> node
- ArraySchema.element   : the element node
- TupleSchema.items     : ordered tuple of item nodes
- UnionSchema.branches  : ordered tuple of branch nodes
- WrapperSchema.inner   : the decorated node (optional / nullable / default)
- LeafSchema            : no children

Nodes compare and hash by identity. Two structurally equal leaves are still
two different schema objects, and resolving a path must hand back the exact
object that was declared there.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import Any, ClassVar

__all__ = [
    "ArraySchema",
    "LeafSchema",
    "NodeKind",
    "ObjectSchema",
    "SchemaNode",
    "TupleSchema",
    "UnionSchema",
    "WrapperKind",
    "WrapperSchema",
    "literal",
    "nullable",
    "optional",
    "with_default",
]


class NodeKind(StrEnum):
    """Enumeration of the six structural schema node kinds.

    - OBJECT  -> "object"  : named fields in declaration order
    - ARRAY   -> "array"   : homogeneous element schema
    - TUPLE   -> "tuple"   : positional item schemas
    - UNION   -> "union"   : alternative branch schemas
    - WRAPPER -> "wrapper" : optional / nullable / default decoration
    - LEAF    -> "leaf"    : any non-composite schema
    """

    OBJECT = auto()
    ARRAY = auto()
    TUPLE = auto()
    UNION = auto()
    WRAPPER = auto()
    LEAF = auto()


class WrapperKind(StrEnum):
    """Which decoration a WrapperSchema applies to its inner node."""

    OPTIONAL = auto()
    NULLABLE = auto()
    DEFAULT = auto()


class SchemaNode:
    """Base class for every schema node.

    Subclasses set the class-level ``kind`` tag. Traversal code dispatches on
    that tag, never on the Python class.
    """

    __slots__ = ()

    kind: ClassVar[NodeKind]


@dataclass(frozen=True, slots=True, eq=False)
class ObjectSchema(SchemaNode):
    """Object schema with named fields.

    Attributes:
        fields: Read-only view over the caller's field mapping. Declaration
            order is the mapping's iteration order.
    """

    kind: ClassVar[NodeKind] = NodeKind.OBJECT

    fields: Mapping[str, SchemaNode] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(self.fields))


@dataclass(frozen=True, slots=True, eq=False)
class ArraySchema(SchemaNode):
    """Array schema; every element matches ``element``."""

    kind: ClassVar[NodeKind] = NodeKind.ARRAY

    element: SchemaNode


@dataclass(frozen=True, slots=True, eq=False)
class TupleSchema(SchemaNode):
    """Fixed-length tuple schema; item ``i`` matches ``items[i]``."""

    kind: ClassVar[NodeKind] = NodeKind.TUPLE

    items: tuple[SchemaNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True, eq=False)
class UnionSchema(SchemaNode):
    """Union schema; a value matches if it matches any branch."""

    kind: ClassVar[NodeKind] = NodeKind.UNION

    branches: tuple[SchemaNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "branches", tuple(self.branches))


@dataclass(frozen=True, slots=True, eq=False)
class WrapperSchema(SchemaNode):
    """Single-child decoration that is transparent to path traversal.

    Attributes:
        inner:   The decorated schema.
        wrapper: Which decoration is applied (see WrapperKind).
        default: Default value for ``WrapperKind.DEFAULT``; None otherwise.
    """

    kind: ClassVar[NodeKind] = NodeKind.WRAPPER

    inner: SchemaNode
    wrapper: WrapperKind = WrapperKind.OPTIONAL
    default: Any = None


@dataclass(frozen=True, slots=True, eq=False)
class LeafSchema(SchemaNode):
    """Non-composite schema (string, number, literal, ...).

    Attributes:
        type_name: Informational name such as "string" or "literal".
        value:     Literal value for literal leaves; None otherwise.
    """

    kind: ClassVar[NodeKind] = NodeKind.LEAF

    type_name: str = "unknown"
    value: Any = None


def optional(inner: SchemaNode) -> WrapperSchema:
    return WrapperSchema(inner, WrapperKind.OPTIONAL)


def nullable(inner: SchemaNode) -> WrapperSchema:
    return WrapperSchema(inner, WrapperKind.NULLABLE)


def with_default(inner: SchemaNode, default: Any) -> WrapperSchema:
    return WrapperSchema(inner, WrapperKind.DEFAULT, default)


def literal(value: Any) -> LeafSchema:
    return LeafSchema("literal", value)

