"""Tree subpackage for schema node primitives.

Re-exports the public API for the tree module:
- SchemaNode and the six concrete node types
- NodeKind: StrEnum of the six node kinds
- WrapperKind: StrEnum of the wrapper decorations
- unwrap / node_kind: wrapper peeling and kind detection
"""

from schema_paths.tree.nodes import (
    ArraySchema,
    LeafSchema,
    NodeKind,
    ObjectSchema,
    SchemaNode,
    TupleSchema,
    UnionSchema,
    WrapperKind,
    WrapperSchema,
    literal,
    nullable,
    optional,
    with_default,
)
from schema_paths.tree.unwrap import node_kind, unwrap

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
    "node_kind",
    "nullable",
    "optional",
    "unwrap",
    "with_default",
]
