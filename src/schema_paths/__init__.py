"""Schema path resolver - flatten nested schemas into path -> schema maps."""

from __future__ import annotations

import logging

from schema_paths.algorithm.config import FlattenConfig, UnknownKindPolicy
from schema_paths.algorithm.flattener import PathFlattener
from schema_paths.algorithm.merge import merge_flattened
from schema_paths.api import flatten, lookup, paths, resolve
from schema_paths.errors import (
    CyclicSchema,
    PathNotFound,
    SchemaPathError,
    UnsupportedSchemaKind,
)
from schema_paths.resolver import SchemaResolver
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
)
from schema_paths.tree.unwrap import unwrap

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArraySchema",
    "CyclicSchema",
    "FlattenConfig",
    "LeafSchema",
    "NodeKind",
    "ObjectSchema",
    "PathFlattener",
    "PathNotFound",
    "SchemaNode",
    "SchemaPathError",
    "SchemaResolver",
    "TupleSchema",
    "UnionSchema",
    "UnknownKindPolicy",
    "UnsupportedSchemaKind",
    "WrapperKind",
    "WrapperSchema",
    "flatten",
    "lookup",
    "merge_flattened",
    "paths",
    "resolve",
    "unwrap",
]
