"""Algorithm subpackage: path flattening, union merging, and configuration."""

from schema_paths.algorithm.config import FlattenConfig, UnknownKindPolicy
from schema_paths.algorithm.flattener import PathFlattener
from schema_paths.algorithm.merge import merge_flattened

__all__ = [
    "FlattenConfig",
    "PathFlattener",
    "UnknownKindPolicy",
    "merge_flattened",
]
