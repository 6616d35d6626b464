"""Exception hierarchy for schema path flattening and resolution."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = [
    "CyclicSchema",
    "PathNotFound",
    "SchemaPathError",
    "UnsupportedSchemaKind",
]


class SchemaPathError(Exception):
    """Base class for every error raised by schema_paths."""


class UnsupportedSchemaKind(SchemaPathError, TypeError):
    """Raised when traversal meets a node outside the six known kinds.

    Attributes:
        node: The offending object.
        path: Path at which it was reached ("" for the root).
    """

    def __init__(self, node: Any, path: str) -> None:
        self.node = node
        self.path = path
        kind = getattr(node, "kind", None)
        where = f"at path {path!r}" if path else "at the root"
        msg = (
            f"Unsupported schema node {type(node).__name__} "
            f"(kind={kind!r}) {where}"
        )
        super().__init__(msg)


class PathNotFound(SchemaPathError, LookupError):
    """Raised when a path is absent from the flattened schema.

    Attributes:
        path:        The requested path.
        suggestions: Closest known paths, best first. May be empty.
    """

    def __init__(self, path: str, suggestions: Sequence[str] = ()) -> None:
        self.path = path
        self.suggestions = tuple(suggestions)
        msg = f"Path {path!r} not found in schema"
        if self.suggestions:
            msg += f"; did you mean {', '.join(map(repr, self.suggestions))}?"
        super().__init__(msg)


class CyclicSchema(SchemaPathError, ValueError):
    """Raised when a node is reachable from itself through its children.

    Attributes:
        path: Path at which the already-visited node was reached again.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        where = f"at path {path!r}" if path else "at the root"
        msg = f"Cyclic schema: node revisited {where}"
        super().__init__(msg)
