"""pytest plugin for schema-path-resolver.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from schema_paths import FlattenConfig, PathNotFound, SchemaNode, resolve


@pytest.fixture(scope="session")
def assert_schema_path() -> Any:
    """Fixture that returns a callable schema path asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to resolve() which flattens afresh on every call).

    Usage in tests::

        def test_title_path(assert_schema_path):
            assert_schema_path(schema, "posts[].title")

        def test_exact_node(assert_schema_path):
            assert_schema_path(schema, "posts[].title", expected=title)

    Returns:
        A callable ``_assert(root, path, expected=None, config=None) -> SchemaNode``
        that raises ``AssertionError`` when ``path`` does not resolve, or when
        ``expected`` is given and the resolved node is not that exact object.
    """

    def _assert(
        root: Any,
        path: str,
        expected: SchemaNode | None = None,
        config: FlattenConfig | None = None,
    ) -> SchemaNode:
        """Assert that ``path`` resolves below ``root`` and return its schema.

        Raises:
            AssertionError: When the path is missing (the message lists the
                closest known paths) or the resolved node is not ``expected``.
        """
        try:
            node = resolve(root, path, config=config)
        except PathNotFound as exc:
            raise AssertionError(
                f"Schema path {path!r} does not resolve\n"
                f"  suggestions: {list(exc.suggestions)}"
            ) from None
        if expected is not None and node is not expected:
            raise AssertionError(
                f"Schema path {path!r} resolved to a different node\n"
                f"  actual:   {node!r}\n"
                f"  expected: {expected!r}"
            )
        return node

    return _assert
