"""Integrations subpackage for schema-path-resolver.

Contains the pytest plugin (auto-discovered via the pytest11 entry point).
It is not imported here so that importing schema_paths never requires pytest.
"""

from __future__ import annotations

__all__: list[str] = []
