"""Integrations subpackage for json-tree-diff.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via the pytest11 entry point), providing
  the ``assert_json_unchanged`` fixture.

The plugin module is loaded by pytest itself and is deliberately not
imported here, so importing the package never pulls in pytest.
"""

from __future__ import annotations

__all__: list[str] = []
