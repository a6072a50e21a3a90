"""pytest plugin for json-tree-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import pytest

from json_tree_diff import DiffConfig, compare, format_tree
from json_tree_diff.tree.normalizer import normalize_input


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh TreeDiffComparator per call).

    Usage in tests::

        def test_payload(assert_json_unchanged):
            assert_json_unchanged(build_payload(), {"id": 1, "tags": ["a"]})

        def test_drift(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"/tags/1"):
                assert_json_unchanged({"tags": ["a", "b"]}, {"tags": ["a"]})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when the documents differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON documents are structurally identical.

        ``expected`` is the left-hand (original) side, so keys missing from
        ``actual`` are reported as removed and extra keys as added.

        Args:
            actual:   The JSON value produced by the code under test.
            expected: The expected/reference JSON value.
            config:   Optional DiffConfig for custom algorithm settings.

        Raises:
            AssertionError: When the diff contains any change, with a message
                listing the changed paths and the changed part of the tree.
        """
        config = config or DiffConfig()
        parse_strings = config.parse_json_strings
        actual = normalize_input(actual, parse_strings=parse_strings)
        expected = normalize_input(expected, parse_strings=parse_strings)
        # a lone document diffs as UNCHANGED, so null-vs-document is checked here
        if (actual is None) is not (expected is None):
            raise AssertionError(
                f"JSON documents differ: one side is null\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}"
            )
        # already decoded; a second pass would unwrap JSON-looking string values
        decoded = replace(config, parse_json_strings=False)
        result = compare(expected, actual, config=decoded)
        if result.has_changes:
            raise AssertionError(
                f"JSON documents differ at {len(result.changed_paths)} path(s): "
                f"{', '.join(result.changed_paths)}\n"
                f"{format_tree(result.nodes, only_changes=True)}"
            )

    return _assert
