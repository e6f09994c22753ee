"""pytest plugin for json-token-match.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from json_token_match import (
    ComparisonResult,
    JsonNode,
    MatchMode,
    exact_match,
    subset_match,
)

JsonAsserter = Callable[[Any, Any], dict[str, JsonNode]]


def _as_text(document: Any) -> str | bytes:
    """Return str/bytes untouched; serialize any other JSON value."""
    if isinstance(document, (str, bytes)):
        return document
    return json.dumps(document)


def _failure_message(result: ComparisonResult, actual: Any, expected: Any) -> str:
    lines = [
        f"JSON documents do not match ({result.mode} mode, "
        f"{len(result.mismatches)} mismatch(es)):"
    ]
    lines.extend(f"  {message}" for message in result.messages)
    lines.append(f"  actual:   {actual}")
    lines.append(f"  expected: {expected}")
    return "\n".join(lines)


def _make_asserter(mode: MatchMode) -> JsonAsserter:
    match_fn = exact_match if mode == MatchMode.EXACT else subset_match

    def _assert(actual: Any, expected: Any) -> dict[str, JsonNode]:
        """Assert that ``actual`` matches the ``expected`` template.

        Args:
            actual:   The JSON produced by the code under test (text, bytes,
                      or a decoded Python value).
            expected: The template, optionally containing ``[[NAME]]`` tokens.

        Returns:
            The extraction mapping, for reuse in later steps.

        Raises:
            AssertionError: When any mismatch is found; the message lists
                every mismatch path and description.
        """
        result = match_fn(_as_text(expected), _as_text(actual))
        if not result.matched:
            raise AssertionError(_failure_message(result, actual, expected))
        return result.extracted

    return _assert


@pytest.fixture(scope="session")
def assert_json_match() -> JsonAsserter:
    """Fixture that returns an exact-match JSON asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to exact_match() which creates a fresh JsonComparator per call).

    Usage in tests::

        def test_job_created(assert_json_match):
            captured = assert_json_match(response.text, '{"id": [[JOB_ID]]}')
            job_id = captured["JOB_ID"].display()
    """
    return _make_asserter(MatchMode.EXACT)


@pytest.fixture(scope="session")
def assert_json_subset() -> JsonAsserter:
    """Fixture that returns a subset-match JSON asserter.

    Same contract as ``assert_json_match`` except that extra members in the
    actual document are ignored and expected arrays only need to be a
    positional prefix.
    """
    return _make_asserter(MatchMode.SUBSET)
