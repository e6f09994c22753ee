"""JsonComparator: orchestrator that wires TokenNormalizer + TreeBuilder + TreeMatcher.

This is the central wiring layer between the raw matcher and the public
API.  It turns two JSON texts into a frozen ComparisonResult.

Architecture:
- compare() starts a wall-clock timer, quotes bare tokens in the expected
  text, parses both sides (a malformed side raises JsonParseError before any
  matching), runs TreeMatcher from the ``$`` root with fresh accumulators and
  wraps everything in a ComparisonResult.
- The comparator holds no per-call state.  Accumulators and parsed trees are
  created inside compare(), so one instance can serve concurrent callers.
"""

from __future__ import annotations

import logging
import time

from json_token_match.algorithm.config import MatchConfig
from json_token_match.algorithm.matcher import TreeMatcher
from json_token_match.result import ComparisonResult, Mismatch
from json_token_match.tree.builder import TreeBuilder, decode_document
from json_token_match.tree.nodes import JsonNode
from json_token_match.tree.normalizer import TokenNormalizer

__all__ = ["JsonComparator"]

logger = logging.getLogger(__name__)

ROOT_PATH = "$"


class JsonComparator:
    """Orchestrator for token-aware JSON comparison.

    Example::

        from json_token_match.comparator import JsonComparator

        cmp = JsonComparator()
        result = cmp.compare(
            '{"id": [[JOB_ID]], "status": "pending"}',
            '{"id": "abc-123", "status": "pending"}',
        )
        print(result.matched)            # True
        print(result.extracted_values)   # {"JOB_ID": "abc-123"}
    """

    def __init__(self, config: MatchConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Comparison settings.  Defaults to ``MatchConfig()``
                (exact mode, token normalization on).
        """
        self._config: MatchConfig = config if config is not None else MatchConfig()
        self._normalizer = TokenNormalizer()
        self._builder = TreeBuilder()
        self._matcher = TreeMatcher(self._config.mode)

    @property
    def config(self) -> MatchConfig:
        return self._config

    def compare(
        self, expected_text: str | bytes, actual_text: str | bytes
    ) -> ComparisonResult:
        """Compare an expected template against an actual document.

        Deterministic: the same inputs always yield the same verdict,
        extraction mapping and mismatch list.

        Args:
            expected_text: Template JSON, optionally containing ``[[NAME]]`` tokens.
            actual_text:   JSON under test.

        Returns:
            A ``ComparisonResult``; ``matched`` is True iff no mismatch was found.

        Raises:
            JsonParseError: If either text is not well-formed JSON.
        """
        t0 = time.perf_counter()

        expected_tree = self._parse_expected(expected_text)
        actual_tree = self._builder.parse(actual_text, document="actual")

        extracted: dict[str, JsonNode] = {}
        mismatches: list[Mismatch] = []
        self._matcher.match(
            expected_tree, actual_tree, ROOT_PATH, extracted, mismatches
        )

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "%s match finished: %d mismatch(es), %d token(s) extracted in %.3f ms",
            self._config.mode,
            len(mismatches),
            len(extracted),
            elapsed_ms,
        )

        return ComparisonResult(
            matched=not mismatches,
            extracted=extracted,
            mismatches=mismatches,
            mode=self._config.mode,
            computation_time_ms=elapsed_ms,
        )

    def _parse_expected(self, text: str | bytes) -> JsonNode:
        if self._config.normalize_tokens:
            text = self._normalizer.normalize(decode_document(text, "expected"))
        return self._builder.parse(text, document="expected")
