"""Tests for MatchConfig frozen dataclass and MatchMode StrEnum.

Covers:
- Default values (mode=EXACT, normalize_tokens=True)
- String coercion of mode
- Immutability (FrozenInstanceError on assignment)
- Validation: unknown mode, non-bool normalize_tokens
- MatchMode has exactly two values: exact, subset
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_token_match.algorithm.config import MatchConfig, MatchMode

# ---------------------------------------------------------------------------
# MatchMode
# ---------------------------------------------------------------------------


class TestMatchMode:
    def test_has_exactly_two_members(self) -> None:
        assert len(list(MatchMode)) == 2

    def test_exact_value(self) -> None:
        assert MatchMode.EXACT == "exact"

    def test_subset_value(self) -> None:
        assert MatchMode.SUBSET == "subset"

    def test_is_str_subclass(self) -> None:
        assert isinstance(MatchMode.SUBSET, str)


# ---------------------------------------------------------------------------
# MatchConfig
# ---------------------------------------------------------------------------


class TestMatchConfigDefaults:
    def test_default_mode_is_exact(self) -> None:
        assert MatchConfig().mode is MatchMode.EXACT

    def test_default_normalizes_tokens(self) -> None:
        assert MatchConfig().normalize_tokens is True


class TestMatchConfigConstruction:
    def test_enum_mode(self) -> None:
        assert MatchConfig(mode=MatchMode.SUBSET).mode is MatchMode.SUBSET

    def test_string_mode_coerced(self) -> None:
        config = MatchConfig(mode="subset")  # type: ignore[arg-type]
        assert config.mode is MatchMode.SUBSET

    def test_normalize_tokens_off(self) -> None:
        assert MatchConfig(normalize_tokens=False).normalize_tokens is False

    def test_equality(self) -> None:
        assert MatchConfig(mode="exact") == MatchConfig()  # type: ignore[arg-type]


class TestMatchConfigImmutability:
    def test_mode_assignment_raises(self) -> None:
        config = MatchConfig()
        with pytest.raises(FrozenInstanceError):
            config.mode = MatchMode.SUBSET  # type: ignore[misc]

    def test_normalize_tokens_assignment_raises(self) -> None:
        config = MatchConfig()
        with pytest.raises(FrozenInstanceError):
            config.normalize_tokens = False  # type: ignore[misc]


class TestMatchConfigValidation:
    def test_unknown_mode_raises(self) -> None:
        with pytest.raises(ValueError, match="mode must be one of"):
            MatchConfig(mode="fuzzy")  # type: ignore[arg-type]

    def test_none_mode_raises(self) -> None:
        with pytest.raises(ValueError, match="mode must be one of"):
            MatchConfig(mode=None)  # type: ignore[arg-type]

    def test_non_bool_normalize_tokens_raises(self) -> None:
        with pytest.raises(ValueError, match="normalize_tokens must be a bool"):
            MatchConfig(normalize_tokens="yes")  # type: ignore[arg-type]
