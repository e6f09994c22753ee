"""MatchConfig and MatchMode for comparison configuration.

MatchConfig is a frozen (immutable) dataclass holding the per-call
comparison settings.  MatchMode selects how strictly the actual document
must follow the expected one: exactly, or as a structural superset.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class MatchMode(StrEnum):
    """How the actual document is matched against the expected template.

    - EXACT:  Same members, same array lengths; tokens aside, nothing extra.
    - SUBSET: Every expected member must exist; extra actual members are
              ignored and expected arrays only need to be a positional prefix.
    """

    EXACT = auto()
    SUBSET = auto()


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable configuration for a comparison.

    Attributes:
        mode: Exact or subset matching.  Plain strings ("exact", "subset")
            are accepted and coerced to MatchMode.
        normalize_tokens: When True (default), bare ``[[NAME]]`` tokens in the
            expected text are quoted before parsing.  Disable for templates
            that are already valid JSON and must be parsed verbatim.
    """

    mode: MatchMode = MatchMode.EXACT
    normalize_tokens: bool = True

    def __post_init__(self) -> None:
        try:
            mode = MatchMode(self.mode)
        except ValueError:
            choices = [m.value for m in MatchMode]
            msg = f"mode must be one of {choices}, got {self.mode!r}"
            raise ValueError(msg) from None
        # frozen dataclass: bypass __setattr__ to store the coerced enum
        object.__setattr__(self, "mode", mode)
        if not isinstance(self.normalize_tokens, bool):
            msg = f"normalize_tokens must be a bool, got {self.normalize_tokens!r}"
            raise ValueError(msg)
