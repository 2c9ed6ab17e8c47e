"""Environment driven settings for suggestion presentation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "SUGGESTION_ENGINE_"

DEFAULT_HEADER_PREFIX = "/*========== Copilot Suggestion"
DEFAULT_FOOTER = "*///======== End of Copilot Suggestion"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean flag, got '{raw}'")


@dataclass(frozen=True, slots=True)
class SuggestionSettings:
    """How suggestion blocks are delimited and how cursors are relocated.

    ``header_prefix`` starts the first line of a rendered block and is
    followed by ``" <index>/<count>"``; ``footer`` is the whole last line.
    Both are matched by prefix when a drifted block has to be located again.
    """

    header_prefix: str = DEFAULT_HEADER_PREFIX
    footer: str = DEFAULT_FOOTER
    reset_column_inside_block: bool = True

    def __post_init__(self) -> None:
        for name in ("header_prefix", "footer"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"{name} cannot be empty")
            if "\n" in value or "\r" in value:
                raise ValueError(f"{name} must fit on one line")
        if self.header_prefix.startswith(self.footer) or self.footer.startswith(
            self.header_prefix
        ):
            raise ValueError("header_prefix and footer must be distinguishable")

    @classmethod
    def from_env(cls) -> "SuggestionSettings":
        return cls(
            header_prefix=_env("HEADER_PREFIX") or DEFAULT_HEADER_PREFIX,
            footer=_env("FOOTER") or DEFAULT_FOOTER,
            reset_column_inside_block=_env_flag("RESET_COLUMN", True),
        )

    def header_for(self, index: int, count: int) -> str:
        return f"{self.header_prefix} {index + 1}/{count}"


__all__ = ["ENV_PREFIX", "SuggestionSettings"]
