"""HistoryConfig: tuning knobs for ``CommandHistory``."""

from __future__ import annotations

from dataclasses import dataclass

from .primitives.exceptions import ConfigurationError


@dataclass(frozen=True)
class HistoryConfig:
    """History configuration.

    Attributes:
        name: Label used in log records, hook attributes and errors.
        max_size: Maximum number of recorded commands. When exceeded the
            oldest entry is discarded without running any effect.
            ``None`` means unbounded.
        log_results: Log every collected result at DEBUG level.
    """

    name: str = "history"
    max_size: int | None = None
    log_results: bool = False

    def __post_init__(self) -> None:
        if self.max_size is not None and self.max_size < 1:
            raise ConfigurationError(
                f"max_size must be a positive integer or None, got {self.max_size!r}"
            )
        if not self.name:
            raise ConfigurationError("name must not be empty")
