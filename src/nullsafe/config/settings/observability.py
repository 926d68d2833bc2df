"""Config settings – LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from nullsafe.config.settings.base import Settings
from nullsafe.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging configuration read from ``NULLSAFE_LOG_*`` variables."""

    _prefix: ClassVar[str] = "NULLSAFE_LOG"

    level: str = "INFO"
    json: bool = True

    def _validate(self) -> None:
        self.level = self.level.strip().upper()
        if not isinstance(logging.getLevelNamesMapping().get(self.level), int):
            raise InvalidSettingValueError("level", self.level, "unknown log level")

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


__all__ = ["LoggingSettings"]
