from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class Settings:
    max_display_length: int = 16
    error_clear_delay: float = 3.0   # seconds a front end keeps an error visible
    log_level: str = "WARNING"

    def validate(self) -> None:
        if not (1 <= int(self.max_display_length) <= 64):
            raise ValueError("max_display_length must be 1..64")
        if float(self.error_clear_delay) < 0:
            raise ValueError("error_clear_delay must be >= 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        s = cls()
        if "CALCENGINE_MAX_DISPLAY" in env: s.max_display_length = int(env["CALCENGINE_MAX_DISPLAY"])
        if "CALCENGINE_ERROR_DELAY" in env: s.error_clear_delay = float(env["CALCENGINE_ERROR_DELAY"])
        if "CALCENGINE_LOG_LEVEL" in env: s.log_level = env["CALCENGINE_LOG_LEVEL"]
        s.validate()
        return s
