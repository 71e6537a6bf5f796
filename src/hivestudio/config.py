from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "WARNING"
_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(slots=True)
class ExampleConfig:
    """Settings for the scenario menu; the scenario programs themselves ignore it.

    The defaults keep the console quiet so only scenario output reaches stdout.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    trace_lines: bool = False

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls) -> ExampleConfig:
        """Load overrides from environment variables.

        Supported variables (all optional):

        ``HIVESTUDIO_LOG_LEVEL``
            Standard logging level name such as ``INFO`` or ``debug``.
        ``HIVESTUDIO_TRACE_LINES``
            Boolean flag (``1``/``true``/``yes``) that logs every emitted line.
        """

        def _parse_bool(value: str | None) -> bool | None:
            if value is None:
                return None
            lowered = value.strip().lower()
            if lowered in {"1", "true", "yes", "on"}:
                return True
            if lowered in {"0", "false", "no", "off"}:
                return False
            return None

        env = os.environ

        level_raw = env.get("HIVESTUDIO_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        log_level = level_raw if level_raw in _LEVEL_NAMES else DEFAULT_LOG_LEVEL

        trace_flag = _parse_bool(env.get("HIVESTUDIO_TRACE_LINES"))

        return cls(
            log_level=log_level,
            trace_lines=trace_flag if trace_flag is not None else False,
        )
