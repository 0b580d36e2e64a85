# infrastructure/config/env_settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

from domain.exceptions import ValidationError

# プロジェクトルートの .env
DEFAULT_ENV_PATH = Path(__file__).parent.parent.parent / ".env"

LOGGER_KINDS = ("console", "loguru")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class InteractorSettings:
    max_depth: Optional[int] = None  # None => 上限なし
    log_level: str = "INFO"
    logger: str = "loguru"


class EnvSettingsProvider:
    """
    環境変数と.envファイルから ScenarioInteractor の設定を読み込む

    .env の値が環境変数より優先される
      ROBUSTIVE_MAX_DEPTH  正の整数（空なら上限なし）
      ROBUSTIVE_LOG_LEVEL  DEBUG / INFO / WARNING / ERROR
      ROBUSTIVE_LOGGER     console / loguru
    """

    def __init__(self, env_path: Optional[Path] = None):
        path = env_path or DEFAULT_ENV_PATH
        self._env_vars: Dict[str, Optional[str]] = dict(dotenv_values(path)) if path.exists() else {}

        for key, value in os.environ.items():
            if key not in self._env_vars:
                self._env_vars[key] = value

    def get(self) -> InteractorSettings:
        return InteractorSettings(
            max_depth=self._parse_max_depth(self._env_vars.get("ROBUSTIVE_MAX_DEPTH")),
            log_level=self._parse_choice("ROBUSTIVE_LOG_LEVEL", LOG_LEVELS, "INFO").upper(),
            logger=self._parse_choice("ROBUSTIVE_LOGGER", LOGGER_KINDS, "loguru").lower(),
        )

    def _parse_max_depth(self, raw: Optional[str]) -> Optional[int]:
        if raw is None or not raw.strip():
            return None
        try:
            value = int(raw.strip())
        except ValueError as exc:
            raise ValidationError(f"ROBUSTIVE_MAX_DEPTH must be an integer: {raw}") from exc
        if value < 1:
            raise ValidationError(f"ROBUSTIVE_MAX_DEPTH must be positive: {raw}")
        return value

    def _parse_choice(self, key: str, choices: tuple, default: str) -> str:
        raw = self._env_vars.get(key)
        if raw is None or not raw.strip():
            return default
        value = raw.strip()
        if value.upper() not in (c.upper() for c in choices):
            raise ValidationError(f"{key} must be one of {', '.join(choices)}: {raw}")
        return value
