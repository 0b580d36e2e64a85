# infrastructure/usecase/yaml_loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from infrastructure.usecase.base_loader import UsecaseLoaderBase


class YamlUsecaseLoader(UsecaseLoaderBase):
    """YAMLファイルからUsecaseDefinitionをロード"""

    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
