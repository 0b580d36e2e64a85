# infrastructure/usecase/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

from infrastructure.usecase.base_loader import UsecaseLoaderBase, UsecaseLoadError
from infrastructure.usecase.json_loader import JsonUsecaseLoader
from infrastructure.usecase.yaml_loader import YamlUsecaseLoader


class UsecaseLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, UsecaseLoaderBase] = {
            ".yaml": YamlUsecaseLoader(),
            ".yml": YamlUsecaseLoader(),
            ".json": JsonUsecaseLoader(),
        }

    def get_loader(self, path: Path) -> UsecaseLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise UsecaseLoadError(f"Unsupported usecase format: {ext}")
        return loader
