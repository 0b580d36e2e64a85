# infrastructure/usecase/__init__.py
from infrastructure.usecase.base_loader import UsecaseLoadError, UsecaseLoaderBase
from infrastructure.usecase.file_finder import UsecaseFileFinder
from infrastructure.usecase.json_loader import JsonUsecaseLoader
from infrastructure.usecase.loader_registry import UsecaseLoaderRegistry
from infrastructure.usecase.yaml_loader import YamlUsecaseLoader

__all__ = [
    "UsecaseLoadError",
    "UsecaseLoaderBase",
    "UsecaseLoaderRegistry",
    "UsecaseFileFinder",
    "YamlUsecaseLoader",
    "JsonUsecaseLoader",
]
