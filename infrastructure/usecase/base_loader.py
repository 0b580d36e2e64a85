# infrastructure/usecase/base_loader.py
"""
ユースケース定義ファイル（YAML / JSON）から UsecaseDefinition を生成する共通処理
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

from domain.actor import UserType
from domain.exceptions import ValidationError
from domain.scene import scene_from_mapping
from domain.usecase import Transition, UsecaseDefinition


class UsecaseLoadError(Exception):
    pass


class UsecaseLoaderBase(ABC):
    def load_from_file(self, path: str) -> UsecaseDefinition:
        p = Path(path)
        if not p.exists():
            raise UsecaseLoadError(f"Usecase file not found: {path}")

        try:
            data = self._load_file(p)
        except UsecaseLoadError:
            raise
        except Exception as e:
            raise UsecaseLoadError(f"Usecase file could not be parsed: {path}: {e}") from e

        if data is None:
            raise UsecaseLoadError(f"Usecase file is empty: {path}")

        if not isinstance(data, dict):
            raise UsecaseLoadError(f"Usecase file is invalid: {path}")

        return self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> UsecaseDefinition:
        meta = data.get("usecase") or {}
        if not isinstance(meta, dict):
            raise UsecaseLoadError("'usecase' must be a mapping")

        try:
            return UsecaseDefinition(
                name=str(meta.get("name", "")),
                description=str(meta.get("description", "")),
                allowed_user_types=self._load_actors(meta.get("actors", [])),
                start=scene_from_mapping(data.get("start")),
                transitions=self._load_transitions(data.get("transitions", [])),
            )
        except ValidationError as e:
            raise UsecaseLoadError(str(e)) from e

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...

    def _load_actors(self, actors: Any) -> List[UserType]:
        if not isinstance(actors, list):
            raise UsecaseLoadError("'usecase.actors' must be a list")

        user_types: List[UserType] = []
        for actor in actors:
            # "anyone" は制限なしと同じ扱い
            if actor == "anyone":
                return []
            try:
                user_types.append(UserType(actor))
            except ValueError as e:
                raise UsecaseLoadError(f"Unknown actor type: {actor}") from e
        return user_types

    def _load_transitions(self, transitions_data: Any) -> List[Transition]:
        if not isinstance(transitions_data, list):
            raise UsecaseLoadError("'transitions' must be a list")

        transitions: List[Transition] = []
        for item in transitions_data:
            if not isinstance(item, dict) or "from" not in item or "to" not in item:
                raise UsecaseLoadError(f"Transition needs 'from' and 'to': {item!r}")
            transitions.append(
                Transition(
                    source=scene_from_mapping(item["from"]),
                    target=scene_from_mapping(item["to"]),
                )
            )
        return transitions
