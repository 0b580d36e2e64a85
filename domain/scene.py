# domain/scene.py
"""
Scene domain model

A scene is one step of a use case: a happy-path step (Basic), a branch
step (Alternate) or the goal (Last).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Generic, Mapping, TypeVar

from domain.exceptions import ValidationError

P = TypeVar("P")


class SceneKind(str, Enum):
    BASIC = "basic"
    ALTERNATE = "alternate"
    LAST = "last"


@dataclass(frozen=True)
class Scene(Generic[P]):
    payload: P

    kind: ClassVar[SceneKind]
    label: ClassVar[str]

    def __post_init__(self) -> None:
        # Basic / Alternate / Last のいずれかでなければならない
        if getattr(type(self), "kind", None) is None:
            raise ValidationError(f"Scene must be basic, alternate or last: {type(self).__name__}")

    @property
    def is_last(self) -> bool:
        return self.kind is SceneKind.LAST

    def __str__(self) -> str:
        return f"{self.label}({render_payload(self.payload)})"


@dataclass(frozen=True)
class Basic(Scene[P]):
    kind: ClassVar[SceneKind] = SceneKind.BASIC
    label: ClassVar[str] = "basic"


@dataclass(frozen=True)
class Alternate(Scene[P]):
    kind: ClassVar[SceneKind] = SceneKind.ALTERNATE
    label: ClassVar[str] = "alternate"


@dataclass(frozen=True)
class Last(Scene[P]):
    kind: ClassVar[SceneKind] = SceneKind.LAST
    label: ClassVar[str] = "goal"


_SCENE_TYPES: Dict[str, type] = {
    "basic": Basic,
    "alternate": Alternate,
    "last": Last,
    "goal": Last,  # alias
}


def render_payload(payload: Any) -> str:
    if isinstance(payload, Enum):
        return payload.name
    return str(payload)


def scene_from_mapping(data: Any) -> Scene:
    """{"basic": "inputCredentials"} 形式の dict から Scene を生成"""
    if not isinstance(data, Mapping) or len(data) != 1:
        raise ValidationError(f"Scene must be a single-key mapping: {data!r}")

    (tag, payload), = data.items()
    scene_type = _SCENE_TYPES.get(str(tag).lower())
    if scene_type is None:
        raise ValidationError(f"Unknown scene kind: {tag}")
    if payload is None:
        raise ValidationError(f"Scene payload must not be empty: {tag}")
    if not isinstance(payload, (str, int, float, bool)):
        raise ValidationError(f"Scene payload must be a scalar: {payload!r}")
    return scene_type(payload)


def scene_to_mapping(scene: Scene) -> Dict[str, Any]:
    return {scene.kind.value: scene.payload}
