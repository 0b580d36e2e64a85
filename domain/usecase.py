# domain/usecase.py
"""
Declarative use case definition: a start scene plus a transition table.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from domain.actor import UserType
from domain.exceptions import ValidationError
from domain.scene import Scene


@dataclass(frozen=True)
class Transition:
    source: Scene
    target: Scene


@dataclass(frozen=True)
class UsecaseDefinition:
    name: str
    start: Scene
    transitions: Tuple[Transition, ...] = ()
    # 空なら誰でも実行可能
    allowed_user_types: Tuple[UserType, ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        # list で渡されても tuple に揃える（hash 可能にする）
        object.__setattr__(self, "transitions", tuple(self.transitions))
        object.__setattr__(self, "allowed_user_types", tuple(self.allowed_user_types))

        if not self.name or not self.name.strip():
            raise ValidationError("Usecase name must not be empty")

        seen: Dict[Scene, Scene] = {}
        for transition in self.transitions:
            if transition.source.is_last:
                raise ValidationError(f"Goal scene must not have a successor: {transition.source}")
            if transition.source in seen:
                raise ValidationError(f"Duplicate transition from scene: {transition.source}")
            seen[transition.source] = transition.target

    def successor(self, scene: Scene) -> Optional[Scene]:
        for transition in self.transitions:
            if transition.source == scene:
                return transition.target
        return None
