# application/services/definition_scenario.py
from __future__ import annotations

from typing import Any, Awaitable, Dict, Optional

from application.ports.scenario import Scenario
from domain.actor import Actor
from domain.exceptions import ValidationError
from domain.scene import Scene
from domain.usecase import UsecaseDefinition


class DefinitionScenario(Scenario[Any, Any, Any]):
    """Scenario driven by a declarative UsecaseDefinition (YAML / JSON)."""

    def __init__(self, definition: UsecaseDefinition):
        self._definition = definition
        self._successors: Dict[Scene, Scene] = {t.source: t.target for t in definition.transitions}

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def definition(self) -> UsecaseDefinition:
        return self._definition

    def authorize(self, actor: Actor[Any], usecase: Scene) -> bool:
        if usecase != self._definition.start:
            raise ValidationError(
                f"Usecase '{self._definition.name}' starts at {self._definition.start}, not {usecase}"
            )
        allowed = self._definition.allowed_user_types
        if not allowed:
            return True
        return actor.user_type in allowed

    def next(self, scene: Scene) -> Optional[Awaitable[Scene]]:
        target = self._successors.get(scene)
        if target is None:
            return None
        return self.just(target)
