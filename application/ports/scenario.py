# application/ports/scenario.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Generic, Optional, TypeVar

from domain.actor import Actor
from domain.scene import Scene

B = TypeVar("B")
A = TypeVar("A")
G = TypeVar("G")


async def _resolved(scene: Scene) -> Scene:
    return scene


class Scenario(ABC, Generic[B, A, G]):
    """
    One use case: who may run it (authorize) and what comes after each scene (next).

    B, A and G are the payload types of its Basic, Alternate and Last scenes.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def authorize(self, actor: Actor[Any], usecase: Scene) -> bool:
        """
        Whether the actor may run this use case at all.

        Called once before the first step. Raise when authorization cannot be
        computed; return False when the actor is simply not allowed.
        """
        ...

    @abstractmethod
    def next(self, scene: Scene) -> Optional[Awaitable[Scene]]:
        """
        None when the scene has no successor (the scenario is over),
        otherwise an awaitable producing the next scene.
        """
        ...

    def just(self, next_scene: Scene) -> Awaitable[Scene]:
        """Wrap an already-known scene so it can be returned from next()."""
        return _resolved(next_scene)
