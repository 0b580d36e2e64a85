# domain/trace.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from domain.exceptions import ValidationError
from domain.scene import Scene


@dataclass(frozen=True)
class Trace:
    """
    Ordered scenes visited during one interaction (start first).

    Invariants: never empty, and a Last scene may only appear once, at the tail.
    """
    scenes: Tuple[Scene, ...]

    def __post_init__(self) -> None:
        if not self.scenes:
            raise ValidationError("Trace must contain at least the starting scene")
        for scene in self.scenes:
            if not isinstance(scene, Scene):
                raise ValidationError(f"Trace accepts scenes only: {scene!r}")
        for scene in self.scenes[:-1]:
            if scene.is_last:
                raise ValidationError(f"Goal scene must be the last element of a trace: {scene}")

    @classmethod
    def start(cls, scene: Scene) -> "Trace":
        return cls(scenes=(scene,))

    def appended(self, scene: Scene) -> "Trace":
        return Trace(scenes=self.scenes + (scene,))

    @property
    def last(self) -> Scene:
        return self.scenes[-1]

    @property
    def is_complete(self) -> bool:
        return self.last.is_last

    @property
    def goal(self) -> Optional[Any]:
        if not self.is_complete:
            return None
        return self.last.payload

    def __len__(self) -> int:
        return len(self.scenes)

    def __iter__(self) -> Iterator[Scene]:
        return iter(self.scenes)

    def __getitem__(self, index: int) -> Scene:
        return self.scenes[index]
