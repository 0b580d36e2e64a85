# application/services/describer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from domain.actor import Actor
from domain.trace import Trace


@dataclass(frozen=True)
class Description:
    usecase: str
    actor: str
    steps: List[str]

    def render(self) -> str:
        lines = "\n    ".join(self.steps)
        return f"[USECASE: {self.usecase} interacted by {self.actor}\n    {lines}]"

    def render_failure(self, error: BaseException) -> str:
        return f"[USECASE: {self.usecase} interacted by {self.actor}\n    encountered: {error}]"


class SceneDescriber:
    """実行したユースケース名・アクター種別・通過したシーンを読みやすい形にする"""

    def describe(self, usecase: str, trace: Trace, actor: Actor[Any]) -> Description:
        return Description(
            usecase=usecase,
            actor=actor.user_type.value,
            steps=[str(scene) for scene in trace],
        )

    def describe_untraced(self, usecase: str, actor: Actor[Any]) -> Description:
        # 権限確認の段階で止まった場合は trace が存在しない
        return Description(usecase=usecase, actor=actor.user_type.value, steps=[])
