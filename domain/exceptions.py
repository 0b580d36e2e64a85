# domain/exceptions.py
from __future__ import annotations

from typing import Any, Optional


class ValidationError(Exception):
    pass


class RobustiveError(Exception):
    """ユースケース実行（interaction）の失敗を表す基底例外"""


class NotAuthorizedError(RobustiveError):
    def __init__(self, usecase: str, scene: Any, actor: Any) -> None:
        self.usecase = usecase
        self.scene = scene
        self.actor = actor
        user_type = getattr(getattr(actor, "user_type", None), "value", actor)
        super().__init__(f"The usecase '{usecase}' is not authorized the actor '{user_type}'.")


class SystemFailureError(RobustiveError):
    def __init__(self, caused_by: Optional[BaseException], message: Optional[str] = None) -> None:
        self.caused_by = caused_by
        if message is None:
            message = f"The system error is occurred: '{caused_by}'."
        super().__init__(message)


class DepthLimitExceededError(SystemFailureError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(None, f"The scenario did not reach its goal within {limit} steps.")


class GoalNotReachedError(SystemFailureError):
    def __init__(self, scene: Any) -> None:
        self.scene = scene
        super().__init__(None, f"The scenario stopped at '{scene}' without reaching a goal.")
