# application/interactor/scenario_interactor.py
from __future__ import annotations

import asyncio
import inspect
import time
import uuid
from typing import Any, Awaitable, Callable, List, Optional

from application.outcome import Completion, InteractionResult
from application.ports.dispatcher import CompletionDispatcherPort
from application.ports.logger import LoggerPort
from application.ports.reporter import ReporterPort
from application.ports.scenario import Scenario
from application.services.describer import SceneDescriber
from domain.actor import Actor
from domain.exceptions import (
    DepthLimitExceededError,
    GoalNotReachedError,
    NotAuthorizedError,
    RobustiveError,
    SystemFailureError,
    ValidationError,
)
from domain.scene import Scene
from domain.trace import Trace


class ScenarioInteractor:
    def __init__(
        self,
        logger: LoggerPort,
        reporter: Optional[ReporterPort] = None,
        max_depth: Optional[int] = None,
        dispatcher: Optional[CompletionDispatcherPort] = None,
    ):
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be positive: {max_depth}")
        self._logger = logger
        self._reporter = reporter
        self._max_depth = max_depth
        self._dispatcher = dispatcher
        self._describer = SceneDescriber()

    async def interact(self, scenario: Scenario, start: Scene, actor: Actor[Any]) -> InteractionResult:
        if not isinstance(start, Scene):
            raise ValidationError(f"Interaction must start from a scene: {start!r}")

        log = self._logger.bind(interaction_id=uuid.uuid4().hex, usecase=scenario.name)
        log.info("interaction.start", user_type=actor.user_type.value, scene=str(start))
        t0 = time.perf_counter()

        # 権限確認（最初に一度だけ）。ここで止まったら trace は作らない
        try:
            authorized = scenario.authorize(actor, start)
        except Exception as e:
            raise self._fail(log, scenario, [], actor, SystemFailureError(e)) from e

        if not authorized:
            log.warning("interaction.not_authorized", user_type=actor.user_type.value)
            raise self._fail(log, scenario, [], actor, NotAuthorizedError(scenario.name, start, actor))

        # この interaction だけが所有する（他の interaction とは共有しない）
        scenes: List[Scene] = [start]

        while True:
            current = scenes[-1]
            try:
                pending = scenario.next(current)
            except Exception as e:
                raise self._fail(log, scenario, scenes, actor, SystemFailureError(e)) from e

            # 終了条件: next() が None を返したらシナリオ終了
            if pending is None:
                break

            step = len(scenes)
            if current.is_last:
                _discard(pending)
                cause = ValidationError(f"Goal scene must not have a successor: {current}")
                raise self._fail(log, scenario, scenes, actor, SystemFailureError(cause)) from cause
            if self._max_depth is not None and step > self._max_depth:
                _discard(pending)
                raise self._fail(log, scenario, scenes, actor, DepthLimitExceededError(self._max_depth))

            try:
                scene = await pending
                if not isinstance(scene, Scene):
                    raise TypeError(f"next() must produce a Scene, got {type(scene).__name__}")
            except Exception as e:
                raise self._fail(log, scenario, scenes, actor, SystemFailureError(e)) from e

            scenes.append(scene)
            log.debug("scene.next", step=step, source=str(current), target=str(scene))

        trace = Trace(scenes=tuple(scenes))
        if not trace.is_complete:
            raise self._fail(log, scenario, scenes, actor, GoalNotReachedError(trace.last))

        log.info(
            "interaction.end",
            ok=True,
            steps=len(trace) - 1,
            goal=str(trace.last),
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )
        if self._reporter is not None:
            try:
                self._reporter.completed(self._describer.describe(scenario.name, trace, actor))
            except Exception as e:
                log.error("report.failed", error_type=type(e).__name__, error=str(e))

        return InteractionResult(goal=trace.goal, trace=trace)

    def interacted(
        self,
        scenario: Scenario,
        start: Scene,
        actor: Actor[Any],
        receive_value: Callable[[Any, Trace], None],
        receive_completion: Optional[Callable[[Completion], None]] = None,
    ) -> "asyncio.Task[InteractionResult]":
        """
        Callback flavour of interact().

        Must be called from a running event loop. The returned task can be
        cancelled to abandon the interaction; a cancelled task reports nothing.
        """
        task = asyncio.get_running_loop().create_task(self.interact(scenario, start, actor))

        def _on_done(done: "asyncio.Task[InteractionResult]") -> None:
            if done.cancelled():
                return
            error = done.exception()
            if error is not None:
                if receive_completion is not None:
                    self._deliver(receive_completion, Completion.failure(error))
                return
            result = done.result()
            if receive_completion is not None:
                self._deliver(receive_completion, Completion.finished())
            self._deliver(receive_value, result.goal, result.trace)

        task.add_done_callback(_on_done)
        return task

    def _deliver(self, callback: Callable[..., None], *args: Any) -> None:
        if self._dispatcher is None:
            callback(*args)
        else:
            self._dispatcher.dispatch(callback, *args)

    def _fail(
        self,
        log: LoggerPort,
        scenario: Scenario,
        scenes: List[Scene],
        actor: Actor[Any],
        error: RobustiveError,
    ) -> RobustiveError:
        log.error(
            "interaction.failed",
            error_type=type(error).__name__,
            error=str(error),
            steps=max(len(scenes) - 1, 0),
            last_scene=str(scenes[-1]) if scenes else None,
        )
        if self._reporter is not None:
            # 途中までの trace は診断（レポート）にだけ渡す
            if scenes:
                description = self._describer.describe(scenario.name, Trace(scenes=tuple(scenes)), actor)
            else:
                description = self._describer.describe_untraced(scenario.name, actor)
            try:
                self._reporter.failed(description, error)
            except Exception as e:
                # レポーターの失敗で元のエラーを置き換えない
                log.error("report.failed", error_type=type(e).__name__, error=str(e))
        return error


def _discard(pending: Awaitable[Any]) -> None:
    # await しないコルーチンは閉じ、スケジュール済みの Task / Future は取り消す
    if inspect.iscoroutine(pending):
        pending.close()
    elif isinstance(pending, asyncio.Future):
        pending.cancel()
