# tests/application/test_scenario_port.py
import asyncio
import inspect

import pytest

from application.ports.scenario import Scenario
from domain.scene import Basic, Last


class SignIn(Scenario[str, str, str]):
    def authorize(self, actor, usecase):
        return True

    def next(self, scene):
        if scene.is_last:
            return None
        return self.just(Last("signedIn"))


def test_name_defaults_to_class_name():
    assert SignIn().name == "SignIn"


def test_just_resolves_immediately():
    pending = SignIn().just(Basic("a"))
    assert inspect.isawaitable(pending)
    assert asyncio.run(pending) == Basic("a")


def test_scenario_is_abstract():
    with pytest.raises(TypeError):
        Scenario()
