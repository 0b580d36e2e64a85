# tests/domain/test_scene.py
from enum import Enum

import pytest

from domain.exceptions import ValidationError
from domain.scene import (
    Alternate,
    Basic,
    Last,
    Scene,
    SceneKind,
    scene_from_mapping,
    scene_to_mapping,
)


class Step(Enum):
    INPUT_CREDENTIALS = 1


class TestScene:
    def test_variants_have_kind_and_label(self):
        assert Basic("a").kind is SceneKind.BASIC
        assert Alternate("a").kind is SceneKind.ALTERNATE
        assert Last("a").kind is SceneKind.LAST
        assert [Basic("a").label, Alternate("a").label, Last("a").label] == ["basic", "alternate", "goal"]

    def test_only_last_is_last(self):
        assert Last("g").is_last is True
        assert Basic("g").is_last is False
        assert Alternate("g").is_last is False

    def test_variants_with_same_payload_are_different(self):
        assert Basic("x") == Basic("x")
        assert Basic("x") != Alternate("x")
        assert Basic("x") != Last("x")

    def test_scene_hashable(self):
        scenes = {Basic("x"), Basic("x"), Last("x")}
        assert len(scenes) == 2

    def test_str_renders_tagged_payload(self):
        assert str(Basic("inputCredentials")) == "basic(inputCredentials)"
        assert str(Alternate(404)) == "alternate(404)"
        assert str(Last("signedIn")) == "goal(signedIn)"

    def test_str_renders_enum_payload_by_name(self):
        assert str(Basic(Step.INPUT_CREDENTIALS)) == "basic(INPUT_CREDENTIALS)"

    def test_scene_frozen(self):
        scene = Basic("x")
        with pytest.raises(Exception):  # FrozenInstanceError
            scene.payload = "y"

    def test_untagged_scene_is_rejected(self):
        with pytest.raises(ValidationError):
            Scene("x")

    def test_subclass_without_kind_is_rejected(self):
        class Untagged(Scene):
            pass

        with pytest.raises(ValidationError):
            Untagged("x")


class TestSceneMapping:
    @pytest.mark.parametrize(
        "data, expected",
        [
            ({"basic": "a"}, Basic("a")),
            ({"alternate": "b"}, Alternate("b")),
            ({"last": "g"}, Last("g")),
            ({"goal": "g"}, Last("g")),
            ({"BASIC": 1}, Basic(1)),
        ],
    )
    def test_scene_from_mapping(self, data, expected):
        assert scene_from_mapping(data) == expected

    @pytest.mark.parametrize(
        "data",
        [
            None,
            "basic",
            {},
            {"basic": "a", "last": "g"},
            {"unknown": "a"},
            {"basic": None},
            {"basic": {"nested": True}},
            {"basic": ["a"]},
        ],
    )
    def test_scene_from_mapping_rejects_malformed(self, data):
        with pytest.raises(ValidationError):
            scene_from_mapping(data)

    def test_scene_to_mapping_uses_kind(self):
        assert scene_to_mapping(Last("g")) == {"last": "g"}
        assert scene_to_mapping(Alternate("b")) == {"alternate": "b"}
