# tests/domain/test_trace.py
import pytest

from domain.exceptions import ValidationError
from domain.scene import Alternate, Basic, Last, Scene
from domain.trace import Trace


class TestTrace:
    def test_start_contains_one_scene(self):
        trace = Trace.start(Basic("a"))
        assert len(trace) == 1
        assert trace.last == Basic("a")
        assert trace.is_complete is False
        assert trace.goal is None

    def test_appended_returns_new_trace(self):
        trace = Trace.start(Basic("a"))
        longer = trace.appended(Alternate("b")).appended(Last("g"))

        assert len(trace) == 1
        assert list(longer) == [Basic("a"), Alternate("b"), Last("g")]
        assert longer[1] == Alternate("b")
        assert longer.is_complete is True
        assert longer.goal == "g"

    def test_empty_trace_is_rejected(self):
        with pytest.raises(ValidationError):
            Trace(scenes=())

    def test_goal_must_be_at_tail(self):
        with pytest.raises(ValidationError):
            Trace(scenes=(Basic("a"), Last("g"), Basic("b")))

    def test_cannot_append_after_goal(self):
        trace = Trace(scenes=(Basic("a"), Last("g")))
        with pytest.raises(ValidationError):
            trace.appended(Last("g2"))

    def test_non_scene_is_rejected(self):
        with pytest.raises(ValidationError):
            Trace(scenes=(Basic("a"), "b"))

    def test_untagged_scene_is_rejected(self):
        with pytest.raises(ValidationError):
            Trace(scenes=(Basic("a"), Scene("b")))

    def test_duplicates_are_kept(self):
        trace = Trace(scenes=(Basic("a"), Basic("a"), Last("g")))
        assert len(trace) == 3
