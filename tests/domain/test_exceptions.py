# tests/domain/test_exceptions.py
from domain.actor import Actor
from domain.exceptions import (
    DepthLimitExceededError,
    GoalNotReachedError,
    NotAuthorizedError,
    RobustiveError,
    SystemFailureError,
)
from domain.scene import Basic


def test_not_authorized_message_uses_user_type():
    error = NotAuthorizedError("SignIn", Basic("input"), Actor.signed_in("alice"))
    assert str(error) == "The usecase 'SignIn' is not authorized the actor 'signedIn'."
    assert isinstance(error, RobustiveError)


def test_system_failure_wraps_cause():
    cause = TimeoutError("slow")
    error = SystemFailureError(cause)
    assert error.caused_by is cause
    assert str(error) == "The system error is occurred: 'slow'."


def test_depth_and_goal_errors_are_system_failures():
    assert isinstance(DepthLimitExceededError(10), SystemFailureError)
    assert isinstance(GoalNotReachedError(Basic("x")), SystemFailureError)
    assert "basic(x)" in str(GoalNotReachedError(Basic("x")))
    assert DepthLimitExceededError(10).caused_by is None
