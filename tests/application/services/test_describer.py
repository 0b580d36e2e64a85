# tests/application/services/test_describer.py
from application.services.describer import Description, SceneDescriber
from domain.actor import Actor
from domain.exceptions import NotAuthorizedError
from domain.scene import Alternate, Basic, Last
from domain.trace import Trace


class TestSceneDescriber:
    def test_describe_keeps_trace_order(self):
        trace = Trace(scenes=(Basic("A"), Alternate("B"), Basic("A"), Last("G")))

        description = SceneDescriber().describe("Checkout", trace, Actor.signed_in("alice"))

        assert description == Description(
            usecase="Checkout",
            actor="signedIn",
            steps=["basic(A)", "alternate(B)", "basic(A)", "goal(G)"],
        )

    def test_describe_untraced_has_no_steps(self):
        description = SceneDescriber().describe_untraced("SignIn", Actor.anonymous())

        assert description == Description(usecase="SignIn", actor="anonymous", steps=[])

    def test_render(self):
        description = Description(usecase="SignIn", actor="anonymous", steps=["basic(input)", "goal(done)"])

        assert description.render() == "[USECASE: SignIn interacted by anonymous\n    basic(input)\n    goal(done)]"

    def test_render_failure(self):
        actor = Actor.anonymous()
        description = SceneDescriber().describe_untraced("SignIn", actor)
        error = NotAuthorizedError("SignIn", Basic("input"), actor)

        assert description.render_failure(error) == (
            "[USECASE: SignIn interacted by anonymous\n"
            "    encountered: The usecase 'SignIn' is not authorized the actor 'anonymous'.]"
        )
