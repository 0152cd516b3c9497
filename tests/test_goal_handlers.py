from werkzeug.test import EnvironBuilder
from werkzeug.wrappers import Request

from runeplan.goal import Goal, GoalType, RequirementProgress
from runeplan.goal_service import GoalNotFoundError, GoalService
from runeplan.handlers.goal import (
    activate_goal_handler,
    complete_goal_handler,
    planner_handler,
    toggle_requirement_handler,
)
from runeplan.templates.goal import goal_card, requirement_row
from runeplan.user import RSN, User, set_user


class FakeRepo:
    def __init__(self, goals=None, fail=False):
        self.goals = list(goals or [])
        self.fail = fail
        self.toggled = {}

    def list_by_rsn(self, rsn_id):
        if self.fail:
            raise RuntimeError("boom")
        return [g for g in self.goals if g.rsn_id == rsn_id]

    def activate(self, rsn_id, catalog_id):
        if self.fail:
            raise RuntimeError("boom")
        goal = Goal(id="new-id", rsn_id=rsn_id, catalog_id=catalog_id, title="Test Goal", type=GoalType.QUEST)
        self.goals.append(goal)
        return goal

    def complete(self, goal_id):
        for g in self.goals:
            if g.id == goal_id:
                g.completed = True
                return
        raise GoalNotFoundError()

    def toggle_requirement(self, goal_id, requirement_id):
        if self.fail:
            raise GoalNotFoundError()
        state = not self.toggled.get(requirement_id, False)
        self.toggled[requirement_id] = state
        return state


def make_user(with_rsn=True):
    rsns = [RSN(id="rsn1", user_id="u1", rsn="player")] if with_rsn else []
    return User(id="u1", rsns=rsns)


def make_request(method="GET", data=None, user=None):
    environ = EnvironBuilder(method=method, data=data).get_environ()
    if user is not None:
        environ = set_user(environ, user)
    return Request(environ)


def test_planner_redirects_without_user():
    resp = planner_handler(GoalService(FakeRepo()))(make_request())
    assert resp.status_code == 302
    assert resp.headers["Location"] == "/"


def test_planner_lists_goals():
    repo = FakeRepo([Goal(id="g1", rsn_id="rsn1", title="Dragon Slayer")])
    resp = planner_handler(GoalService(repo))(make_request(user=make_user()))
    assert resp.status_code == 200
    assert "Dragon Slayer" in resp.get_data(as_text=True)


def test_planner_without_rsn_renders_empty():
    repo = FakeRepo([Goal(id="g1", rsn_id="rsn1", title="Dragon Slayer")])
    resp = planner_handler(GoalService(repo))(make_request(user=make_user(False)))
    assert resp.status_code == 200
    assert "Dragon Slayer" not in resp.get_data(as_text=True)


def test_planner_list_failure_is_500():
    resp = planner_handler(GoalService(FakeRepo(fail=True)))(make_request(user=make_user()))
    assert resp.status_code == 500
    assert "Failed to load goals" in resp.get_data(as_text=True)


def test_activate_without_user_is_401_with_redirect_header():
    resp = activate_goal_handler(GoalService(FakeRepo()))(make_request("POST", {"catalog_id": "c1"}))
    assert resp.status_code == 401
    assert resp.headers["HX-Redirect"] == "/"


def test_activate_without_rsn_is_400():
    resp = activate_goal_handler(GoalService(FakeRepo()))(
        make_request("POST", {"catalog_id": "c1"}, make_user(False))
    )
    assert resp.status_code == 400
    assert "No RSN linked" in resp.get_data(as_text=True)


def test_activate_returns_card():
    repo = FakeRepo()
    resp = activate_goal_handler(GoalService(repo))(make_request("POST", {"catalog_id": "c1"}, make_user()))
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == goal_card(repo.goals[0])
    assert repo.goals[0].catalog_id == "c1"
    assert repo.goals[0].rsn_id == "rsn1"


def test_activate_failure_is_500():
    resp = activate_goal_handler(GoalService(FakeRepo(fail=True)))(
        make_request("POST", {"catalog_id": "c1"}, make_user())
    )
    assert resp.status_code == 500
    assert "Failed to activate goal" in resp.get_data(as_text=True)


def test_complete_returns_updated_card():
    repo = FakeRepo([Goal(id="g1", rsn_id="rsn1", title="Dragon Slayer")])
    resp = complete_goal_handler(GoalService(repo))(make_request("POST", user=make_user()), id="g1")
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Completed</span>" in body
    assert body == goal_card(repo.goals[0])


def test_complete_unknown_goal_is_500():
    resp = complete_goal_handler(GoalService(FakeRepo()))(make_request("POST", user=make_user()), id="nope")
    assert resp.status_code == 500
    assert "Failed to complete goal" in resp.get_data(as_text=True)


def test_complete_without_user_returns_empty_ok():
    repo = FakeRepo([Goal(id="g1", rsn_id="rsn1")])
    resp = complete_goal_handler(GoalService(repo))(make_request("POST"), id="g1")
    assert resp.status_code == 200
    assert resp.get_data() == b""
    assert repo.goals[0].completed is True


def test_toggle_flips_state():
    repo = FakeRepo()
    handler = toggle_requirement_handler(GoalService(repo))
    first = handler(make_request("POST", {"goal_id": "g1"}), id="r1")
    second = handler(make_request("POST", {"goal_id": "g1"}), id="r1")
    assert first.status_code == 200
    assert first.get_data(as_text=True) == requirement_row(
        RequirementProgress(goal_id="g1", requirement_id="r1", completed=True)
    )
    assert " checked" not in second.get_data(as_text=True)


def test_toggle_failure_is_500():
    resp = toggle_requirement_handler(GoalService(FakeRepo(fail=True)))(
        make_request("POST", {"goal_id": "g1"}), id="r1"
    )
    assert resp.status_code == 500
    assert "Failed to toggle" in resp.get_data(as_text=True)