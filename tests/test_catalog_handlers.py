from werkzeug.test import EnvironBuilder
from werkzeug.wrappers import Request

from runeplan.catalog import CatalogGoal
from runeplan.catalog_service import CatalogNotFoundError, CatalogService
from runeplan.goal import GoalType
from runeplan.handlers.catalog import browse_handler, catalog_detail_handler


class FakeCatalogRepo:
    def __init__(self, goals=None, fail=False):
        self.goals = list(goals or [])
        self.fail = fail

    def list_all(self):
        return list(self.goals)

    def list_by_type(self, goal_type):
        if self.fail:
            raise RuntimeError("db down")
        return [g for g in self.goals if g.type == goal_type]

    def get_by_id(self, goal_id):
        for g in self.goals:
            if g.id == goal_id:
                return g
        raise CatalogNotFoundError()


def _request(path, headers=None):
    return Request(EnvironBuilder(path=path, headers=headers or {}).get_environ())


def test_browse_handler_returns_page():
    repo = FakeCatalogRepo([CatalogGoal(id="1", type=GoalType.QUEST, title="Dragon Slayer")])
    handler = browse_handler(CatalogService(repo))
    response = handler(_request("/browse?type=quest"))
    assert response.status_code == 200
    assert "Dragon Slayer" in response.get_data(as_text=True)


def test_catalog_detail_handler_not_found():
    handler = catalog_detail_handler(CatalogService(FakeCatalogRepo()))
    response = handler(_request("/browse/catalog/missing"), id="missing")
    assert response.status_code == 404
    assert "Goal not found" in response.get_data(as_text=True)


def test_browse_handler_invalid_type_falls_back_to_quests():
    repo = FakeCatalogRepo([
        CatalogGoal(id="1", type=GoalType.QUEST, title="Dragon Slayer"),
        CatalogGoal(id="2", type=GoalType.DIARY, title="Varrock Easy"),
    ])
    handler = browse_handler(CatalogService(repo))
    body = handler(_request("/browse?type=bogus")).get_data(as_text=True)
    assert "Dragon Slayer" in body
    assert "Varrock Easy" not in body


def test_browse_handler_htmx_returns_fragment_only():
    repo = FakeCatalogRepo([CatalogGoal(id="2", type=GoalType.DIARY, title="Varrock Easy")])
    handler = browse_handler(CatalogService(repo))
    response = handler(_request("/browse?type=diary", headers={"HX-Request": "true"}))
    body = response.get_data(as_text=True)
    assert response.status_code == 200
    assert "Varrock Easy" in body
    assert "<!doctype html>" not in body


def test_browse_handler_repository_failure():
    handler = browse_handler(CatalogService(FakeCatalogRepo(fail=True)))
    response = handler(_request("/browse"))
    assert response.status_code == 500
    assert "Failed to load goals" in response.get_data(as_text=True)


def test_catalog_detail_handler_found():
    repo = FakeCatalogRepo([CatalogGoal(id="7", type=GoalType.QUEST, title="Monkey Madness")])
    handler = catalog_detail_handler(CatalogService(repo))
    response = handler(_request("/browse/catalog/7"), id="7")
    assert response.status_code == 200
    assert "<title>Monkey Madness — RunePlan</title>" in response.get_data(as_text=True)
    assert response.content_type == "text/html; charset=utf-8"