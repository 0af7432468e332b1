"""
Tests for the editor support inspection routes and the reference app
"""

import json

import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def client(registry, features, posts, tmp_path):
    rules_file = tmp_path / "editor_support.json"
    rules_file.write_text(
        json.dumps(
            {
                "rules": [
                    {"match": "post_type", "value": "book", "editor": "classic", "disable": ["comments"]},
                    {"match": "post_id", "value": 42, "editor": "rich"},
                ]
            }
        ),
        encoding="utf-8",
    )
    features.add_support("book", "comments")
    features.add_support("book", "title")
    app = create_app(registry=registry, features=features, posts=posts, rules_file=str(rules_file))
    with TestClient(app) as test_client:
        yield test_client


class TestRuleRoutes:
    def test_paths_registered(self, client):
        paths = [r.path for r in client.app.routes]
        assert "/api/v1/editor-support/rules" in paths
        assert "/api/v1/editor-support/rules/{kind}/{value:path}" in paths
        assert "/api/v1/editor-support/preview" in paths

    def test_list_rules(self, client):
        response = client.get("/api/v1/editor-support/rules")
        assert response.status_code == 200
        body = response.json()
        assert [r["match"] for r in body] == ["post_type", "post_id"]
        assert body[0] == {
            "match": "post_type",
            "value": "book",
            "editor_mode": "classic",
            "feature_actions": {"comments": "disable"},
        }
        assert body[1]["value"] == 42
        assert body[1]["feature_actions"] == {"editor": "enable"}

    def test_get_rule_by_id(self, client):
        response = client.get("/api/v1/editor-support/rules/post_id/42")
        assert response.status_code == 200
        assert response.json()["editor_mode"] == "rich"

    def test_get_template_rule_with_slash_in_slug(self, client, registry):
        registry.from_template("templates/landing.php").set_classic_editor()
        response = client.get("/api/v1/editor-support/rules/template/templates/landing.php")
        assert response.status_code == 200
        body = response.json()
        assert body["value"] == "templates/landing.php"
        assert body["editor_mode"] == "classic"

    def test_unknown_template_with_slash_uses_error_format(self, client):
        response = client.get("/api/v1/editor-support/rules/template/templates/missing.php")
        assert response.status_code == 404
        assert response.json()["error"]["details"] == {"kind": "template", "value": "templates/missing.php"}

    def test_get_unknown_rule_is_404_and_not_created(self, client, registry):
        response = client.get("/api/v1/editor-support/rules/post_type/movie")
        assert response.status_code == 404
        error = response.json()["error"]
        assert error["details"] == {"kind": "post_type", "value": "movie"}
        assert len(registry) == 2

    def test_unknown_kind_is_validation_error(self, client):
        response = client.get("/api/v1/editor-support/rules/category/news")
        assert response.status_code == 422

    def test_preview_classic_book(self, client):
        response = client.get("/api/v1/editor-support/preview", params={"page": "post.php", "post": "9"})
        assert response.status_code == 200
        body = response.json()
        assert body["context"] == {"post_type": "book", "post_id": 9, "template": ""}
        assert body["matched_rules"] == 1
        assert body["feature_actions"] == {"comments": "disable"}
        assert body["show_in_rest"] is False
        assert body["can_use_rich_editor"] is False

    def test_preview_rich_post(self, client):
        body = client.get("/api/v1/editor-support/preview", params={"page": "post.php", "post": "42"}).json()
        assert body["show_in_rest"] is True
        assert body["can_use_rich_editor"] is True

    def test_preview_new_screen_without_post_type_never_forces_show_in_rest(self, client, registry):
        registry.from_post_type("post").set_rich_editor()
        body = client.get("/api/v1/editor-support/preview", params={"page": "post-new.php"}).json()
        assert body["context"]["post_type"] == "post"
        assert body["feature_actions"] == {"editor": "enable"}
        assert body["show_in_rest"] is False

    def test_preview_new_screen_with_post_type_forces_show_in_rest(self, client, registry):
        registry.from_post_type("post").set_rich_editor()
        params = {"page": "post-new.php", "post_type": "post"}
        body = client.get("/api/v1/editor-support/preview", params=params).json()
        assert body["show_in_rest"] is True

    def test_preview_without_match(self, client):
        body = client.get("/api/v1/editor-support/preview", params={"page": "edit.php"}).json()
        assert body["matched_rules"] == 0
        assert body["feature_actions"] == {}
        assert body["can_use_rich_editor"] is True


class TestAdminScreen:
    def test_admin_screen_fires_hooks(self, client, features):
        response = client.get("/admin/post.php", params={"post": "9"})
        assert response.status_code == 200
        body = response.json()
        assert body["post_type"] == "book"
        assert body["use_block_editor"] is False
        assert body["features"]["comments"] is False
        assert body["features"]["title"] is True
        assert not features.supports("book", "comments")

    def test_admin_screen_for_unconfigured_type(self, client):
        body = client.get("/admin/post-new.php", params={"post_type": "movie"}).json()
        assert body["post_type"] == "movie"
        assert body["use_block_editor"] is True


class TestStartup:
    def test_rules_load_when_app_starts(self, registry, tmp_path):
        rules_file = tmp_path / "editor_support.json"
        rules_file.write_text(json.dumps({"rules": [{"match": "post_type", "value": "book"}]}), encoding="utf-8")
        app = create_app(registry=registry, rules_file=str(rules_file))
        assert len(registry) == 0

        with TestClient(app) as test_client:
            assert len(registry) == 1
            assert test_client.get("/api/v1/editor-support/rules/post_type/book").status_code == 200
