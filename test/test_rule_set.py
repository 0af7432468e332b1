"""
Tests for RuleSet: fluent builder, editor modes, feature toggles and matching
"""

import pytest

from editor_support.models import (
    CANONICAL_FEATURES,
    EditorMode,
    FeatureAction,
    MatchKey,
    MatchKind,
    RuntimeContext,
)
from editor_support.rule_set import RuleSet


@pytest.fixture
def book_rules() -> RuleSet:
    return RuleSet(MatchKey.post_type("book"))


class TestRuleSetDefaults:
    def test_key_is_bound_at_construction(self, book_rules):
        assert book_rules.key == MatchKey(MatchKind.POST_TYPE, "book")

    def test_key_is_read_only(self, book_rules):
        with pytest.raises(AttributeError):
            book_rules.key = MatchKey.post_type("movie")  # type: ignore[misc]

    def test_editor_mode_defaults_to_unset(self, book_rules):
        assert book_rules.editor_mode is EditorMode.UNSET

    def test_no_feature_actions_initially(self, book_rules):
        assert book_rules.feature_actions == {}

    def test_feature_actions_returns_copy(self, book_rules):
        book_rules.enable_title()
        snapshot = book_rules.feature_actions
        snapshot["title"] = FeatureAction.DISABLE
        assert book_rules.feature_actions["title"] is FeatureAction.ENABLE


class TestFeatureToggles:
    def test_builder_methods_return_same_instance(self, book_rules):
        assert book_rules.enable_feature("title") is book_rules
        assert book_rules.disable_feature("title") is book_rules
        assert book_rules.enable_all() is book_rules
        assert book_rules.disable_all() is book_rules
        assert book_rules.set_classic_editor() is book_rules

    def test_enable_then_disable_last_write_wins(self, book_rules):
        book_rules.enable_feature("comments").disable_feature("comments")
        assert book_rules.feature_actions["comments"] is FeatureAction.DISABLE

    def test_disable_then_enable_last_write_wins(self, book_rules):
        book_rules.disable_feature("comments").enable_feature("comments")
        assert book_rules.feature_actions["comments"] is FeatureAction.ENABLE

    def test_non_canonical_feature_accepted(self, book_rules):
        book_rules.enable_feature("seo-box")
        assert book_rules.feature_actions == {"seo-box": FeatureAction.ENABLE}

    def test_enable_all_except_comments(self, book_rules):
        book_rules.enable_all(exclude={"comments"})
        actions = book_rules.feature_actions
        assert "comments" not in actions
        for feature in CANONICAL_FEATURES:
            if feature != "comments":
                assert actions[feature] is FeatureAction.ENABLE

    def test_disable_all_covers_every_canonical_feature(self, book_rules):
        book_rules.disable_all()
        assert book_rules.feature_actions == {f: FeatureAction.DISABLE for f in CANONICAL_FEATURES}

    def test_disable_all_accepts_any_iterable(self, book_rules):
        book_rules.disable_all(exclude=["title", "editor"])
        actions = book_rules.feature_actions
        assert "title" not in actions
        assert "editor" not in actions
        assert len(actions) == len(CANONICAL_FEATURES) - 2

    def test_enable_all_keeps_excluded_feature_previous_action(self, book_rules):
        book_rules.disable_comments().enable_all(exclude={"comments"})
        assert book_rules.feature_actions["comments"] is FeatureAction.DISABLE

    @pytest.mark.parametrize(
        ("method", "feature"),
        [
            ("title", "title"),
            ("author", "author"),
            ("thumbnail", "thumbnail"),
            ("custom_fields", "custom-fields"),
            ("page_attributes", "page-attributes"),
            ("post_formats", "post-formats"),
        ],
    )
    def test_per_feature_shortcuts(self, book_rules, method, feature):
        getattr(book_rules, f"enable_{method}")()
        assert book_rules.feature_actions[feature] is FeatureAction.ENABLE
        getattr(book_rules, f"disable_{method}")()
        assert book_rules.feature_actions[feature] is FeatureAction.DISABLE


class TestEditorMode:
    def test_rich_enables_editor_feature(self, book_rules):
        book_rules.set_editor_mode(EditorMode.RICH)
        assert book_rules.editor_mode is EditorMode.RICH
        assert book_rules.feature_actions["editor"] is FeatureAction.ENABLE

    def test_empty_disables_editor_feature(self, book_rules):
        book_rules.set_empty_editor()
        assert book_rules.editor_mode is EditorMode.EMPTY
        assert book_rules.feature_actions["editor"] is FeatureAction.DISABLE

    def test_classic_leaves_editor_feature_untouched(self, book_rules):
        book_rules.set_classic_editor()
        assert book_rules.editor_mode is EditorMode.CLASSIC
        assert "editor" not in book_rules.feature_actions

    def test_classic_keeps_earlier_editor_action(self, book_rules):
        book_rules.set_empty_editor().set_classic_editor()
        assert book_rules.feature_actions["editor"] is FeatureAction.DISABLE

    def test_editor_mode_accepts_string_value(self, book_rules):
        book_rules.set_editor_mode("rich")
        assert book_rules.editor_mode is EditorMode.RICH

    @pytest.mark.parametrize(
        ("mode", "denies", "exposes"),
        [
            (EditorMode.UNSET, False, False),
            (EditorMode.RICH, False, True),
            (EditorMode.CLASSIC, True, False),
            (EditorMode.EMPTY, True, False),
        ],
    )
    def test_editor_predicates(self, book_rules, mode, denies, exposes):
        book_rules.set_editor_mode(mode)
        assert book_rules.denies_rich_editor is denies
        assert book_rules.exposes_rich_editor is exposes


class TestMatchesContext:
    def test_post_type_matches(self):
        rules = RuleSet(MatchKey.post_type("book"))
        assert rules.matches_context(RuntimeContext(post_type="book"))
        assert not rules.matches_context(RuntimeContext(post_type="books"))

    def test_post_id_matches_only_id_field(self):
        rules = RuleSet(MatchKey.post_id(5))
        assert rules.matches_context(RuntimeContext(post_id=5))
        assert not rules.matches_context(RuntimeContext(post_type="5"))
        assert not rules.matches_context(RuntimeContext(template="5"))

    def test_template_matches(self):
        rules = RuleSet(MatchKey.template("templates/landing.php"))
        assert rules.matches_context(RuntimeContext(post_type="page", post_id=1, template="templates/landing.php"))
        assert not rules.matches_context(RuntimeContext(post_type="templates/landing.php"))

    def test_string_id_value_never_matches_int_context(self):
        rules = RuleSet(MatchKey(MatchKind.POST_ID, "5"))
        assert not rules.matches_context(RuntimeContext(post_id=5))

    def test_comparison_is_exact(self):
        rules = RuleSet(MatchKey.post_type("Book"))
        assert not rules.matches_context(RuntimeContext(post_type="book"))
        assert not rules.matches_context(RuntimeContext(post_type="Book "))

    def test_empty_context_matches_only_empty_keys(self):
        assert not RuleSet(MatchKey.post_type("book")).matches_context(RuntimeContext())
        assert RuleSet(MatchKey.template("")).matches_context(RuntimeContext())
