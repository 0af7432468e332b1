"""
Rule Set

RuleSet: fluent builder accumulating an editor mode and per-feature
enable/disable actions for one MatchKey, plus the predicates used when the
host evaluates it against a RuntimeContext.

Every builder method returns the same instance so calls can be chained:

    registry.from_post_type("book").set_classic_editor().disable_comments()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from editor_support.models import (
    CANONICAL_FEATURES,
    FEATURE_AUTHOR,
    FEATURE_COMMENTS,
    FEATURE_CUSTOM_FIELDS,
    FEATURE_EDITOR,
    FEATURE_EXCERPT,
    FEATURE_PAGE_ATTRIBUTES,
    FEATURE_POST_FORMATS,
    FEATURE_REVISIONS,
    FEATURE_THUMBNAIL,
    FEATURE_TITLE,
    FEATURE_TRACKBACKS,
    EditorMode,
    FeatureAction,
    MatchKey,
    RuntimeContext,
)

logger = logging.getLogger(__name__)


class RuleSet:
    """
    Editor mode and feature toggles bound to exactly one MatchKey.

    The key is fixed at construction; there is no way to rebind it.
    Feature actions are last-write-wins per feature name.
    """

    def __init__(self, key: MatchKey) -> None:
        self._key = key
        self._editor_mode = EditorMode.UNSET
        self._feature_actions: dict[str, FeatureAction] = {}

    def __repr__(self) -> str:
        return f"RuleSet(key={self._key!s}, editor_mode={self._editor_mode.value})"

    # ── Read accessors ────────────────────────────────────────────────────────

    @property
    def key(self) -> MatchKey:
        return self._key

    @property
    def editor_mode(self) -> EditorMode:
        return self._editor_mode

    @property
    def feature_actions(self) -> dict[str, FeatureAction]:
        """Return a copy of the accumulated feature actions."""
        return dict(self._feature_actions)

    @property
    def exposes_rich_editor(self) -> bool:
        return self._editor_mode is EditorMode.RICH

    @property
    def denies_rich_editor(self) -> bool:
        return self._editor_mode in (EditorMode.CLASSIC, EditorMode.EMPTY)

    # ── Matching ──────────────────────────────────────────────────────────────

    def matches_context(self, ctx: RuntimeContext) -> bool:
        """
        Return True if this rule set applies to the given context.

        Only the context field selected by the key's kind is compared, and
        the comparison is exact (an id of 5 never matches a post type "5").
        """
        candidate = ctx.value_for(self._key.kind)
        value = self._key.value
        return type(candidate) is type(value) and candidate == value

    # ── Editor mode ───────────────────────────────────────────────────────────

    def set_editor_mode(self, mode: EditorMode) -> RuleSet:
        """
        Select the editor for matching screens.

        RICH also enables the "editor" feature and EMPTY disables it;
        CLASSIC leaves the feature actions alone.
        """
        self._editor_mode = EditorMode(mode)
        if self._editor_mode is EditorMode.RICH:
            self.enable_feature(FEATURE_EDITOR)
        elif self._editor_mode is EditorMode.EMPTY:
            self.disable_feature(FEATURE_EDITOR)
        logger.debug("Editor mode for %s set to %s", self._key, self._editor_mode.value)
        return self

    def set_rich_editor(self) -> RuleSet:
        return self.set_editor_mode(EditorMode.RICH)

    def set_classic_editor(self) -> RuleSet:
        return self.set_editor_mode(EditorMode.CLASSIC)

    def set_empty_editor(self) -> RuleSet:
        return self.set_editor_mode(EditorMode.EMPTY)

    # ── Generic feature toggles ───────────────────────────────────────────────

    def enable_feature(self, name: str) -> RuleSet:
        self._feature_actions[name] = FeatureAction.ENABLE
        return self

    def disable_feature(self, name: str) -> RuleSet:
        self._feature_actions[name] = FeatureAction.DISABLE
        return self

    def enable_all(self, exclude: Iterable[str] = ()) -> RuleSet:
        """Enable every canonical feature whose name is not in ``exclude``."""
        excluded = set(exclude)
        for feature in CANONICAL_FEATURES:
            if feature not in excluded:
                self.enable_feature(feature)
        return self

    def disable_all(self, exclude: Iterable[str] = ()) -> RuleSet:
        """Disable every canonical feature whose name is not in ``exclude``."""
        excluded = set(exclude)
        for feature in CANONICAL_FEATURES:
            if feature not in excluded:
                self.disable_feature(feature)
        return self

    # ── Per-feature shortcuts ─────────────────────────────────────────────────

    def enable_title(self) -> RuleSet:
        return self.enable_feature(FEATURE_TITLE)

    def disable_title(self) -> RuleSet:
        return self.disable_feature(FEATURE_TITLE)

    def enable_editor(self) -> RuleSet:
        return self.enable_feature(FEATURE_EDITOR)

    def disable_editor(self) -> RuleSet:
        return self.disable_feature(FEATURE_EDITOR)

    def enable_author(self) -> RuleSet:
        return self.enable_feature(FEATURE_AUTHOR)

    def disable_author(self) -> RuleSet:
        return self.disable_feature(FEATURE_AUTHOR)

    def enable_thumbnail(self) -> RuleSet:
        return self.enable_feature(FEATURE_THUMBNAIL)

    def disable_thumbnail(self) -> RuleSet:
        return self.disable_feature(FEATURE_THUMBNAIL)

    def enable_excerpt(self) -> RuleSet:
        return self.enable_feature(FEATURE_EXCERPT)

    def disable_excerpt(self) -> RuleSet:
        return self.disable_feature(FEATURE_EXCERPT)

    def enable_trackbacks(self) -> RuleSet:
        return self.enable_feature(FEATURE_TRACKBACKS)

    def disable_trackbacks(self) -> RuleSet:
        return self.disable_feature(FEATURE_TRACKBACKS)

    def enable_custom_fields(self) -> RuleSet:
        return self.enable_feature(FEATURE_CUSTOM_FIELDS)

    def disable_custom_fields(self) -> RuleSet:
        return self.disable_feature(FEATURE_CUSTOM_FIELDS)

    def enable_comments(self) -> RuleSet:
        return self.enable_feature(FEATURE_COMMENTS)

    def disable_comments(self) -> RuleSet:
        return self.disable_feature(FEATURE_COMMENTS)

    def enable_revisions(self) -> RuleSet:
        return self.enable_feature(FEATURE_REVISIONS)

    def disable_revisions(self) -> RuleSet:
        return self.disable_feature(FEATURE_REVISIONS)

    def enable_page_attributes(self) -> RuleSet:
        return self.enable_feature(FEATURE_PAGE_ATTRIBUTES)

    def disable_page_attributes(self) -> RuleSet:
        return self.disable_feature(FEATURE_PAGE_ATTRIBUTES)

    def enable_post_formats(self) -> RuleSet:
        return self.enable_feature(FEATURE_POST_FORMATS)

    def disable_post_formats(self) -> RuleSet:
        return self.disable_feature(FEATURE_POST_FORMATS)
