"""
Editor Support Integration

EditorSupport: connects a RuleRegistry to the host's extension points.

    admin.init                            → sync_features()
    post_type.register_args               → filter_post_type_args()
    editor.use_block_editor_for_post_type → filter_can_use_rich_editor()
    editor.gutenberg_can_edit_post_type   → filter_can_use_rich_editor()

Nothing is wired at construction time; the host calls register() with its
HookRegistry once the integration object exists.  The evaluate_* methods
take an explicit RuntimeContext and can be used without any hooks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from editor_support.context import resolve_context, resolve_for_post_type
from editor_support.dispatcher import HookRegistry
from editor_support.hooks import (
    DEFAULT_PRIORITY,
    HOOK_ADMIN_INIT,
    HOOK_GUTENBERG_CAN_EDIT,
    HOOK_POST_TYPE_ARGS,
    HOOK_USE_BLOCK_EDITOR,
)
from editor_support.host import FeatureRegistry, PostLookup
from editor_support.middleware import AdminRequest, current_admin_request
from editor_support.models import FeatureAction, RuntimeContext
from editor_support.registry import RuleRegistry

logger = logging.getLogger(__name__)

SHOW_IN_REST = "show_in_rest"


class EditorSupport:
    """Apply editor support rules at the host's extension points."""

    def __init__(
        self,
        rules: RuleRegistry,
        features: FeatureRegistry,
        posts: PostLookup,
        request_provider: Callable[[], AdminRequest] = current_admin_request,
    ) -> None:
        self.rules = rules
        self.features = features
        self.posts = posts
        self._request_provider = request_provider

    def register(self, hooks: HookRegistry, priority: int = DEFAULT_PRIORITY) -> None:
        """Attach the callbacks to the host's hooks."""
        hooks.add_action(HOOK_ADMIN_INIT, self.sync_features, priority)
        hooks.add_filter(HOOK_POST_TYPE_ARGS, self.filter_post_type_args, priority)
        hooks.add_filter(HOOK_USE_BLOCK_EDITOR, self.filter_can_use_rich_editor, priority)
        hooks.add_filter(HOOK_GUTENBERG_CAN_EDIT, self.filter_can_use_rich_editor, priority)
        logger.info("Editor support hooks registered")

    # ── Context-driven evaluation ─────────────────────────────────────────────

    def evaluate_features(self, ctx: RuntimeContext) -> dict[str, FeatureAction]:
        """
        Merge the feature actions of every rule set matching ``ctx``.

        Rule sets are merged in registration order, so a later rule set's
        action for a feature overrides an earlier one's.
        """
        merged: dict[str, FeatureAction] = {}
        for rule_set in self.rules.matching(ctx):
            merged.update(rule_set.feature_actions)
        return merged

    def evaluate_post_type_args(self, ctx: RuntimeContext, args: dict[str, Any]) -> dict[str, Any]:
        """Return ``args`` with show_in_rest forced on if a matching rule wants the rich editor."""
        if any(rule_set.exposes_rich_editor for rule_set in self.rules.matching(ctx)):
            return {**args, SHOW_IN_REST: True}
        return args

    def evaluate_can_use_rich_editor(self, ctx: RuntimeContext, default: bool) -> bool:
        """Return False if a matching rule selects the classic or empty editor, else ``default``."""
        if any(rule_set.denies_rich_editor for rule_set in self.rules.matching(ctx)):
            return False
        return default

    # ── Hook callbacks ────────────────────────────────────────────────────────

    def sync_features(self, ctx: RuntimeContext | None = None) -> dict[str, FeatureAction]:
        """
        Apply the matching feature actions to the host's feature registry.

        Args:
            ctx: Context to evaluate; resolved from the current request if omitted.

        Returns:
            The feature actions that were applied (empty when nothing matched).
        """
        if ctx is None:
            request = self._request_provider()
            ctx = resolve_context(request.page, request.query, self.posts)

        actions = self.evaluate_features(ctx)
        for feature, action in actions.items():
            if action is FeatureAction.ENABLE:
                self.features.add_support(ctx.post_type, feature)
            else:
                self.features.remove_support(ctx.post_type, feature)

        if actions:
            logger.debug("Applied %d feature actions to post type %r", len(actions), ctx.post_type)
        return actions

    def filter_post_type_args(self, args: dict[str, Any], post_type: str) -> dict[str, Any]:
        request = self._request_provider()
        if not request.is_admin:
            return args
        # The new-post screen only counts when it names a post type explicitly.
        ctx = resolve_context(request.page, request.query, self.posts, default_post_type="")
        return self.evaluate_post_type_args(ctx, args)

    def filter_can_use_rich_editor(self, can_edit: bool, post_type: str) -> bool:
        request = self._request_provider()
        ctx = resolve_for_post_type(post_type, request.query, self.posts)
        return self.evaluate_can_use_rich_editor(ctx, can_edit)
