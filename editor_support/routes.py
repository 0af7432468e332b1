"""
Editor Support Inspection Routes

Read-only views of the configured rules, mounted under
/api/v1/editor-support:

GET /rules                  → list every rule set
GET /rules/{kind}/{value}   → one rule set (404 if not configured); value may contain "/"
GET /preview                → decisions for an admin page + query

Lookups never create rule sets.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from editor_support.context import parse_post_id, resolve_context
from editor_support.exceptions import RuleNotFoundError
from editor_support.integration import SHOW_IN_REST, EditorSupport
from editor_support.models import EditorMode, FeatureAction, MatchKey, MatchKind
from editor_support.rule_set import RuleSet

router = APIRouter(tags=["Editor Support"])
logger = logging.getLogger(__name__)


# ── Pydantic schemas ───────────────────────────────────────────────────────────


class RuleResponse(BaseModel):
    match: MatchKind
    value: str | int
    editor_mode: EditorMode
    feature_actions: dict[str, FeatureAction]


class ContextResponse(BaseModel):
    post_type: str
    post_id: int
    template: str


class PreviewResponse(BaseModel):
    context: ContextResponse
    matched_rules: int
    feature_actions: dict[str, FeatureAction]
    show_in_rest: bool
    can_use_rich_editor: bool


# ── Helpers ────────────────────────────────────────────────────────────────────


def get_editor_support(request: Request) -> EditorSupport:
    return request.app.state.editor_support


def _build_response(rule_set: RuleSet) -> RuleResponse:
    return RuleResponse(
        match=rule_set.key.kind,
        value=rule_set.key.value,
        editor_mode=rule_set.editor_mode,
        feature_actions=rule_set.feature_actions,
    )


# ── Routes ─────────────────────────────────────────────────────────────────────


@router.get("/rules", response_model=list[RuleResponse])
async def list_rules(support: EditorSupport = Depends(get_editor_support)) -> list[RuleResponse]:
    """List all configured rule sets in registration order."""
    return [_build_response(rule_set) for rule_set in support.rules.all()]


@router.get("/rules/{kind}/{value:path}", response_model=RuleResponse)
async def get_rule(
    kind: MatchKind,
    value: str,
    support: EditorSupport = Depends(get_editor_support),
) -> RuleResponse:
    """Get the rule set for one match key."""
    key_value: str | int = value
    if kind is MatchKind.POST_ID:
        key_value = parse_post_id(value)
    rule_set = support.rules.match(MatchKey(kind, key_value))
    if rule_set is None:
        raise RuleNotFoundError(kind.value, value)
    return _build_response(rule_set)


@router.get("/preview", response_model=PreviewResponse)
async def preview(
    page: str = Query(..., description="Admin page name, e.g. post.php"),
    post: str | None = None,
    post_type: str | None = None,
    support: EditorSupport = Depends(get_editor_support),
) -> PreviewResponse:
    """Show what the editor support rules would do on an admin page."""
    query = {k: v for k, v in {"post": post, "post_type": post_type}.items() if v is not None}
    ctx = resolve_context(page, query, support.posts)
    # post_type.register_args never falls back to the default post type
    args_ctx = resolve_context(page, query, support.posts, default_post_type="")
    logger.debug("Previewing editor support for %s -> %s", page, ctx)
    return PreviewResponse(
        context=ContextResponse(post_type=ctx.post_type, post_id=ctx.post_id, template=ctx.template),
        matched_rules=len(support.rules.matching(ctx)),
        feature_actions=support.evaluate_features(ctx),
        show_in_rest=bool(support.evaluate_post_type_args(args_ctx, {}).get(SHOW_IN_REST, False)),
        can_use_rich_editor=support.evaluate_can_use_rich_editor(ctx, True),
    )
