"""
Runtime Context Resolution

Builds the RuntimeContext for the current admin request from the page name,
the query string and the host's post metadata:

    post.php?post=42          → post_id 42, its post type and template
    post-new.php?post_type=x  → post_type x (falls back to a default type)
    anything else             → empty context
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from editor_support.config import settings
from editor_support.host import PostLookup
from editor_support.models import RuntimeContext

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_post_id(raw: str | None) -> int:
    """
    Convert a query-string post id to int by its leading digits.

    "42abc" and "4.2" give 42 and 4; input without leading digits gives 0.
    """
    match = _LEADING_INT.match(raw or "")
    if match is None:
        logger.debug("Ignoring non-numeric post id %r", raw)
        return 0
    return int(match.group(1))


def _post_metadata(post_id: int, posts: PostLookup) -> tuple[str, str]:
    if post_id == 0:
        return "", ""
    return posts.post_type(post_id) or "", posts.template(post_id) or ""


def resolve_context(
    page: str,
    query: Mapping[str, str],
    posts: PostLookup,
    default_post_type: str | None = None,
) -> RuntimeContext:
    """
    Resolve what is being edited on an admin page.

    Args:
        page:              Admin page name, e.g. "post.php".
        query:             Query-string parameters of the request.
        posts:             Host post metadata lookup.
        default_post_type: Type assumed on the new-post screen when the query
                           names none.  Pass "" to disable the fallback.

    Returns:
        The resolved context; an empty context for non-editing pages.
    """
    if default_post_type is None:
        default_post_type = settings.default_post_type

    if page == settings.edit_page and query.get("post"):
        post_id = parse_post_id(query.get("post"))
        post_type, template = _post_metadata(post_id, posts)
        return RuntimeContext(post_type=post_type, post_id=post_id, template=template)

    if page == settings.new_page:
        post_type = (query.get("post_type") or "").strip() or default_post_type
        return RuntimeContext(post_type=post_type)

    return RuntimeContext()


def resolve_for_post_type(post_type: str, query: Mapping[str, str], posts: PostLookup) -> RuntimeContext:
    """
    Resolve the context for a filter that already knows the post type.

    The post id comes from the request and the template from that post.
    """
    post_id = parse_post_id(query.get("post"))
    _, template = _post_metadata(post_id, posts)
    return RuntimeContext(post_type=post_type, post_id=post_id, template=template)
