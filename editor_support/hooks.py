"""
Host Hook Constants

Names of the host extension points the editor support layer attaches to.
Hook names follow the `category.action` convention used across the CMS.
"""

from __future__ import annotations

# ── Actions ───────────────────────────────────────────────────────────────────
HOOK_ADMIN_INIT = "admin.init"

# ── Filters ───────────────────────────────────────────────────────────────────
HOOK_POST_TYPE_ARGS = "post_type.register_args"
HOOK_USE_BLOCK_EDITOR = "editor.use_block_editor_for_post_type"
HOOK_GUTENBERG_CAN_EDIT = "editor.gutenberg_can_edit_post_type"

DEFAULT_PRIORITY = 10

# ── Master list ───────────────────────────────────────────────────────────────
ALL_HOOKS: list[str] = [
    HOOK_ADMIN_INIT,
    HOOK_POST_TYPE_ARGS,
    HOOK_USE_BLOCK_EDITOR,
    HOOK_GUTENBERG_CAN_EDIT,
]
