import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI

from editor_support.config import settings
from editor_support.context import resolve_context
from editor_support.dispatcher import HookRegistry
from editor_support.exception_handlers import register_exception_handlers
from editor_support.hooks import HOOK_ADMIN_INIT, HOOK_USE_BLOCK_EDITOR
from editor_support.host import FeatureRegistry, InMemoryFeatureRegistry, InMemoryPostLookup, PostLookup
from editor_support.integration import EditorSupport
from editor_support.loader import load_rules
from editor_support.models import CANONICAL_FEATURES
from editor_support.middleware import AdminRequestMiddleware, current_admin_request, setup_logging
from editor_support.registry import RuleRegistry, rule_registry
from editor_support.routes import get_editor_support
from editor_support.routes import router as editor_support_router

logger = logging.getLogger(__name__)


def create_app(
    registry: RuleRegistry | None = None,
    features: FeatureRegistry | None = None,
    posts: PostLookup | None = None,
    rules_file: str | None = None,
) -> FastAPI:
    """Create the FastAPI application."""
    registry = registry if registry is not None else rule_registry

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Rules are loaded once, before the first request is served.
        load_rules(registry, rules_file)
        yield

    app = FastAPI(
        title=settings.app_name,
        description="Editor mode and feature rules for CMS content types",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )

    hooks = HookRegistry()
    support = EditorSupport(
        rules=registry,
        features=features if features is not None else InMemoryFeatureRegistry(),
        posts=posts if posts is not None else InMemoryPostLookup(),
    )
    support.register(hooks)
    app.state.hooks = hooks
    app.state.editor_support = support

    # Add middleware
    app.add_middleware(AdminRequestMiddleware)
    register_exception_handlers(app)

    # Include routers
    app.include_router(editor_support_router, prefix="/api/v1/editor-support")

    @app.get(settings.admin_path_prefix + "/{page}")
    async def admin_screen(page: str, support: EditorSupport = Depends(get_editor_support)):
        """Render an admin screen's editor decisions as JSON."""
        hooks.do_action(HOOK_ADMIN_INIT)

        admin_request = current_admin_request()
        ctx = resolve_context(admin_request.page, admin_request.query, support.posts)
        return {
            "page": page,
            "post_type": ctx.post_type,
            "post_id": ctx.post_id,
            "use_block_editor": hooks.apply_filters(HOOK_USE_BLOCK_EDITOR, True, ctx.post_type),
            "features": {f: support.features.supports(ctx.post_type, f) for f in CANONICAL_FEATURES},
        }

    if settings.debug:
        logger.info(f"Running in {settings.environment} mode")

    return app


app = create_app()

if __name__ == "__main__":
    setup_logging(settings.log_level, json_format=settings.environment == "production")
    uvicorn.run(app, host="0.0.0.0", port=8000)
