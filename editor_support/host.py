"""
Host Adapters

Abstract interfaces for the parts of the host CMS the editor support layer
reads from or writes to, plus in-memory implementations used by the
reference app and the test suite.

FeatureRegistry: per-content-type feature set (add / remove / query support).
PostLookup:      post type and template slug of a stored post.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict


class FeatureRegistry(ABC):
    """Content-type feature registry owned by the host."""

    @abstractmethod
    def add_support(self, post_type: str, feature: str) -> None: ...

    @abstractmethod
    def remove_support(self, post_type: str, feature: str) -> None: ...

    @abstractmethod
    def supports(self, post_type: str, feature: str) -> bool: ...


class PostLookup(ABC):
    """Read-only access to stored post metadata."""

    @abstractmethod
    def post_type(self, post_id: int) -> str | None:
        """Return the post's type, or None if the post does not exist."""
        ...

    @abstractmethod
    def template(self, post_id: int) -> str | None:
        """Return the post's page template slug, or None if it has none."""
        ...


class InMemoryFeatureRegistry(FeatureRegistry):
    def __init__(self, initial: dict[str, set[str]] | None = None) -> None:
        self._features: dict[str, set[str]] = defaultdict(set)
        for post_type, features in (initial or {}).items():
            self._features[post_type].update(features)

    def add_support(self, post_type: str, feature: str) -> None:
        self._features[post_type].add(feature)

    def remove_support(self, post_type: str, feature: str) -> None:
        self._features[post_type].discard(feature)

    def supports(self, post_type: str, feature: str) -> bool:
        return feature in self._features.get(post_type, set())

    def features_for(self, post_type: str) -> set[str]:
        return set(self._features.get(post_type, set()))


class InMemoryPostLookup(PostLookup):
    """
    Dict-backed post metadata.

    ``posts`` maps a post id to ``{"post_type": ..., "template": ...}``.
    """

    def __init__(self, posts: dict[int, dict[str, str]] | None = None) -> None:
        self._posts = dict(posts or {})

    def add(self, post_id: int, post_type: str, template: str = "") -> None:
        self._posts[post_id] = {"post_type": post_type, "template": template}

    def post_type(self, post_id: int) -> str | None:
        post = self._posts.get(post_id)
        return post.get("post_type") if post else None

    def template(self, post_id: int) -> str | None:
        post = self._posts.get(post_id)
        return (post.get("template") or None) if post else None
