"""
Pytest configuration and fixtures for editor support tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from editor_support.host import InMemoryFeatureRegistry, InMemoryPostLookup  # noqa: E402
from editor_support.integration import EditorSupport  # noqa: E402
from editor_support.middleware import AdminRequest  # noqa: E402
from editor_support.registry import RuleRegistry  # noqa: E402


class FakeRequestState:
    """Mutable stand-in for the current admin request."""

    def __init__(self) -> None:
        self.current = AdminRequest()

    def set(self, page: str = "", query: dict[str, str] | None = None, is_admin: bool = True) -> None:
        self.current = AdminRequest(page=page, query=query or {}, is_admin=is_admin)

    def __call__(self) -> AdminRequest:
        return self.current


@pytest.fixture
def registry() -> RuleRegistry:
    """A fresh, empty rule registry per test."""
    return RuleRegistry()


@pytest.fixture
def features() -> InMemoryFeatureRegistry:
    return InMemoryFeatureRegistry()


@pytest.fixture
def posts() -> InMemoryPostLookup:
    """Post metadata: 42 is a page on the landing template, 9 is a book."""
    lookup = InMemoryPostLookup()
    lookup.add(42, "page", "templates/landing.php")
    lookup.add(9, "book")
    return lookup


@pytest.fixture
def request_state() -> FakeRequestState:
    return FakeRequestState()


@pytest.fixture
def support(registry, features, posts, request_state) -> EditorSupport:
    return EditorSupport(rules=registry, features=features, posts=posts, request_provider=request_state)
