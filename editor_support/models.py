"""
Editor Support Models

Value types shared by the rule registry, the rule sets and the host
integration layer:
    MatchKind       — what a rule set is keyed on
    MatchKey        — immutable (kind, value) pair
    EditorMode      — editor selected for matching screens
    FeatureAction   — enable / disable instruction for a feature
    RuntimeContext  — what is currently being edited
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

# ── Canonical feature names ───────────────────────────────────────────────────
FEATURE_TITLE = "title"
FEATURE_EDITOR = "editor"
FEATURE_AUTHOR = "author"
FEATURE_THUMBNAIL = "thumbnail"
FEATURE_EXCERPT = "excerpt"
FEATURE_TRACKBACKS = "trackbacks"
FEATURE_CUSTOM_FIELDS = "custom-fields"
FEATURE_COMMENTS = "comments"
FEATURE_REVISIONS = "revisions"
FEATURE_PAGE_ATTRIBUTES = "page-attributes"
FEATURE_POST_FORMATS = "post-formats"

CANONICAL_FEATURES: tuple[str, ...] = (
    FEATURE_TITLE,
    FEATURE_EDITOR,
    FEATURE_AUTHOR,
    FEATURE_THUMBNAIL,
    FEATURE_EXCERPT,
    FEATURE_TRACKBACKS,
    FEATURE_CUSTOM_FIELDS,
    FEATURE_COMMENTS,
    FEATURE_REVISIONS,
    FEATURE_PAGE_ATTRIBUTES,
    FEATURE_POST_FORMATS,
)


class MatchKind(str, enum.Enum):
    """Which field of the runtime context a rule set is compared against."""

    POST_TYPE = "post_type"
    POST_ID = "post_id"
    TEMPLATE = "template"


class EditorMode(str, enum.Enum):
    """Editor selected for a matching edit screen."""

    UNSET = "unset"
    RICH = "rich"
    CLASSIC = "classic"
    EMPTY = "empty"  # no content editor at all


class FeatureAction(str, enum.Enum):
    ENABLE = "enable"
    DISABLE = "disable"


@dataclass(frozen=True)
class MatchKey:
    """
    Identifies what a rule set governs.

    Equality is exact on both kind and value: ``MatchKey(POST_ID, 5)`` and
    ``MatchKey(POST_TYPE, "5")`` are different keys, and so are
    ``MatchKey(POST_ID, 5)`` and ``MatchKey(POST_ID, "5")``.
    """

    kind: MatchKind
    value: str | int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchKey):
            return NotImplemented
        return (
            self.kind == other.kind
            and type(self.value) is type(other.value)
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.kind, type(self.value), self.value))

    @classmethod
    def post_type(cls, name: str) -> MatchKey:
        return cls(MatchKind.POST_TYPE, name)

    @classmethod
    def post_id(cls, post_id: int) -> MatchKey:
        return cls(MatchKind.POST_ID, post_id)

    @classmethod
    def template(cls, name: str) -> MatchKey:
        return cls(MatchKind.TEMPLATE, name)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.value}"


@dataclass(frozen=True)
class RuntimeContext:
    """
    Host-resolved description of the screen being rendered.

    Empty strings and ``post_id == 0`` mean "not known"; they are ordinary
    values and simply fail to match rule sets keyed on real values.
    """

    post_type: str = ""
    post_id: int = 0
    template: str = ""

    def value_for(self, kind: MatchKind) -> str | int:
        """Return the context field compared against a key of the given kind."""
        if kind is MatchKind.POST_ID:
            return self.post_id
        if kind is MatchKind.POST_TYPE:
            return self.post_type
        return self.template
