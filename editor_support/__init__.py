"""
CMS Editor Support

Public API:
    MatchKey       — what a rule set governs (post type, post id, template)
    RuleSet        — fluent builder for editor mode + feature toggles
    RuleRegistry   — one RuleSet per MatchKey
    rule_registry  — default registry instance
    EditorSupport  — applies the rules at the host's hooks
    HookRegistry   — action/filter dispatcher
"""

from .dispatcher import HookRegistry
from .integration import EditorSupport
from .models import CANONICAL_FEATURES, EditorMode, FeatureAction, MatchKey, MatchKind, RuntimeContext
from .registry import RuleRegistry, rule_registry
from .rule_set import RuleSet

__all__ = [
    "CANONICAL_FEATURES",
    "EditorMode",
    "EditorSupport",
    "FeatureAction",
    "HookRegistry",
    "MatchKey",
    "MatchKind",
    "RuleRegistry",
    "RuleSet",
    "RuntimeContext",
    "rule_registry",
]
