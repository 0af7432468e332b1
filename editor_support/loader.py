"""
Rule Loader

Reads declarative editor support rules from `data/editor_support.json` (or
the path in settings.rules_file) and applies them to a RuleRegistry at
application startup.

    {"rules": [
        {"match": "post_type", "value": "book", "editor": "classic",
         "enable": ["title"], "disable": ["comments"]}
    ]}

Each entry is applied in a fixed order: enable_all_except, disable_all_except,
editor, enable, disable.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError, model_validator

from editor_support.config import settings
from editor_support.exceptions import InvalidRuleError
from editor_support.models import EditorMode, MatchKey, MatchKind

if TYPE_CHECKING:
    from editor_support.registry import RuleRegistry

logger = logging.getLogger(__name__)


# ── Schema ────────────────────────────────────────────────────────────────────


class RuleEntry(BaseModel):
    match: MatchKind
    value: str | int
    editor: EditorMode | None = None
    enable: list[str] = []
    disable: list[str] = []
    enable_all_except: list[str] | None = None
    disable_all_except: list[str] | None = None

    @model_validator(mode="after")
    def _check_value_type(self) -> RuleEntry:
        if self.match is MatchKind.POST_ID:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                msg = "post_id rules need an integer value"
                raise ValueError(msg)
        elif not isinstance(self.value, str):
            msg = f"{self.match.value} rules need a string value"
            raise ValueError(msg)
        return self

    def key(self) -> MatchKey:
        return MatchKey(self.match, self.value)


class RuleFile(BaseModel):
    rules: list[dict[str, Any]] = []


# ── File I/O ──────────────────────────────────────────────────────────────────


def load_rules_config(path: str | Path | None = None) -> list[dict[str, Any]]:
    """
    Load raw rule entries from disk.

    Returns an empty list if the file does not exist or cannot be parsed.
    """
    rules_file = Path(path or settings.rules_file)
    if not rules_file.exists():
        return []
    try:
        raw = json.loads(rules_file.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to read editor support rules from %s: %s", rules_file, exc)
        return []
    try:
        return RuleFile.model_validate(raw).rules
    except ValidationError as exc:
        logger.warning("Ignoring editor support rules file %s: %s", rules_file, exc)
        return []


# ── Registry population ───────────────────────────────────────────────────────


def parse_rule(entry: dict[str, Any], index: int | None = None) -> RuleEntry:
    """Validate one raw entry, raising InvalidRuleError on malformed input."""
    try:
        return RuleEntry.model_validate(entry)
    except ValidationError as exc:
        errors = [{"loc": list(e["loc"]), "msg": e["msg"]} for e in exc.errors()]
        raise InvalidRuleError("Invalid editor support rule", index=index, details={"errors": errors}) from exc


def apply_rule(registry: RuleRegistry, rule: RuleEntry) -> None:
    rule_set = registry.get_or_create(rule.key())
    if rule.enable_all_except is not None:
        rule_set.enable_all(exclude=rule.enable_all_except)
    if rule.disable_all_except is not None:
        rule_set.disable_all(exclude=rule.disable_all_except)
    if rule.editor is not None:
        rule_set.set_editor_mode(rule.editor)
    for feature in rule.enable:
        rule_set.enable_feature(feature)
    for feature in rule.disable:
        rule_set.disable_feature(feature)


def load_rules(registry: RuleRegistry, path: str | Path | None = None) -> int:
    """
    Load declarative rules into ``registry``.

    All entries are validated before any is applied, so a malformed file
    leaves the registry untouched.

    Returns:
        Number of rule entries applied.
    """
    entries = load_rules_config(path)
    parsed = [parse_rule(entry, index) for index, entry in enumerate(entries)]
    for rule in parsed:
        apply_rule(registry, rule)
    logger.info("Editor support rules loaded: %d entries", len(parsed))
    return len(parsed)
