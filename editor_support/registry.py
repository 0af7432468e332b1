"""
Rule Registry

RuleRegistry: ordered store of rule sets keyed by MatchKey.  At most one
RuleSet exists per key; it is created the first time the key is referenced
and is never removed.

The registry is filled during start-up and read on every admin request.
Lookups are a linear scan: the set of configured keys is small and keys are
heterogeneous (strings and ints of different kinds).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from editor_support.models import MatchKey, RuntimeContext
from editor_support.rule_set import RuleSet

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    In-process registry of editor support rule sets.

    Construct one per host and pass it to the integration layer;
    ``rule_registry`` below is a ready-made default instance.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[MatchKey, RuleSet]] = []
        self._lock = threading.Lock()

    # ── Registration ──────────────────────────────────────────────────────────

    def get_or_create(self, key: MatchKey) -> RuleSet:
        """Return the rule set bound to ``key``, creating it on first use."""
        with self._lock:
            existing = self._find(key)
            if existing is not None:
                return existing
            rule_set = RuleSet(key)
            self._entries.append((key, rule_set))
        logger.info("Editor support rule created: %s", key)
        return rule_set

    def from_post_type(self, post_type: str) -> RuleSet:
        return self.get_or_create(MatchKey.post_type(post_type))

    def from_post_id(self, post_id: int) -> RuleSet:
        return self.get_or_create(MatchKey.post_id(post_id))

    def from_template(self, template: str) -> RuleSet:
        return self.get_or_create(MatchKey.template(template))

    # ── Lookup ────────────────────────────────────────────────────────────────

    def match(self, key: MatchKey) -> RuleSet | None:
        """Return the rule set bound to ``key``, or None.  Never creates one."""
        return self._find(key)

    def matching(self, ctx: RuntimeContext) -> list[RuleSet]:
        """Return every rule set applying to ``ctx``, in registration order."""
        return [rule_set for _, rule_set in self._entries if rule_set.matches_context(ctx)]

    def all(self) -> list[RuleSet]:
        """Return all rule sets in registration order."""
        return [rule_set for _, rule_set in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RuleSet]:
        return iter(self.all())

    def clear(self) -> None:
        """Drop every rule set.  Intended for test isolation."""
        with self._lock:
            self._entries.clear()

    def _find(self, key: MatchKey) -> RuleSet | None:
        for entry_key, rule_set in self._entries:
            if entry_key == key:
                return rule_set
        return None


# ── Default instance ──────────────────────────────────────────────────────────
# Site code may configure rules here; the app factory wires it into the hooks.
rule_registry = RuleRegistry()
