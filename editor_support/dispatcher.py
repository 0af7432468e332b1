"""
Hook Dispatcher

HookRegistry: the host's action/filter dispatcher.  Callbacks are attached
explicitly by an integration layer and invoked in priority order (lower
first, registration order within a priority).

Dispatch never lets a misbehaving callback break the request: exceptions are
caught and logged, actions carry on with the next callback and filters keep
the last good value.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from editor_support.hooks import DEFAULT_PRIORITY

logger = logging.getLogger(__name__)


@dataclass
class _Subscription:
    callback: Callable[..., Any]
    priority: int
    order: int


class HookRegistry:
    """Registry of action and filter callbacks keyed by hook name."""

    def __init__(self) -> None:
        self._actions: dict[str, list[_Subscription]] = defaultdict(list)
        self._filters: dict[str, list[_Subscription]] = defaultdict(list)
        self._counter = 0

    # ── Registration ──────────────────────────────────────────────────────────

    def add_action(self, hook_name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        """Attach ``callback`` to an action hook."""
        self._subscribe(self._actions, hook_name, callback, priority)

    def add_filter(self, hook_name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        """Attach ``callback`` to a filter hook.  It receives the value first."""
        self._subscribe(self._filters, hook_name, callback, priority)

    def has_action(self, hook_name: str) -> bool:
        return bool(self._actions.get(hook_name))

    def has_filter(self, hook_name: str) -> bool:
        return bool(self._filters.get(hook_name))

    def _subscribe(
        self,
        table: dict[str, list[_Subscription]],
        hook_name: str,
        callback: Callable[..., Any],
        priority: int,
    ) -> None:
        self._counter += 1
        table[hook_name].append(_Subscription(callback, priority, self._counter))
        table[hook_name].sort(key=lambda s: (s.priority, s.order))
        logger.debug("Hook subscribed: %s -> %s (priority %d)", hook_name, _name_of(callback), priority)

    # ── Dispatch ──────────────────────────────────────────────────────────────

    def do_action(self, hook_name: str, *args: Any) -> list[Any]:
        """
        Run every callback attached to an action hook.

        Returns:
            List of return values from each callback that completed.
        """
        results: list[Any] = []
        for sub in self._actions.get(hook_name, []):
            try:
                results.append(sub.callback(*args))
            except Exception as exc:
                logger.warning("Action %s callback %s raised: %s", hook_name, _name_of(sub.callback), exc)
        return results

    def apply_filters(self, hook_name: str, value: Any, *args: Any) -> Any:
        """
        Pass ``value`` through every callback attached to a filter hook.

        Each callback receives the previous callback's result followed by
        ``args``.  With no subscribers the value is returned unchanged.
        """
        for sub in self._filters.get(hook_name, []):
            try:
                value = sub.callback(value, *args)
            except Exception as exc:
                logger.warning("Filter %s callback %s raised: %s", hook_name, _name_of(sub.callback), exc)
        return value


def _name_of(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", repr(callback))
