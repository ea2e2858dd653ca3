"""Reactive Teardown — contract with the listener/ref/filter subsystem used by destroy.

Invariants:
    - Steps run in fixed order: listeners, refs, subscriptions, filters, context
    - Every step runs on the silent() view: teardown never emits notifications
    - A failing step aborts the rest; its exception propagates unchanged
    - Teardown always completes before any data is removed (enforced by Store)

Design Decisions:
    - Protocol over ABC: the reactive layer lives outside this package
    - NullTeardown default: a bare Store has no observers to detach
"""

import logging
from typing import Protocol

from docstore.core.domain_types import Segments
from docstore.core.paths import join_path

logger = logging.getLogger(__name__)


class ReactiveTeardown(Protocol):
    """Structural contract for the reactive subsystem's teardown hooks."""

    def silent(self) -> "ReactiveTeardown": ...
    def remove_all_listeners(self, segments: Segments) -> None: ...
    def remove_all_refs(self, segments: Segments) -> None: ...
    def stop_all(self, segments: Segments) -> None: ...
    def remove_all_filters(self, segments: Segments) -> None: ...
    def remove_context_listeners(self) -> None: ...


class NullTeardown:
    """No reactive layer attached: every step is a no-op."""

    def silent(self) -> "NullTeardown":
        return self

    def remove_all_listeners(self, segments: Segments) -> None:
        pass

    def remove_all_refs(self, segments: Segments) -> None:
        pass

    def stop_all(self, segments: Segments) -> None:
        pass

    def remove_all_filters(self, segments: Segments) -> None:
        pass

    def remove_context_listeners(self) -> None:
        pass


TEARDOWN_STEPS: tuple[str, ...] = (
    "remove_all_listeners",
    "remove_all_refs",
    "stop_all",
    "remove_all_filters",
    "remove_context_listeners",
)


def run_teardown(teardown: ReactiveTeardown, segments: Segments) -> None:
    """Silently detach all reactive machinery at or under segments."""
    silent = teardown.silent()
    try:
        step = "remove_all_listeners"
        silent.remove_all_listeners(segments)
        step = "remove_all_refs"
        silent.remove_all_refs(segments)
        step = "stop_all"
        silent.stop_all(segments)
        step = "remove_all_filters"
        silent.remove_all_filters(segments)
        # Listeners bound to the caller's event context, then the context itself
        step = "remove_context_listeners"
        silent.remove_context_listeners()
    except Exception:
        logger.warning(
            "Teardown step '%s' failed, destroy aborted", step,
            extra={"path": join_path(segments), "error_code": "TEARDOWN_FAILED"},
        )
        raise
