"""Merge progress notifications emitted while training."""

import logging
import os
from dataclasses import dataclass
from typing import Callable

from ._sanitise import render_bytes
from .types import Token, TokenBytes, TokenPair

log = logging.getLogger(__name__)

_enabled: bool = True


@dataclass(frozen=True)
class MergeEvent:
    """One learned merge, reported right after it is applied."""

    # 1-based
    merge_index: int
    total_merges: int
    pair: TokenPair
    new_id: Token
    token_bytes: TokenBytes


type ProgressCallback = Callable[[MergeEvent], None]


def enable_progress() -> None:
    """Enable verbose merge logging for all pairtok training runs."""
    global _enabled
    _enabled = True


def disable_progress() -> None:
    """Disable verbose merge logging for all pairtok training runs."""
    global _enabled
    _enabled = False


def _is_enabled() -> bool:
    """Check if progress is enabled (respects env var override)."""
    if os.environ.get("PAIRTOK_DISABLE_PROGRESS", "").strip() == "1":
        return False
    return _enabled


def log_merge(event: MergeEvent) -> None:
    """Progress callback that logs each merge at INFO level."""
    log.info(
        "merge %d/%d: %s -> %d [%s]",
        event.merge_index,
        event.total_merges,
        event.pair,
        event.new_id,
        render_bytes(event.token_bytes),
    )


def chain_callbacks(*callbacks: ProgressCallback | None) -> ProgressCallback | None:
    """Combine callbacks into one that calls each in order; ``None`` entries are skipped."""
    active = [cb for cb in callbacks if cb is not None]
    if not active:
        return None
    if len(active) == 1:
        return active[0]

    def notify(event: MergeEvent) -> None:
        for cb in active:
            cb(event)

    return notify
