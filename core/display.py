"""Deferred swap of the visible card while it is still face-up."""

import asyncio
import logging

from .config import SETTLE_DELAY_SECONDS

logger = logging.getLogger(__name__)


def _loop_call_later(delay: float, callback):
    return asyncio.get_running_loop().call_later(delay, callback)


class DisplaySwapScheduler:
    """Tracks the item the card actually shows.

    A change that arrives while the card is face-up is held back until the
    settle delay elapses or the card turns face-down, whichever comes first.
    Only the latest pending item is kept.
    """

    def __init__(self, settle_delay: float = SETTLE_DELAY_SECONDS, call_later=None):
        self.settle_delay = settle_delay
        self._call_later = call_later or _loop_call_later
        self.visible_item = None
        self.pending_item = None
        self._timer = None

    @property
    def has_pending(self) -> bool:
        return self.pending_item is not None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _apply_pending(self) -> None:
        self._timer = None
        if self.pending_item is not None:
            self.visible_item = self.pending_item
            self.pending_item = None

    def update(self, item, is_flipped: bool) -> None:
        """Report a new logical item together with the current face."""
        if item is None:
            self._cancel_timer()
            self.pending_item = None
            self.visible_item = None
            return

        if self.pending_item is not None and item == self.pending_item:
            return
        if self.pending_item is None and item == self.visible_item:
            return

        self._cancel_timer()
        if item == self.visible_item:
            # Moved back to what is already showing
            self.pending_item = None
            return

        if not is_flipped:
            self.pending_item = None
            self.visible_item = item
            return

        logger.debug(f"Deferring card swap to {item!r} for {self.settle_delay}s")
        self.pending_item = item
        self._timer = self._call_later(self.settle_delay, self._apply_pending)

    def on_flip_changed(self, is_flipped: bool) -> None:
        """Turning face-down applies any pending swap right away."""
        if not is_flipped:
            self.flush()

    def flush(self) -> None:
        """Apply the pending swap now, if any."""
        if self.pending_item is None:
            return
        self._cancel_timer()
        self._apply_pending()

    def close(self) -> None:
        """Cancel the timer without applying the pending swap and drop the visible card."""
        self._cancel_timer()
        self.pending_item = None
        self.visible_item = None
