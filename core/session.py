"""Study session: shuffled queue, card flip and background enrichment."""

import asyncio
import logging

from .config import SETTLE_DELAY_SECONDS, ENRICHMENT_TIMEOUT_SECONDS
from .display import DisplaySwapScheduler
from .interfaces import EnrichmentProvider
from .kana_data import ALL_KANA, KANA_GROUPS, KANA_TYPES, DIACRITIC_GROUPS
from .models import EnrichmentResult, FALLBACK_ENRICHMENT, SelectionState, card_faces
from .utils import derive_pool, shuffle

logger = logging.getLogger(__name__)


class StudySession:
    """Owns the study cycle for the current selection.

    Every item of the pool is shown once per cycle before a fresh shuffle.
    Selection changes go through the toggle methods here so the pool is
    recomputed and compared after each one; only a change in pool content
    restarts the cycle.
    """

    def __init__(self, provider: EnrichmentProvider, items=None, selection: SelectionState = None,
                 rng=None, call_later=None, settle_delay: float = SETTLE_DELAY_SECONDS,
                 fetch_timeout: float = ENRICHMENT_TIMEOUT_SECONDS):
        self.provider = provider
        self.items = tuple(items) if items is not None else ALL_KANA
        self.selection = selection or SelectionState(KANA_GROUPS, KANA_TYPES, DIACRITIC_GROUPS)
        self.rng = rng
        self.fetch_timeout = fetch_timeout
        self.display = DisplaySwapScheduler(settle_delay, call_later=call_later)

        self.pool = self._derive_pool()
        self.in_study = False

        self.current_item = None
        self.remaining_queue = []
        self.seen_count = 0

        self.is_flipped = False
        self.enrichment = None
        self.is_loading_enrichment = False
        self._fetch_generation = 0
        self._fetch_tasks = set()

    # ------------------------------------------------------------------
    # Pool
    # ------------------------------------------------------------------

    def _derive_pool(self) -> list:
        return derive_pool(self.items, self.selection.groups, self.selection.types)

    def refresh_pool(self) -> bool:
        """Recompute the pool; restart the cycle only if its content changed."""
        new_pool = self._derive_pool()
        if new_pool == self.pool:
            return False
        self.pool = new_pool
        if self.in_study:
            self.start_round(new_pool)
        return True

    def toggle_group(self, group: str) -> bool:
        changed = self.selection.toggle_group(group)
        if changed:
            self.refresh_pool()
        return changed

    def toggle_type(self, kana_type: str) -> bool:
        changed = self.selection.toggle_type(kana_type)
        if changed:
            self.refresh_pool()
        return changed

    def toggle_diacritics(self) -> bool:
        changed = self.selection.toggle_diacritics()
        if changed:
            self.refresh_pool()
        return changed

    def set_study_mode(self, mode: str) -> None:
        self.selection.set_study_mode(mode)
        self.refresh_pool()

    def chart_items(self, kana_type: str) -> list:
        """Items of one script for the reference chart, without diacritic rows."""
        return [
            item for item in self.items
            if item.type == kana_type and item.group not in DIACRITIC_GROUPS
        ]

    # ------------------------------------------------------------------
    # Queue
    # ------------------------------------------------------------------

    def _set_current(self, item) -> None:
        was_flipped = self.is_flipped
        self._discard_enrichment()
        self.current_item = item
        self.is_flipped = False
        self.enrichment = None
        self.display.update(item, was_flipped)

    def start_round(self, pool) -> None:
        """Shuffle the pool and show its first item."""
        pool = list(pool)
        if not pool:
            self._set_current(None)
            self.remaining_queue = []
            self.seen_count = 0
            return
        shuffled = shuffle(pool, self.rng)
        self.remaining_queue = shuffled[1:]
        self.seen_count = 1
        self._set_current(shuffled[0])
        logger.debug(f"New round of {len(shuffled)} items starting with {shuffled[0].char}")

    def advance(self, pool=None) -> None:
        """Move to the next queued item, reshuffling once the queue runs out."""
        if pool is None:
            pool = self.pool
        if not pool:
            return
        if self.remaining_queue:
            next_item = self.remaining_queue.pop(0)
            self.seen_count += 1
            self._set_current(next_item)
        else:
            self.start_round(pool)

    def enter_study(self) -> None:
        self.in_study = True
        self.pool = self._derive_pool()
        self.start_round(self.pool)

    def exit_study(self) -> None:
        """Leave the study view. The card comes back face-down on re-entry."""
        self.in_study = False
        self.is_flipped = False
        self.display.close()
        self._discard_enrichment()
        for task in list(self._fetch_tasks):
            task.cancel()

    @property
    def has_item(self) -> bool:
        return self.current_item is not None

    @property
    def progress_display(self) -> str:
        return f"{self.seen_count} / {len(self.pool)}"

    # ------------------------------------------------------------------
    # Flip and enrichment
    # ------------------------------------------------------------------

    def flip(self) -> bool:
        """Toggle the card face. The first reveal of an item starts a fetch."""
        # The user is acting on the new card, finish any deferred swap
        self.display.flush()
        self.is_flipped = not self.is_flipped
        self.display.on_flip_changed(self.is_flipped)

        if (self.is_flipped and self.current_item is not None
                and self.enrichment is None and not self.is_loading_enrichment):
            self._begin_enrichment(self.current_item)
        return self.is_flipped

    def _begin_enrichment(self, item) -> None:
        self._fetch_generation += 1
        self.is_loading_enrichment = True
        task = asyncio.create_task(self._fetch_enrichment(item, self._fetch_generation))
        self._fetch_tasks.add(task)
        task.add_done_callback(self._fetch_tasks.discard)

    def _discard_enrichment(self) -> None:
        # Outstanding fetches compare against this and drop their result
        self._fetch_generation += 1
        self.is_loading_enrichment = False

    async def _fetch_enrichment(self, item, generation: int) -> None:
        loop = asyncio.get_running_loop()
        try:
            data, ms = await asyncio.wait_for(
                loop.run_in_executor(
                    None,
                    lambda: self.provider.get_mnemonic(item.char, item.romaji)
                ),
                timeout=self.fetch_timeout
            )
            result = EnrichmentResult.from_dict(data)
            logger.info(f"Enrichment for {item.char} ({item.romaji}) ready in {ms}ms")
        except asyncio.TimeoutError:
            logger.warning(f"Enrichment for {item.char} timed out after {self.fetch_timeout}s")
            result = FALLBACK_ENRICHMENT
        except Exception as e:
            logger.warning(f"Enrichment for {item.char} failed: {e}")
            result = FALLBACK_ENRICHMENT

        if generation != self._fetch_generation or item != self.current_item:
            logger.debug(f"Discarding stale enrichment for {item.char}")
            return
        self.enrichment = result
        self.is_loading_enrichment = False

    async def wait_for_enrichment(self) -> None:
        """Wait until every outstanding fetch has finished."""
        if self._fetch_tasks:
            await asyncio.gather(*list(self._fetch_tasks), return_exceptions=True)

    def close(self) -> None:
        """Tear down timers and fetch tasks."""
        self.exit_study()

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        visible = self.display.visible_item
        return {
            'in_study': self.in_study,
            'has_item': self.has_item,
            'current_item': self.current_item.to_dict() if self.current_item else None,
            'visible_item': visible.to_dict() if visible else None,
            'faces': card_faces(visible, self.selection.study_mode) if visible else None,
            'is_flipped': self.is_flipped,
            'is_loading': self.is_loading_enrichment,
            'enrichment': self.enrichment.to_dict() if self.enrichment else None,
            'seen_count': self.seen_count,
            'pool_size': len(self.pool),
            'progress_display': self.progress_display,
            'study_mode': self.selection.study_mode
        }
