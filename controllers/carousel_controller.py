# -*- coding: utf-8 -*-
"""
Infinite Carousel Controller.

Auto-advancing, loop-wrapping horizontal carousel. The source list is
repeated into a small ring buffer; the position is an index into that
buffer, and pixel offsets are derived from it for the viewport.

Once the index reaches the second half of the buffer it is folded back
into the first half without animation. Both halves render the same
cards, so the jump is invisible and the carousel appears endless.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Iterable, Optional, Tuple

from PyQt5.QtCore import QTimer, pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController
from utils.logger import get_logger

logger = get_logger(__name__)

MIN_REPEAT = 3


class ScrollDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class CarouselViewport(ABC):
    """Host scroll surface the carousel drives."""

    @abstractmethod
    def item_width(self) -> Optional[int]:
        """Measured card width in pixels (None or 0 when unknown)."""
        pass

    @abstractmethod
    def scroll_to(self, offset: int, animated: bool):
        """Move the horizontal scroll position to ``offset``."""
        pass


class InfiniteCarousel(BaseController):
    """
    Carousel state machine.

    State:
    - position: index into the repeated item list
    - is_hovering: pointer is over the carousel
    - auto_scroll_allowed: False during the cooldown after a manual scroll
    """

    position_changed = pyqtSignal(int)
    wrapped = pyqtSignal()
    auto_scroll_allowed_changed = pyqtSignal(bool)

    def __init__(
        self,
        viewport: CarouselViewport,
        source_items: Iterable[Any],
        repeat: int = None,
        tick_interval_ms: int = None,
        settle_ms: int = None,
        cooldown_ms: int = None,
        item_gap: int = None,
        default_item_width: int = None,
        parent=None,
    ):
        super().__init__(parent)
        self.viewport = viewport

        repeat = Config.CAROUSEL_REPEAT if repeat is None else repeat
        if repeat < MIN_REPEAT:
            logger.warning(f"Carousel repeat {repeat} too small, using {MIN_REPEAT}")
            repeat = MIN_REPEAT
        self._repeat = repeat

        self._source: Tuple[Any, ...] = tuple(source_items)
        self._items: Tuple[Any, ...] = self._source * repeat

        self._item_gap = Config.CAROUSEL_ITEM_GAP if item_gap is None else item_gap
        self._default_item_width = (
            Config.CAROUSEL_DEFAULT_ITEM_WIDTH if default_item_width is None else default_item_width
        )

        self._position = 0
        self._is_hovering = False
        self._auto_scroll_allowed = True

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(Config.CAROUSEL_TICK_MS if tick_interval_ms is None else tick_interval_ms)
        self._tick_timer.timeout.connect(self.tick)

        self._settle_timer = QTimer(self)
        self._settle_timer.setSingleShot(True)
        self._settle_timer.setInterval(Config.CAROUSEL_SETTLE_MS if settle_ms is None else settle_ms)
        self._settle_timer.timeout.connect(self._check_bounds)

        self._cooldown_timer = QTimer(self)
        self._cooldown_timer.setSingleShot(True)
        self._cooldown_timer.setInterval(Config.CAROUSEL_COOLDOWN_MS if cooldown_ms is None else cooldown_ms)
        self._cooldown_timer.timeout.connect(self._end_cooldown)

    # =========================================================================
    # State
    # =========================================================================

    @property
    def items(self) -> Tuple[Any, ...]:
        """The repeated item list (immutable)."""
        return self._items

    @property
    def source_items(self) -> Tuple[Any, ...]:
        return self._source

    @property
    def half_count(self) -> int:
        """
        Number of items in the first half of the ring buffer.

        Always a whole number of source copies, so index ``i`` and
        ``i + half_count`` show the same card even when repeat is odd.
        """
        return (self._repeat // 2) * len(self._source)

    @property
    def position(self) -> int:
        return self._position

    @property
    def current_item(self) -> Optional[Any]:
        if not self._source:
            return None
        return self._items[self._position]

    @property
    def item_span(self) -> int:
        """Card width plus gap; falls back to the default width when unmeasured."""
        width = self.viewport.item_width()
        if not width or width <= 0:
            width = self._default_item_width
        return width + self._item_gap

    @property
    def scroll_offset(self) -> int:
        return self._position * self.item_span

    @property
    def half_track_width(self) -> int:
        return self.half_count * self.item_span

    @property
    def is_hovering(self) -> bool:
        return self._is_hovering

    @property
    def auto_scroll_allowed(self) -> bool:
        return self._auto_scroll_allowed

    @property
    def is_cooling_down(self) -> bool:
        return self._cooldown_timer.isActive()

    @property
    def is_settling(self) -> bool:
        """A bounds check is scheduled."""
        return self._settle_timer.isActive()

    @property
    def is_running(self) -> bool:
        return self._tick_timer.isActive()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self):
        """Start the recurring auto-advance timer."""
        if self._source and not self._tick_timer.isActive():
            self._tick_timer.start()
            logger.debug(f"Carousel started ({len(self._items)} virtual items)")

    def stop(self):
        """Stop auto-advancing; manual scrolling keeps working."""
        self._tick_timer.stop()

    def shutdown(self):
        """Clear every timer so nothing fires against a torn-down view."""
        self._tick_timer.stop()
        self._settle_timer.stop()
        self._cooldown_timer.stop()
        logger.debug("Carousel shut down")

    # =========================================================================
    # Operations
    # =========================================================================

    def tick(self) -> bool:
        """
        Auto-advance by one card.

        Returns:
            True if the carousel moved
        """
        if self._is_hovering or not self._auto_scroll_allowed or not self._source:
            return False

        self._step_right()
        self._settle_timer.start()
        return True

    def manual_scroll(self, direction) -> bool:
        """
        Scroll one card left or right and pause auto-advance for the cooldown.

        Repeated calls restart the cooldown rather than extending it.
        """
        direction = ScrollDirection(direction)

        self._set_auto_scroll_allowed(False)
        self._cooldown_timer.start()

        if not self._source:
            return False

        if direction == ScrollDirection.LEFT:
            if self._position == 0:
                # Same cards, one half further on: gives room to step left.
                self._move_to(self.half_count, animated=False)
            self._move_to(self._position - 1, animated=True)
        else:
            self._step_right()

        self._settle_timer.start()
        return True

    def on_hover_change(self, hovering: bool):
        """Pointer entered/left the carousel. Leaving always ends the cooldown."""
        self._is_hovering = hovering
        if not hovering:
            self._cooldown_timer.stop()
            self._set_auto_scroll_allowed(True)

    # =========================================================================
    # Internals
    # =========================================================================

    def _move_to(self, index: int, animated: bool):
        self._position = index
        self.viewport.scroll_to(self.scroll_offset, animated)
        self.position_changed.emit(index)

    def _step_right(self):
        if self._position + 1 >= len(self._items):
            # End of the buffer before a bounds check ran: fold back first.
            self._move_to(self._position - self.half_count, animated=False)
        self._move_to(self._position + 1, animated=True)

    def _check_bounds(self):
        half = self.half_count
        if half and self._position >= half:
            logger.debug(f"Carousel wrap at index {self._position}")
            self._move_to(self._position % half, animated=False)
            self.wrapped.emit()

    def _end_cooldown(self):
        self._set_auto_scroll_allowed(True)

    def _set_auto_scroll_allowed(self, allowed: bool):
        if self._auto_scroll_allowed != allowed:
            self._auto_scroll_allowed = allowed
            self.auto_scroll_allowed_changed.emit(allowed)
