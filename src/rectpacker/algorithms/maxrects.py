"""
MAXRECTS packer — best-short-side-fit placement over maximal free rectangles.

Two strategies share one free-space set:

  pack(width, height)
      Place a single item at the best-scoring free rectangle.

  pack_global(items, size_of) / global_packing(items, size_of)
      Each round, score every remaining item against the current free
      space and commit only the single best (item, placement) pair across
      the whole batch.  Slower than repeated ``pack`` (O(items × free)
      per round, O(items) rounds) but avoids committing a mediocre
      placement that blocks a later, better-fitting item.

``global_packing`` exposes the batch as a lazy session that holds the
packer exclusively until it finishes or is closed; ``pack_global`` drains
such a session and either returns every placement or raises
``PackingFailure``.

Usage:
    packer = RectPacker.for_canvas(1024, 1024)
    pos = packer.pack(64, 32)

    with packer.global_packing(sprites, lambda s: s.size) as session:
        for sprite, (x, y) in session:
            ...
        if not session.all_placed:
            retry(session.unplaced)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from rectpacker.core.errors import PackerBusyError, PackingFailure
from rectpacker.core.free_space import FreeSpaceSet
from rectpacker.core.geometry import Point, Rect, Size

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PackingStatus(Enum):
    """Outcome of a global packing session."""

    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"    # every item was placed
    EXHAUSTED = "exhausted"  # items remain but none fits


class RectPacker:
    """
    Packs rectangles into registered free area without overlap.

    The packer owns its free-space set for its whole lifetime.  Free area is
    added with ``register_free`` and consumed by every successful placement.
    """

    def __init__(self) -> None:
        self._free = FreeSpaceSet()
        self._session: Optional[GlobalPacking] = None

    @classmethod
    def for_canvas(cls, width, height) -> "RectPacker":
        """Packer with the canvas ``[(0, 0), (width, height))`` registered."""
        packer = cls()
        packer.register_free((0, 0), (width, height))
        return packer

    # ── Free space ───────────────────────────────────────────────────────

    @property
    def free_rectangles(self) -> tuple[Rect, ...]:
        """Snapshot of the current free rectangles."""
        return self._free.rects

    @property
    def busy(self) -> bool:
        """Whether an open global packing session holds the packer."""
        return self._session is not None

    def register_free(self, min: Point, max: Point) -> None:
        """
        Add ``[min, max)`` to the free area.

        The region need not be disjoint from earlier free area; it may even
        cover previously packed rectangles, in which case later placements
        can overlap them.

        Raises:
            InvalidRegion: ``min`` exceeds ``max`` on either axis.
            PackerBusyError: a global packing session is open.
        """
        self._ensure_idle()
        self._free.register(min, max)

    # ── Single placement ─────────────────────────────────────────────────

    def pack(self, width, height) -> Optional[Point]:
        """
        Place a ``width`` × ``height`` rectangle.

        Sizes are not validated; negative values are a caller error.

        Returns:
            The ``(x, y)`` min corner of the placement, or ``None`` when no
            free rectangle can hold the size (nothing is mutated then).

        Raises:
            PackerBusyError: a global packing session is open.
        """
        self._ensure_idle()
        return self._place((width, height))

    def _place(self, size: Size) -> Optional[Point]:
        candidate = self._free.select(size)
        if candidate is None:
            logger.debug("No free rectangle can hold %r", size)
            return None

        position, _ = candidate
        self._free.subtract(Rect.from_size(position, size))
        return position

    # ── Global placement ─────────────────────────────────────────────────

    def global_packing(
        self,
        items: Iterable[T],
        size_of: Callable[[T], Size],
    ) -> "GlobalPacking[T]":
        """
        Open a lazy global packing session over ``items``.

        The session holds the packer exclusively: any other call on the
        packer raises ``PackerBusyError`` until the session completes, is
        exhausted, or is closed.

        Raises:
            PackerBusyError: another session is already open.
        """
        return GlobalPacking(self, items, size_of)

    def pack_global(
        self,
        items: Iterable[T],
        size_of: Callable[[T], Size],
    ) -> list[tuple[T, Point]]:
        """
        Pack every item, always committing the globally best placement.

        Returns:
            ``(item, (x, y))`` pairs in commit order, covering every input
            item.

        Raises:
            PackingFailure: some items could not be placed.  The placements
                made before exhaustion stay committed in the packer.
            PackerBusyError: a global packing session is open.
        """
        with self.global_packing(items, size_of) as session:
            for _ in session:
                pass

        if session.all_placed:
            return list(session.packed)
        raise PackingFailure(list(session.packed), session.unplaced)

    def _ensure_idle(self) -> None:
        if self._session is not None:
            raise PackerBusyError(
                "Packer is held by an open global packing session; "
                "finish or close it first"
            )

    def _release(self, session: "GlobalPacking") -> None:
        if self._session is session:
            self._session = None

    def __repr__(self) -> str:
        state = "busy" if self.busy else "idle"
        return f"RectPacker(free={len(self._free)}, {state})"


class GlobalPacking(Generic[T]):
    """
    Lazy, single-use sequence of global placements.

    Every ``step()`` (or iteration) commits one placement to the underlying
    packer.  The sequence cannot be restarted.  Closing it early leaves the
    packer and ``unplaced`` in a valid intermediate state, ready for direct
    ``pack`` calls.
    """

    def __init__(
        self,
        packer: RectPacker,
        items: Iterable[T],
        size_of: Callable[[T], Size],
    ) -> None:
        packer._ensure_idle()
        self._packer = packer
        self._remaining: list[tuple[T, Size]] = [
            (item, size_of(item)) for item in items
        ]
        self.packed: list[tuple[T, Point]] = []
        self._status = PackingStatus.IN_PROGRESS
        self._closed = False
        if self._remaining:
            packer._session = self
        else:
            self._status = PackingStatus.COMPLETE

    # ── State queries ────────────────────────────────────────────────────

    @property
    def status(self) -> PackingStatus:
        return self._status

    @property
    def all_placed(self) -> bool:
        """True only once every input item has been placed."""
        return self._status is PackingStatus.COMPLETE

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def unplaced(self) -> list[T]:
        """Items not placed yet, in arbitrary order."""
        return [item for item, _ in self._remaining]

    def failure(self) -> Optional[PackingFailure[T]]:
        """``PackingFailure`` for an exhausted session, else ``None``."""
        if self._status is not PackingStatus.EXHAUSTED:
            return None
        return PackingFailure(list(self.packed), self.unplaced)

    # ── Consumption ──────────────────────────────────────────────────────

    def step(self) -> Optional[tuple[T, Point]]:
        """
        Commit the best (item, placement) pair among the remaining items.

        Returns:
            ``(item, (x, y))``, or ``None`` once the session is complete or
            no remaining item fits.

        Raises:
            ValueError: the session was closed before finishing.
        """
        if self._status is not PackingStatus.IN_PROGRESS:
            return None
        if self._closed:
            raise ValueError("step() on a closed global packing session")

        best = self._best_candidate()
        if best is None:
            self._finish(PackingStatus.EXHAUSTED)
            logger.debug(
                "Global packing exhausted with %d items unplaced",
                len(self._remaining),
            )
            return None

        index, position, size = best
        item, _ = self._remaining[index]
        # swap-with-last removal; remaining order is not preserved
        self._remaining[index] = self._remaining[-1]
        self._remaining.pop()

        self._packer._free.subtract(Rect.from_size(position, size))
        placed = (item, position)
        self.packed.append(placed)
        logger.debug("Committed %r at %r", item, position)

        if not self._remaining:
            self._finish(PackingStatus.COMPLETE)
        return placed

    def _best_candidate(self) -> Optional[tuple[int, Point, Size]]:
        """Lowest-score placement over all remaining items.

        Ties go to the earliest remaining item.
        """
        best = None
        best_score = None
        for index, (_, size) in enumerate(self._remaining):
            candidate = self._packer._free.select(size)
            if candidate is None:
                continue
            position, score = candidate
            if best is None or score < best_score:
                best = (index, position, size)
                best_score = score
        return best

    def _finish(self, status: PackingStatus) -> None:
        self._status = status
        self._packer._release(self)

    def close(self) -> None:
        """Stop the session and release the packer."""
        self._closed = True
        self._packer._release(self)

    def __iter__(self) -> Iterator[tuple[T, Point]]:
        return self

    def __next__(self) -> tuple[T, Point]:
        placed = self.step()
        if placed is None:
            raise StopIteration
        return placed

    def __enter__(self) -> "GlobalPacking[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"GlobalPacking(status={self._status.value}, "
            f"packed={len(self.packed)}, remaining={len(self._remaining)})"
        )
