"""
Rectangle packing engine for Sprite Atlas Prep.
Places sprites into a fixed-size container using the Contact Point Rule.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from .free_space import FreeSpaceKind, Rect, create_free_space


@dataclass
class PackItem:
    """A rectangle waiting to be packed."""
    name: str
    width: int
    height: int
    payload: Any = None  # Opaque handle owned by the caller


@dataclass
class PlacedItem:
    """A packed rectangle with the identity of the item it came from."""
    name: str
    x: int
    y: int
    width: int
    height: int
    payload: Any = None

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


def _overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> int:
    """Length shared by the half-open ranges [start_a, end_a) and [start_b, end_b)."""
    return max(0, min(end_a, end_b) - max(start_a, start_b))


class PackingEngine:
    """Packs rectangles into one container of fixed size."""

    def __init__(self, width: int, height: int,
                 free_space: FreeSpaceKind = FreeSpaceKind.SPLIT_PRUNE):
        """
        Initialize the engine with an empty container.

        Args:
            width: Container width in pixels
            height: Container height in pixels
            free_space: Free-space strategy used to track unused regions
        """
        if not _is_positive_int(width) or not _is_positive_int(height):
            raise ValueError(f"Container size must be positive integers, got {width}x{height}")

        self.width = width
        self.height = height
        self.free_space = create_free_space(free_space, width, height)
        self.unplaced: List[PackItem] = []
        self.logger = logging.getLogger(__name__)

    @property
    def free_regions(self) -> Tuple[Rect, ...]:
        """Snapshot of the current free regions."""
        return tuple(self.free_space.regions)

    def pack(self, items: Sequence[PackItem]) -> List[PlacedItem]:
        """
        Place items largest-first, skipping the ones that do not fit.

        Args:
            items: Items to pack

        Returns:
            Placed items in placement order
        """
        for item in items:
            if not _is_positive_int(item.width) or not _is_positive_int(item.height):
                raise ValueError(f"Item {item.name!r} has invalid size {item.width}x{item.height}")

        # Python's sort is stable, so equal sizes keep their input order
        ordered = sorted(items, key=lambda item: (-item.height, -item.width))

        self.logger.debug(f"Packing {len(ordered)} items into {self.width}x{self.height}")

        placed: List[PlacedItem] = []
        placed_rects: List[Rect] = []

        for item in ordered:
            position = self._find_position(item.width, item.height, placed_rects)

            if position is None:
                self.logger.warning(f"Could not pack image {item.name}")
                self.unplaced.append(item)
                continue

            x, y = position
            footprint = Rect(x, y, item.width, item.height)
            self.free_space.occupy(footprint)
            placed_rects.append(footprint)
            placed.append(PlacedItem(item.name, x, y, item.width, item.height, item.payload))

        self.logger.debug(f"Placed {len(placed)}/{len(ordered)} items")
        return placed

    def _find_position(self, width: int, height: int,
                       placed_rects: List[Rect]) -> Optional[Tuple[int, int]]:
        """
        Pick the free-region corner with the highest contact score.

        Ties go to the top-most, then left-most corner.
        """
        best: Optional[Tuple[int, int]] = None
        best_score = -1

        for region in self.free_space.candidates(width, height):
            score = self.contact_score(region.x, region.y, width, height, placed_rects)

            if score > best_score:
                best = (region.x, region.y)
                best_score = score
            elif score == best_score and (region.y, region.x) < (best[1], best[0]):
                best = (region.x, region.y)

        return best

    def contact_score(self, x: int, y: int, width: int, height: int,
                      placed_rects: Sequence[Rect]) -> int:
        """
        Total edge length a placement would share with the container and placed rects.

        Args:
            x: Candidate left edge
            y: Candidate top edge
            width: Item width
            height: Item height
            placed_rects: Rectangles already placed in this call

        Returns:
            Contact score in pixels
        """
        score = 0

        # Container boundary
        if x == 0 or x + width == self.width:
            score += height
        if y == 0 or y + height == self.height:
            score += width

        for p in placed_rects:
            # Left/right edges
            if p.x == x + width or p.right == x:
                score += _overlap(y, y + height, p.y, p.bottom)
            # Top/bottom edges
            if p.y == y + height or p.bottom == y:
                score += _overlap(x, x + width, p.x, p.right)

        return score


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
