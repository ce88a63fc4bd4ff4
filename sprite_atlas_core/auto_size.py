"""
Automatic container sizing for Sprite Atlas Prep.
Grows a square container in fixed steps until every sprite fits.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .free_space import FreeSpaceKind
from .packer import PackingEngine, PackItem, PlacedItem

SIZE_QUANTUM = 256
MIN_SIZE = 256
MAX_SIZE = 8192


@dataclass
class AutoSizeResult:
    """Outcome of the square size search."""
    width: int
    height: int
    placed: List[PlacedItem] = field(default_factory=list)
    attempts: int = 0
    exhausted: bool = False  # True when the ceiling was hit before everything fit


class AutoSizeController:
    """Linear search for the smallest square container that fits all items."""

    def __init__(self, quantum: int = SIZE_QUANTUM, floor: int = MIN_SIZE,
                 ceiling: int = MAX_SIZE,
                 free_space: FreeSpaceKind = FreeSpaceKind.SPLIT_PRUNE):
        """
        Args:
            quantum: Step between tried sizes in pixels
            floor: Smallest size ever tried
            ceiling: Largest size stepped up to
            free_space: Free-space strategy handed to each engine
        """
        if quantum <= 0 or floor <= 0:
            raise ValueError(f"Quantum and floor must be positive, got {quantum} and {floor}")
        if ceiling < floor:
            raise ValueError(f"Ceiling {ceiling} is below floor {floor}")

        self.quantum = quantum
        self.floor = floor
        self.ceiling = ceiling
        self.free_space = free_space
        self.logger = logging.getLogger(__name__)

    def initial_size(self, items: Sequence[PackItem]) -> int:
        """Smallest quantum multiple covering the largest item dimension, at least the floor."""
        if not items:
            return self.floor
        largest = max(max(item.width, item.height) for item in items)
        size = -(-largest // self.quantum) * self.quantum
        return max(size, self.floor)

    def resolve_size(self, items: Sequence[PackItem]) -> AutoSizeResult:
        """
        Find the smallest square size that places every item.

        Args:
            items: Items to pack

        Returns:
            AutoSizeResult with the chosen size and placements. When no size up
            to the ceiling works, the last attempt is returned with exhausted set.
        """
        size = self.initial_size(items)
        if not items:
            return AutoSizeResult(width=size, height=size)

        attempts = 0
        while True:
            engine = PackingEngine(size, size, self.free_space)
            placed = engine.pack(items)
            attempts += 1

            if len(placed) == len(items):
                self.logger.info(f"Auto size: {size}x{size} fits {len(items)} items ({attempts} attempts)")
                return AutoSizeResult(size, size, placed, attempts)

            if size + self.quantum > self.ceiling:
                break

            self.logger.debug(f"Auto size: {size}x{size} placed {len(placed)}/{len(items)}, growing")
            size += self.quantum

        self.logger.warning(
            f"Auto size exhausted at {size}x{size}: placed {len(placed)}/{len(items)} items"
        )
        return AutoSizeResult(size, size, placed, attempts, exhausted=True)
