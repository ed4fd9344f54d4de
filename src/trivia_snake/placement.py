# placement.py
from typing import Iterable, Tuple
import logging
import random

import numpy as np  # type: ignore

from .config import Config
from .errors import PlacementError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


def free_cells(head: Position, trail: Iterable[Position], config: Config) -> np.ndarray:
    """Return an (N, 2) array of (col, row) cells not covered by the snake."""
    occupied = np.zeros((config.grid_w, config.grid_h), dtype=bool)
    for x, y in (head, *trail):
        if 0 <= x < config.grid_w and 0 <= y < config.grid_h:
            occupied[x, y] = True
    return np.argwhere(~occupied)


def spawn_target(
    head: Position,
    trail: Iterable[Position],
    config: Config,
    rng: random.Random,
) -> Position:
    """
    Pick a uniformly random cell that is neither the head nor a trail cell.
    Rejection sampling first; after config.placement_retries misses, choose
    directly among the free cells.
    """
    taken = {head, *trail}
    for _ in range(config.placement_retries):
        cand = (rng.randrange(config.grid_w), rng.randrange(config.grid_h))
        if cand not in taken:
            return cand

    cells = free_cells(head, taken, config)
    if len(cells) == 0:
        raise PlacementError(
            f"No free cell for the target on a {config.grid_w}x{config.grid_h} grid"
        )
    logger.warning(
        "Target placement fell back to free-cell enumeration (%d free cells)", len(cells)
    )
    fx, fy = cells[rng.randrange(len(cells))]
    return (int(fx), int(fy))
