# controls.py
from typing import Dict, Optional, Tuple

from .config import UP, DOWN, LEFT, RIGHT

Velocity = Tuple[int, int]

# Arrow keys by their pygame.key.name() plus WASD
KEY_BINDINGS: Dict[str, Velocity] = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}


def direction_for_key(name: str) -> Optional[Velocity]:
    """Map a key name to a direction; None for keys the game does not use."""
    return KEY_BINDINGS.get(name.lower())


def direction_for_tap(x: float, y: float, width: float, height: float) -> Velocity:
    """
    Map a tap/click on the board to a direction by quadrant around the centre.
    Horizontal wins only when it is strictly the larger offset.
    """
    cx, cy = width / 2, height / 2
    if abs(x - cx) > abs(y - cy):
        return LEFT if x < cx else RIGHT
    return UP if y < cy else DOWN
