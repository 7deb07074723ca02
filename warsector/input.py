"""
Keyboard state.

Key-down/key-up events maintain a set of held keys, filtered to the keys the
game recognises. The render loop reads the set once per tick, so a control is
active for as long as its key is held, independent of key auto-repeat.
"""

import logging
from enum import Enum
from typing import Iterator, Set

import pygame

logger = logging.getLogger(__name__)


class Control(Enum):
    """Camera controls, in the order they are applied each tick."""
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    MOVE_FORWARD = "move_forward"
    MOVE_BACKWARD = "move_backward"


KEY_BINDINGS = {
    pygame.K_LEFT: Control.TURN_LEFT,
    pygame.K_RIGHT: Control.TURN_RIGHT,
    pygame.K_UP: Control.MOVE_FORWARD,
    pygame.K_DOWN: Control.MOVE_BACKWARD,
}

# Captured and tracked, but not bound to any action yet
RESERVED_KEYS = frozenset({pygame.K_a, pygame.K_l, pygame.K_p, pygame.K_q})

CAPTURED_KEYS = frozenset(KEY_BINDINGS) | RESERVED_KEYS


class HeldKeys:
    """Set of recognised keys currently held down."""

    def __init__(self):
        self._held: Set[int] = set()

    def press(self, key: int) -> bool:
        """Mark key as held. Returns False if the key is not captured."""
        if key not in CAPTURED_KEYS:
            return False
        if key not in self._held:
            logger.debug(f"Key down: {key}")
        self._held.add(key)
        return True

    def release(self, key: int) -> None:
        self._held.discard(key)

    def clear(self) -> None:
        self._held.clear()

    def __contains__(self, key: int) -> bool:
        return key in self._held

    def __len__(self) -> int:
        return len(self._held)

    def is_active(self, control: Control) -> bool:
        return any(KEY_BINDINGS.get(key) is control for key in self._held)

    def active_controls(self) -> Iterator[Control]:
        """Controls whose key is held, in Control declaration order."""
        for control in Control:
            if self.is_active(control):
                yield control
