"""
input_manager.py
----------------
Translates pygame keyboard state into the abstract controls the game consumes.

Provides:
- Held-key sampling for movement and jump (InputFrame)
- Escape detection for leaving a run
"""

from dataclasses import dataclass

import pygame

from skyline.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_a, pygame.K_LEFT],
    "move_right": [pygame.K_d, pygame.K_RIGHT],
    "jump": [pygame.K_w, pygame.K_UP, pygame.K_SPACE],
    "back": [pygame.K_ESCAPE],
}


@dataclass(frozen=True)
class InputFrame:
    """Held movement state for a single tick."""
    left: bool = False
    right: bool = False
    jump: bool = False


class InputManager:
    """
    Samples held keys once per tick.

    Usage:
        controls = input_manager.poll()
        player.update(controls, platforms)
    """

    def __init__(self, key_bindings=None, key_state_source=None):
        """
        Initialize input system.

        Args:
            key_bindings: Custom action -> keys mapping (uses DEFAULT_KEY_BINDINGS if None)
            key_state_source: Callable returning a key-state sequence
                              (pygame.key.get_pressed if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._get_pressed = key_state_source or pygame.key.get_pressed
        DebugLogger.init_entry("InputManager")

    def action_held(self, action: str, key_state) -> bool:
        """True if any key bound to the action is held down."""
        return any(key_state[key] for key in self.key_bindings.get(action, ()))

    def poll(self) -> InputFrame:
        """Sample current keyboard state into an InputFrame."""
        key_state = self._get_pressed()
        frame = InputFrame(
            left=self.action_held("move_left", key_state),
            right=self.action_held("move_right", key_state),
            jump=self.action_held("jump", key_state),
        )
        DebugLogger.trace(f"Input {frame}", category="input")
        return frame

    def is_back_event(self, event) -> bool:
        """True for a key-down of any key bound to 'back'."""
        return event.type == pygame.KEYDOWN and event.key in self.key_bindings["back"]
