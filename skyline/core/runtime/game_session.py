"""
game_session.py
---------------
Session record owned by the scene manager.

A session pairs the active GameState with the current Player. Accepted
transitions produce a new session; a player reset produces a new Player.
"""

from dataclasses import dataclass, field, replace

from skyline.core.debug.debug_logger import DebugLogger
from skyline.core.runtime.game_state import GameState, Action, Transition, resolve
from skyline.entities.player import Player


@dataclass(frozen=True)
class GameSession:
    state: GameState = GameState.MAIN_MENU
    player: Player = field(default_factory=Player.spawn)
    running: bool = True

    def apply(self, action: Action) -> "GameSession":
        """
        Apply an action and return the resulting session.

        Illegal actions return this same session unchanged.
        """
        transition = resolve(self.state, action)
        if transition is None:
            DebugLogger.trace(f"Ignored {action.value} in {self.state.value}", category="game_state")
            return self
        return self._follow(action, transition)

    def stop(self) -> "GameSession":
        """Session after a window-close request."""
        return replace(self, running=False)

    def _follow(self, action: Action, transition: Transition) -> "GameSession":
        if transition.terminate:
            DebugLogger.state(f"{self.state.value} --{action.value}--> exit", category="game_state")
            return replace(self, running=False)

        player = Player.spawn() if transition.reset_player else self.player
        if transition.target != self.state:
            DebugLogger.state(
                f"{self.state.value} --{action.value}--> {transition.target.value}",
                category="game_state",
            )
        return replace(self, state=transition.target, player=player)
