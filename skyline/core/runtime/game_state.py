"""
game_state.py
-------------
Screen states and the table of legal transitions between them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GameState(Enum):
    """Active screen."""
    MAIN_MENU = "main_menu"
    MAP_SCREEN = "map_screen"
    SKIN_SCREEN = "skin_screen"
    GAME_SCREEN = "game_screen"
    WIN_SCREEN = "win_screen"
    LOSE_SCREEN = "lose_screen"


class Action(Enum):
    """Inputs that can move the state machine (button actions and run outcomes)."""
    PLAY = "play"
    SKINS = "skins"
    MAP = "map"
    EXIT = "exit"
    BACK = "back"
    PREVIOUS = "previous"
    NEXT = "next"
    SELECT = "select"
    TRY_AGAIN = "try_again"
    ESCAPE = "escape"
    WIN = "win"
    LOSE = "lose"


@dataclass(frozen=True)
class Transition:
    """Result of a legal action."""
    target: Optional[GameState]
    reset_player: bool = False
    terminate: bool = False


# Carousel actions target their own screen
TRANSITIONS = {
    GameState.MAIN_MENU: {
        Action.PLAY: Transition(GameState.GAME_SCREEN),
        Action.SKINS: Transition(GameState.SKIN_SCREEN),
        Action.MAP: Transition(GameState.MAP_SCREEN),
        Action.EXIT: Transition(None, terminate=True),
    },
    GameState.MAP_SCREEN: {
        Action.BACK: Transition(GameState.MAIN_MENU),
        Action.PREVIOUS: Transition(GameState.MAP_SCREEN),
        Action.NEXT: Transition(GameState.MAP_SCREEN),
        Action.SELECT: Transition(GameState.MAP_SCREEN),
    },
    GameState.SKIN_SCREEN: {
        Action.BACK: Transition(GameState.MAIN_MENU),
        Action.PREVIOUS: Transition(GameState.SKIN_SCREEN),
        Action.NEXT: Transition(GameState.SKIN_SCREEN),
        Action.SELECT: Transition(GameState.SKIN_SCREEN),
    },
    GameState.GAME_SCREEN: {
        Action.LOSE: Transition(GameState.LOSE_SCREEN),
        Action.WIN: Transition(GameState.WIN_SCREEN),
        Action.ESCAPE: Transition(GameState.MAIN_MENU, reset_player=True),
    },
    GameState.WIN_SCREEN: {
        Action.BACK: Transition(GameState.MAIN_MENU, reset_player=True),
    },
    GameState.LOSE_SCREEN: {
        Action.TRY_AGAIN: Transition(GameState.GAME_SCREEN, reset_player=True),
    },
}


def resolve(state: GameState, action: Action) -> Optional[Transition]:
    """Look up the transition for an action, or None if it is not legal here."""
    return TRANSITIONS.get(state, {}).get(action)
