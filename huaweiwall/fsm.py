"""Game flow states and the manager that tracks the current one."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from typing import Optional

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    """Phases the installation cycles through."""

    INTRO = 0
    INTERACTION = 1
    ENDING = 2


class FSMManager:
    """Holds the current game state."""

    def __init__(self, current_state: GameState = GameState.INTRO) -> None:
        self.current_state = current_state

    def begin_play(self) -> None:
        """Reset the flow to the intro state."""
        self.current_state = GameState.INTRO


class BaseState:
    """Common behaviour of every state actor: it finds the FSM manager in the scene."""

    def __init__(self) -> None:
        self.fsm_manager: Optional[FSMManager] = None

    def begin_play(self, actors: Iterable[object]) -> None:
        """Look up the first FSMManager among the scene's actors."""
        self.fsm_manager = next(
            (actor for actor in actors if isinstance(actor, FSMManager)), None
        )
        if self.fsm_manager is not None:
            logger.warning("FSMManager found in the scene!")
        else:
            logger.warning("FSMManager not found in the scene!")


class IntroState(BaseState):
    """State shown while the installation is idle."""


class EndingState(BaseState):
    """State shown when an interaction has finished."""