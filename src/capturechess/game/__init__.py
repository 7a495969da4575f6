"""Game management layer — controller, turn clock, state machine.

Quick start::

    from capturechess.game import GameController, TimeControl

    ctrl = GameController()
    ctrl.new_game(time_control=TimeControl(30))
    ctrl.click_square(1, 4)  # select the pawn
    ctrl.click_square(3, 4)  # and advance it two rows
"""

from capturechess.game.clock import TurnClock
from capturechess.game.controller import GameController, GameEvents
from capturechess.game.interfaces import (
    ClickResult,
    GamePhase,
    IGameController,
    ITurnClock,
    TimeControl,
)
from capturechess.game.state import GameState, Highlight

__all__ = [
    # Interfaces
    "ClickResult",
    "GamePhase",
    "IGameController",
    "ITurnClock",
    "TimeControl",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "Highlight",
    "TurnClock",
]
