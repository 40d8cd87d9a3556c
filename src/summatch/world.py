import random

from esper import World
from .events.bus import EventBus
from summatch.components.board import Board
from summatch.components.game_state import GameState, GameMode
from summatch.components.session import Session
from summatch.utils.random_source import RandomSource


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.IDLE,
    *,
    board: Board | None = None,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding the singleton state, board and session entities.

    Systems look the singletons up by component, so they can be constructed
    in any order afterwards.
    """
    world = World()
    rng = rng or random.Random()
    setattr(world, "random", rng)
    setattr(world, "random_source", RandomSource(rng))

    world.create_entity(GameState(mode=initial_mode))
    world.create_entity(board or Board())
    world.create_entity(Session())
    return world
