import random

from esper import World

from bubblepop.components.button import NewGameButton
from bubblepop.components.cursor import Cursor


def create_world(rng: random.Random | None = None) -> World:
    """Create the ECS world holding UI resources; the grid engine adds its own entity."""
    world = World()
    setattr(world, "random", rng or random.Random())
    world.create_entity(Cursor())
    world.create_entity(NewGameButton())
    return world


def get_cursor(world: World) -> Cursor:
    for _, cursor in world.get_component(Cursor):
        return cursor
    raise RuntimeError("Cursor resource not found")


def get_new_game_button(world: World) -> NewGameButton:
    for _, button in world.get_component(NewGameButton):
        return button
    raise RuntimeError("NewGameButton resource not found")
