"""Entry point for the Bubble Pop game.

Sets up the ECS world, event bus, grid engine, systems, and Arcade window.
"""
import logging

from arcade import Window, key, run, set_background_color

from bubblepop.constants import BACKGROUND_COLOR
from bubblepop.events.bus import (
    EVENT_ASSETS_READY,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
    EVENT_TICK,
    EventBus,
)
from bubblepop.systems.game_flow_system import GameFlowSystem
from bubblepop.systems.grid_engine import GridEngine
from bubblepop.systems.input import InputSystem
from bubblepop.systems.render import RenderSystem
from bubblepop.ui.layout import default_window_size
from bubblepop.world import create_world


class BubblePopWindow(Window):
    def __init__(self):
        width, height = default_window_size()
        super().__init__(width, height, "Bubble Pop")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()
        self.engine = GridEngine(self.world)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus, self.engine)
        self.input_system = InputSystem(self.world, self.event_bus, self)
        self.render_system = RenderSystem(self.world, self.engine, self)
        set_background_color(BACKGROUND_COLOR)
        # Everything is drawn from primitives, so there is nothing left to load.
        self.event_bus.emit(EVENT_ASSETS_READY)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.N:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = BubblePopWindow()
    run()

if __name__ == "__main__":
    main()
