import random

from bubblepop.components.game_state import GamePhase
from bubblepop.systems.grid_engine import GridEngine
from bubblepop.systems.render import RenderSystem, highlight_color
from bubblepop.world import create_world


class DummyWindow:
    def __init__(self, width=640, height=960):
        self.width = width
        self.height = height


def test_render_records_snapshot_without_window():
    world = create_world(random.Random(8))
    engine = GridEngine(world, rows=2, cols=2, phase=GamePhase.ACTIVE)
    engine.load_grid([[1, 1], [2, 3]])
    engine.evaluate_selection(0, 0)
    render = RenderSystem(world, engine, DummyWindow())
    render.process()
    assert render.last_snapshot == engine.snapshot()
    assert render.last_snapshot.highlighted_positions() == [(0, 0), (0, 1)]
    assert render.last_snapshot.selection_score == 20


def test_render_snapshot_follows_engine_changes():
    world = create_world(random.Random(8))
    engine = GridEngine(world, rows=2, cols=2, phase=GamePhase.ACTIVE)
    engine.load_grid([[1, 1], [2, 3]])
    render = RenderSystem(world, engine, DummyWindow())
    render.process()
    first = render.last_snapshot
    engine.evaluate_selection(0, 0)
    engine.commit_pop()
    render.process()
    assert first.score == 0
    assert render.last_snapshot.score == 20
    assert render.last_snapshot.cells == ((0, 0), (2, 3))


def test_highlight_color_brightens_and_caps():
    assert highlight_color((10, 100, 250)) == (70, 160, 255)
