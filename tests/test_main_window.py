from types import SimpleNamespace

from arcade import key

from bubblepop.events.bus import EVENT_NEW_GAME_REQUEST, EventBus
from main import BubblePopWindow


def _stub_window():
    return SimpleNamespace(event_bus=EventBus())


def test_n_key_requests_new_game():
    window = _stub_window()
    requests = []
    window.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, lambda sender, **payload: requests.append(payload))
    BubblePopWindow.on_key_press(window, key.N, 0)
    BubblePopWindow.on_key_press(window, key.M, 0)
    assert requests == [{}]
