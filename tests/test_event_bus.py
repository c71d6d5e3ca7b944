from bubblepop.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_emit_without_subscribers_is_ignored():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_bound_method_survives_without_reference():
    bus = EventBus()
    seen = []

    class Listener:
        def on_event(self, sender, **kwargs):
            seen.append(kwargs["n"])

    bus.subscribe("evt", Listener().on_event)
    bus.emit("evt", n=3)
    assert seen == [3]
