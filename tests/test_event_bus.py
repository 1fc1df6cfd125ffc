from lines.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_emit_without_subscribers_is_noop():
    EventBus().emit("nobody_listens", value=1)


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    calls = []

    def handler(sender, **kwargs):
        calls.append(kwargs)

    bus.subscribe("ping", handler)
    bus.emit("ping", n=1)
    bus.unsubscribe("ping", handler)
    bus.emit("ping", n=2)
    bus.unsubscribe("never_registered", handler)
    assert calls == [{"n": 1}]


def test_sender_is_the_bus():
    bus = EventBus()
    senders = []
    bus.subscribe("ping", lambda sender, **_: senders.append(sender))
    bus.emit("ping")
    assert senders == [bus]
