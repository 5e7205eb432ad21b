from dataclasses import dataclass

from promethean.events import EventBus


@dataclass
class Ping:
    value: int


@dataclass
class Pong:
    value: int


class SubPing(Ping):
    pass


@dataclass
class SharedProbe:
    value: int


def test_instance_is_shared():
    received = []
    sub_id = EventBus.instance().subscribe(SharedProbe, received.append)
    try:
        EventBus.instance().publish(SharedProbe(11))
    finally:
        EventBus.instance().unsubscribe(sub_id)
    assert received == [SharedProbe(11)]


def test_ids_start_at_zero_and_increase():
    bus = EventBus()
    first = bus.subscribe(Ping, lambda e: None)
    second = bus.subscribe(Pong, lambda e: None)
    assert (first, second) == (0, 1)


def test_publish_delivers_same_event():
    bus = EventBus()
    received = []
    bus.subscribe(Ping, received.append)
    event = Ping(3)
    bus.publish(event)
    assert received == [event]
    assert received[0] is event


def test_publish_matches_exact_type_only():
    bus = EventBus()
    received = []
    bus.subscribe(Ping, received.append)
    bus.publish(Pong(1))
    bus.publish(SubPing(2))
    assert received == []


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    received = []
    sub_id = bus.subscribe(Ping, received.append)
    bus.unsubscribe(sub_id)
    bus.publish(Ping(1))
    assert received == []


def test_unsubscribe_unknown_keeps_others():
    bus = EventBus()
    received = []
    bus.subscribe(Ping, received.append)
    bus.unsubscribe(999)
    bus.publish(Ping(5))
    assert received == [Ping(5)]


def test_handler_exception_does_not_stop_others():
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("fail")

    bus.subscribe(Ping, broken)
    bus.subscribe(Ping, received.append)
    bus.publish(Ping(7))
    assert received == [Ping(7)]


def test_subscription_during_publish_not_called_same_round():
    bus = EventBus()
    late = []

    def adder(event):
        bus.subscribe(Ping, late.append)

    bus.subscribe(Ping, adder)
    bus.publish(Ping(1))
    assert late == []
    bus.publish(Ping(2))
    assert late == [Ping(2)]


def test_handlers_called_in_subscription_order():
    bus = EventBus()
    order = []
    bus.subscribe(Ping, lambda e: order.append("a"))
    bus.subscribe(Ping, lambda e: order.append("b"))
    bus.publish(Ping(0))
    assert order == ["a", "b"]