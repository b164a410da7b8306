import pytest

from ke2tools.errors import KE2Error
from ke2tools.event import Event, EventConnections, InvalidConnectionIdError


def _recorder(log, name):
    return lambda data: log.append((name, data))


def test_fire_passes_data_to_handler():
    ev = Event()
    cons = EventConnections()
    log = []
    cons.connect(ev, _recorder(log, "a"))
    ev.fire(42)
    assert log == [("a", 42)]


def test_default_connections_fire_in_connection_order():
    ev = Event()
    cons = EventConnections()
    log = []
    for name in ("first", "second", "third"):
        cons.connect(ev, _recorder(log, name))
    ev.fire(None)
    assert [n for n, _ in log] == ["first", "second", "third"]


def test_priority_orders_handlers():
    ev = Event()
    cons = EventConnections()
    log = []
    cons.connect(ev, _recorder(log, "late"), priority=5)
    cons.connect(ev, _recorder(log, "early"), priority=1)
    cons.connect(ev, _recorder(log, "last"))
    ev.fire(None)
    assert [n for n, _ in log] == ["early", "late", "last"]


def test_equal_priority_goes_after_existing():
    ev = Event()
    cons = EventConnections()
    log = []
    cons.connect(ev, _recorder(log, "old"), priority=2)
    cons.connect(ev, _recorder(log, "new"), priority=2)
    ev.fire(None)
    assert [n for n, _ in log] == ["old", "new"]


def test_check_filters_handlers():
    ev = Event()
    cons = EventConnections()
    log = []
    cons.connect(ev, _recorder(log, "even"), check=lambda d: d % 2 == 0)
    ev.fire(3)
    ev.fire(4)
    assert log == [("even", 4)]


def test_connection_ids_are_distinct():
    ev = Event()
    cons = EventConnections()
    ids = {cons.connect(ev, lambda d: None) for _ in range(5)}
    assert len(ids) == 5


def test_remove_connection_stops_calls():
    ev = Event()
    cons = EventConnections()
    log = []
    keep = cons.connect(ev, _recorder(log, "keep"))
    drop = cons.connect(ev, _recorder(log, "drop"))
    ev.fire(1)
    cons.remove_connection(drop)
    ev.fire(2)
    assert log == [("keep", 1), ("drop", 1), ("keep", 2)]
    assert len(ev) == 1
    cons.remove_connection(keep)
    assert len(ev) == 0


def test_remove_invalid_id_raises():
    cons = EventConnections()
    with pytest.raises(InvalidConnectionIdError):
        cons.remove_connection(7)


def test_remove_twice_raises_library_error():
    ev = Event()
    cons = EventConnections()
    cid = cons.connect(ev, lambda d: None)
    cons.remove_connection(cid)
    with pytest.raises(KE2Error):
        cons.remove_connection(cid)


def test_close_removes_all_connections():
    ev = Event()
    cons = EventConnections()
    log = []
    cons.connect(ev, _recorder(log, "a"))
    cons.connect(ev, _recorder(log, "b"))
    cons.close()
    ev.fire(1)
    assert log == []
    assert len(ev) == 0
    assert len(cons) == 0


def test_context_manager_closes():
    ev = Event()
    other = EventConnections()
    log = []
    other.connect(ev, _recorder(log, "stay"))
    with EventConnections() as cons:
        cons.connect(ev, _recorder(log, "gone"))
        assert len(ev) == 2
    ev.fire(0)
    assert log == [("stay", 0)]


def test_connect_during_fire_waits_for_next_fire():
    ev = Event()
    cons = EventConnections()
    log = []
    added_ids = []

    def adder(data):
        log.append(("adder", data))
        if data == 1:
            added_ids.append(cons.connect(ev, _recorder(log, "added")))

    first_id = cons.connect(ev, adder)
    ev.fire(1)
    assert log == [("adder", 1)]
    assert len(ev) == 2
    assert len(added_ids) == 1
    assert added_ids[0] != first_id
    ev.fire(2)
    assert log == [("adder", 1), ("adder", 2), ("added", 2)]


def test_removal_in_check_phase_skips_handler():
    ev = Event()
    cons = EventConnections()
    log = []
    ids = {}

    def remover_check(data):
        cons.remove_connection(ids["victim"])
        return True

    cons.connect(ev, _recorder(log, "remover"), check=remover_check)
    ids["victim"] = cons.connect(ev, _recorder(log, "victim"))
    ev.fire(9)
    assert log == [("remover", 9)]


def test_two_handlers_on_one_event_are_independent():
    ev = Event()
    first = EventConnections()
    second = EventConnections()
    log = []
    first.connect(ev, _recorder(log, "first"))
    second.connect(ev, _recorder(log, "second"))
    first.close()
    ev.fire(5)
    assert log == [("second", 5)]