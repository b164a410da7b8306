"""Prioritised events and the handlers that own connections to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ke2tools.errors import KE2Error, fail

Handler = Callable[[Any], None]
Check = Callable[[Any], bool]


class InvalidConnectionIdError(KE2Error):
    """Raised when removing a connection id that is unknown or already removed."""


def _always(_data: Any) -> bool:
    return True


@dataclass(eq=False)
class _Connection:
    func: Handler
    check: Check
    priority: float
    removed: bool = False


class Event:
    """An event that calls its connected handlers in order of priority.

    Connections are made through an :class:`EventConnections` object.
    """

    def __init__(self) -> None:
        self._connections: list[_Connection] = []

    def __len__(self) -> int:
        return len(self._connections)

    def fire(self, data: Any = None) -> None:
        """Call every connected handler whose check accepts ``data``.

        All checks run before any handler. Connections added while firing are
        not called until the next fire; a connection removed during the check
        phase is skipped.
        """
        snapshot = tuple(self._connections)
        passed = [c for c in snapshot if not c.removed and c.check(data)]
        for connection in passed:
            connection.func(data)

    def _add(self, connection: _Connection, explicit_priority: bool) -> None:
        if explicit_priority:
            index = next(
                (i for i, c in enumerate(self._connections)
                 if c.priority > connection.priority),
                len(self._connections),
            )
            self._connections.insert(index, connection)
        else:
            self._connections.append(connection)

    def _detach(self, connection: _Connection) -> None:
        connection.removed = True
        self._connections = [c for c in self._connections if c is not connection]


class EventConnections:
    """Owns a set of connections to events and can remove them by id.

    Usable as a context manager; leaving it removes every connection it owns.
    """

    def __init__(self) -> None:
        self._next_id = 0
        self._connections: dict[int, tuple[Event, _Connection]] = {}

    def __len__(self) -> int:
        return len(self._connections)

    def __enter__(self) -> EventConnections:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def connect(self, event: Event, func: Handler, check: Optional[Check] = None,
                priority: Optional[float] = None) -> int:
        """Connect ``func`` to ``event`` and return the new connection id.

        Without ``priority`` the connection goes last, with a priority one above
        the current last one (0 for an empty event). With ``priority`` it goes
        after every connection whose priority is not greater.
        """
        explicit = priority is not None
        if priority is None:
            priority = event._connections[-1].priority + 1 if event._connections else 0.0
        connection = _Connection(func, check or _always, float(priority))
        event._add(connection, explicit)
        connection_id = self._next_id
        self._next_id += 1
        self._connections[connection_id] = (event, connection)
        return connection_id

    def remove_connection(self, connection_id: int) -> None:
        """Remove one connection; an unknown id raises InvalidConnectionIdError."""
        if connection_id not in self._connections:
            fail(InvalidConnectionIdError,
                 "attempting to remove connection with invalid id "
                 "(it can be already deleted or just invalid)")
        event, connection = self._connections.pop(connection_id)
        event._detach(connection)

    def close(self) -> None:
        """Remove every connection this object owns."""
        for event, connection in self._connections.values():
            event._detach(connection)
        self._connections.clear()