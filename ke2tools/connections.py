"""Slots that pair up with each other, optionally living in a holder list."""

from __future__ import annotations

from typing import Optional


class ConnectionSlot:
    """One end of a two-way link; each slot links to at most one other."""

    def __init__(self) -> None:
        self._other: Optional[ConnectionSlot] = None

    @property
    def partner(self) -> Optional[ConnectionSlot]:
        """The slot this one is linked to, or ``None``."""
        return self._other

    def connect(self, other: ConnectionSlot) -> None:
        """Link to ``other``, breaking any link either slot had before."""
        if other is self:
            raise ValueError("a slot cannot connect to itself")
        if self._other is not None:
            self.disconnect()
        if other._other is not None:
            ConnectionSlot.disconnect(other)
        self._other = other
        other._other = self

    def disconnect(self) -> None:
        """Break the link on both ends, if there is one."""
        other = self._other
        if other is not None:
            other._other = None
            self._other = None
            other.disconnect()

    def is_connected(self) -> bool:
        """Whether this slot is linked to another."""
        return self._other is not None


class BindingSlot(ConnectionSlot):
    """A slot kept in a holder list for as long as it is bound.

    The slot appends itself to ``holder``; when it is disconnected, from
    either end, it removes itself from the holder.
    """

    def __init__(self, holder: list) -> None:
        super().__init__()
        self._holder: Optional[list] = holder
        holder.append(self)

    @property
    def holder(self) -> Optional[list]:
        """The list holding this slot, or ``None`` once it has left it."""
        return self._holder

    def connect(self, other: ConnectionSlot) -> None:
        """Link to ``other``; a previous partner is released without unbinding this slot."""
        ConnectionSlot.disconnect(self)
        super().connect(other)

    def disconnect(self) -> None:
        """Break the link and remove this slot from its holder."""
        holder = self._holder
        if holder is not None:
            ConnectionSlot.disconnect(self)
            self._holder = None
            for i, item in enumerate(holder):
                if item is self:
                    del holder[i]
                    break