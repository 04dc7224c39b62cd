"""Core ports (interfaces) for PumpkinPower.

The host game server owns blocks, event dispatch and the log output. These
protocols are the only surface the rule needs from it, so any host can be
bridged with a thin adapter.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Block(Protocol):
    """A block in the host world."""

    @property
    def location(self) -> str:
        """Opaque identifier of the block position."""

    @property
    def type_id(self) -> int:
        """Current block type id."""

    @property
    def power_level(self) -> int:
        """Redstone power reaching the block, 0-15."""

    def set_type_id(self, type_id: int) -> None:
        """Replace the block type."""


BlockHandler = Callable[[Block], None]


@runtime_checkable
class EventRegistry(Protocol):
    """Host event dispatch."""

    def register(self, event_name: str, handler: BlockHandler) -> None:
        """Bind a handler to a named block event."""


@runtime_checkable
class LogSink(Protocol):
    """Where rule notifications end up."""

    def info(self, message: str) -> None:
        """Emit an informational line."""
