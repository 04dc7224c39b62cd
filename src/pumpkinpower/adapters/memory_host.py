"""In-memory host: a handful of blocks and a synchronous event bus.

Stands in for a game server when driving the plugin from tests or a REPL.
"""

from __future__ import annotations

from collections import defaultdict

from ..core.listener import BREAK_EVENT, POWER_EVENT
from ..core.ports import BlockHandler
from ..core.rule_engine import clamp_power


def location_key(world: str, x: float, y: float, z: float) -> str:
    return f"Location{{world={world},x={float(x)},y={float(y)},z={float(z)}}}"


class MemoryBlock:
    def __init__(self, world: str, x: int, y: int, z: int, type_id: int, power_level: int = 0):
        self.world = world
        self.x, self.y, self.z = x, y, z
        self._type_id = type_id
        self._power_level = clamp_power(power_level)

    @property
    def location(self) -> str:
        return location_key(self.world, self.x, self.y, self.z)

    @property
    def type_id(self) -> int:
        return self._type_id

    @property
    def power_level(self) -> int:
        return self._power_level

    def set_type_id(self, type_id: int) -> None:
        self._type_id = type_id

    def set_power(self, level: int) -> None:
        self._power_level = clamp_power(level)

    def __repr__(self) -> str:
        return f"MemoryBlock({self.location}, type_id={self._type_id}, power={self._power_level})"


class EventBus:
    """Dispatches named events to handlers in registration order."""

    def __init__(self):
        self._handlers: dict[str, list[BlockHandler]] = defaultdict(list)

    def register(self, event_name: str, handler: BlockHandler) -> None:
        self._handlers[event_name].append(handler)

    def fire(self, event_name: str, block: MemoryBlock) -> None:
        for handler in list(self._handlers.get(event_name, ())):
            handler(block)


class MemoryWorld:
    def __init__(self, name: str = "world", bus: EventBus | None = None):
        self.name = name
        self.bus = bus or EventBus()
        self._blocks: dict[tuple[int, int, int], MemoryBlock] = {}

    def place(self, x: int, y: int, z: int, type_id: int, power_level: int = 0) -> MemoryBlock:
        block = MemoryBlock(self.name, x, y, z, type_id, power_level)
        self._blocks[(x, y, z)] = block
        return block

    def get(self, x: int, y: int, z: int) -> MemoryBlock | None:
        return self._blocks.get((x, y, z))

    def power(self, block: MemoryBlock, level: int) -> None:
        block.set_power(level)
        self.bus.fire(POWER_EVENT, block)

    def break_block(self, block: MemoryBlock) -> None:
        self.bus.fire(BREAK_EVENT, block)
        self._blocks.pop((block.x, block.y, block.z), None)
