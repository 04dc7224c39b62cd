"""Bridges host block events to the rule engine.

Keeps world mutation and logging out of the rule itself: the listener reads
the block through the ``Block`` port, asks the rule what to do and applies
the answer.
"""

from __future__ import annotations

import logging

from .ports import Block, EventRegistry, LogSink
from .rule_engine import RuleState, on_power_change, on_remove

POWER_EVENT = "block_physics"
BREAK_EVENT = "block_break"

logger = logging.getLogger(__name__)


class BlockListener:
    """Handles power and break notifications for one plugin instance."""

    def __init__(self, state: RuleState, log_sink: LogSink):
        self._state = state
        self._log = log_sink

    @property
    def state(self) -> RuleState:
        return self._state

    def register(self, registry: EventRegistry) -> None:
        registry.register(POWER_EVENT, self.handle_power_change)
        registry.register(BREAK_EVENT, self.handle_block_break)

    def handle_power_change(self, block: Block) -> None:
        current = block.type_id
        change = on_power_change(self._state, current, block.location, block.power_level)

        if change.new_form is not None and change.new_form != current:
            logger.debug("Setting block at %s to type %d", block.location, change.new_form)
            block.set_type_id(change.new_form)

        if change.log_line:
            self._log.info(change.log_line)

    def handle_block_break(self, block: Block) -> None:
        line = on_remove(self._state, block.location)
        if line:
            self._log.info(line)
